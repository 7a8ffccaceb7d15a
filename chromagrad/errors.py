"""Exception hierarchy shared by the extractor, the gradient builders and the CLI."""

from __future__ import annotations
from typing import Optional


class ChromagradError(Exception):
    """Base class for every error raised by chromagrad."""


class ColorParseError(ChromagradError, ValueError):
    """A color token could not be parsed."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid color {token!r}")
        self.token = token


class MarkupError(ChromagradError):
    """The markup document is structurally unparsable (unbalanced tags, bad syntax)."""


class GradientBuildError(ChromagradError, ValueError):
    """Colors and positions do not describe a usable gradient."""


class GradientFileError(ChromagradError):
    """A gradient file is missing, unreadable, or in an unsupported format."""

    def __init__(self, path: object, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class PresetNotFoundError(ChromagradError, KeyError):
    """No preset gradient is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"invalid preset gradient name {self.name!r}"


class NoMatchError(ChromagradError):
    """A selection filter matched nothing."""

    def __init__(self, target_id: str, source: Optional[object] = None) -> None:
        where = f" in {source}" if source is not None else ""
        super().__init__(f"no gradient with id {target_id!r}{where}")
        self.target_id = target_id
        self.source = source


class GgrFormatError(ChromagradError, ValueError):
    """Text is not a readable GIMP gradient."""
