from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import IO, Optional, Tuple

from .render.compositor import Background, DEFAULT_CHECKERBOARD, Solid
from .types import OutputFormat
from .utils import clamp, value_or_default

logger = logging.getLogger(__name__)

DEFAULT_TERM_WIDTH = 80
MIN_WIDTH = 10
MAX_WIDTH = 1000
DEFAULT_HEIGHT = 2
MAX_HEIGHT = 50


def terminal_width(stream: IO) -> Optional[int]:
    """Column count of the terminal behind ``stream``, ``None`` if there is none."""
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return None


def is_terminal(stream: IO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass
class RenderConfig:
    """
    Settings of one rendering run.

    Attributes:
        is_terminal: stdout is a terminal; blocks and colored swatches need one
        term_width: detected terminal columns, ``None`` when undetectable
        output_format: text format for swatches and arrays
        background: solid color or checkerboard behind translucent colors
        array: print sampled colors as one bracketed list
    """
    is_terminal: bool = False
    term_width: Optional[int] = None
    output_format: OutputFormat = OutputFormat.HEX
    background: Background = field(default=DEFAULT_CHECKERBOARD)
    array: bool = False

    @classmethod
    def detect(cls, stream: IO, **kwargs) -> RenderConfig:
        """Check ``stream`` for terminal attachment and width."""
        config = cls(is_terminal=is_terminal(stream), term_width=terminal_width(stream), **kwargs)
        logger.debug("terminal=%s width=%s", config.is_terminal, config.term_width)
        return config

    @property
    def line_width(self) -> int:
        return value_or_default(self.term_width, DEFAULT_TERM_WIDTH)

    @property
    def composite(self) -> bool:
        """Swatch text describes the color blended over a solid background."""
        return isinstance(self.background, Solid) and not self.array

    def resolve_size(self, width: Optional[int] = None, height: Optional[int] = None) -> Tuple[int, int]:
        """
        Apply defaults and limits to a requested block size.

        Width defaults to the terminal width and is clamped to
        ``[10, terminal width]`` (``[10, 1000]`` without a terminal); height
        defaults to 2 and is clamped to ``[1, 50]``.
        """
        upper = value_or_default(self.term_width, MAX_WIDTH)
        w = value_or_default(width, self.line_width)
        h = value_or_default(height, DEFAULT_HEIGHT)
        return int(clamp(w, MIN_WIDTH, max(MIN_WIDTH, upper))), int(clamp(h, 1, MAX_HEIGHT))
