"""
Tag event stream over SVG markup.

The extractor only needs to know when elements open, close, or appear
self-closed, together with their attributes. ``iter_tag_events`` turns a
document (or a bare fragment of one) into that stream with the expat parser
that backs ``xml.etree.ElementTree``.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple
from xml.parsers import expat

from ..errors import MarkupError

logger = logging.getLogger(__name__)

# Fragments are parsed inside this synthetic root so that several top-level
# elements are accepted.
_FRAGMENT_ROOT = "chromagrad-fragment"

_PROLOG = re.compile(
    r"\A\s*((?:<\?xml\b[^>]*\?>)?(?:\s*<!--.*?-->)*\s*(?:<!DOCTYPE\b[^\[>]*(?:\[.*?\])?\s*>)?)",
    re.DOTALL | re.IGNORECASE,
)


class TagKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    EMPTY = "empty"


@dataclass(frozen=True)
class TagEvent:
    kind: TagKind
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` or ``prefix:`` qualifier from a tag name."""
    if tag.startswith("{"):
        tag = tag.rsplit("}", 1)[1]
    return tag.rsplit(":", 1)[-1]


class _EventCollector:
    """expat handlers recording events plus the byte span of each start tag."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.events: List[TagEvent] = []
        # (start byte index, content seen) per open element
        self._open: List[Tuple[int, bool]] = []
        self.parser = expat.ParserCreate(encoding="UTF-8")
        self.parser.StartElementHandler = self.start
        self.parser.EndElementHandler = self.end
        self.parser.CharacterDataHandler = self.content
        self.parser.CommentHandler = self.content
        self.parser.ProcessingInstructionHandler = self.content

    def content(self, *args) -> None:
        if self._open:
            self._open[-1] = (self._open[-1][0], True)

    def start(self, name: str, attributes: Dict[str, str]) -> None:
        self.content()
        self._open.append((self.parser.CurrentByteIndex, False))
        if name != _FRAGMENT_ROOT:
            self.events.append(TagEvent(TagKind.OPEN, local_name(name), dict(attributes)))

    def end(self, name: str) -> None:
        start, has_content = self._open.pop()
        if name == _FRAGMENT_ROOT:
            return
        # expat reports the end of ``<x/>`` right after its own token
        token = self.data[start:self.parser.CurrentByteIndex]
        if not has_content and token.endswith(b"/>"):
            last = self.events[-1]
            self.events[-1] = TagEvent(TagKind.EMPTY, last.name, last.attributes)
        else:
            self.events.append(TagEvent(TagKind.CLOSE, local_name(name)))

    def parse(self) -> List[TagEvent]:
        try:
            self.parser.Parse(self.data, True)
        except expat.ExpatError as exc:
            raise MarkupError(f"malformed markup: {expat.ErrorString(exc.code)} (line {exc.lineno})") from exc
        return self.events


def parse_events(text: str) -> List[TagEvent]:
    """
    Parse ``text`` into a list of tag events.

    An XML declaration and DOCTYPE at the start are kept in front, so entities
    declared in the DOCTYPE still resolve, and the rest is parsed as the
    content of a synthetic root element. Bare fragments with several top-level
    elements are therefore accepted. A leading byte order mark is ignored.

    Raises:
        MarkupError: the markup is unbalanced or otherwise not well formed.
    """
    text = text.lstrip("\ufeff")
    match = _PROLOG.match(text)
    prolog, body = match.group(1), text[match.end():]
    data = f"{prolog}<{_FRAGMENT_ROOT}>{body}</{_FRAGMENT_ROOT}>".encode("utf-8")
    events = _EventCollector(data).parse()
    logger.debug("parsed %d markup events", len(events))
    return events


def iter_tag_events(text: str) -> Iterator[TagEvent]:
    """
    Yield open / close / self-closing events for every element in ``text``.

    The whole document is checked before the first event is yielded, so a
    structural error never leaves a consumer with a partial stream.
    """
    yield from parse_events(text)
