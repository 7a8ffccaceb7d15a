from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterable, List, Optional, Tuple, Union

from ..colors import Color, BLACK
from ..errors import ColorParseError
from ..utils import clamp
from .attributes import STOP_COLOR, STOP_OPACITY, parse_percent_or_float, parse_styles
from .events import TagEvent, TagKind, iter_tag_events

logger = logging.getLogger(__name__)

GRADIENT_TAGS = frozenset({"linearGradient", "radialGradient"})
STOP_TAG = "stop"


class _InvalidStop(Exception):
    """A stop attribute is present but cannot be parsed."""


@dataclass(frozen=True)
class ColorStop:
    position: float
    color: Color


@dataclass
class GradientRecord:
    """Stops collected from one gradient element, in document order."""
    id: Optional[str]
    stops: List[ColorStop] = field(default_factory=list)

    valid: ClassVar[bool] = True

    @property
    def colors(self) -> List[Color]:
        return [stop.color for stop in self.stops]

    @property
    def positions(self) -> List[float]:
        return [stop.position for stop in self.stops]

    def poisoned(self) -> PoisonedRecord:
        """Same id and stops, marked as never buildable."""
        return PoisonedRecord(self.id, list(self.stops))


@dataclass
class PoisonedRecord(GradientRecord):
    """A record that hit an unparsable stop. It keeps collecting for diagnostics."""
    valid: ClassVar[bool] = False

    def poisoned(self) -> PoisonedRecord:
        return self


# ------------------ EXTRACTOR STATE ------------------
class _Outside:
    pass


class _Skipped:
    pass


@dataclass(frozen=True)
class _Inside:
    index: int


_State = Union[_Outside, _Inside, _Skipped]
_OUTSIDE = _Outside()
_SKIPPED = _Skipped()


def _parse_color(token: str) -> Color:
    try:
        return Color.from_css(token)
    except ColorParseError as exc:
        raise _InvalidStop(str(exc)) from exc


def _parse_number(name: str, text: str) -> float:
    value = parse_percent_or_float(text.strip())
    if value is None:
        raise _InvalidStop(f"invalid {name} {text!r}")
    return value


def _stop_fields(attributes: Dict[str, str]) -> Tuple[Color, Optional[float], Optional[float]]:
    """
    Parse color, opacity and offset of a stop element.

    Explicit attributes win over declarations in ``style``; every present value
    is still parsed, so a broken token anywhere invalidates the stop.

    Raises:
        _InvalidStop: a present attribute could not be parsed.
    """
    style_color, style_opacity = parse_styles(attributes.get("style", ""))

    color = BLACK
    for token in (style_color, attributes.get(STOP_COLOR)):
        if token is not None:
            color = _parse_color(token)

    opacity: Optional[float] = None
    for text in (style_opacity, attributes.get(STOP_OPACITY)):
        if text is not None:
            opacity = _parse_number(STOP_OPACITY, text)

    offset = attributes.get("offset")
    return color, opacity, None if offset is None else _parse_number("offset", offset)


class StopExtractor:
    """
    Streaming state machine turning tag events into gradient records.

    Args:
        target_id: when given, only gradient elements whose ``id`` equals it
            exactly are collected. A gradient without ``id`` never matches.
    """

    def __init__(self, target_id: Optional[str] = None) -> None:
        self.target_id = target_id
        self.records: List[GradientRecord] = []
        self._state: _State = _OUTSIDE
        self._running_max = -math.inf

    def feed(self, event: TagEvent) -> None:
        if event.name in GRADIENT_TAGS:
            if event.kind is TagKind.OPEN:
                self._open_gradient(event.attributes.get("id"))
            elif event.kind is TagKind.CLOSE:
                self._state = _OUTSIDE
                self._running_max = -math.inf
        elif event.name == STOP_TAG and event.kind is not TagKind.CLOSE:
            if isinstance(self._state, _Inside):
                self._add_stop(self._state.index, event.attributes)

    def feed_all(self, events: Iterable[TagEvent]) -> List[GradientRecord]:
        for event in events:
            self.feed(event)
        return self.records

    def _open_gradient(self, gradient_id: Optional[str]) -> None:
        self._running_max = -math.inf
        if self.target_id is not None and gradient_id != self.target_id:
            logger.debug("skipping gradient %r", gradient_id)
            self._state = _SKIPPED
            return
        self.records.append(GradientRecord(gradient_id))
        self._state = _Inside(len(self.records) - 1)

    def _add_stop(self, index: int, attributes: Dict[str, str]) -> None:
        record = self.records[index]
        try:
            color, opacity, offset = _stop_fields(attributes)
        except _InvalidStop as exc:
            logger.debug("gradient %r: %s", record.id, exc)
            self.records[index] = record.poisoned()
            return

        if opacity is not None:
            color = color.with_alpha(clamp(opacity))
        if offset is None:
            # zero-width step at the last seen position
            offset = self._running_max if self._running_max > -math.inf else 0.0
        if not math.isfinite(offset):
            offset = 0.0
        position = max(offset, self._running_max)
        self._running_max = position
        record.stops.append(ColorStop(position, color))


def extract_gradients(text: str, target_id: Optional[str] = None) -> List[GradientRecord]:
    """
    Extract every gradient record from SVG markup.

    Args:
        text: a full SVG document or a fragment
        target_id: keep only gradients with this exact ``id``

    Returns:
        records in document order, possibly empty

    Raises:
        MarkupError: the markup is not well formed
    """
    return StopExtractor(target_id).feed_all(iter_tag_events(text))
