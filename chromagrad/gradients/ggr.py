"""
GIMP gradient (``.ggr``) reader.

File layout::

    GIMP Gradient
    Name: Sunrise                      (optional)
    2                                  (segment count)
    l m r  r0 g0 b0 a0  r1 g1 b1 a1  blend coloring [left_type right_type]
    ...

Positions and channels are unit floats. ``blend`` picks the easing between
the segment ends, ``coloring`` picks RGB or HSV (counter-clockwise /
clockwise) mixing, and the optional endpoint types swap the fixed colors for
the user's foreground or background color.
"""

from __future__ import annotations
import colorsys
import logging
import math
import warnings
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from ..colors import Color
from ..errors import GgrFormatError
from ..types.color_types import RGBA
from .gradient import FunctionGradient

logger = logging.getLogger(__name__)

EPSILON = 1e-10
HEADER = "GIMP Gradient"


class BlendFunction(IntEnum):
    LINEAR = 0
    CURVED = 1
    SINE = 2
    SPHERE_INCREASING = 3
    SPHERE_DECREASING = 4
    STEP = 5


class Coloring(IntEnum):
    RGB = 0
    HSV_CCW = 1
    HSV_CW = 2


class EndpointColor(IntEnum):
    FIXED = 0
    FOREGROUND = 1
    FOREGROUND_TRANSPARENT = 2
    BACKGROUND = 3
    BACKGROUND_TRANSPARENT = 4


# ------------------ BLEND FUNCTIONS ------------------
def _linear_factor(middle: float, pos: float) -> float:
    if pos <= middle:
        return 0.0 if middle < EPSILON else 0.5 * pos / middle
    pos -= middle
    middle = 1.0 - middle
    return 1.0 if middle < EPSILON else 0.5 + 0.5 * pos / middle


def _curved_factor(middle: float, pos: float) -> float:
    middle = max(middle, EPSILON)
    if middle >= 1.0 - EPSILON:
        return 0.0 if pos < 1.0 else 1.0
    return math.pow(pos, math.log(0.5) / math.log(middle))


def _sine_factor(middle: float, pos: float) -> float:
    f = _linear_factor(middle, pos)
    return (math.sin(-math.pi / 2.0 + math.pi * f) + 1.0) / 2.0


def _sphere_increasing_factor(middle: float, pos: float) -> float:
    f = _linear_factor(middle, pos) - 1.0
    return math.sqrt(max(0.0, 1.0 - f * f))


def _sphere_decreasing_factor(middle: float, pos: float) -> float:
    f = _linear_factor(middle, pos)
    return 1.0 - math.sqrt(max(0.0, 1.0 - f * f))


def _step_factor(middle: float, pos: float) -> float:
    return 0.0 if pos < middle else 1.0


_FACTORS = {
    BlendFunction.LINEAR: _linear_factor,
    BlendFunction.CURVED: _curved_factor,
    BlendFunction.SINE: _sine_factor,
    BlendFunction.SPHERE_INCREASING: _sphere_increasing_factor,
    BlendFunction.SPHERE_DECREASING: _sphere_decreasing_factor,
    BlendFunction.STEP: _step_factor,
}


@dataclass(frozen=True)
class Segment:
    left: float
    middle: float
    right: float
    left_color: RGBA
    right_color: RGBA
    blend: BlendFunction
    coloring: Coloring

    def color_at(self, x: float) -> RGBA:
        length = self.right - self.left
        if length < EPSILON:
            middle, pos = 0.5, 0.5
        else:
            middle = (self.middle - self.left) / length
            pos = (x - self.left) / length
        f = _FACTORS[self.blend](middle, pos)

        (r0, g0, b0, a0), (r1, g1, b1, a1) = self.left_color, self.right_color
        alpha = a0 + (a1 - a0) * f
        if self.coloring is Coloring.RGB:
            return r0 + (r1 - r0) * f, g0 + (g1 - g0) * f, b0 + (b1 - b0) * f, alpha

        h0, s0, v0 = colorsys.rgb_to_hsv(r0, g0, b0)
        h1, s1, v1 = colorsys.rgb_to_hsv(r1, g1, b1)
        if self.coloring is Coloring.HSV_CCW and h1 < h0:
            h1 += 1.0
        elif self.coloring is Coloring.HSV_CW and h1 > h0:
            h1 -= 1.0
        r, g, b = colorsys.hsv_to_rgb((h0 + (h1 - h0) * f) % 1.0, s0 + (s1 - s0) * f, v0 + (v1 - v0) * f)
        return r, g, b, alpha


def _endpoint(kind: EndpointColor, fixed: RGBA, foreground: Color, background: Color) -> RGBA:
    if kind is EndpointColor.FOREGROUND:
        return foreground.value
    if kind is EndpointColor.FOREGROUND_TRANSPARENT:
        return foreground.with_alpha(0.0).value
    if kind is EndpointColor.BACKGROUND:
        return background.value
    if kind is EndpointColor.BACKGROUND_TRANSPARENT:
        return background.with_alpha(0.0).value
    return fixed


def _parse_segment(line: str, foreground: Color, background: Color) -> Segment:
    fields = line.split()
    if len(fields) not in (13, 15):
        raise GgrFormatError(f"expected 13 or 15 fields per segment, got {len(fields)}")
    try:
        values = [float(v) for v in fields[:11]]
        codes = [int(v) for v in fields[11:]]
    except ValueError as exc:
        raise GgrFormatError(f"invalid number in segment {line!r}") from exc

    left, middle, right = values[0:3]
    if not left <= middle <= right:
        raise GgrFormatError(f"segment positions out of order: {left} {middle} {right}")
    left_color: RGBA = tuple(values[3:7])  # type: ignore[assignment]
    right_color: RGBA = tuple(values[7:11])  # type: ignore[assignment]

    try:
        blend = BlendFunction(codes[0])
    except ValueError:
        warnings.warn(f"unknown GGR blend function {codes[0]}, using linear")
        blend = BlendFunction.LINEAR
    try:
        coloring = Coloring(codes[1])
        if len(codes) == 4:
            left_color = _endpoint(EndpointColor(codes[2]), left_color, foreground, background)
            right_color = _endpoint(EndpointColor(codes[3]), right_color, foreground, background)
    except ValueError as exc:
        raise GgrFormatError(f"invalid segment type in {line!r}") from exc

    return Segment(left, middle, right, left_color, right_color, blend, coloring)


class GgrGradient(FunctionGradient):
    """Segments of a GIMP gradient, sampled over [0, 1]."""

    def __init__(self, segments: Sequence[Segment], name: str = "") -> None:
        self.segments: List[Segment] = list(segments)
        self.name = name
        super().__init__(self._color_at)

    def _color_at(self, x: float) -> Color:
        for segment in self.segments:
            if segment.left <= x <= segment.right:
                break
        else:
            segment = self.segments[0] if x < self.segments[0].left else self.segments[-1]
            x = min(max(x, segment.left), segment.right)
        return Color(*segment.color_at(x))


def parse_ggr(text: str, foreground: Color, background: Color) -> Tuple[GgrGradient, str]:
    """
    Parse the contents of a ``.ggr`` file.

    Args:
        text: file contents
        foreground: color used by segments whose endpoints follow the foreground
        background: color used by segments whose endpoints follow the background

    Returns:
        (gradient, name); name is empty when the file has no ``Name:`` line

    Raises:
        GgrFormatError: the text is not a valid GIMP gradient
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines or lines[0] != HEADER:
        raise GgrFormatError("missing 'GIMP Gradient' header")

    index = 1
    name = ""
    if index < len(lines) and lines[index].startswith("Name:"):
        name = lines[index][len("Name:"):].strip()
        index += 1
    if index >= len(lines):
        raise GgrFormatError("missing segment count")
    try:
        count = int(lines[index])
    except ValueError as exc:
        raise GgrFormatError(f"invalid segment count {lines[index]!r}") from exc
    index += 1

    if count < 1:
        raise GgrFormatError("a gradient needs at least one segment")
    body = lines[index:index + count]
    if len(body) < count:
        raise GgrFormatError(f"expected {count} segments, found {len(body)}")

    segments = [_parse_segment(line, foreground, background) for line in body]
    logger.debug("parsed GGR %r with %d segments", name, len(segments))
    return GgrGradient(segments, name), name
