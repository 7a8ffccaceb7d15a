"""CSS-like gradient strings: ``"gold, red 60%, blue"`` style stop lists."""

from __future__ import annotations
from typing import List, Optional, Tuple

from ..colors import Color
from ..errors import GradientBuildError
from ..markup.attributes import parse_percent_or_float


def split_top_level(text: str, sep: str = ",") -> List[str]:
    """Split on ``sep`` outside parentheses."""
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _parse_stop(item: str) -> Tuple[Color, List[float]]:
    # trailing bare numbers / percentages are positions, the rest is the color
    tokens = item.split()
    positions: List[float] = []
    while len(tokens) > 1 and len(positions) < 2:
        value = parse_percent_or_float(tokens[-1])
        if value is None:
            break
        positions.insert(0, value)
        tokens.pop()
    return Color.from_css(" ".join(tokens)), positions


def fill_positions(positions: List[Optional[float]]) -> List[float]:
    """
    Resolve missing positions the way CSS does.

    The first defaults to 0 and the last to 1; runs of missing positions are
    spread evenly between their known neighbours, and no position is allowed
    to fall below an earlier one.
    """
    if not positions:
        return []
    filled = list(positions)
    if filled[0] is None:
        filled[0] = 0.0
    if filled[-1] is None:
        filled[-1] = 1.0 if len(filled) > 1 else 0.0

    running = filled[0]
    for i, value in enumerate(filled):
        if value is not None:
            running = max(value, running)
            filled[i] = running

    i = 1
    while i < len(filled):
        if filled[i] is not None:
            i += 1
            continue
        start = i - 1
        end = i
        while filled[end] is None:
            end += 1
        lo, hi = filled[start], filled[end]
        steps = end - start
        for k in range(start + 1, end):
            filled[k] = lo + (hi - lo) * (k - start) / steps
        i = end
    return [float(v) for v in filled]


def parse_css_gradient(text: str) -> Tuple[List[Color], List[float]]:
    """
    Parse a comma separated stop list.

    Each item is a CSS color optionally followed by one or two positions
    (``red``, ``red 20%``, ``red 0.2 0.4``).

    Raises:
        ColorParseError: an item's color is not a color
        GradientBuildError: the list is empty
    """
    colors: List[Color] = []
    positions: List[Optional[float]] = []
    for item in split_top_level(text):
        item = item.strip()
        if not item:
            continue
        color, stops = _parse_stop(item)
        for position in stops or [None]:
            colors.append(color)
            positions.append(position)
    if not colors:
        raise GradientBuildError("empty CSS gradient")
    return colors, fill_positions(positions)
