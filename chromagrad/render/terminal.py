"""
ANSI truecolor output.

Three layouts share one renderer: half-block gradient strips, wrapped color
swatches, and a bracketed array of color strings. Every method returns the
text to write so the caller can emit it with a single write.
"""

from __future__ import annotations
import json
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray

from ..colors import Color, BLACK, WHITE
from ..gradients import Gradient
from .compositor import Compositor
from .formatting import format_color

if TYPE_CHECKING:
    from ..config import RenderConfig

RESET = "\x1b[39;49m"
HALF_BLOCK = "▌"

# WCAG 2.0 relative luminance
_LINEAR_THRESHOLD = 0.03928
_LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)
DARK_LUMINANCE = 0.3


class OutputMode(str, Enum):
    BLOCK = "block"
    SWATCH = "swatch"
    ARRAY = "array"


def truecolor(fg: Tuple[int, int, int], bg: Tuple[int, int, int]) -> str:
    """SGR sequence selecting 24-bit foreground and background colors."""
    return f"\x1b[38;2;{fg[0]};{fg[1]};{fg[2]};48;2;{bg[0]};{bg[1]};{bg[2]}m"


def _linear(c: float) -> float:
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    wr, wg, wb = _LUMA_WEIGHTS
    return wr * _linear(color.r) + wg * _linear(color.g) + wb * _linear(color.b)


def legible_foreground(background: Color) -> Color:
    """White text on dark colors, black text on light ones."""
    return WHITE if relative_luminance(background) < DARK_LUMINANCE else BLACK


def _rgb8(color: Color) -> Tuple[int, int, int]:
    r, g, b, _ = color.to_rgba8()
    return r, g, b


def np_to_rgb8(values: ndarray) -> ndarray:
    """(..., 4) unit floats to (..., 3) bytes, rounding half up after clamping."""
    return np.floor(np.clip(values[..., :3], 0.0, 1.0) * 255 + 0.5).astype(int)


class TerminalRenderer:
    """
    Renders gradients and color lists according to a ``RenderConfig``.

    Args:
        config: terminal attachment, width, format and background policy
    """

    def __init__(self, config: RenderConfig) -> None:
        self.config = config
        self.compositor = Compositor(config.background)

    def render(
        self,
        mode: OutputMode,
        gradient: Optional[Gradient] = None,
        colors: Optional[Sequence[Color]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> str:
        """
        Render in ``mode``.

        ``BLOCK`` draws ``gradient`` (size resolved through the config);
        ``SWATCH`` and ``ARRAY`` print ``colors``.
        """
        mode = OutputMode(mode)
        if mode is OutputMode.BLOCK:
            if gradient is None:
                raise ValueError("block output needs a gradient")
            w, h = self.config.resolve_size(width, height)
            return self.render_block(gradient, w, h)
        if colors is None:
            raise ValueError(f"{mode.value} output needs colors")
        if mode is OutputMode.ARRAY:
            return self.render_array(colors)
        return self.render_swatches(colors)

    def render_block(self, gradient: Gradient, width: int, height: int) -> str:
        """``height`` rows of ``width`` half-block cells; empty off a terminal."""
        if not self.config.is_terminal:
            return ""
        grid = np_to_rgb8(self.compositor.composite_grid(gradient, width, height))
        lines: List[str] = []
        for row in grid:
            cells = [
                truecolor(tuple(left), tuple(right)) + HALF_BLOCK
                for left, right in zip(row[0::2].tolist(), row[1::2].tolist())
            ]
            lines.append("".join(cells) + RESET + "\n")
        return "".join(lines)

    def _shown(self, colors: Sequence[Color]) -> List[Color]:
        if self.config.composite:
            return self.compositor.composite_colors(colors)
        return list(colors)

    def render_swatches(self, colors: Sequence[Color]) -> str:
        """
        Colored swatches wrapped to the terminal width.

        Off a terminal each formatted color is printed on its own line.
        """
        fmt = self.config.output_format
        texts = [format_color(c, fmt) for c in self._shown(colors)]
        if not self.config.is_terminal:
            return "".join(text + "\n" for text in texts)

        line_width = self.config.line_width
        remaining = line_width
        parts: List[str] = []
        for text, bg in zip(texts, self.compositor.composite_colors(colors)):
            if remaining < len(text) and remaining < line_width:
                parts.append("\n")
                remaining = line_width
            parts.append(truecolor(_rgb8(legible_foreground(bg)), _rgb8(bg)) + text + RESET)
            remaining = max(0, remaining - len(text))
            if remaining >= 1:
                parts.append(" ")
                remaining -= 1
        parts.append("\n")
        return "".join(parts)

    def render_array(self, colors: Sequence[Color]) -> str:
        """``["#ff0055", "#00ff5a"]`` on one line."""
        fmt = self.config.output_format
        return json.dumps([format_color(c, fmt) for c in self._shown(colors)]) + "\n"

    def render_named(self, named: Sequence[Tuple[str, Color]]) -> str:
        """
        One ``name  color`` line per entry, names padded to a common width.

        On a terminal each line starts with a small swatch of the color.
        """
        fmt = self.config.output_format
        width = max((len(name) for name, _ in named), default=0)
        lines: List[str] = []
        for name, color in named:
            text = f"{name:<{width}}  {format_color(color, fmt)}"
            if self.config.is_terminal:
                (bg,) = self.compositor.composite_colors([color])
                text = truecolor(_rgb8(bg), _rgb8(bg)) + "    " + RESET + " " + text
            lines.append(text + "\n")
        return "".join(lines)
