"""Text representations of colors for swatch and array output."""

from __future__ import annotations

from ..colors import Color
from ..types import OutputFormat
from ..types.format_type import max_channel
from ..utils import clamp

_PERCENT = max_channel["percentage"]


def format_alpha(alpha: float) -> str:
    """``,NN.NN%`` suffix, or nothing when it would read as 100%."""
    text = f",{alpha * _PERCENT:.2f}%"
    if text.startswith(",100"):
        return ""
    return text


def _cylindrical(name: str, h: float, x: float, y: float, alpha: float) -> str:
    return f"{name}({h:.2f},{x * _PERCENT:.2f}%,{y * _PERCENT:.2f}%{format_alpha(alpha)})"


def format_color(color: Color, fmt: OutputFormat = OutputFormat.HEX) -> str:
    """
    Format ``color`` in one of the output formats.

    Examples:
        hex     ``#ff0055`` (``#ff005580`` when translucent)
        rgb     ``rgb(100.00%,0.00%,33.33%)``
        rgb255  ``rgb(255,0,85)``
        hsl     ``hsl(340.00,100.00%,50.00%)``
    """
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.HEX:
        return color.to_hex()
    if fmt is OutputFormat.RGB:
        r, g, b = (clamp(v) * _PERCENT for v in (color.r, color.g, color.b))
        return f"rgb({r:.2f}%,{g:.2f}%,{b:.2f}%{format_alpha(color.a)})"
    if fmt is OutputFormat.RGB255:
        r, g, b, _ = color.to_rgba8()
        return f"rgb({r},{g},{b}{format_alpha(color.a)})"
    if fmt is OutputFormat.HSL:
        return _cylindrical("hsl", *color.to_hsla())
    if fmt is OutputFormat.HSV:
        return _cylindrical("hsv", *color.to_hsva())
    return _cylindrical("hwb", *color.to_hwba())
