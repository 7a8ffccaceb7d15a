"""
Chromagrad Rendering
====================

Compositing of gradient samples over a background and their ANSI truecolor
rendering.

Compositor:
    Solid(color), Checkerboard(first, second)
    blend_over(fg, bg), np_blend_over(fg, bg)
    checkerboard_tile(x, y)
    sample_line(gradient, count), sample_at(gradient, positions)

Text:
    format_color(color, fmt)
    TerminalRenderer(config).render(mode, ...)
"""

from .compositor import (
    Background,
    Checkerboard,
    Compositor,
    DEFAULT_CHECKERBOARD,
    Solid,
    blend_over,
    checkerboard_tile,
    np_blend_over,
    sample_at,
    sample_line,
)
from .formatting import format_alpha, format_color
from .terminal import HALF_BLOCK, RESET, OutputMode, TerminalRenderer, legible_foreground, relative_luminance

__all__ = [
    'Background',
    'Checkerboard',
    'Compositor',
    'DEFAULT_CHECKERBOARD',
    'Solid',
    'blend_over',
    'checkerboard_tile',
    'np_blend_over',
    'sample_at',
    'sample_line',
    'format_alpha',
    'format_color',
    'HALF_BLOCK',
    'RESET',
    'OutputMode',
    'TerminalRenderer',
    'legible_foreground',
    'relative_luminance',
]
