"""
Chromagrad Color Conversions
============================

Scalar and vectorized (numpy) conversions from straight sRGB to the cylindrical
models used for text output, plus CSS token parsing.

RGB → HSL:
    rgb_to_hsl(r, g, b)
    np_rgb_to_hsl(r, g, b)

RGB → HSV / HWB:
    rgb_to_hsv(r, g, b)
    np_rgb_to_hsv(r, g, b)
    rgb_to_hwb(r, g, b)
    np_rgb_to_hwb(r, g, b)

CSS:
    parse_css_color(token)
        Any CSS color token (via coloraide) to (r, g, b, a)
    css_named_colors()
        (name, rgba) pairs of the CSS named colors

Examples
--------
>>> from chromagrad.conversions import rgb_to_hsl
>>> rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, normalize_hue
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, rgb_to_hwb, np_rgb_to_hwb, hsv_to_hwb
from .css import parse_css_color, css_named_colors

__all__ = [
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'normalize_hue',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'rgb_to_hwb',
    'np_rgb_to_hwb',
    'hsv_to_hwb',
    'parse_css_color',
    'css_named_colors',
]
