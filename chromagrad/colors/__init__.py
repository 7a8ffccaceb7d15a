"""
Chromagrad Color Value
======================

An immutable straight-alpha sRGB color used everywhere between the markup
extractor and the terminal renderer.

Usage
-----
>>> from chromagrad.colors import Color
>>>
>>> gold = Color.from_css("gold")
>>> gold.to_hex()
'#ffd700'
>>> gold.with_alpha(0.5).to_hex()
'#ffd70080'
>>> Color(1.0, 0.0, 0.0).to_hsla()
(0.0, 1.0, 0.5, 1.0)

Notes
-----
- Instances are frozen after initialization and hashable
- Channels may transiently leave [0, 1]; ``to_rgba8``/``to_hex`` clamp
- ``to_hsla``/``to_hsva``/``to_hwba`` return hue in degrees, the rest in [0, 1]
"""

from .color import Color, ColorLike, as_color, BLACK, WHITE

__all__ = ['Color', 'ColorLike', 'as_color', 'BLACK', 'WHITE']
