"""
Chromagrad Gradients
====================

Gradient handles, preset gradients and the GIMP gradient reader.

Usage
-----
>>> from chromagrad.gradients import StopGradient, get_preset
>>> from chromagrad.types import BlendMode, Interpolation
>>>
>>> g = StopGradient.from_stops(["red", "blue"], blend_mode=BlendMode.RGB)
>>> g.sample(0.5).to_rgba8()
(128, 0, 128, 255)
>>> get_preset("rainbow").sample(0.0).to_hex()
'#6e40aa'

Notes
-----
- ``StopGradient`` mixes colors with coloraide (not premultiplied)
- Sampling outside the domain returns the nearest end color
- ``colors(n)`` includes both ends of the domain
"""

from .gradient import Gradient, StopGradient, FunctionGradient
from .presets import PRESETS, get_preset, preset_names, cubehelix
from .ggr import GgrGradient, parse_ggr
from .css_gradient import parse_css_gradient, fill_positions

__all__ = [
    'Gradient',
    'StopGradient',
    'FunctionGradient',
    'PRESETS',
    'get_preset',
    'preset_names',
    'cubehelix',
    'GgrGradient',
    'parse_ggr',
    'parse_css_gradient',
    'fill_positions',
]
