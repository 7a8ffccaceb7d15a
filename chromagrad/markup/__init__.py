"""
Chromagrad Markup Extraction
============================

Pulls ``linearGradient`` / ``radialGradient`` stop lists out of SVG markup.

Usage
-----
>>> from chromagrad.markup import extract_gradients
>>>
>>> records = extract_gradients('''
...     <linearGradient id="banana">
...         <stop offset="0" stop-color="#C41189" />
...         <stop offset="50%" stop-color="#00BFFF" />
...     </linearGradient>
... ''')
>>> records[0].id, records[0].positions
('banana', [0.0, 0.5])

Notes
-----
- Positions within a record never decrease
- A stop with a broken attribute turns its record into a ``PoisonedRecord``
- Only unbalanced or malformed markup raises (``MarkupError``)
"""

from .attributes import parse_percent_or_float, parse_styles
from .events import TagEvent, TagKind, iter_tag_events
from .extractor import ColorStop, GradientRecord, PoisonedRecord, StopExtractor, extract_gradients

__all__ = [
    'parse_percent_or_float',
    'parse_styles',
    'TagEvent',
    'TagKind',
    'iter_tag_events',
    'ColorStop',
    'GradientRecord',
    'PoisonedRecord',
    'StopExtractor',
    'extract_gradients',
]
