"""Attribute value parsers for SVG gradient stops."""

from __future__ import annotations
import re
from typing import Optional, Tuple

# Decimal literal with optional exponent, or inf/nan words.
_FLOAT = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)$",
    re.IGNORECASE,
)

STOP_COLOR = "stop-color"
STOP_OPACITY = "stop-opacity"


def parse_float(text: str) -> Optional[float]:
    """Strict float literal; ``None`` when ``text`` is not one."""
    if not _FLOAT.match(text):
        return None
    return float(text)


def parse_percent_or_float(text: str) -> Optional[float]:
    """
    Parse ``"0.5"`` or ``"50%"`` (percentages are divided by 100).

    Returns ``None`` for anything else, including an empty string or a lone ``%``.
    """
    if text.endswith("%"):
        value = parse_float(text[:-1])
        return None if value is None else value / 100.0
    return parse_float(text)


def parse_styles(style: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Pull ``stop-color`` and ``stop-opacity`` out of an inline ``style`` list.

    Keys are matched case-insensitively; entries that are not exactly one
    ``key:value`` pair are ignored.

    Returns:
        (color, opacity) raw values, each ``None`` when absent
    """
    color: Optional[str] = None
    opacity: Optional[str] = None
    for declaration in style.split(";"):
        parts = declaration.split(":")
        if len(parts) != 2:
            continue
        key, value = parts[0].strip().lower(), parts[1].strip()
        if key == STOP_COLOR:
            color = value
        elif key == STOP_OPACITY:
            opacity = value
    return color, opacity
