from __future__ import annotations
from typing import Tuple, Union
from numpy import ndarray
import numpy as np

from ..conversions import rgb_to_hsl, rgb_to_hsv, rgb_to_hwb, parse_css_color
from ..types.color_types import RGBA, RGBA8, ColorValue, element_to_array
from ..types.format_type import max_channel
from ..utils import clamp


class Color:
    """
    Straight (non-premultiplied) sRGB color with an alpha channel.

    Channels are floats conceptually in [0, 1]. Arithmetic may leave them out of
    range; every byte-level accessor clamps first.
    """
    __slots__ = ('_value',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if hasattr(self, '_value'):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._value: RGBA = (float(r), float(g), float(b), float(a))

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_css(cls, token: str) -> Color:
        """Parse any CSS color token; raises ColorParseError."""
        return cls(*parse_css_color(token))

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        byte = max_channel["byte"]
        return cls(r / byte, g / byte, b / byte, a / byte)

    @classmethod
    def from_value(cls, value: ColorValue) -> Color:
        """Build from a 3- or 4-element sequence or array of unit floats."""
        arr = element_to_array(value)
        if arr.shape not in ((3,), (4,)):
            raise ValueError(f"Color expects 3 or 4 channels, got shape {arr.shape}")
        return cls(*arr.tolist())

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBA:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    alpha = a

    # ------------------ DERIVED COLORS ------------------
    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    def clamped(self) -> Color:
        return Color(*(clamp(v) for v in self._value))

    # ------------------ CONVERSIONS ------------------
    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=float)

    def to_rgba8(self) -> RGBA8:
        """Channels as bytes, rounding half up after clamping."""
        byte = max_channel["byte"]
        r, g, b, a = (int(clamp(v) * byte + 0.5) for v in self._value)
        return r, g, b, a

    def to_hex(self) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when the color is not fully opaque."""
        r, g, b, a = self.to_rgba8()
        if a < 255:
            return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
        return f"#{r:02x}{g:02x}{b:02x}"

    def _unit_rgb(self) -> Tuple[float, float, float]:
        return clamp(self.r), clamp(self.g), clamp(self.b)

    def to_hsla(self) -> Tuple[float, float, float, float]:
        return (*rgb_to_hsl(*self._unit_rgb()), self.a)

    def to_hsva(self) -> Tuple[float, float, float, float]:
        return (*rgb_to_hsv(*self._unit_rgb()), self.a)

    def to_hwba(self) -> Tuple[float, float, float, float]:
        return (*rgb_to_hwb(*self._unit_rgb()), self.a)

    # ------------------ DUNDER ------------------
    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"Color({r:.4g}, {g:.4g}, {b:.4g}, {a:.4g})"


ColorLike = Union[Color, str]


def as_color(color: ColorLike) -> Color:
    """Accept a Color or a CSS token."""
    if isinstance(color, Color):
        return color
    return Color.from_css(color)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
