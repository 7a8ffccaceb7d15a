"""CSS color token parsing, delegated to coloraide."""

import math
import re
from typing import List, Tuple

from coloraide import Color as _Base
from coloraide.css.color_names import name2val_map
from coloraide.interpolate.catmull_rom import CatmullRom

from ..errors import ColorParseError
from ..types.color_types import RGBA


class ColorAide(_Base):
    """coloraide color class with the Catmull-Rom interpolator registered."""


ColorAide.register(CatmullRom())

_BARE_HEX = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _finite(value: float) -> float:
    # coloraide reports powerless / missing channels as NaN
    return 0.0 if math.isnan(value) else float(value)


def parse_css_color(token: str) -> RGBA:
    """
    Parse a CSS color token into straight sRGB channels.

    Accepts every syntax coloraide understands (named colors, hex, ``rgb()``,
    ``hsl()``, ``hwb()``, ``lab()``, ...) plus bare hex digits without ``#``.

    Returns:
        (r, g, b, a) floats; r/g/b may fall outside [0, 1] for wide-gamut input.

    Raises:
        ColorParseError: the token is not a color.
    """
    text = token.strip()
    if _BARE_HEX.match(text):
        text = "#" + text
    try:
        parsed = ColorAide(text)
    except (ValueError, TypeError) as exc:
        raise ColorParseError(token) from exc

    srgb = parsed.convert("srgb")
    r, g, b = (_finite(v) for v in srgb.coords())
    return r, g, b, _finite(srgb.alpha())


def to_coloraide(rgba: Tuple[float, float, float, float]) -> ColorAide:
    """Wrap straight sRGB channels into a coloraide color for interpolation."""
    r, g, b, a = rgba
    return ColorAide("srgb", [r, g, b], a)


def from_coloraide(color: ColorAide) -> RGBA:
    srgb = color.convert("srgb")
    r, g, b = (_finite(v) for v in srgb.coords())
    return r, g, b, _finite(srgb.alpha())


def css_named_colors() -> List[Tuple[str, RGBA]]:
    """CSS named colors, ``transparent`` included, sorted by name."""
    return [
        (name, (r / 255.0, g / 255.0, b / 255.0, a / 255.0))
        for name, (r, g, b, a) in sorted(name2val_map.items())
    ]
