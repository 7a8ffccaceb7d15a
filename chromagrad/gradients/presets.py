"""
Preset gradients.

Computed presets follow the d3-scale-chromatic formulas (cubehelix family,
sinebow, turbo and cividis polynomials). ColorBrewer schemes are basis
splines through their largest published palette, and the matplotlib
perceptual maps are Catmull-Rom curves through eleven evenly spaced anchors.
"""

from __future__ import annotations
import math
from typing import Callable, Dict, List, Sequence

from ..colors import Color
from ..errors import PresetNotFoundError
from ..types import Interpolation
from .gradient import FunctionGradient, Gradient, StopGradient

GradientFactory = Callable[[], Gradient]

# cubehelix basis (Green, 2011)
_A = -0.14861
_B = 1.78277
_C = -0.29227
_D = -0.90649
_E = 1.97294


def cubehelix(h: float, s: float, l: float) -> Color:
    """
    Cubehelix color to sRGB.

    Args:
        h: hue in degrees
        s: saturation (may exceed 1)
        l: lightness in [0, 1]
    """
    angle = math.radians(h + 120.0)
    amp = s * l * (1.0 - l)
    cos_h, sin_h = math.cos(angle), math.sin(angle)
    return Color(
        l + amp * (_A * cos_h + _B * sin_h),
        l + amp * (_C * cos_h + _D * sin_h),
        l + amp * (_E * cos_h),
    ).clamped()


def cubehelix_gradient(start: Sequence[float], end: Sequence[float]) -> FunctionGradient:
    """Linear path between two (h, s, l) cubehelix colors, hue not wrapped."""
    (h0, s0, l0), (h1, s1, l1) = start, end

    def color(t: float) -> Color:
        return cubehelix(h0 + (h1 - h0) * t, s0 + (s1 - s0) * t, l0 + (l1 - l0) * t)

    return FunctionGradient(color)


def _rainbow(t: float) -> Color:
    ts = abs(t - 0.5)
    return cubehelix(360.0 * t - 100.0, 1.5 - 1.5 * ts, 0.8 - 0.9 * ts)


def _sinebow(t: float) -> Color:
    t = (0.5 - t) * math.pi
    return Color(
        math.sin(t) ** 2,
        math.sin(t + math.pi / 3.0) ** 2,
        math.sin(t + math.pi * 2.0 / 3.0) ** 2,
    )


def _byte_poly(value: float) -> float:
    return max(0.0, min(255.0, round(value))) / 255.0


def _turbo(t: float) -> Color:
    return Color(
        _byte_poly(34.61 + t * (1172.33 - t * (10793.56 - t * (33300.12 - t * (38394.49 - t * 14825.05))))),
        _byte_poly(23.31 + t * (557.33 + t * (1225.33 - t * (3574.96 - t * (1073.77 + t * 707.56))))),
        _byte_poly(27.2 + t * (3211.1 - t * (15327.97 - t * (27814.0 - t * (22569.18 - t * 6838.66))))),
    )


def _cividis(t: float) -> Color:
    return Color(
        _byte_poly(-4.54 - t * (35.34 - t * (2381.73 - t * (6402.7 - t * (7024.72 - t * 2710.57))))),
        _byte_poly(32.49 + t * (170.73 + t * (52.82 - t * (131.46 - t * (176.58 - t * 67.37))))),
        _byte_poly(81.24 + t * (442.36 - t * (2482.43 - t * (6167.24 - t * (6614.94 - t * 2475.67))))),
    )


def _hex_list(packed: str) -> List[str]:
    return ["#" + code for code in packed.split()]


def _brewer(packed: str) -> GradientFactory:
    colors = _hex_list(packed)
    return lambda: StopGradient.from_stops(colors, interpolation=Interpolation.BASIS)


def _perceptual(packed: str) -> GradientFactory:
    colors = _hex_list(packed)
    return lambda: StopGradient.from_stops(colors, interpolation=Interpolation.CATMULL_ROM)


# ------------------ PALETTES ------------------
_BLUES = "f7fbff deebf7 c6dbef 9ecae1 6baed6 4292c6 2171b5 08519c 08306b"
_GREENS = "f7fcf5 e5f5e0 c7e9c0 a1d99b 74c476 41ab5d 238b45 006d2c 00441b"
_GREYS = "ffffff f0f0f0 d9d9d9 bdbdbd 969696 737373 525252 252525 000000"
_ORANGES = "fff5eb fee6ce fdd0a2 fdae6b fd8d3c f16913 d94801 a63603 7f2704"
_PURPLES = "fcfbfd efedf5 dadaeb bcbddc 9e9ac8 807dba 6a51a3 54278f 3f007d"
_REDS = "fff5f0 fee0d2 fcbba1 fc9272 fb6a4a ef3b2c cb181d a50f15 67000d"
_BU_GN = "f7fcfd e5f5f9 ccece6 99d8c9 66c2a4 41ae76 238b45 006d2c 00441b"
_BU_PU = "f7fcfd e0ecf4 bfd3e6 9ebcda 8c96c6 8c6bb1 88419d 810f7c 4d004b"
_GN_BU = "f7fcf0 e0f3db ccebc5 a8ddb5 7bccc4 4eb3d3 2b8cbe 0868ac 084081"
_OR_RD = "fff7ec fee8c8 fdd49e fdbb84 fc8d59 ef6548 d7301f b30000 7f0000"
_PU_BU_GN = "fff7fb ece2f0 d0d1e6 a6bddb 67a9cf 3690c0 02818a 016c59 014636"
_PU_BU = "fff7fb ece7f2 d0d1e6 a6bddb 74a9cf 3690c0 0570b0 045a8d 023858"
_PU_RD = "f7f4f9 e7e1ef d4b9da c994c7 df65b0 e7298a ce1256 980043 67001f"
_RD_PU = "fff7f3 fde0dd fcc5c0 fa9fb5 f768a1 dd3497 ae017e 7a0177 49006a"
_YL_GN_BU = "ffffd9 edf8b1 c7e9b4 7fcdbb 41b6c4 1d91c0 225ea8 253494 081d58"
_YL_GN = "ffffe5 f7fcb9 d9f0a3 addd8e 78c679 41ab5d 238443 006837 004529"
_YL_OR_BR = "ffffe5 fff7bc fee391 fec44f fe9929 ec7014 cc4c02 993404 662506"
_YL_OR_RD = "ffffcc ffeda0 fed976 feb24c fd8d3c fc4e2a e31a1c bd0026 800026"

_BR_BG = "543005 8c510a bf812d dfc27d f6e8c3 f5f5f5 c7eae5 80cdc1 35978f 01665e 003c30"
_PI_YG = "8e0152 c51b7d de77ae f1b6da fde0ef f7f7f7 e6f5d0 b8e186 7fbc41 4d9221 276419"
_PR_GN = "40004b 762a83 9970ab c2a5cf e7d4e8 f7f7f7 d9f0d3 a6dba0 5aae61 1b7837 00441b"
_PU_OR = "2d004b 542788 8073ac b2abd2 d8daeb f7f7f7 fee0b6 fdb863 e08214 b35806 7f3b08"
_RD_BU = "67001f b2182b d6604d f4a582 fddbc7 f7f7f7 d1e5f0 92c5de 4393c3 2166ac 053061"
_RD_GY = "67001f b2182b d6604d f4a582 fddbc7 ffffff e0e0e0 bababa 878787 4d4d4d 1a1a1a"
_RD_YL_BU = "a50026 d73027 f46d43 fdae61 fee090 ffffbf e0f3f8 abd9e9 74add1 4575b4 313695"
_RD_YL_GN = "a50026 d73027 f46d43 fdae61 fee08b ffffbf d9ef8b a6d96a 66bd63 1a9850 006837"
_SPECTRAL = "9e0142 d53e4f f46d43 fdae61 fee08b ffffbf e6f598 abdda4 66c2a5 3288bd 5e4fa2"

_VIRIDIS = "440154 482475 414487 355f8d 2a788e 21918c 22a884 44bf70 7ad151 bddf26 fde725"
_MAGMA = "000004 140e36 3b0f70 641a80 8c2981 b73779 de4968 f7705c fe9f6d fecf92 fcfdbf"
_INFERNO = "000004 160b39 420a68 6a176e 932667 bc3754 dd513a f37819 fca50a f6d746 fcffa4"
_PLASMA = "0d0887 41049d 6a00a8 8f0da4 b12a90 cc4778 e16462 f2844b fca636 fcce25 f0f921"


PRESETS: Dict[str, GradientFactory] = {
    "blues": _brewer(_BLUES),
    "br-bg": _brewer(_BR_BG),
    "bu-gn": _brewer(_BU_GN),
    "bu-pu": _brewer(_BU_PU),
    "cividis": lambda: FunctionGradient(_cividis),
    "cool": lambda: cubehelix_gradient((260.0, 0.75, 0.35), (80.0, 1.5, 0.8)),
    "cubehelix": lambda: cubehelix_gradient((300.0, 0.5, 0.0), (-240.0, 0.5, 1.0)),
    "gn-bu": _brewer(_GN_BU),
    "greens": _brewer(_GREENS),
    "greys": _brewer(_GREYS),
    "inferno": _perceptual(_INFERNO),
    "magma": _perceptual(_MAGMA),
    "or-rd": _brewer(_OR_RD),
    "oranges": _brewer(_ORANGES),
    "pi-yg": _brewer(_PI_YG),
    "plasma": _perceptual(_PLASMA),
    "pr-gn": _brewer(_PR_GN),
    "pu-bu": _brewer(_PU_BU),
    "pu-bu-gn": _brewer(_PU_BU_GN),
    "pu-or": _brewer(_PU_OR),
    "pu-rd": _brewer(_PU_RD),
    "purples": _brewer(_PURPLES),
    "rainbow": lambda: FunctionGradient(_rainbow),
    "rd-bu": _brewer(_RD_BU),
    "rd-gy": _brewer(_RD_GY),
    "rd-pu": _brewer(_RD_PU),
    "rd-yl-bu": _brewer(_RD_YL_BU),
    "rd-yl-gn": _brewer(_RD_YL_GN),
    "reds": _brewer(_REDS),
    "sinebow": lambda: FunctionGradient(_sinebow),
    "spectral": _brewer(_SPECTRAL),
    "turbo": lambda: FunctionGradient(_turbo),
    "viridis": _perceptual(_VIRIDIS),
    "warm": lambda: cubehelix_gradient((-100.0, 0.75, 0.35), (80.0, 1.5, 0.8)),
    "yl-gn": _brewer(_YL_GN),
    "yl-gn-bu": _brewer(_YL_GN_BU),
    "yl-or-br": _brewer(_YL_OR_BR),
    "yl-or-rd": _brewer(_YL_OR_RD),
}


def preset_names() -> List[str]:
    return list(PRESETS)


def get_preset(name: str) -> Gradient:
    """
    Build the preset gradient registered under ``name``.

    Lookup ignores case and treats ``_`` like ``-`` (``RdYlBu`` is not split,
    ``rd_yl_bu`` and ``RD-YL-BU`` both work).

    Raises:
        PresetNotFoundError: no preset has that name
    """
    key = name.strip().lower().replace("_", "-")
    try:
        factory = PRESETS[key]
    except KeyError:
        raise PresetNotFoundError(name) from None
    return factory()
