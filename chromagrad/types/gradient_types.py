from enum import Enum


class BlendMode(str, Enum):
    """Color space in which neighbouring stops are mixed."""
    RGB = "rgb"
    LINEAR_RGB = "linear-rgb"
    OKLAB = "oklab"
    LAB = "lab"

    @property
    def space(self) -> str:
        return _BLEND_SPACES[self]


class Interpolation(str, Enum):
    """Curve family used between stops."""
    LINEAR = "linear"
    BASIS = "basis"
    CATMULL_ROM = "catmull-rom"

    @property
    def method(self) -> str:
        return _INTERPOLATION_METHODS[self]


# coloraide space / method names
_BLEND_SPACES = {
    BlendMode.RGB: "srgb",
    BlendMode.LINEAR_RGB: "srgb-linear",
    BlendMode.OKLAB: "oklab",
    BlendMode.LAB: "lab",
}

_INTERPOLATION_METHODS = {
    Interpolation.LINEAR: "linear",
    Interpolation.BASIS: "bspline",
    Interpolation.CATMULL_ROM: "catrom",
}
