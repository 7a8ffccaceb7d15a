import numpy as np
from numpy import ndarray as NDArray
from .to_hsl import rgb_hue, np_rgb_hue


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    s = 0.0 if v == 0 else delta / v
    return rgb_hue(r, g, b, v, delta), s, v


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized HSV from RGB (0..1).

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = v - m

    s = np.zeros_like(v)
    mask = v > 0
    s[mask] = delta[mask] / v[mask]

    return np.stack([np_rgb_hue(r, g, b, v, delta), s, v], axis=-1)


## HSV to HWB

def hsv_to_hwb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Whiteness and blackness share the HSV hue."""
    return h, (1 - s) * v, 1 - v


def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    return hsv_to_hwb(*rgb_to_hsv(r, g, b))


def np_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    hsv = np_rgb_to_hsv(r, g, b)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    return np.stack([h, (1 - s) * v, 1 - v], axis=-1)
