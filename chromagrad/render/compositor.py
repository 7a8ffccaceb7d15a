from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np
from numpy import ndarray

from ..colors import Color
from ..gradients import Gradient


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class Checkerboard:
    first: Color
    second: Color


Background = Union[Solid, Checkerboard]

DEFAULT_CHECKERBOARD = Checkerboard(Color(0.20, 0.20, 0.20), Color(0.05, 0.05, 0.05))


# ------------------ BLENDING ------------------
def blend_over(fg: Color, bg: Color) -> Color:
    """Source-over of a straight-alpha color on ``bg``; the result is opaque."""
    a = fg.a
    return Color(
        (1.0 - a) * bg.r + a * fg.r,
        (1.0 - a) * bg.g + a * fg.g,
        (1.0 - a) * bg.b + a * fg.b,
    )


def np_blend_over(fg: ndarray, bg: ndarray) -> ndarray:
    """
    Vectorized ``blend_over``.

    Args:
        fg: (..., 4) straight RGBA
        bg: (..., 3) or (..., 4) RGB(A) broadcastable against ``fg``

    Returns:
        (..., 4) opaque RGBA
    """
    alpha = fg[..., 3:4]
    rgb = (1.0 - alpha) * bg[..., :3] + alpha * fg[..., :3]
    return np.concatenate([rgb, np.ones_like(alpha)], axis=-1)


def checkerboard_tile(x: int, y: int) -> int:
    """Tile index of sample ``x`` on row ``y``: 0 selects the first color."""
    return ((x // 2) & 1) ^ (y & 1)


def np_checkerboard_tiles(width: int, height: int) -> ndarray:
    """(height, width) integer array of ``checkerboard_tile`` values."""
    xs = np.arange(width)
    ys = np.arange(height)
    return ((xs[np.newaxis, :] // 2) & 1) ^ (ys[:, np.newaxis] & 1)


# ------------------ SAMPLING ------------------
def sample_line(gradient: Gradient, count: int) -> ndarray:
    """``count`` samples evenly spaced over the gradient domain, ends included."""
    if count <= 0:
        return np.zeros((0, 4))
    lo, hi = gradient.domain()
    return gradient.sample_array(np.linspace(lo, hi, count).tolist())


def sample_at(gradient: Gradient, positions: Sequence[float]) -> List[Color]:
    return [gradient.sample(float(t)) for t in positions]


class Compositor:
    """Applies one background policy to gradient samples and swatch colors."""

    def __init__(self, background: Background = DEFAULT_CHECKERBOARD) -> None:
        self.background = background

    def composite_grid(self, gradient: Gradient, width: int, height: int) -> ndarray:
        """
        Sample ``2 * width`` points and composite them for ``height`` rows.

        Returns:
            float array of shape (height, 2 * width, 4), opaque RGBA
        """
        samples = sample_line(gradient, 2 * width)
        if isinstance(self.background, Solid):
            bg = self.background.color.to_array()
            row = np_blend_over(samples, bg)
            return np.broadcast_to(row, (height,) + row.shape).copy()

        tiles = np_checkerboard_tiles(2 * width, height)
        palette = np.stack([self.background.first.to_array(), self.background.second.to_array()])
        bg = palette[tiles]
        return np_blend_over(np.broadcast_to(samples, bg.shape), bg)

    def swatch_background(self) -> Color:
        """Background behind a one-cell swatch.

        A single cell cannot show the checkerboard, so it takes the color of
        tile (0, 0), the checkerboard's first color.
        """
        if isinstance(self.background, Solid):
            return self.background.color
        return self.background.first

    def composite_colors(self, colors: Sequence[Color]) -> List[Color]:
        bg = self.swatch_background()
        return [blend_over(color, bg) for color in colors]
