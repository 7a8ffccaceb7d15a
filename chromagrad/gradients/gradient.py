"""
Gradient handles.

Every gradient the renderer can draw implements the small ``Gradient``
interface: sample a color at a position, report its domain, and produce
evenly spaced colors. Stop based gradients delegate the interpolation math to
coloraide; computed presets and GIMP files wrap a plain function of ``t``.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray
from coloraide import stop

from ..colors import Color, ColorLike, as_color
from ..conversions.css import ColorAide, from_coloraide, to_coloraide
from ..errors import ColorParseError, GradientBuildError
from ..types import BlendMode, Interpolation
from ..utils import clamp, remap


class Gradient(ABC):
    """Read-only color gradient over a finite domain."""

    @abstractmethod
    def sample(self, t: float) -> Color:
        """Color at position ``t``; positions outside the domain clamp to its ends."""

    @abstractmethod
    def domain(self) -> Tuple[float, float]:
        ...

    def colors(self, count: int) -> List[Color]:
        """``count`` evenly spaced colors over the domain, both ends included."""
        if count <= 0:
            return []
        lo, hi = self.domain()
        return [self.sample(t) for t in np.linspace(lo, hi, count).tolist()]

    def sample_array(self, ts: Sequence[float]) -> ndarray:
        """
        Sample many positions at once.

        Returns:
            float array of shape (len(ts), 4), straight RGBA
        """
        values = [self.sample(t).value for t in ts]
        return np.array(values, dtype=float).reshape(len(values), 4)


class StopGradient(Gradient):
    """
    Gradient through color stops, interpolated by coloraide.

    Use ``StopGradient.from_stops`` rather than the constructor; it validates
    the stops and builds the interpolator.
    """

    def __init__(
        self,
        interpolator: Callable[[float], ColorAide],
        domain: Tuple[float, float],
        blend_mode: BlendMode,
        interpolation: Interpolation,
    ) -> None:
        self._interpolator = interpolator
        self._domain = domain
        self.blend_mode = blend_mode
        self.interpolation = interpolation

    @classmethod
    def from_stops(
        cls,
        colors: Sequence[ColorLike],
        positions: Optional[Sequence[float]] = None,
        blend_mode: BlendMode = BlendMode.RGB,
        interpolation: Interpolation = Interpolation.LINEAR,
    ) -> StopGradient:
        """
        Build a gradient from colors and optional positions.

        Args:
            colors: at least two colors (``Color`` or CSS tokens)
            positions: one position per color, non-decreasing. Two positions
                with more colors spread the colors evenly between them.
                ``None`` spreads the colors over [0, 1].
            blend_mode: color space used for mixing
            interpolation: curve family between stops

        Raises:
            GradientBuildError: the stops do not describe a usable gradient
        """
        if len(colors) < 2:
            raise GradientBuildError(f"at least 2 colors are required, got {len(colors)}")
        try:
            parsed = [as_color(c) for c in colors]
        except ColorParseError as exc:
            raise GradientBuildError(str(exc)) from exc

        if positions is None:
            positions = [0.0, 1.0]
        positions = [float(p) for p in positions]
        if len(positions) == 2 and len(parsed) > 2:
            positions = np.linspace(positions[0], positions[1], len(parsed)).tolist()
        if len(positions) != len(parsed):
            raise GradientBuildError(
                f"{len(parsed)} colors but {len(positions)} positions"
            )
        if not all(math.isfinite(p) for p in positions):
            raise GradientBuildError("positions must be finite")
        if any(b < a for a, b in zip(positions, positions[1:])):
            raise GradientBuildError("positions must not decrease")
        lo, hi = positions[0], positions[-1]
        if lo == hi:
            raise GradientBuildError("positions span an empty domain")

        stops = [
            stop(to_coloraide(color.value), remap(p, lo, hi, 0.0, 1.0))
            for color, p in zip(parsed, positions)
        ]
        try:
            # natural end condition: splines pass through the first and last stop
            interpolator = ColorAide.interpolate(
                stops,
                space=blend_mode.space,
                method=interpolation.method,
                premultiplied=False,
                end_cond="natural",
            )
        except ValueError as exc:
            raise GradientBuildError(f"cannot interpolate stops: {exc}") from exc
        return cls(interpolator, (lo, hi), blend_mode, interpolation)

    def domain(self) -> Tuple[float, float]:
        return self._domain

    def sample(self, t: float) -> Color:
        lo, hi = self._domain
        u = 0.0 if math.isnan(t) else clamp(remap(t, lo, hi, 0.0, 1.0))
        return Color(*from_coloraide(self._interpolator(u)))


class FunctionGradient(Gradient):
    """
    Gradient computed by a function of the unit position.

    Args:
        func: maps ``u`` in [0, 1] to a Color
        domain: the user facing domain mapped linearly onto [0, 1]
    """

    def __init__(self, func: Callable[[float], Color], domain: Tuple[float, float] = (0.0, 1.0)) -> None:
        self._func = func
        self._domain = domain

    def domain(self) -> Tuple[float, float]:
        return self._domain

    def sample(self, t: float) -> Color:
        lo, hi = self._domain
        u = 0.0 if math.isnan(t) else clamp(remap(t, lo, hi, 0.0, 1.0))
        return self._func(u)
