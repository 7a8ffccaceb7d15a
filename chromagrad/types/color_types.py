from __future__ import annotations
from typing import Tuple, Union, Sequence
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
RGBA = Tuple[float, float, float, float]
RGBA8 = Tuple[int, int, int, int]
ScalarVector = Tuple[Scalar, ...]
ColorValue = Union[Sequence[Scalar], ndarray]


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
