from .default import value_or_default
from .num_utils import clamp, remap

__all__ = ["value_or_default", "clamp", "remap"]
