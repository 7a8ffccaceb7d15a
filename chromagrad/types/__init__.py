from .format_type import OutputFormat
from .gradient_types import BlendMode, Interpolation

__all__ = ["OutputFormat", "BlendMode", "Interpolation"]
