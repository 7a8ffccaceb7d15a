"""Chromagrad: SVG gradient extraction and truecolor terminal rendering."""

__version__ = "0.1.0"

from .colors import Color, BLACK, WHITE
from .errors import (
    ChromagradError,
    ColorParseError,
    GgrFormatError,
    GradientBuildError,
    GradientFileError,
    MarkupError,
    NoMatchError,
    PresetNotFoundError,
)
from .types import BlendMode, Interpolation, OutputFormat
from .markup import ColorStop, GradientRecord, PoisonedRecord, StopExtractor, extract_gradients
from .gradients import Gradient, StopGradient, FunctionGradient, get_preset, parse_ggr, parse_css_gradient
from .normalizers import RejectReason, Rejected, normalize, build_gradient, iter_built_gradients
from .render import Solid, Checkerboard, Compositor, TerminalRenderer, OutputMode, format_color
from .config import RenderConfig

__all__ = [
    '__version__',
    'Color',
    'BLACK',
    'WHITE',
    'ChromagradError',
    'ColorParseError',
    'GgrFormatError',
    'GradientBuildError',
    'GradientFileError',
    'MarkupError',
    'NoMatchError',
    'PresetNotFoundError',
    'BlendMode',
    'Interpolation',
    'OutputFormat',
    'ColorStop',
    'GradientRecord',
    'PoisonedRecord',
    'StopExtractor',
    'extract_gradients',
    'Gradient',
    'StopGradient',
    'FunctionGradient',
    'get_preset',
    'parse_ggr',
    'parse_css_gradient',
    'RejectReason',
    'Rejected',
    'normalize',
    'build_gradient',
    'iter_built_gradients',
    'Solid',
    'Checkerboard',
    'Compositor',
    'TerminalRenderer',
    'OutputMode',
    'format_color',
    'RenderConfig',
]
