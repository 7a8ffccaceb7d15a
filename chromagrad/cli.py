"""Command line entry point: ``gradient``."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO, Iterator, List, NoReturn, Optional, Sequence, Tuple, Union

from . import __version__
from .colors import Color, BLACK, WHITE
from .config import RenderConfig
from .conversions import css_named_colors
from .errors import ChromagradError, ColorParseError, GradientFileError, MarkupError, NoMatchError
from .gradients import Gradient, StopGradient, get_preset, parse_css_gradient, parse_ggr, preset_names
from .markup import extract_gradients
from .normalizers import Rejected, iter_built_gradients
from .render import Checkerboard, DEFAULT_CHECKERBOARD, OutputMode, Solid, TerminalRenderer, sample_at
from .types import BlendMode, Interpolation, OutputFormat
from .utils import value_or_default

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

EPILOG = """\
COLOR can be any CSS color (https://www.w3.org/TR/css-color-4/).

examples:
  gradient --preset rainbow
  gradient --preset spectral --take 15
  gradient --custom deeppink gold seagreen
  gradient --custom ff00ff 'rgb(50,200,70)' 'hwb(195,0,0.5)' --take 20
  gradient --css 'gold, red 60%, blue'
  gradient --file drawing.svg --svg-id sunset
"""


def _color_arg(text: str) -> Color:
    try:
        return Color.from_css(text)
    except ColorParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with the same status as every other failure."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="gradient",
        description="Display, sample and extract color gradients in the terminal.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")

    preset = parser.add_argument_group("preset gradient")
    preset.add_argument("-l", "--list-presets", action="store_true", help="list all preset gradient names")
    preset.add_argument("-p", "--preset", metavar="NAME", help="use the preset gradient")
    preset.add_argument("-n", "--named-colors", action="store_true", help="list all CSS named colors")

    custom = parser.add_argument_group("custom gradient")
    custom.add_argument("-c", "--custom", nargs="+", type=_color_arg, metavar="COLOR",
                        help="create a gradient from the colors")
    custom.add_argument("-P", "--position", nargs="+", type=float, metavar="FLOAT",
                        help="custom gradient color positions")
    custom.add_argument("--css", metavar="TEXT", help="CSS-like stop list, e.g. 'gold, red 60%%, blue'")
    custom.add_argument("-m", "--blend-mode", type=BlendMode, choices=list(BlendMode), metavar="COLOR-SPACE",
                        help="blending mode: rgb, linear-rgb, oklab, lab [default: oklab]")
    custom.add_argument("-i", "--interpolation", type=Interpolation, choices=list(Interpolation), metavar="MODE",
                        help="interpolation: linear, basis, catmull-rom [default: catmull-rom]")

    files = parser.add_argument_group("gradient file")
    files.add_argument("-f", "--file", nargs="+", type=Path, metavar="FILE",
                       help="read gradients from SVG or GIMP gradient (ggr) files")
    files.add_argument("--svg-id", metavar="ID", help="pick SVG gradient by id")
    files.add_argument("--ggr-fg", type=_color_arg, default=BLACK, metavar="COLOR",
                       help="GGR foreground color [default: black]")
    files.add_argument("--ggr-bg", type=_color_arg, default=WHITE, metavar="COLOR",
                       help="GGR background color [default: white]")

    output = parser.add_argument_group("output")
    output.add_argument("-W", "--width", type=int, metavar="NUM", help="display width [default: terminal width]")
    output.add_argument("-H", "--height", type=int, metavar="NUM", help="display height [default: 2]")
    output.add_argument("-b", "--background", type=_color_arg, metavar="COLOR",
                        help="background color [default: checkerboard]")
    output.add_argument("--cb-color", nargs=2, type=_color_arg, metavar="COLOR", help="checkerboard colors")
    picks = output.add_mutually_exclusive_group()
    picks.add_argument("-t", "--take", type=int, metavar="NUM", help="get NUM colors evenly spaced across the gradient")
    picks.add_argument("-s", "--sample", nargs="+", type=float, metavar="FLOAT", help="get colors at positions")
    output.add_argument("-o", "--format", type=OutputFormat, choices=list(OutputFormat), default=OutputFormat.HEX,
                        metavar="FORMAT", help="color format: hex, rgb, rgb255, hsl, hsv, hwb [default: hex]")
    output.add_argument("-a", "--array", action="store_true", help="print colors from --take or --sample as an array")
    return parser


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


class GradientApp:
    """Runs one invocation: resolves gradient sources and writes their output."""

    def __init__(self, args: argparse.Namespace, stdout: IO, stderr: IO) -> None:
        self.args = args
        self.stdout = stdout
        self.stderr = stderr
        self.status = EXIT_OK

        if args.background is not None:
            background: Union[Solid, Checkerboard] = Solid(args.background)
        elif args.cb_color:
            background = Checkerboard(*args.cb_color)
        else:
            background = DEFAULT_CHECKERBOARD
        self.config = RenderConfig.detect(stdout, output_format=args.format, background=background, array=args.array)
        self.renderer = TerminalRenderer(self.config)

    # ------------------ OUTPUT ------------------
    def write(self, text: str) -> None:
        if text:
            self.stdout.write(text)
            self.stdout.flush()

    def error(self, message: object) -> None:
        self.stderr.write(f"error: {message}\n")
        self.stderr.flush()
        self.status = EXIT_FAILURE

    def show(self, gradient: Gradient, title: Optional[str] = None) -> None:
        """Draw ``gradient``, or print the colors picked by --take / --sample."""
        args = self.args
        if args.take is not None or args.sample is not None:
            if args.take is not None:
                colors = gradient.colors(args.take)
            else:
                colors = sample_at(gradient, args.sample)
            mode = OutputMode.ARRAY if args.array else OutputMode.SWATCH
            self.write(self.renderer.render(mode, colors=colors))
            return
        text = self.renderer.render(OutputMode.BLOCK, gradient, width=args.width, height=args.height)
        if title and text:
            text = title + "\n" + text
        self.write(text)

    # ------------------ SOURCES ------------------
    def _custom_modes(self, default_blend: BlendMode, default_interpolation: Interpolation) -> Tuple[BlendMode, Interpolation]:
        return (
            value_or_default(self.args.blend_mode, default_blend),
            value_or_default(self.args.interpolation, default_interpolation),
        )

    def run_preset(self, name: str) -> None:
        try:
            gradient = get_preset(name)
        except ChromagradError as exc:
            self.error(f"{exc}; use --list-presets to list all preset gradient names")
            return
        self.show(gradient)

    def run_custom(self, colors: Sequence[Color], positions: Optional[Sequence[float]]) -> None:
        if positions is not None and len(positions) < 2:
            self.error("--position needs at least 2 values")
            return
        blend, interpolation = self._custom_modes(BlendMode.OKLAB, Interpolation.CATMULL_ROM)
        try:
            gradient = StopGradient.from_stops(colors, positions, blend, interpolation)
        except ChromagradError as exc:
            self.error(f"custom gradient: {exc}")
            return
        self.show(gradient)

    def run_css(self, text: str) -> None:
        blend, interpolation = self._custom_modes(BlendMode.OKLAB, Interpolation.CATMULL_ROM)
        try:
            colors, positions = parse_css_gradient(text)
            gradient = StopGradient.from_stops(colors, positions, blend, interpolation)
        except ChromagradError as exc:
            self.error(f"CSS gradient: {exc}")
            return
        self.show(gradient)

    def file_gradients(self, path: Path) -> Iterator[Tuple[str, Union[Gradient, Rejected]]]:
        """
        Gradients found in one file, labelled for display.

        Raises:
            GradientFileError: the file is missing, unreadable or unsupported
            MarkupError: the SVG markup is not well formed
            NoMatchError: --svg-id matched nothing
        """
        suffix = path.suffix.lower()
        if suffix not in (".svg", ".ggr"):
            raise GradientFileError(path, "unsupported file format (expected .svg or .ggr)")
        try:
            text = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            raise GradientFileError(path, "file not found") from None
        except UnicodeDecodeError:
            raise GradientFileError(path, "not a UTF-8 text file") from None
        except OSError as exc:
            raise GradientFileError(path, exc.strerror or str(exc)) from None
        logger.debug("reading %s", path)

        if suffix == ".ggr":
            try:
                gradient, name = parse_ggr(text, self.args.ggr_fg, self.args.ggr_bg)
            except ValueError as exc:
                raise GradientFileError(path, str(exc)) from exc
            yield (f"{path}  {name}" if name else str(path)), gradient
            return

        target = self.args.svg_id
        records = extract_gradients(text, target)
        if not records:
            if target is not None:
                raise NoMatchError(target, path)
            raise GradientFileError(path, "no gradients found")
        blend, interpolation = self._custom_modes(BlendMode.RGB, Interpolation.LINEAR)
        for record, result in iter_built_gradients(records, blend, interpolation, report_empty=target is not None):
            label = f"{path}  #{record.id}" if record.id else str(path)
            yield label, result

    def run_file(self, path: Path) -> None:
        try:
            for label, result in self.file_gradients(path):
                if isinstance(result, Rejected):
                    self.error(f"{path}: {result}")
                else:
                    self.show(result, title=label)
        except MarkupError as exc:
            self.error(f"{path}: {exc}")
        except ChromagradError as exc:
            self.error(exc)

    def run(self) -> int:
        args = self.args
        if args.list_presets:
            self.write("".join(name + "\n" for name in preset_names()))
        if args.named_colors:
            named = [(name, Color(*rgba)) for name, rgba in css_named_colors()]
            self.write(self.renderer.render_named(named))
        if args.preset is not None:
            self.run_preset(args.preset)
        if args.custom is not None:
            self.run_custom(args.custom, args.position)
        if args.css is not None:
            self.run_css(args.css)
        for path in args.file or []:
            self.run_file(path)
        return self.status


def _has_request(args: argparse.Namespace) -> bool:
    return bool(args.list_presets or args.named_colors or args.preset is not None or args.custom is not None
                or args.css is not None or args.file)


def main(argv: Optional[List[str]] = None, stdout: Optional[IO] = None, stderr: Optional[IO] = None) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help(stderr)
        return EXIT_FAILURE
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.preset is not None and args.custom is not None:
        parser.error("argument -c/--custom: not allowed with argument -p/--preset")
    if not _has_request(args):
        parser.print_help(stderr)
        return EXIT_FAILURE

    try:
        return GradientApp(args, stdout, stderr).run()
    except BrokenPipeError:
        # stdout was closed early (e.g. piped into head); point it at devnull so
        # the interpreter's final flush does not fail again
        if stdout is sys.stdout:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return EXIT_OK
    except OSError as exc:
        stderr.write(f"error: cannot write output: {exc}\n")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
