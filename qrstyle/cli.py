"""
Command-line front end.

Examples::

    qrstyle -t "This is a QR code" --output-file fish.png 512
    qrstyle -t "Hello" -d roundedpath -e leaf --output-format svg 300
    echo "from stdin" | qrstyle --output-format smallascii 100

If neither ``-t`` nor ``--input-file`` is given, the content is read from
stdin. File formats without ``--output-file`` are written to a temporary
file whose path is printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
import tempfile
from typing import Optional

from qrstyle.config import GeneratorConfig
from qrstyle.errors import QRStyleError, UnknownShapeName, UnsupportedFormat, UnsupportedSetting
from qrstyle.export import ExportFormat
from qrstyle.logging_config import setup_logging
from qrstyle.registry import EYE_SHAPES, PIXEL_SHAPES, PUPIL_SHAPES
from qrstyle.settings import SettingKey

logger = logging.getLogger(__name__)

LARGE_DIMENSION = 8192

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN_SHAPE = 2
EXIT_UNSUPPORTED_SETTING = 3
EXIT_UNSUPPORTED_FORMAT = 5
EXIT_WRITE_FAILED = 7

CLI_FORMATS = [f.value for f in ExportFormat if f is not ExportFormat.CLIPBOARD]


def _bool_arg(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrstyle",
        description="Create a styled QR code",
    )
    parser.add_argument("dimension", type=float, nargs="?", help="The QR code dimension")

    io = parser.add_argument_group("input/output")
    io.add_argument("-t", "--text", help="The text to be stored in the QR code")
    io.add_argument("--input-file", help="The file containing the content for the QR code")
    io.add_argument("--output-file", help="The output file")
    io.add_argument(
        "--output-format",
        default="png",
        help=f"The output format ({', '.join(CLI_FORMATS)}); png is the default",
    )
    io.add_argument(
        "--output-compression",
        type=float,
        default=1.0,
        help="The output compression factor (0.0 -> 1.0) for png and jpg",
    )
    io.add_argument(
        "-c", "--error-correction",
        default="M",
        help='The level of error correction: "L" (low), "M" (medium), "Q" (quantize), "H" (high)',
    )
    io.add_argument("--quiet-zone", type=int, default=0, help="Empty border around the code, in modules")

    pixels = parser.add_argument_group("on pixels")
    pixels.add_argument(
        "-d", "--on-pixel-shape",
        default="square",
        help=f"The onPixels shape. Available shapes are {', '.join(PIXEL_SHAPES.available_names())}",
    )
    pixels.add_argument(
        "-n", "--on-pixel-inset-fraction",
        type=float,
        help="The spacing around each individual pixel in the onPixels section",
    )
    pixels.add_argument(
        "-r", "--on-pixel-shape-corner-radius",
        type=float,
        help="The onPixels shape corner radius fractional value (0.0 -> 1.0)",
    )
    pixels.add_argument(
        "-a", "--on-pixel-shape-has-inner-corners",
        type=_bool_arg,
        help="The onPixels 'has inner corners' value (true/false)",
    )

    eyes = parser.add_argument_group("eyes")
    eyes.add_argument(
        "-e", "--eye-shape",
        help=f"The eye shape. Available shapes are {', '.join(EYE_SHAPES.available_names())}",
    )
    eyes.add_argument(
        "--eye-shape-corner-radius",
        type=float,
        help="The fractional (0 ... 1) corner radius for the eye shape, if it supports one",
    )
    eyes.add_argument(
        "-p", "--pupil-shape",
        help=f"The pupil shape. Available shapes are {', '.join(PUPIL_SHAPES.available_names())}",
    )
    eyes.add_argument(
        "--pupil-shape-corner-radius",
        type=float,
        help="The fractional (0 ... 1) corner radius for the pupil shape, if it supports one",
    )

    colors = parser.add_argument_group("colors (format r,g,b,a - 1.0,0.5,0.5,1.0)")
    colors.add_argument("--bg-color", help="The background color")
    colors.add_argument("--data-color", help="The onPixels color")
    colors.add_argument("--eye-color", help="The eye color")
    colors.add_argument("--pupil-color", help="The pupil color")

    logo = parser.add_argument_group("logo")
    logo.add_argument("--logo-image-file", help="The image file to draw as a logo")
    logo.add_argument(
        "--logo-rect",
        type=float,
        nargs=4,
        metavar=("X", "Y", "W", "H"),
        help="The logo area in modules; centred at a quarter of the code when omitted",
    )
    logo.add_argument("--logo-corner-radius", type=float, default=0.0, help="The logo corner radius fraction")

    listing = parser.add_argument_group("listing")
    listing.add_argument("--all-pixel-shapes", action="store_true", help="Print all the available pixel shapes")
    listing.add_argument("--all-eye-shapes", action="store_true", help="Print all the available eye shapes")
    listing.add_argument("--all-pupil-shapes", action="store_true", help="Print all the available pupil shapes")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("-s", "--silence", action="store_true", help="Silence any output")
    output.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    return parser


def _read_text(args: argparse.Namespace) -> Optional[str]:
    if args.input_file:
        with open(args.input_file, encoding="utf-8") as handle:
            return handle.read()
    if args.text is not None:
        return args.text
    logger.info("Reading from stdin")
    data = sys.stdin.read()
    return data or None


def _pixel_settings(args: argparse.Namespace) -> dict:
    settings = {}
    if args.on_pixel_inset_fraction is not None:
        settings[SettingKey.INSET_FRACTION.value] = args.on_pixel_inset_fraction
    if args.on_pixel_shape_corner_radius is not None:
        settings[SettingKey.CORNER_RADIUS_FRACTION.value] = args.on_pixel_shape_corner_radius
    if args.on_pixel_shape_has_inner_corners is not None:
        settings[SettingKey.HAS_INNER_CORNERS.value] = args.on_pixel_shape_has_inner_corners
    return settings


def config_from_args(args: argparse.Namespace, text: str) -> GeneratorConfig:
    return GeneratorConfig(
        text=text,
        dimension=args.dimension,
        output_format=args.output_format,
        output_file=args.output_file,
        compression=args.output_compression,
        error_correction=args.error_correction,
        pixel_shape=args.on_pixel_shape,
        pixel_settings=_pixel_settings(args),
        eye_shape=args.eye_shape,
        eye_corner_radius=args.eye_shape_corner_radius,
        pupil_shape=args.pupil_shape,
        pupil_corner_radius=args.pupil_shape_corner_radius,
        background_color=args.bg_color,
        data_color=args.data_color,
        eye_color=args.eye_color,
        pupil_color=args.pupil_color,
        quiet_zone=args.quiet_zone,
        logo_image_file=args.logo_image_file,
        logo_rect=tuple(args.logo_rect) if args.logo_rect else None,
        logo_corner_radius=args.logo_corner_radius,
    )


def _write(config: GeneratorConfig, data: bytes) -> str:
    if config.output_file:
        path = config.output_file
        with open(path, "wb") as handle:
            handle.write(data)
        return path
    with tempfile.NamedTemporaryFile(
        prefix="qrstyle-", suffix=f".{config.output_format}", delete=False
    ) as handle:
        handle.write(data)
        return handle.name


def run(config: GeneratorConfig, *, silence: bool = False) -> int:
    """Generate the configured artifact and write it out; returns the exit code."""
    if config.dimension > LARGE_DIMENSION and not silence:
        logger.warning("Large image size. Suggest using PDF output at a smaller size")

    fmt = config.export_format
    if fmt is ExportFormat.CLIPBOARD:
        raise ValueError("clipboard output is not available from the command line")

    document = config.build_document()
    logger.info(
        "Rendering %s at %s using %r", fmt.value, config.dimension, document.design
    )
    data = document.export(config.dimension, fmt, compression=config.compression)

    if fmt.is_text:
        sys.stdout.write(data.decode("utf-8"))
        return EXIT_OK

    try:
        path = _write(config, data)
    except OSError as exc:
        print(f"Unable to write to output file - error was {exc}", file=sys.stderr)
        return EXIT_WRITE_FAILED
    if config.output_file is None and not silence:
        print(path)
    logger.info("Wrote %d bytes to %s", len(data), path)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.all_pixel_shapes or args.all_eye_shapes or args.all_pupil_shapes:
        for wanted, registry in (
            (args.all_pixel_shapes, PIXEL_SHAPES),
            (args.all_eye_shapes, EYE_SHAPES),
            (args.all_pupil_shapes, PUPIL_SHAPES),
        ):
            if wanted:
                print(" ".join(registry.available_names()))
        return EXIT_OK

    if args.dimension is None:
        parser.error("the following arguments are required: dimension")

    if args.silence:
        level = logging.CRITICAL
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    setup_logging(level)

    try:
        text = _read_text(args)
        if not text:
            print("No QR code content: use -t, --input-file or stdin", file=sys.stderr)
            return EXIT_ERROR
        config = config_from_args(args, text)
        return run(config, silence=args.silence)
    except UnknownShapeName as exc:
        print(exc, file=sys.stderr)
        return EXIT_UNKNOWN_SHAPE
    except UnsupportedSetting as exc:
        print(exc, file=sys.stderr)
        return EXIT_UNSUPPORTED_SETTING
    except UnsupportedFormat as exc:
        print(exc, file=sys.stderr)
        return EXIT_UNSUPPORTED_FORMAT
    except (QRStyleError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
