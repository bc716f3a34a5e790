import argparse
import logging
from typing import Iterator, Optional, Tuple

from watermarker import Watermarker
from watermarker.api import pil_io
from watermarker.api.params import DrawParams, Font, Margin
from watermarker.constants import Orientation, Position, ScaleMode
from watermarker.version import __version__

logger = logging.getLogger(__name__)


def _choices(enum) -> list:
    return [name.lower().replace("_", "-") for name in enum.__members__]


def _margin(value: str) -> Margin:
    try:
        insets = tuple(int(x) for x in value.split(","))
        return Margin.convert(insets[0] if len(insets) == 1 else insets)
    except ValueError as e:
        raise argparse.ArgumentTypeError("invalid margin %r: %s" % (value, e))


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0: %r" % value)
    return number


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Stamp image or text marks onto an image."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--position", choices=_choices(Position), default="absolute",
        help="Placement of the mark (default: absolute)",
    )
    common.add_argument("--x", type=int, default=0, help="Absolute x coordinate")
    common.add_argument("--y", type=int, default=0, help="Absolute y coordinate")
    common.add_argument(
        "--opacity", type=float, default=1.0, help="Mark opacity in [0, 1]"
    )
    common.add_argument("--scale", type=float, default=1.0, help="Mark scale ratio")
    common.add_argument(
        "--margin", type=_margin, default=Margin(),
        help="Margin around the mark: N, H,V or L,T,R,B",
    )
    common.add_argument(
        "--transparent-color", default=None, help="Color to cut out of the mark"
    )
    common.add_argument(
        "--orientation", choices=_choices(Orientation),
        default="rotate-none-flip-none", help="Rotation and flipping of the mark",
    )
    common.add_argument(
        "--scale-mode", choices=_choices(ScaleMode), default="resample",
        help="How the scale ratio is applied",
    )
    common.add_argument(
        "--tile", nargs=2, type=_positive, metavar=("DX", "DY"), default=None,
        help="Repeat the mark on a grid starting at --x/--y with the given step",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    image_parser = subparsers.add_parser(
        "image", parents=[common], help="Draw an image mark"
    )
    image_parser.add_argument("input_file", help="Input image file")
    image_parser.add_argument("mark_file", help="Mark image file")
    image_parser.add_argument("output_file", help="Output image file")

    text_parser = subparsers.add_parser(
        "text", parents=[common], help="Draw a text mark"
    )
    text_parser.add_argument("input_file", help="Input image file")
    text_parser.add_argument("text", help="Text to draw")
    text_parser.add_argument("output_file", help="Output image file")
    text_parser.add_argument("--font", default=None, help="Font file or name")
    text_parser.add_argument(
        "--font-size", type=float, default=10.0, help="Font size in points"
    )
    text_parser.add_argument("--font-color", default="black", help="Text color")

    return parser.parse_args(argv)


def make_params(args: argparse.Namespace) -> DrawParams:
    """Build draw parameters from parsed arguments."""
    params = DrawParams(
        opacity=args.opacity,
        scale_ratio=args.scale,
        transparent_color=args.transparent_color,
        orientation=args.orientation,
        margin=args.margin,
        position=args.position,
        x=args.x,
        y=args.y,
        scale_mode=args.scale_mode,
    )
    if args.command == "text":
        params = params.evolve(
            font=Font(args.font, args.font_size), font_color=args.font_color
        )
    return params


def iter_grid(
    size: Tuple[int, int], start: Tuple[int, int], step: Tuple[int, int]
) -> Iterator[Tuple[int, int]]:
    """Yield absolute (x, y) coordinates covering ``size`` row by row."""
    for y in range(start[1], size[1], step[1]):
        for x in range(start[0], size[0], step[0]):
            yield (x, y)


def main(argv: Optional[list] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logging.getLogger("watermarker").setLevel(logging.DEBUG)
    else:
        logging.getLogger("watermarker").setLevel(logging.INFO)

    marker = Watermarker.open(args.input_file)
    try:
        params = make_params(args)
        if args.command == "image":
            mark = pil_io.open_image(args.mark_file)
            draw = marker.draw_image
        else:
            mark = args.text
            draw = marker.draw_text

        if args.tile is None:
            draw(mark, params)
        else:
            count = 0
            for x, y in iter_grid(marker.size, params.offset, tuple(args.tile)):
                draw(mark, params, position=Position.ABSOLUTE, x=x, y=y)
                count += 1
            logger.info("Stamped %d marks" % count)
    except ValueError as e:
        logger.error(str(e))
        return 1

    marker.save(args.output_file)
    return None


if __name__ == "__main__":
    main()
