import argparse
import re
import sys

DEFAULT_OUTPUT_TEMPLATE = "./randomImage-{width}-{height}.png"

# plain base-10, optional sign, ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_DIMENSION = 2**63 - 1


def positive_int(value):
    if not INTEGER_PATTERN.fullmatch(value):
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    number = int(value, 10)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {number}")
    if number > MAX_DIMENSION:
        raise argparse.ArgumentTypeError(f"out of range: {value}")
    return number


def default_output_path(width, height):
    # we default to a file in the current directory if no path was given
    return DEFAULT_OUTPUT_TEMPLATE.format(width=width, height=height)


def show_help(prog):
    print("Invalid arguments...")
    print(f" {prog} <width> <height> [outputFile]")


class ArgParser(argparse.ArgumentParser):
    """Argument parser that reports any problem with the usage text on stdout and exit code 1."""

    def error(self, message):
        show_help(self.prog)
        sys.exit(1)


def build_parser(prog=None):
    parser = ArgParser(
        prog=prog,
        description="Generates a PNG filled with colored OpenSimplex noise",
        add_help=False,
    )
    parser.add_argument("width", type=positive_int, help="Width of the image in pixels")
    parser.add_argument("height", type=positive_int, nargs="?", default=None, help="Height of the image in pixels, defaults to width")
    parser.add_argument("output", nargs="?", default=None, help="File path for the outputted image")
    return parser


def parse_args(argv=None, prog=None):
    """
    Parse the command line into (width, height, output path).

    Exits with status 1 after printing the usage text if the arguments are invalid.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser(prog)

    # "--" is an argument like any other, never argparse's option separator
    if "--" in argv:
        parser.error("unsupported argument: '--'")

    args = parser.parse_args(argv)

    # we default to a square resolution if nothing else was given
    height = args.height if args.height is not None else args.width
    output = args.output if args.output is not None else default_output_path(args.width, height)
    return args.width, height, output
