"""CLI entry-point for the Pascal's triangle calculator.

Usage:
    pascal-triangle 4
    pascal-triangle --format raw --headers 4
    pascal-triangle --format html 10 > triangle.html
    pascal-triangle --only 6
    pascal-triangle --factorial 20
    pascal-triangle --biggest 5
    pascal-triangle --choosek 6 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum

from pascal.combinatorics import biggest, factorial, nchoosek, to_decimal
from pascal.render import AUTO_WIDTH, DEFAULT_FORMAT, FORMATS, RenderOptions, render
from pascal.triangle import build

# Single source of the package version; pyproject.toml reads it from here.
__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Positional integers are read as unsigned 64-bit values.
MAX_UINT64 = 2**64 - 1

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ExitCode(IntEnum):
    SUCCESS = 0
    USAGE = 2


def _is_plain_decimal(text: str) -> bool:
    """Only ASCII digits: no sign, underscores, whitespace or other scripts."""
    return text.isascii() and text.isdigit()


def _uint64(text: str) -> int:
    """argparse type: a decimal integer in 0 .. 2**64 - 1."""
    if not _is_plain_decimal(text):
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {text!r}")
    value = int(text, 10)
    if value > MAX_UINT64:
        raise argparse.ArgumentTypeError(f"{text} is out of range 0..{MAX_UINT64}")
    return value


def _width(text: str) -> int:
    if not _is_plain_decimal(text):
        raise argparse.ArgumentTypeError(f"invalid width: {text!r}")
    return int(text, 10)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pascal-triangle",
        usage="%(prog)s [OPTIONS] depth [k]",
        description="Print Pascal's triangle, factorials and binomial coefficients.",
    )
    p.add_argument(
        "depth",
        type=_uint64,
        help="Triangle depth; also n for --factorial, --biggest and --choosek.",
    )
    p.add_argument(
        "k",
        nargs="?",
        type=_uint64,
        default=None,
        help="k for --choosek.",
    )
    p.add_argument(
        "-n",
        "--headers",
        action="store_true",
        default=False,
        help="print row headers in triangle",
    )
    p.add_argument(
        "-w",
        "--width",
        type=_width,
        default=AUTO_WIDTH,
        help="min width for each cell in text format (default: len(nchoosek(depth, depth/2)) + 1)",
    )
    p.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=FORMATS,
        default=DEFAULT_FORMAT,
        help=f"format to output (default: {DEFAULT_FORMAT})",
    )
    p.add_argument(
        "-o",
        "--only",
        action="store_true",
        default=False,
        help="only output the row at 'depth'",
    )
    p.add_argument(
        "-y",
        "--factorial",
        action="store_true",
        default=False,
        help="calculate the factorial of the argument",
    )
    p.add_argument(
        "-b",
        "--biggest",
        action="store_true",
        default=False,
        help="return the maximum value in the triangle: nchoosek(depth, depth/2)",
    )
    p.add_argument(
        "-c",
        "--choosek",
        action="store_true",
        default=False,
        help="accept a second argument k and calculate nchoosek(depth, k)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress to stderr (-vv for debug output)",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.factorial:
        logger.info("factorial(%d)", args.depth)
        print(to_decimal(factorial(args.depth)))
        return ExitCode.SUCCESS

    if args.biggest:
        logger.info("nchoosek(%d, %d)", args.depth, args.depth // 2)
        print(to_decimal(biggest(args.depth)))
        return ExitCode.SUCCESS

    if args.choosek:
        if args.k is None:
            parser.error("--choosek requires a second argument k")
        logger.info("nchoosek(%d, %d)", args.depth, args.k)
        print(to_decimal(nchoosek(args.depth, args.k)))
        return ExitCode.SUCCESS

    triangle = build(args.depth, only=args.only)
    options = RenderOptions(fmt=args.fmt, row_headers=args.headers, width=args.width)
    sys.stdout.write(render(triangle, options))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
