"""Command-line interface.

Usage::

    grid-identicon [-s SIZE] [-m MARGIN] [-b R,G,B] [-v] IDENTIFIER render PATH
    grid-identicon [-s SIZE] [-m MARGIN] [-b R,G,B] [-v] IDENTIFIER encode FORMAT

``render`` writes an image file whose format follows the extension of
``PATH``; ``encode`` prints the Base64 text of the image to stdout.
"""

from __future__ import annotations

import argparse
import textwrap
from typing import Optional, Sequence

from grid_identicon.errors import IdenticonError
from grid_identicon.hasher import parse_identifier
from grid_identicon.layout import (
    DEFAULT_BACKGROUND,
    DEFAULT_CELL_SIZE,
    DEFAULT_MARGIN,
    LayoutConfig,
)
from grid_identicon.pipeline import IdenticonRenderer
from grid_identicon.utils.color import format_rgb, parse_rgb
from grid_identicon.utils.logging import get_logger, set_verbosity

LOGGER = get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-identicon",
        description="Generate a symmetric 5x5 identicon from an integer identifier.",
        epilog=textwrap.dedent(
            """\
            examples:
              grid-identicon 21012146 render avatar.png
              grid-identicon -s 20 -m 1 21012146 encode jpeg
            """
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help=f"Pixels per grid cell edge (default: {DEFAULT_CELL_SIZE})",
    )
    parser.add_argument(
        "-m",
        "--margin",
        type=int,
        default=DEFAULT_MARGIN,
        help=f"Border width in cells on every side (default: {DEFAULT_MARGIN})",
    )
    parser.add_argument(
        "-b",
        "--background",
        default=format_rgb(DEFAULT_BACKGROUND),
        metavar="R,G,B",
        help=f"Background color (default: {format_rgb(DEFAULT_BACKGROUND)})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("identifier", help="Non-negative integer identifier")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Write the identicon to a file")
    render_parser.set_defaults(handler=run_render_command)
    render_parser.add_argument(
        "path", help="Output file; the extension (.png, .jpg, .jpeg, .gif) picks the format"
    )

    encode_parser = subparsers.add_parser("encode", help="Print the image as Base64 text")
    encode_parser.set_defaults(handler=run_encode_command)
    encode_parser.add_argument("format", help="Image format: png, jpeg or gif")
    return parser


def make_renderer(args: argparse.Namespace) -> IdenticonRenderer:
    layout = LayoutConfig(
        cell_size=args.size,
        margin=args.margin,
        background=parse_rgb(args.background),
    )
    return IdenticonRenderer(layout)


def run_render_command(args: argparse.Namespace) -> None:
    identifier = parse_identifier(args.identifier)
    renderer = make_renderer(args)
    renderer.render(identifier, args.path)


def run_encode_command(args: argparse.Namespace) -> None:
    identifier = parse_identifier(args.identifier)
    renderer = make_renderer(args)
    print(renderer.base64(identifier, args.format))


def dispatch(args: argparse.Namespace) -> int:
    """Run the selected subcommand, mapping package errors to an exit code."""
    set_verbosity(args.verbose)
    try:
        args.handler(args)
    except IdenticonError as e:
        LOGGER.error("%s", e)
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return dispatch(args)


__all__ = ["build_parser", "dispatch", "main"]
