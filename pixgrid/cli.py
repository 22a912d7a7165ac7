# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Command-line interface.

    pixgrid pixelate --input photo.png --block-size 8 --output grid.json
    pixgrid map --input sprite.png --tolerance 4
    pixgrid reconstruct --input grid.json --output sprite.png

JSON goes to stdout unless ``--output`` is given. Warnings and errors go
to stderr; any fatal error exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pixgrid import __version__
from pixgrid.errors import PixgridError
from pixgrid.measure import DEFAULT_BLOCK_SIZE, DEFAULT_TOLERANCE, pixelate
from pixgrid.runtime import read_document, reconstruct, to_json, write_document
from pixgrid.schema import ColorMode, GridDocument

logger = logging.getLogger("pixgrid")

_ALPHA_MODES = {True: ColorMode.RGBA, False: ColorMode.RGB, None: None}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixgrid",
        description="Convert images to block grids of color ids, and back.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress (-v) or debug detail (-vv) to stderr.",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log errors.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    pix = commands.add_parser(
        "pixelate", help="Average square blocks of an image into a grid."
    )
    pix.add_argument("-i", "--input", type=Path, required=True, help="Input image.")
    pix.add_argument(
        "-b", "--block-size", type=int, default=DEFAULT_BLOCK_SIZE,
        help=f"Block edge length in pixels (default: {DEFAULT_BLOCK_SIZE}).",
    )
    _add_grid_options(pix)
    pix.set_defaults(handler=_run_pixelate)

    mp = commands.add_parser(
        "map", help="Map every pixel to a color id (block size 1)."
    )
    mp.add_argument("-i", "--input", type=Path, required=True, help="Input image.")
    _add_grid_options(mp)
    mp.set_defaults(handler=_run_map)

    rec = commands.add_parser(
        "reconstruct", help="Rebuild an image from a grid JSON document."
    )
    rec.add_argument("-i", "--input", type=Path, required=True, help="Grid JSON.")
    rec.add_argument(
        "-o", "--output", type=Path, required=True,
        help="Output image; the extension selects the format.",
    )
    rec.set_defaults(handler=_run_reconstruct)

    return parser


def _add_grid_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write JSON here instead of stdout.",
    )
    parser.add_argument(
        "-t", "--tolerance", type=float, default=DEFAULT_TOLERANCE,
        help="Reuse an earlier color within this RGB(A) distance (default: 0).",
    )
    alpha = parser.add_mutually_exclusive_group()
    alpha.add_argument(
        "--alpha", dest="alpha", action="store_true", default=None,
        help="Always emit #rrggbbaa colors.",
    )
    alpha.add_argument(
        "--no-alpha", dest="alpha", action="store_false",
        help="Always emit #rrggbb colors.",
    )


def _run_pixelate(args: argparse.Namespace) -> None:
    _emit(_pixelate(args, args.block_size), args.output)


def _run_map(args: argparse.Namespace) -> None:
    _emit(_pixelate(args, 1), args.output)


def _run_reconstruct(args: argparse.Namespace) -> None:
    document = read_document(args.input)
    reconstruct(document, args.output)


def _pixelate(args: argparse.Namespace, block_size: int) -> GridDocument:
    return pixelate(
        args.input,
        block_size=block_size,
        tolerance=args.tolerance,
        mode=_ALPHA_MODES[args.alpha],
    )


def _emit(document: GridDocument, output: Optional[Path]) -> None:
    if output is None:
        print(to_json(document))
    else:
        write_document(document, output)
        logger.info("Wrote %s", output)


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        args.handler(args)
    except PixgridError as e:
        logger.error("%s", e)
        return 1
    return 0
