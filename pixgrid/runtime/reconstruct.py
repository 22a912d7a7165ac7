# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Image reconstruction from a GridDocument.

Each grid cell becomes one pixel of its identifier's color. Reconstructing
a map-mode document (block size 1, tolerance 0) reproduces the source
image exactly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from pixgrid.errors import FormatError, GridIOError
from pixgrid.measure.codec import decode_hex
from pixgrid.schema import TRANSPARENT_SAMPLE, ColorMode, GridDocument

logger = logging.getLogger(__name__)

# Pillow formats that cannot store an alpha channel
_NO_ALPHA_FORMATS = frozenset({"JPEG", "PCX"})

# Padding for cells past the end of a short row
_NO_CELL = -1


def render(document: GridDocument) -> Image.Image:
    """
    Render a GridDocument to an in-memory image.

    Height is the number of rows and width the length of the first row.
    Longer rows are truncated and shorter rows padded with transparent
    pixels, both with a warning. Identifiers missing from the color table
    are logged and rendered transparent.

    Returns:
        PIL image in RGBA mode if any color (or substitution) needs alpha,
        RGB otherwise.

    Raises:
        FormatError: if the matrix is empty or a color is not valid hex
    """
    if not document.matrix:
        raise FormatError("Cannot reconstruct an empty matrix")

    height, width = document.height, document.width
    if width == 0:
        raise FormatError("Cannot reconstruct a matrix whose first row is empty")

    grid = np.full((height, width), _NO_CELL, dtype=np.int64)
    padded = False
    for y, row in enumerate(document.matrix):
        if len(row) > width:
            logger.warning(
                "Row %d has %d cells, truncating to %d", y, len(row), width
            )
        elif len(row) < width:
            logger.warning(
                "Row %d has %d cells, padding to %d with transparent pixels",
                y, len(row), width,
            )
            padded = True
        cells = row[:width]
        grid[y, :len(cells)] = cells

    ids, inverse = np.unique(grid, return_inverse=True)

    lut = np.zeros((len(ids), 4), dtype=np.uint8)
    needs_alpha = padded or document.color_mode is ColorMode.RGBA
    for i, cid in enumerate(ids.tolist()):
        if cid == _NO_CELL:
            continue
        hex_color = document.colors.get(cid)
        if hex_color is None:
            count = int(np.count_nonzero(grid == cid))
            logger.warning(
                "Color id %d not found in color table (%d cells), "
                "using transparent", cid, count,
            )
            needs_alpha = True
            lut[i] = TRANSPARENT_SAMPLE
            continue
        lut[i] = decode_hex(hex_color)

    pixels = lut[inverse.reshape(-1)].reshape(height, width, 4)
    if not needs_alpha:
        pixels = np.ascontiguousarray(pixels[..., :3])
    return Image.fromarray(pixels)


def reconstruct(document: GridDocument, path: Union[str, Path]) -> None:
    """
    Render a GridDocument and save it to ``path``.

    The image format follows the file extension. Formats without alpha
    support (e.g. JPEG) receive an RGB conversion.

    Raises:
        FormatError: if the document cannot be rendered
        GridIOError: on an unknown extension or a write failure
    """
    path = Path(path)
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise GridIOError(f"Unknown image format for {path}")

    image = render(document)
    if image.mode == "RGBA" and fmt in _NO_ALPHA_FORMATS:
        logger.warning("%s cannot store alpha, saving as RGB", fmt)
        image = image.convert("RGB")

    logger.info(
        "Writing %dx%d %s image to %s", image.width, image.height, fmt, path
    )
    try:
        image.save(path, format=fmt)
    except OSError as e:
        raise GridIOError(f"Cannot write {path}: {e}") from e
