# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Block reduction.

Partitions an RGBA pixel array into square blocks and reduces each block
to one averaged sample. Blocks on the right and bottom edges are clamped
to the image and may cover fewer than ``block_size**2`` pixels.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from pixgrid.schema import TRANSPARENT_SAMPLE


def grid_shape(width: int, height: int, block_size: int) -> tuple[int, int]:
    """
    Return (rows, cols) of the grid for an image and block size.

    Rows = ceil(height / block_size), cols = ceil(width / block_size).
    """
    rows = -(-height // block_size)
    cols = -(-width // block_size)
    return rows, cols


def reduce_block(
    pixels: NDArray[np.uint8],
    x: int,
    y: int,
    block_size: int,
) -> Optional[tuple[int, int, int, int]]:
    """
    Reduce a single block to one RGBA sample.

    Args:
        pixels: Array of shape (H, W, 4) with uint8 RGBA values
        x, y: Top-left corner of the block
        block_size: Nominal block edge length

    Returns:
        (r, g, b, a) as ints, or None if the clamped extent holds no pixels.
        A sample whose alpha is 0 is always (0, 0, 0, 0).
    """
    height, width = pixels.shape[:2]
    x_end = min(x + block_size, width)
    y_end = min(y + block_size, height)

    block = pixels[y:y_end, x:x_end]
    count = block.shape[0] * block.shape[1]
    if count == 0:
        return None

    if block_size == 1:
        r, g, b, a = (int(v) for v in block[0, 0])
    else:
        # Truncating mean, each channel independent of alpha
        sums = block.reshape(-1, 4).sum(axis=0, dtype=np.int64)
        r, g, b, a = (int(v) // count for v in sums)

    if a == 0:
        return TRANSPARENT_SAMPLE
    return r, g, b, a


def reduce_blocks(
    pixels: NDArray[np.uint8],
    block_size: int,
) -> NDArray[np.uint8]:
    """
    Reduce every block of the image in one vectorized pass.

    Equivalent to calling :func:`reduce_block` at each block origin in
    row-major order.

    Args:
        pixels: Array of shape (H, W, 4) with uint8 RGBA values
        block_size: Block edge length (>= 1)

    Returns:
        Array of shape (rows, cols, 4), uint8. Empty when the image has
        no pixels.
    """
    height, width = pixels.shape[:2]
    if height == 0 or width == 0:
        return np.zeros((0, 0, 4), dtype=np.uint8)

    if block_size == 1:
        return canonicalize_transparent(pixels.copy())

    row_starts = np.arange(0, height, block_size)
    col_starts = np.arange(0, width, block_size)

    sums = np.add.reduceat(pixels, row_starts, axis=0, dtype=np.int64)
    sums = np.add.reduceat(sums, col_starts, axis=1)

    # Edge blocks are clamped, so counts differ per block
    row_sizes = np.diff(np.append(row_starts, height))
    col_sizes = np.diff(np.append(col_starts, width))
    counts = np.outer(row_sizes, col_sizes)[..., np.newaxis]

    samples = (sums // counts).astype(np.uint8)
    return canonicalize_transparent(samples)


def canonicalize_transparent(samples: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """
    Force every sample with alpha 0 to (0, 0, 0, 0), in place.

    Returns the same array for chaining.
    """
    samples[samples[..., 3] == 0] = 0
    return samples
