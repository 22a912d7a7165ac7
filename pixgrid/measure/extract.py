# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Main pixelation API.

This is the primary entry point for turning an image into a GridDocument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from pixgrid.errors import GridIOError, ImageDecodeError, InvalidArgumentError
from pixgrid.schema import ColorMode, GridDocument
from pixgrid.measure.blocks import grid_shape, reduce_blocks
from pixgrid.measure.table import ColorTable

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 10
DEFAULT_TOLERANCE = 0.0

ImageInput = Union[str, Path, NDArray[np.uint8]]


@dataclass(frozen=True)
class PixelateConfig:
    """Configuration for one pixelation run."""

    # Edge length of a square block in pixels; 1 = map mode
    block_size: int = DEFAULT_BLOCK_SIZE

    # Euclidean radius for fuzzy color matching; 0 = exact matches only
    tolerance: float = DEFAULT_TOLERANCE

    # Hex layout of the color table. None = RGBA if the image has alpha
    mode: Optional[ColorMode] = None

    def __post_init__(self) -> None:
        integral = isinstance(self.block_size, (int, np.integer))
        if isinstance(self.block_size, bool) or not integral:
            raise InvalidArgumentError(
                f"Block size must be an integer, got {self.block_size!r}"
            )
        if self.block_size < 1:
            raise InvalidArgumentError("Block size must be greater than 0")
        if self.tolerance < 0:
            raise InvalidArgumentError(
                f"Tolerance must be >= 0, got {self.tolerance}"
            )


def pixelate(
    image: ImageInput,
    *,
    block_size: int = DEFAULT_BLOCK_SIZE,
    tolerance: float = DEFAULT_TOLERANCE,
    mode: Optional[ColorMode] = None,
) -> GridDocument:
    """
    Reduce an image to a grid of color identifiers.

    Args:
        image: One of:
            - Path to an image file (str or Path). Any format Pillow reads.
            - NumPy array of shape (H, W, 3) or (H, W, 4), uint8. A 3-channel
              array is treated as fully opaque.
        block_size: Edge length of each block (default: 10)
        tolerance: Fuzzy match radius over RGB(A) channels (default: 0.0,
            exact matching only)
        mode: Force RGBA or RGB hex strings. By default RGBA is used when the
            image carries an alpha channel or transparency, RGB otherwise.

    Returns:
        GridDocument with ceil(H / block_size) rows of
        ceil(W / block_size) identifiers.

    Raises:
        InvalidArgumentError: block_size < 1 or tolerance < 0
        ImageDecodeError: the file is not a readable image
        GridIOError: the file cannot be opened

    Example:
        >>> doc = pixelate("sprite.png", block_size=4)
        >>> doc.matrix[0]
        (1, 1, 2, 0)
        >>> doc.colors[1]
        '#ff0000ff'
    """
    config = PixelateConfig(block_size=block_size, tolerance=tolerance, mode=mode)
    return pixelate_with_config(image, config)


def map_image(
    image: ImageInput,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    mode: Optional[ColorMode] = None,
) -> GridDocument:
    """Pixelate with one block per pixel ("map" mode)."""
    return pixelate(image, block_size=1, tolerance=tolerance, mode=mode)


def pixelate_with_config(image: ImageInput, config: PixelateConfig) -> GridDocument:
    """Run :func:`pixelate` from a prepared PixelateConfig."""
    pixels, has_alpha = _load_image(image)
    height, width = pixels.shape[:2]

    mode = config.mode
    if mode is None:
        mode = ColorMode.RGBA if has_alpha else ColorMode.RGB

    rows, cols = grid_shape(width, height, config.block_size)
    logger.info(
        "Pixelating %dx%d image with block size %d -> %dx%d grid (%s)",
        width, height, config.block_size, cols, rows, mode.value,
    )

    document = build_grid(
        pixels,
        block_size=config.block_size,
        tolerance=config.tolerance,
        mode=mode,
    )
    logger.info("Found %d distinct colors", len(document.colors))
    return document


def build_grid(
    pixels: NDArray[np.uint8],
    block_size: int,
    tolerance: float = DEFAULT_TOLERANCE,
    mode: ColorMode = ColorMode.RGBA,
) -> GridDocument:
    """
    Build the identifier grid and color table for an RGBA pixel array.

    Blocks are visited in row-major order. Each block's sample is resolved
    against every color seen before it, so this loop cannot be reordered.

    Args:
        pixels: Array of shape (H, W, 4), uint8 RGBA
        block_size: Block edge length (>= 1)
        tolerance: Fuzzy match radius (0 disables)
        mode: Hex layout of the color table

    Returns:
        GridDocument. Empty when the image has no pixels.
    """
    samples = reduce_blocks(pixels, block_size)
    table = ColorTable(mode=mode, tolerance=tolerance)

    matrix = tuple(
        tuple(table.resolve(tuple(sample)) for sample in row)
        for row in samples.tolist()
    )
    return GridDocument(matrix=matrix, colors=table.colors)


def _load_image(image: ImageInput) -> tuple[NDArray[np.uint8], bool]:
    """
    Load image from file or validate array.

    Returns:
        (pixels, has_alpha) where pixels has shape (H, W, 4)
    """
    if isinstance(image, (str, Path)):
        from PIL import Image, UnidentifiedImageError

        try:
            with Image.open(image) as img:
                img.load()
                has_alpha = "A" in img.getbands() or "transparency" in img.info
                pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
        except UnidentifiedImageError as e:
            raise ImageDecodeError(f"Cannot identify image file {image}") from e
        except Image.DecompressionBombError as e:
            raise ImageDecodeError(f"Refusing to decode {image}: {e}") from e
        except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
            raise GridIOError(f"Cannot open {image}: {e.strerror}") from e
        except OSError as e:
            raise ImageDecodeError(f"Cannot decode image {image}: {e}") from e

        return pixels, has_alpha

    if isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise InvalidArgumentError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {image.shape}"
            )
        if image.dtype != np.uint8:
            raise InvalidArgumentError(f"Expected uint8 array, got {image.dtype}")

        if image.shape[2] == 4:
            return image, True

        alpha = np.full(image.shape[:2] + (1,), 255, dtype=np.uint8)
        return np.concatenate([image, alpha], axis=2), False

    raise TypeError(f"Expected file path or numpy array, got {type(image)}")
