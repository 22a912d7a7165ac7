# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Pixelation core for pixgrid.

Block reduction, color identifier assignment and grid assembly. All
operations are deterministic: the same image and settings always produce
the same document.
"""

from pixgrid.measure.extract import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_TOLERANCE,
    PixelateConfig,
    build_grid,
    map_image,
    pixelate,
    pixelate_with_config,
)

__all__ = [
    "pixelate",
    "map_image",
    "pixelate_with_config",
    "build_grid",
    "PixelateConfig",
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_TOLERANCE",
]
