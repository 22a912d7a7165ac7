# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Pixgrid -- image to color-id grid converter.

Partitions an image into square blocks, averages each block, and gives
every distinct color a small integer id. The result is a JSON document
holding the id grid and an id -> hex color table, from which the image
can be rebuilt.

Quick start::

    from pixgrid import pixelate, to_json, reconstruct

    doc = pixelate("image.png", block_size=8)
    print(to_json(doc))
    reconstruct(doc, "blocky.png")
"""

from __future__ import annotations

__version__ = "1.0.0"

from pixgrid.errors import (
    FormatError,
    GridIOError,
    ImageDecodeError,
    InvalidArgumentError,
    PixgridError,
)
from pixgrid.measure import PixelateConfig, map_image, pixelate
from pixgrid.runtime import (
    from_json,
    read_document,
    reconstruct,
    render,
    to_json,
    write_document,
)
from pixgrid.schema import ColorMode, GridDocument

__all__ = [
    # Core API
    "pixelate",
    "map_image",
    "reconstruct",
    "render",
    "to_json",
    "from_json",
    "write_document",
    "read_document",
    # Types
    "GridDocument",
    "ColorMode",
    "PixelateConfig",
    # Errors
    "PixgridError",
    "ImageDecodeError",
    "InvalidArgumentError",
    "FormatError",
    "GridIOError",
    # Version
    "__version__",
]
