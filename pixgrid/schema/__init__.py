# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Schema definitions for grid documents.

A GridDocument is immutable once built; the reconstructor and serializers
only read it.
"""

from pixgrid.schema.grid_document import (
    MAX_ID,
    TRANSPARENT_HEX,
    TRANSPARENT_ID,
    TRANSPARENT_SAMPLE,
    ColorMode,
    GridDocument,
)

__all__ = [
    # Reserved transparent identity
    "TRANSPARENT_ID",
    "TRANSPARENT_HEX",
    "TRANSPARENT_SAMPLE",
    # Largest identifier a document may hold
    "MAX_ID",
    # Types
    "ColorMode",
    "GridDocument",
]
