# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Document runtime for pixgrid.

Persistence of GridDocuments as JSON and reconstruction of images from
them. The runtime never modifies document content.
"""

from pixgrid.runtime.reconstruct import reconstruct, render
from pixgrid.runtime.serializers import (
    from_json,
    read_document,
    to_json,
    write_document,
)

__all__ = [
    "to_json",
    "from_json",
    "write_document",
    "read_document",
    "render",
    "reconstruct",
]
