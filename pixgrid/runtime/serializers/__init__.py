# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Serializers for GridDocument persistence.

Serialization never modifies the document: parse then serialize is
byte-identical.
"""

from pixgrid.runtime.serializers.document import (
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
]
