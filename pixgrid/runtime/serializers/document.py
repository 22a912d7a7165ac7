# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
JSON serializer for GridDocument.

The layout is fixed so that output stays diffable and byte-stable:
matrix rows are compact arrays, one per line; the color table is a
regular 2-space pretty-printed object ordered by identifier.
Serializing a parsed document reproduces the original text exactly.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pixgrid.errors import FormatError, GridIOError
from pixgrid.schema import GridDocument


def to_json(document: GridDocument) -> str:
    """Serialize a GridDocument to JSON text.

    Args:
        document: The GridDocument to serialize.

    Returns:
        JSON string without a trailing newline.

    Example::

        {
          "matrix": [
            [1,1],
            [2,2]
          ],
          "colors": {
            "1": "#ff0000",
            "2": "#00ff00"
          }
        }
    """
    data = document.to_dict()

    rows = [json.dumps(row, separators=(",", ":")) for row in data["matrix"]]
    if rows:
        matrix = "[\n" + ",\n".join(f"    {row}" for row in rows) + "\n  ]"
    else:
        matrix = "[]"

    # Nest the pretty-printed object one level in
    colors = json.dumps(data["colors"], indent=2).replace("\n", "\n  ")

    lines = [
        "{",
        f'  "matrix": {matrix},',
        f'  "colors": {colors}',
        "}",
    ]
    return "\n".join(lines)


def from_json(text: Union[str, bytes]) -> GridDocument:
    """Parse JSON text into a GridDocument.

    Raises:
        FormatError: if the text is not JSON, or ``matrix``/``colors`` is
            missing or malformed, or ``matrix`` is empty.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e}") from e
    return GridDocument.from_dict(data)


def write_document(document: GridDocument, path: Union[str, Path]) -> None:
    """Write a GridDocument to ``path`` as UTF-8 JSON."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(to_json(document))
            f.write("\n")
    except OSError as e:
        raise GridIOError(f"Cannot write {path}: {e.strerror or e}") from e


def read_document(path: Union[str, Path]) -> GridDocument:
    """Read and parse a GridDocument from ``path``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not valid UTF-8") from e
    except OSError as e:
        raise GridIOError(f"Cannot read {path}: {e.strerror or e}") from e
    return from_json(text)
