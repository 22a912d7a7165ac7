# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
GridDocument -- the persisted form of a pixelated image.

A document is exactly two things:

- ``matrix``: rows of color identifiers, one entry per block, row-major
- ``colors``: identifier -> canonical hex string

Identifier 0 is reserved for fully transparent blocks. Identifiers 1..N are
handed out in the order colors are first seen during the block scan.

On disk the document is a UTF-8 JSON object::

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

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pixgrid.errors import FormatError


# =============================================================================
# Color Modes
# =============================================================================


class ColorMode(Enum):
    """
    Channel layout of canonical hex strings.

    RGBA hex strings carry alpha (``#rrggbbaa``) and fuzzy distances use all
    four channels. RGB hex strings drop alpha (``#rrggbb``).
    """
    RGB = "rgb"
    RGBA = "rgba"

    @property
    def channels(self) -> int:
        return 4 if self is ColorMode.RGBA else 3

    @property
    def hex_length(self) -> int:
        """Length of a canonical hex string, including the leading ``#``."""
        return 1 + 2 * self.channels


TRANSPARENT_ID = 0
TRANSPARENT_SAMPLE = (0, 0, 0, 0)


# Always 8 digits, so it never collides with an opaque black in RGB mode
TRANSPARENT_HEX = "#00000000"

# Identifiers are unsigned 32-bit values
MAX_ID = 0xFFFFFFFF


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class GridDocument:
    """
    Identifier grid plus its color lookup table.

    Attributes:
        matrix: Rows of identifiers. All rows produced by the grid builder
            share one length; parsed documents may be ragged.
        colors: Identifier -> hex string. Every identifier in ``matrix`` is
            expected to have an entry; a missing one is tolerated at
            reconstruction time.

    Documents compare by value but are unhashable, since ``colors`` is a
    dict.
    """
    matrix: tuple[tuple[int, ...], ...]
    colors: dict[int, str]

    __hash__ = None  # type: ignore[assignment]

    @property
    def height(self) -> int:
        """Number of grid rows."""
        return len(self.matrix)

    @property
    def width(self) -> int:
        """Number of grid columns, taken from the first row."""
        return len(self.matrix[0]) if self.matrix else 0

    @property
    def color_mode(self) -> ColorMode:
        """RGBA if any color carries alpha, RGB otherwise."""
        if any(len(h) == ColorMode.RGBA.hex_length for h in self.colors.values()):
            return ColorMode.RGBA
        return ColorMode.RGB

    def ids(self) -> set[int]:
        """All identifiers referenced by the grid."""
        return {cid for row in self.matrix for cid in row}

    def missing_ids(self) -> set[int]:
        """Identifiers referenced by the grid but absent from ``colors``."""
        return self.ids() - self.colors.keys()

    def to_dict(self) -> dict:
        """
        Serialize to a JSON-ready dictionary.

        Color keys are stringified and ordered by numeric identifier.
        """
        return {
            "matrix": [list(row) for row in self.matrix],
            "colors": {str(cid): self.colors[cid] for cid in sorted(self.colors)},
        }

    @classmethod
    def from_dict(cls, data: Any) -> GridDocument:
        """
        Deserialize from a parsed JSON object.

        Raises:
            FormatError: if ``matrix`` or ``colors`` is absent or malformed,
                or if ``matrix`` is empty.
        """
        if not isinstance(data, dict):
            raise FormatError(
                f"Expected a JSON object at top level, got {type(data).__name__}"
            )
        if "matrix" not in data:
            raise FormatError("Missing required key 'matrix'")
        if "colors" not in data:
            raise FormatError("Missing required key 'colors'")

        return cls(
            matrix=_parse_matrix(data["matrix"]),
            colors=_parse_colors(data["colors"]),
        )


def _is_identifier(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_ID


def _parse_matrix(raw: Any) -> tuple[tuple[int, ...], ...]:
    if not isinstance(raw, list):
        raise FormatError(f"'matrix' must be an array, got {type(raw).__name__}")
    if not raw:
        raise FormatError("'matrix' is empty")

    rows = []
    for y, row in enumerate(raw):
        if not isinstance(row, list):
            raise FormatError(f"'matrix' row {y} must be an array")
        for x, cid in enumerate(row):
            if not _is_identifier(cid):
                raise FormatError(
                    f"'matrix'[{y}][{x}] must be an integer in [0, {MAX_ID}], "
                    f"got {cid!r}"
                )
        rows.append(tuple(row))
    return tuple(rows)


def _parse_colors(raw: Any) -> dict[int, str]:
    from pixgrid.measure.codec import decode_hex

    if not isinstance(raw, dict):
        raise FormatError(f"'colors' must be an object, got {type(raw).__name__}")

    colors: dict[int, str] = {}
    for key, value in raw.items():
        if not (isinstance(key, str) and key.isdigit() and key.isascii()):
            raise FormatError(f"'colors' key {key!r} is not a non-negative integer")
        if key != str(int(key)):
            raise FormatError(f"'colors' key {key!r} is not in canonical form")
        if not _is_identifier(int(key)):
            raise FormatError(f"'colors' key {key!r} exceeds {MAX_ID}")
        if not isinstance(value, str):
            raise FormatError(f"'colors'[{key}] must be a hex string, got {value!r}")
        decode_hex(value)
        colors[int(key)] = value
    return colors
