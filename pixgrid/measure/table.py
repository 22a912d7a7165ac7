# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Color table: assigns small integer identifiers to canonical colors.

Resolution order for each sample:

1. Exact match on the canonical hex string
2. Fuzzy match (tolerance > 0, opaque samples only): the FIRST palette
   entry, in insertion order, within ``tolerance``. Not the nearest one.
3. Otherwise a new identifier

A fuzzy hit also records the new hex string as an alias of the matched
identifier, so repeats of that exact color skip the palette scan.

Transparent samples always resolve to identifier 0 and never enter the
palette.
"""

from __future__ import annotations

import logging

from pixgrid.schema import TRANSPARENT_HEX, TRANSPARENT_ID, ColorMode
from pixgrid.measure.codec import Sample, distance, encode_hex

logger = logging.getLogger(__name__)


class ColorTable:
    """
    Bidirectional id <-> hex mapping built during one grid scan.

    Attributes:
        mode: Channel layout for hex strings and distances
        tolerance: Fuzzy-match radius; 0 disables fuzzy matching
    """

    def __init__(self, mode: ColorMode = ColorMode.RGBA, tolerance: float = 0.0):
        self.mode = mode
        self.tolerance = tolerance

        self._hex_to_id: dict[str, int] = {TRANSPARENT_HEX: TRANSPARENT_ID}
        self._id_to_hex: dict[int, str] = {}
        self._palette: list[tuple[int, Sample]] = []
        self._next_id = 1
        self.used_transparent = False

    def __len__(self) -> int:
        """Number of non-transparent identifiers handed out."""
        return self._next_id - 1

    def resolve(self, sample: Sample) -> int:
        """Return the identifier for a sample, assigning one if needed."""
        r, g, b, a = sample
        if a == 0:
            hex_color = TRANSPARENT_HEX
        else:
            hex_color = encode_hex(r, g, b, a, self.mode)

        cid = self._hex_to_id.get(hex_color)
        if cid is not None:
            if cid == TRANSPARENT_ID:
                self.used_transparent = True
            return cid

        if self.tolerance > 0:
            cid = self._fuzzy_lookup(sample)
            if cid is not None:
                logger.debug(
                    "%s within tolerance of id %d (%s)",
                    hex_color, cid, self._id_to_hex[cid],
                )
                self._hex_to_id[hex_color] = cid
                return cid

        cid = self._next_id
        self._next_id += 1
        self._hex_to_id[hex_color] = cid
        self._id_to_hex[cid] = hex_color
        self._palette.append((cid, sample))
        return cid

    def _fuzzy_lookup(self, sample: Sample) -> int | None:
        # First match wins, in insertion order
        for cid, known in self._palette:
            if distance(sample, known, self.mode) <= self.tolerance:
                return cid
        return None

    @property
    def colors(self) -> dict[int, str]:
        """
        Identifier -> canonical hex, in identifier order.

        Identifier 0 is included only if some sample resolved to it.
        """
        colors: dict[int, str] = {}
        if self.used_transparent:
            colors[TRANSPARENT_ID] = TRANSPARENT_HEX
        colors.update(self._id_to_hex)
        return colors
