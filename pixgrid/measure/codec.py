# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Color codec: RGBA samples <-> canonical hex strings.

Hex strings are lowercase and fixed-width, two digits per channel in
r, g, b[, a] order. RGB mode omits alpha.

Distances are plain Euclidean over the channels of the active mode. There
is no perceptual weighting.
"""

from __future__ import annotations

import math

from pixgrid.errors import FormatError
from pixgrid.schema import ColorMode

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

Sample = tuple[int, int, int, int]


def encode_hex(
    r: int,
    g: int,
    b: int,
    a: int = 255,
    mode: ColorMode = ColorMode.RGBA,
) -> str:
    """
    Convert channel values to a canonical hex string.

    Args:
        r, g, b, a: Channel values in [0, 255]
        mode: RGBA emits ``#rrggbbaa``; RGB emits ``#rrggbb``

    Returns:
        Hex string like ``"#7f7f00ff"``
    """
    if mode is ColorMode.RGB:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def hex_mode(hex_color: str) -> ColorMode:
    """
    Classify a hex string by its length.

    Raises:
        FormatError: if the length matches neither mode
    """
    for mode in (ColorMode.RGBA, ColorMode.RGB):
        if len(hex_color) == mode.hex_length:
            return mode
    raise FormatError(
        f"Invalid hex color {hex_color!r}: expected #rrggbbaa or #rrggbb"
    )


def decode_hex(hex_color: str) -> Sample:
    """
    Convert a hex string back to an RGBA sample.

    Both ``#rrggbbaa`` and ``#rrggbb`` are accepted; the latter decodes
    with alpha 255.

    Raises:
        FormatError: on a missing ``#``, a wrong length, or a non-hex digit
    """
    if not isinstance(hex_color, str) or not hex_color.startswith("#"):
        raise FormatError(f"Invalid hex color {hex_color!r}: must start with '#'")

    mode = hex_mode(hex_color)
    digits = hex_color[1:]
    if not _HEX_DIGITS.issuperset(digits):
        raise FormatError(f"Invalid hex color {hex_color!r}: non-hex character")

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if mode is ColorMode.RGBA else 255
    return r, g, b, a


def distance(c1: Sample, c2: Sample, mode: ColorMode = ColorMode.RGBA) -> float:
    """
    Euclidean distance between two samples.

    Uses r, g, b and, in RGBA mode, a.
    """
    n = mode.channels
    return math.sqrt(sum((int(p) - int(q)) ** 2 for p, q in zip(c1[:n], c2[:n])))
