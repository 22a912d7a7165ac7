# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""Tests for the hex color codec and sample distance."""

import pytest

from pixgrid.errors import FormatError
from pixgrid.measure.codec import decode_hex, distance, encode_hex, hex_mode
from pixgrid.schema import ColorMode


class TestEncodeHex:

    def test_rgba_default(self):
        assert encode_hex(255, 0, 0) == "#ff0000ff"

    def test_rgba_explicit_alpha(self):
        assert encode_hex(127, 127, 0, 128) == "#7f7f0080"

    def test_rgb_drops_alpha(self):
        assert encode_hex(0, 255, 0, 10, ColorMode.RGB) == "#00ff00"

    def test_zero_padded(self):
        assert encode_hex(1, 2, 3, 4) == "#01020304"

    def test_lowercase(self):
        assert encode_hex(171, 205, 239, 255) == "#abcdefff"


class TestDecodeHex:

    def test_rgba(self):
        assert decode_hex("#7f7f0080") == (127, 127, 0, 128)

    def test_rgb_is_opaque(self):
        assert decode_hex("#ff0000") == (255, 0, 0, 255)

    def test_uppercase_accepted(self):
        assert decode_hex("#ABCDEF") == (171, 205, 239, 255)

    def test_transparent(self):
        assert decode_hex("#00000000") == (0, 0, 0, 0)

    def test_roundtrip_rgba(self):
        assert decode_hex(encode_hex(12, 34, 56, 78)) == (12, 34, 56, 78)

    @pytest.mark.parametrize("bad", [
        "ff0000ff",      # no '#'
        "#ff00",         # too short
        "#ff0000f",      # between lengths
        "#ff0000ff00",   # too long
        "#gg0000ff",     # non-hex
        "#ff 000",       # space
        "",
    ])
    def test_malformed(self, bad):
        with pytest.raises(FormatError):
            decode_hex(bad)

    def test_non_string(self):
        with pytest.raises(FormatError):
            decode_hex(0xFF0000)


class TestHexMode:

    def test_rgba(self):
        assert hex_mode("#00000000") is ColorMode.RGBA

    def test_rgb(self):
        assert hex_mode("#000000") is ColorMode.RGB

    def test_invalid_length(self):
        with pytest.raises(FormatError, match="expected"):
            hex_mode("#0000")


class TestDistance:

    def test_identical(self):
        assert distance((10, 20, 30, 255), (10, 20, 30, 255)) == 0.0

    def test_pythagorean(self):
        assert distance((0, 0, 0, 255), (3, 4, 0, 255)) == pytest.approx(5.0)

    def test_rgba_includes_alpha(self):
        assert distance((0, 0, 0, 0), (0, 0, 0, 255)) == pytest.approx(255.0)

    def test_rgb_ignores_alpha(self):
        assert distance((0, 0, 0, 0), (0, 0, 0, 255), ColorMode.RGB) == 0.0

    def test_symmetric(self):
        a, b = (200, 10, 40, 90), (15, 220, 0, 255)
        assert distance(a, b) == pytest.approx(distance(b, a))
