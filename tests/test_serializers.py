# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""Tests for the JSON document serializer."""

import json

import numpy as np
import pytest

from pixgrid import map_image, pixelate
from pixgrid.errors import FormatError, GridIOError
from pixgrid.runtime import from_json, read_document, to_json, write_document
from pixgrid.schema import GridDocument

EXPECTED_MAP_JSON = """\
{
  "matrix": [
    [1,1],
    [2,2]
  ],
  "colors": {
    "1": "#ff0000",
    "2": "#00ff00"
  }
}"""


def _red_green_image():
    img = np.zeros((2, 2, 3), dtype=np.uint8)
    img[0] = [255, 0, 0]
    img[1] = [0, 255, 0]
    return img


def _noisy_document():
    rng = np.random.default_rng(11)
    img = rng.integers(0, 256, size=(9, 14, 4), dtype=np.uint8)
    img[::3, ::2, 3] = 0
    return pixelate(img, block_size=2, tolerance=40.0)


@pytest.fixture
def map_document():
    return map_image(_red_green_image())


class TestToJson:

    def test_exact_layout(self, map_document):
        assert to_json(map_document) == EXPECTED_MAP_JSON

    def test_parses_as_json(self, map_document):
        data = json.loads(to_json(map_document))
        assert data == {
            "matrix": [[1, 1], [2, 2]],
            "colors": {"1": "#ff0000", "2": "#00ff00"},
        }

    def test_one_row_per_line(self):
        doc = _noisy_document()
        lines = to_json(doc).splitlines()
        row_lines = [line for line in lines if line.startswith("    [")]
        assert len(row_lines) == doc.height
        assert row_lines[-1].endswith("]")
        assert all(line.endswith("],") for line in row_lines[:-1])

    def test_single_block(self):
        doc = GridDocument(matrix=((1,),), colors={1: "#7f7f00"})
        assert to_json(doc) == (
            '{\n  "matrix": [\n    [1]\n  ],\n'
            '  "colors": {\n    "1": "#7f7f00"\n  }\n}'
        )

    def test_empty_document(self):
        doc = GridDocument(matrix=(), colors={})
        assert to_json(doc) == '{\n  "matrix": [],\n  "colors": {}\n}'

    def test_colors_in_numeric_order(self):
        doc = GridDocument(matrix=((10, 2),), colors={10: "#0a0a0a", 2: "#020202"})
        data = to_json(doc)
        assert data.index('"2"') < data.index('"10"')


class TestFromJson:

    def test_parse(self, map_document):
        assert from_json(EXPECTED_MAP_JSON) == map_document

    def test_reserialize_is_identical(self):
        text = to_json(_noisy_document())
        assert to_json(from_json(text)) == text
        assert to_json(from_json(to_json(from_json(text)))) == text

    def test_accepts_compact_input(self, map_document):
        compact = json.dumps(map_document.to_dict(), separators=(",", ":"))
        assert to_json(from_json(compact)) == EXPECTED_MAP_JSON

    def test_invalid_json(self):
        with pytest.raises(FormatError, match="Invalid JSON"):
            from_json('{"matrix": [[1]')

    def test_missing_colors(self):
        with pytest.raises(FormatError, match="colors"):
            from_json('{"matrix": [[1]]}')

    def test_empty_matrix(self):
        with pytest.raises(FormatError, match="empty"):
            from_json('{"matrix": [], "colors": {}}')


class TestFiles:

    def test_write_then_read(self, tmp_path, map_document):
        path = tmp_path / "grid.json"
        write_document(map_document, path)
        assert path.read_text(encoding="utf-8") == EXPECTED_MAP_JSON + "\n"
        assert read_document(path) == map_document

    def test_read_missing(self, tmp_path):
        with pytest.raises(GridIOError):
            read_document(tmp_path / "missing.json")

    def test_read_not_utf8(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(FormatError):
            read_document(path)

    def test_write_to_missing_directory(self, tmp_path, map_document):
        with pytest.raises(GridIOError):
            write_document(map_document, tmp_path / "nope" / "grid.json")
