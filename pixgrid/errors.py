# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

"""
Error types raised by pixgrid.

Every fatal failure derives from PixgridError so callers (and the CLI) can
catch one type. A grid cell that references an unknown color id is not an
error: it is logged as a warning and rendered transparent.
"""

from __future__ import annotations


class PixgridError(Exception):
    """Base class for all pixgrid errors."""


class ImageDecodeError(PixgridError):
    """The input image could not be read or is in an unsupported format."""


class InvalidArgumentError(PixgridError, ValueError):
    """A caller-supplied parameter is out of range (e.g. block size 0)."""


class FormatError(PixgridError, ValueError):
    """A hex color string or grid document is malformed."""


class GridIOError(PixgridError, OSError):
    """A file could not be opened, created or written."""


__all__ = [
    "PixgridError",
    "ImageDecodeError",
    "InvalidArgumentError",
    "FormatError",
    "GridIOError",
]
