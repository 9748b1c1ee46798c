"""Exceptions raised while encoding bitmaps."""

from __future__ import annotations


class BmpError(Exception):
    """Base class for encoder failures."""


class DimensionOverflow(BmpError, OverflowError):
    """A dimension or size does not fit its header field."""


class IoFailure(BmpError, OSError):
    """The output sink rejected a write."""
