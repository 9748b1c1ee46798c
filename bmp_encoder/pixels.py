"""Channel reordering and row packing for 24-bit pixel data."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from .image import BYTES_PER_PIXEL


def transform_pixel(triplet: Sequence[int]) -> Tuple[int, int, int]:
    """Swap the first and last channel of one pixel."""

    first, middle, last = triplet
    return last, middle, first


def swap_channels(buffer: bytes) -> bytes:
    """Return a copy of ``buffer`` with bytes 0 and 2 of every pixel swapped.

    BMP stores colour as blue, green, red, the reverse of the RGB source
    order. The input is left untouched.
    """

    if len(buffer) % BYTES_PER_PIXEL:
        raise ValueError(
            f"Buffer length {len(buffer)} is not a multiple of {BYTES_PER_PIXEL}"
        )
    pixels = np.frombuffer(buffer, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
    return pixels[:, ::-1].tobytes()


def row_padding(width: int) -> int:
    """Number of zero bytes that bring a row of ``width`` pixels to 4-byte alignment.

    With three bytes per pixel ``width % 4`` is the same count as
    ``(4 - 3 * width % 4) % 4``.
    """

    return width % 4


def padded_row_size(width: int) -> int:
    return width * BYTES_PER_PIXEL + row_padding(width)


def pack_rows(pixels: bytes, width: int) -> Iterator[bytes]:
    """Yield each row of ``pixels`` followed by its padding, in buffer order."""

    bytes_per_line = width * BYTES_PER_PIXEL
    if bytes_per_line == 0:
        return
    padding = b"\x00" * row_padding(width)
    for offset in range(0, len(pixels), bytes_per_line):
        yield pixels[offset : offset + bytes_per_line] + padding
