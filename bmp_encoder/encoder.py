"""Encode :class:`~bmp_encoder.image.Image` values as 24-bit BMP files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import IoFailure
from .headers import build_headers
from .image import Image
from .pixels import pack_rows, swap_channels

logger = logging.getLogger(__name__)


def _chunks(image: Image) -> Iterator[bytes]:
    # Headers are built before anything is yielded so dimension errors
    # surface ahead of the first write.
    file_header, info_header = build_headers(image)
    logger.debug(
        "Encoding %dx%d image: %d pixel bytes, %d bytes total",
        image.width,
        image.height,
        info_header.image_size,
        file_header.file_size,
    )
    pixels = swap_channels(image.buffer)
    return _emit(file_header.pack(), info_header.pack(), pack_rows(pixels, image.width))


def _emit(file_header: bytes, info_header: bytes, rows: Iterator[bytes]) -> Iterator[bytes]:
    yield file_header
    yield info_header
    yield from rows


def encode(image: Image) -> bytes:
    """Return the complete BMP file image for ``image``."""

    return b"".join(_chunks(image))


def encode_into(image: Image, sink: BinaryIO) -> int:
    """Write the BMP file image to ``sink`` and return the number of bytes written.

    A write error or short write raises :class:`IoFailure`. The sink may then
    hold a partial file, which callers must discard.
    """

    total = 0
    for chunk in _chunks(image):
        try:
            written = sink.write(chunk)
        except OSError as exc:
            raise IoFailure(f"Output rejected write after {total} bytes: {exc}") from exc
        if written is not None and written != len(chunk):
            raise IoFailure(
                f"Short write after {total} bytes: {written} of {len(chunk)} accepted"
            )
        total += len(chunk)
    return total


def save_bitmap(path: str | Path, image: Image) -> Path:
    """Encode ``image`` and write it to ``path``."""

    path = Path(path)
    data = encode(image)
    try:
        with path.open("wb") as fh:
            fh.write(data)
    except OSError as exc:
        raise IoFailure(f"Could not write {path}: {exc}") from exc
    return path
