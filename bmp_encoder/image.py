"""In-memory raster images consumed by the encoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


BYTES_PER_PIXEL = 3

Pixel = Union[int, Sequence[int]]


@dataclass(frozen=True)
class Image:
    """A 24-bit image stored as a flat, unpadded RGB buffer.

    ``height`` is signed: a positive value means the first row of ``buffer``
    is the bottom of the picture, a negative value means it is the top.
    """

    width: int
    height: int
    buffer: bytes

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Image width must not be negative, got {self.width}")
        if isinstance(self.buffer, int):
            raise TypeError("Image buffer must be bytes-like")
        buffer = bytes(self.buffer)
        expected = self.width * abs(self.height) * BYTES_PER_PIXEL
        if len(buffer) != expected:
            raise ValueError(
                f"Buffer holds {len(buffer)} bytes, expected {expected} for "
                f"a {self.width}x{abs(self.height)} image"
            )
        object.__setattr__(self, "buffer", buffer)

    @staticmethod
    def bytes_per_pixel() -> int:
        return BYTES_PER_PIXEL

    @staticmethod
    def bits_per_pixel() -> int:
        return BYTES_PER_PIXEL * 8

    @property
    def rows(self) -> int:
        """Number of pixel rows, regardless of orientation."""

        return abs(self.height)

    @property
    def bytes_per_line(self) -> int:
        return self.width * BYTES_PER_PIXEL

    @property
    def top_down(self) -> bool:
        return self.height < 0

    @classmethod
    def from_array(cls, array: np.ndarray, *, top_down: bool = False) -> "Image":
        """Build an image from a ``(rows, width, 3)`` or ``(rows, width)`` array.

        Row 0 of the array is stored first. Grayscale arrays are expanded to
        three equal channels.
        """

        array = np.asarray(array)
        if not (np.issubdtype(array.dtype, np.integer) or array.dtype == np.bool_):
            raise ValueError(f"Expected an integer pixel array, got dtype {array.dtype}")
        if array.ndim == 2:
            array = np.repeat(array[..., np.newaxis], BYTES_PER_PIXEL, axis=2)
        if array.ndim != 3 or array.shape[2] != BYTES_PER_PIXEL:
            raise ValueError(
                f"Expected an array of shape (rows, width, 3), got {array.shape}"
            )
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError("Pixel values must lie within [0, 255]")

        data = np.ascontiguousarray(array.astype(np.uint8, copy=False))
        rows, width = int(data.shape[0]), int(data.shape[1])
        height = -rows if top_down else rows
        return cls(width=width, height=height, buffer=data.tobytes())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Pixel]], *, top_down: bool = False) -> "Image":
        """Build an image from nested rows of RGB triples or grayscale values."""

        rows = list(rows)
        if not rows:
            raise ValueError("Image must contain at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("Image rows must not be empty")

        buffer = bytearray()
        for row in rows:
            if len(row) != width:
                raise ValueError("Image rows must have equal length")
            for value in row:
                if isinstance(value, (int, np.integer)):
                    v = int(value) & 0xFF
                    buffer.extend((v, v, v))
                else:
                    r, g, b = value
                    buffer.extend((int(r) & 0xFF, int(g) & 0xFF, int(b) & 0xFF))

        height = -len(rows) if top_down else len(rows)
        return cls(width=width, height=height, buffer=bytes(buffer))

    @classmethod
    def from_pil(cls, picture, *, top_down: bool = True) -> "Image":
        """Build an image from a Pillow image, keeping its visual orientation.

        Pillow rows run top to bottom. With ``top_down=False`` the rows are
        flipped so the result is stored bottom-up with a positive height.
        """

        rgb = np.asarray(picture.convert("RGB"), dtype=np.uint8)
        if not top_down:
            rgb = rgb[::-1]
        return cls.from_array(rgb, top_down=top_down)
