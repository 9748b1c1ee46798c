"""File and info headers for uncompressed 24-bit BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .errors import DimensionOverflow
from .image import Image
from .pixels import padded_row_size


BMP_MAGIC = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
PIXELS_PER_METER_72_DPI = 2835

_FILE_HEADER_FORMAT = "<2sIHHI"
_INFO_HEADER_FORMAT = "<IiiHHIIiiII"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1


class CompressionMethod(IntEnum):
    BI_RGB = 0


@dataclass(frozen=True)
class InfoHeader:
    """BITMAPINFOHEADER fields, in file order."""

    header_size: int
    image_width: int
    image_height: int
    color_planes: int
    bits_per_pixel: int
    compression_method: CompressionMethod
    # Row-padded size of the pixel data in bytes.
    image_size: int
    resolution_x: int
    resolution_y: int
    palette_size: int
    num_important_colors: int

    @classmethod
    def for_image(cls, image: Image) -> "InfoHeader":
        _check_int32("width", image.width)
        _check_int32("height", image.height)

        image_size = padded_row_size(image.width) * image.rows
        if image_size + PIXEL_DATA_OFFSET > _UINT32_MAX:
            raise DimensionOverflow(
                f"Pixel data of {image_size} bytes does not fit a 32-bit file size"
            )

        return cls(
            header_size=INFO_HEADER_SIZE,
            image_width=image.width,
            image_height=image.height,
            color_planes=1,
            bits_per_pixel=image.bits_per_pixel(),
            compression_method=CompressionMethod.BI_RGB,
            image_size=image_size,
            resolution_x=PIXELS_PER_METER_72_DPI,
            resolution_y=PIXELS_PER_METER_72_DPI,
            palette_size=0,
            num_important_colors=0,
        )

    def pack(self) -> bytes:
        return struct.pack(
            _INFO_HEADER_FORMAT,
            self.header_size,
            self.image_width,
            self.image_height,
            self.color_planes,
            self.bits_per_pixel,
            int(self.compression_method),
            self.image_size,
            self.resolution_x,
            self.resolution_y,
            self.palette_size,
            self.num_important_colors,
        )


@dataclass(frozen=True)
class FileHeader:
    """BITMAPFILEHEADER fields, in file order."""

    magic: bytes
    # Total size of the file in bytes.
    file_size: int
    reserved0: int
    reserved1: int
    # Byte index at which the pixel data starts.
    image_offset: int

    @classmethod
    def for_info_header(cls, info: InfoHeader) -> "FileHeader":
        return cls(
            magic=BMP_MAGIC,
            file_size=info.image_size + PIXEL_DATA_OFFSET,
            reserved0=0,
            reserved1=0,
            image_offset=PIXEL_DATA_OFFSET,
        )

    def pack(self) -> bytes:
        return struct.pack(
            _FILE_HEADER_FORMAT,
            self.magic,
            self.file_size,
            self.reserved0,
            self.reserved1,
            self.image_offset,
        )


def build_headers(image: Image) -> Tuple[FileHeader, InfoHeader]:
    """Compute both headers for ``image``."""

    info = InfoHeader.for_image(image)
    return FileHeader.for_info_header(info), info


def _check_int32(name: str, value: int) -> None:
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise DimensionOverflow(f"Image {name} {value} does not fit a signed 32-bit field")
