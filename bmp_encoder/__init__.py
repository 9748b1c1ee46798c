"""Uncompressed 24-bit BMP encoder."""

from .encoder import encode, encode_into, save_bitmap
from .errors import BmpError, DimensionOverflow, IoFailure
from .headers import FileHeader, InfoHeader, build_headers
from .image import Image
from .pixels import pack_rows, swap_channels, transform_pixel

__all__ = [
    "encode",
    "encode_into",
    "save_bitmap",
    "BmpError",
    "DimensionOverflow",
    "IoFailure",
    "FileHeader",
    "InfoHeader",
    "build_headers",
    "Image",
    "pack_rows",
    "swap_channels",
    "transform_pixel",
]
