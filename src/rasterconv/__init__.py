"""rasterconv - Convert images between JPEG, PNG, GIF, BMP and TIFF."""

from .codec import decode, encode, sniff_format, to_bmp, to_gif, to_jpeg, to_png, to_tiff
from .convert import convert, convert_file
from .errors import UnsupportedFormatError
from .formats import ImageFormat, format_from_extension
from .schema import (
    DEFAULT_QUALITY,
    MAX_QUALITY,
    MIN_QUALITY,
    ConversionOptions,
    default_options,
)

__version__ = "0.1.0"

__all__ = [
    "ImageFormat",
    "ConversionOptions",
    "UnsupportedFormatError",
    "DEFAULT_QUALITY",
    "MIN_QUALITY",
    "MAX_QUALITY",
    "default_options",
    "format_from_extension",
    "decode",
    "sniff_format",
    "encode",
    "convert",
    "convert_file",
    "to_jpeg",
    "to_png",
    "to_gif",
    "to_bmp",
    "to_tiff",
    "__version__",
]
