"""Format tags and extension-based format resolution."""

import os
from enum import StrEnum
from os import PathLike

from .errors import UnsupportedFormatError


class ImageFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"

    @property
    def pil_format(self) -> str:
        """Pillow format name used when saving."""
        return self.value.upper()

    @classmethod
    def parse(cls, value: "str | ImageFormat") -> "ImageFormat":
        """Coerce a tag, member value or alias (any case) into an ImageFormat.

        Raises:
            UnsupportedFormatError: If value names no supported format
        """
        if isinstance(value, ImageFormat):
            return value
        if isinstance(value, str):
            fmt = _ALIASES.get(value.strip().lower())
            if fmt is not None:
                return fmt
        raise UnsupportedFormatError(value)

    @classmethod
    def from_pil(cls, name: str | None) -> "ImageFormat":
        """Map Pillow's ``Image.format`` back to a format tag."""
        fmt = _PIL_NAMES.get((name or "").upper())
        if fmt is None:
            raise UnsupportedFormatError(name)
        return fmt


_ALIASES: dict[str, ImageFormat] = {
    "jpeg": ImageFormat.JPEG,
    "jpg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "gif": ImageFormat.GIF,
    "bmp": ImageFormat.BMP,
    "tiff": ImageFormat.TIFF,
    "tif": ImageFormat.TIFF,
}

# MPO is how Pillow reports multi-picture JPEGs; DIB is a headerless BMP
_PIL_NAMES: dict[str, ImageFormat] = {
    "JPEG": ImageFormat.JPEG,
    "MPO": ImageFormat.JPEG,
    "PNG": ImageFormat.PNG,
    "GIF": ImageFormat.GIF,
    "BMP": ImageFormat.BMP,
    "DIB": ImageFormat.BMP,
    "TIFF": ImageFormat.TIFF,
}

_EXTENSIONS: dict[str, ImageFormat] = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
    ".gif": ImageFormat.GIF,
    ".bmp": ImageFormat.BMP,
    ".tiff": ImageFormat.TIFF,
    ".tif": ImageFormat.TIFF,
}

# Pillow plugins consulted when sniffing input content
PIL_DECODERS: tuple[str, ...] = ("JPEG", "PNG", "GIF", "BMP", "TIFF")


def format_from_extension(path: str | PathLike[str]) -> ImageFormat:
    """Determine the format from a file extension.

    Unknown or missing extensions fall back to JPEG.
    """
    # The final component is taken from the raw string, so "a.png/" has no extension
    name = os.fspath(path).rpartition("/")[2]
    dot = name.rfind(".")
    suffix = name[dot:].lower() if dot >= 0 else ""
    return _EXTENSIONS.get(suffix, ImageFormat.JPEG)
