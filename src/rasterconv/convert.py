"""Stream and file conversion built on decode/encode."""

from os import PathLike
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from .codec import decode, encode
from .formats import ImageFormat, format_from_extension
from .schema import ConversionOptions
from .utils.profiling import timed


@timed
def convert(
    source: BinaryIO,
    destination: BinaryIO,
    format: ImageFormat | str,
    options: ConversionOptions | None = None,
) -> None:
    """
    Read an image from source and write it to destination in another format.

    The input format is detected from content. Nothing is written if
    decoding fails; a failed encode may leave partial output behind.

    Raises:
        PIL.UnidentifiedImageError: If the input format is not recognized
        OSError: If the input is malformed or encoding fails
        UnsupportedFormatError: If format is not a supported tag
    """
    img, _ = decode(source)
    encode(destination, img, format, options)


@timed
def convert_file(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    options: ConversionOptions | None = None,
) -> str:
    """
    Convert an image file, choosing the output format by extension.

    The output file is created (or truncated) only after the input decodes.
    A partially written output is not removed if encoding fails.

    Args:
        input_path: Path to input image
        output_path: Path to output image; its extension selects the format
        options: Conversion options

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If the input file or output directory does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    with open(input_path, "rb") as src:
        img, detected = decode(src)

        fmt = format_from_extension(output_path)
        logger.debug(f"Converting {input_path} ({detected}) -> {output_path} ({fmt})")

        with open(output_path, "wb") as dst:
            encode(dst, img, fmt, options)

    return str(output_path)
