"""Decode and encode dispatch on top of Pillow's format plugins."""

from typing import BinaryIO

from loguru import logger
from PIL import Image, ImageCms

from .formats import PIL_DECODERS, ImageFormat
from .schema import ConversionOptions, default_options, normalize_quality

# Image modes each Pillow encoder writes without conversion
_ENCODER_MODES: dict[ImageFormat, frozenset[str]] = {
    ImageFormat.JPEG: frozenset({"1", "L", "RGB", "RGBX", "CMYK", "YCbCr"}),
    ImageFormat.PNG: frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
    ImageFormat.GIF: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    ImageFormat.BMP: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    ImageFormat.TIFF: frozenset(
        {"1", "L", "LA", "P", "PA", "I", "I;16", "F", "RGB", "RGBA", "RGBX", "CMYK", "YCbCr", "LAB"}
    ),
}

_ALPHA_MODES = frozenset({"LA", "La", "PA", "RGBA", "RGBa"})

# Premultiplied and palette+alpha modes are widened before further conversion
_STRAIGHT_ALPHA = {"La": "LA", "RGBa": "RGBA", "PA": "RGBA"}


def _lab_to_rgb(image: Image.Image) -> Image.Image:
    transform = ImageCms.buildTransformFromOpenProfiles(
        ImageCms.createProfile("LAB"),
        ImageCms.createProfile("sRGB"),
        "LAB",
        "RGB",
    )
    return ImageCms.applyTransform(image, transform)


def _target_mode(mode: str, fmt: ImageFormat) -> str:
    """Pick the closest mode the encoder for fmt accepts.

    Grayscale stays grayscale, alpha is kept unless the format is JPEG.
    """
    allowed = _ENCODER_MODES[fmt]
    grayscale = Image.getmodebase(mode) == "L"
    keep_alpha = mode in _ALPHA_MODES and fmt is not ImageFormat.JPEG

    if keep_alpha:
        return "LA" if grayscale and "LA" in allowed else "RGBA"
    return "L" if grayscale else "RGB"


def _prepare_mode(image: Image.Image, fmt: ImageFormat) -> Image.Image:
    """Convert image to a mode the target encoder accepts."""
    allowed = _ENCODER_MODES[fmt]
    if image.mode in allowed:
        return image

    source_mode = image.mode
    if image.mode == "LAB":
        image = _lab_to_rgb(image)
    elif image.mode in _STRAIGHT_ALPHA:
        image = image.convert(_STRAIGHT_ALPHA[image.mode])

    if image.mode not in allowed:
        image = image.convert(_target_mode(image.mode, fmt))

    logger.debug(f"Converted {source_mode} image to {image.mode} for {fmt.pil_format}")
    return image


def decode(source: BinaryIO) -> tuple[Image.Image, ImageFormat]:
    """
    Decode an image, detecting its format from content.

    Only the JPEG, PNG, GIF, BMP and TIFF plugins are consulted. The image
    is fully loaded before returning, so decode errors surface here and
    not during a later encode.

    Args:
        source: Binary stream positioned anywhere; Pillow reads from the start

    Returns:
        Tuple of (loaded image, detected format)

    Raises:
        PIL.UnidentifiedImageError: If no registered codec recognizes the stream
        OSError: If the bitstream is truncated or malformed
    """
    img = Image.open(source, formats=PIL_DECODERS)
    img.load()

    fmt = ImageFormat.from_pil(img.format)
    logger.debug(f"Decoded {fmt.pil_format} image {img.width}x{img.height} ({img.mode})")
    return img, fmt


def sniff_format(source: BinaryIO) -> ImageFormat | None:
    """Detect the format from the stream header without decoding pixels.

    The stream position is restored afterwards. Returns None when no
    supported codec recognizes the content.
    """
    position = source.tell()
    try:
        img = Image.open(source, formats=PIL_DECODERS)
        return ImageFormat.from_pil(img.format)
    except OSError:
        return None
    finally:
        _ = source.seek(position)


def encode(
    destination: BinaryIO,
    image: Image.Image,
    format: ImageFormat | str,
    options: ConversionOptions | None = None,
) -> None:
    """
    Write an image to destination in the given format.

    Args:
        destination: Writable binary stream
        image: Image to encode
        format: Target format tag (enum member or its string value)
        options: Conversion options; defaults to quality 85

    Raises:
        UnsupportedFormatError: If format is not a supported tag (nothing written)
        OSError: If Pillow fails to encode the image
    """
    fmt = ImageFormat.parse(format)
    opts = options if options is not None else default_options()
    quality = normalize_quality(opts.quality)

    save_kwargs: dict[str, object] = {}
    if fmt is ImageFormat.JPEG:
        save_kwargs["quality"] = quality

    prepared = _prepare_mode(image, fmt)

    logger.debug(
        f"Encoding {prepared.width}x{prepared.height} image as {fmt.pil_format} "
        + f"(quality={quality})"
    )
    prepared.save(destination, format=fmt.pil_format, **save_kwargs)


def to_jpeg(image: Image.Image, destination: BinaryIO, quality: int) -> None:
    encode(destination, image, ImageFormat.JPEG, ConversionOptions(quality=quality))


def to_png(image: Image.Image, destination: BinaryIO) -> None:
    encode(destination, image, ImageFormat.PNG, default_options())


def to_gif(image: Image.Image, destination: BinaryIO) -> None:
    encode(destination, image, ImageFormat.GIF, default_options())


def to_bmp(image: Image.Image, destination: BinaryIO) -> None:
    encode(destination, image, ImageFormat.BMP, default_options())


def to_tiff(image: Image.Image, destination: BinaryIO) -> None:
    encode(destination, image, ImageFormat.TIFF, default_options())
