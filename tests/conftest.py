"""Test configuration and fixtures for rasterconv.

This module provides:
- Synthetic in-memory images (RGB, RGBA, grayscale, palette)
- Encoded sample files written to tmp_path
- Raw encoded bytes for stream-based tests
"""

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

SAMPLE_SIZE = (160, 120)


# ============================================================================
# Helpers
# ============================================================================


def draw_pattern(mode: str, size: tuple[int, int] = SAMPLE_SIZE) -> Image.Image:
    """Create a deterministic test image with a grid and a filled circle."""
    width, height = size
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 20):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 20):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill=(200, 100, 100))

    if mode == "RGBA":
        rgba = img.convert("RGBA")
        rgba.putalpha(Image.linear_gradient("L").resize(size))
        return rgba
    if mode == "P":
        return img.quantize(colors=16)
    return img.convert(mode)


def encode_bytes(img: Image.Image, pil_format: str, **params: object) -> bytes:
    buffer = BytesIO()
    img.save(buffer, format=pil_format, **params)
    return buffer.getvalue()


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def rgb_image() -> Image.Image:
    """Provide an RGB synthetic image."""
    return draw_pattern("RGB")


@pytest.fixture
def rgba_image() -> Image.Image:
    """Provide an RGBA synthetic image with a gradient alpha channel."""
    return draw_pattern("RGBA")


@pytest.fixture
def gray_image() -> Image.Image:
    """Provide a grayscale (L) synthetic image."""
    return draw_pattern("L")


@pytest.fixture
def palette_image() -> Image.Image:
    """Provide a 16-colour palette (P) synthetic image."""
    return draw_pattern("P")


# ============================================================================
# Encoded Sample Fixtures
# ============================================================================


@pytest.fixture
def png_bytes(rgb_image: Image.Image) -> bytes:
    """Provide PNG-encoded bytes of the RGB sample."""
    return encode_bytes(rgb_image, "PNG")


@pytest.fixture
def jpeg_bytes(rgb_image: Image.Image) -> bytes:
    """Provide JPEG-encoded bytes of the RGB sample."""
    return encode_bytes(rgb_image, "JPEG", quality=90)


@pytest.fixture
def sample_png_path(tmp_path: Path, png_bytes: bytes) -> Path:
    """Write the PNG sample to tmp_path."""
    path = tmp_path / "sample.png"
    _ = path.write_bytes(png_bytes)
    return path


@pytest.fixture
def sample_jpeg_path(tmp_path: Path, jpeg_bytes: bytes) -> Path:
    """Write the JPEG sample to tmp_path."""
    path = tmp_path / "sample.jpg"
    _ = path.write_bytes(jpeg_bytes)
    return path


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir
