"""Pydantic schemas for conversion options."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ─────────────────────────────────────────────────────────────
# Quality policy
# ─────────────────────────────────────────────────────────────

DEFAULT_QUALITY = 85
MIN_QUALITY = 1
MAX_QUALITY = 100


def normalize_quality(quality: int) -> int:
    """Return quality unchanged if within [1, 100], else DEFAULT_QUALITY."""
    if quality < MIN_QUALITY or quality > MAX_QUALITY:
        return DEFAULT_QUALITY
    return quality


# ─────────────────────────────────────────────────────────────
# Conversion options
# ─────────────────────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Options for a single conversion call.

    Attributes:
        quality: JPEG quality (1-100). Out-of-range values silently fall
                 back to DEFAULT_QUALITY. Ignored by non-JPEG encoders.
    """

    quality: int = Field(
        default=DEFAULT_QUALITY,
        description="JPEG quality (1-100), default 85",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    @field_validator("quality")
    @classmethod
    def clamp_quality(cls, v: int) -> int:
        return normalize_quality(v)


def default_options() -> ConversionOptions:
    """Return options with quality=85."""
    return ConversionOptions(quality=DEFAULT_QUALITY)

