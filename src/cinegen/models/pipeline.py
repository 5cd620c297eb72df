"""Pipeline configuration model."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field


class Resolution(str, Enum):
    """Output resolution presets."""
    UHD_8K = "8K"
    UHD_4K = "4K"
    FHD = "1080p"


RESOLUTION_DIMENSIONS = {
    Resolution.UHD_8K.value: (7680, 4320),
    Resolution.UHD_4K.value: (3840, 2160),
    Resolution.FHD.value: (1920, 1080),
}

DEFAULT_VOICE_MODEL = "vi-VN-HoaiMyNeural"


def resolution_dimensions(resolution: str) -> Tuple[int, int]:
    """Return the (width, height) pixel pair for a resolution tag.

    Raises:
        ValueError: If the tag is not one of 8K, 4K or 1080p.
    """
    if isinstance(resolution, Enum):
        resolution = resolution.value
    try:
        return RESOLUTION_DIMENSIONS[resolution]
    except KeyError:
        raise ValueError(
            f"Unknown resolution '{resolution}'. "
            f"Valid: {', '.join(RESOLUTION_DIMENSIONS)}"
        ) from None


class PipelineConfig(BaseModel):
    """Global parameters for the external rendering pipeline."""

    resolution: Resolution = Field(
        default=Resolution.UHD_8K.value,
        description="Output resolution tag"
    )
    voice_model: str = Field(
        default=DEFAULT_VOICE_MODEL,
        description="Text-to-speech voice identifier"
    )
    bg_music_volume: float = Field(
        default=0.8,
        description="Background music gain outside dialogue"
    )
    ducking_level: float = Field(
        default=0.15,
        description="Background music gain during dialogue"
    )
    use_realesrgan: bool = Field(
        default=True,
        description="Enable the Real-ESRGAN upscaling step"
    )

    class Config:
        """Pydantic config."""
        frozen = True
        use_enum_values = True

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Return the output (width, height) in pixels."""
        return resolution_dimensions(self.resolution)
