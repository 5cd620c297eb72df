"""Configuration management."""

import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .models.pipeline import (
    DEFAULT_VOICE_MODEL,
    RESOLUTION_DIMENSIONS,
    PipelineConfig,
    Resolution,
)

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration."""

    # Startup pipeline defaults
    default_resolution: str = Field(
        default_factory=lambda: os.getenv("CINEGEN_RESOLUTION", Resolution.UHD_8K.value),
        description="Resolution selected when the editor starts"
    )
    default_voice_model: str = Field(
        default_factory=lambda: os.getenv("CINEGEN_VOICE_MODEL", DEFAULT_VOICE_MODEL),
        description="Edge-TTS voice selected when the editor starts"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_defaults(self) -> None:
        """Validate that the startup defaults are usable.

        Raises:
            ValueError: If CINEGEN_RESOLUTION is not a known resolution tag.
        """
        if self.default_resolution not in RESOLUTION_DIMENSIONS:
            raise ValueError(
                f"CINEGEN_RESOLUTION must be one of {', '.join(RESOLUTION_DIMENSIONS)}. "
                f"Got: {self.default_resolution}"
            )

    def pipeline_defaults(self) -> PipelineConfig:
        """Build the pipeline configuration used at startup."""
        self.validate_defaults()
        return PipelineConfig(
            resolution=self.default_resolution,
            voice_model=self.default_voice_model,
        )


# Global config instance
config = Config()
