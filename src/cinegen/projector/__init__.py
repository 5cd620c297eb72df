"""Projection of editor state into pipeline artifacts."""

from .manifest import (
    render_scene_manifest,
    parse_scene_manifest,
)
from .pipeline_config import (
    FPS,
    ABSENT,
    REAL_ESRGAN_BIN,
    output_file_name,
    render_pipeline_config,
)
from .entrypoint import (
    ENCODER_PROFILE,
    render_entrypoint,
)
from .bundle import (
    ARTIFACT_PATHS,
    UTILITIES_PLACEHOLDER,
    ArtifactBundle,
    project,
)

__all__ = [
    # Manifest
    "render_scene_manifest",
    "parse_scene_manifest",
    # Pipeline configuration
    "FPS",
    "ABSENT",
    "REAL_ESRGAN_BIN",
    "output_file_name",
    "render_pipeline_config",
    # Entry point
    "ENCODER_PROFILE",
    "render_entrypoint",
    # Bundle
    "ARTIFACT_PATHS",
    "UTILITIES_PLACEHOLDER",
    "ArtifactBundle",
    "project",
]
