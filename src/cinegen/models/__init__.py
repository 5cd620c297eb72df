"""Data models for the cinematic assembler."""

from .scene import Scene, Transition, DEFAULT_SCENES, EDITABLE_FIELDS
from .pipeline import (
    PipelineConfig,
    Resolution,
    RESOLUTION_DIMENSIONS,
    resolution_dimensions,
)
from .snapshot import Snapshot
from .manifest import ScriptEntry, SceneScript

__all__ = [
    "Scene",
    "Transition",
    "DEFAULT_SCENES",
    "EDITABLE_FIELDS",
    "PipelineConfig",
    "Resolution",
    "RESOLUTION_DIMENSIONS",
    "resolution_dimensions",
    "Snapshot",
    "ScriptEntry",
    "SceneScript",
]
