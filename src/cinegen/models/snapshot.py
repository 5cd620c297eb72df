"""Editor snapshot model."""

from typing import Tuple
from pydantic import BaseModel, Field

from .scene import Scene
from .pipeline import PipelineConfig


class Snapshot(BaseModel):
    """Point-in-time value of the scene list and pipeline configuration."""

    scenes: Tuple[Scene, ...] = Field(default_factory=tuple, description="Scenes in timeline order")
    config: PipelineConfig = Field(default_factory=PipelineConfig, description="Pipeline configuration")

    class Config:
        """Pydantic config."""
        frozen = True

    def find_scene(self, scene_id: str) -> int:
        """Return the index of the scene with the given id, or -1."""
        for index, scene in enumerate(self.scenes):
            if scene.id == scene_id:
                return index
        return -1
