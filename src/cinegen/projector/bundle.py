"""Artifact bundle projection."""

from typing import Dict

from pydantic import BaseModel, Field

from ..models import Snapshot
from .entrypoint import render_entrypoint
from .manifest import render_scene_manifest
from .pipeline_config import render_pipeline_config

UTILITIES_PLACEHOLDER = "# ... video_utils.py and audio_utils.py content included in download ..."

# Artifact name -> path inside the exported project
ARTIFACT_PATHS = {
    "script": "script.json",
    "config": "src/config.py",
    "main": "main.py",
    "utils": "src/utils.py",
}


class ArtifactBundle(BaseModel):
    """Generated documents for the external rendering pipeline."""

    script: str = Field(..., description="Scene manifest (script.json)")
    config: str = Field(..., description="Pipeline configuration (src/config.py)")
    main: str = Field(..., description="Entry-point program (main.py)")
    utils: str = Field(default=UTILITIES_PLACEHOLDER, description="Utilities placeholder")

    class Config:
        """Pydantic config."""
        frozen = True

    def get(self, name: str) -> str:
        """Return one artifact by name (script, config, main or utils)."""
        if name not in ARTIFACT_PATHS:
            raise ValueError(
                f"Unknown artifact '{name}'. Valid: {', '.join(ARTIFACT_PATHS)}"
            )
        return getattr(self, name)

    def files(self) -> Dict[str, str]:
        """Map each artifact's project path to its text."""
        return {path: getattr(self, name) for name, path in ARTIFACT_PATHS.items()}


def project(snapshot: Snapshot) -> ArtifactBundle:
    """Render every artifact from a snapshot in one pass.

    Pure and deterministic: the same snapshot always yields identical text.
    """
    return ArtifactBundle(
        script=render_scene_manifest(snapshot.scenes),
        config=render_pipeline_config(snapshot.config),
        main=render_entrypoint(snapshot.scenes, snapshot.config),
        utils=UTILITIES_PLACEHOLDER,
    )
