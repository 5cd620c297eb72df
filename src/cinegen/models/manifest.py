"""Scene script (manifest) data model."""

import json
from typing import Any, Dict, List
from pathlib import Path
from pydantic import BaseModel, Field
import yaml

from .scene import Transition


class ScriptEntry(BaseModel):
    """One manifest record: a scene without its identity."""

    video: str = Field(default="", description="Source clip file name")
    voice: str = Field(default="", description="Narration text")
    transition: str = Field(default=Transition.CROSSFADE.value, description="Join style")

    class Config:
        """Pydantic config."""
        frozen = True


class SceneScript(BaseModel):
    """Ordered scene records plus optional pipeline overrides."""

    scenes: List[ScriptEntry] = Field(default_factory=list, description="Scenes in timeline order")
    config: Dict[str, Any] = Field(default_factory=dict, description="Pipeline configuration overrides")

    @classmethod
    def from_data(cls, data: Any) -> "SceneScript":
        """Build a script from a bare list of records or a mapping with `scenes`."""
        if data is None:
            return cls()
        if isinstance(data, list):
            return cls(scenes=data)
        if isinstance(data, dict):
            return cls(**data)
        raise ValueError("Scene script must be a list of scenes or a mapping with 'scenes'")

    @classmethod
    def from_yaml(cls, path: Path) -> "SceneScript":
        """Load a scene script from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_data(data)

    @classmethod
    def from_json(cls, text: str) -> "SceneScript":
        """Decode a rendered `script.json` document."""
        return cls.from_data(json.loads(text))
