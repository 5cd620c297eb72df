"""Scene manifest (script.json) rendering."""

import json
from typing import Iterable, List

from ..models import Scene, SceneScript


def render_scene_manifest(scenes: Iterable[Scene]) -> str:
    """Serialize scenes to the playback script consumed by the pipeline.

    Args:
        scenes: Scenes in timeline order.

    Returns:
        Pretty-printed JSON array of {video, voice, transition} records.
        Scene ids are not included.
    """
    entries = [scene.to_manifest_entry() for scene in scenes]
    return json.dumps(entries, indent=2, ensure_ascii=False)


def parse_scene_manifest(text: str) -> List[dict]:
    """Decode a rendered manifest back into {video, voice, transition} records."""
    script = SceneScript.from_json(text)
    return [entry.model_dump() for entry in script.scenes]
