"""Editor session: keeps the artifact bundle in step with the store."""

import logging
from typing import Any, List, Optional

from .models import PipelineConfig, Resolution, Scene, Snapshot
from .projector import ArtifactBundle, project
from .store import SceneStore

logger = logging.getLogger(__name__)

VRAM_ADVISORY = "Requires 12GB+ VRAM GPU"


def advisories(config: PipelineConfig) -> List[str]:
    """Return operator notices for a configuration. Nothing is enforced."""
    notices = []
    if config.resolution == Resolution.UHD_8K.value:
        notices.append(VRAM_ADVISORY)
    return notices


class EditorSession:
    """Controller owning a SceneStore and the artifacts derived from it.

    The projector runs synchronously after every store change, so
    `artifacts` always reflects the latest snapshot by the time a mutation
    returns. Bundles are replaced whole, never patched.
    """

    def __init__(self, store: Optional[SceneStore] = None) -> None:
        """Initialize the session.

        Args:
            store: Store to drive. Created with the seed scenes and default
                configuration if not provided.
        """
        self._store = store or SceneStore()
        self._artifacts = project(self._store.snapshot)
        self._unsubscribe = self._store.subscribe(self._on_snapshot)

    @property
    def store(self) -> SceneStore:
        """Return the underlying store."""
        return self._store

    @property
    def snapshot(self) -> Snapshot:
        """Return the current snapshot."""
        return self._store.snapshot

    @property
    def artifacts(self) -> ArtifactBundle:
        """Return the bundle for the current snapshot."""
        return self._artifacts

    def add_scene(self) -> Scene:
        return self._store.add_scene()

    def remove_scene(self, scene_id: str) -> None:
        self._store.remove_scene(scene_id)

    def update_scene(self, scene_id: str, field: str, value: Any) -> None:
        self._store.update_scene(scene_id, field, value)

    def update_config(self, **changes: Any) -> PipelineConfig:
        return self._store.update_config(**changes)

    def advisories(self) -> List[str]:
        """Return operator notices for the current configuration."""
        return advisories(self._store.config)

    def export(self) -> None:
        """Placeholder for packaging the artifacts into a downloadable archive.

        Leaves the store and the artifact bundle untouched.
        """
        logger.info(
            "Export is not available: copy the previewed files "
            f"({', '.join(self._artifacts.files())}) into your project by hand."
        )

    def close(self) -> None:
        """Stop following store changes."""
        self._unsubscribe()

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._artifacts = project(snapshot)
        logger.debug(f"Artifacts regenerated for {len(snapshot.scenes)} scene(s)")
