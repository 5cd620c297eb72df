"""Scene and configuration store.

The store owns the current `Snapshot`. Every mutation builds a new snapshot
(models are frozen, scene lists are tuples) and synchronously notifies the
subscribed listeners with it, so a listener never observes a half-applied
change and older snapshots held elsewhere stay valid.
"""

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

from .models import (
    DEFAULT_SCENES,
    EDITABLE_FIELDS,
    PipelineConfig,
    Scene,
    Snapshot,
    Transition,
)

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class SceneStore:
    """Single source of truth for the scene list and pipeline configuration."""

    def __init__(
        self,
        scenes: Optional[Iterable[dict]] = None,
        config: Optional[PipelineConfig] = None,
    ) -> None:
        """Initialize the store.

        Args:
            scenes: Manifest-style records ({video, voice, transition}) to
                seed the timeline with. Defaults to the two seed scenes.
                Each record gets a freshly issued id.
            config: Starting pipeline configuration. Defaults to
                PipelineConfig().
        """
        self._ids = itertools.count(1)
        self._listeners: List[Listener] = []

        if scenes is None:
            scenes = DEFAULT_SCENES

        seeded = tuple(
            Scene(id=self._next_id(), **{
                key: _plain(value) for key, value in dict(entry).items()
                if key in EDITABLE_FIELDS
            })
            for entry in scenes
        )
        self._snapshot = Snapshot(scenes=seeded, config=config or PipelineConfig())

    @classmethod
    def from_scenes(
        cls,
        entries: Iterable[Any],
        config: Optional[PipelineConfig] = None,
    ) -> "SceneStore":
        """Create a store from manifest records or ScriptEntry models."""
        records = [
            entry.model_dump() if hasattr(entry, "model_dump") else dict(entry)
            for entry in entries
        ]
        return cls(scenes=records, config=config)

    @property
    def snapshot(self) -> Snapshot:
        """Return the current snapshot."""
        return self._snapshot

    @property
    def scenes(self) -> tuple:
        """Return the current scenes in timeline order."""
        return self._snapshot.scenes

    @property
    def config(self) -> PipelineConfig:
        """Return the current pipeline configuration."""
        return self._snapshot.config

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_scene(self) -> Scene:
        """Append a new scene with default values and return it."""
        scene = Scene(
            id=self._next_id(),
            video=f"clip_{len(self._snapshot.scenes) + 1}.mp4",
            voice="",
            transition=Transition.CROSSFADE.value,
        )
        logger.debug(f"Adding scene {scene.id}: {scene.video}")
        self._commit(self._snapshot.model_copy(
            update={"scenes": self._snapshot.scenes + (scene,)}
        ))
        return scene

    def remove_scene(self, scene_id: str) -> None:
        """Remove the scene with the given id. Unknown ids are ignored."""
        if self._snapshot.find_scene(scene_id) < 0:
            logger.debug(f"Remove ignored, no scene with id {scene_id}")
            return

        remaining = tuple(s for s in self._snapshot.scenes if s.id != scene_id)
        logger.debug(f"Removing scene {scene_id}")
        self._commit(self._snapshot.model_copy(update={"scenes": remaining}))

    def update_scene(self, scene_id: str, field: str, value: Any) -> None:
        """Replace one field of a scene. Unknown ids are ignored.

        Transition names outside the known set are passed through to the
        artifacts untouched.

        Raises:
            ValueError: If `field` is not an editable scene field or the
                value is not a string.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(
                f"Cannot edit scene field '{field}'. "
                f"Editable: {', '.join(EDITABLE_FIELDS)}"
            )

        index = self._snapshot.find_scene(scene_id)
        if index < 0:
            logger.debug(f"Update ignored, no scene with id {scene_id}")
            return

        scenes = list(self._snapshot.scenes)
        scenes[index] = Scene.model_validate(
            {**scenes[index].model_dump(), field: _plain(value)}
        )
        logger.debug(f"Scene {scene_id}: {field} = {value!r}")
        self._commit(self._snapshot.model_copy(update={"scenes": tuple(scenes)}))

    def update_config(self, **changes: Any) -> PipelineConfig:
        """Merge a partial change into the pipeline configuration.

        Values are type-checked and coerced; numeric values are not
        range-checked.

        Raises:
            ValueError: If a field name is unknown, a value has the wrong
                type, or the resolution tag is not one of 8K, 4K or 1080p.
        """
        unknown = sorted(set(changes) - set(PipelineConfig.model_fields))
        if unknown:
            raise ValueError(
                f"Unknown configuration field(s): {', '.join(unknown)}. "
                f"Valid: {', '.join(PipelineConfig.model_fields)}"
            )

        updated = PipelineConfig.model_validate(
            {**self._snapshot.config.model_dump(), **changes}
        )
        logger.debug(f"Configuration update: {changes}")
        self._commit(self._snapshot.model_copy(update={"config": updated}))
        return updated

    def _next_id(self) -> str:
        return str(next(self._ids))

    def _commit(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)


def _plain(value: Any) -> Any:
    """Store enum members by their value."""
    if isinstance(value, Enum):
        return value.value
    return value
