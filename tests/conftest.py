"""Shared test fixtures for cinegen tests."""

import pytest

from cinegen.session import EditorSession
from cinegen.store import SceneStore


@pytest.fixture
def store():
    """Store holding the two seed scenes and the default configuration."""
    return SceneStore()


@pytest.fixture
def empty_store():
    """Store with no scenes."""
    return SceneStore(scenes=[])


@pytest.fixture
def session(store):
    """Editor session driving the seeded store."""
    return EditorSession(store)


@pytest.fixture
def scene_script(tmp_path):
    """Write a small YAML scene script and return its path."""
    path = tmp_path / "scenes.yaml"
    path.write_text(
        "scenes:\n"
        "  - video: intro.mp4\n"
        "    voice: Welcome to the valley.\n"
        "    transition: none\n"
        "  - video: outro.mp4\n"
        "    voice: ''\n"
        "    transition: fade\n"
        "config:\n"
        "  resolution: 4K\n"
        "  use_realesrgan: false\n",
        encoding="utf-8",
    )
    return path
