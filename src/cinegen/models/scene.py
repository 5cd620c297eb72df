"""Scene data model."""

from enum import Enum
from pydantic import BaseModel, Field


class Transition(str, Enum):
    """Transition effect applied to a scene's synced clip."""
    CROSSFADE = "crossfade"
    FADE = "fade"
    NONE = "none"


# Fields a caller may edit once the scene exists
EDITABLE_FIELDS = ("video", "voice", "transition")


class Scene(BaseModel):
    """Represents a single scene in the timeline."""

    id: str = Field(..., description="Unique scene identifier, never serialized")
    video: str = Field(default="", description="Source clip file name")
    voice: str = Field(default="", description="Narration text for this scene")
    transition: str = Field(
        default=Transition.CROSSFADE.value,
        description="Join style: crossfade, fade or none"
    )

    class Config:
        """Pydantic config."""
        frozen = True

    def to_manifest_entry(self) -> dict:
        """Return the scene as a manifest record, without its id."""
        return {
            "video": self.video,
            "voice": self.voice,
            "transition": self.transition,
        }


DEFAULT_SCENES = (
    {
        "video": "scene_forest_droneshots.mp4",
        "voice": "Ngày xửa ngày xưa, ở một khu rừng già bí ẩn.",
        "transition": Transition.FADE.value,
    },
    {
        "video": "character_hero_closeup.mp4",
        "voice": "Người chiến binh ấy đã đứng lên bảo vệ công lý.",
        "transition": Transition.CROSSFADE.value,
    },
)
