from __future__ import annotations

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .add_ons import AddOnKind

_VALUE_OBJECT = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Scene(BaseModel):
    """One of the four narrative beats of a blueprint."""
    model_config = _VALUE_OBJECT

    id: str = Field(..., min_length=1, description="Stable key, unique within one result")
    title: str = Field(..., min_length=1)
    setting: str = Field(..., min_length=1)
    camera_angle: str = Field(..., min_length=1)
    camera_movement: str = Field(..., min_length=1)
    character_actions: str = Field(..., min_length=1)
    lighting: str = Field(..., min_length=1)
    colors: str = Field(..., min_length=1)
    atmosphere: str = Field(..., min_length=1)
    important_objects: str = Field(..., min_length=1)


class GeneratedPrompt(BaseModel):
    """Full text-to-video blueprint produced by the engine."""
    model_config = _VALUE_OBJECT

    concept_title: str = Field(..., min_length=1)
    one_liner: str = Field(..., min_length=1)
    mood: str = Field(..., min_length=1)
    style: str = Field(..., min_length=1)
    # establish -> develop -> climax -> resolve
    scenes: Tuple[Scene, Scene, Scene, Scene]
    full_prompt: str = Field(..., min_length=1, description="Master prompt for the video model")
    add_ons: dict[AddOnKind, str] = Field(default_factory=dict, description="Only selected add-ons")

    @field_validator("add_ons")
    @classmethod
    def _add_ons_not_blank(cls, value: dict[AddOnKind, str]) -> dict[AddOnKind, str]:
        for kind, text in value.items():
            if not text.strip():
                raise ValueError(f"add-on {kind.value!r} is empty")
        return value

    @model_validator(mode="after")
    def _unique_scene_ids(self) -> "GeneratedPrompt":
        ids = [scene.id for scene in self.scenes]
        if len(set(ids)) != len(ids):
            raise ValueError(f"scene ids must be unique: {ids}")
        return self

    def to_payload(self) -> dict[str, Any]:
        """camelCase JSON-ready dict, the shape front ends consume."""
        return self.model_dump(mode="json", by_alias=True)
