from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AddOnKind(str, Enum):
    """Supplementary artifacts that can be generated alongside the master prompt."""
    VOICEOVER = "voiceover"
    DIALOGUE = "dialogue"
    THUMBNAIL_PROMPT = "thumbnailPrompt"
    CAPTIONS_AND_TAGS = "captionsAndTags"
    MUSIC_NOTES = "musicNotes"


# AddOnKind -> AddOnSelections attribute
_FIELD_BY_KIND: dict[AddOnKind, str] = {
    AddOnKind.VOICEOVER: "voiceover",
    AddOnKind.DIALOGUE: "dialogue",
    AddOnKind.THUMBNAIL_PROMPT: "thumbnail_prompt",
    AddOnKind.CAPTIONS_AND_TAGS: "captions_and_tags",
    AddOnKind.MUSIC_NOTES: "music_notes",
}


class AddOnSelections(BaseModel):
    """One flag per add-on kind. Everything is off unless explicitly set."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    voiceover: bool = Field(default=False, description="Narration script")
    dialogue: bool = Field(default=False, description="Sample dialogue beat")
    thumbnail_prompt: bool = Field(default=False, description="Poster / thumbnail visual prompt")
    captions_and_tags: bool = Field(default=False, description="Caption copy & smart tags")
    music_notes: bool = Field(default=False, description="Music tone & sound direction")

    def is_selected(self, kind: AddOnKind) -> bool:
        return getattr(self, _FIELD_BY_KIND[kind])

    def selected(self) -> list[AddOnKind]:
        """Selected kinds in canonical AddOnKind order."""
        return [kind for kind in AddOnKind if self.is_selected(kind)]

    @classmethod
    def from_kinds(cls, kinds: Iterable[AddOnKind | str]) -> "AddOnSelections":
        """Build a selection from kind values, e.g. ``["voiceover", "musicNotes"]``.

        Raises ``ValueError`` for names that are not add-on kinds.
        """
        flags = {_FIELD_BY_KIND[AddOnKind(kind)]: True for kind in kinds}
        return cls(**flags)

    @classmethod
    def all(cls) -> "AddOnSelections":
        return cls.from_kinds(AddOnKind)
