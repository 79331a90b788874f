"""Pydantic request/response models for the vidprompt Web API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from schemas import AddOnSelections

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PromptRequest(BaseModel):
    idea: str = ""              # free-form concept; blank is rejected by the engine
    selections: AddOnSelections = Field(default_factory=AddOnSelections)


class ConfigPayload(BaseModel):
    default_add_ons: list[str] = Field(default_factory=list)
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v
