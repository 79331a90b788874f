"""Prompt generation engine: concept in, four-scene blueprint out.

``generate_prompt`` is pure. It performs no I/O, reads no clock or
environment and uses no randomness, so identical arguments always produce
identical results and it can be called from any number of threads at once.
"""
from __future__ import annotations

import logging
import re

from schemas import AddOnSelections, GeneratedPrompt

from .addons import build_add_ons
from .analysis import analyze_concept
from .config import EMPTY_IDEA_MESSAGE
from .master_prompt import assemble_full_prompt
from .scenes import build_scenes

log = logging.getLogger(__name__)

# Whitespace plus zero-width characters that str.strip() keeps
_EDGE_BLANKS = re.compile(r"^[\s\u200b-\u200d\u2060\ufeff]+|[\s\u200b-\u200d\u2060\ufeff]+$")


def trim_idea(idea: str) -> str:
    return _EDGE_BLANKS.sub("", idea)


class InvalidInputError(ValueError):
    """The concept was empty or whitespace only."""

    def __init__(self, message: str = EMPTY_IDEA_MESSAGE):
        super().__init__(message)
        self.message = message


def generate_prompt(idea: str, selections: AddOnSelections | None = None) -> GeneratedPrompt:
    """Expand a free-text concept into a full text-to-video blueprint.

    Args:
        idea:       The creative concept, e.g. "A lone astronaut planting a
                    garden on Mars to remember Earth."
        selections: Which add-ons to generate. ``None`` means none.

    Returns:
        A complete ``GeneratedPrompt``; ``add_ons`` holds exactly the selected
        kinds.

    Raises ``InvalidInputError`` if ``idea`` is empty after trimming whitespace
    and zero-width characters.
    """
    idea = trim_idea(idea or "")
    if not idea:
        raise InvalidInputError()
    if selections is None:
        selections = AddOnSelections()

    analysis = analyze_concept(idea)
    scenes = build_scenes(analysis)
    result = GeneratedPrompt(
        concept_title=analysis.title,
        one_liner=analysis.one_liner,
        mood=analysis.mood.name,
        style=analysis.style.name,
        scenes=scenes,
        full_prompt=assemble_full_prompt(analysis, scenes),
        add_ons=build_add_ons(analysis, scenes, selections),
    )
    log.debug(
        "Generated %r: mood=%s style=%s add_ons=%d",
        result.concept_title, result.mood, result.style, len(result.add_ons),
    )
    return result
