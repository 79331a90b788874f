"""Blueprint generation and quick-idea routes."""
from __future__ import annotations

import logging

from litestar import get, post

from vidprompt.config import SUGGESTIONS
from vidprompt.engine import generate_prompt
from webui.backend.models import PromptRequest

log = logging.getLogger(__name__)


@post("/api/prompts")
async def create_prompt(data: PromptRequest) -> dict:
    """Run the engine. Blank ideas surface as 400 via the app's error handler."""
    result = generate_prompt(data.idea, data.selections)
    log.info("Generated blueprint %r with %d add-ons", result.concept_title, len(result.add_ons))
    return result.to_payload()


@get("/api/suggestions")
async def list_suggestions() -> list[str]:
    return list(SUGGESTIONS)
