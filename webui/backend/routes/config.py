"""Config read/write routes."""
from __future__ import annotations

from litestar import get, post
from litestar.exceptions import ValidationException

from schemas import AddOnKind
from vidprompt.config import Config
from webui.backend.models import ConfigPayload


@get("/api/config")
async def get_config() -> ConfigPayload:
    cfg = Config.load()
    return ConfigPayload(default_add_ons=cfg.default_add_ons, log_level=cfg.log_level)


@post("/api/config")
async def save_config(data: ConfigPayload) -> dict:
    known = {kind.value for kind in AddOnKind}
    unknown = [name for name in data.default_add_ons if name not in known]
    if unknown:
        raise ValidationException(f"Unknown add-ons: {', '.join(unknown)}")
    cfg = Config.load()
    cfg.default_add_ons = list(data.default_add_ons)
    cfg.log_level = data.log_level
    cfg.save()
    return {"ok": True}
