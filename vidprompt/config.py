"""Settings and defaults."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from schemas import AddOnKind, AddOnSelections

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".vidprompt"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Blueprint shape
SCENE_COUNT = 4
TITLE_ACTION_WORDS = 4   # words of the action phrase kept in the title
MAX_OBJECT_TERMS = 2     # concept nouns carried into each scene's key objects
MAX_HASHTAGS = 10

EMPTY_IDEA_MESSAGE = "Give the generator a strong concept to transform."

# Quick ideas offered by the front ends
SUGGESTIONS = (
    "A forgotten lighthouse awakening during a midnight storm.",
    "Street dancers using projection art to hack city billboards.",
    "An elder painter restoring constellations inside a planetarium.",
    "Time travelers sending memories through origami cranes.",
)

# Add-ons pre-ticked in the UI
DEFAULT_ADD_ONS = [AddOnKind.THUMBNAIL_PROMPT.value, AddOnKind.CAPTIONS_AND_TAGS.value]

# Web API
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_add_ons(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def normalize_log_level(value: object, source: str) -> str | None:
    """Upper-cased level name, or None (with a warning) if it is not one we know."""
    level = str(value).strip().upper()
    if level in LOG_LEVELS:
        return level
    log.warning("Unknown log level %r from %s, ignoring", value, source)
    return None


@dataclass
class Config:
    default_add_ons: list[str] = field(default_factory=lambda: list(DEFAULT_ADD_ONS))
    log_level: str = "INFO"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def load(cls) -> "Config":
        """Load config from the config file, then let env vars override it.

        A file that is not a JSON object is ignored as a whole. Bad individual
        values are skipped with a warning and keep their defaults.
        """
        cfg = cls()

        if CONFIG_FILE.exists():
            try:
                data = json.loads(CONFIG_FILE.read_text(encoding="utf-8-sig"))
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                cfg = cls._from_dict(data)
            except (json.JSONDecodeError, OSError, TypeError, ValueError) as e:
                log.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
                cfg = cls()

        # Env var takes priority
        if (env_add_ons := os.environ.get("VIDPROMPT_ADDONS")) is not None:
            cfg.default_add_ons = _parse_add_ons(env_add_ons)
        if env_level := os.environ.get("VIDPROMPT_LOG_LEVEL"):
            cfg.log_level = normalize_log_level(env_level, "VIDPROMPT_LOG_LEVEL") or cfg.log_level

        return cfg

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        cfg = cls()
        add_ons = data.get("default_add_ons")
        if isinstance(add_ons, list):
            cfg.default_add_ons = [name for name in add_ons if isinstance(name, str)]
        elif add_ons is not None:
            log.warning("default_add_ons in %s must be a list, using defaults", CONFIG_FILE)
        if level := data.get("log_level"):
            cfg.log_level = normalize_log_level(level, str(CONFIG_FILE)) or cfg.log_level
        if host := data.get("host"):
            cfg.host = str(host)
        if port := data.get("port"):
            cfg.port = int(port)
        return cfg

    def save(self) -> None:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "default_add_ons": self.default_add_ons,
            "log_level": self.log_level,
            "host": self.host,
            "port": self.port,
        }
        CONFIG_FILE.write_text(json.dumps(data, indent=2))

    def selections(self) -> AddOnSelections:
        """Default add-on selection. Unknown names are dropped with a warning."""
        known = {kind.value for kind in AddOnKind}
        valid = [name for name in self.default_add_ons if name in known]
        for name in self.default_add_ons:
            if name not in known:
                log.warning("Unknown add-on %r in config, skipping", name)
        return AddOnSelections.from_kinds(valid)
