"""Litestar ASGI application - vidprompt Web API."""
from __future__ import annotations

from litestar import Litestar, Request, Response
from litestar.config.cors import CORSConfig
from litestar.logging import LoggingConfig

from vidprompt.engine import InvalidInputError
from webui.backend.routes.config import get_config, save_config
from webui.backend.routes.prompts import create_prompt, list_suggestions


def _invalid_input(request: Request, exc: InvalidInputError) -> Response:
    return Response(content={"detail": exc.message}, status_code=400)


app = Litestar(
    route_handlers=[
        create_prompt,
        list_suggestions,
        get_config,
        save_config,
    ],
    exception_handlers={InvalidInputError: _invalid_input},
    cors_config=CORSConfig(
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    ),
    logging_config=LoggingConfig(
        loggers={
            "vidprompt": {"level": "INFO", "handlers": ["queue_listener"]},
            "webui": {"level": "INFO", "handlers": ["queue_listener"]},
        }
    ),
)
