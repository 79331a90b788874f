"""
vidprompt Web API launcher.

Usage:
  python -m webui.start                  # serve on the configured host/port
  python -m webui.start --port 9000      # override the configured port
  python -m webui.start --dev            # auto-reload on code changes
"""
from __future__ import annotations

import argparse

import uvicorn

from vidprompt.config import Config


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="webui.start", description="Serve the vidprompt JSON API.")
    parser.add_argument("--host", default=cfg.host, help=f"Bind address (default: {cfg.host})")
    parser.add_argument("--port", type=int, default=cfg.port, help=f"Port (default: {cfg.port})")
    parser.add_argument("--dev", action="store_true", help="Reload when source files change")
    return parser


def main(argv: list[str] | None = None) -> None:
    cfg = Config.load()
    args = build_parser(cfg).parse_args(argv)

    print(f"vidprompt Web API on http://{args.host}:{args.port}")
    # reload needs the import string rather than the app object
    uvicorn.run(
        "webui.backend.app:app",
        host=args.host,
        port=args.port,
        reload=args.dev,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
