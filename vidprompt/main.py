"""Entry point for vidprompt: TUI by default, headless with --idea."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from schemas import AddOnKind, AddOnSelections

from .config import CONFIG_DIR, Config

log = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(CONFIG_DIR / "vidprompt.log"),
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_on_list(value: str) -> list[str]:
    names = [part.strip() for part in value.split(",") if part.strip()]
    known = [kind.value for kind in AddOnKind]
    for name in names:
        if name not in known:
            raise argparse.ArgumentTypeError(
                f"unknown add-on {name!r} (choose from {', '.join(known)})"
            )
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidprompt",
        description="Turn a concept into a four-scene text-to-video blueprint.",
    )
    parser.add_argument("--idea", type=str, default=None, help="Concept to build (runs headless)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--addons", type=_add_on_list, default=None,
        help="Comma-separated add-ons, e.g. voiceover,musicNotes (default: from config)",
    )
    group.add_argument("--all-addons", action="store_true", help="Generate every add-on")
    group.add_argument("--no-addons", action="store_true", help="Generate no add-ons")
    output_format = parser.add_mutually_exclusive_group()
    output_format.add_argument("--json", action="store_true", help="Print the camelCase JSON payload")
    output_format.add_argument("--plain", action="store_true", help="Print plain text instead of markdown")
    parser.add_argument("--output", type=str, default=None, help="Also write the result to this file")
    return parser


def _selections(args: argparse.Namespace, config: Config) -> AddOnSelections:
    if args.all_addons:
        return AddOnSelections.all()
    if args.no_addons:
        return AddOnSelections()
    if args.addons is not None:
        return AddOnSelections.from_kinds(args.addons)
    return config.selections()


def run_headless(idea: str, selections: AddOnSelections, fmt: str = "markdown", output: str | None = None) -> int:
    """Generate one blueprint and print it. Returns the process exit code."""
    from .engine import InvalidInputError, generate_prompt
    from .render import render_markdown, render_text

    try:
        result = generate_prompt(idea, selections)
    except InvalidInputError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if fmt == "json":
        text = json.dumps(result.to_payload(), indent=2, ensure_ascii=False) + "\n"
    elif fmt == "plain":
        text = render_text(result)
    else:
        text = render_markdown(result)

    sys.stdout.write(text)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        log.info("Wrote blueprint to %s", output)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Launch vidprompt: TUI by default, headless with --idea."""
    args = build_parser().parse_args(argv)
    config = Config.load()
    _setup_logging(config.log_level)

    if args.idea is not None:
        fmt = "json" if args.json else "plain" if args.plain else "markdown"
        sys.exit(run_headless(args.idea, _selections(args, config), fmt=fmt, output=args.output))

    from .tui import VidPromptApp

    app = VidPromptApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
