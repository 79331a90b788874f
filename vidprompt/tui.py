"""Textual TUI application for vidprompt."""
from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Checkbox,
    Footer,
    Header,
    Label,
    Markdown,
    Select,
    Static,
    TextArea,
)

from schemas import AddOnKind, AddOnSelections, GeneratedPrompt

from .config import SUGGESTIONS, Config
from .engine import InvalidInputError, generate_prompt
from .render import ADD_ON_LABELS, render_markdown

_EMPTY_RESULT = """\
## Quick ideas to ignite

Pick one from the list above, or write your own concept and press **Generate**.
"""


def _checkbox_id(kind: AddOnKind) -> str:
    return f"addon-{kind.value}"


class VidPromptApp(App):
    """Cinematic Prompt Architect TUI."""

    TITLE = "vidprompt - Cinematic Prompt Architect"
    CSS = """
    Screen {
        layout: vertical;
    }

    #input-panel {
        dock: top;
        height: auto;
        padding: 1 2 0 2;
        background: $surface;
    }

    #idea-hint {
        height: auto;
        color: $text-muted;
    }

    #idea-input {
        height: 5;
        width: 1fr;
        margin-top: 1;
    }

    #suggestions {
        width: 1fr;
        margin-top: 1;
    }

    #addon-row {
        height: auto;
        padding: 1 0 0 0;
    }

    #button-bar {
        height: 3;
        padding: 0 2;
        align: left middle;
        background: $surface;
    }

    #button-bar Button {
        margin-right: 1;
    }

    #error-line {
        height: auto;
        color: $error;
        padding: 0 2;
    }

    #result-area {
        height: 1fr;
        padding: 0 2 1 2;
    }

    #status-bar {
        dock: bottom;
        height: 3;
        padding: 1 2;
        background: $accent;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("ctrl+g", "generate",    "Generate",    show=True),
        Binding("ctrl+y", "copy_prompt", "Copy prompt", show=True),
        Binding("ctrl+l", "clear",       "Clear",       show=True),
        Binding("ctrl+q", "quit",        "Quit",        show=True),
    ]

    def __init__(self, config: Config | None = None) -> None:
        super().__init__()
        self._config = config or Config.load()
        self._defaults = self._config.selections()
        self.blueprint: GeneratedPrompt | None = None
        self.error_message = ""

    def compose(self) -> ComposeResult:
        yield Header()

        with Vertical(id="input-panel"):
            yield Label(
                "Concept to build. Keep it under three sentences; mention tone, "
                "stakes or key motifs if you want them emphasized.",
                id="idea-hint",
            )
            yield TextArea(id="idea-input")
            yield Select(
                [(idea, idea) for idea in SUGGESTIONS],
                prompt="Quick ideas to ignite",
                id="suggestions",
            )
            with Horizontal(id="addon-row"):
                for kind in AddOnKind:
                    yield Checkbox(
                        ADD_ON_LABELS[kind],
                        value=self._defaults.is_selected(kind),
                        id=_checkbox_id(kind),
                    )

        with Horizontal(id="button-bar"):
            yield Button("Generate prompt", id="btn-generate", variant="primary")
            yield Button("Copy prompt",     id="btn-copy",     variant="default", disabled=True)
            yield Button("Clear",           id="btn-clear",    variant="default")

        yield Static("", id="error-line")
        with VerticalScroll(id="result-area"):
            yield Markdown(_EMPTY_RESULT, id="result")
        yield Static("Ready. Enter a concept, then press Generate.", id="status-bar")
        yield Footer()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _selections(self) -> AddOnSelections:
        chosen = [
            kind for kind in AddOnKind
            if self.query_one(f"#{_checkbox_id(kind)}", Checkbox).value
        ]
        return AddOnSelections.from_kinds(chosen)

    def _set_status(self, msg: str) -> None:
        self.query_one("#status-bar", Static).update(msg)

    def _set_error(self, msg: str) -> None:
        self.error_message = msg
        self.query_one("#error-line", Static).update(msg)

    # ------------------------------------------------------------------
    # Button / key handlers
    # ------------------------------------------------------------------

    @on(Select.Changed, "#suggestions")
    def on_suggestion(self, event: Select.Changed) -> None:
        if isinstance(event.value, str):
            self.query_one("#idea-input", TextArea).text = event.value

    @on(Button.Pressed, "#btn-generate")
    def on_generate_btn(self) -> None:
        self.action_generate()

    @on(Button.Pressed, "#btn-copy")
    def on_copy_btn(self) -> None:
        self.action_copy_prompt()

    @on(Button.Pressed, "#btn-clear")
    def on_clear_btn(self) -> None:
        self.action_clear()

    def action_generate(self) -> None:
        self._set_error("")
        idea = self.query_one("#idea-input", TextArea).text
        try:
            self.blueprint = generate_prompt(idea, self._selections())
        except InvalidInputError as e:
            self._set_error(e.message)
            self._set_status("Nothing generated.")
            return
        self.query_one("#result", Markdown).update(render_markdown(self.blueprint))
        self.query_one("#btn-copy", Button).disabled = False
        self._set_status(f"Blueprint ready: {self.blueprint.concept_title}")

    def action_copy_prompt(self) -> None:
        if self.blueprint is None:
            return
        self.copy_to_clipboard(self.blueprint.full_prompt)
        self._set_status("Full prompt copied to clipboard.")

    def action_clear(self) -> None:
        self.blueprint = None
        self.query_one("#idea-input", TextArea).text = ""
        self.query_one("#result", Markdown).update(_EMPTY_RESULT)
        self.query_one("#btn-copy", Button).disabled = True
        self._set_error("")
        self._set_status("Ready. Enter a concept, then press Generate.")
