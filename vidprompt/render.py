"""Human-readable renderings of a blueprint for the CLI and TUI."""
from __future__ import annotations

from schemas import AddOnKind, GeneratedPrompt

ADD_ON_LABELS: dict[AddOnKind, str] = {
    AddOnKind.VOICEOVER: "Voiceover script",
    AddOnKind.DIALOGUE: "Dialogue beat",
    AddOnKind.THUMBNAIL_PROMPT: "Thumbnail / Poster prompt",
    AddOnKind.CAPTIONS_AND_TAGS: "Captions & tags",
    AddOnKind.MUSIC_NOTES: "Music direction",
}

# (label, Scene attribute) in display order
SCENE_FIELDS = (
    ("Setting", "setting"),
    ("Camera angle", "camera_angle"),
    ("Movement", "camera_movement"),
    ("Character actions", "character_actions"),
    ("Lighting", "lighting"),
    ("Colors", "colors"),
    ("Atmosphere", "atmosphere"),
    ("Important objects", "important_objects"),
)


def render_markdown(result: GeneratedPrompt) -> str:
    lines = [
        f"# {result.concept_title}",
        "",
        result.one_liner,
        "",
        f"**Mood:** {result.mood}  ",
        f"**Style:** {result.style}",
        "",
        "## Scene Breakdown",
    ]
    for i, scene in enumerate(result.scenes, start=1):
        lines += ["", f"### Scene {i}: {scene.title}", ""]
        lines += [f"- **{label}:** {getattr(scene, attr)}" for label, attr in SCENE_FIELDS]
    lines += ["", "## Full Text-to-Video Prompt", "", result.full_prompt]
    if result.add_ons:
        lines += ["", "## Add-ons"]
        for kind, text in result.add_ons.items():
            # keep line breaks inside add-on text
            lines += ["", f"### {ADD_ON_LABELS[kind]}", "", text.replace("\n", "  \n")]
    return "\n".join(lines) + "\n"


def render_text(result: GeneratedPrompt) -> str:
    """Plain-text rendering, e.g. for piping into other tools."""
    lines = [
        result.concept_title.upper(),
        result.one_liner,
        f"Mood: {result.mood}",
        f"Style: {result.style}",
    ]
    for i, scene in enumerate(result.scenes, start=1):
        lines += ["", f"SCENE {i} - {scene.title}"]
        lines += [f"  {label}: {getattr(scene, attr)}" for label, attr in SCENE_FIELDS]
    lines += ["", "FULL PROMPT", result.full_prompt]
    for kind, text in result.add_ons.items():
        lines += ["", ADD_ON_LABELS[kind].upper(), text]
    return "\n".join(lines) + "\n"
