"""Master prompt assembly."""
from __future__ import annotations

from schemas import Scene

from .analysis import ConceptAnalysis

ORDINALS = ("Opening", "Next", "At the climax", "Finally")


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def _sentence(text: str) -> str:
    text = text.strip()
    return text if text.endswith((".", "!", "?")) else text + "."


def describe_scene(index: int, scene: Scene) -> str:
    """One paragraph of prose for a single scene, quoting its title verbatim."""
    return " ".join((
        f'{ORDINALS[index]}, scene {index + 1}, "{scene.title}":',
        _sentence(scene.setting),
        _sentence(f"{scene.camera_angle}, {_lower_first(scene.camera_movement)}"),
        _sentence(scene.character_actions),
        _sentence(
            f"{scene.lighting}, a palette of {_lower_first(scene.colors)}, "
            f"the atmosphere {_lower_first(scene.atmosphere)}"
        ),
        _sentence(f"Key details: {scene.important_objects}"),
    ))


def assemble_full_prompt(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    """Single continuous-prose prompt ready for a text-to-video model."""
    style, mood = analysis.style, analysis.mood
    opening = (
        f'"{analysis.title}": a {mood.name} {style.name} short film in four scenes. '
        f"{_sentence(analysis.one_liner)}"
    )
    body = " ".join(describe_scene(i, scene) for i, scene in enumerate(scenes))
    closing = (
        f"Keep the visuals consistent from start to finish: {style.texture}, "
        f"the same {style.accent} accent color, a {mood.name} tone, and "
        f"{analysis.protagonist} recognizably the same in every scene."
    )
    return " ".join((opening, body, closing))
