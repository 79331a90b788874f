"""Optional supplementary artifacts built from the same analysis as the scenes."""
from __future__ import annotations

import re
from typing import Callable

from schemas import AddOnKind, AddOnSelections, Scene

from .analysis import SMALL_WORDS, ConceptAnalysis
from .config import MAX_HASHTAGS

AddOnBuilder = Callable[[ConceptAnalysis, tuple[Scene, ...]], str]

# Narration line per act
_VOICEOVER_LINES = (
    "Somewhere in {place}, {who} is about to begin.",
    "Every step of {action} asks for a little more than the last.",
    "And then, all at once, {stakes}.",
    "What remains is {resolution}.",
)

# Generic tags shared by every blueprint
_BASE_TAGS = ("aivideo", "texttovideo")


def _cap(text: str) -> str:
    return text[:1].upper() + text[1:]


def _speaker(protagonist: str) -> str:
    words = protagonist.split()
    if len(words) > 1 and words[0].lower() in {"the", "a", "an"}:
        words = words[1:]
    return " ".join(words).upper()


def _hashtag(text: str) -> str:
    return "#" + re.sub(r"[^\w]", "", text.lower())


def build_voiceover(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    stakes = (
        f"the need to {analysis.purpose} is the only thing left"
        if analysis.purpose else analysis.mood.climax
    )
    values = {
        "who": analysis.protagonist,
        "action": analysis.action_or_default,
        "place": analysis.place,
        "stakes": stakes,
        "resolution": analysis.mood.resolution,
    }
    lines = [f"Delivery: {analysis.mood.voice}."]
    for scene, template in zip(scenes, _VOICEOVER_LINES):
        lines.append(f"[{scene.title}] {_cap(template.format(**values))}")
    return "\n".join(lines)


def build_dialogue(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    hero = _speaker(analysis.protagonist)
    other = analysis.style.counterpart.upper()
    why = f"I have to {analysis.purpose}." if analysis.purpose else "This is the only chance we get."
    return "\n".join((
        f"Setting: {scenes[2].title}, {scenes[2].atmosphere.lower()}.",
        f"{other}: You don't have to keep {analysis.action_or_default}. Not like this.",
        f"{hero}: {why}",
        f"{other}: Then don't do it alone.",
        f"{hero}: (a beat, then quietly) I never was.",
    ))


def build_thumbnail_prompt(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    climax = scenes[2]
    return (
        f"Cinematic poster frame for \"{analysis.title}\": {analysis.protagonist} in "
        f"{analysis.place}, captured at the climax as a {climax.camera_angle.lower()}. "
        f"{climax.lighting}, {climax.colors.lower()}, {analysis.mood.name} mood, "
        f"{analysis.style.name}, {analysis.style.texture}. Bold central composition with "
        f"clean negative space at the top for the title, 16:9, ultra-detailed, no text."
    )


def _hashtags(analysis: ConceptAnalysis) -> list[str]:
    words = [
        w for w in re.findall(r"[\w']+", analysis.title)
        if w.lower() not in SMALL_WORDS and len(w) > 2
    ]
    candidates = [*analysis.style.tags, *analysis.mood.tags, *words, *_BASE_TAGS]
    tags: list[str] = []
    for candidate in candidates:
        tag = _hashtag(candidate)
        if len(tag) > 1 and tag not in tags:
            tags.append(tag)
    return tags[:MAX_HASHTAGS]


def build_captions_and_tags(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    caption = (
        f"{analysis.title}. {_cap(analysis.mood.name)} {analysis.style.name} in four scenes, "
        f"from {scenes[0].title.split(': ', 1)[-1].lower()} to "
        f"{scenes[3].title.split(': ', 1)[-1].lower()}."
    )
    keywords = ", ".join((analysis.mood.name, analysis.style.name, *analysis.motifs))
    return "\n".join((
        f"Caption: {caption}",
        f"Tags: {' '.join(_hashtags(analysis))}",
        f"Keywords: {keywords}",
    ))


def build_music_notes(analysis: ConceptAnalysis, scenes: tuple[Scene, ...]) -> str:
    mood = analysis.mood
    lines = [
        f"Tone: {mood.name}, matched to {analysis.style.name}.",
        f"Tempo: {mood.tempo}.",
        f"Instrumentation: {mood.instruments}.",
    ]
    for scene, cue in zip(scenes, mood.sound_arc):
        lines.append(f"{scene.title}: {cue}.")
    return "\n".join(lines)


ADD_ON_BUILDERS: dict[AddOnKind, AddOnBuilder] = {
    AddOnKind.VOICEOVER: build_voiceover,
    AddOnKind.DIALOGUE: build_dialogue,
    AddOnKind.THUMBNAIL_PROMPT: build_thumbnail_prompt,
    AddOnKind.CAPTIONS_AND_TAGS: build_captions_and_tags,
    AddOnKind.MUSIC_NOTES: build_music_notes,
}


def build_add_ons(
    analysis: ConceptAnalysis,
    scenes: tuple[Scene, ...],
    selections: AddOnSelections,
) -> dict[AddOnKind, str]:
    """Generate text for the selected add-ons only; unselected kinds get no key."""
    return {kind: ADD_ON_BUILDERS[kind](analysis, scenes) for kind in selections.selected()}
