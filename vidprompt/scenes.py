"""Four-act scene breakdown."""
from __future__ import annotations

import hashlib
from typing import Tuple

from schemas import Scene

from .analysis import ConceptAnalysis
from .config import MAX_OBJECT_TERMS, SCENE_COUNT

FourScenes = Tuple[Scene, Scene, Scene, Scene]

ACT_LABELS = ("Setup", "Escalation", "Climax", "Resolution")

# Camera vocabulary per act; one entry is picked per concept
CAMERA_ANGLES: tuple[tuple[str, ...], ...] = (
    (
        "Extreme wide establishing shot",
        "High-angle wide shot looking down on the scene",
        "Wide shot at eye level with the subject small in frame",
    ),
    (
        "Medium shot at eye level",
        "Over-the-shoulder medium shot",
        "Medium-wide two-thirds profile",
    ),
    (
        "Low-angle hero shot",
        "Tight close-up on the face and hands",
        "Dutch-angle medium close-up",
    ),
    (
        "Wide shot from behind the subject",
        "Slow-reveal high angle",
        "Medium shot settling into a wide frame",
    ),
)

CAMERA_MOVES: tuple[tuple[str, ...], ...] = (
    ("slow push-in from a distance", "gentle drone glide toward the subject", "locked-off frame with a subtle drift"),
    ("tracking shot alongside the action", "handheld follow shot", "lateral dolly move"),
    ("rapid push-in to close-up", "orbiting 180-degree arc", "crane up as the moment peaks"),
    ("slow pull-back to reveal the whole scene", "crane out and up into the sky", "long static hold that lets the moment breathe"),
)


def _cap(text: str) -> str:
    return text[:1].upper() + text[1:]


def _scene_id(concept: str, index: int) -> str:
    digest = hashlib.sha256(f"{concept}|{index}".encode("utf-8")).hexdigest()[:8]
    return f"scene-{index + 1}-{digest}"


def _setting(analysis: ConceptAnalysis, act: int) -> str:
    place = analysis.place
    detail = analysis.style.setting_details[act]
    framing = (
        f"{_cap(place)}, seen whole for the first time",
        f"Deeper into {place}",
        f"The heart of {place}",
        f"{_cap(place)} after the turning point",
    )[act]
    return f"{framing}; {detail}"


def _character_actions(analysis: ConceptAnalysis, act: int) -> str:
    who = analysis.protagonist
    action = analysis.action_or_default
    if act == 0:
        return f"We meet {who} in an ordinary moment, just before {action}."
    if act == 1:
        return f"Momentum builds: {who} deep in {action}, obstacles mounting with every step."
    if act == 2:
        stakes = f"everything riding on the need to {analysis.purpose}" if analysis.purpose else analysis.mood.climax
        return f"The turning point: {who} at the edge of success, {stakes}."
    return f"Aftermath: {who} taking in what has changed, {analysis.mood.resolution}."


def _objects(analysis: ConceptAnalysis, act: int) -> str:
    motifs = analysis.motifs
    chosen: list[str] = []
    for offset in range(min(MAX_OBJECT_TERMS, len(motifs))):
        motif = motifs[(act + offset) % len(motifs)]
        if motif not in chosen:
            chosen.append(motif)
    chosen.append(analysis.style.props[act])
    return ", ".join(chosen)


def build_scenes(analysis: ConceptAnalysis) -> FourScenes:
    """Build the setup / escalation / climax / resolution beats.

    Lighting, palette and atmosphere follow the mood profile's ramp and the
    accent colour comes from the style profile, so the four scenes read as one
    progression rather than four unrelated shots.
    """
    mood, style = analysis.mood, analysis.style
    scenes = []
    for act in range(SCENE_COUNT):
        scenes.append(
            Scene(
                id=_scene_id(analysis.concept, act),
                title=f"{ACT_LABELS[act]}: {mood.beats[act]}",
                setting=_setting(analysis, act),
                camera_angle=analysis.pick(CAMERA_ANGLES[act], salt=act + 1),
                camera_movement=f"{_cap(analysis.pick(CAMERA_MOVES[act], salt=act + 5))}, {mood.pace}",
                character_actions=_character_actions(analysis, act),
                lighting=mood.lighting[act],
                colors=f"{_cap(mood.palette[act])} with {style.accent} accents",
                atmosphere=_cap(mood.atmosphere[act]),
                important_objects=_objects(analysis, act),
            )
        )
    return (scenes[0], scenes[1], scenes[2], scenes[3])
