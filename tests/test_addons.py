import re

from schemas import AddOnKind, AddOnSelections
from vidprompt.addons import ADD_ON_BUILDERS, build_add_ons
from vidprompt.analysis import analyze_concept
from vidprompt.config import MAX_HASHTAGS
from vidprompt.scenes import build_scenes

ASTRONAUT = "A lone astronaut planting a garden on Mars to remember Earth."


def _inputs(idea=ASTRONAUT):
    a = analyze_concept(idea)
    return a, build_scenes(a)


def test_every_kind_has_a_builder():
    assert set(ADD_ON_BUILDERS) == set(AddOnKind)


def test_nothing_selected_builds_nothing():
    a, scenes = _inputs()
    assert build_add_ons(a, scenes, AddOnSelections()) == {}


def test_only_selected_kinds_are_built():
    a, scenes = _inputs()
    sel = AddOnSelections(dialogue=True, music_notes=True)
    add_ons = build_add_ons(a, scenes, sel)
    assert list(add_ons) == [AddOnKind.DIALOGUE, AddOnKind.MUSIC_NOTES]
    assert all(text.strip() for text in add_ons.values())


def test_voiceover_follows_the_scenes():
    a, scenes = _inputs()
    text = build_add_ons(a, scenes, AddOnSelections(voiceover=True))[AddOnKind.VOICEOVER]
    assert a.mood.voice in text
    for scene in scenes:
        assert f"[{scene.title}]" in text


def test_dialogue_uses_protagonist_and_counterpart():
    a, scenes = _inputs()
    text = build_add_ons(a, scenes, AddOnSelections(dialogue=True))[AddOnKind.DIALOGUE]
    assert "LONE ASTRONAUT: I have to remember Earth." in text
    assert "MISSION CONTROL:" in text


def test_thumbnail_prompt_matches_style_and_mood():
    a, scenes = _inputs()
    text = build_add_ons(a, scenes, AddOnSelections(thumbnail_prompt=True))[AddOnKind.THUMBNAIL_PROMPT]
    assert a.title in text
    assert a.style.name in text
    assert a.mood.name in text
    assert "16:9" in text


def test_captions_and_tags():
    a, scenes = _inputs()
    text = build_add_ons(a, scenes, AddOnSelections(captions_and_tags=True))[AddOnKind.CAPTIONS_AND_TAGS]
    assert text.startswith(f"Caption: {a.title}.")
    tags = re.findall(r"#\w+", text)
    assert "#scifi" in tags
    assert "#astronaut" in tags
    assert len(tags) == len(set(tags)) <= MAX_HASHTAGS


def test_music_notes_match_mood():
    a, scenes = _inputs()
    text = build_add_ons(a, scenes, AddOnSelections(music_notes=True))[AddOnKind.MUSIC_NOTES]
    assert a.mood.tempo in text
    assert a.mood.instruments in text
    assert all(scene.title in text for scene in scenes)
