import json
from concurrent.futures import ThreadPoolExecutor

import pytest
from schemas import AddOnKind, AddOnSelections
from vidprompt.config import EMPTY_IDEA_MESSAGE, SUGGESTIONS
from vidprompt.engine import InvalidInputError, generate_prompt

ASTRONAUT = "A lone astronaut planting a garden on Mars to remember Earth."
LIGHTHOUSE = "A forgotten lighthouse awakening during a midnight storm."

IDEAS = [
    ASTRONAUT,
    *SUGGESTIONS,
    "x",
    "!!!",
    "東京の夜",
    "Make a video about a robot learning to paint. It should feel hopeful!",
    " ".join(["storm"] * 300),
]


@pytest.mark.parametrize("idea", IDEAS)
def test_any_non_empty_idea_gives_a_full_blueprint(idea):
    result = generate_prompt(idea, AddOnSelections.all())
    assert len(result.scenes) == 4
    for value in (result.concept_title, result.one_liner, result.mood, result.style, result.full_prompt):
        assert value.strip()
    assert set(result.add_ons) == set(AddOnKind)


@pytest.mark.parametrize("idea", ["", "   ", "\n\t  "])
@pytest.mark.parametrize("selections", [None, AddOnSelections(), AddOnSelections.all()])
def test_blank_idea_is_rejected(idea, selections):
    with pytest.raises(InvalidInputError) as exc_info:
        generate_prompt(idea, selections)
    assert exc_info.value.message == EMPTY_IDEA_MESSAGE
    assert str(exc_info.value) == EMPTY_IDEA_MESSAGE


def test_invalid_input_error_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_same_arguments_give_identical_results():
    sel = AddOnSelections(voiceover=True, captions_and_tags=True)
    first = generate_prompt(ASTRONAUT, sel)
    second = generate_prompt(ASTRONAUT, sel)
    assert first == second
    assert json.dumps(first.to_payload()) == json.dumps(second.to_payload())


def test_surrounding_whitespace_does_not_change_the_result():
    assert generate_prompt(f"  {ASTRONAUT}\n") == generate_prompt(ASTRONAUT)


def test_concurrent_calls_agree():
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: generate_prompt(LIGHTHOUSE, AddOnSelections.all()), range(16)))
    assert all(r == results[0] for r in results)


@pytest.mark.parametrize("kinds", [
    [],
    ["voiceover"],
    ["dialogue", "musicNotes"],
    ["thumbnailPrompt", "captionsAndTags", "voiceover"],
    [kind.value for kind in AddOnKind],
])
def test_add_on_keys_match_selection(kinds):
    sel = AddOnSelections.from_kinds(kinds)
    result = generate_prompt(ASTRONAUT, sel)
    assert set(result.add_ons) == {AddOnKind(k) for k in kinds}
    assert all(text.strip() for text in result.add_ons.values())


def test_full_prompt_reflects_title_and_scene_titles():
    result = generate_prompt(LIGHTHOUSE)
    assert result.concept_title in result.full_prompt
    for scene in result.scenes:
        assert scene.title in result.full_prompt


def test_astronaut_with_thumbnail_and_captions():
    sel = AddOnSelections(thumbnail_prompt=True, captions_and_tags=True)
    result = generate_prompt(ASTRONAUT, sel)
    assert len(result.scenes) == 4
    assert set(result.add_ons) == {AddOnKind.THUMBNAIL_PROMPT, AddOnKind.CAPTIONS_AND_TAGS}
    assert result.add_ons[AddOnKind.THUMBNAIL_PROMPT]
    assert result.add_ons[AddOnKind.CAPTIONS_AND_TAGS]
    payload = result.to_payload()
    for absent in ("voiceover", "dialogue", "musicNotes"):
        assert absent not in payload["addOns"]


def test_whitespace_idea_fails():
    with pytest.raises(InvalidInputError):
        generate_prompt("   ", AddOnSelections(thumbnail_prompt=True))


def test_lighthouse_without_add_ons():
    result = generate_prompt(LIGHTHOUSE, AddOnSelections())
    assert result.add_ons == {}
    assert len(result.scenes) == 4
    assert result.concept_title == "The Forgotten Lighthouse: Awakening"
    assert result.mood == "ominous"
    assert result.full_prompt


@pytest.mark.parametrize("idea", ["\u200b", " \u200b\ufeff ", "\u2060\n\u200d"])
def test_zero_width_only_idea_is_rejected(idea):
    with pytest.raises(InvalidInputError):
        generate_prompt(idea)


def test_zero_width_edges_are_trimmed():
    assert generate_prompt(f"\u200b{LIGHTHOUSE}\ufeff") == generate_prompt(LIGHTHOUSE)
