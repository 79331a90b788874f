from schemas import AddOnSelections
from vidprompt.engine import generate_prompt
from vidprompt.render import ADD_ON_LABELS, render_markdown, render_text

IDEA = "Time travelers sending memories through origami cranes."


def test_markdown_has_every_section():
    result = generate_prompt(IDEA, AddOnSelections(voiceover=True, music_notes=True))
    md = render_markdown(result)
    assert md.startswith(f"# {result.concept_title}\n")
    for i, scene in enumerate(result.scenes, start=1):
        assert f"### Scene {i}: {scene.title}" in md
    assert "## Full Text-to-Video Prompt" in md
    assert result.full_prompt in md
    assert "### Voiceover script" in md
    assert "### Music direction" in md
    assert "### Dialogue beat" not in md


def test_markdown_omits_add_on_section_when_empty():
    md = render_markdown(generate_prompt(IDEA))
    assert "## Add-ons" not in md


def test_plain_text_lists_scene_fields():
    result = generate_prompt(IDEA, AddOnSelections.all())
    text = render_text(result)
    assert "SCENE 4 - " in text
    assert f"  Camera angle: {result.scenes[0].camera_angle}" in text
    for label in ADD_ON_LABELS.values():
        assert label.upper() in text
