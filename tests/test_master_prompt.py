from vidprompt.analysis import analyze_concept
from vidprompt.master_prompt import assemble_full_prompt, describe_scene
from vidprompt.scenes import build_scenes

IDEA = "An elder painter restoring constellations inside a planetarium."


def test_full_prompt_mentions_title_mood_style_and_scenes_in_order():
    a = analyze_concept(IDEA)
    scenes = build_scenes(a)
    prompt = assemble_full_prompt(a, scenes)
    assert a.title in prompt
    assert a.mood.name in prompt
    assert a.style.name in prompt
    positions = [prompt.index(scene.title) for scene in scenes]
    assert positions == sorted(positions)


def test_full_prompt_is_continuous_prose():
    a = analyze_concept(IDEA)
    prompt = assemble_full_prompt(a, build_scenes(a))
    assert "\n" not in prompt
    assert prompt.endswith(".")
    assert a.style.texture in prompt


def test_describe_scene_carries_scene_details():
    a = analyze_concept(IDEA)
    scene = build_scenes(a)[1]
    text = describe_scene(1, scene)
    assert text.startswith(f'Next, scene 2, "{scene.title}":')
    assert scene.lighting in text
    assert scene.important_objects in text
