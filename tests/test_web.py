import pytest
from litestar.testing import TestClient
from vidprompt.config import EMPTY_IDEA_MESSAGE, SUGGESTIONS
from webui.backend.app import app

ASTRONAUT = "A lone astronaut planting a garden on Mars to remember Earth."


@pytest.fixture
def client():
    with TestClient(app=app) as client:
        yield client


def test_create_prompt(client):
    resp = client.post("/api/prompts", json={
        "idea": ASTRONAUT,
        "selections": {"thumbnailPrompt": True, "captionsAndTags": True},
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["conceptTitle"] == "The Lone Astronaut: Planting a Garden"
    assert len(body["scenes"]) == 4
    assert set(body["addOns"]) == {"thumbnailPrompt", "captionsAndTags"}


def test_create_prompt_without_selections(client):
    resp = client.post("/api/prompts", json={"idea": ASTRONAUT})
    assert resp.status_code == 201
    assert resp.json()["addOns"] == {}


def test_blank_idea_is_a_bad_request(client):
    resp = client.post("/api/prompts", json={"idea": "   ", "selections": {"voiceover": True}})
    assert resp.status_code == 400
    assert resp.json() == {"detail": EMPTY_IDEA_MESSAGE}


def test_unknown_selection_key_is_rejected(client):
    resp = client.post("/api/prompts", json={"idea": ASTRONAUT, "selections": {"subtitles": True}})
    assert resp.status_code == 400


def test_suggestions(client):
    resp = client.get("/api/suggestions")
    assert resp.status_code == 200
    assert resp.json() == list(SUGGESTIONS)


def test_config_round_trip(client, config_home):
    resp = client.get("/api/config")
    assert resp.status_code == 200
    assert resp.json()["default_add_ons"] == ["thumbnailPrompt", "captionsAndTags"]

    resp = client.post("/api/config", json={"default_add_ons": ["voiceover"], "log_level": "DEBUG"})
    assert resp.status_code == 201
    assert client.get("/api/config").json() == {"default_add_ons": ["voiceover"], "log_level": "DEBUG"}


def test_config_rejects_unknown_add_on(client, config_home):
    resp = client.post("/api/config", json={"default_add_ons": ["subtitles"]})
    assert resp.status_code == 400


def test_config_rejects_unknown_log_level(client, config_home):
    resp = client.post("/api/config", json={"default_add_ons": [], "log_level": "loud"})
    assert resp.status_code == 400
    assert client.get("/api/config").json()["log_level"] == "INFO"


def test_config_log_level_is_case_insensitive(client, config_home):
    resp = client.post("/api/config", json={"default_add_ons": [], "log_level": "warning"})
    assert resp.status_code == 201
    assert client.get("/api/config").json()["log_level"] == "WARNING"
