import json
import logging

import pytest

import vidprompt.config
from schemas import AddOnKind
from vidprompt.config import DEFAULT_ADD_ONS, Config


def test_defaults_without_config_file(config_home):
    cfg = Config.load()
    assert cfg.default_add_ons == DEFAULT_ADD_ONS
    assert cfg.log_level == "INFO"
    assert cfg.selections().selected() == [AddOnKind.THUMBNAIL_PROMPT, AddOnKind.CAPTIONS_AND_TAGS]


def test_save_then_load(config_home):
    cfg = Config(default_add_ons=["voiceover"], log_level="DEBUG", port=9001)
    cfg.save()
    assert vidprompt.config.CONFIG_FILE.exists()
    loaded = Config.load()
    assert loaded.default_add_ons == ["voiceover"]
    assert loaded.log_level == "DEBUG"
    assert loaded.port == 9001


def test_env_overrides_file(config_home, monkeypatch):
    Config(default_add_ons=["voiceover"]).save()
    monkeypatch.setenv("VIDPROMPT_ADDONS", "dialogue, musicNotes")
    monkeypatch.setenv("VIDPROMPT_LOG_LEVEL", "WARNING")
    cfg = Config.load()
    assert cfg.default_add_ons == ["dialogue", "musicNotes"]
    assert cfg.log_level == "WARNING"


def test_empty_env_means_no_add_ons(config_home, monkeypatch):
    monkeypatch.setenv("VIDPROMPT_ADDONS", "")
    assert Config.load().selections().selected() == []


def test_corrupt_file_falls_back_to_defaults(config_home, caplog):
    config_home.mkdir(parents=True)
    vidprompt.config.CONFIG_FILE.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="vidprompt.config"):
        cfg = Config.load()
    assert cfg.default_add_ons == DEFAULT_ADD_ONS
    assert "Ignoring unreadable config" in caplog.text


def test_unknown_add_on_names_are_skipped(config_home, caplog):
    vidprompt.config.CONFIG_FILE.parent.mkdir(parents=True)
    vidprompt.config.CONFIG_FILE.write_text(json.dumps({"default_add_ons": ["voiceover", "subtitles"]}))
    with caplog.at_level(logging.WARNING, logger="vidprompt.config"):
        sel = Config.load().selections()
    assert sel.selected() == [AddOnKind.VOICEOVER]
    assert "subtitles" in caplog.text


@pytest.mark.parametrize("content", [[], "voiceover", 3, None])
def test_non_object_file_falls_back_to_defaults(config_home, caplog, content):
    config_home.mkdir(parents=True)
    vidprompt.config.CONFIG_FILE.write_text(json.dumps(content))
    with caplog.at_level(logging.WARNING, logger="vidprompt.config"):
        cfg = Config.load()
    assert cfg == Config()
    assert "Ignoring unreadable config" in caplog.text


def test_add_on_string_is_not_split_into_letters(config_home, caplog):
    config_home.mkdir(parents=True)
    vidprompt.config.CONFIG_FILE.write_text(json.dumps({"default_add_ons": "voiceover", "port": 9002}))
    with caplog.at_level(logging.WARNING, logger="vidprompt.config"):
        cfg = Config.load()
    assert cfg.default_add_ons == DEFAULT_ADD_ONS
    assert cfg.port == 9002
    assert "must be a list" in caplog.text


def test_unknown_log_level_is_dropped(config_home, monkeypatch, caplog):
    Config(log_level="loud").save()
    with caplog.at_level(logging.WARNING, logger="vidprompt.config"):
        assert Config.load().log_level == "INFO"
    monkeypatch.setenv("VIDPROMPT_LOG_LEVEL", "shout")
    assert Config.load().log_level == "INFO"
    monkeypatch.setenv("VIDPROMPT_LOG_LEVEL", "debug")
    assert Config.load().log_level == "DEBUG"
    assert "loud" in caplog.text
