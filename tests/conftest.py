import pytest

import vidprompt.config
import vidprompt.main


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point config and log files at a temp dir and clear env overrides."""
    home = tmp_path / ".vidprompt"
    monkeypatch.setattr(vidprompt.config, "CONFIG_DIR", home)
    monkeypatch.setattr(vidprompt.config, "CONFIG_FILE", home / "config.json")
    monkeypatch.setattr(vidprompt.main, "CONFIG_DIR", home)
    monkeypatch.delenv("VIDPROMPT_ADDONS", raising=False)
    monkeypatch.delenv("VIDPROMPT_LOG_LEVEL", raising=False)
    return home
