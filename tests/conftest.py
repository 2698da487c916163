import json

import pytest

from TreeCalc import config_manager


@pytest.fixture(autouse=True)
def settings_file(tmp_path, monkeypatch):
    """Point config_manager at a throwaway config.json holding the defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_manager.DEFAULT_SETTINGS), encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", path)
    return path
