import json

import pytest

from TreeCalc import config_manager
from TreeCalc import error as E


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "nope.json")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_defaults_when_file_broken(settings_file):
    settings_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("decimal_places") == 10


def test_partial_file_is_merged(settings_file):
    settings_file.write_text(json.dumps({"debug": True}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["debug"] is True
    assert settings["decimal_places"] == 10
    assert settings["trim_trailing_operator"] is True


def test_unknown_key_returns_zero():
    assert config_manager.load_setting_value("darkmode") == 0


def test_save_setting(settings_file):
    saved = config_manager.save_setting({"decimal_places": 3, "trim_trailing_operator": False})
    assert saved["decimal_places"] == 3
    on_disk = json.loads(settings_file.read_text(encoding="utf-8"))
    assert on_disk == saved
    assert config_manager.load_setting_value("trim_trailing_operator") is False


@pytest.mark.parametrize("bad", [
    {"decimal_places": "3"},
    {"decimal_places": True},
    {"debug": 1},
])
def test_wrong_type_is_rejected(settings_file, bad):
    settings_file.write_text(json.dumps(bad), encoding="utf-8")
    with pytest.raises(E.ConfigurationError) as excinfo:
        config_manager.load_setting_value("all")
    assert excinfo.value.code == "5001"


def test_save_wrong_type_is_rejected():
    with pytest.raises(E.ConfigurationError):
        config_manager.save_setting({"decimal_places": 2.5})


def test_save_unwritable(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")
    with pytest.raises(E.ConfigurationError) as excinfo:
        config_manager.save_setting({"debug": True})
    assert excinfo.value.code == "5002"


def test_shipped_config_matches_defaults():
    shipped = config_manager.Path(config_manager.__file__).resolve().parent / "config.json"
    assert json.loads(shipped.read_text(encoding="utf-8")) == config_manager.DEFAULT_SETTINGS
