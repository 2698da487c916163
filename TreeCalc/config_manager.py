# config_manager.py
import json
from pathlib import Path

from . import error as E

config_json = Path(__file__).resolve().parent / "config.json"


# Fallback values, also used to type-check what comes out of config.json
DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "trim_trailing_operator": True,
    "debug": False,
}


def _check_types(settings_dict):
    for key, default in DEFAULT_SETTINGS.items():
        value = settings_dict[key]
        # bool is a subclass of int, so compare the exact type
        if type(value) is not type(default):
            raise E.ConfigurationError(f"{key} = {value!r}", code="5001")


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict.update(json.load(f))

    except (FileNotFoundError, json.JSONDecodeError):
        pass

    _check_types(settings_dict)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    merged = dict(DEFAULT_SETTINGS)
    merged.update(settings_dict)
    _check_types(merged)
    try:
        with open (config_json, 'w', encoding= 'utf-8') as f:
            json.dump(merged, f, indent=4)
            return merged

    except OSError as e:
        raise E.ConfigurationError(str(e), code="5002") from e


if __name__ == "__main__":
    print(load_setting_value("all"))
