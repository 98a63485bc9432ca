# mpris_presence/config.py
import json
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .models import Config

CONFIG_PATH = os.getenv("MPP_CONFIG", "config.json")
APP_ID_VAR = "APP_ID"

_LIST_FIELDS = ("keyword_whitelist", "artist_keyword_blacklist")
_BOOL_FIELDS = ("use_whitelist", "play_no_url", "use_artist_blacklist", "embolden_titles")


def config_from_dict(data: dict) -> Config:
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a JSON object, got {type(data).__name__}")

    values = {}
    for key in _LIST_FIELDS:
        if key not in data:
            raise ConfigError(f"missing config field: {key}")
        items = data[key]
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise ConfigError(f"{key} must be a list of strings")
        values[key] = tuple(items)

    for key in _BOOL_FIELDS:
        if key not in data:
            raise ConfigError(f"missing config field: {key}")
        if not isinstance(data[key], bool):
            raise ConfigError(f"{key} must be true or false")
        values[key] = data[key]

    return Config(**values)


def load_config(path: Union[str, Path] = CONFIG_PATH) -> Config:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e

    return config_from_dict(data)


def load_app_id(env_file: Optional[Union[str, Path]] = None) -> int:
    """Discord application id from APP_ID, after loading .env if there is one."""
    if env_file is None:
        # look next to config.json, i.e. the working directory and its parents
        env_file = find_dotenv(usecwd=True)
    if env_file and Path(env_file).exists():
        load_dotenv(env_file)

    raw = (os.getenv(APP_ID_VAR) or "").strip()
    if not raw:
        raise ConfigError(f"Set an APP ID ({APP_ID_VAR} is not set)")
    if not (raw.isascii() and raw.isdigit()):
        raise ConfigError(f"{APP_ID_VAR} must be numeric, got {raw!r}")
    return int(raw)
