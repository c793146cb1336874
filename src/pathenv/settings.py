"""User settings.

Settings are read from ``pathenv.json`` and then ``pathenv.jsonc`` in the
user config directory, and last from the ``PATHENV_SETTINGS`` variable.
Each source may carry ``//`` comments, and a later source overrides an
earlier one key by key. The directory can be moved with
``PATHENV_CONFIG_DIR``. Both variables are looked up through the active
environment provider, like every other variable pathenv reads.

    {
      // print debug records for every join
      "logging": {"level": "debug", "console": true}
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import commentjson
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.env import Env, Environment
from .errors import SettingsError

APP_NAME = "pathenv"
CONFIG_DIR_VAR = "PATHENV_CONFIG_DIR"
SETTINGS_VAR = "PATHENV_SETTINGS"
SETTINGS_FILES = ("pathenv.json", "pathenv.jsonc")


class LoggingSettings(BaseModel):
    """The ``logging`` section."""

    level: Optional[Literal["debug", "info", "warn", "error"]] = None
    format: Optional[Literal["kv", "json"]] = None
    console: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class Settings(BaseModel):
    """All user settings."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(extra="forbid")


def config_dir(env: Optional[Environment] = None) -> Path:
    """Directory holding the settings files."""
    provider = env if env is not None else Env.current()
    override = provider.get(CONFIG_DIR_VAR)
    return Path(override) if override else Path(user_config_dir(APP_NAME))


def _overlay(base: Dict[str, Any], top: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in top.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


def _parse(text: str, source: str) -> Dict[str, Any]:
    try:
        data = commentjson.loads(text)
    except (ValueError, commentjson.JSONLibraryException) as e:
        raise SettingsError(source, f"not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(source, "expected a JSON object")
    return data


def load_settings(env: Optional[Environment] = None) -> Settings:
    """Read and validate the settings visible to ``env``.

    Missing sources count as empty. Raises SettingsError when a source
    cannot be read or parsed, or the merged result fails validation.
    """
    provider = env if env is not None else Env.current()
    merged: Dict[str, Any] = {}

    folder = config_dir(provider)
    for name in SETTINGS_FILES:
        path = folder / name
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            continue
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsError(str(path), str(e)) from e
        merged = _overlay(merged, _parse(text, str(path)))

    inline = provider.get(SETTINGS_VAR)
    if inline:
        merged = _overlay(merged, _parse(inline, SETTINGS_VAR))

    try:
        return Settings.model_validate(merged)
    except ValidationError as e:
        raise SettingsError("settings", str(e)) from e
