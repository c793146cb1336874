from __future__ import annotations

from pathlib import Path

import pytest

from pathenv import MemoryEnvironment, Settings, SettingsError, load_settings
from pathenv.settings import config_dir


def test_defaults_without_sources() -> None:
    settings = load_settings()

    assert settings == Settings()
    assert settings.logging.level is None
    assert settings.logging.console is None


def test_config_dir_comes_from_provider(memory_env: MemoryEnvironment, tmp_path: Path) -> None:
    assert config_dir() == tmp_path / "config"

    memory_env.set("PATHENV_CONFIG_DIR", str(tmp_path / "elsewhere"))
    assert config_dir() == tmp_path / "elsewhere"


def test_inline_settings_come_from_provider(memory_env: MemoryEnvironment) -> None:
    memory_env.set("PATHENV_SETTINGS", '{"logging": {"level": "error"}}')

    assert load_settings().logging.level == "error"


def test_explicit_provider_is_used() -> None:
    env = MemoryEnvironment({"PATHENV_SETTINGS": '{"logging": {"format": "json"}}'})

    assert load_settings(env).logging.format == "json"
    assert load_settings().logging.format is None


def test_files_then_inline_overlay(settings_dir: Path, memory_env: MemoryEnvironment) -> None:
    (settings_dir / "pathenv.json").write_text('{"logging": {"level": "debug", "console": true}}', encoding="utf-8")
    (settings_dir / "pathenv.jsonc").write_text(
        '{\n  // kv is easier to grep\n  "logging": {"format": "kv"}\n}\n', encoding="utf-8"
    )
    memory_env.set("PATHENV_SETTINGS", '{"logging": {"level": "warn"}}')

    logging = load_settings().logging

    assert logging.level == "warn"
    assert logging.console is True
    assert logging.format == "kv"


def test_unknown_level_is_rejected(memory_env: MemoryEnvironment) -> None:
    memory_env.set("PATHENV_SETTINGS", '{"logging": {"level": "verbose"}}')

    with pytest.raises(SettingsError) as info:
        load_settings()
    assert info.value.source == "settings"


def test_unknown_keys_are_rejected(memory_env: MemoryEnvironment) -> None:
    memory_env.set("PATHENV_SETTINGS", '{"logging": {"file": true}}')

    with pytest.raises(SettingsError):
        load_settings()


def test_broken_file_names_its_path(settings_dir: Path) -> None:
    path = settings_dir / "pathenv.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsError) as info:
        load_settings()
    assert info.value.source == str(path)


def test_inline_settings_must_be_an_object(memory_env: MemoryEnvironment) -> None:
    memory_env.set("PATHENV_SETTINGS", "[1, 2]")

    with pytest.raises(SettingsError) as info:
        load_settings()
    assert info.value.source == "PATHENV_SETTINGS"
