from __future__ import annotations

import pytest

from vkeyboard.config import KeyboardConfig
from vkeyboard.engine import EditingEngine
from vkeyboard.layout import DEFAULT_KEY_PATTERN


def test_defaults_without_environment() -> None:
    config = KeyboardConfig.from_env({})

    assert config.placeholder == "Type something..."
    assert config.caps is True
    assert config.key_pattern == DEFAULT_KEY_PATTERN
    assert config.initial_text == ""


def test_values_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VKEYBOARD_PLACEHOLDER", "Search")
    monkeypatch.setenv("VKEYBOARD_CAPS", "off")
    monkeypatch.setenv("VKEYBOARD_KEY_PATTERN", r"^[0-9]$")
    monkeypatch.setenv("VKEYBOARD_INITIAL_TEXT", "42")

    config = KeyboardConfig.from_env()

    assert config.placeholder == "Search"
    assert config.caps is False
    assert config.key_pattern == r"^[0-9]$"
    assert config.initial_text == "42"


def test_unrecognized_flag_falls_back_to_default() -> None:
    assert KeyboardConfig.from_env({"VKEYBOARD_CAPS": "maybe"}).caps is True


def test_invalid_key_pattern_is_rejected() -> None:
    with pytest.raises(ValueError):
        KeyboardConfig(key_pattern="[unclosed")


def test_engine_from_config() -> None:
    engine = EditingEngine.from_config(KeyboardConfig(caps=False, initial_text="hi"))

    assert engine.text == "hi"
    assert engine.cursor == 2
    assert engine.caps.enabled is False
