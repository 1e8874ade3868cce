from __future__ import annotations

import pytest

from vkeyboard.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="nonexistent")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_env_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VKEYBOARD_SAMPLE_FLAG", "yes")
    assert telemetry.env_flag("SAMPLE_FLAG", False) is True

    monkeypatch.setenv("VKEYBOARD_SAMPLE_FLAG", "0")
    assert telemetry.env_flag("SAMPLE_FLAG", True) is False

    monkeypatch.delenv("VKEYBOARD_SAMPLE_FLAG")
    assert telemetry.env_flag("SAMPLE_FLAG", True) is True


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("vkeyboard.test") is telemetry.get_logger(
        "vkeyboard.test"
    )


def test_span_reraises_errors() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", component="tests"):
            raise RuntimeError("boom")
