from __future__ import annotations

import pytest

from drag_engine.runtime import DragConfig, telemetry


def test_defaults() -> None:
    config = DragConfig()

    assert config.extra_word_chars == ""
    assert config.rejection_level == "warning"
    assert config.logger_name == "drag_engine.dispatch"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DRAG_ENGINE_EXTRA_WORD_CHARS", "_-")
    monkeypatch.setenv("DRAG_ENGINE_LOG_REJECTIONS", "off")
    monkeypatch.setenv("DRAG_ENGINE_LOGGER", "editor.drag")

    config = DragConfig.from_env()

    assert config.extra_word_chars == "_-"
    assert config.log_rejections is False
    assert config.rejection_level == "debug"
    assert config.logger_name == "editor.drag"


def test_telemetry_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DRAG_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DRAG_ENGINE_NO_COLOR", "1")
    monkeypatch.setenv("DRAG_ENGINE_LOG_BUFFERED", "yes")
    monkeypatch.setenv("DRAG_ENGINE_LOG_BUFFER_SIZE", "64")

    settings = telemetry.TelemetrySettings.from_env()

    assert settings.level == "DEBUG"
    assert settings.colored is False
    assert settings.buffered is True
    assert settings.buffer_size == 64


def test_configure_rejects_conflicting_arguments() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_marks_failure_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("drag::test", component=True, metadata={"case": 1}):
            raise RuntimeError("boom")
