from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Tuple

import pytest

from termpad.runtime import telemetry


class FakeConfig:
    def __init__(self) -> None:
        self.settings: Dict[str, Any] = {}

    def __getattr__(self, name: str) -> Any:
        if not name.startswith("with_"):
            raise AttributeError(name)

        def setter(value: Any) -> "FakeConfig":
            self.settings[name[len("with_") :]] = value
            return self

        return setter


class FakeLogger:
    def __init__(self, name: str, config: FakeConfig) -> None:
        self.name = name
        self.config = config
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    @classmethod
    def with_config(cls, name: str, config: FakeConfig) -> "FakeLogger":
        return cls(name, config)

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("info", message, dict(pairs)))

    def warning_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("warning", message, dict(pairs)))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.records.append(("error", message, dict(pairs)))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield


@pytest.fixture
def fake_telelog(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    fake = SimpleNamespace(Config=FakeConfig, Logger=FakeLogger)
    monkeypatch.setattr(telemetry, "tl", fake)
    monkeypatch.setattr(telemetry, "_active_config", None)
    monkeypatch.setattr(telemetry, "_loggers", {})
    for name in ("LOG_CONSOLE", "LOG_FILE", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"TERMPAD_{name}", raising=False)
    return fake


def test_default_config_keeps_console_quiet(fake_telelog: SimpleNamespace) -> None:
    logger = telemetry.get_logger()

    assert logger.name == "termpad"
    assert logger.config.settings["console_output"] is False
    assert logger.config.settings["min_level"] == "INFO"
    assert "file_output" not in logger.config.settings
    assert telemetry.get_logger() is logger


def test_environment_selects_level_and_file(
    fake_telelog: SimpleNamespace, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TERMPAD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMPAD_LOG_FILE", "editor.log")
    monkeypatch.setenv("TERMPAD_LOG_CONSOLE", "yes")

    settings = telemetry.get_logger().config.settings

    assert settings["min_level"] == "DEBUG"
    assert settings["file_output"] == "editor.log"
    assert settings["console_output"] is True


def test_presets(fake_telelog: SimpleNamespace) -> None:
    telemetry.configure(preset="development")
    dev = telemetry.get_logger("termpad.preset").config.settings
    assert (dev["min_level"], dev["file_output"]) == ("DEBUG", "debug.log")

    telemetry.configure(preset="production")
    prod = telemetry.get_logger("termpad.preset").config.settings
    assert prod["buffering"] is True
    assert prod["file_output"] == "termpad.log"

    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")
    with pytest.raises(ValueError):
        telemetry.configure(config=FakeConfig(), preset="production")


def test_record_event_attaches_data(fake_telelog: SimpleNamespace) -> None:
    telemetry.record_event("document.saved", data={"path": "a.txt", "bytes": 3})

    level, message, data = telemetry.get_logger().records[-1]
    assert level == "info"
    assert message == "event::document.saved"
    assert data == {"event": "document.saved", "path": "a.txt", "bytes": "3"}


def test_span_profiles_and_scopes_context(fake_telelog: SimpleNamespace) -> None:
    logger = telemetry.get_logger()

    with telemetry.span("session::up", component="session", metadata={"offset": 4}):
        assert logger.context == {"offset": "4"}

    assert logger.context == {}
    assert logger.profiled == ["session::up"]
    assert logger.components == ["session"]


def test_span_logs_failure_and_reraises(fake_telelog: SimpleNamespace) -> None:
    logger = telemetry.get_logger()

    with pytest.raises(KeyError):
        with telemetry.span("session::save", component="session"):
            raise KeyError("boom")

    level, message, data = logger.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert data["span"] == "session::save"
    assert data["component"] == "session"
    assert logger.context == {}
