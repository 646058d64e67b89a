"""Logging for the editor, built on telelog.

The editor owns the terminal while it runs, so nothing is written to the
console unless ``TERMPAD_LOG_CONSOLE`` asks for it. Logs go to
``TERMPAD_LOG_FILE`` when set, or to the file a preset names.

Presets (``TERMPAD_LOG_PRESET`` or ``configure(preset=...)``):

* ``development`` -- DEBUG, plain text, ``debug.log``
* ``production`` -- INFO, buffered, ``termpad.log``
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TERMPAD_"
DEFAULT_LOGGER_NAME = "termpad"

PRESETS: Dict[str, Tuple[str, str, bool]] = {
    # name: (min level, default file, buffered)
    "development": ("DEBUG", "debug.log", False),
    "production": ("INFO", "termpad.log", True),
}

_loggers: MutableMapping[str, Any] = {}
_active_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _base_config(level: str) -> Any:
    config = tl.Config()
    config.with_min_level(level)
    config.with_console_output(_env_flag("LOG_CONSOLE"))
    config.with_json_format(_env_flag("LOG_JSON"))
    config.with_profiling(True)
    return config


def _preset_config(preset: str) -> Any:
    try:
        level, default_file, buffered = PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown log preset '{preset}'.") from None
    config = _base_config(level)
    config.with_file_output(_env("LOG_FILE") or default_file)
    if buffered:
        config.with_buffering(True)
    return config


def _env_config() -> Any:
    config = _base_config((_env("LOG_LEVEL") or "INFO").upper())
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` is an explicit ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. With neither, the configuration is read from ``TERMPAD_*``.
    """

    global _active_config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()
    _active_config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _active_config
    if _active_config is None:
        _active_config = _env_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _active_config)
    return _loggers[logger_name]


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            data["component"] = self.component
        _emit(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``, optionally tracked as ``component``.

    ``metadata`` is pushed as logger context for the duration of the block.
    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(logger=log, name=name, component=component, metadata=context)
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
