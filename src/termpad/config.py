"""Editor configuration sourced from ``TERMPAD_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TERMPAD_"
DEFAULT_HELP = "HELP: Ctrl-Q = quit | Ctrl-S = save | Ctrl-Z = undo"


def _env(
    environ: Mapping[str, str], name: str, default: Optional[str] = None
) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _env(environ, name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(environ: Mapping[str, str], name: str, fallback: int) -> int:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(environ: Mapping[str, str], name: str, fallback: float) -> float:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


@dataclass(slots=True)
class EditorConfig:
    """Knobs for decoding, layout, and the transient status message."""

    encoding: str = "utf-8"
    status_timeout: float = 5.0
    show_gutter: bool = True
    gutter_width: int = 4
    filename_width: int = 20
    help_message: str = DEFAULT_HELP

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            encoding=_env(env, "ENCODING") or defaults.encoding,
            status_timeout=max(
                _env_float(env, "STATUS_TIMEOUT", defaults.status_timeout), 0.0
            ),
            show_gutter=_env_flag(env, "GUTTER", defaults.show_gutter),
            gutter_width=max(_env_int(env, "GUTTER_WIDTH", defaults.gutter_width), 2),
            filename_width=max(
                _env_int(env, "FILENAME_WIDTH", defaults.filename_width), 1
            ),
            help_message=_env(env, "HELP_MESSAGE", defaults.help_message) or "",
        )


__all__ = ["EditorConfig", "ENV_PREFIX", "DEFAULT_HELP"]
