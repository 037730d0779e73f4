"""Runtime configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _choice(
    name: str,
    default: str,
    *,
    allowed: tuple[str, ...],
    env: Mapping[str, str] | None = None,
) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in allowed else default


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable controller runtime configuration."""

    log_level: str
    log_format: str
    log_file: str | None
    input_trace: bool


def resolve_log_level_name(
    default: str = "INFO", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("CONTROLPAD_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper() or default


def load_runtime_config(env: Mapping[str, str] | None = None) -> RuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    log_file = (_raw("CONTROLPAD_LOG_FILE", env=env) or "").strip()
    return RuntimeConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=_choice("CONTROLPAD_LOG_FORMAT", "text", allowed=("text", "json"), env=env),
        log_file=log_file or None,
        input_trace=_flag("CONTROLPAD_INPUT_TRACE", False, env=env),
    )


def enabled_input_trace() -> bool:
    return load_runtime_config().input_trace
