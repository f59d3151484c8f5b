from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RunnerConfig:
    log_level: int = logging.WARNING
    factory: str | None = None
    trace_messages: bool = False


def parse_log_level(value: str | None, default: int = logging.WARNING) -> int:
    if value is None:
        return default
    normalized = value.strip()
    if not normalized:
        return default
    if normalized.lstrip("-").isdigit():
        return int(normalized)
    level = logging.getLevelName(normalized.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value}")
    return level


def default_config() -> RunnerConfig:
    level_env = os.getenv("KUROBAKO_LOG_LEVEL")
    factory_env = os.getenv("KUROBAKO_SOLVER_FACTORY", "").strip()
    trace_env = os.getenv("KUROBAKO_TRACE_MESSAGES", "").strip().lower()
    return RunnerConfig(
        log_level=parse_log_level(level_env),
        factory=factory_env or None,
        trace_messages=trace_env in _TRUTHY,
    )
