"""Runtime configuration: CLI flags over environment over defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from kanban.models import Status

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

ENV_LOG_LEVEL = "KANBAN_LOG_LEVEL"
ENV_LOG_FILE = "KANBAN_LOG_FILE"


class ConfigError(RuntimeError):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class AppConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None
    form_status: Status = Status.TODO


def load_config(
    log_level: str | None = None,
    log_file: Path | None = None,
    environ: dict[str, str] | None = None,
) -> AppConfig:
    """Resolve configuration. Explicit arguments win over the environment."""
    env = os.environ if environ is None else environ

    level = (log_level or env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {level} (expected one of {', '.join(LOG_LEVELS)})")

    if log_file is None and env.get(ENV_LOG_FILE):
        log_file = Path(env[ENV_LOG_FILE]).expanduser()

    return AppConfig(log_level=level, log_file=log_file)
