"""
Basic settings and logging configuration for the container ship demo.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_ENV_LOG_LEVEL = "CONTAINERSHIP_LOG_LEVEL"
_ENV_LOG_FILE = "CONTAINERSHIP_LOG_FILE"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    log_level: str = "INFO"
    # No log file unless asked for; the demo only writes to the console.
    log_file: Path | None = None

    @classmethod
    def default(cls) -> "Settings":
        level = os.environ.get(_ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO"
        log_file = os.environ.get(_ENV_LOG_FILE)
        return cls(log_level=level, log_file=Path(log_file) if log_file else None)


def resolve_log_level(name: str) -> int:
    """Numeric level for a level name such as "DEBUG"; INFO for anything else."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info("Logging initialized at level %s", settings.log_level)
