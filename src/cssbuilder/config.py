from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cssbuilder.errors import ConfigError
from cssbuilder.serialization import from_json

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())


def load_config(path: str | Path) -> BuilderConfig:
    """Read a BuilderConfig from a JSON file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}", path=str(path)) from exc
    try:
        return from_json(BuilderConfig, text)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid config {path}: {exc}", path=str(path)) from exc
