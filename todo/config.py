"""Settings loaded from environment variables (prefix TODO_).

One Settings object per process, built by `load_settings()` at CLI start.
CLI options override these values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    data_path: Path = Path("save.csv")
    db_path: Path | None = None
    log_dir: Path = Path(".local/todo")
    log_level: int = logging.WARNING
    autosave: bool = False
    strict_load: bool = False


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        data_path=_env_path(_k("DATA_PATH"), defaults.data_path),
        db_path=_env_path(_k("DB_PATH"), defaults.db_path),
        log_dir=_env_path(_k("LOG_DIR"), defaults.log_dir),
        log_level=_env_log_level(_k("LOG_LEVEL"), defaults.log_level),
        autosave=_env_bool(_k("AUTOSAVE"), defaults.autosave),
        strict_load=_env_bool(_k("STRICT_LOAD"), defaults.strict_load),
    )
