"""
Runtime Configuration

Reads service settings from environment variables once at import time.
Every value has a hardcoded fallback so the service starts with no
environment at all.

Variables:
- DATABASE_URL: SQLAlchemy async URL for the store
- HOST / PORT: bind address for uvicorn
- LOG_LEVEL / LOG_FILE: logging level and optional rotating log file
- LOG_UPPER_BOUND_REQUIRES_FROM: keep the legacy log filter where ``to`` is
  only applied together with ``from``
- SQL_ECHO: echo SQL statements to the log
"""
import os
import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./exercise-track.db"


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


@dataclass(frozen=True)
class Settings:
    """Service settings resolved from the environment."""

    database_url: str = field(default_factory=lambda: os.environ.get('DATABASE_URL', DEFAULT_DATABASE_URL))
    host: str = field(default_factory=lambda: os.environ.get('HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.environ.get('PORT', '3000')))
    log_level: str = field(default_factory=lambda: os.environ.get('LOG_LEVEL', 'INFO'))
    log_file: Optional[str] = field(default_factory=lambda: os.environ.get('LOG_FILE') or None)
    upper_bound_requires_from: bool = field(
        default_factory=lambda: _env_flag('LOG_UPPER_BOUND_REQUIRES_FROM', 'true')
    )
    sql_echo: bool = field(default_factory=lambda: _env_flag('SQL_ECHO', 'false'))


def load_settings() -> Settings:
    """
    Build a fresh Settings object from the current environment.

    Returns:
        Settings instance
    """
    return Settings()


# Resolved once; tests build their own with load_settings() or Settings(...)
settings = load_settings()
