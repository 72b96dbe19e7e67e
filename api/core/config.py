"""
Configuration helpers for the profile board backend.

Routers/services read a Settings object instead of fetching os.environ
directly. Tests must call ``get_settings.cache_clear()`` after changing envs.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "db.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    session_ttl_seconds: int
    allow_raw_owner_id: bool
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.app_env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_file = (os.getenv("DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        session_ttl_seconds=_int(os.getenv("SESSION_TTL_SECONDS", "86400"), 86400),
        allow_raw_owner_id=_bool(os.getenv("ALLOW_RAW_OWNER_ID"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
