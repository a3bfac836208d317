import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

# Data directory — use BUDGET_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/budget for local dev
_data_dir = os.environ.get("BUDGET_DATA_DIR")
DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".config" / "budget"
DEFAULT_DB_FILE = DATA_DIR / "budget.db"

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Vite dev server

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration, read once at startup."""
    storage: Literal["memory", "database"] = "memory"
    database_url: str | None = None
    memory_unique: bool = False
    log_level: str = "info"
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    def resolved_database_url(self) -> str:
        """Database URL to use, defaulting to a SQLite file in the data dir."""
        if self.database_url:
            return self.database_url
        ensure_data_dir()
        return f"sqlite:///{DEFAULT_DB_FILE}"


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def load_settings(**overrides) -> Settings:
    """
    Build settings from BUDGET_* environment variables.

    Keyword overrides (e.g. from the command line) win over the environment;
    None values are ignored.
    """
    values: dict = {
        "storage": os.environ.get("BUDGET_STORAGE", "memory").strip().lower(),
        "database_url": os.environ.get("BUDGET_DATABASE_URL") or None,
        "memory_unique": _env_flag("BUDGET_MEMORY_UNIQUE"),
        "log_level": os.environ.get("BUDGET_LOG_LEVEL", "info").strip().lower(),
    }

    origins = os.environ.get("BUDGET_CORS_ORIGINS")
    if origins:
        values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
