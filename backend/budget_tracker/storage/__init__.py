import logging

from ..config import Settings
from ..database import create_database_engine
from .base import BudgetStorage, StorageError
from .memory import MemoryStorage
from .database import DatabaseStorage

logger = logging.getLogger(__name__)

# Global state for the active store
_current_storage: BudgetStorage | None = None


def create_storage(settings: Settings) -> BudgetStorage:
    """Build the store selected by the settings."""
    if settings.storage == "database":
        engine = create_database_engine(settings.resolved_database_url())
        return DatabaseStorage(engine)
    return MemoryStorage(enforce_unique=settings.memory_unique)


def open_storage(settings: Settings) -> BudgetStorage:
    """Open the configured store, replacing any store already open."""
    global _current_storage

    if _current_storage is not None:
        close_storage()

    _current_storage = create_storage(settings)
    logger.info("Opened %s storage", settings.storage)
    return _current_storage


def close_storage() -> None:
    """Close the active store."""
    global _current_storage

    if _current_storage is not None:
        _current_storage.close()
        _current_storage = None


def get_storage() -> BudgetStorage:
    """FastAPI dependency for the active store."""
    if _current_storage is None:
        raise RuntimeError("No storage is currently open")
    return _current_storage


__all__ = [
    "BudgetStorage",
    "StorageError",
    "MemoryStorage",
    "DatabaseStorage",
    "create_storage",
    "open_storage",
    "close_storage",
    "get_storage",
]
