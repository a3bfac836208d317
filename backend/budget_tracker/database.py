import logging

from sqlalchemy import create_engine, text, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


def create_database_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL and make sure the tables exist.

    SQLite connections are shared across the server threadpool, and an
    in-memory SQLite database is pinned to a single connection so every
    session sees the same data.
    """
    url = make_url(db_url)
    kwargs: dict = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)

    # Create tables if they don't exist
    Base.metadata.create_all(engine)

    # Migrate existing tables: add missing columns
    _migrate_schema(engine)

    logger.info("Database ready at %s", url.render_as_string(hide_password=True))
    return engine


def _migrate_schema(engine: Engine) -> None:
    """Add any missing columns to existing tables."""
    inspector = inspect(engine)

    # Define expected columns that may be missing from older databases
    # Format: (table_name, column_name, column_type_sql)
    migrations = [
        ("budget_categories", "is_annual", "BOOLEAN NOT NULL DEFAULT FALSE"),
    ]

    with engine.connect() as conn:
        for table, column, col_type in migrations:
            if not inspector.has_table(table):
                continue
            existing = [c["name"] for c in inspector.get_columns(table)]
            if column not in existing:
                logger.info("Adding column %s.%s", table, column)
                conn.execute(text(
                    f"ALTER TABLE {table} ADD COLUMN {column} {col_type}"
                ))
                conn.commit()
