"""Database infrastructure for the local key-value store.

This module creates and reuses the SQLAlchemy engine behind the primary
state store. SQLite is used unless ``VYAPAR_DB_URL`` points elsewhere.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from vyapar_flow.application.ports.database import DatabaseEnginePort
from vyapar_flow.infrastructure.settings import AppSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled. In-memory SQLite URLs use
        a single shared connection so every session sees the same data.
    """
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in db_url or db_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, future=True, **kwargs)
    return create_engine(db_url, pool_pre_ping=True, future=True)


_store_engine: Optional[Engine] = None


def get_store_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the local store.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _store_engine
    if _store_engine is None:
        settings = AppSettings.from_env()
        _store_engine = _create_engine(settings.db_url)
    return _store_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines."""

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine overriding the configured singleton.
        """
        self._engine = engine

    def get_store_engine(self) -> Engine:
        """Get the engine for the local key-value store.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """
        if self._engine is not None:
            return self._engine
        return get_store_engine()


__all__ = [
    "get_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
