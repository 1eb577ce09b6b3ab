"""Database ports for the local store.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine behind the local key-value store."""

    def get_store_engine(self) -> Engine:
        """Get the engine for the local store.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """


__all__ = ["DatabaseEnginePort"]
