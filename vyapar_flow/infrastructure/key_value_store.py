"""SQLAlchemy-backed string key-value store."""

from sqlalchemy import text

from vyapar_flow.application.ports.database import DatabaseEnginePort
from vyapar_flow.application.ports.key_value_store import KeyValueStorePort


CREATE_KV_STORE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_VALUE_SQL = text("SELECT value FROM kv_store WHERE key = :key")

DELETE_VALUE_SQL = text("DELETE FROM kv_store WHERE key = :key")

INSERT_VALUE_SQL = text(
    "INSERT INTO kv_store (key, value) VALUES (:key, :value)"
)


class SqlAlchemyKeyValueStore(KeyValueStorePort):
    """Key-value store kept in a single ``kv_store`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the local store engine.
        """
        self._db_port = db_port
        self._table_ready = False

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``."""
        engine = self._db_port.get_store_engine()
        self._ensure_table()
        with engine.connect() as conn:
            row = conn.execute(SELECT_VALUE_SQL, {"key": key}).first()
        return None if row is None else row.value

    def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under ``key`` in one transaction."""
        engine = self._db_port.get_store_engine()
        self._ensure_table()
        with engine.begin() as conn:
            conn.execute(DELETE_VALUE_SQL, {"key": key})
            conn.execute(INSERT_VALUE_SQL, {"key": key, "value": value})

    def _ensure_table(self) -> None:
        """Create the kv_store table if it does not exist."""
        if self._table_ready:
            return
        with self._db_port.get_store_engine().begin() as conn:
            conn.exec_driver_sql(CREATE_KV_STORE_SQL)
        self._table_ready = True


__all__ = ["SqlAlchemyKeyValueStore"]
