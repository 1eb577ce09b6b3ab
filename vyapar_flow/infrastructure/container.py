"""Composition root for wiring infrastructure adapters."""

from collections.abc import Callable

from vyapar_flow.application.ports.database import DatabaseEnginePort
from vyapar_flow.application.ports.desktop import DesktopBridgePort
from vyapar_flow.application.ports.state_storage import StateBackendPort
from vyapar_flow.application.store import PersistOnChange, StateStore
from vyapar_flow.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from vyapar_flow.infrastructure.desktop_bridge import LocalFolderBridge
from vyapar_flow.infrastructure.key_value_store import SqlAlchemyKeyValueStore
from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.infrastructure.persistence import (
    FolderStateBackend,
    KeyValueStateBackend,
    StatePersistenceAdapter,
)
from vyapar_flow.infrastructure.settings import AppSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_desktop_bridge(
    settings: AppSettings | None = None,
    picker: Callable[[], str | None] | None = None,
) -> DesktopBridgePort | None:
    """Return the desktop bridge, or None when the capability is off."""
    resolved = settings or AppSettings.from_env()
    if not resolved.desktop_enabled:
        return None
    return LocalFolderBridge(picker=picker, logger=get_app_logger())


def build_persistence_adapter(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
    bridge: DesktopBridgePort | None = None,
) -> StatePersistenceAdapter:
    """Return the persistence adapter with its backends selected once."""
    resolved_settings = settings or AppSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    primary = KeyValueStateBackend(
        SqlAlchemyKeyValueStore(resolved_db),
        storage_key=resolved_settings.storage_key,
    )
    resolved_bridge = bridge or build_desktop_bridge(resolved_settings)
    secondaries: list[StateBackendPort] = []
    if resolved_bridge is not None:
        secondaries.append(FolderStateBackend(resolved_bridge))
    return StatePersistenceAdapter(
        primary,
        secondaries,
        logger=get_app_logger(),
    )


def build_store(
    persistence: StatePersistenceAdapter | None = None,
) -> tuple[StateStore, PersistOnChange]:
    """Load the saved state and return a store that persists every change.

    Returns:
        tuple[StateStore, PersistOnChange]: The store and its persistence
        listener, which callers may flush before exiting.
    """
    resolved = persistence or build_persistence_adapter()
    store = StateStore(resolved.load_state(), logger=get_app_logger())
    listener = PersistOnChange(resolved)
    store.subscribe(listener)
    return store, listener


__all__ = [
    "build_database_adapter",
    "build_desktop_bridge",
    "build_persistence_adapter",
    "build_store",
]
