"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from vyapar_flow.domain.models import AppState, Customer
from vyapar_flow.infrastructure import container
from vyapar_flow.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from vyapar_flow.infrastructure.desktop_bridge import LocalFolderBridge
from vyapar_flow.infrastructure.persistence import FolderStateBackend
from vyapar_flow.infrastructure.settings import AppSettings


def _settings(desktop: bool) -> AppSettings:
    return AppSettings(
        db_url="sqlite://",
        storage_key="test_key",
        desktop_enabled=desktop,
        backup_dir=Path("."),
    )


def _db_port() -> SqlAlchemyDatabaseEngineAdapter:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return SqlAlchemyDatabaseEngineAdapter(engine)


def test_desktop_bridge_only_when_capability_enabled() -> None:
    assert container.build_desktop_bridge(_settings(False)) is None
    assert isinstance(
        container.build_desktop_bridge(_settings(True)),
        LocalFolderBridge,
    )


def test_persistence_adds_folder_backend_on_desktop() -> None:
    web = container.build_persistence_adapter(
        db_port=_db_port(),
        settings=_settings(False),
    )
    desktop = container.build_persistence_adapter(
        db_port=_db_port(),
        settings=_settings(True),
    )

    assert web._secondaries == ()
    assert len(desktop._secondaries) == 1
    assert isinstance(desktop._secondaries[0], FolderStateBackend)


def test_build_store_loads_and_persists_changes() -> None:
    db_port = _db_port()
    persistence = container.build_persistence_adapter(
        db_port=db_port,
        settings=_settings(False),
    )
    store, listener = container.build_store(persistence)

    store.add_customer(Customer(id="c1", name="Asha"))
    listener.shutdown()

    reloaded, other_listener = container.build_store(persistence)
    other_listener.shutdown()
    assert reloaded.state == store.state


def test_build_store_uses_loaded_state() -> None:
    loaded = AppState(customers=(Customer(id="c9", name="Ravi"),))
    persistence = MagicMock()
    persistence.load_state.return_value = loaded

    store, listener = container.build_store(persistence)
    listener.shutdown()

    assert store.state is loaded
    persistence.save_state.assert_not_called()
