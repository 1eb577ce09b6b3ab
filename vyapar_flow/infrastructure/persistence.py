"""Persistence adapter writing the state tree to its backends.

The key-value backend is the primary copy and is always written. Folder
backends are secondary copies, written only when the shop settings name a
data folder. Backend failures are logged and never reach the caller.
"""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from vyapar_flow.application.ports.desktop import DesktopBridgePort
from vyapar_flow.application.ports.key_value_store import KeyValueStorePort
from vyapar_flow.application.ports.state_storage import (
    StateBackendPort,
    StatePersistencePort,
)
from vyapar_flow.domain.exceptions import StateDecodeError
from vyapar_flow.domain.models import AppState, default_state
from vyapar_flow.domain.services.validation import warn_on_duplicate_ids
from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.infrastructure.settings import DEFAULT_STORAGE_KEY
from vyapar_flow.infrastructure.state_codec import dumps_state, loads_state


class KeyValueStateBackend(StateBackendPort):
    """Primary backend: compact JSON under a single key."""

    name = "local-store"

    def __init__(
        self,
        store: KeyValueStorePort,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._storage_key = storage_key

    def read(self) -> str | None:
        """Return the raw stored document, or None when nothing is saved."""
        return self._store.get_item(self._storage_key)

    def write(self, state: AppState) -> None:
        self._store.set_item(self._storage_key, dumps_state(state))


class FolderStateBackend(StateBackendPort):
    """Secondary backend: pretty-printed file in the chosen data folder."""

    name = "data-folder"

    def __init__(self, bridge: DesktopBridgePort) -> None:
        self._bridge = bridge

    def write(self, state: AppState) -> None:
        folder = state.settings.data_folder_path
        if not folder:
            return
        self._bridge.save_data(folder, dumps_state(state, pretty=True))


class StatePersistenceAdapter(StatePersistencePort):
    """Best-effort reads and writes of the full state tree."""

    def __init__(
        self,
        primary: KeyValueStateBackend,
        secondaries: Sequence[StateBackendPort] = (),
        logger=None,
    ) -> None:
        """Initialize the adapter.

        Args:
            primary: Backend that is read at startup and always written.
            secondaries: Extra backends written after the primary.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._primary = primary
        self._secondaries = tuple(secondaries)
        self._logger = logger or get_app_logger()

    def load_state(self) -> AppState:
        """Return the stored state or the default state.

        A missing or undecodable payload is logged and replaced by the
        default state; nothing is raised.
        """
        try:
            raw = self._primary.read()
        except Exception as exc:
            self._logger.error(f"Could not read stored state: {exc}")
            return default_state()
        if raw is None:
            self._logger.info("No stored state found, starting empty")
            return default_state()
        try:
            state = loads_state(raw)
        except StateDecodeError as exc:
            self._logger.error(f"Could not load state: {exc}")
            return default_state()
        warn_on_duplicate_ids(state, self._logger)
        self._logger.info(
            f"Loaded state: customers={len(state.customers)}, "
            f"finances={len(state.finances)}, orders={len(state.orders)}"
        )
        return state

    def save_state(self, state: AppState) -> None:
        """Write to the primary backend, then to every secondary one."""
        for backend in (self._primary, *self._secondaries):
            try:
                backend.write(state)
            except Exception as exc:
                self._logger.error(
                    f"Could not save state to {backend.name}: {exc}"
                )

    def export_data(
        self,
        state: AppState,
        directory: Path,
        today: date | None = None,
    ) -> Path:
        """Write ``backup-<ISO date>.json`` into ``directory``.

        Args:
            state: State tree to export.
            directory: Destination folder, created when missing.
            today: Date used in the file name, today by default.

        Returns:
            Path: Path of the written backup.

        Raises:
            OSError: If the backup cannot be written.
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / backup_file_name(today)
        target.write_text(dumps_state(state, pretty=True), encoding="utf-8")
        self._logger.info(f"Backup exported to {target}")
        return target


def backup_file_name(today: date | None = None) -> str:
    """Return the dated file name used for exported backups."""
    stamp = (today or date.today()).isoformat()
    return f"backup-{stamp}.json"


__all__ = [
    "KeyValueStateBackend",
    "FolderStateBackend",
    "StatePersistenceAdapter",
    "backup_file_name",
]
