"""Use cases for manual backup export and restore."""

from datetime import date
from pathlib import Path

from vyapar_flow.application.ports.state_storage import StatePersistencePort
from vyapar_flow.application.store import StateStore
from vyapar_flow.domain.exceptions import (
    ImportValidationError,
    StateDecodeError,
)
from vyapar_flow.domain.models import AppState
from vyapar_flow.domain.services.validation import warn_on_duplicate_ids
from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.infrastructure.state_codec import loads_state


INVALID_BACKUP_MESSAGE = (
    "Error importing file. Please upload a valid backup JSON."
)


class ExportBackupUseCase:
    """Write the current state to a dated backup file."""

    def __init__(
        self,
        store: StateStore,
        persistence: StatePersistencePort,
        logger=None,
    ) -> None:
        self._store = store
        self._persistence = persistence
        self._logger = logger or get_app_logger()

    def execute(self, directory: Path, today: date | None = None) -> Path:
        """Export the current snapshot.

        Args:
            directory: Folder receiving ``backup-<date>.json``.
            today: Date used in the file name, today by default.

        Returns:
            Path: Location of the backup file.
        """
        return self._persistence.export_data(
            self._store.state,
            directory,
            today=today,
        )


class ImportBackupUseCase:
    """Replace the whole state with the content of a backup file.

    The backup must carry ``customers``, ``finances`` and ``orders`` and each
    record must decode cleanly. Nothing changes when validation fails.
    """

    def __init__(self, store: StateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, raw: str | bytes) -> AppState:
        """Validate and import a backup document.

        Args:
            raw: Content of the uploaded JSON file.

        Returns:
            AppState: The imported state, now held by the store.

        Raises:
            ImportValidationError: If the file is not a valid backup.
        """
        try:
            state = loads_state(raw)
        except StateDecodeError as exc:
            self._logger.warning(f"Backup rejected: {exc}")
            raise ImportValidationError(INVALID_BACKUP_MESSAGE) from exc
        warn_on_duplicate_ids(state, self._logger)
        self._store.import_data(state)
        self._logger.info(
            f"Backup imported: customers={len(state.customers)}, "
            f"finances={len(state.finances)}, orders={len(state.orders)}"
        )
        return state


__all__ = [
    "ExportBackupUseCase",
    "ImportBackupUseCase",
    "INVALID_BACKUP_MESSAGE",
]
