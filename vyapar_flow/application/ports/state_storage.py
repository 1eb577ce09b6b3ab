"""Ports for persisting the state tree."""

from datetime import date
from pathlib import Path
from typing import Protocol

from vyapar_flow.domain.models import AppState


class StateBackendPort(Protocol):
    """A single place the full state tree can be written to."""

    name: str

    def write(self, state: AppState) -> None:
        """Write the full state tree.

        Raises:
            Exception: Any backend failure; callers log and continue.
        """


class StatePersistencePort(Protocol):
    """Port used by the store wiring and the backup use cases."""

    def load_state(self) -> AppState:
        """Return the saved state, or the default state."""

    def save_state(self, state: AppState) -> None:
        """Write the state to every configured backend (best effort)."""

    def export_data(
        self,
        state: AppState,
        directory: Path,
        today: date | None = None,
    ) -> Path:
        """Write a dated, pretty-printed backup and return its path."""


__all__ = ["StateBackendPort", "StatePersistencePort"]
