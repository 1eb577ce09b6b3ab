"""Filesystem implementation of the desktop host capability."""

from collections.abc import Callable
import os
from pathlib import Path
import tempfile

from vyapar_flow.application.ports.desktop import DesktopBridgePort
from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.infrastructure.settings import DATA_FILE_NAME


class LocalFolderBridge(DesktopBridgePort):
    """Writes the data file into a user-chosen local folder.

    The folder picker is injected because it belongs to whichever interface
    hosts the app; without one, ``select_folder`` returns None.
    """

    def __init__(
        self,
        picker: Callable[[], str | None] | None = None,
        file_name: str = DATA_FILE_NAME,
        logger=None,
    ) -> None:
        self._picker = picker
        self._file_name = file_name
        self._logger = logger or get_app_logger()

    def select_folder(self) -> str | None:
        if self._picker is None:
            return None
        chosen = self._picker()
        if not chosen:
            return None
        return str(Path(chosen).expanduser().resolve())

    def save_data(self, path: str, data: str) -> bool:
        """Atomically replace ``<path>/<file_name>`` with ``data``.

        Args:
            path: Target folder, created when missing.
            data: Serialized state.

        Returns:
            bool: True once the file is in place.

        Raises:
            OSError: If the folder or file cannot be written.
        """
        folder = Path(path).expanduser()
        folder.mkdir(parents=True, exist_ok=True)
        target = folder / self._file_name
        fd, temp_name = tempfile.mkstemp(
            prefix=f"{self._file_name}-",
            suffix=".tmp",
            dir=folder,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_name, target)
        except OSError:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
        self._logger.debug(f"Data file written to {target}")
        return True


__all__ = ["LocalFolderBridge"]
