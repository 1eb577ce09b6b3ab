"""Use case choosing the folder that receives the readable data file."""

from dataclasses import replace

from vyapar_flow.application.ports.desktop import DesktopBridgePort
from vyapar_flow.application.store import StateStore
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class DesktopCapabilityUnavailable(RuntimeError):
    """Raised when folder selection is requested without a desktop host."""


class SelectDataFolderUseCase:
    """Ask the desktop host for a folder and store it in the settings."""

    def __init__(
        self,
        store: StateStore,
        bridge: DesktopBridgePort | None,
        logger=None,
    ) -> None:
        self._store = store
        self._bridge = bridge
        self._logger = logger or get_app_logger()

    @property
    def available(self) -> bool:
        """Return True when a desktop bridge is configured."""
        return self._bridge is not None

    def execute(self) -> str | None:
        """Update ``settings.data_folder_path`` from the folder picker.

        Returns:
            str | None: The chosen folder, or None when the user cancelled.

        Raises:
            DesktopCapabilityUnavailable: If no desktop bridge is configured.
        """
        if self._bridge is None:
            raise DesktopCapabilityUnavailable(
                "Folder selection is only available in the desktop version. "
                "Your data is still saved in the local store."
            )
        path = self._bridge.select_folder()
        if not path:
            return None
        settings = replace(self._store.state.settings, data_folder_path=path)
        self._store.update_settings(settings)
        self._logger.info(f"Data folder set to {path}")
        return path


__all__ = ["SelectDataFolderUseCase", "DesktopCapabilityUnavailable"]
