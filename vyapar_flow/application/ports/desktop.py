"""Port for the optional desktop host capability."""

from typing import Protocol


class DesktopBridgePort(Protocol):
    """Folder picker and file writer offered by a desktop host.

    When no bridge is configured the folder-backed persistence is skipped
    and the local store remains the only copy.
    """

    def select_folder(self) -> str | None:
        """Ask the user for a folder.

        Returns:
            str | None: Chosen path, or None when the user cancelled.
        """

    def save_data(self, path: str, data: str) -> bool:
        """Write ``data`` to the fixed data file under ``path``.

        Returns:
            bool: True when the file was written.
        """


__all__ = ["DesktopBridgePort"]
