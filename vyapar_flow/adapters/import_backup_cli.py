"""CLI adapter restoring the stored state from a backup file.

Usage: ``python -m vyapar_flow.adapters.import_backup_cli <backup.json>``.
The path may also be given through ``VYAPAR_IMPORT_FILE``.
"""

import os
from pathlib import Path
import sys

from vyapar_flow.application.use_cases.backups import ImportBackupUseCase
from vyapar_flow.domain.exceptions import ImportValidationError
from vyapar_flow.infrastructure.container import build_store
from vyapar_flow.infrastructure.logging.logger import get_app_logger


def _resolve_path(argv: list[str]) -> Path | None:
    raw = argv[0] if argv else os.getenv("VYAPAR_IMPORT_FILE")
    if not raw:
        return None
    return Path(raw).expanduser()


def main(argv: list[str] | None = None) -> int:
    """Import a backup file into the local store.

    Args:
        argv: Command-line arguments without the program name.

    Returns:
        int: Process exit code.
    """
    logger = get_app_logger()
    path = _resolve_path(sys.argv[1:] if argv is None else argv)
    if path is None:
        logger.warning("No backup file given. Pass a path or VYAPAR_IMPORT_FILE.")
        return 2
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.error(f"Could not read backup file {path}: {exc}")
        return 1

    store, listener = build_store()
    try:
        state = ImportBackupUseCase(store, logger=logger).execute(raw)
    except ImportValidationError as exc:
        print(str(exc))
        return 1
    finally:
        listener.shutdown()

    print(
        f"Restored {len(state.customers)} customers, "
        f"{len(state.finances)} finance entries and "
        f"{len(state.orders)} orders from {path}."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
