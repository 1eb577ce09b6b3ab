"""CLI adapter exporting the stored state to a dated backup file.

The backup lands in ``VYAPAR_BACKUP_DIR`` (``backups/`` by default).
"""

from vyapar_flow.application.use_cases.backups import ExportBackupUseCase
from vyapar_flow.infrastructure.container import (
    build_persistence_adapter,
    build_store,
)
from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.infrastructure.settings import AppSettings


def main() -> None:
    """Run the backup export use case."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    persistence = build_persistence_adapter(settings=settings)
    store, listener = build_store(persistence)
    use_case = ExportBackupUseCase(store, persistence, logger=logger)
    try:
        path = use_case.execute(settings.backup_dir)
    except OSError as exc:
        logger.error(f"Backup export failed: {exc}")
        return
    finally:
        listener.shutdown()

    print(f"Backup written to {path}")


if __name__ == "__main__":  # pragma: no cover
    main()
