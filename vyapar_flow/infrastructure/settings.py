"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from vyapar_flow.infrastructure.logging.logger import get_app_logger
from vyapar_flow.utils.utils import get_project_root


DEFAULT_STORAGE_KEY = "vyapar_flow_db_v1"
DATA_FILE_NAME = "vyapar-data.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    """Settings for storage and backup locations.

    Attributes:
        db_url: SQLAlchemy URL of the local key-value store.
        storage_key: Key under which the state tree is stored.
        desktop_enabled: Whether the folder-backed backend is available.
        backup_dir: Directory receiving exported backups.
    """

    db_url: str
    storage_key: str = DEFAULT_STORAGE_KEY
    desktop_enabled: bool = False
    backup_dir: Path = Path(".")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from the environment and ``.env``.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("VYAPAR_DB_URL") or cls._default_db_url()
        storage_key = (
            os.getenv("VYAPAR_STORAGE_KEY", DEFAULT_STORAGE_KEY).strip()
            or DEFAULT_STORAGE_KEY
        )
        desktop_enabled = cls._parse_flag(os.getenv("VYAPAR_DESKTOP"))
        backup_dir = cls._resolve_dir(
            os.getenv("VYAPAR_BACKUP_DIR"),
            logger=logger,
        )
        return cls(
            db_url=db_url,
            storage_key=storage_key,
            desktop_enabled=desktop_enabled,
            backup_dir=backup_dir,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL used when no database is configured."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'vyapar_flow.db'}"

    @staticmethod
    def _parse_flag(raw: str | None) -> bool:
        if raw is None:
            return False
        return raw.strip().lower() in _TRUE_VALUES

    @staticmethod
    def _resolve_dir(raw: str | None, logger) -> Path:
        """Normalize the backup directory.

        Args:
            raw: Raw directory string, or None for the default.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved directory path.
        """
        if not raw:
            return get_project_root() / "backups"
        path = Path(raw).expanduser().resolve()
        if path.exists() and not path.is_dir():
            logger.warning(f"Backup path is not a directory: {path}")
        return path


__all__ = ["AppSettings", "DEFAULT_STORAGE_KEY", "DATA_FILE_NAME"]
