"""Tests for the export_backup_cli adapter."""

from pathlib import Path
from unittest.mock import MagicMock

from vyapar_flow.adapters import export_backup_cli


def _patch_common(monkeypatch, tmp_path):
    fake_logger = MagicMock()
    settings = MagicMock(backup_dir=tmp_path)
    store = object()
    listener = MagicMock()
    monkeypatch.setattr(export_backup_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        export_backup_cli.AppSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(
        export_backup_cli,
        "build_persistence_adapter",
        lambda settings: "persistence",
    )
    monkeypatch.setattr(
        export_backup_cli,
        "build_store",
        lambda persistence: (store, listener),
    )
    return fake_logger, store, listener


def test_main_exports_and_prints_path(monkeypatch, capsys, tmp_path):
    """The CLI should run the use case and print the backup location."""
    fake_logger, store, listener = _patch_common(monkeypatch, tmp_path)
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = Path("/backups/backup-2024-01-01.json")

    def _fake_use_case(store_arg, persistence, logger):
        assert store_arg is store
        assert persistence == "persistence"
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(export_backup_cli, "ExportBackupUseCase", _fake_use_case)

    export_backup_cli.main()

    fake_use_case.execute.assert_called_once_with(tmp_path)
    listener.shutdown.assert_called_once()
    assert "backup-2024-01-01.json" in capsys.readouterr().out


def test_main_logs_write_failures(monkeypatch, capsys, tmp_path):
    fake_logger, _store, listener = _patch_common(monkeypatch, tmp_path)
    fake_use_case = MagicMock()
    fake_use_case.execute.side_effect = OSError("disk full")
    monkeypatch.setattr(
        export_backup_cli,
        "ExportBackupUseCase",
        lambda *args, **kwargs: fake_use_case,
    )

    export_backup_cli.main()

    fake_logger.error.assert_called_once()
    listener.shutdown.assert_called_once()
    assert capsys.readouterr().out == ""
