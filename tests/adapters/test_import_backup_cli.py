"""Tests for the import_backup_cli adapter."""

import json
from unittest.mock import MagicMock

from vyapar_flow.adapters import import_backup_cli
from vyapar_flow.application.store import StateStore


def _patch_store(monkeypatch):
    store = StateStore(logger=MagicMock())
    listener = MagicMock()
    monkeypatch.setattr(import_backup_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        import_backup_cli,
        "build_store",
        lambda: (store, listener),
    )
    return store, listener


def test_main_restores_backup(monkeypatch, capsys, tmp_path):
    store, listener = _patch_store(monkeypatch)
    backup = tmp_path / "backup.json"
    backup.write_text(
        json.dumps(
            {
                "customers": [{"id": "c1", "name": "Asha"}],
                "finances": [],
                "orders": [],
            }
        ),
        encoding="utf-8",
    )

    code = import_backup_cli.main([str(backup)])

    assert code == 0
    assert store.state.customers[0].id == "c1"
    listener.shutdown.assert_called_once()
    assert "Restored 1 customers" in capsys.readouterr().out


def test_main_rejects_invalid_backup(monkeypatch, capsys, tmp_path):
    store, listener = _patch_store(monkeypatch)
    backup = tmp_path / "broken.json"
    backup.write_text('{"customers": []}', encoding="utf-8")

    code = import_backup_cli.main([str(backup)])

    assert code == 1
    assert store.state.customers == ()
    assert "valid backup" in capsys.readouterr().out


def test_main_without_path_uses_environment(monkeypatch, tmp_path):
    _patch_store(monkeypatch)
    monkeypatch.delenv("VYAPAR_IMPORT_FILE", raising=False)

    assert import_backup_cli.main([]) == 2

    monkeypatch.setenv("VYAPAR_IMPORT_FILE", str(tmp_path / "missing.json"))
    assert import_backup_cli.main([]) == 1
