"""Tests for the infrastructure.db module."""

from types import SimpleNamespace

from vyapar_flow.infrastructure import db as db_module


def test_create_engine_uses_static_pool_for_memory_sqlite(monkeypatch):
    """In-memory SQLite must share one connection across sessions."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite://")

    assert engine == "engine"
    assert captured["kwargs"]["poolclass"] is db_module.StaticPool
    assert captured["kwargs"]["connect_args"] == {"check_same_thread": False}


def test_create_engine_enables_pre_ping_for_servers(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("postgresql://shop")

    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_store_engine_caches_engine(monkeypatch):
    """get_store_engine should memoize the created engine."""
    db_module._store_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.AppSettings,
        "from_env",
        classmethod(lambda cls: SimpleNamespace(db_url="sqlite:///x.db")),
    )

    engine_one = db_module.get_store_engine()
    engine_two = db_module.get_store_engine()

    assert engine_one is engine_two
    assert created == ["sqlite:///x.db"]
    db_module._store_engine = None


def test_adapter_prefers_injected_engine(monkeypatch):
    monkeypatch.setattr(db_module, "get_store_engine", lambda: "global")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_store_engine() == (
        "global"
    )
    assert db_module.SqlAlchemyDatabaseEngineAdapter(
        "injected"
    ).get_store_engine() == "injected"
