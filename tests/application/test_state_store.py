"""Tests for the StateStore and its persistence listener."""

from concurrent.futures import Executor, Future
from dataclasses import replace
from decimal import Decimal
import threading
from unittest.mock import MagicMock

from vyapar_flow.application.store import PersistOnChange, StateStore
from vyapar_flow.domain.constants import (
    COMPLETED,
    INCOME,
    JAMA,
    PENDING,
    UDHAAR,
)
from vyapar_flow.domain.models import (
    AppState,
    Customer,
    FinanceEntry,
    ShopSettings,
    Transaction,
    WorkOrder,
)


class _ImmediateExecutor(Executor):
    """Executor running submitted work on the calling thread."""

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        future.set_result(fn(*args, **kwargs))
        return future


def _store() -> StateStore:
    return StateStore(logger=MagicMock())


def _tx(tx_id: str, tx_type: str, amount: str) -> Transaction:
    return Transaction(
        id=tx_id,
        date="2024-01-01",
        amount=Decimal(amount),
        type=tx_type,
    )


def _order(order_id: str, amount: str = "1000") -> WorkOrder:
    return WorkOrder(
        id=order_id,
        date="2024-01-01",
        customer_id="",
        customer_name="Walk-in",
        detail="Frame",
        status=PENDING,
        amount=Decimal(amount),
        advance=Decimal("300"),
    )


def _entry(entry_id: str) -> FinanceEntry:
    return FinanceEntry(
        id=entry_id,
        date="2024-01-01",
        amount=Decimal("10"),
        type=INCOME,
    )


def test_store_starts_with_default_state() -> None:
    store = _store()

    assert store.state == AppState()
    assert store.state.settings.shop_name == "My Workshop"


def test_customers_are_appended_updated_and_deleted() -> None:
    """Adds minus deletes remain, each with its last update applied."""
    store = _store()
    store.add_customer(Customer(id="1", name="Asha"))
    store.add_customer(Customer(id="2", name="Ravi"))
    store.add_customer(Customer(id="3", name="Meena"))

    store.update_customer(Customer(id="2", name="Ravi K"))
    store.update_customer(Customer(id="2", name="Ravi Kumar", mobile="555"))
    store.delete_customer("1")

    assert [(c.id, c.name) for c in store.state.customers] == [
        ("2", "Ravi Kumar"),
        ("3", "Meena"),
    ]
    assert store.state.customers[0].mobile == "555"


def test_add_transaction_prepends_newest_first() -> None:
    store = _store()
    store.add_customer(Customer(id="c1", name="Asha"))

    store.add_transaction("c1", _tx("t1", JAMA, "100"))
    store.add_transaction("c1", _tx("t2", UDHAAR, "40"))

    assert [t.id for t in store.state.customers[0].transactions] == [
        "t2",
        "t1",
    ]


def test_add_transaction_for_unknown_customer_is_a_no_op() -> None:
    store = _store()
    store.add_customer(Customer(id="c1", name="Asha"))
    before = store.state

    store.add_transaction("missing", _tx("t1", JAMA, "100"))

    assert store.state == before


def test_finance_entries_are_prepended_and_deleted() -> None:
    store = _store()
    store.add_finance_entry(_entry("a"))
    store.add_finance_entry(_entry("b"))

    assert [e.id for e in store.state.finances] == ["b", "a"]

    store.delete_finance_entry("a")

    assert [e.id for e in store.state.finances] == ["b"]


def test_deleting_unknown_finance_entry_leaves_collection_unchanged() -> None:
    store = _store()
    store.add_finance_entry(_entry("a"))
    before = store.state.finances

    store.delete_finance_entry("nope")

    assert store.state.finances == before


def test_update_order_changes_only_the_given_fields() -> None:
    """Flipping the status keeps amount, advance and remaining."""
    store = _store()
    store.add_order(_order("o1"))
    store.add_order(_order("o2"))

    store.update_order(replace(store.state.orders[1], status=COMPLETED))

    first = next(o for o in store.state.orders if o.id == "o1")
    assert first.status == COMPLETED
    assert first.amount == Decimal("1000")
    assert first.advance == Decimal("300")
    assert first.remaining == Decimal("700")
    assert [o.id for o in store.state.orders] == ["o2", "o1"]


def test_update_unknown_order_is_dropped() -> None:
    store = _store()
    store.add_order(_order("o1"))
    before = store.state

    store.update_order(_order("ghost"))

    assert store.state == before


def test_update_settings_and_import_replace_wholesale() -> None:
    store = _store()
    store.add_customer(Customer(id="c1", name="Asha"))
    settings = ShopSettings(shop_name="Tailors", owner_name="Ram")

    store.update_settings(settings)

    assert store.state.settings is settings

    imported = AppState(finances=(_entry("x"),))
    store.import_data(imported)

    assert store.state is imported


def test_mutations_never_modify_previous_snapshots() -> None:
    store = _store()
    store.add_customer(Customer(id="c1", name="Asha"))
    snapshot = store.state

    store.add_transaction("c1", _tx("t1", JAMA, "5"))

    assert snapshot.customers[0].transactions == ()


def test_subscribers_receive_each_new_state_until_unsubscribed() -> None:
    store = _store()
    seen: list[AppState] = []
    unsubscribe = store.subscribe(seen.append)

    store.add_customer(Customer(id="1", name="Asha"))
    unsubscribe()
    store.add_customer(Customer(id="2", name="Ravi"))

    assert len(seen) == 1
    assert [c.id for c in seen[0].customers] == ["1"]


def test_failing_listener_is_logged_and_state_still_changes() -> None:
    logger = MagicMock()
    store = StateStore(logger=logger)

    def _boom(_state):
        raise RuntimeError("disk full")

    store.subscribe(_boom)
    store.add_customer(Customer(id="1", name="Asha"))

    assert len(store.state.customers) == 1
    logger.error.assert_called_once()
    assert "disk full" in logger.error.call_args.args[0]


def test_persist_on_change_saves_every_snapshot() -> None:
    persistence = MagicMock()
    listener = PersistOnChange(persistence, executor=_ImmediateExecutor())
    store = _store()
    store.subscribe(listener)

    store.add_customer(Customer(id="1", name="Asha"))
    store.delete_customer("1")

    saved = [call.args[0] for call in persistence.save_state.call_args_list]
    assert [len(s.customers) for s in saved] == [1, 0]
    assert saved[-1] is store.state


def test_concurrent_mutations_reach_listeners_in_mutation_order() -> None:
    """A mutation from another thread must not be persisted before ours."""
    store = _store()
    persisted: list[str] = []
    other: list[threading.Thread] = []

    def _start_competing_update(state: AppState) -> None:
        if state.settings.shop_name != "first" or other:
            return
        thread = threading.Thread(
            target=store.update_settings,
            args=(ShopSettings(shop_name="second"),),
        )
        other.append(thread)
        thread.start()
        thread.join(timeout=0.2)

    store.subscribe(_start_competing_update)
    store.subscribe(lambda state: persisted.append(state.settings.shop_name))

    store.update_settings(ShopSettings(shop_name="first"))
    other[0].join(timeout=5)

    assert store.state.settings.shop_name == "second"
    assert persisted == ["first", "second"]
    assert persisted[-1] == store.state.settings.shop_name


def test_persist_on_change_runs_in_background_and_flushes() -> None:
    persistence = MagicMock()
    listener = PersistOnChange(persistence)
    store = _store()
    store.subscribe(listener)

    store.add_customer(Customer(id="1", name="Asha"))
    store.add_customer(Customer(id="2", name="Ravi"))
    listener.flush(timeout=5)
    listener.shutdown()

    last_saved = persistence.save_state.call_args_list[-1].args[0]
    assert last_saved is store.state
    assert persistence.save_state.call_count == 2
