"""State container owning the bookkeeping state tree.

The store holds one immutable ``AppState`` value. Every mutation builds a
new tree, swaps it in and notifies subscribers with the new snapshot.
Persistence is one such subscriber (``PersistOnChange``), attached by the
composition root, so the state transitions can be exercised without any
storage backend.
"""

from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import replace
import threading

from vyapar_flow.application.ports.state_storage import StatePersistencePort
from vyapar_flow.domain.models import (
    AppState,
    Customer,
    FinanceEntry,
    ShopSettings,
    Transaction,
    WorkOrder,
    default_state,
)
from vyapar_flow.infrastructure.logging.logger import get_app_logger


StateListener = Callable[[AppState], None]


class StateStore:
    """Single source of truth for the application state.

    Unknown ids are absorbed silently: updating or deleting a record that
    is not in its collection leaves the collection unchanged. Listeners run
    while the lock is held, so they see snapshots in mutation order.
    """

    def __init__(self, initial_state: AppState | None = None, logger=None):
        """Initialize the store.

        Args:
            initial_state: State loaded at startup, default state if omitted.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._state = initial_state or default_state()
        self._listeners: list[StateListener] = []
        self._lock = threading.RLock()
        self._logger = logger or get_app_logger()

    @property
    def state(self) -> AppState:
        """Return the current state snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every state change.

        Args:
            listener: Callable receiving the new state snapshot.

        Returns:
            Callable[[], None]: Function removing the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def add_customer(self, customer: Customer) -> None:
        self._update(
            lambda s: replace(s, customers=(*s.customers, customer))
        )

    def update_customer(self, customer: Customer) -> None:
        self._update(
            lambda s: replace(
                s,
                customers=_replace_by_id(s.customers, customer),
            )
        )

    def delete_customer(self, customer_id: str) -> None:
        self._update(
            lambda s: replace(
                s,
                customers=_remove_by_id(s.customers, customer_id),
            )
        )

    def add_transaction(
        self,
        customer_id: str,
        transaction: Transaction,
    ) -> None:
        """Prepend a transaction to the matching customer's ledger."""

        def _apply(state: AppState) -> AppState:
            customers = tuple(
                replace(c, transactions=(transaction, *c.transactions))
                if c.id == customer_id
                else c
                for c in state.customers
            )
            return replace(state, customers=customers)

        self._update(_apply)

    def add_finance_entry(self, entry: FinanceEntry) -> None:
        self._update(lambda s: replace(s, finances=(entry, *s.finances)))

    def delete_finance_entry(self, entry_id: str) -> None:
        self._update(
            lambda s: replace(
                s,
                finances=_remove_by_id(s.finances, entry_id),
            )
        )

    def add_order(self, order: WorkOrder) -> None:
        self._update(lambda s: replace(s, orders=(order, *s.orders)))

    def update_order(self, order: WorkOrder) -> None:
        self._update(
            lambda s: replace(s, orders=_replace_by_id(s.orders, order))
        )

    def update_settings(self, settings: ShopSettings) -> None:
        self._update(lambda s: replace(s, settings=settings))

    def import_data(self, new_state: AppState) -> None:
        """Replace the whole state tree; callers validate beforehand."""
        self._update(lambda _s: new_state)

    def _update(self, transition: Callable[[AppState], AppState]) -> None:
        with self._lock:
            new_state = transition(self._state)
            self._state = new_state
            self._notify(new_state)

    def _notify(self, state: AppState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                self._logger.error(f"State listener failed: {exc}")


class PersistOnChange:
    """Store listener writing each new snapshot in the background.

    A single worker keeps writes in mutation order, so the last snapshot
    handed over is the last one written.
    """

    def __init__(
        self,
        persistence: StatePersistencePort,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the listener.

        Args:
            persistence: Adapter receiving ``save_state`` calls.
            executor: Optional executor; a single-thread pool by default.
        """
        self._persistence = persistence
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="vyapar-persist",
        )
        self._pending: Future | None = None

    def __call__(self, state: AppState) -> None:
        self._pending = self._executor.submit(
            self._persistence.save_state,
            state,
        )

    def flush(self, timeout: float | None = None) -> None:
        """Wait for the most recently submitted write to finish."""
        if self._pending is not None:
            self._pending.result(timeout=timeout)

    def shutdown(self) -> None:
        """Finish queued writes and stop the worker."""
        self._executor.shutdown(wait=True)


def _replace_by_id(records: tuple, record) -> tuple:
    return tuple(record if r.id == record.id else r for r in records)


def _remove_by_id(records: tuple, record_id: str) -> tuple:
    return tuple(r for r in records if r.id != record_id)


__all__ = ["StateStore", "PersistOnChange", "StateListener"]
