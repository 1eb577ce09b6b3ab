"""Use cases for creating work orders and moving them through statuses."""

from dataclasses import replace
from datetime import date

from vyapar_flow.application.store import StateStore
from vyapar_flow.application.use_cases.record_helpers import (
    IdFactory,
    new_id,
    parse_amount,
    resolve_date,
)
from vyapar_flow.domain.constants import JAMA, ORDER_STATUSES, PENDING
from vyapar_flow.domain.models import Transaction, WorkOrder
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class CreateWorkOrderUseCase:
    """Create a work order and book its advance on the customer ledger.

    When the order is linked to a stored customer and carries an advance,
    the advance is recorded as a JAMA transaction on that customer. The
    unpaid remainder is tracked on the order only.
    """

    def __init__(
        self,
        store: StateStore,
        id_factory: IdFactory = new_id,
        logger=None,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_name: str,
        amount,
        detail: str = "",
        advance=None,
        customer_id: str = "",
        status: str = PENDING,
        on_date: date | str | None = None,
    ) -> WorkOrder:
        """Add the order and, when applicable, the advance transaction.

        Args:
            customer_name: Name shown on the order, kept even if the
                customer is later renamed or deleted.
            amount: Total order value.
            detail: Job description.
            advance: Amount received up front, zero by default.
            customer_id: Linked customer id, "" for walk-in customers.
            status: Initial status.
            on_date: Order date, today by default.

        Returns:
            WorkOrder: The stored order.

        Raises:
            ValueError: On a blank name, negative amounts or unknown status.
        """
        name = customer_name.strip()
        if not name:
            raise ValueError("Customer name is required")
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        order_date = resolve_date(on_date)
        order = WorkOrder(
            id=self._id_factory(),
            date=order_date,
            customer_id=customer_id,
            customer_name=name,
            detail=detail.strip(),
            status=status,
            amount=parse_amount(amount),
            advance=parse_amount(advance, "advance"),
        )
        self._store.add_order(order)
        self._logger.info(
            f"Work order created: id={order.id}, amount={order.amount}, "
            f"advance={order.advance}"
        )

        if order.is_linked and order.advance > 0:
            self._store.add_transaction(
                customer_id,
                Transaction(
                    id=self._id_factory(),
                    date=order_date,
                    amount=order.advance,
                    type=JAMA,
                    description=f"Advance for Order: {order.detail}",
                ),
            )
        return order


class ChangeOrderStatusUseCase:
    """Flip the status of an order, leaving every other field untouched."""

    def __init__(self, store: StateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, order_id: str, status: str) -> WorkOrder | None:
        """Return the updated order, or None when the id is unknown."""
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        current = next(
            (o for o in self._store.state.orders if o.id == order_id),
            None,
        )
        if current is None:
            self._logger.warning(f"Work order not found: id={order_id}")
            return None
        updated = replace(current, status=status)
        self._store.update_order(updated)
        self._logger.info(f"Work order {order_id} moved to {status}")
        return updated


__all__ = ["CreateWorkOrderUseCase", "ChangeOrderStatusUseCase"]
