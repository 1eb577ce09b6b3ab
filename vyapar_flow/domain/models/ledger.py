"""Domain models for the bookkeeping state tree."""

from dataclasses import dataclass, field
from decimal import Decimal

from vyapar_flow.domain.constants import (
    DEFAULT_FINANCE_CATEGORY,
    DEFAULT_OWNER_NAME,
    DEFAULT_SHOP_NAME,
    PENDING,
)


@dataclass(frozen=True)
class Transaction:
    """Single udhaar or jama movement on a customer ledger.

    Attributes:
        id: Opaque unique identifier.
        date: Calendar date as an ISO string (YYYY-MM-DD).
        amount: Non-negative amount.
        type: ``UDHAAR`` (credit given) or ``JAMA`` (payment received).
        description: Free text, may be empty.
    """

    id: str
    date: str
    amount: Decimal
    type: str
    description: str = ""


@dataclass(frozen=True)
class Customer:
    """Customer with a newest-first list of ledger transactions."""

    id: str
    name: str
    mobile: str = ""
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class FinanceEntry:
    """Shop-wide income or expense entry."""

    id: str
    date: str
    amount: Decimal
    type: str
    category: str = DEFAULT_FINANCE_CATEGORY
    description: str = ""


@dataclass(frozen=True)
class WorkOrder:
    """Tracked job for a customer with an advance payment.

    Attributes:
        id: Opaque unique identifier.
        date: Order date as an ISO string.
        customer_id: Linked customer id, or "" for walk-in customers.
        customer_name: Name captured when the order was created.
        detail: Free text job description.
        status: ``PENDING``, ``IN_PROCESS`` or ``COMPLETED``.
        amount: Total order value.
        advance: Amount already received toward the order.
    """

    id: str
    date: str
    customer_id: str
    customer_name: str
    detail: str
    status: str = PENDING
    amount: Decimal = Decimal("0")
    advance: Decimal = Decimal("0")

    @property
    def remaining(self) -> Decimal:
        """Return amount minus advance, negative when overpaid."""
        return self.amount - self.advance

    @property
    def is_linked(self) -> bool:
        """Return True when the order references a stored customer."""
        return bool(self.customer_id)


@dataclass(frozen=True)
class ShopSettings:
    """Shop profile and optional data folder."""

    shop_name: str = DEFAULT_SHOP_NAME
    owner_name: str = DEFAULT_OWNER_NAME
    contact_number: str = ""
    address: str = ""
    data_folder_path: str = ""


@dataclass(frozen=True)
class AppState:
    """Root of the persisted state tree."""

    customers: tuple[Customer, ...] = ()
    finances: tuple[FinanceEntry, ...] = ()
    orders: tuple[WorkOrder, ...] = ()
    settings: ShopSettings = field(default_factory=ShopSettings)


def default_state() -> AppState:
    """Return the empty state used before anything has been saved."""
    return AppState()


__all__ = [
    "Transaction",
    "Customer",
    "FinanceEntry",
    "WorkOrder",
    "ShopSettings",
    "AppState",
    "default_state",
]
