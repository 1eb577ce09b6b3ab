"""Domain models for derived ledger aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FinanceTotals:
    """Income and expense totals for the shop.

    Attributes:
        total_income: Sum of INCOME amounts.
        total_expense: Sum of EXPENSE amounts.
    """

    total_income: Decimal
    total_expense: Decimal

    @property
    def net_balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CustomerExposure:
    """Customer balances split by sign.

    Attributes:
        receivables: Money customers owe the shop (negative balances).
        payables: Money the shop holds for customers (positive balances).
    """

    receivables: Decimal
    payables: Decimal


@dataclass(frozen=True)
class OrderStats:
    """Work order counts by status and total order value."""

    total: int
    pending: int
    in_process: int
    completed: int
    total_value: Decimal

    @property
    def active(self) -> int:
        """Return the number of orders not yet completed."""
        return self.total - self.completed


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the dashboard page."""

    finance: FinanceTotals
    exposure: CustomerExposure
    orders: OrderStats
    customer_count: int


__all__ = [
    "FinanceTotals",
    "CustomerExposure",
    "OrderStats",
    "DashboardSummary",
]
