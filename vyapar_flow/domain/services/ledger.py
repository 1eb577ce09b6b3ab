"""Domain services for ledger aggregates.

Every helper is pure: results are recomputed from the collections on each
read and never stored back into the state tree.
"""

from collections.abc import Iterable
from decimal import Decimal

from vyapar_flow.domain.constants import (
    COMPLETED,
    EXPENSE,
    IN_PROCESS,
    INCOME,
    JAMA,
    PENDING,
)
from vyapar_flow.domain.models import (
    Customer,
    CustomerExposure,
    FinanceEntry,
    FinanceTotals,
    OrderStats,
    Transaction,
    WorkOrder,
)


def compute_customer_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Fold a customer's transactions into a running balance.

    Args:
        transactions: Ledger transactions of a single customer.

    Returns:
        Decimal: Positive when the customer holds credit with the shop,
        negative when the customer owes the shop.
    """
    balance = Decimal("0")
    for transaction in transactions:
        if transaction.type == JAMA:
            balance += transaction.amount
        else:
            balance -= transaction.amount
    return balance


def compute_overall_customer_balance(customers: Iterable[Customer]) -> Decimal:
    """Return the sum of every customer balance."""
    return sum(
        (compute_customer_balance(c.transactions) for c in customers),
        Decimal("0"),
    )


def compute_finance_totals(entries: Iterable[FinanceEntry]) -> FinanceTotals:
    """Compute income and expense totals.

    Args:
        entries: Shop-wide finance entries.

    Returns:
        FinanceTotals: Totals with the derived net balance.
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    for entry in entries:
        if entry.type == INCOME:
            total_income += entry.amount
        elif entry.type == EXPENSE:
            total_expense += entry.amount
    return FinanceTotals(
        total_income=total_income,
        total_expense=total_expense,
    )


def compute_customer_exposure(
    customers: Iterable[Customer],
) -> CustomerExposure:
    """Split customer balances into receivables and payables.

    Args:
        customers: Customers with their transactions.

    Returns:
        CustomerExposure: Magnitudes of negative balances (receivables) and
        of non-negative balances (payables), summed separately.
    """
    receivables = Decimal("0")
    payables = Decimal("0")
    for customer in customers:
        balance = compute_customer_balance(customer.transactions)
        if balance < 0:
            receivables += abs(balance)
        else:
            payables += balance
    return CustomerExposure(receivables=receivables, payables=payables)


def compute_order_stats(orders: Iterable[WorkOrder]) -> OrderStats:
    """Count work orders by status and sum their amounts."""
    counts = {PENDING: 0, IN_PROCESS: 0, COMPLETED: 0}
    total = 0
    total_value = Decimal("0")
    for order in orders:
        total += 1
        total_value += order.amount
        if order.status in counts:
            counts[order.status] += 1
    return OrderStats(
        total=total,
        pending=counts[PENDING],
        in_process=counts[IN_PROCESS],
        completed=counts[COMPLETED],
        total_value=total_value,
    )


def compute_order_remaining(order: WorkOrder) -> Decimal:
    """Return the unpaid part of an order (not clamped at zero)."""
    return order.amount - order.advance


def search_customers(
    customers: Iterable[Customer],
    term: str,
) -> list[Customer]:
    """Filter customers by name (case-insensitive) or mobile substring.

    Args:
        customers: Customers in display order.
        term: Raw search text; an empty term keeps everyone.

    Returns:
        list[Customer]: Matching customers, order preserved.
    """
    needle = term.strip()
    if not needle:
        return list(customers)
    lowered = needle.lower()
    return [
        customer
        for customer in customers
        if lowered in customer.name.lower() or needle in customer.mobile
    ]


def suggest_customers(
    customers: Iterable[Customer],
    name_fragment: str,
) -> list[Customer]:
    """Return customers whose name contains the typed fragment."""
    if not name_fragment:
        return []
    lowered = name_fragment.lower()
    return [c for c in customers if lowered in c.name.lower()]


def sort_finances_by_date(
    entries: Iterable[FinanceEntry],
) -> list[FinanceEntry]:
    """Return entries newest first; entries sharing a date keep their order."""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


__all__ = [
    "compute_customer_balance",
    "compute_overall_customer_balance",
    "compute_finance_totals",
    "compute_customer_exposure",
    "compute_order_stats",
    "compute_order_remaining",
    "search_customers",
    "suggest_customers",
    "sort_finances_by_date",
]
