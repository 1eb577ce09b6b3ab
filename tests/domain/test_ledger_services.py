"""Tests for the ledger aggregation services."""

from decimal import Decimal

from vyapar_flow.domain.constants import (
    COMPLETED,
    EXPENSE,
    IN_PROCESS,
    INCOME,
    JAMA,
    PENDING,
    UDHAAR,
)
from vyapar_flow.domain.models import (
    Customer,
    FinanceEntry,
    Transaction,
    WorkOrder,
)
from vyapar_flow.domain.services.ledger import (
    compute_customer_balance,
    compute_customer_exposure,
    compute_finance_totals,
    compute_order_remaining,
    compute_order_stats,
    compute_overall_customer_balance,
    search_customers,
    sort_finances_by_date,
    suggest_customers,
)


def _tx(tx_id: str, tx_type: str, amount: str) -> Transaction:
    return Transaction(
        id=tx_id,
        date="2024-01-01",
        amount=Decimal(amount),
        type=tx_type,
    )


def _entry(entry_id: str, entry_type: str, amount: str, day: str):
    return FinanceEntry(
        id=entry_id,
        date=day,
        amount=Decimal(amount),
        type=entry_type,
    )


def _order(order_id: str, status: str, amount: str, advance: str = "0"):
    return WorkOrder(
        id=order_id,
        date="2024-02-01",
        customer_id="",
        customer_name="Walk-in",
        detail="Repair",
        status=status,
        amount=Decimal(amount),
        advance=Decimal(advance),
    )


def test_customer_balance_adds_jama_and_subtracts_udhaar() -> None:
    """JAMA increases the balance while UDHAAR decreases it."""
    transactions = [_tx("1", JAMA, "100"), _tx("2", UDHAAR, "40")]

    assert compute_customer_balance(transactions) == Decimal("60")


def test_customer_balance_ignores_order_of_transactions() -> None:
    """The fold is a plain sum, so order does not matter."""
    transactions = [
        _tx("1", UDHAAR, "10"),
        _tx("2", UDHAAR, "25.50"),
        _tx("3", JAMA, "5"),
    ]

    assert compute_customer_balance(transactions) == compute_customer_balance(
        list(reversed(transactions))
    )
    assert compute_customer_balance(transactions) == Decimal("-30.50")


def test_customer_balance_of_empty_ledger_is_zero() -> None:
    assert compute_customer_balance([]) == Decimal("0")


def test_finance_totals_compute_net_balance() -> None:
    """Income 500 and expense 200 leave a net balance of 300."""
    entries = [
        _entry("a", INCOME, "500", "2024-01-01"),
        _entry("b", EXPENSE, "200", "2024-01-02"),
    ]

    totals = compute_finance_totals(entries)

    assert totals.total_income == Decimal("500")
    assert totals.total_expense == Decimal("200")
    assert totals.net_balance == Decimal("300")


def test_customer_exposure_splits_balances_by_sign() -> None:
    """Negative balances become receivables, others payables."""
    customers = [
        Customer(id="c1", name="Asha", transactions=(_tx("1", UDHAAR, "70"),)),
        Customer(id="c2", name="Ravi", transactions=(_tx("2", JAMA, "30"),)),
        Customer(id="c3", name="Meena", transactions=(_tx("3", UDHAAR, "5"),)),
        Customer(id="c4", name="Nobody"),
    ]

    exposure = compute_customer_exposure(customers)

    assert exposure.receivables == Decimal("75")
    assert exposure.payables == Decimal("30")
    assert compute_overall_customer_balance(customers) == Decimal("-45")


def test_order_stats_count_statuses_and_sum_amounts() -> None:
    orders = [
        _order("1", PENDING, "100"),
        _order("2", IN_PROCESS, "250"),
        _order("3", COMPLETED, "50"),
        _order("4", PENDING, "0"),
    ]

    stats = compute_order_stats(orders)

    assert stats.total == 4
    assert stats.pending == 2
    assert stats.in_process == 1
    assert stats.completed == 1
    assert stats.active == 3
    assert stats.total_value == Decimal("400")


def test_order_remaining_is_not_clamped() -> None:
    """Remaining is amount minus advance, negative when overpaid."""
    assert compute_order_remaining(_order("1", PENDING, "1000", "300")) == (
        Decimal("700")
    )
    assert _order("2", PENDING, "100", "150").remaining == Decimal("-50")


def test_search_customers_matches_name_or_mobile() -> None:
    customers = [
        Customer(id="1", name="Asha Traders", mobile="98765"),
        Customer(id="2", name="Ravi", mobile="12345"),
    ]

    assert [c.id for c in search_customers(customers, "asha")] == ["1"]
    assert [c.id for c in search_customers(customers, "234")] == ["2"]
    assert [c.id for c in search_customers(customers, "  ")] == ["1", "2"]


def test_suggest_customers_needs_a_fragment() -> None:
    customers = [Customer(id="1", name="Asha"), Customer(id="2", name="Sashi")]

    assert suggest_customers(customers, "") == []
    assert [c.id for c in suggest_customers(customers, "ash")] == ["1", "2"]


def test_sort_finances_newest_first_and_stable() -> None:
    entries = [
        _entry("old", INCOME, "1", "2024-01-01"),
        _entry("same-a", INCOME, "1", "2024-03-01"),
        _entry("same-b", EXPENSE, "1", "2024-03-01"),
        _entry("mid", EXPENSE, "1", "2024-02-01"),
    ]

    ordered = [e.id for e in sort_finances_by_date(entries)]

    assert ordered == ["same-a", "same-b", "mid", "old"]
