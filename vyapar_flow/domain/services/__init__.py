"""Domain services package."""

from .ledger import (
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
from .serialization import state_from_dict, state_to_dict
from .validation import validate_amount, warn_on_duplicate_ids

__all__ = [
    "compute_customer_balance",
    "compute_customer_exposure",
    "compute_finance_totals",
    "compute_order_remaining",
    "compute_order_stats",
    "compute_overall_customer_balance",
    "search_customers",
    "sort_finances_by_date",
    "suggest_customers",
    "state_from_dict",
    "state_to_dict",
    "validate_amount",
    "warn_on_duplicate_ids",
]
