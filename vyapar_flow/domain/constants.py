"""Domain constants for the bookkeeping ledger.

String values are part of the persisted backup format and must not change.
"""

UDHAAR = "UDHAAR"
JAMA = "JAMA"
TRANSACTION_TYPES = (UDHAAR, JAMA)

INCOME = "INCOME"
EXPENSE = "EXPENSE"
FINANCE_TYPES = (INCOME, EXPENSE)

PENDING = "PENDING"
IN_PROCESS = "IN_PROCESS"
COMPLETED = "COMPLETED"
ORDER_STATUSES = (PENDING, IN_PROCESS, COMPLETED)

DEFAULT_FINANCE_CATEGORY = "General"

DEFAULT_SHOP_NAME = "My Workshop"
DEFAULT_OWNER_NAME = "Shop Owner"

REQUIRED_STATE_KEYS = ("customers", "finances", "orders")


__all__ = [
    "UDHAAR",
    "JAMA",
    "TRANSACTION_TYPES",
    "INCOME",
    "EXPENSE",
    "FINANCE_TYPES",
    "PENDING",
    "IN_PROCESS",
    "COMPLETED",
    "ORDER_STATUSES",
    "DEFAULT_FINANCE_CATEGORY",
    "DEFAULT_SHOP_NAME",
    "DEFAULT_OWNER_NAME",
    "REQUIRED_STATE_KEYS",
]
