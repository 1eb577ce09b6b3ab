"""Domain package for business rules and core models."""

from .constants import (
    COMPLETED,
    EXPENSE,
    IN_PROCESS,
    INCOME,
    JAMA,
    PENDING,
    UDHAAR,
)
from .exceptions import ImportValidationError, StateDecodeError
from .models import (
    AppState,
    Customer,
    FinanceEntry,
    ShopSettings,
    Transaction,
    WorkOrder,
    default_state,
)

__all__ = [
    "COMPLETED",
    "EXPENSE",
    "IN_PROCESS",
    "INCOME",
    "JAMA",
    "PENDING",
    "UDHAAR",
    "ImportValidationError",
    "StateDecodeError",
    "AppState",
    "Customer",
    "FinanceEntry",
    "ShopSettings",
    "Transaction",
    "WorkOrder",
    "default_state",
]
