"""Domain models package."""

from .ledger import (
    AppState,
    Customer,
    FinanceEntry,
    ShopSettings,
    Transaction,
    WorkOrder,
    default_state,
)
from .summaries import (
    CustomerExposure,
    DashboardSummary,
    FinanceTotals,
    OrderStats,
)

__all__ = [
    "AppState",
    "Customer",
    "FinanceEntry",
    "ShopSettings",
    "Transaction",
    "WorkOrder",
    "default_state",
    "CustomerExposure",
    "DashboardSummary",
    "FinanceTotals",
    "OrderStats",
]
