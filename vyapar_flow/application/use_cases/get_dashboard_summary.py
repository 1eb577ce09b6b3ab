"""Use case computing the dashboard figures from the current state."""

from vyapar_flow.application.store import StateStore
from vyapar_flow.domain.models import DashboardSummary
from vyapar_flow.domain.services.ledger import (
    compute_customer_exposure,
    compute_finance_totals,
    compute_order_stats,
)


class GetDashboardSummaryUseCase:
    """Aggregate finances, customer balances and orders for display."""

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def execute(self) -> DashboardSummary:
        """Return the summary for the current state snapshot.

        Returns:
            DashboardSummary: Figures derived from one snapshot.
        """
        state = self._store.state
        return DashboardSummary(
            finance=compute_finance_totals(state.finances),
            exposure=compute_customer_exposure(state.customers),
            orders=compute_order_stats(state.orders),
            customer_count=len(state.customers),
        )


__all__ = ["GetDashboardSummaryUseCase"]
