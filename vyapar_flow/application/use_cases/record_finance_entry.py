"""Use case recording shop income and expenses."""

from datetime import date

from vyapar_flow.application.store import StateStore
from vyapar_flow.application.use_cases.record_helpers import (
    IdFactory,
    new_id,
    parse_amount,
    resolve_date,
)
from vyapar_flow.domain.constants import DEFAULT_FINANCE_CATEGORY, FINANCE_TYPES
from vyapar_flow.domain.models import FinanceEntry
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class RecordFinanceEntryUseCase:
    """Add an income or expense entry in the ``General`` category."""

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
        amount,
        entry_type: str,
        description: str = "",
        on_date: date | str | None = None,
    ) -> FinanceEntry:
        if entry_type not in FINANCE_TYPES:
            raise ValueError(f"Unknown finance entry type: {entry_type}")
        entry = FinanceEntry(
            id=self._id_factory(),
            date=resolve_date(on_date),
            amount=parse_amount(amount),
            type=entry_type,
            category=DEFAULT_FINANCE_CATEGORY,
            description=description.strip(),
        )
        self._store.add_finance_entry(entry)
        self._logger.info(f"{entry_type} entry of {entry.amount} recorded")
        return entry


__all__ = ["RecordFinanceEntryUseCase"]
