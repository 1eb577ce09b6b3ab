"""Use case recording udhaar and jama movements on a customer ledger."""

from datetime import date

from vyapar_flow.application.store import StateStore
from vyapar_flow.application.use_cases.record_helpers import (
    IdFactory,
    new_id,
    parse_amount,
    resolve_date,
)
from vyapar_flow.domain.constants import TRANSACTION_TYPES
from vyapar_flow.domain.models import Transaction
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class RecordCustomerTransactionUseCase:
    """Prepend a transaction to a customer's ledger."""

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
        customer_id: str,
        amount,
        transaction_type: str,
        description: str = "",
        on_date: date | str | None = None,
    ) -> Transaction:
        """Record the transaction.

        Args:
            customer_id: Target customer; unknown ids are ignored by the store.
            amount: Non-negative amount (number or numeric string).
            transaction_type: ``UDHAAR`` or ``JAMA``.
            description: Optional note.
            on_date: Transaction date, today by default.

        Returns:
            Transaction: The transaction handed to the store.

        Raises:
            ValueError: On a negative amount or unknown type.
        """
        if transaction_type not in TRANSACTION_TYPES:
            raise ValueError(f"Unknown transaction type: {transaction_type}")
        transaction = Transaction(
            id=self._id_factory(),
            date=resolve_date(on_date),
            amount=parse_amount(amount),
            type=transaction_type,
            description=description.strip(),
        )
        self._store.add_transaction(customer_id, transaction)
        self._logger.info(
            f"{transaction_type} of {transaction.amount} recorded "
            f"for customer {customer_id}"
        )
        return transaction


__all__ = ["RecordCustomerTransactionUseCase"]
