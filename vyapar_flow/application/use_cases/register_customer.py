"""Use cases for creating and editing customers."""

from dataclasses import replace

from vyapar_flow.application.store import StateStore
from vyapar_flow.application.use_cases.record_helpers import (
    IdFactory,
    new_id,
)
from vyapar_flow.domain.models import Customer
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class RegisterCustomerUseCase:
    """Create a customer with an empty ledger."""

    def __init__(
        self,
        store: StateStore,
        id_factory: IdFactory = new_id,
        logger=None,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._logger = logger or get_app_logger()

    def execute(self, name: str, mobile: str = "") -> Customer:
        """Add a customer to the store.

        Args:
            name: Customer name, must not be blank.
            mobile: Optional mobile number (not validated).

        Returns:
            Customer: The stored customer.

        Raises:
            ValueError: If the name is blank.
        """
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Customer name is required")
        customer = Customer(
            id=self._id_factory(),
            name=cleaned,
            mobile=mobile.strip(),
        )
        self._store.add_customer(customer)
        self._logger.info(f"Customer added: id={customer.id}")
        return customer


class RenameCustomerUseCase:
    """Change a customer's name or mobile number.

    Work orders keep the name captured when they were created.
    """

    def __init__(self, store: StateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        name: str,
        mobile: str | None = None,
    ) -> Customer | None:
        """Update the customer, returning None when the id is unknown."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Customer name is required")
        current = next(
            (c for c in self._store.state.customers if c.id == customer_id),
            None,
        )
        if current is None:
            self._logger.warning(f"Customer not found: id={customer_id}")
            return None
        updated = replace(
            current,
            name=cleaned,
            mobile=current.mobile if mobile is None else mobile.strip(),
        )
        self._store.update_customer(updated)
        return updated


__all__ = ["RegisterCustomerUseCase", "RenameCustomerUseCase"]
