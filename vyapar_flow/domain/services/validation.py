"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from vyapar_flow.domain.models import AppState


def validate_amount(amount: Decimal, field_name: str = "amount") -> Decimal:
    """Reject negative amounts entered through forms.

    Args:
        amount: Parsed amount.
        field_name: Field label used in the error message.

    Returns:
        Decimal: The amount unchanged.

    Raises:
        ValueError: If the amount is negative.
    """
    if amount < 0:
        raise ValueError(f"{field_name} must not be negative: {amount}")
    return amount


def warn_on_duplicate_ids(state: AppState, logger: Logger) -> None:
    """Warn when a collection holds the same id twice.

    Args:
        state: State tree to inspect.
        logger: Logger used for warnings.
    """
    collections = {
        "customers": state.customers,
        "finances": state.finances,
        "orders": state.orders,
    }
    for name, records in collections.items():
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                logger.warning(f"Duplicate id in {name}: {record.id}")
            seen.add(record.id)


__all__ = ["validate_amount", "warn_on_duplicate_ids"]
