"""Helpers shared by the record-creating use cases."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
import uuid

from vyapar_flow.domain.services.validation import validate_amount
from vyapar_flow.utils.decimal_utils import coerce_decimal


IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a fresh opaque record id."""
    return str(uuid.uuid4())


def resolve_date(on_date: date | str | None) -> str:
    """Return an ISO date string, today when no date is given.

    Raises:
        ValueError: If a string date is not in YYYY-MM-DD form.
    """
    if on_date is None:
        return date.today().isoformat()
    if isinstance(on_date, date):
        return on_date.isoformat()
    return date.fromisoformat(on_date.strip()).isoformat()


def parse_amount(value, field_name: str = "amount") -> Decimal:
    """Parse a form amount and reject negative values."""
    return validate_amount(coerce_decimal(value), field_name)


__all__ = ["IdFactory", "new_id", "resolve_date", "parse_amount"]
