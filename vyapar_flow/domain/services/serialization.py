"""Mapping between the state tree and its JSON-compatible form.

Field names and enum values follow the backup format written by earlier
releases (camelCase keys, upper-case enum strings).
"""

from collections.abc import Mapping
from typing import Any

from vyapar_flow.domain.constants import (
    DEFAULT_FINANCE_CATEGORY,
    FINANCE_TYPES,
    ORDER_STATUSES,
    REQUIRED_STATE_KEYS,
    TRANSACTION_TYPES,
)
from vyapar_flow.domain.exceptions import StateDecodeError
from vyapar_flow.domain.models import (
    AppState,
    Customer,
    FinanceEntry,
    ShopSettings,
    Transaction,
    WorkOrder,
)
from vyapar_flow.utils.decimal_utils import (
    coerce_decimal,
    decimal_to_json_number,
)


def state_to_dict(state: AppState) -> dict[str, Any]:
    """Convert the state tree into plain dicts and lists.

    Args:
        state: State tree to convert.

    Returns:
        dict[str, Any]: Payload ready for ``json.dumps``.
    """
    return {
        "customers": [_customer_to_dict(c) for c in state.customers],
        "finances": [_finance_to_dict(f) for f in state.finances],
        "orders": [_order_to_dict(o) for o in state.orders],
        "settings": _settings_to_dict(state.settings),
    }


def state_from_dict(payload: Any) -> AppState:
    """Build a state tree from a decoded JSON payload.

    The three record collections are required. A missing ``settings`` block
    falls back to default settings, and missing free-text fields fall back to
    empty strings.

    Args:
        payload: Result of ``json.loads`` on a stored or uploaded document.

    Returns:
        AppState: Decoded state tree.

    Raises:
        StateDecodeError: If the payload does not describe a state tree.
    """
    if not isinstance(payload, Mapping):
        raise StateDecodeError("State payload must be a JSON object")
    missing = [key for key in REQUIRED_STATE_KEYS if key not in payload]
    if missing:
        raise StateDecodeError(
            f"State payload is missing keys: {', '.join(missing)}"
        )
    settings_payload = payload.get("settings")
    return AppState(
        customers=tuple(
            _customer_from_dict(item)
            for item in _require_list(payload, "customers")
        ),
        finances=tuple(
            _finance_from_dict(item)
            for item in _require_list(payload, "finances")
        ),
        orders=tuple(
            _order_from_dict(item)
            for item in _require_list(payload, "orders")
        ),
        settings=(
            _settings_from_dict(settings_payload)
            if settings_payload is not None
            else ShopSettings()
        ),
    )


def _customer_to_dict(customer: Customer) -> dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "mobile": customer.mobile,
        "transactions": [
            _transaction_to_dict(t) for t in customer.transactions
        ],
    }


def _transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": transaction.date,
        "amount": decimal_to_json_number(transaction.amount),
        "type": transaction.type,
        "description": transaction.description,
    }


def _finance_to_dict(entry: FinanceEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "date": entry.date,
        "amount": decimal_to_json_number(entry.amount),
        "type": entry.type,
        "category": entry.category,
        "description": entry.description,
    }


def _order_to_dict(order: WorkOrder) -> dict[str, Any]:
    return {
        "id": order.id,
        "date": order.date,
        "customerId": order.customer_id,
        "customerName": order.customer_name,
        "detail": order.detail,
        "status": order.status,
        "amount": decimal_to_json_number(order.amount),
        "advance": decimal_to_json_number(order.advance),
    }


def _settings_to_dict(settings: ShopSettings) -> dict[str, Any]:
    return {
        "shopName": settings.shop_name,
        "ownerName": settings.owner_name,
        "contactNumber": settings.contact_number,
        "address": settings.address,
        "dataFolderPath": settings.data_folder_path,
    }


def _customer_from_dict(item: Any) -> Customer:
    record = _require_mapping(item, "customer")
    return Customer(
        id=_require_id(record, "customer"),
        name=_text(record, "name"),
        mobile=_text(record, "mobile"),
        transactions=tuple(
            _transaction_from_dict(t)
            for t in _optional_list(record, "transactions")
        ),
    )


def _transaction_from_dict(item: Any) -> Transaction:
    record = _require_mapping(item, "transaction")
    return Transaction(
        id=_require_id(record, "transaction"),
        date=_text(record, "date"),
        amount=_amount(record, "amount", "transaction"),
        type=_choice(record, "type", TRANSACTION_TYPES, "transaction"),
        description=_text(record, "description"),
    )


def _finance_from_dict(item: Any) -> FinanceEntry:
    record = _require_mapping(item, "finance entry")
    return FinanceEntry(
        id=_require_id(record, "finance entry"),
        date=_text(record, "date"),
        amount=_amount(record, "amount", "finance entry"),
        type=_choice(record, "type", FINANCE_TYPES, "finance entry"),
        category=_text(record, "category", DEFAULT_FINANCE_CATEGORY),
        description=_text(record, "description"),
    )


def _order_from_dict(item: Any) -> WorkOrder:
    record = _require_mapping(item, "order")
    return WorkOrder(
        id=_require_id(record, "order"),
        date=_text(record, "date"),
        customer_id=_text(record, "customerId"),
        customer_name=_text(record, "customerName"),
        detail=_text(record, "detail"),
        status=_choice(record, "status", ORDER_STATUSES, "order"),
        amount=_amount(record, "amount", "order"),
        advance=_amount(record, "advance", "order"),
    )


def _settings_from_dict(item: Any) -> ShopSettings:
    record = _require_mapping(item, "settings")
    defaults = ShopSettings()
    return ShopSettings(
        shop_name=_text(record, "shopName", defaults.shop_name),
        owner_name=_text(record, "ownerName", defaults.owner_name),
        contact_number=_text(record, "contactNumber"),
        address=_text(record, "address"),
        data_folder_path=_text(record, "dataFolderPath"),
    )


def _require_list(payload: Mapping, key: str) -> list:
    value = payload[key]
    if not isinstance(value, list):
        raise StateDecodeError(f"'{key}' must be a list")
    return value


def _optional_list(record: Mapping, key: str) -> list:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise StateDecodeError(f"'{key}' must be a list")
    return value


def _require_mapping(item: Any, label: str) -> Mapping:
    if not isinstance(item, Mapping):
        raise StateDecodeError(f"Each {label} must be a JSON object")
    return item


def _require_id(record: Mapping, label: str) -> str:
    value = record.get("id")
    if value is None or value == "":
        raise StateDecodeError(f"A {label} is missing its id")
    return str(value)


def _text(record: Mapping, key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None:
        return default
    return str(value)


def _amount(record: Mapping, key: str, label: str):
    try:
        return coerce_decimal(record.get(key))
    except ValueError as exc:
        raise StateDecodeError(
            f"Invalid {key} on {label} {record.get('id')!r}"
        ) from exc


def _choice(
    record: Mapping,
    key: str,
    allowed: tuple[str, ...],
    label: str,
) -> str:
    value = record.get(key)
    if value not in allowed:
        raise StateDecodeError(
            f"Invalid {key} {value!r} on {label} {record.get('id')!r}"
        )
    return value


__all__ = ["state_to_dict", "state_from_dict"]
