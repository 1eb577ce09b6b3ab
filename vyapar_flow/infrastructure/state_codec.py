"""JSON encoding of the state tree."""

from decimal import Decimal
import json

from vyapar_flow.domain.exceptions import StateDecodeError
from vyapar_flow.domain.models import AppState
from vyapar_flow.domain.services.serialization import (
    state_from_dict,
    state_to_dict,
)


def dumps_state(state: AppState, pretty: bool = False) -> str:
    """Serialize the state tree to JSON text.

    Args:
        state: State tree to serialize.
        pretty: Indent with two spaces for human-readable files.

    Returns:
        str: JSON document.
    """
    payload = state_to_dict(state)
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def loads_state(raw: str | bytes) -> AppState:
    """Parse JSON text into a state tree.

    Raises:
        StateDecodeError: If the text is not JSON or not a state tree.
    """
    try:
        payload = json.loads(raw, parse_float=Decimal)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StateDecodeError(f"Invalid JSON: {exc}") from exc
    return state_from_dict(payload)


__all__ = ["dumps_state", "loads_state"]
