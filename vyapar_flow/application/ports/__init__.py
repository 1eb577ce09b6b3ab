"""Application ports (interfaces) for infrastructure adapters."""

from .database import DatabaseEnginePort
from .desktop import DesktopBridgePort
from .key_value_store import KeyValueStorePort
from .state_storage import StateBackendPort, StatePersistencePort

__all__ = [
    "DatabaseEnginePort",
    "DesktopBridgePort",
    "KeyValueStorePort",
    "StateBackendPort",
    "StatePersistencePort",
]
