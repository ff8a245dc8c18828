"""Remote configuration store boundary."""

from .base import IConfigStore, Listener, StoreEvent, join_path
from .memory import InMemoryConfigStore

__all__ = ["IConfigStore", "InMemoryConfigStore", "Listener", "StoreEvent", "join_path"]
