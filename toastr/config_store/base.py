"""Remote configuration store abstraction."""

from __future__ import annotations

import abc
from enum import Enum
from typing import Any, Callable

Listener = Callable[[str, Any], Any]


class StoreEvent(str, Enum):
    CHILD_ADDED = "child_added"
    CHILD_CHANGED = "child_changed"
    CHILD_REMOVED = "child_removed"
    VALUE = "value"


def join_path(*parts: str) -> str:
    return "/".join(part.strip("/") for part in parts if part)


class IConfigStore(abc.ABC):
    """Push-notification source for per-channel configuration collections.

    Child events call ``listener(key, value)``; for ``child_removed`` the value
    is the last known one. ``value`` events call ``listener(path, value)`` with
    the whole node, ``None`` when it does not exist. Notifications for one path
    must be delivered in the order the changes happened.
    """

    @abc.abstractmethod
    def subscribe(self, path: str, event: StoreEvent, listener: Listener) -> None:
        """Register ``listener`` for ``event`` on the node at ``path``."""
