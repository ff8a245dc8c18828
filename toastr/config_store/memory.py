"""In-process config store used for local runs and tests."""

from __future__ import annotations

import copy
import logging
from collections import defaultdict
from typing import Any, Dict, List, Tuple

from .base import IConfigStore, Listener, StoreEvent

LOGGER = logging.getLogger(__name__)


class InMemoryConfigStore(IConfigStore):
    """Synchronous store that notifies listeners as soon as data changes.

    Subscribing replays current data the way hosted realtime stores do:
    ``child_added`` fires for each existing child and ``value`` fires once
    with the current node.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Any] = {}
        self._listeners: Dict[Tuple[str, StoreEvent], List[Listener]] = defaultdict(list)

    def subscribe(self, path: str, event: StoreEvent, listener: Listener) -> None:
        event = StoreEvent(event)
        self._listeners[(path, event)].append(listener)
        node = self._nodes.get(path)
        if event == StoreEvent.CHILD_ADDED and isinstance(node, dict):
            for key, value in list(node.items()):
                listener(key, copy.deepcopy(value))
        elif event == StoreEvent.VALUE and node is not None:
            listener(path, copy.deepcopy(node))

    def get(self, path: str) -> Any:
        return copy.deepcopy(self._nodes.get(path))

    def set_child(self, path: str, key: str, value: Any) -> None:
        node = self._nodes.setdefault(path, {})
        if not isinstance(node, dict):
            raise TypeError(f"Node at {path} is not a collection")
        event = StoreEvent.CHILD_CHANGED if key in node else StoreEvent.CHILD_ADDED
        node[key] = copy.deepcopy(value)
        LOGGER.debug("%s %s/%s", event.value, path, key)
        self._emit(path, event, key, value)
        self._emit(path, StoreEvent.VALUE, path, node)

    def remove_child(self, path: str, key: str) -> None:
        node = self._nodes.get(path)
        if not isinstance(node, dict) or key not in node:
            return
        value = node.pop(key)
        if not node:
            del self._nodes[path]
        LOGGER.debug("child_removed %s/%s", path, key)
        self._emit(path, StoreEvent.CHILD_REMOVED, key, value)
        self._emit(path, StoreEvent.VALUE, path, self._nodes.get(path))

    def set_value(self, path: str, value: Any) -> None:
        """Replace a whole node; only ``value`` listeners are notified."""
        if value is None:
            self._nodes.pop(path, None)
        else:
            self._nodes[path] = copy.deepcopy(value)
        self._emit(path, StoreEvent.VALUE, path, value)

    def _emit(self, path: str, event: StoreEvent, key: str, value: Any) -> None:
        for listener in list(self._listeners.get((path, event), ())):
            listener(key, copy.deepcopy(value))
