"""Connection state tracking for a channel."""

from __future__ import annotations

import logging
from typing import Union

from .errors import InvalidStateError
from .models import ConnectionState

LOGGER = logging.getLogger(__name__)


class ChannelStateMachine:
    def __init__(self, channel_name: str) -> None:
        self._channel_name = channel_name
        self._state = ConnectionState.DISCONNECTED

    @property
    def state(self) -> ConnectionState:
        return self._state

    @state.setter
    def state(self, value: Union[ConnectionState, str]) -> None:
        try:
            self._state = ConnectionState(value)
        except ValueError as exc:
            allowed = ", ".join(state.value for state in ConnectionState)
            raise InvalidStateError(
                f"Channel received invalid state {value!r}. State must be one of: {allowed}"
            ) from exc

    @property
    def is_connected(self) -> bool:
        return self._state == ConnectionState.CONNECTED

    def handle_join(self, room: str, identity: str, is_self: bool) -> bool:
        """Apply a join confirmation; returns True when the channel became connected."""
        if not is_self or room.lower() != self._channel_name.lower():
            return False
        if self.is_connected:
            LOGGER.debug("Repeated join confirmation for %s ignored", self._channel_name)
            return False
        self.state = ConnectionState.CONNECTED
        LOGGER.info("Joined %s as %s", self._channel_name, identity)
        return True
