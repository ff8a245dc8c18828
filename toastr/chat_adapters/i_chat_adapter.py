"""Chat adapter abstraction."""

from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, List, Mapping, Optional

MessageHandler = Callable[[str, Mapping[str, Any], str, bool], Awaitable[Any]]
JoinHandler = Callable[[str, str, bool], Any]


class IChatAdapter(abc.ABC):
    """Abstraction for chat platform integrations (Twitch IRC, etc.)."""

    @abc.abstractmethod
    def on_message(self, handler: MessageHandler) -> None:
        """Register a handler called as ``handler(room, user, text, is_self)``."""

    @abc.abstractmethod
    def on_join(self, handler: JoinHandler) -> None:
        """Register a handler called as ``handler(room, username, is_self)``."""

    @abc.abstractmethod
    async def join(self, room: str) -> None:
        """Join a room."""

    @abc.abstractmethod
    async def say(self, room: str, text: str) -> Optional[str]:
        """Send a plain message to a room.

        Returns:
            The message ID if available, None otherwise.
        """

    @abc.abstractmethod
    async def action(self, room: str, text: str) -> Optional[str]:
        """Send an action-formatted (``/me``) message to a room."""

    @abc.abstractmethod
    async def list_moderators(self, room: str) -> List[str]:
        """Return the usernames moderating a room."""
