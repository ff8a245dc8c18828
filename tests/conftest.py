"""Shared fixtures for channel tests."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

import pytest

from toastr.chat_adapters.i_chat_adapter import IChatAdapter
from toastr.config_store import InMemoryConfigStore
from toastr.core.config import Config
from toastr.core.models import CommandDefinition, CommandOrigin


class RecordingChatAdapter(IChatAdapter):
    """Captures outbound chat traffic and lets tests emit inbound events."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str, str]] = []
        self.joined: List[str] = []
        self.moderators: Dict[str, List[str]] = {}
        self._message_handlers = []
        self._join_handlers = []

    def on_message(self, handler) -> None:
        self._message_handlers.append(handler)

    def on_join(self, handler) -> None:
        self._join_handlers.append(handler)

    async def join(self, room: str) -> None:
        self.joined.append(room)

    async def say(self, room: str, text: str) -> None:
        self.sent.append(("say", room, text))

    async def action(self, room: str, text: str) -> None:
        self.sent.append(("action", room, text))

    async def list_moderators(self, room: str) -> List[str]:
        return list(self.moderators.get(room, []))

    async def emit_message(
        self, room: str, user: Mapping[str, Any], text: str, is_self: bool = False
    ) -> List[Any]:
        return [await handler(room, user, text, is_self) for handler in self._message_handlers]

    def emit_join(self, room: str, username: str, is_self: bool) -> None:
        for handler in self._join_handlers:
            handler(room, username, is_self)


class RecordingHandler:
    """Synchronous command handler that remembers every context it received."""

    def __init__(self, result: Any = "handled") -> None:
        self.contexts: list = []
        self._result = result

    def __call__(self, context):
        self.contexts.append(context)
        return self._result

    @property
    def called(self) -> bool:
        return bool(self.contexts)


@pytest.fixture
def chat_adapter():
    return RecordingChatAdapter()


@pytest.fixture
def config_store():
    return InMemoryConfigStore()


@pytest.fixture
def test_config():
    return Config(
        bot_username="toastr_bot",
        channels=["#foo"],
        roles=("broadcaster", "moderator", "mods", "subscriber", "viewer"),
        default_prefixes=("!", "@Toastr_Bot "),
    )


@pytest.fixture
def ping_handler():
    return RecordingHandler(result="pong")


@pytest.fixture
def kick_handler():
    return RecordingHandler(result="kicked")


@pytest.fixture
def default_commands(ping_handler, kick_handler):
    return {
        "ping": CommandDefinition(name="ping", handler=ping_handler, origin=CommandOrigin.INHERITED),
        "kick": CommandDefinition(name="kick", handler=kick_handler, origin=CommandOrigin.INHERITED),
    }
