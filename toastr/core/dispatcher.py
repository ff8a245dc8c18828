"""Turns chat messages into command invocations."""

from __future__ import annotations

import asyncio
import inspect
import logging
from functools import partial
from typing import Any, Mapping, Optional, Set

from ..chat_adapters.i_chat_adapter import IChatAdapter
from .config_sync import ConfigSyncState
from .models import CommandContext
from .permissions import is_permitted
from .user_sessions import UserSessionCache

LOGGER = logging.getLogger(__name__)

DENIAL_TEMPLATE = "Sorry, {mention}, you're not permitted to use the `{command}` command"


class MessageDispatcher:
    """Per-channel entry point for inbound chat messages.

    Command handlers are started but never awaited here; coroutine results are
    scheduled as tasks so slow commands do not hold up later messages.
    """

    def __init__(
        self,
        room: str,
        sync_state: ConfigSyncState,
        sessions: UserSessionCache,
        transport: IChatAdapter,
        channel: Any = None,
    ) -> None:
        self._room = room
        self._sync = sync_state
        self._sessions = sessions
        self._transport = transport
        self._channel = channel
        self._running: Set[asyncio.Future] = set()

    @property
    def running(self) -> Set[asyncio.Future]:
        return set(self._running)

    async def handle_message(
        self,
        room: str,
        descriptor: Mapping[str, Any],
        text: str,
        is_self: bool,
    ) -> Optional[Any]:
        """Dispatch ``text`` if it invokes a command the sender may run.

        Returns the command's result (a task for coroutine handlers), or
        ``None`` when the message was discarded or the sender was denied.
        """

        if is_self or room != self._room:
            return None

        message = text.lower()
        user = self._sessions.observe(descriptor)

        match = self._sync.matcher.match(message)
        if match is None:
            return None

        command = self._sync.resolve(match.command_name)
        if command is None:
            LOGGER.debug("Unknown command %s in %s", match.command_name, self._room)
            return None

        if not is_permitted(user, command.name, self._sync.permissions):
            LOGGER.info("Denied `%s` to %s in %s", command.name, user.name, self._room)
            await self._transport.say(
                self._room,
                DENIAL_TEMPLATE.format(mention=user.mention_name, command=command.name),
            )
            return None

        prefixes = self._sync.prefixes
        context = CommandContext(
            args=match.args,
            channel=self._channel,
            command_name=match.command_name,
            commands=self._sync.effective_commands(),
            default_prefix=prefixes[0] if prefixes else None,
            message=message,
            self_echo=is_self,
            user=user,
            action=partial(self._transport.action, self._room),
            say=partial(self._transport.say, self._room),
        )
        LOGGER.info("Running `%s` for %s in %s", command.name, user.name, self._room)
        result = command.execute(context)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                task = asyncio.create_task(result)
            else:
                task = asyncio.ensure_future(result)
            self._running.add(task)
            task.add_done_callback(partial(self._command_done, command.name))
            return task
        return result

    def _command_done(self, command_name: str, task: asyncio.Future) -> None:
        self._running.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            LOGGER.error("Command `%s` failed in %s", command_name, self._room, exc_info=error)
