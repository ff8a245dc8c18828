"""Registry of inherited default commands shared by every channel."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import CommandNotFound
from .models import CommandContext, CommandDefinition, CommandHandler, CommandOrigin

LOGGER = logging.getLogger(__name__)


class CommandRegistry:
    """Holds the default command set channels fall back to."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandDefinition] = {}

    def register(self, name: str, handler: CommandHandler, **metadata: Any) -> CommandDefinition:
        key = name.strip().lower()
        if not key:
            raise ValueError("Command name cannot be empty.")
        command = CommandDefinition(
            name=key,
            handler=handler,
            origin=CommandOrigin.INHERITED,
            metadata=dict(metadata),
        )
        self._commands[key] = command
        LOGGER.debug("Registered default command %s", key)
        return command

    def get(self, name: str) -> Optional[CommandDefinition]:
        return self._commands.get(name.lower())

    def require(self, name: str) -> CommandDefinition:
        command = self.get(name)
        if command is None:
            raise CommandNotFound(name)
        return command

    def defaults(self) -> Mapping[str, CommandDefinition]:
        """Read-only view of the default commands."""
        return MappingProxyType(self._commands)


def handle_commands(context: CommandContext) -> Any:
    names = ", ".join(f"{context.default_prefix or ''}{name}" for name in sorted(context.commands))
    return context.say(f"Available commands: {names}")


def handle_ping(context: CommandContext) -> Any:
    return context.say(f"{context.user.mention_name} pong")


def build_default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register("commands", handle_commands, description="List the commands available here.")
    registry.register("ping", handle_ping, description="Check that the bot is listening.")
    return registry
