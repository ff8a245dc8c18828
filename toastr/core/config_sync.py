"""Local cache of a channel's remotely-managed configuration."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from .models import CommandContext, CommandDefinition, CommandOrigin, sparse_array_values
from .prefix_matcher import PrefixMatcher

LOGGER = logging.getLogger(__name__)

CommandFactory = Callable[[str, Any], CommandDefinition]


def static_response_handler(payload: Any) -> Callable[[CommandContext], Any]:
    """Build a handler that replies with the ``action``/``say`` text of a payload."""

    if isinstance(payload, Mapping):
        action_text = payload.get("action")
        say_text = payload.get("say")
    elif isinstance(payload, str):
        action_text, say_text = None, payload
    else:
        action_text = say_text = None

    async def _respond(context: CommandContext) -> None:
        if action_text:
            result = context.action(str(action_text))
            if inspect.isawaitable(result):
                await result
        if say_text:
            result = context.say(str(say_text))
            if inspect.isawaitable(result):
                await result

    return _respond


def remote_command(name: str, payload: Any) -> CommandDefinition:
    metadata = dict(payload) if isinstance(payload, Mapping) else {"value": payload}
    return CommandDefinition(
        name=name,
        handler=static_response_handler(payload),
        origin=CommandOrigin.REMOTE_OVERRIDE,
        metadata=metadata,
    )


class ConfigSyncState:
    """Commands, permissions and prefixes mirrored from the remote store.

    Commands are kept in two layers: the inherited ``defaults`` mapping, which
    is never written to, and a channel-local overlay fed by remote
    notifications. Lookups merge the two at read time with the overlay winning.
    """

    def __init__(
        self,
        channel_name: str,
        defaults: Mapping[str, CommandDefinition],
        default_prefixes: Sequence[str],
        command_factory: CommandFactory = remote_command,
    ) -> None:
        self._channel_name = channel_name
        self._defaults = defaults
        self._overrides: Dict[str, CommandDefinition] = {}
        self._permissions: Dict[str, Any] = {}
        self._default_prefixes: Tuple[str, ...] = tuple(default_prefixes)
        self._prefixes: Tuple[str, ...] = self._default_prefixes
        self._command_factory = command_factory
        self.matcher = PrefixMatcher(self._prefixes)

    @property
    def overrides(self) -> Mapping[str, CommandDefinition]:
        return self._overrides

    @property
    def permissions(self) -> Mapping[str, Any]:
        return self._permissions

    @property
    def prefixes(self) -> Tuple[str, ...]:
        return self._prefixes

    # Commands

    def command_added(self, key: str, value: Any) -> None:
        self._overrides[key] = self._command_factory(key, value)
        LOGGER.info("Command `%s` added for channel %s", key, self._channel_name)

    def command_changed(self, key: str, value: Any) -> None:
        self._overrides[key] = self._command_factory(key, value)
        LOGGER.info("Command `%s` modified", key)

    def command_removed(self, key: str, value: Any = None) -> None:
        self._overrides.pop(key, None)
        LOGGER.info("Command `%s` removed", key)

    def resolve(self, name: str) -> Optional[CommandDefinition]:
        command = self._overrides.get(name)
        if command is not None:
            return command
        return self._defaults.get(name)

    def effective_commands(self) -> Dict[str, CommandDefinition]:
        """Return a fresh merged table; mutating it never reaches either layer."""
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    # Permissions

    def permission_added(self, key: str, value: Any) -> None:
        self._permissions[key] = value
        LOGGER.info("Permissions have been set for `%s` command", key)

    def permission_changed(self, key: str, value: Any) -> None:
        self._permissions[key] = value
        LOGGER.info("Permissions for `%s` command have been modified", key)

    def permission_removed(self, key: str, value: Any = None) -> None:
        self._permissions.pop(key, None)
        LOGGER.info("Permissions for command `%s` have been removed", key)

    # Prefixes

    def prefixes_changed(self, value: Any) -> None:
        """Replace the prefix set and recompile the matching rule.

        ``None`` means the remote collection does not exist, which restores the
        configured defaults. Mappings (sparse remote arrays) contribute their
        values in key order.
        """

        if value is None:
            prefixes: Iterable[Any] = self._default_prefixes
        elif isinstance(value, Mapping):
            prefixes = sparse_array_values(value)
        elif isinstance(value, str):
            prefixes = [value]
        else:
            prefixes = list(value)

        self.matcher.recompile(prefixes)
        self._prefixes = self.matcher.prefixes
        if not self._prefixes:
            LOGGER.warning("Prefixes for %s are empty; no message will match a command", self._channel_name)
        LOGGER.info("Prefixes for %s updated: %s", self._channel_name, ", ".join(self._prefixes))
