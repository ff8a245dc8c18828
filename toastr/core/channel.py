"""A single monitored chat room and its synchronized configuration."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..chat_adapters.i_chat_adapter import IChatAdapter
from ..config_store.base import IConfigStore, StoreEvent, join_path
from .config import Config
from .config_sync import CommandFactory, ConfigSyncState, remote_command
from .dispatcher import MessageDispatcher
from .models import CommandDefinition, ConnectionState
from .state import ChannelStateMachine
from .user_sessions import UserSessionCache

LOGGER = logging.getLogger(__name__)


class Channel:
    """Composition root wiring the store and the transport to one room."""

    def __init__(
        self,
        name: str,
        config: Config,
        transport: IChatAdapter,
        store: IConfigStore,
        default_commands: Mapping[str, CommandDefinition],
        command_factory: CommandFactory = remote_command,
    ) -> None:
        self._name = name
        self._config = config
        self._transport = transport
        self._store = store
        self.sync = ConfigSyncState(
            channel_name=name,
            defaults=default_commands,
            default_prefixes=config.default_prefixes,
            command_factory=command_factory,
        )
        self.users = UserSessionCache(recognized_roles=config.roles)
        self.connection = ChannelStateMachine(name)
        self.dispatcher = MessageDispatcher(
            room=name,
            sync_state=self.sync,
            sessions=self.users,
            transport=transport,
            channel=self,
        )

        self._bind_store_events()
        self._bind_transport_events()

    @property
    def name(self) -> str:
        return self._name

    @property
    def safe_name(self) -> str:
        return self._name[1:] if self._name.startswith("#") else self._name

    @property
    def roles(self) -> tuple[str, ...]:
        return tuple(self._config.roles)

    @property
    def commands(self) -> Dict[str, CommandDefinition]:
        return self.sync.effective_commands()

    @property
    def permissions(self) -> Mapping[str, Any]:
        return self.sync.permissions

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self.sync.prefixes

    @property
    def default_prefix(self) -> Optional[str]:
        prefixes = self.sync.prefixes
        return prefixes[0] if prefixes else None

    @property
    def state(self) -> ConnectionState:
        return self.connection.state

    @state.setter
    def state(self, value) -> None:
        self.connection.state = value

    def collection_path(self, collection: str) -> str:
        return join_path(self._config.store_namespace, self.safe_name, collection)

    async def join(self) -> None:
        await self._transport.join(self._name)

    async def get_moderators(self) -> List[str]:
        return await self._transport.list_moderators(self._name)

    def _bind_store_events(self) -> None:
        self._store.subscribe(
            self.collection_path("prefixes"),
            StoreEvent.VALUE,
            lambda _path, value: self.sync.prefixes_changed(value),
        )

        commands_path = self.collection_path("commands")
        self._store.subscribe(commands_path, StoreEvent.CHILD_ADDED, self.sync.command_added)
        self._store.subscribe(commands_path, StoreEvent.CHILD_CHANGED, self.sync.command_changed)
        self._store.subscribe(commands_path, StoreEvent.CHILD_REMOVED, self.sync.command_removed)

        permissions_path = self.collection_path("permissions")
        self._store.subscribe(permissions_path, StoreEvent.CHILD_ADDED, self.sync.permission_added)
        self._store.subscribe(permissions_path, StoreEvent.CHILD_CHANGED, self.sync.permission_changed)
        self._store.subscribe(permissions_path, StoreEvent.CHILD_REMOVED, self.sync.permission_removed)

    def _bind_transport_events(self) -> None:
        LOGGER.info("Binding chat events for %s", self._name)
        self._transport.on_message(self.dispatcher.handle_message)
        self._transport.on_join(self.connection.handle_join)
