"""Core channel engine for Toastr."""

from .channel import Channel
from .config import Config, load_config
from .config_sync import ConfigSyncState, remote_command
from .dispatcher import MessageDispatcher
from .errors import (
    CommandNotFound,
    ConfigError,
    InvalidStateError,
    ToastrError,
)
from .models import (
    CommandContext,
    CommandDefinition,
    CommandOrigin,
    ConnectionState,
    UserSession,
)
from .permissions import is_permitted
from .prefix_matcher import CommandMatch, PrefixMatcher, compile_prefixes
from .registry import CommandRegistry, build_default_registry
from .state import ChannelStateMachine
from .user_sessions import UserSessionCache

__all__ = [
    "Channel",
    "Config",
    "load_config",
    "ConfigSyncState",
    "remote_command",
    "MessageDispatcher",
    "ToastrError",
    "ConfigError",
    "CommandNotFound",
    "InvalidStateError",
    "CommandContext",
    "CommandDefinition",
    "CommandOrigin",
    "ConnectionState",
    "UserSession",
    "is_permitted",
    "CommandMatch",
    "PrefixMatcher",
    "compile_prefixes",
    "CommandRegistry",
    "build_default_registry",
    "ChannelStateMachine",
    "UserSessionCache",
]
