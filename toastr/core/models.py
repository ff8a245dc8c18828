"""Domain models for Toastr channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

CommandHandler = Callable[["CommandContext"], Any]


class CommandOrigin(str, Enum):
    INHERITED = "inherited"
    REMOTE_OVERRIDE = "remote-override"


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


@dataclass
class CommandDefinition:
    name: str
    handler: CommandHandler
    origin: CommandOrigin = CommandOrigin.INHERITED
    metadata: Dict[str, Any] = field(default_factory=dict)

    def execute(self, context: "CommandContext") -> Any:
        return self.handler(context)


@dataclass
class UserSession:
    """Per-username state built from the transport's user descriptors.

    The object is updated in place so references held elsewhere (for example
    by a running command) always see the latest fields.
    """

    username: str
    fields: Dict[str, Any] = field(default_factory=dict)
    roles: List[str] = field(default_factory=list)
    recognized_roles: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        self.roles = roles_from_descriptor(self.fields, self.recognized_roles) or self.roles

    @property
    def name(self) -> str:
        return self.username

    @property
    def display_name(self) -> str:
        return self.fields.get("display-name") or self.username

    @property
    def mention_name(self) -> str:
        return f"@{self.display_name}"

    def update(self, descriptor: Mapping[str, Any]) -> None:
        self.fields.update(descriptor)
        self.roles = roles_from_descriptor(self.fields, self.recognized_roles)


def sparse_array_values(value: Mapping[Any, Any]) -> List[Any]:
    """Return the values of a remote array stored as an index-keyed mapping.

    Numeric keys come first in numeric order; any other keys follow in
    string order.
    """

    def _order(key: Any) -> tuple:
        text = str(key)
        if text.isdigit():
            return (0, int(text), "")
        return (1, 0, text)

    return [value[key] for key in sorted(value, key=_order)]


def roles_from_descriptor(
    descriptor: Mapping[str, Any],
    recognized: Optional[Iterable[str]] = None,
) -> List[str]:
    """Collect role names carried by a transport user descriptor.

    Roles come from badge names, an explicit ``roles`` list, and the
    ``mod``/``subscriber`` flags. When ``recognized`` is given only those
    roles are kept, in the recognized order.
    """

    candidates: List[str] = []
    badges = descriptor.get("badges") or {}
    if isinstance(badges, Mapping):
        candidates.extend(str(name) for name in badges)
    explicit = descriptor.get("roles") or []
    if isinstance(explicit, (list, tuple)):
        candidates.extend(str(role) for role in explicit)
    if descriptor.get("mod"):
        candidates.append("moderator")
    if descriptor.get("subscriber"):
        candidates.append("subscriber")

    if recognized is None:
        return list(dict.fromkeys(candidates))
    present = set(candidates)
    return [role for role in recognized if role in present]


@dataclass(frozen=True)
class CommandContext:
    """Everything a command receives when it is dispatched."""

    args: str
    channel: Any
    command_name: str
    commands: Dict[str, CommandDefinition]
    default_prefix: Optional[str]
    message: str
    self_echo: bool
    user: UserSession
    action: Callable[[str], Any]
    say: Callable[[str], Any]
