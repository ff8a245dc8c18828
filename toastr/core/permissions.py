"""Per-command access control."""

from __future__ import annotations

from typing import Any, Mapping

from .models import UserSession, sparse_array_values

PermissionTable = Mapping[str, Any]


def is_permitted(user: UserSession, command_name: str, permissions: PermissionTable) -> bool:
    """Return whether ``user`` may run ``command_name``.

    A command without a rule is open to everyone. Otherwise the rule lists
    usernames and role names; matching either grants access. A present but
    empty rule denies everyone. Rules stored remotely as index-keyed mappings
    are read by their values.
    """

    principals = permissions.get(command_name)
    if principals is None:
        return True
    if isinstance(principals, Mapping):
        principals = sparse_array_values(principals)
    elif isinstance(principals, str):
        principals = [principals]
    if user.name in principals:
        return True
    return any(principal in user.roles for principal in principals)
