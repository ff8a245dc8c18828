"""In-memory cache of per-user session state."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .models import UserSession

LOGGER = logging.getLogger(__name__)


class UserSessionCache:
    """Username-keyed sessions, created lazily and merged on every message."""

    def __init__(self, recognized_roles: Optional[Iterable[str]] = None) -> None:
        self._sessions: Dict[str, UserSession] = {}
        self._recognized_roles = tuple(recognized_roles) if recognized_roles else None

    def observe(self, descriptor: Mapping[str, Any]) -> UserSession:
        username = descriptor["username"]
        session = self._sessions.get(username)
        if session:
            session.update(descriptor)
            return session

        session = UserSession(
            username=username,
            fields=dict(descriptor),
            recognized_roles=self._recognized_roles,
        )
        self._sessions[username] = session
        LOGGER.debug("Session created for user %s", username)
        return session

    def get(self, username: str) -> Optional[UserSession]:
        return self._sessions.get(username)

    def __contains__(self, username: object) -> bool:
        return username in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
