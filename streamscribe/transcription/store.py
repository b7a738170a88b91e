"""Session store keyed by connection-scoped session id."""

from __future__ import annotations

import logging

from streamscribe.state import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """Mapping from session id to `Session`.

    Owned by the coordinator and only touched from the event loop thread, so
    no lock is needed: none of these methods await.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def create(self, session_id: str) -> Session:
        if session_id in self._sessions:
            raise ValueError(f"session '{session_id}' already exists")
        session = Session(id=session_id)
        self._sessions[session_id] = session
        return session

    def get(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        """Drop a session; returns False if it was already gone."""
        return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SessionStore"]
