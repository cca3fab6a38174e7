"""Tracks which user is signed in for the running process."""

import secrets
import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    user_id: str
    secret: str


class SessionHolder:
    """Single-slot session storage."""

    def __init__(self):
        self._lock = threading.Lock()
        self._session: Session | None = None

    def set(self, user_id: str) -> Session:
        """Open a session for ``user_id``, replacing any previous one."""
        session = Session(user_id=user_id, secret=secrets.token_hex(16))
        with self._lock:
            self._session = session
        return session

    def get(self) -> Session | None:
        with self._lock:
            return self._session

    def clear(self) -> None:
        with self._lock:
            self._session = None
