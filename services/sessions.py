"""Helpers for identifying and serializing interview sessions."""
from __future__ import annotations

import threading
import uuid
import weakref

# Entries live only while some caller holds the lock
_SESSION_LOCKS: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_SESSION_LOCKS_GUARD = threading.Lock()


def new_session_id() -> str:
    """Generate an opaque, unique session identifier."""

    return str(uuid.uuid4())


def session_lock(session_id: str) -> threading.Lock:
    """Return the lock that serializes mutations of ``session_id``.

    Callers must keep the returned lock referenced for as long as they use it.
    """

    with _SESSION_LOCKS_GUARD:
        lock = _SESSION_LOCKS.get(session_id)
        if lock is None:
            lock = threading.Lock()
            _SESSION_LOCKS[session_id] = lock
    return lock


def active_lock_count() -> int:
    with _SESSION_LOCKS_GUARD:
        return len(_SESSION_LOCKS)


__all__ = ["active_lock_count", "new_session_id", "session_lock"]
