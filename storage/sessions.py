"""Session store repositories."""
from __future__ import annotations

import datetime as dt
import threading
from typing import Dict, List, Optional

from interview_session.models import Session
from interview_session.repositories import SessionRepository

from .migrate import migrate
from .sqlite import get_conn


class MemorySessionStore:  # Process-local session storage
    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        self._guard = threading.Lock()

    def get(self, session_id: str) -> Optional[Session]:
        with self._guard:
            session = self._sessions.get(session_id)
            return session.model_copy(deep=True) if session else None

    def put(self, session: Session) -> None:
        with self._guard:
            self._sessions[session.session_id] = session.model_copy(deep=True)

    def list(self) -> List[Session]:
        with self._guard:
            return [session.model_copy(deep=True) for session in self._sessions.values()]


class SqliteSessionStore:  # SQLite-backed session storage
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        migrate(db_path)

    def get(self, session_id: str) -> Optional[Session]:
        with get_conn(self._db_path) as conn:
            row = conn.execute(
                "SELECT payload_json FROM interview_sessions WHERE session_id = ?",
                (session_id,),
            ).fetchone()
        if row is None:
            return None
        return Session.model_validate_json(row["payload_json"])

    def put(self, session: Session) -> None:
        now = dt.datetime.now(dt.timezone.utc).isoformat()
        with get_conn(self._db_path) as conn:
            conn.execute(
                """INSERT INTO interview_sessions
                   (session_id, candidate_id, status, payload_json, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?)
                   ON CONFLICT(session_id) DO UPDATE SET
                     status = excluded.status,
                     payload_json = excluded.payload_json,
                     updated_at = excluded.updated_at""",
                (
                    session.session_id,
                    session.candidate_id,
                    session.status,
                    session.model_dump_json(),
                    now,
                    now,
                ),
            )

    def list(self) -> List[Session]:
        with get_conn(self._db_path) as conn:
            rows = conn.execute(
                "SELECT payload_json FROM interview_sessions ORDER BY created_at, rowid"
            ).fetchall()
        return [Session.model_validate_json(row["payload_json"]) for row in rows]


__all__ = ["MemorySessionStore", "SessionRepository", "SqliteSessionStore"]
