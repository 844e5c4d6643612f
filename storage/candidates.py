from __future__ import annotations  # Candidate directory storage

import sqlite3
import threading
from typing import Dict, List, Optional

from interview_session.errors import CandidateExistsError
from interview_session.models import Candidate
from interview_session.repositories import CandidateRepository

from .migrate import migrate
from .sqlite import get_conn


class MemoryCandidateDirectory:  # Process-local append-only candidate records
    def __init__(self) -> None:
        self._records: Dict[str, Candidate] = {}
        self._guard = threading.Lock()

    def get(self, session_id: str) -> Optional[Candidate]:
        with self._guard:
            return self._records.get(session_id)

    def add(self, candidate: Candidate) -> None:
        with self._guard:
            if candidate.session_id in self._records:
                raise CandidateExistsError(candidate.session_id)
            self._records[candidate.session_id] = candidate

    def list(self) -> List[Candidate]:  # Dicts keep insertion order
        with self._guard:
            return list(self._records.values())


class SqliteCandidateDirectory:  # SQLite-backed append-only candidate records
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        migrate(db_path)

    def get(self, session_id: str) -> Optional[Candidate]:
        with get_conn(self._db_path) as conn:
            row = conn.execute(
                "SELECT payload_json FROM candidates WHERE session_id = ?",
                (session_id,),
            ).fetchone()
        if row is None:
            return None
        return Candidate.model_validate_json(row["payload_json"])

    def add(self, candidate: Candidate) -> None:
        try:
            with get_conn(self._db_path) as conn:
                conn.execute(
                    """INSERT INTO candidates
                       (session_id, name, email, final_score, terminated, completed_at, payload_json)
                       VALUES (?, ?, ?, ?, ?, ?, ?)""",
                    (
                        candidate.session_id,
                        candidate.name,
                        candidate.email,
                        candidate.final_score,
                        int(candidate.terminated),
                        candidate.completed_at.isoformat(),
                        candidate.model_dump_json(),
                    ),
                )
        except sqlite3.IntegrityError as exc:
            raise CandidateExistsError(candidate.session_id) from exc

    def list(self) -> List[Candidate]:
        with get_conn(self._db_path) as conn:
            rows = conn.execute("SELECT payload_json FROM candidates ORDER BY seq").fetchall()
        return [Candidate.model_validate_json(row["payload_json"]) for row in rows]


__all__ = ["CandidateRepository", "MemoryCandidateDirectory", "SqliteCandidateDirectory"]
