from __future__ import annotations  # Onboarding intake storage

import datetime as dt
import threading
from typing import Dict, Optional

from interview_session.models import Intake
from interview_session.repositories import IntakeRepository

from .migrate import migrate
from .sqlite import get_conn


class MemoryIntakeStore:  # Process-local intake storage
    def __init__(self) -> None:
        self._intakes: Dict[str, Intake] = {}
        self._guard = threading.Lock()

    def get(self, intake_id: str) -> Optional[Intake]:
        with self._guard:
            intake = self._intakes.get(intake_id)
            return intake.model_copy(deep=True) if intake else None

    def put(self, intake: Intake) -> None:
        with self._guard:
            self._intakes[intake.intake_id] = intake.model_copy(deep=True)


class SqliteIntakeStore:  # SQLite-backed intake storage, survives restarts
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        migrate(db_path)

    def get(self, intake_id: str) -> Optional[Intake]:
        with get_conn(self._db_path) as conn:
            row = conn.execute(
                "SELECT payload_json FROM onboarding_intakes WHERE intake_id = ?",
                (intake_id,),
            ).fetchone()
        if row is None:
            return None
        return Intake.model_validate_json(row["payload_json"])

    def put(self, intake: Intake) -> None:
        now = dt.datetime.now(dt.timezone.utc).isoformat()
        with get_conn(self._db_path) as conn:
            conn.execute(
                """INSERT INTO onboarding_intakes
                   (intake_id, candidate_id, session_id, payload_json, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?)
                   ON CONFLICT(intake_id) DO UPDATE SET
                     session_id = excluded.session_id,
                     payload_json = excluded.payload_json,
                     updated_at = excluded.updated_at""",
                (
                    intake.intake_id,
                    intake.candidate_id,
                    intake.session_id,
                    intake.model_dump_json(),
                    now,
                    now,
                ),
            )


__all__ = ["IntakeRepository", "MemoryIntakeStore", "SqliteIntakeStore"]
