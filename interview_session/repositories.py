"""Storage contracts the interview engine depends on."""
from __future__ import annotations

from typing import List, Optional, Protocol

from .models import Candidate, Intake, Session


class SessionRepository(Protocol):
    def get(self, session_id: str) -> Optional[Session]: ...

    def put(self, session: Session) -> None: ...

    def list(self) -> List[Session]: ...


class CandidateRepository(Protocol):
    def get(self, session_id: str) -> Optional[Candidate]: ...

    def add(self, candidate: Candidate) -> None:
        """Insert once; raise ``CandidateExistsError`` if the session already has a record."""
        ...

    def list(self) -> List[Candidate]:
        """Return all records in insertion order."""
        ...


class IntakeRepository(Protocol):
    def get(self, intake_id: str) -> Optional[Intake]: ...

    def put(self, intake: Intake) -> None: ...


__all__ = ["CandidateRepository", "IntakeRepository", "SessionRepository"]
