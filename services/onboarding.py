"""Profile completion flow that gates the start of an interview."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from interview_session import (
    Intake,
    IntakeRepository,
    InterviewEngine,
    SessionConflictError,
    StartResult,
    UserInfo,
)
from observability import log_event
from storage.intakes import MemoryIntakeStore

from .sessions import new_session_id, session_lock


class OnboardingOutcome(BaseModel):
    intake_id: str
    missing_fields: List[str] = Field(default_factory=list)
    started: Optional[StartResult] = None


class OnboardingService:
    """Collects name, email, and phone, then starts the interview exactly once.

    Intakes are persisted through ``intakes`` so a pending profile survives a
    restart as long as the repository does.
    """

    def __init__(self, engine: InterviewEngine, intakes: Optional[IntakeRepository] = None) -> None:
        self._engine = engine
        self._intakes: IntakeRepository = intakes if intakes is not None else MemoryIntakeStore()

    def register(self, candidate_id: str, user_info: Optional[UserInfo] = None) -> OnboardingOutcome:
        intake = Intake(
            intake_id=new_session_id(),
            candidate_id=candidate_id,
            user_info=UserInfo().merged(user_info or UserInfo()),
        )
        with session_lock(intake.intake_id):
            self._intakes.put(intake)
            return self._maybe_start(intake)

    def update_user_info(self, target_id: str, user_info: UserInfo) -> OnboardingOutcome:
        """Merge fields into a pending intake, or into a session that has not started answering."""

        if self._intakes.get(target_id) is None:
            session = self._engine.update_user_info(target_id, user_info)
            return OnboardingOutcome(intake_id=target_id, missing_fields=session.user_info.missing_fields())

        with session_lock(target_id):
            intake = self._intakes.get(target_id)
            if intake.session_id is not None:
                raise SessionConflictError(
                    f"Interview for intake {target_id} already started as session {intake.session_id}"
                )
            intake.user_info = intake.user_info.merged(user_info)
            self._intakes.put(intake)
            return self._maybe_start(intake)

    def get(self, intake_id: str) -> Optional[Intake]:
        return self._intakes.get(intake_id)

    def _maybe_start(self, intake: Intake) -> OnboardingOutcome:
        missing = intake.user_info.missing_fields()
        if missing:
            log_event("intake_pending", intake.intake_id, fields=missing)
            return OnboardingOutcome(intake_id=intake.intake_id, missing_fields=missing)
        started = self._engine.start_session(intake.candidate_id, intake.user_info)
        intake.session_id = started.session_id
        self._intakes.put(intake)
        return OnboardingOutcome(intake_id=intake.intake_id, started=started)


__all__ = ["Intake", "OnboardingOutcome", "OnboardingService"]
