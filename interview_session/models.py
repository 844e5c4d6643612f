"""Session, candidate, and result models for the interview engine."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from generators.types import Difficulty, Evaluation, Question

from .tiering import difficulty_for

SessionStatus = Literal["active", "completed"]
REQUIRED_FIELDS = ("name", "email", "phone")


class UserInfo(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    def merged(self, update: "UserInfo") -> "UserInfo":
        """Return a copy with every non-empty field of ``update`` applied."""

        changes = {key: value for key, value in update.model_dump().items() if value and value.strip()}
        return self.model_copy(update=changes)

    def missing_fields(self) -> List[str]:
        return [key for key in REQUIRED_FIELDS if not (getattr(self, key) or "").strip()]


class Session(BaseModel):
    """One candidate's interview attempt, persisted through the session store."""

    session_id: str
    candidate_id: str
    user_info: UserInfo = Field(default_factory=UserInfo)

    questions: List[Question] = Field(default_factory=list)
    answers: List[str] = Field(default_factory=list)
    scores: List[int] = Field(default_factory=list)
    evaluations: List[Evaluation] = Field(default_factory=list)

    current_question_number: int = Field(default=1, ge=1)
    status: SessionStatus = "active"
    terminated: bool = False
    final_score: Optional[float] = None
    summary: Optional[str] = None

    start_time: datetime
    end_time: Optional[datetime] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_difficulty(self) -> Difficulty:
        return difficulty_for(self.current_question_number)

    @property
    def pending_question(self) -> Optional[Question]:
        index = self.current_question_number - 1
        return self.questions[index] if index < len(self.questions) else None


class Intake(BaseModel):  # Candidate profile waiting for required fields
    intake_id: str
    candidate_id: str
    user_info: UserInfo = Field(default_factory=UserInfo)
    session_id: Optional[str] = None  # Set once the interview has started


class Candidate(BaseModel):
    """Immutable recruiter-facing snapshot of a completed session."""

    session_id: str
    candidate_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    final_score: float
    summary: str
    questions: List[Question] = Field(default_factory=list)
    answers: List[str] = Field(default_factory=list)
    scores: List[int] = Field(default_factory=list)
    evaluations: List[Evaluation] = Field(default_factory=list)
    completed_at: datetime
    terminated: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_session(cls, session: Session) -> "Candidate":
        return cls(
            session_id=session.session_id,
            candidate_id=session.candidate_id,
            name=session.user_info.name,
            email=session.user_info.email,
            phone=session.user_info.phone,
            final_score=session.final_score or 0.0,
            summary=session.summary or "",
            questions=list(session.questions),
            answers=list(session.answers),
            scores=list(session.scores),
            evaluations=list(session.evaluations),
            completed_at=session.end_time or session.start_time,
            terminated=session.terminated,
        )


class CandidateSummary(BaseModel):  # Ranked list row for the recruiter dashboard
    session_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    final_score: float
    summary: str
    answered: int
    completed_at: datetime
    terminated: bool


class StartResult(BaseModel):
    session_id: str
    question: str
    question_number: int
    difficulty: Difficulty
    time_limit: int


class SubmitResult(BaseModel):
    completed: bool
    evaluation: Evaluation
    question: Optional[str] = None
    question_number: Optional[int] = None
    difficulty: Optional[Difficulty] = None
    time_limit: Optional[int] = None
    final_score: Optional[float] = None
    summary: Optional[str] = None


class TerminateResult(BaseModel):
    terminated: Literal[True] = True
    final_score: float
    summary: str


__all__ = [
    "Candidate",
    "CandidateSummary",
    "Intake",
    "REQUIRED_FIELDS",
    "Session",
    "SessionStatus",
    "StartResult",
    "SubmitResult",
    "TerminateResult",
    "UserInfo",
]
