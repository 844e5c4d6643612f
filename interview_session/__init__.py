from __future__ import annotations  # Re-export interview_session public API

from .engine import QUESTION_COUNT, TERMINATED_SUMMARY, InterviewEngine, mean_score
from .errors import (
    CandidateExistsError,
    CandidateNotFoundError,
    IdentityVerificationError,
    InterviewError,
    SessionConflictError,
    SessionNotFoundError,
    ValidationFailure,
)
from .models import (
    Candidate,
    CandidateSummary,
    Intake,
    Session,
    StartResult,
    SubmitResult,
    TerminateResult,
    UserInfo,
)
from .repositories import CandidateRepository, IntakeRepository, SessionRepository
from .tiering import TIMER_SECONDS, difficulty_for, time_limit_for

__all__ = [
    "Candidate",
    "CandidateExistsError",
    "CandidateNotFoundError",
    "CandidateRepository",
    "CandidateSummary",
    "IdentityVerificationError",
    "InterviewEngine",
    "InterviewError",
    "Intake",
    "IntakeRepository",
    "QUESTION_COUNT",
    "Session",
    "SessionConflictError",
    "SessionNotFoundError",
    "SessionRepository",
    "StartResult",
    "SubmitResult",
    "TERMINATED_SUMMARY",
    "TIMER_SECONDS",
    "TerminateResult",
    "UserInfo",
    "ValidationFailure",
    "difficulty_for",
    "mean_score",
    "time_limit_for",
]
