"""Error taxonomy for interview operations."""
from __future__ import annotations


class InterviewError(RuntimeError):  # Base error for interview operations
    pass


class SessionNotFoundError(InterviewError):  # Unknown session id
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class CandidateNotFoundError(InterviewError):  # Unknown candidate record
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Candidate not found: {session_id}")
        self.session_id = session_id


class SessionConflictError(InterviewError):  # Operation not allowed in the session's current state
    pass


class CandidateExistsError(SessionConflictError):  # Second candidate record for one session
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Candidate record already exists for session {session_id}")
        self.session_id = session_id


class ValidationFailure(ValueError):  # Malformed or incomplete input
    pass


class IdentityVerificationError(RuntimeError):  # Identity token rejected
    pass


__all__ = [
    "CandidateExistsError",
    "CandidateNotFoundError",
    "IdentityVerificationError",
    "InterviewError",
    "SessionConflictError",
    "SessionNotFoundError",
    "ValidationFailure",
]
