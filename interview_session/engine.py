"""Interview session state machine.

One session walks through a fixed number of questions (six by default). Each
accepted answer is evaluated, and the session either advances to the next
question at the tier's difficulty or completes with a final score and summary.
A caller may terminate an active session at any point. Completion and
termination both materialize exactly one candidate record.

Every mutation of a session runs under that session's lock, and all generator
calls for a step happen before the session is changed and saved.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from generators import Generators
from observability import log_event
from services.sessions import new_session_id, session_lock

from .errors import SessionConflictError, SessionNotFoundError
from .models import Candidate, Session, StartResult, SubmitResult, TerminateResult, UserInfo
from .repositories import CandidateRepository, SessionRepository
from .tiering import difficulty_for, time_limit_for

logger = logging.getLogger(__name__)

QUESTION_COUNT = 6
TERMINATED_SUMMARY = "Interview terminated early."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def mean_score(scores: Sequence[int]) -> float:
    """Arithmetic mean of ``scores``; 0 when nothing was scored."""

    return sum(scores) / len(scores) if scores else 0.0


class InterviewEngine:
    def __init__(
        self,
        sessions: SessionRepository,
        candidates: CandidateRepository,
        generators: Generators,
        *,
        question_count: int = QUESTION_COUNT,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if question_count < 1:
            raise ValueError("question_count must be at least 1")
        self._sessions = sessions
        self._candidates = candidates
        self._generators = generators
        self._question_count = question_count
        self._clock = clock or _utcnow

    @property
    def question_count(self) -> int:
        return self._question_count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_session(self, candidate_id: str, user_info: Optional[UserInfo] = None) -> StartResult:
        """Create an active session and return its first (easy) question."""

        session_id = new_session_id()
        difficulty = difficulty_for(1)
        first = self._generators.question(difficulty, 1)
        session = Session(
            session_id=session_id,
            candidate_id=candidate_id,
            user_info=user_info or UserInfo(),
            questions=[first],
            start_time=self._clock(),
        )
        with session_lock(session_id):
            self._sessions.put(session)

        log_event("session_started", session_id, question_number=1, difficulty=difficulty)
        return StartResult(
            session_id=session_id,
            question=first.question,
            question_number=1,
            difficulty=difficulty,
            time_limit=time_limit_for(1),
        )

    def submit_answer(
        self,
        session_id: str,
        answer: str,
        *,
        question_number: Optional[int] = None,
    ) -> SubmitResult:
        """Record an answer to the pending question and advance or complete the session.

        ``question_number``, when given, must match the pending question; a
        mismatch means the caller is retrying a step that already went through.
        """

        with self._lock_existing(session_id):
            session = self._require_active(session_id)
            current = session.current_question_number
            if question_number is not None and question_number != current:
                raise SessionConflictError(
                    f"Session {session_id} expects an answer to question {current}, not {question_number}"
                )

            evaluation = self._generators.evaluate(session.pending_question, answer)

            if current >= self._question_count:
                answers = [*session.answers, answer]
                scores = [*session.scores, evaluation.score]
                summary = self._generators.summarize(session.questions, answers, scores)
                session.answers.append(answer)
                session.scores.append(evaluation.score)
                session.evaluations.append(evaluation)
                self._complete(session, summary, terminated=False)
                return SubmitResult(
                    completed=True,
                    evaluation=evaluation,
                    final_score=session.final_score,
                    summary=session.summary,
                )

            next_number = current + 1
            difficulty = difficulty_for(next_number)
            next_question = self._generators.question(difficulty, next_number)

            session.answers.append(answer)
            session.scores.append(evaluation.score)
            session.evaluations.append(evaluation)
            session.current_question_number = next_number
            session.questions.append(next_question)
            self._sessions.put(session)

        log_event(
            "answer_recorded",
            session_id,
            question_number=current,
            score=evaluation.score,
            completed=False,
        )
        return SubmitResult(
            completed=False,
            evaluation=evaluation,
            question=next_question.question,
            question_number=next_number,
            difficulty=difficulty,
            time_limit=time_limit_for(next_number),
        )

    def terminate_interview(self, session_id: str) -> TerminateResult:
        """End an active session early; never blocked by summary generation failures."""

        with self._lock_existing(session_id):
            session = self._require_active(session_id)
            summary = TERMINATED_SUMMARY
            if session.answers:
                answered = session.questions[: len(session.answers)]
                try:
                    generated = self._generators.summarize(answered, session.answers, session.scores)
                except Exception:  # noqa: BLE001
                    logger.exception("Summary generation failed for terminated session %s", session_id)
                else:
                    if generated and generated.strip():
                        summary = generated
            self._complete(session, summary, terminated=True)

        return TerminateResult(final_score=session.final_score or 0.0, summary=summary)

    def update_user_info(self, session_id: str, user_info: UserInfo) -> Session:
        """Merge profile fields into a session that has not received an answer yet."""

        with self._lock_existing(session_id):
            session = self._require_active(session_id)
            if session.answers:
                raise SessionConflictError(
                    f"Session {session_id} is in progress; user info can no longer change"
                )
            session.user_info = session.user_info.merged(user_info)
            self._sessions.put(session)

        log_event("user_info_updated", session_id, fields=sorted(user_info.model_dump(exclude_none=True)))
        return session

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _lock_existing(self, session_id: str):
        # Unknown ids fail here so no lock is ever made for them
        self.get_session(session_id)
        return session_lock(session_id)

    def _require_active(self, session_id: str) -> Session:
        session = self.get_session(session_id)
        if session.status != "active":
            raise SessionConflictError(f"Session {session_id} is already completed")
        return session

    def _complete(self, session: Session, summary: str, *, terminated: bool) -> None:
        session.status = "completed"
        session.terminated = terminated
        session.end_time = self._clock()
        session.final_score = mean_score(session.scores)
        session.summary = summary
        self._sessions.put(session)
        self._candidates.add(Candidate.from_session(session))

        log_event(
            "session_terminated" if terminated else "session_completed",
            session.session_id,
            completed=True,
            terminated=terminated,
            final_score=round(session.final_score, 2),
        )


__all__ = ["InterviewEngine", "QUESTION_COUNT", "TERMINATED_SUMMARY", "mean_score"]
