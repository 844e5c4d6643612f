"""Read-side projection over completed candidate records."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from interview_session.errors import CandidateNotFoundError, ValidationFailure
from interview_session.models import Candidate, CandidateSummary
from interview_session.repositories import CandidateRepository

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _as_utc(value: Optional[datetime]) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


SORT_KEYS: Dict[str, Callable[[Candidate], Any]] = {
    "final_score": lambda record: record.final_score or 0.0,
    "completed_at": lambda record: _as_utc(record.completed_at),
    "answered": lambda record: len(record.answers),
}
ORDERS = ("asc", "desc")


def _matches(record: Candidate, needle: str) -> bool:
    return any(needle in (value or "").lower() for value in (record.name, record.email))


def summarize(record: Candidate) -> CandidateSummary:
    return CandidateSummary(
        session_id=record.session_id,
        name=record.name,
        email=record.email,
        phone=record.phone,
        final_score=record.final_score,
        summary=record.summary,
        answered=len(record.answers),
        completed_at=record.completed_at,
        terminated=record.terminated,
    )


def filter_and_sort(
    records: Iterable[Candidate],
    *,
    search: Optional[str] = None,
    sort_by: str = "final_score",
    order: str = "desc",
) -> List[Candidate]:
    """Case-insensitive name/email search followed by a stable sort."""

    if sort_by not in SORT_KEYS:
        raise ValidationFailure(f"Unsupported sort field '{sort_by}'; use one of {', '.join(SORT_KEYS)}")
    if order not in ORDERS:
        raise ValidationFailure(f"Unsupported sort order '{order}'; use 'asc' or 'desc'")

    selected = list(records)
    needle = (search or "").strip().lower()
    if needle:
        selected = [record for record in selected if _matches(record, needle)]
    # sorted() is stable for reverse=True as well: ties keep insertion order
    return sorted(selected, key=SORT_KEYS[sort_by], reverse=order == "desc")


def list_candidates(
    repository: CandidateRepository,
    *,
    search: Optional[str] = None,
    sort_by: str = "final_score",
    order: str = "desc",
) -> List[CandidateSummary]:
    records = filter_and_sort(repository.list(), search=search, sort_by=sort_by, order=order)
    return [summarize(record) for record in records]


def get_candidate(repository: CandidateRepository, session_id: str) -> Candidate:
    record = repository.get(session_id)
    if record is None:
        raise CandidateNotFoundError(session_id)
    return record


__all__ = ["ORDERS", "SORT_KEYS", "filter_and_sort", "get_candidate", "list_candidates", "summarize"]
