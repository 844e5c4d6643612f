"""LLM-backed final summary generator with a templated fallback."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from config import LlmRoute
from llm_gateway import LlmGatewayError, call

from .prompts import summary_task
from .types import Question, SummaryOut, TranscriptEntry

logger = logging.getLogger(__name__)


def _average(scores: Sequence[int]) -> float:
    return sum(scores) / len(scores) if scores else 0.0


def fallback_summary(scores: Sequence[int]) -> str:
    return f"Candidate completed interview with average score {_average(scores):.1f}/10."


def build_transcript(
    questions: Sequence[Question], answers: Sequence[str], scores: Sequence[int]
) -> List[TranscriptEntry]:
    """Pair each answered question with its answer and score."""

    return [
        TranscriptEntry(question=question.question, answer=answer, score=score)
        for question, answer, score in zip(questions, answers, scores)
    ]


def generate_summary(
    questions: Sequence[Question],
    answers: Sequence[str],
    scores: Sequence[int],
    *,
    route: Optional[LlmRoute],
) -> str:
    """Summarize the transcript, falling back to the average-score sentence on failure."""

    if route is None:
        return fallback_summary(scores)

    transcript = build_transcript(questions, answers, scores)
    try:
        result = call(summary_task(transcript), SummaryOut, cfg=route)
    except (LlmGatewayError, ValidationError) as exc:
        logger.warning("Summary generation failed, using templated summary: %s", exc)
        return fallback_summary(scores)

    summary = result.summary.strip()
    return summary or fallback_summary(scores)


__all__ = ["build_transcript", "fallback_summary", "generate_summary"]
