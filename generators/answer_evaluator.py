"""LLM-backed answer evaluator with policy overrides and a length heuristic fallback."""
from __future__ import annotations

import logging
import random
from typing import Optional

from pydantic import ValidationError

from config import LlmRoute
from llm_gateway import LlmGatewayError, call

from .prompts import evaluation_task
from .types import Evaluation, EvaluationOut, Question

logger = logging.getLogger(__name__)

NO_ANSWER_FEEDBACK = "No answer provided"
FALLBACK_FEEDBACK = "Answer evaluated. Provide more technical details."
LONG_ANSWER_CHARS = 50


def _clamp(score: float) -> int:
    return int(max(0, min(10, round(score))))


def _diagnostic(question: Optional[Question]) -> Optional[Evaluation]:
    if question is None:
        return Evaluation(score=0, feedback="Error: Question object is missing. Cannot evaluate answer.")
    if not question.question:
        return Evaluation(score=0, feedback="Error: Question text is missing. Cannot evaluate answer.")
    if not question.answer:
        return Evaluation(score=0, feedback="Error: Ideal answer is missing. Cannot evaluate answer.")
    return None


def heuristic_evaluation(candidate_answer: str, rng: random.Random) -> Evaluation:
    """Length-based score used when the evaluator backend is unavailable."""

    base = 6 if len(candidate_answer) > LONG_ANSWER_CHARS else 3
    return Evaluation(score=min(10, base + rng.randint(0, 2)), feedback=FALLBACK_FEEDBACK)


def evaluate_answer(
    question: Optional[Question],
    candidate_answer: str,
    *,
    route: Optional[LlmRoute],
    rng: random.Random,
) -> Evaluation:
    """Score ``candidate_answer`` 0-10 against the reference answer of ``question``."""

    diagnostic = _diagnostic(question)
    if diagnostic is not None:
        logger.error("Cannot evaluate answer: %s", diagnostic.feedback)
        return diagnostic

    if not candidate_answer or not candidate_answer.strip():
        return Evaluation(score=0, feedback=NO_ANSWER_FEEDBACK)

    if route is None:
        return heuristic_evaluation(candidate_answer, rng)

    task = evaluation_task(question.question, candidate_answer, question.answer, question.level)
    try:
        raw = call(task, EvaluationOut, cfg=route)
    except (LlmGatewayError, ValidationError) as exc:
        logger.warning("Answer evaluation failed, using heuristic score: %s", exc)
        return heuristic_evaluation(candidate_answer, rng)

    return Evaluation(score=_clamp(raw.score), feedback=raw.feedback.strip()[:400])


__all__ = ["evaluate_answer", "heuristic_evaluation", "NO_ANSWER_FEEDBACK", "FALLBACK_FEEDBACK"]
