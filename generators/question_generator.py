"""LLM-backed interview question generator with a static fallback bank."""
from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from pydantic import ValidationError

from config import LlmRoute
from llm_gateway import LlmGatewayError, call

from .fallback_bank import pick_fallback
from .prompts import question_task
from .types import Difficulty, Question

logger = logging.getLogger(__name__)


def generate_question(
    difficulty: Difficulty,
    question_number: int,
    *,
    route: Optional[LlmRoute],
    bank: Sequence[Question],
    rng: random.Random,
) -> Question:
    """Generate one question at ``difficulty``; fall back to the bank on any upstream failure."""

    if route is None:
        return pick_fallback(bank, difficulty, question_number, rng)

    try:
        return call(question_task(difficulty, question_number), Question, cfg=route)
    except (LlmGatewayError, ValidationError) as exc:
        logger.warning(
            "Question generation failed (difficulty=%s number=%d), using fallback bank: %s",
            difficulty,
            question_number,
            exc,
        )
        return pick_fallback(bank, difficulty, question_number, rng)


__all__ = ["generate_question"]
