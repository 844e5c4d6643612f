"""Difficulty and answer-timer tiers keyed by question position."""
from __future__ import annotations

from typing import Dict

from generators.types import Difficulty

TIMER_SECONDS: Dict[str, int] = {"easy": 20, "medium": 60, "hard": 120}


def difficulty_for(question_number: int) -> Difficulty:
    """Questions 1-2 are easy, 3-4 medium, 5 onwards hard."""

    if question_number < 1:
        raise ValueError(f"question_number must be >= 1, got {question_number}")
    if question_number > 4:
        return "hard"
    if question_number > 2:
        return "medium"
    return "easy"


def time_limit_for(question_number: int) -> int:
    """Answer time budget in seconds; governs the client countdown over ``Question.time``."""

    return TIMER_SECONDS[difficulty_for(question_number)]


__all__ = ["TIMER_SECONDS", "difficulty_for", "time_limit_for"]
