"""Static question bank used when live question generation is unavailable."""
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import TypeAdapter

from .types import Difficulty, Question

DEFAULT_BANK_PATH = Path(__file__).resolve().parent / "data" / "fallback_questions.json"

_QUESTIONS = TypeAdapter(List[Question])


def load_bank(path: Optional[Path] = None) -> List[Question]:
    """Load and validate the fallback bank from ``path`` (bundled bank by default)."""

    source = path or DEFAULT_BANK_PATH
    data = json.loads(source.read_text(encoding="utf-8"))
    return _QUESTIONS.validate_python(data)


def placeholder(difficulty: Difficulty, question_number: int) -> Question:
    return Question(
        id=question_number,
        question="No question available",
        answer="N/A",
        level=difficulty,
        time=60,
    )


def pick_fallback(
    bank: Sequence[Question],
    difficulty: Difficulty,
    question_number: int,
    rng: random.Random,
) -> Question:
    """Pick a random bank entry at ``difficulty`` or synthesize a placeholder."""

    candidates = [entry for entry in bank if entry.level == difficulty]
    if not candidates:
        return placeholder(difficulty, question_number)
    return rng.choice(candidates).model_copy(deep=True)


__all__ = ["DEFAULT_BANK_PATH", "load_bank", "pick_fallback", "placeholder"]
