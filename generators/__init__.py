"""Generator adapters wrapping the external text-generation backend."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, ValidationError

from config import EVALUATION_KEY, QUESTION_KEY, SUMMARY_KEY, LlmRoute, load_app_registry

from .answer_evaluator import evaluate_answer
from .fallback_bank import load_bank
from .question_generator import generate_question
from .summary_generator import generate_summary
from .types import Difficulty, Evaluation, EvaluationOut, Question, SummaryOut

logger = logging.getLogger(__name__)

QuestionFn = Callable[[Difficulty, int], Question]
EvaluateFn = Callable[[Question, str], Evaluation]
SummarizeFn = Callable[[Sequence[Question], Sequence[str], Sequence[int]], str]

_SCHEMAS: Dict[str, type[BaseModel]] = {
    QUESTION_KEY: Question,
    EVALUATION_KEY: EvaluationOut,
    SUMMARY_KEY: SummaryOut,
}


@dataclass
class Generators:
    """The three generator capabilities the interview engine depends on."""

    question: QuestionFn
    evaluate: EvaluateFn
    summarize: SummarizeFn


def _resolve_routes(config_path: Path) -> Dict[str, Optional[LlmRoute]]:
    try:
        registry = load_app_registry(config_path, _SCHEMAS)
    except FileNotFoundError:
        logger.warning("LLM config %s not found; generators run on fallbacks only", config_path)
        return {key: None for key in _SCHEMAS}
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        logger.warning("LLM config %s unusable (%s); generators run on fallbacks only", config_path, exc)
        return {key: None for key in _SCHEMAS}
    return {key: route for key, (route, _) in registry.items()}


def build_generators(
    config_path: Optional[Path],
    *,
    bank: Optional[List[Question]] = None,
    rng: Optional[random.Random] = None,
) -> Generators:
    """Bind the adapters to their configured routes, bank, and random source."""

    routes = _resolve_routes(config_path) if config_path else {key: None for key in _SCHEMAS}
    questions = bank if bank is not None else load_bank()
    source = rng or random.Random()
    return Generators(
        question=partial(generate_question, route=routes[QUESTION_KEY], bank=questions, rng=source),
        evaluate=partial(evaluate_answer, route=routes[EVALUATION_KEY], rng=source),
        summarize=partial(generate_summary, route=routes[SUMMARY_KEY]),
    )


__all__ = [
    "Difficulty",
    "Evaluation",
    "Generators",
    "Question",
    "build_generators",
    "evaluate_answer",
    "generate_question",
    "generate_summary",
]
