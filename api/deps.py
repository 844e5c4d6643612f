"""Process-wide wiring of stores, generators, and the interview engine."""
from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config.settings import settings
from generators import build_generators
from generators.fallback_bank import load_bank
from interview_session import CandidateRepository, IntakeRepository, InterviewEngine, SessionRepository
from services.onboarding import OnboardingService
from storage.candidates import MemoryCandidateDirectory, SqliteCandidateDirectory
from storage.intakes import MemoryIntakeStore, SqliteIntakeStore
from storage.sessions import MemorySessionStore, SqliteSessionStore

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    sessions: SessionRepository
    candidates: CandidateRepository
    intakes: IntakeRepository
    engine: InterviewEngine
    onboarding: OnboardingService


_RUNTIME: Optional[Runtime] = None
_RUNTIME_GUARD = threading.Lock()


def build_runtime() -> Runtime:
    """Assemble the runtime from the current settings."""

    if settings.STORE_BACKEND == "memory":
        sessions: SessionRepository = MemorySessionStore()
        candidates: CandidateRepository = MemoryCandidateDirectory()
        intakes: IntakeRepository = MemoryIntakeStore()
    else:
        sessions = SqliteSessionStore(settings.DB_PATH)
        candidates = SqliteCandidateDirectory(settings.DB_PATH)
        intakes = SqliteIntakeStore(settings.DB_PATH)

    bank = load_bank(Path(settings.FALLBACK_BANK_PATH)) if settings.FALLBACK_BANK_PATH else None
    generators = build_generators(
        Path(settings.LLM_CONFIG_PATH),
        bank=bank,
        rng=random.Random(settings.RANDOM_SEED),
    )
    engine = InterviewEngine(sessions, candidates, generators, question_count=settings.QUESTION_COUNT)
    logger.info("Runtime ready (store=%s, questions=%d)", settings.STORE_BACKEND, settings.QUESTION_COUNT)
    return Runtime(
        sessions=sessions,
        candidates=candidates,
        intakes=intakes,
        engine=engine,
        onboarding=OnboardingService(engine, intakes),
    )


def get_runtime() -> Runtime:
    global _RUNTIME
    with _RUNTIME_GUARD:
        if _RUNTIME is None:
            _RUNTIME = build_runtime()
        return _RUNTIME


def set_runtime(runtime: Optional[Runtime]) -> None:
    """Install a prebuilt runtime, or clear it so the next request rebuilds from settings."""

    global _RUNTIME
    with _RUNTIME_GUARD:
        _RUNTIME = runtime


def get_engine() -> InterviewEngine:
    return get_runtime().engine


def get_onboarding() -> OnboardingService:
    return get_runtime().onboarding


def get_candidates() -> CandidateRepository:
    return get_runtime().candidates


__all__ = [
    "Runtime",
    "build_runtime",
    "get_candidates",
    "get_engine",
    "get_onboarding",
    "get_runtime",
    "set_runtime",
]
