import os
import random
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storage.migrate import migrate
from config.settings import settings
from generators import Evaluation, Generators, Question
from interview_session import InterviewEngine, UserInfo
from storage.candidates import MemoryCandidateDirectory
from storage.sessions import MemorySessionStore


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch):
    td = tempfile.TemporaryDirectory()
    db_path = os.path.join(td.name, "test.db")
    monkeypatch.setattr(settings, "DB_PATH", db_path, raising=False)
    migrate(db_path)
    try:
        yield db_path
    finally:
        td.cleanup()


class StubGenerators:
    """Deterministic generators that record how often each capability was used."""

    def __init__(self, score: int = 4, summary: str = "Solid fundamentals.") -> None:
        self.score = score
        self.summary = summary
        self.fail_summary = False
        self.calls = {"question": 0, "evaluate": 0, "summarize": 0}

    def question(self, difficulty, question_number):
        self.calls["question"] += 1
        return Question(
            id=question_number,
            question=f"Q{question_number} ({difficulty})",
            answer=f"Reference answer {question_number}",
            level=difficulty,
            time=30,
        )

    def evaluate(self, question, answer):
        self.calls["evaluate"] += 1
        if not answer.strip():
            return Evaluation(score=0, feedback="No answer provided")
        return Evaluation(score=self.score, feedback=f"Scored {question.id}")

    def summarize(self, questions, answers, scores):
        self.calls["summarize"] += 1
        if self.fail_summary:
            raise RuntimeError("summary backend down")
        return self.summary

    def bundle(self) -> Generators:
        return Generators(question=self.question, evaluate=self.evaluate, summarize=self.summarize)


@pytest.fixture
def stub_generators():
    return StubGenerators()


@pytest.fixture
def rng():
    return random.Random(7)


@pytest.fixture
def stores():
    return MemorySessionStore(), MemoryCandidateDirectory()


@pytest.fixture
def engine(stores, stub_generators):
    sessions, candidates = stores
    return InterviewEngine(sessions, candidates, stub_generators.bundle())


@pytest.fixture
def complete_info():
    return UserInfo(name="Ada Lovelace", email="ada@example.com", phone="+1 555 010 2030")


@pytest.fixture
def runtime(engine, stores):
    from api.deps import Runtime, set_runtime
    from services.onboarding import OnboardingService
    from storage.intakes import MemoryIntakeStore

    sessions, candidates = stores
    intakes = MemoryIntakeStore()
    installed = Runtime(
        sessions=sessions,
        candidates=candidates,
        intakes=intakes,
        engine=engine,
        onboarding=OnboardingService(engine, intakes),
    )
    set_runtime(installed)
    try:
        yield installed
    finally:
        set_runtime(None)


@pytest.fixture
def client(runtime):
    from fastapi.testclient import TestClient

    from api_server import app

    return TestClient(app)
