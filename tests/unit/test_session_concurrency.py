from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from generators import Generators
from interview_session import InterviewEngine, SessionConflictError, SessionNotFoundError, UserInfo
from services.sessions import active_lock_count


def _outcome(fn, *args):
    try:
        return fn(*args)
    except SessionConflictError as exc:
        return exc


@pytest.fixture
def slow_engine(stores, stub_generators):
    # Slow evaluator so overlapping requests would interleave without the session lock
    def evaluate(question, answer):
        time.sleep(0.02)
        return stub_generators.evaluate(question, answer)

    sessions, candidates = stores
    bundle = Generators(question=stub_generators.question, evaluate=evaluate, summarize=stub_generators.summarize)
    return InterviewEngine(sessions, candidates, bundle)


def test_concurrent_submissions_complete_exactly_once(slow_engine, stores, complete_info):
    _, candidates = stores
    session_id = slow_engine.start_session("cand-1", complete_info).session_id

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(lambda i: _outcome(slow_engine.submit_answer, session_id, f"answer {i}"), range(10)))

    accepted = [r for r in results if not isinstance(r, Exception)]
    rejected = [r for r in results if isinstance(r, SessionConflictError)]
    assert len(accepted) == 6
    assert len(rejected) == 4
    assert sum(1 for r in accepted if r.completed) == 1

    session = slow_engine.get_session(session_id)
    assert session.status == "completed"
    assert len(session.answers) == len(session.evaluations) == len(session.scores) == 6
    assert len(session.questions) == 6
    assert len(candidates.list()) == 1


def test_same_step_submitted_twice_advances_once(slow_engine, complete_info):
    session_id = slow_engine.start_session("cand-1", complete_info).session_id

    with ThreadPoolExecutor(max_workers=5) as pool:
        results = list(
            pool.map(
                lambda _: _outcome(lambda: slow_engine.submit_answer(session_id, "same", question_number=1)),
                range(5),
            )
        )

    assert sum(1 for r in results if not isinstance(r, Exception)) == 1
    session = slow_engine.get_session(session_id)
    assert session.current_question_number == 2
    assert session.answers == ["same"]


def test_terminate_racing_final_submission(slow_engine, stores, complete_info):
    _, candidates = stores
    session_id = slow_engine.start_session("cand-1", complete_info).session_id
    for _ in range(5):
        slow_engine.submit_answer(session_id, "answer")

    barrier = threading.Barrier(2)

    def submit():
        barrier.wait()
        return _outcome(slow_engine.submit_answer, session_id, "last answer")

    def terminate():
        barrier.wait()
        return _outcome(slow_engine.terminate_interview, session_id)

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = [f.result() for f in (pool.submit(submit), pool.submit(terminate))]

    assert sum(1 for r in results if isinstance(r, SessionConflictError)) == 1
    session = slow_engine.get_session(session_id)
    assert session.status == "completed"
    assert len(session.answers) == len(session.evaluations)
    assert len(session.answers) in (5, 6)
    assert session.terminated is (len(session.answers) == 5)
    assert len(candidates.list()) == 1


def test_unknown_session_ids_leave_no_locks_behind(engine):
    before = active_lock_count()

    for index in range(200):
        with pytest.raises(SessionNotFoundError):
            engine.submit_answer(f"bogus-{index}", "x")
        with pytest.raises(SessionNotFoundError):
            engine.terminate_interview(f"bogus-{index}")
        with pytest.raises(SessionNotFoundError):
            engine.update_user_info(f"bogus-{index}", UserInfo(name="Nobody Here"))

    assert active_lock_count() == before


def test_finished_sessions_release_their_locks(engine, complete_info):
    before = active_lock_count()
    for _ in range(20):
        session_id = engine.start_session("cand-1", complete_info).session_id
        engine.submit_answer(session_id, "answer")
        engine.terminate_interview(session_id)
    assert active_lock_count() == before
