from __future__ import annotations

import pytest

from interview_session import SessionConflictError, SessionNotFoundError, UserInfo
from services.onboarding import OnboardingService
from storage.intakes import MemoryIntakeStore, SqliteIntakeStore


def test_complete_profile_starts_immediately(engine, complete_info):
    service = OnboardingService(engine)
    outcome = service.register("cand-1", complete_info)
    assert outcome.missing_fields == []
    assert outcome.started is not None
    assert outcome.started.question_number == 1
    assert service.get(outcome.intake_id).session_id == outcome.started.session_id


def test_intake_waits_for_missing_fields(engine, stub_generators):
    service = OnboardingService(engine)
    outcome = service.register("cand-1", UserInfo(name="Ada Lovelace"))
    assert outcome.started is None
    assert outcome.missing_fields == ["email", "phone"]
    assert stub_generators.calls["question"] == 0

    partial = service.update_user_info(outcome.intake_id, UserInfo(email="ada@example.com"))
    assert partial.missing_fields == ["phone"]
    assert partial.started is None

    done = service.update_user_info(outcome.intake_id, UserInfo(phone="555 0100"))
    assert done.started is not None
    session = engine.get_session(done.started.session_id)
    assert session.user_info == UserInfo(name="Ada Lovelace", email="ada@example.com", phone="555 0100")


def test_intake_starts_at_most_once(engine, complete_info, stub_generators):
    service = OnboardingService(engine)
    outcome = service.register("cand-1", complete_info)
    with pytest.raises(SessionConflictError):
        service.update_user_info(outcome.intake_id, UserInfo(phone="999"))
    assert stub_generators.calls["question"] == 1


def test_update_targets_active_session_when_not_an_intake(engine):
    service = OnboardingService(engine)
    started = engine.start_session("cand-1", UserInfo(name="Ada Lovelace"))
    outcome = service.update_user_info(started.session_id, UserInfo(email="ada@example.com"))
    assert outcome.missing_fields == ["phone"]
    assert engine.get_session(started.session_id).user_info.email == "ada@example.com"


def test_pending_intake_survives_restart_with_sqlite(engine, tmp_db):
    first = OnboardingService(engine, SqliteIntakeStore(tmp_db))
    outcome = first.register("cand-1", UserInfo(name="Grace Hopper"))
    assert outcome.started is None

    restarted = OnboardingService(engine, SqliteIntakeStore(tmp_db))
    done = restarted.update_user_info(outcome.intake_id, UserInfo(email="grace@navy.mil", phone="555 123 4567"))
    assert done.started is not None
    assert restarted.get(outcome.intake_id).session_id == done.started.session_id

    again = OnboardingService(engine, SqliteIntakeStore(tmp_db))
    with pytest.raises(SessionConflictError):
        again.update_user_info(outcome.intake_id, UserInfo(phone="999"))


def test_unknown_target_is_not_found(engine):
    service = OnboardingService(engine, MemoryIntakeStore())
    with pytest.raises(SessionNotFoundError):
        service.update_user_info("missing", UserInfo(name="Nobody Here"))
