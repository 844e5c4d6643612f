import pytest

from interview_session import TIMER_SECONDS, difficulty_for, time_limit_for


@pytest.mark.parametrize(
    "number, difficulty",
    [(1, "easy"), (2, "easy"), (3, "medium"), (4, "medium"), (5, "hard"), (6, "hard"), (9, "hard")],
)
def test_difficulty_tiers(number, difficulty):
    assert difficulty_for(number) == difficulty


def test_time_limits_follow_tier():
    assert [time_limit_for(n) for n in range(1, 7)] == [20, 20, 60, 60, 120, 120]
    assert TIMER_SECONDS == {"easy": 20, "medium": 60, "hard": 120}


def test_question_numbers_start_at_one():
    with pytest.raises(ValueError):
        difficulty_for(0)
