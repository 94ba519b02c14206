"""Tests for session experience rewards."""

from pomagotchi.rewards import FULL_SESSION_XP, session_duration, session_xp


def test_natural_completion_full_reward():
    assert session_xp(1500, 0) == FULL_SESSION_XP == 25


def test_natural_ignores_remaining_time():
    assert session_xp(1500, 900, natural=True) == 25


def test_early_completion_rounds_up():
    # 750 of 1500 seconds → 12.5 → 13
    assert session_xp(1500, 750, natural=False) == 13


def test_early_completion_minimum_one():
    assert session_xp(1500, 1500, natural=False) == 1
    assert session_xp(1500, 1499, natural=False) == 1


def test_early_completion_almost_done():
    assert session_xp(1500, 1, natural=False) == 25


def test_zero_length_timer():
    assert session_xp(0, 0, natural=False) == 1


def test_remaining_above_initial():
    assert session_xp(60, 300, natural=False) == 1


def test_session_duration():
    assert session_duration(1500, 600) == 900
    assert session_duration(60, 300) == 0
