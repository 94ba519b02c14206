"""Core state models.

The creature, timer and progress models are composed into GameState, which
is the unit of persistence. Pydantic is used for validation and
serialisation at every data boundary (save file and HTTP bodies).
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from pomagotchi.dates import format_date, is_consecutive_day, same_iso_week

Stage = Literal["egg", "baby", "teen", "adult"]

SAVE_VERSION = "1.0.0"

_STAGES_BY_LEVEL: dict[int, Stage] = {1: "egg", 2: "baby", 3: "teen"}


def stage_for_level(level: int) -> Stage:
    """Map a level to its evolution stage. Level 4 and above is "adult"."""
    return _STAGES_BY_LEVEL.get(level, "adult")


def next_threshold(xp_needed: int) -> int:
    """floor(xp_needed * 1.5), in integer arithmetic."""
    return xp_needed * 3 // 2


class CreatureState(BaseModel):
    """The evolving creature the user nurtures."""

    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)
    xp_needed: int = Field(default=100, gt=0)
    stage: Stage = "egg"

    def gain_experience(self, points: int) -> None:
        """Add experience, then level up and evolve as many times as it allows."""
        if points < 0:
            raise ValueError(f"Experience points must be non-negative, got {points}")
        self.xp += points
        while self.xp >= self.xp_needed:
            self.level += 1
            self.xp -= self.xp_needed
            self.xp_needed = next_threshold(self.xp_needed)
        self.stage = stage_for_level(self.level)

    def is_consistent(self) -> bool:
        """False for states the leveling rule could never have produced."""
        return self.xp < self.xp_needed and self.stage == stage_for_level(self.level)


class TimerState(BaseModel):
    """Countdown display and configuration for the current Pomodoro."""

    minutes: int = Field(default=25, ge=0)
    seconds: int = Field(default=0, ge=0)
    is_running: bool = False
    is_paused: bool = False
    initial_total_seconds: int = Field(default=1500, ge=0)
    last_selected_minutes: int = Field(default=25, ge=0)
    last_selected_seconds: int = Field(default=0, ge=0)

    @property
    def remaining_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    @property
    def elapsed_seconds(self) -> int:
        return max(0, self.initial_total_seconds - self.remaining_seconds)

    def rewind(self) -> None:
        """Stop the countdown and restore the last duration picked by the user."""
        self.minutes = self.last_selected_minutes
        self.seconds = self.last_selected_seconds
        self.is_running = False
        self.is_paused = False
        self.initial_total_seconds = self.last_selected_minutes * 60 + self.last_selected_seconds


class GameProgress(BaseModel):
    """Lifetime study statistics and the day-streak counters."""

    total_pomodoros_completed: int = Field(default=0, ge=0)
    total_xp_earned: int = Field(default=0, ge=0)
    total_time_studied_seconds: int = Field(default=0, ge=0)
    sessions_this_week: int = Field(default=0, ge=0)
    current_streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)
    last_session_date: str | None = None  # YYYY-MM-DD

    def record_session(self, duration_seconds: int, xp_gained: int, today: date) -> None:
        """Count one finished session and advance the streak.

        Streak transitions, comparing today against last_session_date:

            no previous session   → current = best = 1
            same day              → unchanged
            exactly one day later → current + 1, best = max(best, current)
            anything else         → current = 1, best unchanged

        The weekly counter restarts at 1 whenever today is in a different ISO
        week than the previous session.
        """
        if duration_seconds < 0 or xp_gained < 0:
            raise ValueError("Session duration and xp must be non-negative")

        self.total_pomodoros_completed += 1
        self.total_xp_earned += xp_gained
        self.total_time_studied_seconds += duration_seconds

        today_str = format_date(today)
        last = self.last_session_date
        if last is None:
            self.current_streak = 1
            self.best_streak = 1
        elif last == today_str:
            pass
        elif is_consecutive_day(last, today_str):
            self.current_streak += 1
            self.best_streak = max(self.best_streak, self.current_streak)
        else:
            self.current_streak = 1

        if same_iso_week(last, today):
            self.sessions_this_week += 1
        else:
            self.sessions_this_week = 1

        self.last_session_date = today_str


class GameState(BaseModel):
    """Everything that is written to the save file."""

    creature: CreatureState = Field(default_factory=CreatureState)
    timer: TimerState = Field(default_factory=TimerState)
    progress: GameProgress = Field(default_factory=GameProgress)
    version: str = SAVE_VERSION
