"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field

from pomagotchi.models import GameState, Stage


class SaveCreature(BaseModel):
    level: int = Field(ge=1)
    xp: int = Field(ge=0)
    xp_needed: int = Field(gt=0)
    stage: Stage


class AddExperience(BaseModel):
    points: int = Field(ge=0)


class CompletePomodoro(BaseModel):
    duration_seconds: int = Field(ge=0)
    xp_gained: int = Field(ge=0)


class FinishTimer(BaseModel):
    natural: bool = True


class UpdateTimer(BaseModel):
    """Full timer snapshot; every field must be sent."""

    minutes: int = Field(ge=0)
    seconds: int = Field(ge=0)
    is_running: bool
    is_paused: bool
    initial_total_seconds: int = Field(ge=0)
    last_selected_minutes: int = Field(ge=0)
    last_selected_seconds: int = Field(ge=0)


class SaveProgress(BaseModel):
    total_pomodoros_completed: int = Field(ge=0)
    total_xp_earned: int = Field(ge=0)
    total_time_studied_seconds: int = Field(ge=0)
    sessions_this_week: int = Field(ge=0)
    current_streak: int = Field(ge=0)
    best_streak: int = Field(ge=0)
    last_session_date: str | None


class SaveGameState(BaseModel):
    """Full game state for restore; no section or field may be left out."""

    creature: SaveCreature
    timer: UpdateTimer
    progress: SaveProgress
    version: str

    def to_state(self) -> GameState:
        return GameState.model_validate(self.model_dump())
