"""Study progress endpoints."""

from fastapi import APIRouter, Depends

from pomagotchi.models import GameProgress
from pomagotchi.session import GameSession

from .deps import get_session
from .models import CompletePomodoro

router = APIRouter()


@router.get("/progress", response_model=GameProgress)
async def get_game_progress(session: GameSession = Depends(get_session)):
    """Get lifetime totals and streaks."""
    return await session.get_game_progress()


@router.post("/progress/complete", response_model=GameProgress)
async def complete_pomodoro(body: CompletePomodoro, session: GameSession = Depends(get_session)):
    """Record a finished Pomodoro: totals, streak, creature xp."""
    return await session.complete_pomodoro(body.duration_seconds, body.xp_gained)
