"""Timer endpoints."""

from fastapi import APIRouter, Depends

from pomagotchi.models import GameProgress, TimerState
from pomagotchi.session import GameSession

from .deps import get_session
from .models import FinishTimer, UpdateTimer

router = APIRouter()


@router.get("/timer", response_model=TimerState)
async def get_timer_state(session: GameSession = Depends(get_session)):
    """Get the countdown state."""
    return await session.get_timer_state()


@router.put("/timer")
async def update_timer_state(body: UpdateTimer, session: GameSession = Depends(get_session)):
    """Overwrite the timer. Saved to disk only while the countdown is stopped."""
    await session.update_timer_state(**body.model_dump())
    return {"ok": True}


@router.post("/timer/finish", response_model=GameProgress)
async def finish_timer(body: FinishTimer, session: GameSession = Depends(get_session)):
    """Complete the session on the current timer and rewind it."""
    return await session.finish_timer(natural=body.natural)
