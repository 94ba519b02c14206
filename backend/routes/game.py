"""Health check and whole-game endpoints (full state, restore, reset)."""

from fastapi import APIRouter, Depends

from pomagotchi.models import GameState
from pomagotchi.session import GameSession

from .deps import get_session
from .models import SaveGameState

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/state", response_model=GameState)
async def get_full_game_state(session: GameSession = Depends(get_session)):
    """Get the whole game state."""
    return await session.get_full_game_state()


@router.put("/state")
async def save_full_game_state(body: SaveGameState, session: GameSession = Depends(get_session)):
    """Replace the whole game state (e.g. undo after a reset) and save."""
    await session.save_full_game_state(body.to_state())
    return {"ok": True}


@router.post("/reset")
async def reset_game_data(session: GameSession = Depends(get_session)):
    """Reset everything to defaults and save."""
    await session.reset_game_data()
    return {"ok": True}
