"""Creature endpoints: read, trusted overwrite, and experience gain."""

from fastapi import APIRouter, Depends

from pomagotchi.models import CreatureState
from pomagotchi.session import GameSession

from .deps import get_session
from .models import AddExperience, SaveCreature

router = APIRouter()


@router.get("/creature", response_model=CreatureState)
async def get_creature_state(session: GameSession = Depends(get_session)):
    """Get the creature's level, xp, and stage."""
    return await session.get_creature_state()


@router.put("/creature")
async def save_creature_state(body: SaveCreature, session: GameSession = Depends(get_session)):
    """Overwrite the creature as-is (no leveling rule applied) and save."""
    await session.save_creature_state(body.level, body.xp, body.xp_needed, body.stage)
    return {"ok": True}


@router.post("/creature/experience", response_model=CreatureState)
async def add_experience(body: AddExperience, session: GameSession = Depends(get_session)):
    """Grant experience, level up as needed, and save."""
    return await session.add_experience(body.points)


@router.get("/creature/load", response_model=CreatureState)
async def load_creature_state(session: GameSession = Depends(get_session)):
    """Same as GET /creature; kept for front-ends that call load_creature_state."""
    return await session.load_creature_state()
