"""FastAPI API endpoints under /api.

Each endpoint dispatches to one GameSession operation. Endpoint groups:
health, creature, progress, timer, whole-game state (get, replace, reset).
"""

from fastapi import APIRouter

from .creature import router as creature_router
from .game import router as game_router
from .progress import router as progress_router
from .timer import router as timer_router

router = APIRouter()
router.include_router(game_router)
router.include_router(creature_router)
router.include_router(progress_router)
router.include_router(timer_router)
