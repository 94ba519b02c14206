import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend import config
from backend.logging_setup import setup_logging
from backend.routes import router
from pomagotchi.session import GameSession
from pomagotchi.storage import SaveStore, StorageError

logger = logging.getLogger(__name__)


async def _load_saved_game(session: GameSession) -> None:
    """Startup load. Failures are logged and the defaults stay in place."""
    try:
        await session.load_from_disk()
    except StorageError:
        logger.exception("Failed to load saved state from %s", session.store.path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Not awaited: requests are served while the save loads, and may briefly
    # see the default state.
    app.state.startup_load = asyncio.create_task(_load_saved_game(app.state.session))
    yield
    task: asyncio.Task = app.state.startup_load
    if not task.done():
        task.cancel()


def create_app(data_dir: Path | None = None, session: GameSession | None = None) -> FastAPI:
    setup_logging()
    if session is None:
        session = GameSession(SaveStore(data_dir or config.data_dir()))

    app = FastAPI(title="Pomagotchi", lifespan=lifespan)
    app.state.session = session
    app.include_router(router, prefix="/api")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
