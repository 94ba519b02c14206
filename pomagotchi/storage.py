"""JSON file storage for the game state.

The whole GameState is kept in one pretty-printed JSON document:

    {data_dir}/
      pomagotchi_save.json    ← creature, timer, progress, version

Every save rewrites the file in full. A missing file means "no save yet"
and is not an error; a file that cannot be read or parsed is.

File access runs in a worker thread so callers on the event loop only
suspend while the disk is busy.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from pomagotchi.models import GameState

logger = logging.getLogger(__name__)

SAVE_FILENAME = "pomagotchi_save.json"


class StorageError(RuntimeError):
    """Raised when the save file cannot be written or read back."""


class SaveError(StorageError):
    """Directory creation, serialisation or the write itself failed."""


class LoadError(StorageError):
    """The save file exists but could not be read or decoded."""


def _missing_fields(model: BaseModel, prefix: str = "") -> list[str]:
    """Dotted names of fields that were filled from defaults, not from input."""
    missing: list[str] = []
    for name in type(model).model_fields:
        path = f"{prefix}{name}"
        if name not in model.model_fields_set:
            missing.append(path)
            continue
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            missing.extend(_missing_fields(value, f"{path}."))
    return missing


class SaveStore:
    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def path(self) -> Path:
        return self._data_dir / SAVE_FILENAME

    def exists(self) -> bool:
        return self.path.is_file()

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    async def save(self, state: GameState) -> None:
        """Write the full state to disk, replacing any previous save."""
        try:
            payload = state.model_dump_json(indent=2)
        except (TypeError, ValueError) as e:
            raise SaveError(f"Could not serialise game state: {e}") from e
        await asyncio.to_thread(self._write, payload)
        logger.debug("saved game state to %s (%d bytes)", self.path, len(payload))

    def _write(self, payload: str) -> None:
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SaveError(f"Could not create data directory {self._data_dir}: {e}") from e
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise SaveError(f"Could not write save file {self.path}: {e}") from e

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    async def load(self) -> GameState | None:
        """Read the saved state. Returns None if nothing has been saved yet.

        Every field must be present with its exact JSON type. A save with
        missing sections or numbers written as strings is rejected, not
        padded with defaults.
        """
        if not self.exists():
            logger.debug("no save file at %s", self.path)
            return None
        raw = await asyncio.to_thread(self._read)
        try:
            state = GameState.model_validate_json(raw, strict=True)
        except ValidationError as e:
            raise LoadError(f"Save file {self.path} is corrupt or incompatible: {e}") from e
        missing = _missing_fields(state)
        if missing:
            raise LoadError(f"Save file {self.path} is incomplete, missing: {', '.join(missing)}")
        logger.debug("loaded game state from %s", self.path)
        return state

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read save file {self.path}: {e}") from e
