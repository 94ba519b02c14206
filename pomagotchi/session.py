"""Game session — the operations the UI invokes on the shared game state.

One GameSession owns the in-memory GameState and the lock that guards it.
Every operation follows the same shape:

    async with lock:
        read or mutate the aggregate
        save to disk (mutating operations only)
    return a copy

Saving inside the same critical section means the file always holds the
state the operation produced, even when requests interleave. A failed save
does not roll back the mutation; the StorageError reaches the caller.

Snapshots handed out are deep copies so callers cannot mutate the aggregate
behind the lock.
"""

from __future__ import annotations

import asyncio
import logging

from pomagotchi.dates import Clock, utc_today
from pomagotchi.models import CreatureState, GameProgress, GameState, Stage, TimerState
from pomagotchi.rewards import session_duration, session_xp
from pomagotchi.storage import SaveStore

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        store: SaveStore,
        state: GameState | None = None,
        clock: Clock = utc_today,
    ) -> None:
        self._store = store
        self._state = state if state is not None else GameState()
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def store(self) -> SaveStore:
        return self._store

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def load_from_disk(self) -> bool:
        """Replace the in-memory state with the saved one, if a save exists.

        Returns True when a save file was loaded. On LoadError the current
        state is left untouched.
        """
        loaded = await self._store.load()
        if loaded is None:
            return False
        async with self._lock:
            self._state = loaded
        logger.info(
            "loaded save: level=%d stage=%s pomodoros=%d",
            loaded.creature.level, loaded.creature.stage,
            loaded.progress.total_pomodoros_completed,
        )
        return True

    # ------------------------------------------------------------------
    # Creature
    # ------------------------------------------------------------------

    async def get_creature_state(self) -> CreatureState:
        async with self._lock:
            return self._state.creature.model_copy(deep=True)

    async def load_creature_state(self) -> CreatureState:
        """Alias of get_creature_state kept for older front-ends."""
        return await self.get_creature_state()

    async def save_creature_state(self, level: int, xp: int, xp_needed: int, stage: Stage) -> None:
        """Overwrite the creature as-is, without applying the leveling rule.

        Types and ranges are validated, but xp >= xp_needed or a stage that
        does not match the level are accepted and only logged.
        """
        creature = CreatureState(level=level, xp=xp, xp_needed=xp_needed, stage=stage)
        if not creature.is_consistent():
            logger.warning(
                "creature overwritten with inconsistent state: level=%d xp=%d xp_needed=%d stage=%s",
                level, xp, xp_needed, stage,
            )
        async with self._lock:
            self._state.creature = creature
            await self._store.save(self._state)

    async def add_experience(self, points: int) -> CreatureState:
        async with self._lock:
            self._state.creature.gain_experience(points)
            self._state.progress.total_xp_earned += points
            await self._store.save(self._state)
            return self._state.creature.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    async def complete_pomodoro(self, duration_seconds: int, xp_gained: int) -> GameProgress:
        """Record a finished session: totals, streak, and creature experience."""
        async with self._lock:
            self._complete(duration_seconds, xp_gained)
            await self._store.save(self._state)
            return self._state.progress.model_copy(deep=True)

    async def finish_timer(self, natural: bool = True) -> GameProgress:
        """Complete the session described by the current timer state.

        The duration is the time elapsed on the timer and the reward comes
        from session_xp(). Afterwards the timer is stopped and rewound to the
        last duration the user picked.
        """
        async with self._lock:
            timer = self._state.timer
            xp = session_xp(timer.initial_total_seconds, timer.remaining_seconds, natural)
            duration = session_duration(timer.initial_total_seconds, timer.remaining_seconds)
            self._complete(duration, xp)
            timer.rewind()
            await self._store.save(self._state)
            logger.info("timer finished natural=%s duration=%ds xp=%d", natural, duration, xp)
            return self._state.progress.model_copy(deep=True)

    def _complete(self, duration_seconds: int, xp_gained: int) -> None:
        # Caller holds the lock.
        self._state.progress.record_session(duration_seconds, xp_gained, self._clock())
        self._state.creature.gain_experience(xp_gained)

    async def get_game_progress(self) -> GameProgress:
        async with self._lock:
            return self._state.progress.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    async def get_timer_state(self) -> TimerState:
        async with self._lock:
            return self._state.timer.model_copy(deep=True)

    async def update_timer_state(
        self,
        minutes: int,
        seconds: int,
        is_running: bool,
        is_paused: bool,
        initial_total_seconds: int,
        last_selected_minutes: int,
        last_selected_seconds: int,
    ) -> None:
        """Overwrite the timer. Only saved once the countdown is not running."""
        timer = TimerState(
            minutes=minutes,
            seconds=seconds,
            is_running=is_running,
            is_paused=is_paused,
            initial_total_seconds=initial_total_seconds,
            last_selected_minutes=last_selected_minutes,
            last_selected_seconds=last_selected_seconds,
        )
        async with self._lock:
            self._state.timer = timer
            if not is_running:
                await self._store.save(self._state)

    # ------------------------------------------------------------------
    # Whole game
    # ------------------------------------------------------------------

    async def get_full_game_state(self) -> GameState:
        async with self._lock:
            return self._state.model_copy(deep=True)

    async def save_full_game_state(self, state: GameState) -> None:
        async with self._lock:
            self._state = state.model_copy(deep=True)
            await self._store.save(self._state)
        logger.info("game state replaced")

    async def reset_game_data(self) -> None:
        async with self._lock:
            self._state = GameState()
            await self._store.save(self._state)
        logger.info("game data reset to defaults")
