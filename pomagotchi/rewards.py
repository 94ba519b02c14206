"""Experience awarded for a study session.

A timer that runs out on its own earns the full reward. Cutting a session
short earns the completed fraction of it, rounded up, and never less than 1.
"""

from __future__ import annotations

FULL_SESSION_XP = 25


def session_duration(initial_total_seconds: int, remaining_seconds: int) -> int:
    return max(0, initial_total_seconds - remaining_seconds)


def session_xp(initial_total_seconds: int, remaining_seconds: int, natural: bool = True) -> int:
    if natural:
        return FULL_SESSION_XP
    if initial_total_seconds <= 0:
        return 1
    completed = min(session_duration(initial_total_seconds, remaining_seconds), initial_total_seconds)
    # ceil(FULL_SESSION_XP * completed / initial) without floats
    partial = -(-FULL_SESSION_XP * completed // initial_total_seconds)
    return max(1, partial)
