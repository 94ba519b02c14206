"""Shared endpoint dependencies."""

from fastapi import Request

from pomagotchi.session import GameSession


def get_session(request: Request) -> GameSession:
    """The GameSession owned by the running app (see create_app)."""
    return request.app.state.session
