"""FastAPI dependency injection for shared resources."""

from fastapi import Request

from ..responder import Responder


def get_responder(request: Request) -> Responder:
    """Get page responder from app state."""
    return request.app.state.responder
