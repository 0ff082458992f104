"""API routers."""

from pitchside.api.routers.match_websocket import router as match_websocket_router

__all__ = ["match_websocket_router"]
