"""Services backing the API."""

from pitchside.api.services.match_service import MatchService, MatchSession, MatchSessionManager

__all__ = ["MatchService", "MatchSession", "MatchSessionManager"]
