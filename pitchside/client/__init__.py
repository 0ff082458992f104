"""Client for consuming the live match feed."""

from pitchside.client.feed import MatchFeedClient, reconnect_delay

__all__ = ["MatchFeedClient", "reconnect_delay"]
