"""Pitchside - live football match simulation streamed over WebSocket."""

__version__ = "0.1.0"
