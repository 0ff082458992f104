"""Pitchside API package - FastAPI backend for the live match feed."""

from pitchside.api.main import app, create_app

__all__ = ["app", "create_app"]
