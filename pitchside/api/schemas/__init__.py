"""Pydantic schemas for API messages."""

from pitchside.api.schemas.match import (
    ControlMessage,
    EventSchema,
    MatchUpdateMessage,
    PlayerFrameSchema,
    PointSchema,
    ScoreSchema,
    decode_control,
)

__all__ = [
    "ControlMessage",
    "EventSchema",
    "MatchUpdateMessage",
    "PlayerFrameSchema",
    "PointSchema",
    "ScoreSchema",
    "decode_control",
]
