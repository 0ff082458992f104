"""Pydantic schemas for match WebSocket messages."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from pitchside.exceptions import InvalidControlMessageError
from pitchside.simulation.formations import Side
from pitchside.simulation.orchestrator import ControlAction, MatchSnapshot


# =============================================================================
# Client -> Server
# =============================================================================


class ControlMessage(BaseModel):
    """Pause, resume or reset the match."""

    type: Literal["control"]
    action: ControlAction


def decode_control(raw: Union[str, bytes]) -> ControlMessage:
    """
    Decode an inbound text or binary frame into a control message.

    Raises:
        InvalidControlMessageError: If the frame is not valid JSON or not a
            recognised control message
    """
    try:
        return ControlMessage.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidControlMessageError(
            f"Rejected inbound message ({e.error_count()} errors)", raw=raw
        ) from e


# =============================================================================
# Server -> Client
# =============================================================================


class PointSchema(BaseModel):
    x: float
    y: float


class ScoreSchema(BaseModel):
    home: int = Field(ge=0)
    away: int = Field(ge=0)


class PlayerFrameSchema(BaseModel):
    id: int
    x: float
    y: float
    team: Side


class _EventSchema(BaseModel):
    timestamp: float
    message: str


class GoalEventSchema(_EventSchema):
    type: Literal["goal"] = "goal"
    team: Side
    player_id: int
    x: float
    y: float


class ShotEventSchema(_EventSchema):
    type: Literal["shot"] = "shot"
    team: Side
    player_id: int
    x: float
    y: float


class FoulEventSchema(_EventSchema):
    type: Literal["foul"] = "foul"
    team: Side
    player_id: int
    x: float
    y: float


class CornerEventSchema(_EventSchema):
    type: Literal["corner"] = "corner"
    team: Side
    x: float
    y: float


class SubstitutionEventSchema(_EventSchema):
    type: Literal["substitution"] = "substitution"
    team: Side
    player_out: int
    player_in: int


class PossessionChangeEventSchema(_EventSchema):
    type: Literal["possession_change"] = "possession_change"
    team: Side


EventSchema = Annotated[
    Union[
        GoalEventSchema,
        ShotEventSchema,
        FoulEventSchema,
        CornerEventSchema,
        SubstitutionEventSchema,
        PossessionChangeEventSchema,
    ],
    Field(discriminator="type"),
]


class MatchUpdateMessage(BaseModel):
    """One tick of the match as sent to clients."""

    type: Literal["match_update"] = "match_update"
    time: float
    score: ScoreSchema
    possession: Side
    players: list[PlayerFrameSchema]
    ball: PointSchema
    event: Optional[EventSchema] = None

    @classmethod
    def from_snapshot(cls, snapshot: MatchSnapshot) -> "MatchUpdateMessage":
        """Create from an orchestrator snapshot."""
        return cls.model_validate(snapshot.to_dict())
