"""Football match simulation: ball, players, events and the match clock."""

from pitchside.simulation.ball import BallMotionEngine
from pitchside.simulation.events import (
    CornerEvent,
    EventGenerator,
    EventType,
    FoulEvent,
    GoalEvent,
    MatchEvent,
    PossessionChangeEvent,
    ShotEvent,
    SubstitutionEvent,
)
from pitchside.simulation.formations import (
    AWAY_FORMATION,
    FORMATIONS,
    HOME_FORMATION,
    PlayerDescriptor,
    Role,
    Side,
)
from pitchside.simulation.orchestrator import ControlAction, MatchOrchestrator, MatchSnapshot
from pitchside.simulation.pitch import Point
from pitchside.simulation.positions import PlayerFrame, generate_player_positions
from pitchside.simulation.state import MatchState, Score, Shot

__all__ = [
    "BallMotionEngine",
    "EventGenerator",
    "EventType",
    "MatchEvent",
    "GoalEvent",
    "ShotEvent",
    "FoulEvent",
    "CornerEvent",
    "SubstitutionEvent",
    "PossessionChangeEvent",
    "AWAY_FORMATION",
    "FORMATIONS",
    "HOME_FORMATION",
    "PlayerDescriptor",
    "Role",
    "Side",
    "ControlAction",
    "MatchOrchestrator",
    "MatchSnapshot",
    "Point",
    "PlayerFrame",
    "generate_player_positions",
    "MatchState",
    "Score",
    "Shot",
]
