"""Match events and the generator that builds them.

Each kind of event is its own dataclass carrying exactly the fields that
kind needs. Events are created inside a tick, attached to the match state
as ``last_event``, sent once and then discarded. A new event overwrites
any unsent previous one.
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from pitchside.exceptions import UnknownEventTypeError
from pitchside.simulation.formations import Side
from pitchside.simulation.pitch import AWAY_GOAL_X, HOME_GOAL_X

if TYPE_CHECKING:
    from pitchside.simulation.state import MatchState


class EventType(str, Enum):
    """Kinds of match events."""

    GOAL = "goal"
    SHOT = "shot"
    FOUL = "foul"
    CORNER = "corner"
    SUBSTITUTION = "substitution"
    POSSESSION_CHANGE = "possession_change"


@dataclass
class MatchEvent:
    """Base class for all match events."""

    type: ClassVar[EventType]

    timestamp: float = 0.0  # Match time in seconds
    message: str = ""

    def to_dict(self) -> dict:
        """Flat wire representation with the type tag first."""
        data = {"type": self.type.value}
        for key, value in asdict(self).items():
            data[key] = value.value if isinstance(value, Enum) else value
        return data


@dataclass
class GoalEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.GOAL

    team: Side = Side.HOME
    player_id: int = 0
    x: float = 0.0
    y: float = 0.0


@dataclass
class ShotEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.SHOT

    team: Side = Side.HOME
    player_id: int = 0
    x: float = 0.0
    y: float = 0.0


@dataclass
class FoulEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.FOUL

    team: Side = Side.HOME
    player_id: int = 0
    x: float = 0.0
    y: float = 0.0


@dataclass
class CornerEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.CORNER

    team: Side = Side.HOME
    x: float = 0.0
    y: float = 0.0


@dataclass
class SubstitutionEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.SUBSTITUTION

    team: Side = Side.HOME
    player_out: int = 0
    player_in: int = 0


@dataclass
class PossessionChangeEvent(MatchEvent):
    type: ClassVar[EventType] = EventType.POSSESSION_CHANGE

    team: Side = Side.HOME  # Side now in possession


# Spatial ranges for randomly placed events
FOUL_X_RANGE = (20.0, 85.0)
FOUL_Y_RANGE = (10.0, 58.0)
CORNER_Y_RANGE = (10.0, 58.0)
SHOT_X_RANGE = (20.0, 85.0)
SHOT_Y_RANGE = (24.0, 44.0)


class EventGenerator:
    """
    Builds match events and records them on the match state.

    Example:
        generator = EventGenerator(rng)
        event = generator.generate(state, EventType.FOUL, team=Side.HOME, player_id=10)
        assert state.last_event is event
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self._builders: dict[EventType, Callable[..., MatchEvent]] = {
            EventType.GOAL: self._goal,
            EventType.SHOT: self._shot,
            EventType.FOUL: self._foul,
            EventType.CORNER: self._corner,
            EventType.SUBSTITUTION: self._substitution,
            EventType.POSSESSION_CHANGE: self._possession_change,
        }

    def generate(self, state: MatchState, event_type: EventType | str, **data) -> MatchEvent:
        """
        Build an event of the given type and make it the state's last event.

        Args:
            state: Match state whose ``last_event`` is overwritten
            event_type: Kind of event to build
            **data: Kind-specific fields (team, player_id, x, y, ...)

        Raises:
            UnknownEventTypeError: If the type is not a known event kind
        """
        try:
            kind = EventType(event_type)
        except ValueError:
            raise UnknownEventTypeError(f"Unknown event type: {event_type!r}") from None

        event = self._builders[kind](state.time_elapsed, **data)
        state.last_event = event
        return event

    def _goal(self, timestamp: float, team: Side, player_id: int, x: float, y: float) -> GoalEvent:
        return GoalEvent(
            timestamp=timestamp,
            message=f"Goal! {team.display} team scores!",
            team=team,
            player_id=player_id,
            x=x,
            y=y,
        )

    def _shot(
        self,
        timestamp: float,
        team: Side,
        player_id: int,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> ShotEvent:
        if x is None:
            x = self.rng.uniform(*SHOT_X_RANGE)
        if y is None:
            y = self.rng.uniform(*SHOT_Y_RANGE)
        return ShotEvent(
            timestamp=timestamp,
            message="Shot on goal!",
            team=team,
            player_id=player_id,
            x=x,
            y=y,
        )

    def _foul(self, timestamp: float, team: Side, player_id: int) -> FoulEvent:
        return FoulEvent(
            timestamp=timestamp,
            message="Foul committed",
            team=team,
            player_id=player_id,
            x=self.rng.uniform(*FOUL_X_RANGE),
            y=self.rng.uniform(*FOUL_Y_RANGE),
        )

    def _corner(self, timestamp: float, team: Side, y: Optional[float] = None) -> CornerEvent:
        if y is None:
            y = self.rng.uniform(*CORNER_Y_RANGE)
        return CornerEvent(
            timestamp=timestamp,
            message="Corner kick",
            team=team,
            x=AWAY_GOAL_X if team is Side.HOME else HOME_GOAL_X,
            y=y,
        )

    def _substitution(
        self, timestamp: float, team: Side, player_out: int, player_in: int
    ) -> SubstitutionEvent:
        return SubstitutionEvent(
            timestamp=timestamp,
            message=f"Substitution: Player {player_out} out, Player {player_in} in",
            team=team,
            player_out=player_out,
            player_in=player_in,
        )

    def _possession_change(self, timestamp: float, team: Side) -> PossessionChangeEvent:
        return PossessionChangeEvent(
            timestamp=timestamp,
            message=f"Possession changed to {team.display} team",
            team=team,
        )
