"""Per-session match state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from pitchside.simulation.events import MatchEvent
from pitchside.simulation.formations import Side
from pitchside.simulation.pitch import AWAY_GOAL_X, HOME_GOAL_X, Point


MATCH_LENGTH_SECONDS = 5400.0  # 90 minutes
MAX_ATTACK_PHASE = 100


@dataclass
class Score:
    home: int = 0
    away: int = 0

    def add_goal(self, side: Side) -> None:
        if side is Side.HOME:
            self.home += 1
        else:
            self.away += 1

    def to_dict(self) -> dict:
        return {"home": self.home, "away": self.away}


@dataclass
class Shot:
    """A shot in flight. Exists only while the shot is being resolved."""

    target: Point
    speed: float


@dataclass
class MatchState:
    """
    Mutable state of one simulated match.

    Owned by a single session and mutated in place by its orchestrator.
    Shot target and speed live on ``shot``, so they exist exactly while a
    shot is in progress.
    """

    time_elapsed: float = 0.0
    score: Score = field(default_factory=Score)
    possession: Side = Side.HOME
    ball: Point = field(default_factory=Point.center)
    is_playing: bool = True
    attack_phase: int = 0
    shot: Optional[Shot] = None
    last_event: Optional[MatchEvent] = None

    @property
    def shot_in_progress(self) -> bool:
        return self.shot is not None

    @property
    def attacking_goal_x(self) -> float:
        """Goal line the side in possession is attacking."""
        return AWAY_GOAL_X if self.possession is Side.HOME else HOME_GOAL_X

    def flip_possession(self) -> Side:
        self.possession = self.possession.opponent
        return self.possession

    def recenter_ball(self) -> None:
        self.ball = Point.center()

    @classmethod
    def kickoff(cls, rng: Optional[random.Random] = None) -> MatchState:
        """Fresh match with a coin toss for initial possession."""
        rng = rng or random.Random()
        return cls(possession=Side.HOME if rng.random() > 0.5 else Side.AWAY)
