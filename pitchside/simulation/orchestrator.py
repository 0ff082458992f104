"""Match clock and per-tick orchestration.

One orchestrator drives one match. Each tick it advances the clock,
moves the ball, places the players and bundles everything into a
snapshot for the transport.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pitchside.simulation.ball import BallMotionEngine
from pitchside.simulation.events import EventGenerator, EventType, MatchEvent
from pitchside.simulation.formations import (
    FORMATIONS,
    PlayerDescriptor,
    outfield_ids,
    striker_ids,
)
from pitchside.simulation.pitch import Point
from pitchside.simulation.positions import PlayerFrame, generate_player_positions
from pitchside.simulation.state import MATCH_LENGTH_SECONDS, MatchState, Score

logger = logging.getLogger(__name__)


DEFAULT_SECONDS_PER_TICK = 0.1  # 10 ticks per second

INCIDENT_CHANCE = 0.05
SUBSTITUTION_INTERVAL = 300.0  # Substitutions only on 5-minute marks
BENCH_IDS = (23, 30)


class ControlAction(str, Enum):
    """Commands a client can send to a running match."""

    PAUSE = "pause"
    PLAY = "play"
    RESET = "reset"


@dataclass
class MatchSnapshot:
    """Everything a client needs to draw one tick."""

    time: float
    score: Score
    possession: str
    players: list[PlayerFrame] = field(default_factory=list)
    ball: Point = field(default_factory=Point.center)
    event: Optional[MatchEvent] = None

    def to_dict(self) -> dict:
        return {
            "type": "match_update",
            "time": self.time,
            "score": self.score.to_dict(),
            "possession": self.possession,
            "players": [p.to_dict() for p in self.players],
            "ball": self.ball.to_dict(),
            "event": self.event.to_dict() if self.event else None,
        }


class MatchOrchestrator:
    """
    Runs one match tick by tick.

    The clock only advances while playing; the ball and players keep
    moving while paused.

    Example:
        orchestrator = MatchOrchestrator(MatchState.kickoff())
        snapshot = orchestrator.tick()
    """

    def __init__(
        self,
        state: MatchState,
        rng: Optional[random.Random] = None,
        seconds_per_tick: float = DEFAULT_SECONDS_PER_TICK,
        formations: tuple[PlayerDescriptor, ...] = FORMATIONS,
    ) -> None:
        self.state = state
        self.rng = rng or random.Random()
        self.seconds_per_tick = seconds_per_tick
        self.formations = formations
        self.events = EventGenerator(self.rng)
        self.ball_engine = BallMotionEngine(events=self.events, rng=self.rng)
        self.tick_count = 0
        self._last_substitution_mark: Optional[float] = None

    def tick(self) -> MatchSnapshot:
        """Advance the match by one tick and return what to send."""
        state = self.state
        self.tick_count += 1

        self._advance_clock()
        self.ball_engine.step(state)
        if state.last_event is None:
            self._maybe_incident()

        players = generate_player_positions(state.ball, self.formations, self.rng)
        snapshot = MatchSnapshot(
            time=state.time_elapsed,
            score=Score(state.score.home, state.score.away),
            possession=state.possession.value,
            players=players,
            ball=state.ball.copy(),
            event=state.last_event,
        )

        state.last_event = None
        return snapshot

    def _advance_clock(self) -> None:
        state = self.state
        if not state.is_playing:
            return
        # Rounded so that 1000 ticks of 0.1s land on exactly 100.0
        state.time_elapsed = min(
            MATCH_LENGTH_SECONDS,
            round(state.time_elapsed + self.seconds_per_tick, 6),
        )

    def _maybe_incident(self) -> None:
        """Occasionally emit a foul, corner or substitution for the side on the ball."""
        if self.rng.random() >= INCIDENT_CHANCE:
            return

        state = self.state
        side = state.possession
        kinds = [EventType.FOUL, EventType.CORNER]
        if self._substitution_due():
            kinds.append(EventType.SUBSTITUTION)

        kind = self.rng.choice(kinds)
        if kind is EventType.FOUL:
            self.events.generate(
                state, kind, team=side, player_id=self.rng.choice(striker_ids(side))
            )
        elif kind is EventType.CORNER:
            self.events.generate(state, kind, team=side)
        else:
            self.events.generate(
                state,
                kind,
                team=side,
                player_out=self.rng.choice(outfield_ids(side)),
                player_in=self.rng.randint(*BENCH_IDS),
            )
            self._last_substitution_mark = state.time_elapsed

    def _substitution_due(self) -> bool:
        # A paused or capped clock can sit on a mark for many ticks
        t = self.state.time_elapsed
        return t > 0 and t % SUBSTITUTION_INTERVAL == 0 and t != self._last_substitution_mark

    # =========================================================================
    # Control
    # =========================================================================

    def apply_control(self, action: ControlAction) -> None:
        """Apply a client command to the match."""
        state = self.state
        if action is ControlAction.PAUSE:
            state.is_playing = False
        elif action is ControlAction.PLAY:
            state.is_playing = True
        elif action is ControlAction.RESET:
            self.reset_clock()
        logger.debug("Applied control %s (playing=%s)", action.value, state.is_playing)

    def reset_clock(self) -> None:
        """Zero the time and score and put the ball back on the centre spot."""
        state = self.state
        state.time_elapsed = 0.0
        state.score = Score()
        state.recenter_ball()
        state.shot = None
        state.attack_phase = 0
        self._last_substitution_mark = None
