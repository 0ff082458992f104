"""Ball motion engine.

The ball is in one of two regimes:

- Pursuit: build-up play. The ball drifts toward a random spot in front of
  the attacked goal, faster as the attack phase grows. Possession may flip
  and, deep into an attack, a shot may be taken.
- Shooting: the ball travels in a straight line toward a point on the goal
  line at the shot's speed until it gets close, or reaches either end line.

The goal check runs once per tick in both regimes.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from pitchside.simulation.events import EventGenerator, EventType, MatchEvent
from pitchside.simulation.formations import Side, striker_ids
from pitchside.simulation.pitch import (
    AWAY_GOAL_X,
    HOME_GOAL_X,
    PITCH_LENGTH,
    Point,
    in_goal_mouth,
    step_toward,
)
from pitchside.simulation.state import MAX_ATTACK_PHASE, MatchState, Shot

logger = logging.getLogger(__name__)


# =============================================================================
# Tuning
# =============================================================================

# Pursuit target box per attacking side
HOME_TARGET_X = (85.0, 100.0)
AWAY_TARGET_X = (5.0, 20.0)
TARGET_Y = (24.0, 44.0)

BASE_SPEED = 0.3
ATTACK_SPEED_BONUS = 0.7  # Added at attack phase 100

# Ball positions that count as "in the final third" for each side
HOME_ATTACK_ZONE_X = 80.0  # ball.x > this
AWAY_ATTACK_ZONE_X = 25.0  # ball.x < this

ATTACK_PHASE_GAIN = 2
ATTACK_PHASE_DECAY = 1

SHOT_PHASE_THRESHOLD = 70
SHOT_CHANCE = 0.10
SHOT_SPREAD_Y = 5.0
SHOT_SPEED = (2.0, 5.0)
SHOT_ARRIVAL_DISTANCE = 2.0

POSSESSION_FLIP_CHANCE = 0.02


class BallMotionEngine:
    """
    Advances the ball one tick at a time.

    The engine holds no match data of its own: everything lives on the
    MatchState passed to ``step``.
    """

    def __init__(
        self,
        events: Optional[EventGenerator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.events = events or EventGenerator(self.rng)

    def step(self, state: MatchState) -> Optional[MatchEvent]:
        """
        Advance the ball by one tick.

        Returns:
            The event emitted this tick, if any (also on ``state.last_event``)
        """
        if state.shot_in_progress:
            self._advance_shot(state)
        else:
            self._pursue(state)
            self.check_goal(state)
        return state.last_event

    # =========================================================================
    # Pursuit
    # =========================================================================

    def _pursue(self, state: MatchState) -> None:
        target = self._pursuit_target(state.possession)
        speed = BASE_SPEED + (state.attack_phase / MAX_ATTACK_PHASE) * ATTACK_SPEED_BONUS
        moved, _ = step_toward(state.ball, target, speed)
        state.ball = moved.clamped()

        self._update_attack_phase(state)

        # Rolled before the shot trigger: a flip resets the attack phase,
        # so a side never shoots at the goal it just stopped attacking
        if self.rng.random() < POSSESSION_FLIP_CHANCE:
            self._change_possession(state)

        if state.attack_phase > SHOT_PHASE_THRESHOLD and self.rng.random() < SHOT_CHANCE:
            self._take_shot(state)

    def _pursuit_target(self, possession: Side) -> Point:
        x_range = HOME_TARGET_X if possession is Side.HOME else AWAY_TARGET_X
        return Point(self.rng.uniform(*x_range), self.rng.uniform(*TARGET_Y))

    def _update_attack_phase(self, state: MatchState) -> None:
        ball_x = state.ball.x
        in_final_third = (
            (state.possession is Side.HOME and ball_x > HOME_ATTACK_ZONE_X)
            or (state.possession is Side.AWAY and ball_x < AWAY_ATTACK_ZONE_X)
        )
        if in_final_third:
            state.attack_phase = min(MAX_ATTACK_PHASE, state.attack_phase + ATTACK_PHASE_GAIN)
        else:
            state.attack_phase = max(0, state.attack_phase - ATTACK_PHASE_DECAY)

    def _take_shot(self, state: MatchState) -> None:
        target = Point(
            state.attacking_goal_x,
            34.0 + self.rng.uniform(-SHOT_SPREAD_Y, SHOT_SPREAD_Y),
        )
        state.shot = Shot(target=target, speed=self.rng.uniform(*SHOT_SPEED))
        self.events.generate(
            state,
            EventType.SHOT,
            team=state.possession,
            player_id=self.rng.choice(striker_ids(state.possession)),
            x=state.ball.x,
            y=state.ball.y,
        )

    # =========================================================================
    # Shooting
    # =========================================================================

    def _advance_shot(self, state: MatchState) -> None:
        shot = state.shot
        moved, arrived = step_toward(state.ball, shot.target, shot.speed)
        state.ball = moved.clamped()

        finished = (
            arrived
            or state.ball.distance_to(shot.target) < SHOT_ARRIVAL_DISTANCE
            or state.ball.x <= HOME_GOAL_X
            or state.ball.x >= PITCH_LENGTH
        )
        if not finished:
            self.check_goal(state)
            return

        state.shot = None
        if not self.check_goal(state):
            self._change_possession(state)

    # =========================================================================
    # Possession & Goals
    # =========================================================================

    def _change_possession(self, state: MatchState) -> None:
        state.flip_possession()
        state.attack_phase = 0
        self.events.generate(state, EventType.POSSESSION_CHANGE, team=state.possession)

    def check_goal(self, state: MatchState) -> bool:
        """
        Award a goal if the ball is over a goal line between the posts.

        On a goal the ball returns to the centre spot, the attack phase and
        any shot are cleared, and the conceding side gets the ball.

        Returns:
            True if a goal was scored
        """
        ball = state.ball
        if not in_goal_mouth(ball.y):
            return False

        if ball.x <= HOME_GOAL_X:
            scorer = Side.AWAY
        elif ball.x >= AWAY_GOAL_X:
            scorer = Side.HOME
        else:
            return False

        state.score.add_goal(scorer)
        self.events.generate(
            state,
            EventType.GOAL,
            team=scorer,
            player_id=self.rng.choice(striker_ids(scorer)),
            x=ball.x,
            y=ball.y,
        )
        logger.info(
            "Goal for %s at %.1fs (%d-%d)",
            scorer.value, state.time_elapsed, state.score.home, state.score.away,
        )

        state.recenter_ball()
        state.attack_phase = 0
        state.shot = None
        state.possession = scorer.opponent
        return True
