"""Player positioning relative to the ball."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Optional

from pitchside.simulation.formations import FORMATIONS, PlayerDescriptor, Side
from pitchside.simulation.pitch import Point


@dataclass
class PlayerFrame:
    """Where one player stands on a single tick."""

    id: int
    x: float
    y: float
    team: Side

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "team": self.team.value}


def position_player(player: PlayerDescriptor, ball: Point, rng: random.Random) -> PlayerFrame:
    """
    Place one player for the current tick.

    The player is pulled from their base slot toward the ball by their
    role's move factor, damped by an independent random factor in
    [0.5, 1.0] per axis.
    """
    base = Point(player.base_x, player.base_y)
    to_ball = ball - base

    x = base.x + (to_ball.x * player.move_factor * (0.5 + rng.random() * 0.5)) / 10
    y = base.y + (to_ball.y * player.move_factor * (0.5 + rng.random() * 0.5)) / 10

    spot = Point(x, y).clamped()
    return PlayerFrame(id=player.id, x=spot.x, y=spot.y, team=player.team)


def generate_player_positions(
    ball: Point,
    formations: Iterable[PlayerDescriptor] = FORMATIONS,
    rng: Optional[random.Random] = None,
) -> list[PlayerFrame]:
    """
    Compute every player's position from scratch for one tick.

    No memory is kept between ticks, so jitter is independent per tick.
    """
    rng = rng or random.Random()
    return [position_player(player, ball, rng) for player in formations]
