"""Pitch geometry and coordinate system.

All measurements are in pitch units (metres on a 105 x 68 pitch).

Coordinate system:
    Origin (0, 0) = corner of the pitch
    +X = toward the away goal (home attacks toward x = 105)
    +Y = across the pitch
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# =============================================================================
# Pitch Dimensions
# =============================================================================

PITCH_LENGTH = 105.0
PITCH_WIDTH = 68.0

CENTER_X = PITCH_LENGTH / 2  # 52.5
CENTER_Y = PITCH_WIDTH / 2   # 34.0

# Goal mouth spans the same y range at both ends
GOAL_MOUTH_MIN_Y = 24.0
GOAL_MOUTH_MAX_Y = 44.0

HOME_GOAL_X = 0.0        # Defended by home, attacked by away
AWAY_GOAL_X = PITCH_LENGTH  # Defended by away, attacked by home

# Distances below this are treated as zero when normalizing
EPSILON = 1e-9


@dataclass
class Point:
    """A position on the pitch.

    Examples:
        >>> Point(3, 4).distance_to(Point(0, 0))
        5.0
        >>> Point(120, -3).clamped()
        Point(x=105.0, y=0.0)
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def length(self) -> float:
        """Magnitude of this point taken as a vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def clamped(self) -> Point:
        """Copy of this point clamped to the pitch bounds."""
        return Point(
            max(0.0, min(PITCH_LENGTH, self.x)),
            max(0.0, min(PITCH_WIDTH, self.y)),
        )

    def copy(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def center(cls) -> Point:
        """The centre spot."""
        return cls(CENTER_X, CENTER_Y)


def step_toward(origin: Point, target: Point, distance: float) -> tuple[Point, bool]:
    """Move from origin toward target by a fixed distance.

    The step is taken along the normalized direction and is not shortened
    when the target is nearer than ``distance`` (the caller clamps).

    Returns:
        (new position, arrived). ``arrived`` is True when origin and target
        already coincide, in which case origin is returned unchanged.
    """
    delta = target - origin
    length = delta.length()
    if length < EPSILON:
        return origin.copy(), True
    direction = delta * (1.0 / length)
    return origin + direction * distance, False


def in_goal_mouth(y: float) -> bool:
    """Whether a y coordinate lies between the posts."""
    return GOAL_MOUTH_MIN_Y <= y <= GOAL_MOUTH_MAX_Y
