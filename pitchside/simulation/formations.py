"""Static 4-4-2 formations for both sides."""

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    """The two teams in a match."""

    HOME = "home"
    AWAY = "away"

    @property
    def opponent(self) -> "Side":
        return Side.AWAY if self is Side.HOME else Side.HOME

    @property
    def display(self) -> str:
        return self.value.capitalize()


class Role(str, Enum):
    """Player role, which determines how strongly a player follows the ball."""

    GOALKEEPER = "goalkeeper"
    BACK = "back"
    MID = "mid"
    STRIKER = "striker"


# Share of the player-to-ball vector a player closes each tick
MOVE_FACTORS = {
    Role.GOALKEEPER: 0.1,
    Role.BACK: 0.4,
    Role.MID: 0.4,
    Role.STRIKER: 0.7,
}


@dataclass(frozen=True)
class PlayerDescriptor:
    """A player's fixed slot in a formation."""

    id: int
    role: Role
    position: str  # gk, rb, cb, lb, rm, cm, lm, st
    base_x: float
    base_y: float
    team: Side

    @property
    def move_factor(self) -> float:
        return MOVE_FACTORS[self.role]


def _player(id: int, position: str, base_x: float, base_y: float, team: Side) -> PlayerDescriptor:
    role = {
        "gk": Role.GOALKEEPER,
        "rb": Role.BACK,
        "cb": Role.BACK,
        "lb": Role.BACK,
        "rm": Role.MID,
        "cm": Role.MID,
        "lm": Role.MID,
        "st": Role.STRIKER,
    }[position]
    return PlayerDescriptor(id, role, position, base_x, base_y, team)


HOME_FORMATION: tuple[PlayerDescriptor, ...] = (
    _player(1, "gk", 5, 34, Side.HOME),
    _player(2, "rb", 15, 10, Side.HOME),
    _player(3, "cb", 15, 25, Side.HOME),
    _player(4, "cb", 15, 43, Side.HOME),
    _player(5, "lb", 15, 58, Side.HOME),
    _player(6, "rm", 35, 15, Side.HOME),
    _player(7, "cm", 35, 34, Side.HOME),
    _player(8, "cm", 35, 45, Side.HOME),
    _player(9, "lm", 35, 53, Side.HOME),
    _player(10, "st", 55, 30, Side.HOME),
    _player(11, "st", 55, 38, Side.HOME),
)

AWAY_FORMATION: tuple[PlayerDescriptor, ...] = (
    _player(12, "gk", 100, 34, Side.AWAY),
    _player(13, "rb", 90, 10, Side.AWAY),
    _player(14, "cb", 90, 25, Side.AWAY),
    _player(15, "cb", 90, 43, Side.AWAY),
    _player(16, "lb", 90, 58, Side.AWAY),
    _player(17, "rm", 70, 15, Side.AWAY),
    _player(18, "cm", 70, 34, Side.AWAY),
    _player(19, "cm", 70, 45, Side.AWAY),
    _player(20, "lm", 70, 53, Side.AWAY),
    _player(21, "st", 50, 30, Side.AWAY),
    _player(22, "st", 50, 38, Side.AWAY),
)

FORMATIONS: tuple[PlayerDescriptor, ...] = HOME_FORMATION + AWAY_FORMATION


def formation_for(side: Side) -> tuple[PlayerDescriptor, ...]:
    return HOME_FORMATION if side is Side.HOME else AWAY_FORMATION


def striker_ids(side: Side) -> list[int]:
    """Ids of the two forwards of a side (10, 11 for home; 21, 22 for away)."""
    return [p.id for p in formation_for(side) if p.role is Role.STRIKER]


def outfield_ids(side: Side) -> list[int]:
    return [p.id for p in formation_for(side) if p.role is not Role.GOALKEEPER]
