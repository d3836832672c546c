from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Compass bucket from a guessed country towards the target."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    HERE = "HERE"

    @property
    def degrees(self) -> int | None:
        """Bearing of the bucket, or ``None`` for the exact-match sentinel."""
        if self is Direction.HERE:
            return None
        return _BUCKETS.index(self) * 45

    @classmethod
    def from_degrees(cls, degrees: int) -> Direction:
        if degrees % 45:
            raise ValueError(f"Not a compass bucket: {degrees}")
        return _BUCKETS[(degrees // 45) % 8]


_BUCKETS = (
    Direction.N,
    Direction.NE,
    Direction.E,
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.W,
    Direction.NW,
)


class RoundStatus(str, Enum):
    active = "active"
    won = "won"


@dataclass(frozen=True, slots=True)
class Country:
    code: str
    latitude: float
    longitude: float
    name: str

    @property
    def point(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Evaluation:
    distance: int
    direction: Direction


@dataclass(frozen=True, slots=True)
class Guess:
    """A submitted guess; ``raw_text`` is exactly what the player typed."""

    raw_text: str
    distance: int
    direction: Direction
