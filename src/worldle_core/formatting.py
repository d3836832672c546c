"""Presentation helpers for guesses: units, arrows, proximity and asset paths."""

from __future__ import annotations

import math
from urllib.parse import quote_plus

from worldle_core.models import Country, Direction

MAX_DISTANCE_ON_EARTH = 20_000_000
KM_TO_MILES = 0.621371

DIRECTION_ARROWS: dict[Direction, str] = {
    Direction.N: "⬆️",
    Direction.NE: "↗️",
    Direction.E: "➡️",
    Direction.SE: "↘️",
    Direction.S: "⬇️",
    Direction.SW: "↙️",
    Direction.W: "⬅️",
    Direction.NW: "↖️",
    Direction.HERE: "🎉",
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_distance(distance_meters: int | float, unit: str = "km") -> str:
    distance_km = distance_meters / 1000
    if unit == "km":
        return f"{_round_half_up(distance_km)}km"
    if unit == "miles":
        return f"{_round_half_up(distance_km * KM_TO_MILES)}mi"
    raise ValueError(f"Unsupported distance unit: {unit}")


def direction_arrow(direction: Direction) -> str:
    return DIRECTION_ARROWS[direction]


def proximity_percent(distance_meters: int | float) -> int:
    """100 for an exact hit, falling linearly to 0 at 20,000 km."""
    remaining = max(MAX_DISTANCE_ON_EARTH - distance_meters, 0)
    return math.floor(remaining / MAX_DISTANCE_ON_EARTH * 100)


def country_image_path(country: Country) -> str:
    return f"images/countries/{country.code.lower()}/vector.svg"


def google_maps_url(country_name: str, country: Country, language: str) -> str:
    query = quote_plus(f"{country_name} {country.code.upper()}")
    return f"https://www.google.com/maps?q={query}&hl={language}"
