"""Distance and compass direction between a guessed country and the target."""

from __future__ import annotations

import math

from geopy.distance import geodesic

from worldle_core.models import Country, Direction, Evaluation

# Mercator stretch is infinite at the poles.
_MAX_LATITUDE = 90.0 - 1e-9


def distance_meters(origin: Country, destination: Country) -> int:
    """Geodesic (WGS-84) distance rounded to whole meters."""
    if origin.point == destination.point:
        return 0
    return int(round(geodesic(origin.point, destination.point).meters))


def rhumb_line_bearing(origin: Country, destination: Country) -> float:
    """Constant-heading bearing from ``origin`` to ``destination`` in [0, 360)."""
    lat1 = math.radians(max(-_MAX_LATITUDE, min(_MAX_LATITUDE, origin.latitude)))
    lat2 = math.radians(max(-_MAX_LATITUDE, min(_MAX_LATITUDE, destination.latitude)))
    delta_lon = math.radians(destination.longitude - origin.longitude)

    # Take the short way around the antimeridian.
    if abs(delta_lon) > math.pi:
        delta_lon = delta_lon - 2 * math.pi if delta_lon > 0 else delta_lon + 2 * math.pi

    delta_psi = math.log(math.tan(lat2 / 2 + math.pi / 4) / math.tan(lat1 / 2 + math.pi / 4))
    return (math.degrees(math.atan2(delta_lon, delta_psi)) + 360.0) % 360.0


def compass_direction(bearing: float) -> Direction:
    """Round a bearing half-up to the nearest multiple of 45 degrees."""
    bucket = int(math.floor(bearing / 45.0 + 0.5)) * 45
    return Direction.from_degrees(bucket % 360)


def evaluate(guessed: Country, target: Country) -> Evaluation:
    distance = distance_meters(guessed, target)
    if distance == 0:
        return Evaluation(distance=0, direction=Direction.HERE)
    return Evaluation(distance=distance, direction=compass_direction(rhumb_line_bearing(guessed, target)))
