from __future__ import annotations

import pytest

from worldle_core.formatting import (
    country_image_path,
    direction_arrow,
    format_distance,
    google_maps_url,
    proximity_percent,
)
from worldle_core.models import Country, Direction

FRANCE = Country(code="FR", latitude=46.2, longitude=2.2, name="France")


def test_format_distance_units() -> None:
    assert format_distance(802_853, "km") == "803km"
    assert format_distance(802_853, "miles") == "499mi"
    assert format_distance(0) == "0km"
    assert format_distance(1_500) == "2km"


def test_format_distance_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        format_distance(1_000, "parsecs")


@pytest.mark.parametrize(
    ("distance", "percent"),
    [(0, 100), (1, 99), (10_000_000, 50), (20_000_000, 0), (25_000_000, 0)],
)
def test_proximity_percent(distance: int, percent: int) -> None:
    assert proximity_percent(distance) == percent


def test_every_direction_has_a_distinct_arrow() -> None:
    arrows = {direction_arrow(direction) for direction in Direction}

    assert len(arrows) == len(Direction)
    assert direction_arrow(Direction.HERE) == "🎉"


def test_country_image_path_uses_lowercase_code() -> None:
    assert country_image_path(FRANCE) == "images/countries/fr/vector.svg"


def test_google_maps_url() -> None:
    assert google_maps_url("France", FRANCE, "en") == "https://www.google.com/maps?q=France+FR&hl=en"
