from __future__ import annotations

import pytest

from worldle_core.catalog import CountryCatalog


@pytest.fixture
def small_catalog() -> CountryCatalog:
    return CountryCatalog.from_records(
        [
            {"code": "FR", "latitude": 46.2, "longitude": 2.2, "name": "France"},
            {"code": "ES", "latitude": 40.4, "longitude": -3.7, "name": "Spain"},
            {"code": "CI", "latitude": 7.539989, "longitude": -5.54708, "name": "Côte d'Ivoire"},
        ],
        {"fr": {"FR": "France", "ES": "Espagne"}, "hu": {"ES": "Spanyolország"}},
    )
