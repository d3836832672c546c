"""Country catalog loading and free-text resolution."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

from worldle_core.errors import InvalidCatalogDataError, UnknownCountryError
from worldle_core.models import Country
from worldle_core.normalize import normalize_name

DEFAULT_LANGUAGE = "en"

_logger = logging.getLogger("worldle_core.catalog")


def _language_key(language: str | None) -> str:
    # "fr-CA" and "FR" both select the "fr" table.
    if not language:
        return DEFAULT_LANGUAGE
    return language.replace("_", "-").split("-")[0].lower()


def _coordinate(record: Mapping[str, Any], field: str, limit: float) -> float:
    value = record.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCatalogDataError(f"Country {record.get('code')!r} has no numeric {field}: {value!r}")
    value = float(value)
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise InvalidCatalogDataError(f"Country {record.get('code')!r} has {field} out of range: {value}")
    return value


def country_from_record(record: Mapping[str, Any]) -> Country:
    """Build a validated ``Country`` from a ``{code, latitude, longitude, name}`` mapping."""
    code = record.get("code")
    if not isinstance(code, str) or not code.strip():
        raise InvalidCatalogDataError(f"Country record without a code: {dict(record)!r}")
    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidCatalogDataError(f"Country {code!r} has no default name")

    return Country(
        code=code.strip().upper(),
        latitude=_coordinate(record, "latitude", 90.0),
        longitude=_coordinate(record, "longitude", 180.0),
        name=name,
    )


class CountryCatalog:
    """Immutable, ordered collection of countries with per-language name tables.

    Catalog order is significant: when two countries share a normalized name,
    resolution returns the one listed first.
    """

    def __init__(
        self,
        countries: Iterable[Country],
        names_by_language: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._countries = tuple(countries)
        self._by_code: dict[str, Country] = {}
        for country in self._countries:
            code = country.code.upper()
            if code in self._by_code:
                raise InvalidCatalogDataError(f"Duplicate country code: {code}")
            self._by_code[code] = country

        self._names: dict[str, dict[str, str]] = {}
        for language, table in (names_by_language or {}).items():
            key = _language_key(language)
            normalized_table: dict[str, str] = {}
            for code, name in table.items():
                if code.upper() not in self._by_code:
                    raise InvalidCatalogDataError(f"Name table {key!r} references unknown country code {code!r}")
                normalized_table[code.upper()] = name
            self._names[key] = normalized_table

        self._lookup_cache: dict[str, dict[str, Country]] = {}

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        names_by_language: Mapping[str, Mapping[str, str]] | None = None,
    ) -> CountryCatalog:
        return cls([country_from_record(record) for record in records], names_by_language)

    @classmethod
    def from_directory(cls, path: str | Path) -> CountryCatalog:
        """Load ``countries.json`` and ``names/<language>.json`` from a data directory."""
        return _load_catalog(Path(path))

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def languages(self) -> list[str]:
        return sorted({DEFAULT_LANGUAGE, *self._names})

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __contains__(self, country: object) -> bool:
        return isinstance(country, Country) and self._by_code.get(country.code.upper()) == country

    def get(self, code: str) -> Country:
        """Return the country for a case-insensitive code."""
        try:
            return self._by_code[code.strip().upper()]
        except KeyError:
            raise KeyError(f"Unknown country code: {code}") from None

    def localized_name(self, country: Country, language: str | None) -> str:
        table = self._names.get(_language_key(language), {})
        return table.get(country.code.upper(), country.name)

    def resolve(self, guess_text: str, language: str | None = DEFAULT_LANGUAGE) -> Country:
        """Match free text against localized names.

        Raises ``UnknownCountryError`` when no country's normalized name matches.
        """
        key = normalize_name(guess_text)
        country = self._lookup(_language_key(language)).get(key) if key else None
        if country is None:
            raise UnknownCountryError(guess_text, language or DEFAULT_LANGUAGE)
        return country

    def _lookup(self, language: str) -> dict[str, Country]:
        # Languages without a name table all share the default-name lookup.
        if language not in self._names:
            language = DEFAULT_LANGUAGE
        lookup = self._lookup_cache.get(language)
        if lookup is None:
            lookup = {}
            for country in self._countries:
                lookup.setdefault(normalize_name(self.localized_name(country, language)), country)
            self._lookup_cache[language] = lookup
        return lookup


def resolve_country(guess_text: str, language: str | None, catalog: CountryCatalog) -> Country:
    return catalog.resolve(guess_text, language)


def _read_json(source: Any) -> Any:
    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidCatalogDataError(f"Malformed catalog file {source.name}: {exc}") from exc


def _load_catalog(root: Any) -> CountryCatalog:
    countries_file = root / "countries.json"
    if not countries_file.is_file():
        raise InvalidCatalogDataError(f"Catalog directory has no countries.json: {root}")

    records = _read_json(countries_file)
    if not isinstance(records, list):
        raise InvalidCatalogDataError("countries.json must contain a list of country records")

    names_by_language: dict[str, dict[str, str]] = {}
    names_dir = root / "names"
    if names_dir.is_dir():
        for entry in sorted(names_dir.iterdir(), key=lambda item: item.name):
            if not entry.name.endswith(".json"):
                continue
            table = _read_json(entry)
            if not isinstance(table, dict):
                raise InvalidCatalogDataError(f"Name table {entry.name} must map country codes to names")
            names_by_language[entry.name.removesuffix(".json")] = table

    catalog = CountryCatalog.from_records(records, names_by_language)
    _logger.info(
        "catalog_loaded",
        extra={"country_count": len(catalog), "languages": catalog.languages},
    )
    return catalog


@lru_cache(maxsize=None)
def load_default_catalog() -> CountryCatalog:
    """Load the packaged catalog once per process."""
    return _load_catalog(resources.files("worldle_core") / "data")
