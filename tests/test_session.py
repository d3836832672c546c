from __future__ import annotations

import logging

import pytest

from worldle_core.catalog import CountryCatalog
from worldle_core.errors import RoundAlreadyWonError, UnknownCountryError
from worldle_core.models import Country, Direction
from worldle_core.modifiers import ModifierMode, Modifiers
from worldle_core.session import GameSession
from worldle_core.telemetry import InMemoryTelemetry, LoggingTelemetry


def _session(catalog: CountryCatalog, **kwargs) -> tuple[GameSession, InMemoryTelemetry]:
    telemetry = InMemoryTelemetry()
    session = GameSession(catalog, catalog.get("FR"), telemetry=telemetry, **kwargs)
    return session, telemetry


def test_spain_then_france_end_to_end(small_catalog: CountryCatalog) -> None:
    modifiers = Modifiers(
        hide_image=ModifierMode(enabled=True, temp_disabled=True),
        rotation=ModifierMode(enabled=True, temp_disabled=True),
    )
    session, telemetry = _session(small_catalog, modifiers=modifiers)

    miss = session.submit("spain")
    assert 795_000 < miss.distance < 810_000
    assert miss.direction is Direction.NE
    assert session.is_won is False
    assert modifiers.hide_image.temp_disabled is True

    hit = session.submit("FRANCE")
    assert hit.distance == 0
    assert hit.direction is Direction.HERE
    assert session.is_won is True
    assert modifiers.hide_image == ModifierMode(enabled=True, temp_disabled=False)
    assert modifiers.rotation == ModifierMode(enabled=True, temp_disabled=False)
    assert telemetry.names() == ["guess_submitted", "guess_submitted", "round_won"]


def test_unknown_country_leaves_round_untouched(small_catalog: CountryCatalog) -> None:
    session, telemetry = _session(small_catalog)
    session.submit("Spain")

    with pytest.raises(UnknownCountryError):
        session.submit("Narnia")

    assert [guess.raw_text for guess in session.guesses] == ["Spain"]
    assert telemetry.events[-1] == ("unknown_country", {"guess_text": "Narnia", "language": "en"})


def test_language_controls_resolution(small_catalog: CountryCatalog) -> None:
    session, _ = _session(small_catalog, language="fr")

    assert session.submit("Espagne").raw_text == "Espagne"
    with pytest.raises(UnknownCountryError):
        session.submit("Spanyolország")

    session.set_language("hu")
    session.submit("Spanyolország")
    assert len(session.guesses) == 2


def test_no_guesses_after_win(small_catalog: CountryCatalog) -> None:
    session, telemetry = _session(small_catalog)
    session.submit("France")

    with pytest.raises(RoundAlreadyWonError):
        session.submit("Spain")
    assert len(session.guesses) == 1
    assert telemetry.names().count("round_won") == 1


def test_win_does_not_reset_modifiers_before_the_target_is_named(small_catalog: CountryCatalog) -> None:
    session, _ = _session(small_catalog, modifiers=Modifiers.from_flags(no_image_mode=True, rotation_mode=True))
    session.reveal_image()
    session.cancel_rotation()
    session.submit("Spain")

    assert session.modifiers.hide_image.temp_disabled is True
    assert session.modifiers.rotation.temp_disabled is True

    session.submit("France")
    assert session.modifiers.hide_image.temp_disabled is False
    assert session.modifiers.rotation.temp_disabled is False
    assert session.modifiers.hide_image.enabled is True


def test_target_must_belong_to_catalog(small_catalog: CountryCatalog) -> None:
    stranger = Country(code="XX", latitude=0.0, longitude=0.0, name="Nowhere")

    with pytest.raises(ValueError):
        GameSession(small_catalog, stranger)


def test_localized_target_name(small_catalog: CountryCatalog) -> None:
    session = GameSession(small_catalog, small_catalog.get("ES"), language="fr")

    assert session.localized_target_name() == "Espagne"


def test_logging_telemetry_writes_structured_records(
    small_catalog: CountryCatalog, caplog: pytest.LogCaptureFixture
) -> None:
    logger = logging.getLogger("tests.session")
    session = GameSession(small_catalog, small_catalog.get("FR"), telemetry=LoggingTelemetry(logger))

    with caplog.at_level(logging.INFO, logger="tests.session"):
        session.submit("Spain")

    record = caplog.records[-1]
    assert record.getMessage() == "guess_submitted"
    assert record.country_code == "ES"
    assert record.direction == "NE"


class FailingTelemetry:
    def emit(self, event_name: str, payload: dict) -> None:
        raise RuntimeError("sink down")


def test_win_resets_modifiers_even_when_telemetry_fails(small_catalog: CountryCatalog) -> None:
    modifiers = Modifiers(
        hide_image=ModifierMode(enabled=True, temp_disabled=True),
        rotation=ModifierMode(enabled=False, temp_disabled=True),
    )
    session = GameSession(small_catalog, small_catalog.get("FR"), modifiers=modifiers, telemetry=FailingTelemetry())

    with pytest.raises(RuntimeError):
        session.submit("France")

    assert session.is_won is True
    assert modifiers.hide_image == ModifierMode(enabled=True, temp_disabled=False)
    assert modifiers.rotation == ModifierMode(enabled=False, temp_disabled=False)
