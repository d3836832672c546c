"""Session orchestration: resolve typed text, record the guess, react to a win."""

from __future__ import annotations

import logging

from worldle_core.catalog import DEFAULT_LANGUAGE, CountryCatalog
from worldle_core.errors import UnknownCountryError
from worldle_core.game import GameRound, submit_guess
from worldle_core.models import Country, Guess, RoundStatus
from worldle_core.modifiers import Modifiers
from worldle_core.telemetry import LoggingTelemetry, Telemetry


class GameSession:
    """Owns one player's round, active language and difficulty modifiers."""

    def __init__(
        self,
        catalog: CountryCatalog,
        target: Country,
        *,
        language: str = DEFAULT_LANGUAGE,
        modifiers: Modifiers | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if target not in catalog:
            raise ValueError(f"Target country {target.code} is not part of the catalog")
        self._catalog = catalog
        self._round = GameRound(target=target)
        self._language = language
        self._modifiers = modifiers or Modifiers()
        self._logger = logger or logging.getLogger("worldle_core.session")
        self._telemetry = telemetry or LoggingTelemetry(self._logger)

    @property
    def catalog(self) -> CountryCatalog:
        return self._catalog

    @property
    def round(self) -> GameRound:
        return self._round

    @property
    def target(self) -> Country:
        return self._round.target

    @property
    def guesses(self) -> tuple[Guess, ...]:
        return self._round.guesses

    @property
    def is_won(self) -> bool:
        return self._round.is_won

    @property
    def status(self) -> RoundStatus:
        return self._round.status

    @property
    def language(self) -> str:
        return self._language

    @property
    def modifiers(self) -> Modifiers:
        return self._modifiers

    def set_language(self, language: str) -> None:
        self._language = language

    def submit(self, guess_text: str) -> Guess:
        """Resolve ``guess_text`` and add it to the round.

        Raises ``UnknownCountryError`` (round untouched) or ``RoundAlreadyWonError``.
        """
        try:
            country = self._catalog.resolve(guess_text, self._language)
        except UnknownCountryError:
            self._telemetry.emit("unknown_country", {"guess_text": guess_text, "language": self._language})
            raise

        outcome = submit_guess(self._round, country, guess_text=guess_text)
        if outcome.won_now:
            self._modifiers.reset_temp_disabled_on_win()

        self._telemetry.emit(
            "guess_submitted",
            {
                "guess_text": guess_text,
                "country_code": country.code,
                "distance": outcome.guess.distance,
                "direction": outcome.guess.direction.value,
                "guess_count": len(self._round.guesses),
            },
        )

        if outcome.won_now:
            self._telemetry.emit(
                "round_won",
                {"target_code": self.target.code, "guess_count": len(self._round.guesses)},
            )
        return outcome.guess

    def reveal_image(self) -> None:
        """Show the hidden image for the rest of this round."""
        self._modifiers.hide_image.set_temp_disabled(True)

    def cancel_rotation(self) -> None:
        """Stop rotating the image for the rest of this round."""
        self._modifiers.rotation.set_temp_disabled(True)

    def localized_target_name(self) -> str:
        return self._catalog.localized_name(self.target, self._language)
