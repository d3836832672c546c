"""Exceptions raised by the guess resolution engine."""

from __future__ import annotations


class WorldleError(Exception):
    """Base class for all engine errors."""


class UnknownCountryError(WorldleError):
    """Raised when a guess does not match any catalog entry for the active language."""

    def __init__(self, guess_text: str, language: str) -> None:
        super().__init__(f"Unknown country: {guess_text!r} (language={language})")
        self.guess_text = guess_text
        self.language = language


class InvalidCatalogDataError(WorldleError):
    """Raised at catalog load time for malformed or duplicate country records."""


class RoundAlreadyWonError(WorldleError):
    """Raised when a guess is submitted to a round that has already been won."""
