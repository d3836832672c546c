"""Guess resolution and round state engine for a daily country-guessing game."""

from .catalog import CountryCatalog, load_default_catalog, resolve_country
from .errors import InvalidCatalogDataError, RoundAlreadyWonError, UnknownCountryError, WorldleError
from .evaluator import evaluate
from .game import GameRound, GuessOutcome, submit_guess
from .models import Country, Direction, Evaluation, Guess, RoundStatus
from .modifiers import ModifierMode, Modifiers
from .normalize import normalize_name
from .session import GameSession

__all__ = [
    "Country",
    "CountryCatalog",
    "Direction",
    "Evaluation",
    "GameRound",
    "GameSession",
    "Guess",
    "GuessOutcome",
    "InvalidCatalogDataError",
    "ModifierMode",
    "Modifiers",
    "RoundAlreadyWonError",
    "RoundStatus",
    "UnknownCountryError",
    "WorldleError",
    "evaluate",
    "load_default_catalog",
    "normalize_name",
    "resolve_country",
    "submit_guess",
]
