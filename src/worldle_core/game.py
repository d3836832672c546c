"""Round state: the target country and the append-only guess history."""

from __future__ import annotations

from dataclasses import dataclass, field

from worldle_core.errors import RoundAlreadyWonError
from worldle_core.evaluator import evaluate
from worldle_core.models import Country, Guess, RoundStatus


@dataclass(slots=True)
class GameRound:
    """One play session targeting a single country until it is named."""

    target: Country
    _guesses: list[Guess] = field(default_factory=list, repr=False)

    @property
    def guesses(self) -> tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def is_won(self) -> bool:
        return bool(self._guesses) and self._guesses[-1].distance == 0

    @property
    def status(self) -> RoundStatus:
        return RoundStatus.won if self.is_won else RoundStatus.active

    def append(self, guess: Guess) -> None:
        self._guesses.append(guess)


@dataclass(frozen=True, slots=True)
class GuessOutcome:
    guess: Guess
    won_now: bool


def submit_guess(round_: GameRound, guessed: Country, *, guess_text: str | None = None) -> GuessOutcome:
    """Evaluate ``guessed`` against the round target and record it.

    ``won_now`` is true only for the guess that moves the round from active to won.
    """
    if round_.is_won:
        raise RoundAlreadyWonError(f"Round for {round_.target.code} is already won")

    evaluation = evaluate(guessed, round_.target)
    guess = Guess(
        raw_text=guess_text if guess_text is not None else guessed.name,
        distance=evaluation.distance,
        direction=evaluation.direction,
    )
    round_.append(guess)
    return GuessOutcome(guess=guess, won_now=round_.is_won)
