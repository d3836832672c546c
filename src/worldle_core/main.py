"""CLI startup entrypoint for Worldle Core."""

from __future__ import annotations

import logging
import random

import typer
from rich import print
from rich.table import Table

from worldle_core.catalog import CountryCatalog, load_default_catalog
from worldle_core.config import settings
from worldle_core.errors import WorldleError
from worldle_core.evaluator import evaluate as evaluate_guess
from worldle_core.formatting import (
    country_image_path,
    direction_arrow,
    format_distance,
    google_maps_url,
    proximity_percent,
)
from worldle_core.models import Country
from worldle_core.modifiers import Modifiers
from worldle_core.session import GameSession

app = typer.Typer(help="Worldle guess resolution engine")

SHOW_IMAGE_COMMAND = ":show"
CANCEL_ROTATION_COMMAND = ":unrotate"


@app.callback()
def main() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s %(message)s")


def _build_catalog() -> CountryCatalog:
    if settings.catalog_path:
        return CountryCatalog.from_directory(settings.catalog_path)
    return load_default_catalog()


def _pick_target(catalog: CountryCatalog, code: str | None) -> Country:
    if code is None:
        return random.choice(catalog.countries)
    try:
        return catalog.get(code)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--target") from None


def _guess_table(session: GameSession, unit: str) -> Table:
    table = Table("#", "Guess", "Distance", "Direction", "%")
    for index, guess in enumerate(session.guesses, start=1):
        table.add_row(
            str(index),
            guess.raw_text,
            format_distance(guess.distance, unit),
            direction_arrow(guess.direction),
            f"{proximity_percent(guess.distance)}%",
        )
    return table


def _describe_image(session: GameSession) -> dict:
    modifiers = session.modifiers
    ended = session.is_won
    hint = None
    if modifiers.can_reveal_image(ended):
        hint = SHOW_IMAGE_COMMAND
    elif modifiers.can_cancel_rotation(ended):
        hint = CANCEL_ROTATION_COMMAND
    return {
        "image": None if modifiers.image_hidden(ended) else country_image_path(session.target),
        "rotated": modifiers.rotation_applied(ended),
        "hint": hint,
    }


@app.command("settings")
def show_settings() -> None:
    """Show effective configuration."""
    print(settings.model_dump())


@app.command()
def countries(language: str = typer.Option(None, help="Language code for names, e.g. fr")) -> None:
    """List catalog countries with their localized names."""
    catalog = _build_catalog()
    lang = language or settings.language
    for country in catalog:
        print(f"{country.code}\t{catalog.localized_name(country, lang)}")


@app.command()
def resolve(
    text: str,
    language: str = typer.Option(None, help="Language code for names, e.g. fr"),
) -> None:
    """Match free text against the catalog."""
    catalog = _build_catalog()
    lang = language or settings.language
    try:
        country = catalog.resolve(text, lang)
    except WorldleError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print({"code": country.code, "name": catalog.localized_name(country, lang)})


@app.command()
def evaluate(
    guess: str,
    target: str,
    language: str = typer.Option(None, help="Language code for names, e.g. fr"),
    unit: str = typer.Option(None, help="km or miles"),
) -> None:
    """Distance and direction from GUESS to TARGET."""
    catalog = _build_catalog()
    lang = language or settings.language
    try:
        guessed = catalog.resolve(guess, lang)
        goal = catalog.resolve(target, lang)
    except WorldleError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    result = evaluate_guess(guessed, goal)
    print(
        {
            "guess": guessed.code,
            "target": goal.code,
            "distance_meters": result.distance,
            "distance": format_distance(result.distance, unit or settings.distance_unit),
            "direction": result.direction.value,
            "arrow": direction_arrow(result.direction),
            "proximity": proximity_percent(result.distance),
        }
    )


@app.command()
def play(
    target: str = typer.Option(None, help="Target country code; random when omitted"),
    language: str = typer.Option(None, help="Language code for names, e.g. fr"),
    unit: str = typer.Option(None, help="km or miles"),
    no_image_mode: bool = typer.Option(None, help="Hide the country image until revealed"),
    rotation_mode: bool = typer.Option(None, help="Randomly rotate the country image"),
) -> None:
    """Play one round in the terminal until the target is named."""
    catalog = _build_catalog()
    session = GameSession(
        catalog,
        _pick_target(catalog, target),
        language=language or settings.language,
        modifiers=Modifiers.from_flags(
            no_image_mode=settings.no_image_mode if no_image_mode is None else no_image_mode,
            rotation_mode=settings.rotation_mode if rotation_mode is None else rotation_mode,
        ),
    )
    display_unit = unit or settings.distance_unit
    print(_describe_image(session))

    while not session.is_won:
        text = typer.prompt("Country")
        if text.strip() == SHOW_IMAGE_COMMAND:
            session.reveal_image()
            print(_describe_image(session))
            continue
        if text.strip() == CANCEL_ROTATION_COMMAND:
            session.cancel_rotation()
            print(_describe_image(session))
            continue

        try:
            session.submit(text)
        except WorldleError as exc:
            print(f"[red]{exc}[/red]")
            continue
        print(_guess_table(session, display_unit))

    name = session.localized_target_name()
    print(f"[green]Well done![/green] {name} in {len(session.guesses)} guesses")
    print(google_maps_url(name, session.target, session.language))


if __name__ == "__main__":
    app()
