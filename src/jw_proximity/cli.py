from __future__ import annotations

"""CLI entrypoint for jw-proximity."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import CONFIG_ENV_VAR, DEFAULT_SETTINGS, load_settings
from .scoring import get_comparer, proximity
from .utils.text import prepare

app = typer.Typer(help="Jaro-Winkler proximity between two strings.")
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def compare(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
    show_distance: bool = typer.Option(
        False, "--distance", "-d", help="Also print the Jaro-Winkler distance."
    ),
    comparer: str = typer.Option(
        "exact", "--comparer", "-c", help="Character equality to use."
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar=CONFIG_ENV_VAR,
        help="YAML file overriding the Winkler constants.",
    ),
    raw: bool = typer.Option(
        False, "--raw", help="Skip uppercasing and accent stripping."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    _configure_logging(verbose)

    try:
        equals = get_comparer(comparer)
    except ValueError as exc:
        console.print(f"[red]Invalid comparer[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    settings = DEFAULT_SETTINGS
    if config is not None:
        try:
            settings = load_settings(config)
        except (FileNotFoundError, ValueError) as exc:
            console.print(f"[red]Invalid configuration[/red]: {escape(str(exc))}")
            raise typer.Exit(code=1)

    if not raw:
        first = prepare(first)
        second = prepare(second)
    logger.debug("Comparing %r with %r using %s", first, second, comparer)

    score = proximity(first, second, equals, settings=settings)
    console.print(f"Proximity: {score}", highlight=False)
    if show_distance:
        console.print(f"Distance: {1.0 - score}", highlight=False)


if __name__ == "__main__":  # pragma: no cover
    app()
