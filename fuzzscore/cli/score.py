from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from tabulate import tabulate

from fuzzscore.errors import InvalidInput
from fuzzscore.scorer import FuzzyScorer

from .app import app, logger
from .common import (
    CaseSensitiveOption,
    ConfigOption,
    PreserveWhitespaceOption,
    ScorerOption,
    load_app_config,
    options_from_flags,
)


def _build_scorer(config: Optional[Path]) -> FuzzyScorer:
    config_obj = load_app_config(config)
    if config is not None:
        logger.info("Loaded configuration from %s", config)
    return FuzzyScorer.from_config(config_obj)


@app.command("score")
def score_command(
    first: str = typer.Argument(..., help="First string to compare."),
    second: str = typer.Argument(..., help="Second string to compare."),
    scorer: str = ScorerOption,
    case_sensitive: bool = CaseSensitiveOption,
    preserve_whitespace: bool = PreserveWhitespaceOption,
    config: Optional[Path] = ConfigOption,
) -> None:
    """Print the similarity score of two strings."""

    fuzzy = _build_scorer(config)
    flags = options_from_flags(case_sensitive, preserve_whitespace)
    try:
        result = fuzzy.score(first, second, scorer, flags)
    except InvalidInput as exc:
        logger.error("Cannot score input: %s", exc)
        raise typer.Exit(code=1) from exc

    logger.debug("Scored pair with %s using %r", scorer, fuzzy)
    typer.echo(str(result))


@app.command("compare")
def compare_command(
    first: str = typer.Argument(..., help="First string to compare."),
    second: str = typer.Argument(..., help="Second string to compare."),
    case_sensitive: bool = CaseSensitiveOption,
    preserve_whitespace: bool = PreserveWhitespaceOption,
    config: Optional[Path] = ConfigOption,
) -> None:
    """Print every scorer's result for two strings as a table."""

    fuzzy = _build_scorer(config)
    flags = options_from_flags(case_sensitive, preserve_whitespace)
    try:
        results = fuzzy.score_all(first, second, flags)
    except InvalidInput as exc:
        logger.error("Cannot score input: %s", exc)
        raise typer.Exit(code=1) from exc

    rows = [{"Scorer": name, "Score": value} for name, value in results.items()]
    typer.echo(tabulate(rows, headers="keys", tablefmt="rounded_grid", showindex=False))
