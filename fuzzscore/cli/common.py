from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from fuzzscore.config import AppConfig, OptionsConfig, load_config
from fuzzscore.preprocess import StringOptions
from fuzzscore.ratios import Scorer


def _scorer_callback(value: Optional[str]) -> Scorer:
    if value is None:
        return Scorer.WEIGHTED
    try:
        return Scorer(str(value).strip())
    except ValueError as exc:
        choices = ", ".join(member.value for member in Scorer)
        raise typer.BadParameter(
            f"Unknown scorer {value!r}; expected one of: {choices}"
        ) from exc


ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    resolve_path=True,
    path_type=Path,
    help="Optional TOML configuration file with engine, weighting and options tables.",
)

ScorerOption = typer.Option(
    Scorer.WEIGHTED.value,
    "--scorer",
    "-s",
    callback=_scorer_callback,
    help="Scorer to apply: " + ", ".join(member.value for member in Scorer),
)

CaseSensitiveOption = typer.Option(
    False, "--case-sensitive", help="Skip lowercasing both strings."
)

PreserveWhitespaceOption = typer.Option(
    False, "--preserve-whitespace", help="Skip trimming both strings."
)


def load_app_config(config_path: Optional[Path]) -> AppConfig:
    if config_path is None:
        return AppConfig()
    return load_config(config_path.resolve())


def options_from_flags(case_sensitive: bool, preserve_whitespace: bool) -> StringOptions:
    return OptionsConfig(
        case_sensitive=case_sensitive,
        preserve_whitespace=preserve_whitespace,
    ).to_flags()


__all__ = [
    "AppConfig",
    "CaseSensitiveOption",
    "ConfigOption",
    "PreserveWhitespaceOption",
    "ScorerOption",
    "load_app_config",
    "options_from_flags",
]
