from __future__ import annotations

import logging
import os
from typing import Optional

import typer

from fuzzscore.utils import configure_logging


LOGGER_NAME = "fuzzscore.cli"
PACKAGE_LOGGER = "fuzzscore"
DEFAULT_LOG_LEVEL = logging.WARNING


def _resolve_log_level(log_level: Optional[str]) -> int | str:
    """Pick the explicit option, then ``LOG_LEVEL``, then the quiet default."""

    if log_level:
        return log_level
    env_level = os.getenv("LOG_LEVEL")
    return env_level if env_level else DEFAULT_LOG_LEVEL


def apply_log_level(log_level: Optional[str]) -> int:
    """Configure root logging and pin the ``fuzzscore`` loggers to the level.

    ``basicConfig`` is a no-op once handlers exist, so the package logger is
    set explicitly to keep repeated invocations in one process consistent.
    """

    level = configure_logging(level=_resolve_log_level(log_level))
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


def create_app() -> typer.Typer:
    app = typer.Typer(help="Fuzzy string similarity scores between two strings")

    @app.callback()
    def _configure_cli(
        log_level: Optional[str] = typer.Option(None, help="Python logging level"),
    ) -> None:
        """Configure logging before running any command."""

        apply_log_level(log_level)

    return app


logger = logging.getLogger(LOGGER_NAME)

app = create_app()

__all__ = ["app", "apply_log_level", "logger"]
