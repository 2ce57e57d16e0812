from __future__ import annotations

from .app import app

# Import command modules so they register with the shared Typer application.
from . import score as _score  # noqa: F401

__all__ = ["app"]
