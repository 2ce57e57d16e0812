from __future__ import annotations


class ScoringError(ValueError):
    """Base error for similarity scoring failures."""


class InvalidInput(ScoringError):
    """Raised when a string cannot be prepared for scoring."""
