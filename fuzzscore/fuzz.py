"""Module-level scoring functions using the default configuration.

Each function prepares both strings (lowercase and trim unless the matching
:class:`StringOptions` flag is passed) and returns an integer in ``[0, 100]``.
An empty or missing string raises :class:`fuzzscore.errors.InvalidInput`.
"""

from __future__ import annotations

from typing import Optional

from .preprocess import StringOptions
from .ratios import Scorer
from .scorer import FuzzyScorer

_DEFAULT_SCORER = FuzzyScorer()


def ratio(s1: Optional[str], s2: Optional[str], *options: StringOptions) -> int:
    """Levenshtein similarity of the two strings."""

    return _DEFAULT_SCORER.ratio(s1, s2, *options)


def partial_ratio(s1: Optional[str], s2: Optional[str], *options: StringOptions) -> int:
    """Best match of the shorter string against windows of the longer one."""

    return _DEFAULT_SCORER.partial_ratio(s1, s2, *options)


def token_sort_ratio(
    s1: Optional[str], s2: Optional[str], *options: StringOptions
) -> int:
    """Simple ratio after sorting the tokens of each string."""

    return _DEFAULT_SCORER.token_sort_ratio(s1, s2, *options)


def token_sort_partial_ratio(
    s1: Optional[str], s2: Optional[str], *options: StringOptions
) -> int:
    """Partial ratio after sorting the tokens of each string."""

    return _DEFAULT_SCORER.token_sort_partial_ratio(s1, s2, *options)


def token_set_ratio(s1: Optional[str], s2: Optional[str], *options: StringOptions) -> int:
    """Simple ratio over token intersection and remainder strings."""

    return _DEFAULT_SCORER.token_set_ratio(s1, s2, *options)


def token_set_partial_ratio(
    s1: Optional[str], s2: Optional[str], *options: StringOptions
) -> int:
    """Partial ratio over token intersection and remainder strings."""

    return _DEFAULT_SCORER.token_set_partial_ratio(s1, s2, *options)


def weighted_ratio(s1: Optional[str], s2: Optional[str], *options: StringOptions) -> int:
    """Best of the other scorers under length-aware weighting."""

    return _DEFAULT_SCORER.weighted_ratio(s1, s2, *options)


def score(
    s1: Optional[str],
    s2: Optional[str],
    scorer: Scorer | str = Scorer.WEIGHTED,
    *options: StringOptions,
) -> int:
    return _DEFAULT_SCORER.score(s1, s2, scorer, *options)


__all__ = [
    "partial_ratio",
    "ratio",
    "score",
    "token_set_partial_ratio",
    "token_set_ratio",
    "token_sort_partial_ratio",
    "token_sort_ratio",
    "weighted_ratio",
]
