"""Ratio scorers operating on already-prepared strings.

Every scorer here expects its inputs to have gone through
:func:`fuzzscore.preprocess.prepare`; the public entry points in
:mod:`fuzzscore.fuzz` take care of that.
"""

from __future__ import annotations

import enum
import math
from typing import Callable, List, Optional, Tuple

from .config import WeightingConfig
from .distance import DistanceFunc, levenshtein_distance, ratio
from .preprocess import partition_tokens, sort_and_join, tokenize, unique_sorted

RatioFunc = Callable[..., int]

_DEFAULT_WEIGHTS = WeightingConfig()


class Scorer(str, enum.Enum):
    """Closed set of ratio variants exposed by the package."""

    SIMPLE = "ratio"
    PARTIAL = "partial_ratio"
    TOKEN_SORT = "token_sort_ratio"
    TOKEN_SORT_PARTIAL = "token_sort_partial_ratio"
    TOKEN_SET = "token_set_ratio"
    TOKEN_SET_PARTIAL = "token_set_partial_ratio"
    WEIGHTED = "weighted_ratio"


def simple_ratio(
    s1: str, s2: str, *, distance: DistanceFunc = levenshtein_distance
) -> int:
    return ratio(s1, s2, distance=distance)


def partial_ratio(
    s1: str, s2: str, *, distance: DistanceFunc = levenshtein_distance
) -> int:
    """Score the shorter string against its best-aligned window in the longer."""

    if len(s1) >= len(s2):
        longer, shorter = s1, s2
    else:
        longer, shorter = s2, s1

    width = len(shorter)
    if width == 0:
        return 100

    best = 0
    for start in range(len(longer) - width + 1):
        window = longer[start : start + width]
        score = ratio(shorter, window, distance=distance)
        if score > best:
            best = score
            if best == 100:
                break
    return best


def _tokenless_score(tokens1: List[str], tokens2: List[str]) -> int:
    # Two blank strings are identical; blank against text shares nothing.
    return 100 if not tokens1 and not tokens2 else 0


def token_sort_ratio(
    s1: str,
    s2: str,
    inner: RatioFunc = simple_ratio,
    *,
    distance: DistanceFunc = levenshtein_distance,
) -> int:
    """Apply ``inner`` after sorting each string's tokens alphabetically."""

    tokens1, tokens2 = tokenize(s1), tokenize(s2)
    if not tokens1 or not tokens2:
        return _tokenless_score(tokens1, tokens2)
    return inner(sort_and_join(tokens1), sort_and_join(tokens2), distance=distance)


def _join_parts(*parts: str) -> str:
    return " ".join(part for part in parts if part).strip()


def token_set_pairs(s1: str, s2: str) -> List[Tuple[str, str]]:
    """Build the comparison string pairs used by :func:`token_set_ratio`.

    Pairs with an empty side are left out, so the result is empty when
    either string has no tokens.
    """

    common, only1, only2 = partition_tokens(
        unique_sorted(tokenize(s1)), unique_sorted(tokenize(s2))
    )
    intersection = sort_and_join(common)
    combined1 = _join_parts(intersection, sort_and_join(only1))
    combined2 = _join_parts(intersection, sort_and_join(only2))

    pairs = [
        (intersection, combined1),
        (intersection, combined2),
        (combined1, combined2),
    ]
    return [(left, right) for left, right in pairs if left and right]


def token_set_ratio(
    s1: str,
    s2: str,
    inner: RatioFunc = simple_ratio,
    *,
    distance: DistanceFunc = levenshtein_distance,
) -> int:
    """Best ``inner`` score over the intersection/remainder comparison strings."""

    pairs = token_set_pairs(s1, s2)
    if not pairs:
        return _tokenless_score(tokenize(s1), tokenize(s2))
    return max(inner(left, right, distance=distance) for left, right in pairs)


def _round_score(value: float) -> int:
    return max(0, min(100, int(math.floor(value + 0.5))))


def weighted_ratio(
    s1: str,
    s2: str,
    weights: Optional[WeightingConfig] = None,
    *,
    distance: DistanceFunc = levenshtein_distance,
) -> int:
    """Combine the other scorers, favouring partial matches for uneven lengths."""

    w = weights or _DEFAULT_WEIGHTS
    simple = simple_ratio(s1, s2, distance=distance)

    longest = max(len(s1), len(s2))
    if longest == 0:
        return simple
    length_ratio = min(len(s1), len(s2)) / longest

    if length_ratio >= w.length_ratio_threshold:
        token_sort = token_sort_ratio(s1, s2, simple_ratio, distance=distance)
        if token_sort > simple:
            blended = w.simple_weight * simple + w.token_sort_weight * token_sort
            return _round_score(max(simple, blended))
        return _round_score(simple)

    scale = w.partial_scale
    if length_ratio < w.long_length_ratio:
        scale = w.long_partial_scale

    candidates = [
        float(simple),
        partial_ratio(s1, s2, distance=distance) * scale,
        token_sort_ratio(s1, s2, partial_ratio, distance=distance)
        * w.unbase_scale
        * scale,
        token_set_ratio(s1, s2, partial_ratio, distance=distance)
        * w.unbase_scale
        * scale,
    ]
    return _round_score(max(candidates))


def score(
    s1: str,
    s2: str,
    scorer: Scorer = Scorer.WEIGHTED,
    *,
    weights: Optional[WeightingConfig] = None,
    distance: DistanceFunc = levenshtein_distance,
) -> int:
    """Dispatch to the scorer named by ``scorer``."""

    scorer = Scorer(scorer)
    if scorer is Scorer.SIMPLE:
        return simple_ratio(s1, s2, distance=distance)
    if scorer is Scorer.PARTIAL:
        return partial_ratio(s1, s2, distance=distance)
    if scorer is Scorer.TOKEN_SORT:
        return token_sort_ratio(s1, s2, simple_ratio, distance=distance)
    if scorer is Scorer.TOKEN_SORT_PARTIAL:
        return token_sort_ratio(s1, s2, partial_ratio, distance=distance)
    if scorer is Scorer.TOKEN_SET:
        return token_set_ratio(s1, s2, simple_ratio, distance=distance)
    if scorer is Scorer.TOKEN_SET_PARTIAL:
        return token_set_ratio(s1, s2, partial_ratio, distance=distance)
    return weighted_ratio(s1, s2, weights, distance=distance)


__all__ = [
    "RatioFunc",
    "Scorer",
    "partial_ratio",
    "score",
    "simple_ratio",
    "token_set_pairs",
    "token_set_ratio",
    "token_sort_ratio",
    "weighted_ratio",
]
