"""Levenshtein distance and the distance-derived similarity ratio."""

from __future__ import annotations

from typing import Callable, Dict

from rapidfuzz.distance import Levenshtein

DistanceFunc = Callable[[str, str], int]


def levenshtein_distance(a: str, b: str) -> int:
    """Return the unit-cost Levenshtein distance between ``a`` and ``b``.

    Only two rows of the DP table are kept, sized by the shorter string.
    """

    if a == b:
        return 0

    # Shared prefix and suffix never contribute edits.
    start = 0
    limit = min(len(a), len(b))
    while start < limit and a[start] == b[start]:
        start += 1
    end_a, end_b = len(a), len(b)
    while end_a > start and end_b > start and a[end_a - 1] == b[end_b - 1]:
        end_a -= 1
        end_b -= 1
    a = a[start:end_a]
    b = b[start:end_b]

    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            insert_cost = current[j - 1] + 1
            delete_cost = previous[j] + 1
            substitute_cost = previous[j - 1] + (char_a != char_b)
            current.append(min(insert_cost, delete_cost, substitute_cost))
        previous = current
    return previous[-1]


def rapidfuzz_distance(a: str, b: str) -> int:
    return int(Levenshtein.distance(a, b))


_BACKENDS: Dict[str, DistanceFunc] = {
    "python": levenshtein_distance,
    "rapidfuzz": rapidfuzz_distance,
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def get_distance_function(backend: str) -> DistanceFunc:
    """Resolve a configured backend name to its distance function."""

    try:
        return _BACKENDS[backend]
    except KeyError as exc:
        choices = ", ".join(available_backends())
        raise ValueError(
            f"Unknown distance backend {backend!r}; expected one of: {choices}"
        ) from exc


def ratio_from_distance(distance: int, total_length: int) -> int:
    """Convert an edit distance into a 0-100 score, rounding half up."""

    if total_length == 0:
        return 100
    matched = total_length - distance
    return (200 * matched + total_length) // (2 * total_length)


def ratio(a: str, b: str, *, distance: DistanceFunc = levenshtein_distance) -> int:
    """Return ``round(100 * (len(a) + len(b) - d) / (len(a) + len(b)))``."""

    total = len(a) + len(b)
    if total == 0:
        return 100
    return ratio_from_distance(distance(a, b), total)


__all__ = [
    "DistanceFunc",
    "available_backends",
    "get_distance_function",
    "levenshtein_distance",
    "rapidfuzz_distance",
    "ratio",
    "ratio_from_distance",
]
