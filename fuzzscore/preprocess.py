"""Input preparation and tokenization helpers for the ratio scorers."""

from __future__ import annotations

import enum
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidInput


class StringOptions(enum.Flag):
    """Preprocessing switches applied before scoring."""

    NONE = 0
    CASE_SENSITIVE = enum.auto()
    PRESERVE_WHITESPACE = enum.auto()


def combine_options(options: Iterable[StringOptions]) -> StringOptions:
    """Fold any number of option flags into a single flag value."""

    combined = StringOptions.NONE
    for option in options:
        if not isinstance(option, StringOptions):
            raise TypeError(f"Expected StringOptions, got {type(option)!r}")
        combined |= option
    return combined


def prepare(
    raw: Optional[str],
    case_sensitive: bool = False,
    preserve_whitespace: bool = False,
) -> str:
    """Return ``raw`` case-folded and trimmed according to the flags.

    Raises :class:`InvalidInput` for ``None``, ``""`` and strings that
    become empty once trimmed.
    """

    if raw is None:
        raise InvalidInput("Cannot score a missing string")
    if not isinstance(raw, str):
        raise TypeError(f"Expected a string, got {type(raw)!r}")
    if not raw:
        raise InvalidInput("Cannot score an empty string")

    value = raw
    if not case_sensitive:
        value = value.lower()
    if not preserve_whitespace:
        value = value.strip()
        if not value:
            raise InvalidInput("Cannot score a whitespace-only string")
    return value


def prepare_with_options(raw: Optional[str], options: StringOptions) -> str:
    return prepare(
        raw,
        case_sensitive=bool(options & StringOptions.CASE_SENSITIVE),
        preserve_whitespace=bool(options & StringOptions.PRESERVE_WHITESPACE),
    )


def tokenize(value: str) -> List[str]:
    """Split ``value`` on runs of whitespace, dropping empty tokens."""

    return value.split()


def sort_and_join(tokens: Iterable[str]) -> str:
    return " ".join(sorted(tokens)).strip()


def unique_sorted(tokens: Iterable[str]) -> List[str]:
    """Sort ``tokens`` ordinally and drop adjacent duplicates."""

    result: List[str] = []
    for token in sorted(tokens):
        if not result or result[-1] != token:
            result.append(token)
    return result


def partition_tokens(
    left: List[str], right: List[str]
) -> Tuple[List[str], List[str], List[str]]:
    """Split two sorted, duplicate-free token lists.

    Returns ``(common, only_left, only_right)``, each still sorted.
    """

    common: List[str] = []
    only_left: List[str] = []
    only_right: List[str] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a == b:
            common.append(a)
            i += 1
            j += 1
        elif a < b:
            only_left.append(a)
            i += 1
        else:
            only_right.append(b)
            j += 1
    only_left.extend(left[i:])
    only_right.extend(right[j:])
    return common, only_left, only_right


__all__ = [
    "StringOptions",
    "combine_options",
    "partition_tokens",
    "prepare",
    "prepare_with_options",
    "sort_and_join",
    "tokenize",
    "unique_sorted",
]
