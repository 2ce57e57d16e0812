"""Public package interface for fuzzscore."""

from .config import (
    AppConfig,
    EngineConfig,
    OptionsConfig,
    WeightingConfig,
    coerce_config,
    load_config,
)
from .distance import levenshtein_distance
from .errors import InvalidInput, ScoringError
from .fuzz import (
    partial_ratio,
    ratio,
    score,
    token_set_partial_ratio,
    token_set_ratio,
    token_sort_partial_ratio,
    token_sort_ratio,
    weighted_ratio,
)
from .preprocess import StringOptions, prepare
from .ratios import Scorer
from .scorer import FuzzyScorer

__all__ = [
    "AppConfig",
    "EngineConfig",
    "OptionsConfig",
    "WeightingConfig",
    "coerce_config",
    "load_config",
    "levenshtein_distance",
    "InvalidInput",
    "ScoringError",
    "partial_ratio",
    "ratio",
    "score",
    "token_set_partial_ratio",
    "token_set_ratio",
    "token_sort_partial_ratio",
    "token_sort_ratio",
    "weighted_ratio",
    "StringOptions",
    "prepare",
    "Scorer",
    "FuzzyScorer",
]
