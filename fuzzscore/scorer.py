from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from .config import (
    AppConfig,
    EngineConfig,
    OptionsConfig,
    WeightingConfig,
    coerce_config,
)
from .distance import get_distance_function
from .preprocess import StringOptions, combine_options, prepare_with_options
from .ratios import Scorer, score as dispatch_score


logger = logging.getLogger(__name__)


class FuzzyScorer:
    """Pairwise string scorer bound to a distance backend and weighting."""

    def __init__(
        self,
        *,
        engine: EngineConfig | Mapping[str, Any] | None = None,
        weighting: WeightingConfig | Mapping[str, Any] | None = None,
        options: OptionsConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self.engine = coerce_config(engine, EngineConfig, "engine")
        self.weighting = coerce_config(weighting, WeightingConfig, "weighting")
        self.default_options = coerce_config(options, OptionsConfig, "options").to_flags()
        self._distance = get_distance_function(self.engine.backend)

    @classmethod
    def from_config(cls, config: AppConfig) -> "FuzzyScorer":
        """Factory that assembles a scorer from an :class:`AppConfig`."""

        scorer = cls(
            engine=config.engine,
            weighting=config.weighting,
            options=config.options,
        )
        logger.debug(
            "Initialized scorer with backend=%s default_options=%s",
            scorer.engine.backend,
            scorer.default_options,
        )
        return scorer

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(backend={self.engine.backend!r}, "
            f"options={self.default_options!r})"
        )

    def prepare_pair(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> Tuple[str, str]:
        """Normalize both inputs; fails before any scoring on bad input."""

        flags = self.default_options | combine_options(options)
        return prepare_with_options(s1, flags), prepare_with_options(s2, flags)

    def score(
        self,
        s1: Optional[str],
        s2: Optional[str],
        scorer: Scorer | str = Scorer.WEIGHTED,
        *options: StringOptions,
    ) -> int:
        prepared1, prepared2 = self.prepare_pair(s1, s2, *options)
        return dispatch_score(
            prepared1,
            prepared2,
            Scorer(scorer),
            weights=self.weighting,
            distance=self._distance,
        )

    def ratio(self, s1: Optional[str], s2: Optional[str], *options: StringOptions) -> int:
        return self.score(s1, s2, Scorer.SIMPLE, *options)

    def partial_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.PARTIAL, *options)

    def token_sort_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.TOKEN_SORT, *options)

    def token_sort_partial_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.TOKEN_SORT_PARTIAL, *options)

    def token_set_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.TOKEN_SET, *options)

    def token_set_partial_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.TOKEN_SET_PARTIAL, *options)

    def weighted_ratio(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> int:
        return self.score(s1, s2, Scorer.WEIGHTED, *options)

    def score_all(
        self, s1: Optional[str], s2: Optional[str], *options: StringOptions
    ) -> dict[str, int]:
        """Run every scorer on one prepared pair, keyed by scorer name."""

        prepared1, prepared2 = self.prepare_pair(s1, s2, *options)
        return {
            member.value: dispatch_score(
                prepared1,
                prepared2,
                member,
                weights=self.weighting,
                distance=self._distance,
            )
            for member in Scorer
        }


__all__ = ["FuzzyScorer"]
