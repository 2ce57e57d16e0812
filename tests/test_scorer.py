import itertools

import pytest

from fuzzscore import (
    AppConfig,
    EngineConfig,
    FuzzyScorer,
    OptionsConfig,
    Scorer,
    StringOptions,
    WeightingConfig,
)

PAIRS = [
    ("new york mets", "new york meats"),
    ("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear"),
    ("test", "this is a test!"),
    ("mariners vs angels", "angels vs mariners"),
]


def test_default_scorer_uses_python_backend() -> None:
    scorer = FuzzyScorer()
    assert scorer.engine.backend == "python"
    assert scorer.default_options == StringOptions.NONE
    assert "python" in repr(scorer)


@pytest.mark.parametrize("member", list(Scorer))
def test_rapidfuzz_backend_gives_same_scores(member: Scorer) -> None:
    default = FuzzyScorer()
    rapid = FuzzyScorer.from_config(AppConfig(engine=EngineConfig(backend="rapidfuzz")))
    for a, b in PAIRS:
        assert default.score(a, b, member) == rapid.score(a, b, member)


def test_configured_options_apply_to_every_call() -> None:
    scorer = FuzzyScorer.from_config(
        AppConfig(options=OptionsConfig(case_sensitive=True))
    )
    assert scorer.ratio("A", "a") == 50
    assert FuzzyScorer().ratio("A", "a") == 100


def test_call_options_extend_configured_options() -> None:
    scorer = FuzzyScorer(options=OptionsConfig(case_sensitive=True))
    assert scorer.ratio(" A", "A", StringOptions.PRESERVE_WHITESPACE) < 100
    assert scorer.ratio(" A", "A") == 100


def test_configured_weighting_changes_weighted_ratio() -> None:
    generous = FuzzyScorer(weighting=WeightingConfig(partial_scale=1.0))
    assert FuzzyScorer().weighted_ratio("test", "this is a test!") == 90
    assert generous.weighted_ratio("test", "this is a test!") == 100


def test_methods_match_score_dispatch() -> None:
    scorer = FuzzyScorer()
    methods = {
        Scorer.SIMPLE: scorer.ratio,
        Scorer.PARTIAL: scorer.partial_ratio,
        Scorer.TOKEN_SORT: scorer.token_sort_ratio,
        Scorer.TOKEN_SORT_PARTIAL: scorer.token_sort_partial_ratio,
        Scorer.TOKEN_SET: scorer.token_set_ratio,
        Scorer.TOKEN_SET_PARTIAL: scorer.token_set_partial_ratio,
        Scorer.WEIGHTED: scorer.weighted_ratio,
    }
    for (member, method), (a, b) in itertools.product(methods.items(), PAIRS):
        assert method(a, b) == scorer.score(a, b, member)


def test_score_all_reports_every_scorer() -> None:
    results = FuzzyScorer().score_all("order test", "test order")
    assert list(results) == [member.value for member in Scorer]
    assert results["token_sort_ratio"] == 100
    assert results["token_set_ratio"] == 100


def test_scorer_accepts_mapping_sections() -> None:
    scorer = FuzzyScorer(
        engine={"backend": "rapidfuzz"},
        weighting={"partial_scale": 1.0},
        options={"case_sensitive": True},
    )
    assert scorer.engine == EngineConfig(backend="rapidfuzz")
    assert scorer.weighting.partial_scale == 1.0
    assert scorer.default_options == StringOptions.CASE_SENSITIVE
    assert scorer.weighted_ratio("test", "this is a test!") == 100
    assert scorer.ratio("A", "a") == 50


def test_scorer_rejects_invalid_sections() -> None:
    with pytest.raises(TypeError, match="section 'weighting'"):
        FuzzyScorer(weighting=0.9)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Unknown distance backend"):
        FuzzyScorer(engine={"backend": "numba"})
