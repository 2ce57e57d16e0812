import itertools

import pytest

import fuzzscore
from fuzzscore import InvalidInput, Scorer, StringOptions

ENTRY_POINTS = [
    fuzzscore.ratio,
    fuzzscore.partial_ratio,
    fuzzscore.token_sort_ratio,
    fuzzscore.token_sort_partial_ratio,
    fuzzscore.token_set_ratio,
    fuzzscore.token_set_partial_ratio,
    fuzzscore.weighted_ratio,
]

CORPUS = [
    "new york mets",
    "New York Meats",
    "the new york mets vs the atlanta braves",
    "fuzzy wuzzy was a bear",
    "wuzzy fuzzy was a bear",
    "kitten",
    "sitting",
    "a",
    "this is a test!",
    "test",
]


def test_case_folding_by_default() -> None:
    assert fuzzscore.ratio("Hello World", "hello world") == 100
    assert fuzzscore.ratio("Hello World", "hello world", StringOptions.CASE_SENSITIVE) == 91


def test_trimming_by_default() -> None:
    assert fuzzscore.ratio("  hello ", "hello") == 100
    assert fuzzscore.ratio("  hello ", "hello", StringOptions.PRESERVE_WHITESPACE) == 77


def test_options_can_be_combined() -> None:
    combined = StringOptions.CASE_SENSITIVE | StringOptions.PRESERVE_WHITESPACE
    separate = fuzzscore.ratio(
        " Hello", "hello", StringOptions.CASE_SENSITIVE, StringOptions.PRESERVE_WHITESPACE
    )
    assert fuzzscore.ratio(" Hello", "hello", combined) == separate
    assert separate < 100


def test_token_order_invariance() -> None:
    assert fuzzscore.token_sort_ratio("order test", "test order") == 100


def test_partial_containment() -> None:
    partial = fuzzscore.partial_ratio("test", "this is a test!")
    simple = fuzzscore.ratio("test", "this is a test!")
    assert partial >= 90
    assert simple < partial - 40


def test_token_set_redundancy() -> None:
    assert fuzzscore.token_set_ratio("mariners vs angels", "angels vs mariners") == 100


def test_kitten_sitting() -> None:
    assert fuzzscore.levenshtein_distance("kitten", "sitting") == 3
    assert fuzzscore.ratio("kitten", "sitting") == 77


@pytest.mark.parametrize("func", ENTRY_POINTS)
@pytest.mark.parametrize("bad", [None, "", "   "])
def test_entry_points_reject_invalid_input(func, bad) -> None:
    with pytest.raises(InvalidInput):
        func(bad, "valid")
    with pytest.raises(InvalidInput):
        func("valid", bad)


@pytest.mark.parametrize("func", ENTRY_POINTS)
def test_reflexivity(func) -> None:
    for text in CORPUS:
        assert func(text, text) == 100


@pytest.mark.parametrize("func", ENTRY_POINTS)
def test_scores_are_ints_in_range(func) -> None:
    for a, b in itertools.product(CORPUS, repeat=2):
        result = func(a, b)
        assert isinstance(result, int)
        assert 0 <= result <= 100


@pytest.mark.parametrize(
    "func",
    [fuzzscore.ratio, fuzzscore.token_sort_ratio, fuzzscore.token_set_ratio],
)
def test_symmetry(func) -> None:
    for a, b in itertools.combinations(CORPUS, 2):
        assert func(a, b) == func(b, a)


def test_score_by_name() -> None:
    assert fuzzscore.score("order test", "test order", "token_sort_ratio") == 100
    assert fuzzscore.score("order test", "test order", Scorer.TOKEN_SORT) == 100
    assert fuzzscore.score("Order", "order", Scorer.SIMPLE, StringOptions.CASE_SENSITIVE) < 100


@pytest.mark.parametrize(
    "func",
    [
        fuzzscore.token_sort_ratio,
        fuzzscore.token_sort_partial_ratio,
        fuzzscore.token_set_ratio,
        fuzzscore.token_set_partial_ratio,
    ],
)
def test_preserved_blank_input_does_not_match_text(func) -> None:
    assert func("   ", "abc", StringOptions.PRESERVE_WHITESPACE) == 0
    assert func("   ", "   ", StringOptions.PRESERVE_WHITESPACE) == 100
