from concurrent.futures import ThreadPoolExecutor

import pytest

from term_resolver import (
    SymptomTermResolver,
    TermMatch,
    ends_sentence,
    normalize_term,
    normalize_token,
    split_words,
)
from term_table import build_term_table, load_term_table

TABLE = load_term_table()
RESOLVER = SymptomTermResolver(TABLE)


def _categories(tokens):
    return [m.category if m else None for m in RESOLVER.resolve_tokens(tokens)]


def test_normalize_token_strips_case_and_surrounding_punctuation() -> None:
    assert normalize_token("Tired") == "tired"
    assert normalize_token("TIRED!!") == "tired"
    assert normalize_token("(dizzy),") == "dizzy"
    assert normalize_token("“nauseous”") == "nauseous"
    assert normalize_token("can’t") == "can't"
    assert normalize_token("boom/bust.") == "boom/bust"
    assert normalize_token("...") == ""


def test_normalize_term_collapses_whitespace() -> None:
    assert normalize_term("  Long \t COVID  ") == "long covid"
    assert normalize_term("") == ""
    assert split_words(" feeling   dizzy ") == ["feeling", "dizzy"]


def test_ends_sentence() -> None:
    assert ends_sentence("tired.")
    assert ends_sentence('tired!"')
    assert ends_sentence("really?)")
    assert not ends_sentence("tired,")
    assert not ends_sentence("can't")


def test_resolution_is_deterministic() -> None:
    for term in ("tired", "long covid", "energy", "boom-bust", "feeling"):
        assert len({RESOLVER.resolve(term) for _ in range(5)}) == 1


@pytest.mark.parametrize("text", ["Tired", " tired ", "TIRED", "tired.", "Tired!"])
def test_case_and_whitespace_insensitive(text: str) -> None:
    assert RESOLVER.resolve(text) == "fatigue"


def test_extra_internal_whitespace_in_phrase() -> None:
    assert RESOLVER.resolve("Long    COVID") == "long_covid"
    assert RESOLVER.resolve("air\thunger") == "air_hunger"


def test_longest_match_precedence() -> None:
    tokens = split_words("I feel long covid fatigue")
    results = RESOLVER.resolve_tokens(tokens)

    long_covid = TermMatch(category="long_covid", start=2, end=4, term="long covid", method="phrase")
    assert results == [
        None,
        None,
        long_covid,
        long_covid,
        TermMatch(category="fatigue", start=4, end=5, term="fatigue", method="lemma"),
    ]


@pytest.mark.parametrize("term", ["energy", "down", "attack", "flow", "period", "fall", "cramp", "sensitivity", "pacing"])
def test_declared_exclusions_never_match(term: str) -> None:
    assert RESOLVER.resolve(term) is None
    assert RESOLVER.resolve(term.upper()) is None


def test_every_declined_term_is_a_no_match() -> None:
    assert TABLE.declined_terms
    for term in TABLE.declined_terms:
        assert RESOLVER.resolve(term) is None, term


def test_phrase_forms_of_declined_words_resolve() -> None:
    assert RESOLVER.resolve("no energy") == "fatigue"
    assert RESOLVER.resolve("feeling down") == "low_mood"
    assert RESOLVER.resolve("panic attack") == "panic"
    assert RESOLVER.resolve("heavy flow") == "heavy_bleeding"
    assert RESOLVER.resolve("on my period") == "menstruation"
    assert RESOLVER.resolve("hair falling out") == "hair_loss"
    assert _categories(split_words("sitting down with an energy drink")) == [None] * 6


@pytest.mark.parametrize("text", ["boom-bust", "boom/bust", "boom bust", "Boom-Bust", "BOOM  bust"])
def test_variant_equivalence(text: str) -> None:
    assert RESOLVER.resolve(text) == "boom_bust_cycle"


def test_no_equivalence_inferred_beyond_declared_variants() -> None:
    assert RESOLVER.resolve("boom_bust") is None
    assert RESOLVER.resolve("boombust") is None


@pytest.mark.parametrize(
    "text, category",
    [("naseua", "nausea"), ("dizy", "dizziness"), ("dizzyness", "dizziness"), ("migrane", "headache"), ("fatige", "fatigue")],
)
def test_misspelling_coverage(text: str, category: str) -> None:
    assert RESOLVER.resolve(text) == category


def test_unlisted_misspellings_are_not_guessed() -> None:
    assert RESOLVER.resolve("dizzzy") is None
    assert RESOLVER.resolve("nausia") is None


def test_scenario_feeling_dizzy_and_nauseous() -> None:
    assert _categories(["feeling", "dizzy", "and", "nauseous"]) == [None, "dizziness", None, "nausea"]


def test_scenario_post_covid_fatigue() -> None:
    matches = RESOLVER.find_matches("post covid fatigue")

    assert matches == [
        TermMatch(category="post_viral", start=0, end=2, term="post covid", method="phrase"),
        TermMatch(category="fatigue", start=2, end=3, term="fatigue", method="lemma"),
    ]


def test_phrase_wins_over_lemma_inside_its_span() -> None:
    # "back" and "pain" are both lemmas
    assert _categories(["back", "pain"]) == ["back_pain", "back_pain"]
    assert RESOLVER.find_matches("my back pain today")[0].term == "back pain"
    assert [m.category for m in RESOLVER.find_matches("crashed hard after the walk")] == ["pem_crash"]


def test_empty_input_is_a_no_match() -> None:
    assert RESOLVER.resolve("") is None
    assert RESOLVER.resolve("   ") is None
    assert RESOLVER.match_at([], 0) is None
    assert RESOLVER.resolve_tokens([]) == []
    assert RESOLVER.find_matches("") == []


def test_match_at_position_bounds() -> None:
    tokens = ["so", "tired"]
    assert RESOLVER.match_at(tokens, 2) is None
    assert RESOLVER.match_at(tokens, 1) == TermMatch("fatigue", 1, 2, "tired", "lemma")
    with pytest.raises(IndexError):
        RESOLVER.match_at(tokens, -1)


def test_punctuation_only_tokens() -> None:
    assert RESOLVER.match_at(["...", "tired"], 0) is None
    assert RESOLVER.resolve_tokens(["-", "tired"])[1].category == "fatigue"
    # a stray dash inside a phrase window is dropped from the key
    assert RESOLVER.match_at(["boom", "-", "bust"], 0) == TermMatch("boom_bust_cycle", 0, 3, "boom bust", "phrase")


def test_phrase_windows_stop_at_sentence_boundaries() -> None:
    tokens = split_words("I was up too long. Covid test was negative")
    assert [m.term for m in RESOLVER.iter_matches(tokens)] == []

    permissive = SymptomTermResolver(TABLE, respect_sentence_boundaries=False)
    assert [m.term for m in permissive.iter_matches(tokens)] == ["long covid"]


def test_phrase_may_end_a_sentence() -> None:
    assert RESOLVER.resolve("Long covid.") == "long_covid"
    assert RESOLVER.find_matches("Still tired. Brain fog!")[-1].category == "brain_fog"


def test_window_bound_override() -> None:
    table = build_term_table(
        {"s": {"good days bad days": "symptom_fluctuation", "good days": "good_days", "days": "days_count"}}
    )
    assert SymptomTermResolver(table).resolve("good days bad days") == "symptom_fluctuation"
    assert SymptomTermResolver(table, max_phrase_words=2).resolve("good days bad days") == "good_days"
    assert SymptomTermResolver(table, max_phrase_words=1).resolve("good days bad days") is None
    assert SymptomTermResolver(table, max_phrase_words=10).max_phrase_words == 4
    with pytest.raises(ValueError):
        SymptomTermResolver(table, max_phrase_words=0)


def test_resolver_never_branches_on_category_identity() -> None:
    table = build_term_table({"custom": {"zorp": "brand_new_category", "zorp zorp": "another_one"}})
    resolver = SymptomTermResolver(table)

    assert resolver.resolve("Zorp") == "brand_new_category"
    assert resolver.resolve("zorp zorp") == "another_one"


def test_lemma_only_table_skips_phrase_windows() -> None:
    resolver = SymptomTermResolver(build_term_table({"only": {"dizzy": "dizziness"}}))

    assert resolver.max_phrase_words == 1
    assert [m.category for m in resolver.resolve_tokens(["Dizzy"])] == ["dizziness"]
    assert [m.method for m in resolver.find_matches("so dizzy today")] == ["lemma"]


def test_match_to_dict() -> None:
    match = RESOLVER.find_matches("air hunger")[0]

    assert match.width == 2
    assert match.to_dict() == {"category": "air_hunger", "start": 0, "end": 2, "term": "air hunger", "method": "phrase"}


def test_concurrent_resolution_over_shared_table() -> None:
    entries = [
        "feeling dizzy and nauseous",
        "post covid fatigue",
        "boom-bust again, no energy",
        "sitting down after the period of rest",
    ] * 50
    expected = [[m.category for m in RESOLVER.find_matches(e)] for e in entries]

    with ThreadPoolExecutor(max_workers=8) as pool:
        got = list(pool.map(lambda e: [m.category for m in RESOLVER.find_matches(e)], entries))

    assert got == expected
    assert expected[2] == ["boom_bust_cycle", "fatigue"]
    assert expected[3] == []
