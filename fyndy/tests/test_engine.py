from __future__ import annotations

import pytest

from fyndy.decision import InvalidQueryError, decide
from fyndy.decision.models import ManipulationRisk, PrecisionVerdict, ReviewSignal, SignalColor

SAMPLE_QUERIES = [
    "Grohe S240",
    "chaise",
    "table basse bois",
    "ab",
    "Samsung QE55Q80C 55 pouces",
    "robinet",
    "x" * 2000,
]


def test_decide_trims_query():
    outcome = decide("  Grohe S240  ")
    assert outcome.query == "Grohe S240"
    assert outcome.precision == PrecisionVerdict.precise
    assert outcome.result.url.endswith("Grohe%20S240")


def test_decide_matches_untrimmed_input():
    assert decide("  chaise ") == decide("chaise")


@pytest.mark.parametrize("query", ["", "   ", None])
def test_decide_rejects_blank(query):
    with pytest.raises(InvalidQueryError):
        decide(query)


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_decide_is_deterministic(query):
    assert decide(query) == decide(query)


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_ranges_hold(query):
    outcome = decide(query)
    assert 49 <= outcome.result.price <= 499
    assert 60 <= outcome.trust.reliability_score <= 95
    assert 88 <= outcome.trust.positive_reviews_pct <= 98


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_signals_agree(query):
    trust = decide(query).trust
    if trust.positive_reviews_pct >= 95:
        assert trust.review_signal == ReviewSignal.strong
        assert trust.colors.reviews == SignalColor.green
    if trust.manipulation_risk == ManipulationRisk.high:
        assert trust.colors.risk == SignalColor.red


def test_decide_accepts_lone_surrogate():
    outcome = decide("chaise \udcff")
    assert outcome.query == "chaise \ufffd"
    assert outcome.precision == PrecisionVerdict.generic
    assert 49 <= outcome.result.price <= 499
    assert outcome.result.url.endswith("chaise%20%ED%B3%BF")
