from __future__ import annotations

import math
from urllib.parse import quote

from .models import (
    PRICE_MAX,
    PRICE_MIN,
    RELIABILITY_MAX,
    RELIABILITY_MIN,
    REVIEWS_MAX,
    REVIEWS_MIN,
    DecisionResult,
    DecisionType,
    ManipulationRisk,
    PrecisionVerdict,
    ReviewSignal,
    SignalColor,
    TrustColors,
    TrustMetrics,
)

_PRICE_MODULUS = PRICE_MAX - PRICE_MIN + 1  # 451

_RELIABILITY_BASE = 78
_REVIEWS_BASE = 90
_SHORT_QUERY_LEN = 6

PRODUCT_URL_TEMPLATE = "https://example.com/product?q={query}"


class InvalidQueryError(ValueError):
    """Raised when a query is empty or whitespace-only."""


# ---------------------------------------------------------------------------
# Verdict-keyed constants
# ---------------------------------------------------------------------------

_DECISION_TEXT: dict[PrecisionVerdict, dict[str, str]] = {
    PrecisionVerdict.precise: {
        "label": "Meilleur prix trouvé",
        "merchant": "Marchand certifié",
        "shipping": "Livraison 24-48h",
        "decision_status": "Strong",
        "price_positioning": "Best price detected",
    },
    PrecisionVerdict.generic: {
        "label": "Meilleur rapport qualité/prix",
        "merchant": "Sélection multi-marchands",
        "shipping": "Livraison 2-3 jours",
        "decision_status": "Medium",
        "price_positioning": "Top value detected",
    },
}

_DECISION_TYPE: dict[PrecisionVerdict, DecisionType] = {
    PrecisionVerdict.precise: DecisionType.best_price,
    PrecisionVerdict.generic: DecisionType.best_value,
}

_RELIABILITY_BONUS = {PrecisionVerdict.precise: 10, PrecisionVerdict.generic: 4}
_REVIEWS_BONUS = {PrecisionVerdict.precise: 5, PrecisionVerdict.generic: 2}

_RISK_COLORS: dict[ManipulationRisk, SignalColor] = {
    ManipulationRisk.low: SignalColor.green,
    ManipulationRisk.moderate: SignalColor.orange,
    ManipulationRisk.high: SignalColor.red,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def clamp(value: float, lo: int, hi: int) -> int:
    """Saturate ``value`` into ``[lo, hi]``. NaN maps to ``lo``; never raises."""
    if isinstance(value, float):
        if math.isnan(value):
            return lo
        if math.isinf(value):
            return hi if value > 0 else lo
    if value < lo:
        return lo
    if value > hi:
        return hi
    return int(value)


def query_seed(query: str) -> int:
    """Position-weighted sum of code points: ``sum(ord(c) * (i + 1))``."""
    seed = 0
    for i, ch in enumerate(query):
        seed += ord(ch) * (i + 1)
    return seed


def compute_price(query: str) -> int:
    return clamp(PRICE_MIN + query_seed(query) % _PRICE_MODULUS, PRICE_MIN, PRICE_MAX)


def build_product_url(query: str) -> str:
    # Lone surrogates are percent-encoded as-is rather than rejected.
    return PRODUCT_URL_TEMPLATE.format(query=quote(query, safe="", errors="surrogatepass"))


def _review_level(pct: int) -> int:
    if pct >= 95:
        return 2
    if pct >= 92:
        return 1
    return 0


def _manipulation_risk(query: str, verdict: PrecisionVerdict) -> ManipulationRisk:
    # Length check wins over precision.
    if len(query) < _SHORT_QUERY_LEN:
        return ManipulationRisk.high
    if verdict is PrecisionVerdict.generic:
        return ManipulationRisk.moderate
    return ManipulationRisk.low


def compute_trust(query: str, verdict: PrecisionVerdict) -> TrustMetrics:
    reliability = clamp(
        _RELIABILITY_BASE + _RELIABILITY_BONUS[verdict] + min(8, len(query) // 10),
        RELIABILITY_MIN,
        RELIABILITY_MAX,
    )
    reviews_pct = clamp(_REVIEWS_BASE + _REVIEWS_BONUS[verdict], REVIEWS_MIN, REVIEWS_MAX)
    risk = _manipulation_risk(query, verdict)

    level = _review_level(reviews_pct)
    signal = (ReviewSignal.weak, ReviewSignal.medium, ReviewSignal.strong)[level]
    reviews_color = (SignalColor.red, SignalColor.orange, SignalColor.green)[level]

    return TrustMetrics(
        reliability_score=reliability,
        positive_reviews_pct=reviews_pct,
        manipulation_risk=risk,
        review_signal=signal,
        colors=TrustColors(reviews=reviews_color, risk=_RISK_COLORS[risk]),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score(query: str, verdict: PrecisionVerdict) -> tuple[DecisionResult, TrustMetrics]:
    """
    Derive the synthetic recommendation and trust metrics for ``query``.

    Every field is a pure function of ``query`` and ``verdict``. Raises
    ``InvalidQueryError`` if ``query`` is empty after trimming.
    """
    if not query or not query.strip():
        raise InvalidQueryError("query must not be empty")

    text = _DECISION_TEXT[verdict]
    result = DecisionResult(
        type=_DECISION_TYPE[verdict],
        label=text["label"],
        price=compute_price(query),
        merchant=text["merchant"],
        shipping=text["shipping"],
        url=build_product_url(query),
        decision_status=text["decision_status"],
        price_positioning=text["price_positioning"],
    )
    return result, compute_trust(query, verdict)
