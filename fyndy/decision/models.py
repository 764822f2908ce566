from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PRICE_MIN = 49
PRICE_MAX = 499
RELIABILITY_MIN = 60
RELIABILITY_MAX = 95
REVIEWS_MIN = 88
REVIEWS_MAX = 98


class PrecisionVerdict(str, Enum):
    precise = "precise"
    generic = "generic"


class ManipulationRisk(str, Enum):
    low = "Low"
    moderate = "Moderate"
    high = "High"


class ReviewSignal(str, Enum):
    weak = "Weak"
    medium = "Medium"
    strong = "Strong"


class SignalColor(str, Enum):
    green = "green"
    orange = "orange"
    red = "red"


class DecisionType(str, Enum):
    best_price = "best_price"
    best_value = "best_value"


class TrustColors(BaseModel):
    model_config = ConfigDict(frozen=True)

    reviews: SignalColor
    risk: SignalColor


class TrustMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    reliability_score: int = Field(..., ge=RELIABILITY_MIN, le=RELIABILITY_MAX)
    positive_reviews_pct: int = Field(..., ge=REVIEWS_MIN, le=REVIEWS_MAX)
    manipulation_risk: ManipulationRisk
    review_signal: ReviewSignal
    colors: TrustColors


class DecisionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: DecisionType
    label: str
    price: int = Field(..., ge=PRICE_MIN, le=PRICE_MAX)
    currency: str = "€"
    merchant: str
    shipping: str
    url: str
    decision_status: str
    price_positioning: str


class DecisionOutcome(BaseModel):
    """Everything the engine derives from one query."""

    model_config = ConfigDict(frozen=True)

    query: str
    precision: PrecisionVerdict
    result: DecisionResult
    trust: TrustMetrics


class DecisionResponse(BaseModel):
    ok: bool = True
    query: str
    precision: PrecisionVerdict
    decision_status: str
    confidence_score: int
    price_positioning: str
    manipulation_risk: ManipulationRisk
    trusted_environment: str = "Trusted"
    decision: DecisionResult
    trust: TrustMetrics
