"""
Decision engine.

Responsibilities:
- Classify a product query as precise (model/SKU-like) or generic.
- Derive a reproducible pseudo-price from the query's characters.
- Compute bounded trust metrics and the synthetic recommendation record.

Everything here is a pure function of the query string.
"""
from __future__ import annotations

from .classifier import classify
from .engine import decide
from .scorer import InvalidQueryError, clamp, score

__all__ = ["InvalidQueryError", "clamp", "classify", "decide", "score"]
