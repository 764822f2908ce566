from __future__ import annotations

from .classifier import classify
from .models import DecisionOutcome
from .scorer import InvalidQueryError, score

_REPLACEMENT_CHAR = "\ufffd"


def _printable(query: str) -> str:
    """Replace lone surrogates, which pydantic cannot store, with U+FFFD."""
    return "".join(
        _REPLACEMENT_CHAR if "\ud800" <= ch <= "\udfff" else ch for ch in query
    )


def decide(query: str) -> DecisionOutcome:
    """Trim, classify and score ``query``. Raises ``InvalidQueryError`` when blank."""
    trimmed = (query or "").strip()
    if not trimmed:
        raise InvalidQueryError("query must not be empty")

    verdict = classify(trimmed)
    result, trust = score(trimmed, verdict)
    return DecisionOutcome(
        query=_printable(trimmed), precision=verdict, result=result, trust=trust,
    )
