"""Query precision classifier.

A query is *precise* when it looks like a reference to a specific catalog
item ("Grohe S240", "table basse bois") and *generic* when it reads like a
category search ("chaise"). Two independent signals are checked and either
one is enough:

* a model code: a letter run directly followed by two or more digits, or
  two or more digits directly followed by a letter run;
* three or more whitespace-separated tokens.
"""
from __future__ import annotations

import string

from .models import PrecisionVerdict

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_MIN_DIGITS = 2
_MIN_TOKENS = 3


def _char_class(ch: str) -> str:
    if ch in _LETTERS:
        return "L"
    if ch in _DIGITS:
        return "D"
    return ""


def _runs(text: str) -> list[tuple[str, int]]:
    """Collapse ``text`` into ``(class, length)`` runs; other characters get class ``""``."""
    runs: list[tuple[str, int]] = []
    for ch in text:
        cls = _char_class(ch)
        if runs and runs[-1][0] == cls:
            runs[-1] = (cls, runs[-1][1] + 1)
        else:
            runs.append((cls, 1))
    return runs


def has_model_code(query: str) -> bool:
    runs = _runs(query)
    for (prev_cls, prev_len), (cls, length) in zip(runs, runs[1:]):
        if prev_cls == "L" and cls == "D" and length >= _MIN_DIGITS:
            return True
        if prev_cls == "D" and prev_len >= _MIN_DIGITS and cls == "L":
            return True
    return False


def token_count(query: str) -> int:
    return len(query.split())


def classify(query: str) -> PrecisionVerdict:
    # Evaluate both signals; either one is sufficient.
    model_code = has_model_code(query)
    many_tokens = token_count(query) >= _MIN_TOKENS
    if model_code or many_tokens:
        return PrecisionVerdict.precise
    return PrecisionVerdict.generic
