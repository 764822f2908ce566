from __future__ import annotations

import logging
import secrets

from fastapi import HTTPException, Request

from ..config import ServiceConfig

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
API_KEY_PARAM = "key"


def get_config(request: Request) -> ServiceConfig:
    """Return the ``ServiceConfig`` the app was built with."""
    return request.app.state.config


def _matches(candidate: str | None, expected: str) -> bool:
    if not candidate:
        return False
    return secrets.compare_digest(candidate.encode(), expected.encode())


def require_api_key(request: Request) -> None:
    """Raise 401 unless the request carries the configured key.

    The key may come from the ``x-api-key`` header or the ``key`` query
    parameter. With no key configured every request is accepted.
    """
    config = get_config(request)
    if not config.requires_key:
        return

    header_key = request.headers.get(API_KEY_HEADER)
    param_key = request.query_params.get(API_KEY_PARAM)
    if _matches(header_key, config.api_key) or _matches(param_key, config.api_key):
        return

    logger.warning("Rejected request to %s: invalid API key", request.url.path)
    raise HTTPException(status_code=401, detail="Clé API invalide")
