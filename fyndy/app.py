"""
HTTP layer around the decision engine.

Run with: uvicorn fyndy.app:create_app --factory  (or ``python -m fyndy``)
"""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from .auth.dependencies import get_config, require_api_key
from .config import ServiceConfig, load_config
from .decision import decide
from .decision.models import DecisionResponse

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Build the HTTP service around the decision engine."""
    config = config or load_config()

    app = FastAPI(title="Fyndy Decision API", version="1.0.0")
    app.state.config = config
    # Called from the browser extension on arbitrary origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health(request: Request) -> dict:
        cfg = get_config(request)
        return {"ok": True, "status": "ok", "service": cfg.service_name, "port": cfg.port}

    # ── Keyed endpoints ──────────────────────────────────────────────────

    @app.get(
        "/api/decision",
        response_model=DecisionResponse,
        dependencies=[Depends(require_api_key)],
    )
    def decision(q: str = Query(default="")) -> DecisionResponse:
        query = q.strip()
        if not query:
            logger.info("Rejected decision request with empty query")
            raise HTTPException(status_code=400, detail="Requête manquante")

        outcome = decide(query)
        result, trust = outcome.result, outcome.trust
        logger.info(
            "Decision: precision=%s price=%d risk=%s",
            outcome.precision.value,
            result.price,
            trust.manipulation_risk.value,
        )

        return DecisionResponse(
            query=outcome.query,
            precision=outcome.precision,
            decision_status=result.decision_status,
            confidence_score=trust.reliability_score,
            price_positioning=result.price_positioning,
            manipulation_risk=trust.manipulation_risk,
            decision=result,
            trust=trust,
        )

    return app
