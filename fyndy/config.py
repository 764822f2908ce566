from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True)
class ServiceConfig:
    """Process-wide settings for the HTTP layer. The decision engine never reads these."""

    api_key: str = ""
    service_name: str = "fyndy-api"
    host: str = "0.0.0.0"
    port: int = 3333
    log_level: str = "info"

    @property
    def requires_key(self) -> bool:
        return bool(self.api_key)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config() -> ServiceConfig:
    """Build a ``ServiceConfig`` from the environment (and ``.env`` if present)."""
    load_dotenv(_ENV_FILE)
    return ServiceConfig(
        api_key=os.getenv("FYNDY_API_KEY", "").strip(),
        host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_int_env("PORT", 3333),
        log_level=os.getenv("LOG_LEVEL", "info").strip().lower() or "info",
    )
