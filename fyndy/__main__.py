"""
Run the decision API: ``python -m fyndy``.

Env: FYNDY_API_KEY (optional; empty means open demo mode), HOST, PORT, LOG_LEVEL.
"""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import load_config

logger = logging.getLogger("fyndy")


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.requires_key:
        logger.warning("FYNDY_API_KEY is not set; /api/decision is open")

    logger.info("Fyndy API starting on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    main()
