"""Run the API server: ``python -m sherpa``."""

from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from sherpa.api.app import create_app
from sherpa.core.config import get_settings
from sherpa.core.constants import API_NAME
from sherpa.core.lifespan import fatal_error
from sherpa.core.logging import setup_logging

logger = logging.getLogger("sherpa")


def main() -> int:
    load_dotenv()
    setup_logging()
    settings = get_settings()

    app = create_app(settings, fail_fast=True)
    logger.info("%s listening on port %s", API_NAME, settings.port, extra={"app_env": settings.app_env})
    logger.info("Health check: http://localhost:%s/api/health", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)

    if fatal_error() is not None:
        logger.critical("Exiting after unhandled error: %r", fatal_error())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
