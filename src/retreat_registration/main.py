#!/usr/bin/env python3
"""Retreat Registration - form page and submission API"""

import uvicorn
from fastapi import FastAPI

from retreat_registration.config import config
from retreat_registration.logging_config import get_logger, setup_logging
from retreat_registration.routers.health import health
from retreat_registration.routers.registration import router as registration_router

# Configure logging (INFO -> stdout, WARNING/ERROR -> stderr)
setup_logging(config["log_level"])
logger = get_logger(__name__)


app = FastAPI(
    title="Retreat Registration",
    description="Retreat sign-up form with photo upload and organiser email notifications",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
)

# Include routers
app.include_router(health)
app.include_router(registration_router)


if __name__ == "__main__":
    port = config.get("port")
    logger.info(f"Starting Retreat Registration on 0.0.0.0:{port}")
    logger.info("Submissions accepted at /submit-registration")
    logger.info("Health check available at /health")

    try:
        uvicorn.run(
            app, host="0.0.0.0", port=port, log_level=config["log_level"].lower()
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise
