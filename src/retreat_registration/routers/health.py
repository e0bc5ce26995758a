from datetime import datetime, timezone

from fastapi import APIRouter

from retreat_registration.config import config

health = APIRouter()


@health.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "retreat-registration",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config["environment"],
    }
