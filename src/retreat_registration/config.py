"""Configuration loader for the retreat registration service"""

import os
from pathlib import Path

from dotenv import load_dotenv

project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

# Load .env file if it exists. For local development only.
if env_path.exists():
    load_dotenv(env_path)


def _split_csv(value):
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


# Configuration dictionary - set once at initialization
config = {
    "port": int(os.getenv("PORT", "8000")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "environment": os.getenv("ENVIRONMENT", "development"),
    "event_title": os.getenv(
        "EVENT_TITLE", "ELOHIM'S BIBLE STUDY RETREAT: Renewing of Minds"
    ),
    # Public landing page the success screen links back to
    "home_url": os.getenv("HOME_URL", "https://oog.lovable.app/"),
    # Where the Python submission client posts registrations
    "backend_url": os.getenv("BACKEND_URL", "http://localhost:8000"),
    "mailgun_api_key": os.getenv("MAILGUN_API_KEY"),
    "mailgun_domain": os.getenv("MAILGUN_DOMAIN"),
    "sender_email": os.getenv(
        "SENDER_EMAIL", "ELOHIM'S Retreat <onboarding@example.com>"
    ),
    "notification_recipients": _split_csv(os.getenv("NOTIFICATION_RECIPIENTS")),
    "notification_timezone": os.getenv("NOTIFICATION_TIMEZONE", "UTC"),
    "storage_bucket": os.getenv("STORAGE_BUCKET", "retreat-photos"),
    "storage_region": os.getenv("STORAGE_REGION", "us-east-1"),
    "storage_endpoint_url": os.getenv("STORAGE_ENDPOINT_URL"),
    "storage_access_key_id": os.getenv("STORAGE_ACCESS_KEY_ID"),
    "storage_secret_access_key": os.getenv("STORAGE_SECRET_ACCESS_KEY"),
    # Optional CDN / public bucket URL. Falls back to the S3 virtual-hosted URL.
    "storage_public_base_url": os.getenv("STORAGE_PUBLIC_BASE_URL"),
    "storage_prefix": os.getenv("STORAGE_PREFIX", ""),
    "max_photo_bytes": int(os.getenv("MAX_PHOTO_BYTES", str(5 * 1024 * 1024))),
}
