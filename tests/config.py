"""Test-specific configuration for retreat registration tests"""

# Test configuration dictionary
test_config = {
    "port": 8082,
    "log_level": "INFO",
    "environment": "test",
    "event_title": "Test Retreat: Renewing of Minds",
    "home_url": "https://retreat.example.com/",
    "backend_url": "http://testserver",
    "mailgun_api_key": "test-mailgun-key",
    "mailgun_domain": "mg.example.com",
    "sender_email": "Test Retreat <noreply@example.com>",
    "notification_recipients": ["organisers@example.com"],
    "notification_timezone": "UTC",
    "storage_bucket": "retreat-photos-test",
    "storage_region": "us-east-1",
    "storage_endpoint_url": None,
    "storage_access_key_id": "testing",
    "storage_secret_access_key": "testing",
    "storage_public_base_url": "https://cdn.example.com/retreat-photos",
    "storage_prefix": "",
    "max_photo_bytes": 1024 * 1024,
}

# Smallest PNG signature; enough for content-type based checks
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
