"""Shared test configuration and fixtures for retreat registration tests"""

import logging

import pytest
from fastapi.testclient import TestClient

from retreat_registration.backends.email_client import EmailDeliveryError
from retreat_registration.backends.storage_client import PhotoStorageError
from retreat_registration.main import app
from retreat_registration.models.registration import PhotoAttachment
from retreat_registration.services.email_service import EmailService
from retreat_registration.services.photo_service import PhotoService
from retreat_registration.services.registration_service import (
    RegistrationService,
    get_registration_service,
)
from tests.config import PNG_BYTES, test_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class InMemoryStorageClient:
    """Test double for object storage with write-once semantics"""

    def __init__(self, base_url: str = "https://cdn.example.com/retreat-photos"):
        self.base_url = base_url
        self.stored_objects = {}
        self.fail = False

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    async def upload(self, key: str, content: bytes, content_type: str = None) -> str:
        if self.fail:
            raise PhotoStorageError("Simulated storage outage")
        if key in self.stored_objects:
            raise PhotoStorageError(f"{key} already exists")
        self.stored_objects[key] = {"content": content, "content_type": content_type}
        return self.public_url(key)


class RecordingEmailClient:
    """Test double for the Mailgun client that records sent messages"""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send_email(self, to, html, subject, tag="registration-notification"):
        if self.fail:
            raise EmailDeliveryError("Email sending failed: simulated outage")
        self.sent.append({"to": list(to), "html": html, "subject": subject})
        return {"id": f"<message-{len(self.sent)}@mg.example.com>"}


@pytest.fixture
def storage_client():
    return InMemoryStorageClient()


@pytest.fixture
def email_client():
    return RecordingEmailClient()


@pytest.fixture
def email_service(email_client):
    return EmailService(email_client, test_config)


@pytest.fixture
def photo_service(storage_client):
    return PhotoService(storage_client, test_config)


@pytest.fixture
def registration_service(photo_service, email_service):
    """Create a RegistrationService wired to in-memory collaborators"""
    return RegistrationService(photo_service, email_service)


@pytest.fixture
def valid_values():
    """Attribute-keyed values for a registration with only required fields"""
    return {
        "full_name": "Grace Adeyemi",
        "gender": "Female",
        "age": 29,
        "phone": "+2348012345678",
        "email": "grace@example.com",
        "location": "Lagos",
        "affiliation": "RDG",
        "confirmation": True,
    }


@pytest.fixture
def valid_form_fields():
    """Wire-named form fields for a registration with only required fields"""
    return {
        "fullName": "Grace Adeyemi",
        "gender": "Female",
        "age": "29",
        "phone": "+2348012345678",
        "email": "grace@example.com",
        "location": "Lagos",
        "affiliation": "RDG",
        "confirmation": "true",
    }


@pytest.fixture
def photo():
    return PhotoAttachment(filename="passport.png", content=PNG_BYTES, content_type="image/png")


@pytest.fixture
def overridden_app(registration_service):
    """Point the app at the in-memory registration service"""
    original_overrides = app.dependency_overrides.copy()

    app.dependency_overrides.clear()
    app.dependency_overrides[get_registration_service] = lambda: registration_service

    yield app

    app.dependency_overrides.clear()
    app.dependency_overrides.update(original_overrides)


@pytest.fixture
def client(overridden_app):
    """Create a test client for the app wired to in-memory collaborators"""
    return TestClient(overridden_app)
