"""HTTP client posting registrations to the backend endpoint"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from retreat_registration.models.registration import RegistrationSubmission
from retreat_registration.models.result import SubmissionResult
from retreat_registration.validation import validate_registration

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/submit-registration"


class SubmissionClient:
    """Sends validated registrations to the backend and interprets the reply"""

    def __init__(self, config: dict, http_client: Optional[httpx.AsyncClient] = None):
        self.endpoint = f"{config['backend_url'].rstrip('/')}{SUBMIT_PATH}"
        self.http_client = http_client

    async def submit(self, payload: RegistrationSubmission) -> SubmissionResult:
        """
        Post a registration to the backend.

        A multipart body is sent when a photo is attached, a flat form body
        otherwise. Network errors, non-2xx responses and ``success: false``
        replies all come back as a failed result; nothing is retried.

        Args:
            payload: Registration that already passed validation

        Returns:
            SubmissionResult; ``success`` is authoritative
        """
        errors = validate_registration(
            {name: getattr(payload, name) for name in RegistrationSubmission.model_fields}
        )
        if errors:
            logger.warning(f"Refusing to send invalid registration: {errors}")
            return SubmissionResult(
                success=False, error="Registration is not valid", errors=errors
            )

        data = payload.to_form_fields()
        files = None
        if payload.photo is not None and payload.photo.size > 0:
            files = {
                "photo": (
                    payload.photo.filename,
                    payload.photo.content,
                    payload.photo.content_type,
                )
            }

        try:
            if self.http_client is not None:
                response = await self.http_client.post(self.endpoint, data=data, files=files)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self.endpoint, data=data, files=files)
        except httpx.HTTPError as e:
            logger.error(f"Registration request to {self.endpoint} failed: {e}")
            return SubmissionResult(success=False, error=f"Network error: {e}")

        try:
            result = SubmissionResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                f"Unreadable reply from {self.endpoint} ({response.status_code}): {e}"
            )
            return SubmissionResult(
                success=False,
                error=f"Unexpected response from server (status {response.status_code})",
            )

        if not response.is_success:
            logger.error(
                f"Registration rejected with status {response.status_code}: {result.error}"
            )
            return SubmissionResult(
                success=False,
                error=result.error or f"Server responded with status {response.status_code}",
                errors=result.errors,
            )

        if not result.success:
            logger.error(f"Registration reported failure: {result.error}")
            return SubmissionResult(
                success=False, error=result.error or "Submission failed", errors=result.errors
            )

        logger.info("Registration submitted successfully")
        return result
