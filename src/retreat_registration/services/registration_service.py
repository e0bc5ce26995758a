"""Registration service for handling form submissions"""

import logging
from typing import Any, Dict, Optional, Tuple

from starlette.datastructures import FormData, UploadFile

from retreat_registration.backends.email_client import (
    EmailClient,
    EmailDeliveryError,
)
from retreat_registration.backends.storage_client import (
    PhotoStorageError,
    StorageClient,
)
from retreat_registration.config import config
from retreat_registration.models.registration import PhotoAttachment
from retreat_registration.models.result import HandlerOutcome, SubmissionResult
from retreat_registration.services.email_service import EmailService
from retreat_registration.services.photo_service import PhotoService
from retreat_registration.validation import (
    WIRE_NAMES,
    to_submission,
    validate_registration,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration submitted successfully"


async def parse_registration_form(
    form_data: FormData, max_photo_bytes: Optional[int] = None
) -> Dict[str, Any]:
    """
    Turn a parsed multipart/urlencoded body into attribute-keyed values.

    Missing fields come back as None; an uploaded file becomes a PhotoAttachment.
    With ``max_photo_bytes`` set, at most one byte past the limit is read from
    the upload, enough for the photo service to refuse it as oversized.
    """
    values: Dict[str, Any] = {}
    for attribute, wire_name in WIRE_NAMES.items():
        raw = form_data.get(wire_name)

        if attribute == "photo":
            if isinstance(raw, UploadFile):
                if max_photo_bytes:
                    content = await raw.read(max_photo_bytes + 1)
                else:
                    content = await raw.read()
                values["photo"] = PhotoAttachment(
                    filename=raw.filename or "",
                    content=content,
                    content_type=raw.content_type or "application/octet-stream",
                )
            else:
                values["photo"] = None
            continue

        if isinstance(raw, UploadFile):
            # A file where text was expected is treated as a missing value
            raw = None
        values[attribute] = raw

    return values


class RegistrationService:
    """Service running a submission through validation, photo storage and notification"""

    def __init__(self, photo_service: PhotoService, email_service: EmailService):
        self.photo_service = photo_service
        self.email_service = email_service

    async def process(
        self, values: Dict[str, Any]
    ) -> Tuple[HandlerOutcome, SubmissionResult]:
        """
        Handle one registration.

        Args:
            values: Attribute-keyed field values (see parse_registration_form)

        Returns:
            The terminal outcome and the result to send back to the client
        """
        errors = validate_registration(values)
        if errors:
            logger.warning(f"Rejected registration with invalid fields: {errors}")
            return HandlerOutcome.REJECTED, SubmissionResult(
                success=False,
                error="Validation failed",
                errors={WIRE_NAMES[name]: reason for name, reason in errors.items()},
            )

        submission = to_submission(values)
        logger.info(f"Processing registration for {submission.full_name}")

        outcome = HandlerOutcome.COMPLETED
        photo_url: Optional[str] = None
        if submission.photo is not None:
            try:
                photo_url = await self.photo_service.store_photo(
                    submission.full_name, submission.photo
                )
            except PhotoStorageError as e:
                # Storing the photo is best effort; the notification still goes out
                logger.warning(
                    f"Photo upload failed for {submission.full_name}, continuing without it: {e}"
                )
                outcome = HandlerOutcome.COMPLETED_NO_PHOTO

        try:
            await self.email_service.notify_organisers(submission, photo_url)
        except EmailDeliveryError as e:
            logger.error(
                f"Registration for {submission.full_name} failed, notification not sent: {e}"
            )
            return HandlerOutcome.FAILED, SubmissionResult(success=False, error=str(e))

        logger.info(f"Registration for {submission.full_name} finished: {outcome.value}")
        return outcome, SubmissionResult(
            success=True, message=SUCCESS_MESSAGE, photo_url=photo_url
        )


# Global service instance
_registration_service = None


def get_registration_service() -> RegistrationService:
    """Get or create the global registration service instance"""
    global _registration_service
    if _registration_service is None:
        photo_service = PhotoService(StorageClient(config), config)
        email_service = EmailService(EmailClient(config), config)
        _registration_service = RegistrationService(photo_service, email_service)
        logger.info("Initialized global registration service")
    return _registration_service
