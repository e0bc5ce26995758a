"""Submission result models"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HandlerOutcome(str, Enum):
    """Terminal states of the registration handler"""

    COMPLETED = "completed"
    # Photo could not be stored but the notification was still sent
    COMPLETED_NO_PHOTO = "completed_no_photo"
    # Server-side validation refused the payload
    REJECTED = "rejected"
    FAILED = "failed"


class SubmissionResult(BaseModel):
    """Structured result returned by the registration endpoint.

    ``success`` is authoritative: an HTTP 200 does not imply success.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoUrl")
    error: Optional[str] = None
    errors: Optional[dict[str, str]] = None

    def to_response(self) -> dict:
        """JSON body for the endpoint, using wire names and dropping unset keys"""
        return self.model_dump(by_alias=True, exclude_none=True)
