"""Success and failure feedback for registration submissions"""

import logging
from typing import Optional

from retreat_registration.client.form_controller import FormController
from retreat_registration.client.notifications import (
    Notice,
    NoticeKind,
    NotificationBus,
)
from retreat_registration.client.submission_client import SubmissionClient
from retreat_registration.models.result import SubmissionResult

logger = logging.getLogger(__name__)

REGISTER_ANOTHER = "register_another"
RETURN_HOME = "return_home"


class ResultPresenter:
    """Turns submission results into notices and drives the form lifecycle"""

    def __init__(
        self,
        controller: FormController,
        bus: NotificationBus,
        event_title: str,
        home_url: str,
    ):
        self.controller = controller
        self.bus = bus
        self.event_title = event_title
        self.home_url = home_url

    def present(self, result: SubmissionResult) -> Notice:
        """
        Publish the outcome of a submission.

        On success the form is cleared and a confirmation is shown; on failure
        the form is left untouched so nothing has to be typed again.
        """
        if result.success:
            self.controller.reset()
            notice = Notice(
                kind=NoticeKind.SUCCESS,
                title="✅ Thank You!",
                description=(
                    f"Thank you for registering for {self.event_title}! "
                    "Your details have been received successfully."
                ),
                actions=[RETURN_HOME, REGISTER_ANOTHER],
            )
        else:
            logger.info(f"Submission failed: {result.error}")
            notice = Notice(
                kind=NoticeKind.ERROR,
                title="⚠️ Submission Failed",
                description=(
                    "Unable to send your form. "
                    "Please check your connection and try again."
                ),
            )

        self.bus.publish(notice)
        return notice

    async def submit(self, client: SubmissionClient) -> Optional[Notice]:
        """
        Validate the form, send it and present the result.

        Returns:
            The published notice, or None when validation blocked the submission
        """
        payload = self.controller.submit()
        if payload is None:
            return None
        result = await client.submit(payload)
        return self.present(result)

    def register_another(self) -> None:
        self.controller.reset()

    def clear_form(self) -> Notice:
        self.controller.reset()
        notice = Notice(
            kind=NoticeKind.INFO,
            title="Form Cleared",
            description="All fields have been reset.",
        )
        self.bus.publish(notice)
        return notice
