"""Email service for rendering and sending registration notifications"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from jinja2 import Environment, FileSystemLoader, select_autoescape

from retreat_registration.backends.email_client import EmailClient
from retreat_registration.models.registration import RegistrationSubmission

logger = logging.getLogger(__name__)

template_dir = Path(__file__).parent.parent / "templates"

NOT_PROVIDED = "N/A"


def format_submitted_at(moment: datetime) -> str:
    """Human-readable timestamp, e.g. "Sunday, October 18, 2026 at 9:05 PM" """
    hour = moment.strftime("%I").lstrip("0")
    return (
        f"{moment.strftime('%A, %B')} {moment.day}, {moment.year} "
        f"at {hour}:{moment.strftime('%M %p')}"
    )


class EmailService:
    """Service for notifying the organisers about new registrations"""

    def __init__(self, email_client: EmailClient, config: dict):
        self.email_client = email_client
        self.event_title = config["event_title"]
        self.recipients = list(config.get("notification_recipients") or [])

        tz_name = config.get("notification_timezone") or "UTC"
        try:
            self.tz = ZoneInfo(tz_name)
        except ZoneInfoNotFoundError:
            logger.warning(f"Invalid notification timezone '{tz_name}'; using UTC")
            self.tz = ZoneInfo("UTC")

        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
        )

    @property
    def subject(self) -> str:
        return f"🕊️ New Registration — {self.event_title}"

    def render_notification(
        self,
        submission: RegistrationSubmission,
        photo_url: Optional[str] = None,
        submitted_at: Optional[datetime] = None,
    ) -> str:
        """
        Render the organiser notification as HTML.

        Args:
            submission: The registration to describe
            photo_url: Public URL of the stored photo, if any
            submitted_at: Submission time (defaults to now)

        Returns:
            The rendered HTML document
        """
        submitted_at = submitted_at or datetime.now(timezone.utc)
        if submitted_at.tzinfo is None:
            submitted_at = submitted_at.replace(tzinfo=timezone.utc)

        def shown(value) -> str:
            return NOT_PROVIDED if value in (None, "") else str(value)

        template = self.env.get_template("registration_email.html")
        return template.render(
            event_title=self.event_title,
            photo_url=photo_url,
            full_name=submission.full_name,
            personal_details=[
                ("Full Name", submission.full_name),
                ("Gender", submission.gender),
                ("Age", submission.age),
                ("Phone/WhatsApp", submission.phone),
                ("Email", submission.email),
                ("Location/City", submission.location),
                ("Church/Ministry", shown(submission.church)),
                ("Affiliation", submission.affiliation),
            ],
            spiritual_details=[
                ("How did you hear about us?", shown(submission.how_heard)),
                ("Serve in Drama Ministry?", shown(submission.wants_drama_ministry)),
                ("Worship Minister?", shown(submission.is_worship_minister)),
            ],
            reflections=[
                ("Spiritual Expectations", shown(submission.expectations)),
                ("How can we help your coming?", shown(submission.help_needed)),
                ("Prayer Requests", shown(submission.prayer_requests)),
            ],
            submitted_at=format_submitted_at(submitted_at.astimezone(self.tz)),
        )

    async def notify_organisers(
        self,
        submission: RegistrationSubmission,
        photo_url: Optional[str] = None,
    ) -> Dict:
        """
        Send the notification for a registration to the fixed recipient list.

        Returns:
            Dict containing the email provider response

        Raises:
            EmailDeliveryError: If the email could not be sent
        """
        html = self.render_notification(submission, photo_url)
        logger.info(
            f"Sending registration notification for {submission.full_name} "
            f"to {len(self.recipients)} recipient(s)"
        )
        return await self.email_client.send_email(
            to=self.recipients, html=html, subject=self.subject
        )
