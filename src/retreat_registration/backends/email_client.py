import logging
from typing import Dict, List, Optional

from mailgun.client import Client

logger = logging.getLogger(__name__)


class EmailDeliveryError(RuntimeError):
    """Raised when the notification email could not be sent"""


class EmailClient:
    def __init__(self, config: dict):
        self.mailgun_api_key = config["mailgun_api_key"]
        self.domain = config["mailgun_domain"]
        self.sender_email = config["sender_email"]

        self.client = Client(auth=("api", self.mailgun_api_key))

    async def send_email(
        self,
        to: List[str],
        html: str,
        subject: str,
        tag: Optional[str] = "registration-notification",
    ) -> Dict:
        """
        Send an HTML email using Mailgun API

        Args:
            to: Recipient email addresses
            html: Rendered HTML body
            subject: Email subject
            tag: Mailgun tag used for analytics (optional)

        Returns:
            Dict containing Mailgun API response

        Raises:
            EmailDeliveryError: If there are no recipients or email sending fails
        """
        if not to:
            raise EmailDeliveryError("No notification recipients configured")

        data = {
            "from": self.sender_email,
            "to": list(to),
            "subject": subject,
            "html": html,
        }
        if tag:
            data["o:tag"] = tag

        try:
            req = self.client.messages.create(data=data, domain=self.domain)
            response = req.json()
        except Exception as e:
            logger.error(f"Failed to send email to {to}: {str(e)}")
            raise EmailDeliveryError(f"Email sending failed: {str(e)}") from e

        # Check if request was successful
        if req.status_code != 200:
            logger.error(f"Mailgun API error: {req.status_code} - {response}")
            raise EmailDeliveryError(f"Failed to send email: {response}")

        logger.info(f"Email sent successfully to {to}: {response.get('id', 'unknown')}")
        return response
