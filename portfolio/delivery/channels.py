"""
Portfolio Mail Transport
SendGrid implementation of the mail transport collaborator.
"""
import asyncio
from typing import Any, Optional

import structlog
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, To

from portfolio.core.exceptions import TransportError
from portfolio.delivery.models import DeliveryReceipt, MailMessage


logger = structlog.get_logger(__name__)


class SendGridTransport:
    """
    SendGrid email transport.

    Each send is a single attempt. The SendGrid SDK is synchronous, so the
    API call runs in a worker thread to keep the event loop free.
    """

    def __init__(self, api_key: Optional[str], client: Optional[SendGridAPIClient] = None):
        self._api_key = api_key
        self._client = client
        self.logger = structlog.get_logger().bind(channel="sendgrid")

    @property
    def client(self) -> SendGridAPIClient:
        """Lazy-loaded SendGrid client."""
        if self._client is None:
            if not self._api_key:
                raise TransportError("SendGrid API key not configured")
            self._client = SendGridAPIClient(api_key=self._api_key)
        return self._client

    def is_configured(self) -> bool:
        """Check if SendGrid is configured."""
        return bool(self._api_key) or self._client is not None

    def _build_message(self, content: MailMessage) -> Mail:
        """
        Build a SendGrid Mail object from a MailMessage.

        Args:
            content: Message to convert

        Returns:
            Configured Mail object ready to send
        """
        message = Mail()
        message.from_email = Email(content.from_email, content.from_name)
        message.subject = content.subject
        message.add_to(To(content.to_email, content.to_name))

        # Plain text must come before HTML
        message.add_content(Content("text/plain", content.body_text))
        if content.body_html:
            message.add_content(Content("text/html", content.body_html))

        if content.reply_to:
            message.reply_to = Email(content.reply_to)

        return message

    def _send_sync(self, message: Mail) -> Any:
        return self.client.send(message)

    async def send(self, content: MailMessage) -> DeliveryReceipt:
        """
        Send one email.

        Args:
            content: Message to send

        Returns:
            DeliveryReceipt for the accepted message

        Raises:
            TransportError: If the message cannot be built, the API call
                fails, or SendGrid answers with an error status.
        """
        try:
            message = self._build_message(content)
            response = await asyncio.to_thread(self._send_sync, message)
        except TransportError:
            raise
        except Exception as e:
            self.logger.error("email_send_failed", to=content.to_email, error=str(e))
            raise TransportError(f"SendGrid send failed: {type(e).__name__}") from e

        status_code = getattr(response, "status_code", 0)
        if status_code >= 400:
            self.logger.error("email_rejected", to=content.to_email, status_code=status_code)
            raise TransportError(f"SendGrid rejected message with status {status_code}")

        headers = getattr(response, "headers", None) or {}
        message_id = headers.get("X-Message-Id")

        self.logger.info(
            "email_sent",
            to=content.to_email,
            subject=content.subject[:50],
            message_id=message_id,
            status_code=status_code,
        )

        return DeliveryReceipt(
            to_email=content.to_email,
            status_code=status_code,
            provider_message_id=message_id,
        )


__all__ = ["SendGridTransport"]
