"""
Portfolio Mail Delivery Models
Pydantic models for outbound mail.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class MailMessage(BaseModel):
    """A single outbound email."""

    subject: str = Field(..., max_length=200)
    body_text: str
    body_html: str = ""
    from_email: str
    from_name: str
    to_email: str
    to_name: Optional[str] = None
    reply_to: Optional[str] = None


class DeliveryReceipt(BaseModel):
    """Provider acknowledgement for an accepted message."""

    to_email: str
    status_code: int
    provider_message_id: Optional[str] = None
    sent_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
