"""
Mail delivery for contact notifications and auto-replies.
"""
from portfolio.delivery.channels import SendGridTransport
from portfolio.delivery.models import DeliveryReceipt, MailMessage

__all__ = [
    "DeliveryReceipt",
    "MailMessage",
    "SendGridTransport",
]
