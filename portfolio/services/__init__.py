"""
Request pipeline services: validation, gateway adapters and response
normalization.
"""

from portfolio.services.gateways import ChatGateway, ContactGateway
from portfolio.services.normalizer import FALLBACK_REPLY, extract_reply
from portfolio.services.validation import require_fields

__all__ = [
    "ChatGateway",
    "ContactGateway",
    "FALLBACK_REPLY",
    "extract_reply",
    "require_fields",
]
