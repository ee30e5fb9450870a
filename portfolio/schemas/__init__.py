"""Pydantic request and response schemas."""
from portfolio.schemas.chat import ChatReply, ChatRequest, ErrorResponse
from portfolio.schemas.contact import ContactFormRequest, ContactFormResponse, ContactSubmission

__all__ = [
    "ChatReply",
    "ChatRequest",
    "ContactFormRequest",
    "ContactFormResponse",
    "ContactSubmission",
    "ErrorResponse",
]
