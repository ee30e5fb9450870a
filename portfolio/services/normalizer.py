"""
Response normalization for the contact and chatbot pipelines.

Maps gateway outcomes onto the fixed JSON envelopes returned to clients.
Every request produces exactly one envelope; exception details are never
copied into a response body.
"""
from typing import Any, Mapping

from fastapi import status
from fastapi.responses import JSONResponse

from portfolio.schemas.chat import ChatReply

# =============================================================================
# Envelope constants
# =============================================================================

CONTACT_SUCCESS_MESSAGE = "Form submitted and email sent successfully!"
CONTACT_VALIDATION_MESSAGE = "All fields are required"
CONTACT_FAILURE_MESSAGE = "Failed to handle form submission"

CHAT_VALIDATION_MESSAGE = "Message is required"
CHAT_FAILURE_MESSAGE = "Failed to process chatbot request"

# Substituted whenever the generator result carries no usable text.
FALLBACK_REPLY = "Sorry, I could not understand your message."

METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"
CORS_REJECTED_MESSAGE = "Not allowed by CORS"

# Field of the generator result that holds the reply text.
REPLY_TEXT_FIELD = "text"


def extract_reply(result: Any) -> ChatReply:
    """
    Build a ChatReply from a raw generator result.

    A result that is not a mapping, lacks the text field, or holds a
    non-string or blank value yields the fallback reply. This is a
    normalization rule, not a failure.
    """
    text = result.get(REPLY_TEXT_FIELD) if isinstance(result, Mapping) else None
    if not isinstance(text, str) or not text.strip():
        return ChatReply(reply=FALLBACK_REPLY)
    return ChatReply(reply=text)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Error envelope: {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message})


def contact_success() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"message": CONTACT_SUCCESS_MESSAGE},
    )


def chat_success(result: Any) -> JSONResponse:
    reply = extract_reply(result)
    return JSONResponse(status_code=status.HTTP_200_OK, content=reply.model_dump())


def validation_failure(message: str) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def server_failure(message: str) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def method_not_allowed() -> JSONResponse:
    return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_MESSAGE)


def cors_rejected() -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, CORS_REJECTED_MESSAGE)


__all__ = [
    "CHAT_FAILURE_MESSAGE",
    "CHAT_VALIDATION_MESSAGE",
    "CONTACT_FAILURE_MESSAGE",
    "CONTACT_SUCCESS_MESSAGE",
    "CONTACT_VALIDATION_MESSAGE",
    "FALLBACK_REPLY",
    "chat_success",
    "contact_success",
    "cors_rejected",
    "error_response",
    "extract_reply",
    "method_not_allowed",
    "server_failure",
    "validation_failure",
]
