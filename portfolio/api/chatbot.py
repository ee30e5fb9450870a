"""Chatbot API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from portfolio.api.deps import get_chat_gateway, read_json_body
from portfolio.core.exceptions import MethodError, ValidationError
from portfolio.core.sentry import capture_exception
from portfolio.schemas.chat import ChatReply, ChatRequest, ErrorResponse
from portfolio.services.gateways import ChatGateway
from portfolio.services.normalizer import (
    CHAT_FAILURE_MESSAGE,
    CHAT_VALIDATION_MESSAGE,
    chat_success,
    server_failure,
    validation_failure,
)
from portfolio.services.validation import CHAT_REQUIRED_FIELDS, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chatbot", tags=["chatbot"])


@router.post(
    "",
    response_model=ChatReply,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_chat_message(
    body: Any = Depends(read_json_body),
    gateway: ChatGateway = Depends(get_chat_gateway),
) -> JSONResponse:
    """Forward a message to the text generator and relay its reply."""
    try:
        request = ChatRequest.model_validate(require_fields(body, CHAT_REQUIRED_FIELDS))
    except (ValidationError, SchemaValidationError):
        return validation_failure(CHAT_VALIDATION_MESSAGE)

    try:
        logger.info(f"Chat message received ({len(request.message)} chars)")
        result = await gateway.generate(request)
        return chat_success(result)
    except Exception as e:
        logger.error(f"Error processing chatbot request: {e!r}", exc_info=True)
        capture_exception(e, extra={"endpoint": "chatbot"})
        return server_failure(CHAT_FAILURE_MESSAGE)


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def chatbot_method_not_allowed(request: Request) -> None:
    raise MethodError(request.method)
