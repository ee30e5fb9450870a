"""Contact form API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from portfolio.api.deps import get_contact_gateway, read_json_body
from portfolio.core.exceptions import MethodError, ValidationError
from portfolio.core.sentry import capture_exception
from portfolio.schemas.chat import ErrorResponse
from portfolio.schemas.contact import ContactFormRequest, ContactFormResponse, ContactSubmission
from portfolio.services.gateways import ContactGateway
from portfolio.services.normalizer import (
    CONTACT_FAILURE_MESSAGE,
    CONTACT_VALIDATION_MESSAGE,
    contact_success,
    server_failure,
    validation_failure,
)
from portfolio.services.validation import CONTACT_REQUIRED_FIELDS, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post(
    "",
    response_model=ContactFormResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_contact_form(
    body: Any = Depends(read_json_body),
    gateway: ContactGateway = Depends(get_contact_gateway),
) -> JSONResponse:
    """
    Submit a contact form.

    The submission is stored, the operator is notified and the submitter
    receives an auto-reply, in that order. A failed email does not undo
    the stored submission.
    """
    try:
        data = ContactFormRequest.model_validate(require_fields(body, CONTACT_REQUIRED_FIELDS))
    except (ValidationError, SchemaValidationError):
        logger.info("Contact form rejected: required fields missing")
        return validation_failure(CONTACT_VALIDATION_MESSAGE)

    try:
        submission = ContactSubmission.from_request(data)
        logger.info(f"Contact form received: email={submission.email}")
        await gateway.submit(submission)
    except Exception as e:
        logger.error(f"Error handling contact form submission: {e!r}", exc_info=True)
        capture_exception(e, extra={"endpoint": "contact"})
        return server_failure(CONTACT_FAILURE_MESSAGE)

    return contact_success()


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def contact_method_not_allowed(request: Request) -> None:
    raise MethodError(request.method)
