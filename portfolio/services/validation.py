"""Required-field validation for inbound request bodies."""
from typing import Any, Iterable

from portfolio.core.exceptions import ValidationError

CONTACT_REQUIRED_FIELDS = ("name", "email", "message")
CHAT_REQUIRED_FIELDS = ("message",)


def require_fields(body: Any, fields: Iterable[str]) -> dict[str, Any]:
    """
    Check that every required field is present and truthy.

    Args:
        body: Parsed JSON request body. Anything other than a dict counts
            as an empty body.
        fields: Names of the required fields.

    Returns:
        The body, unchanged.

    Raises:
        ValidationError: If any field is missing or falsy.
    """
    if not isinstance(body, dict):
        body = {}
    missing = [field for field in fields if not body.get(field)]
    if missing:
        raise ValidationError()
    return body
