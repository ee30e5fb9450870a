"""
Tests for the validator and the response normalizer.
"""
import json

import pytest

from portfolio.core.exceptions import ValidationError
from portfolio.services.normalizer import (
    FALLBACK_REPLY,
    chat_success,
    contact_success,
    extract_reply,
    method_not_allowed,
    server_failure,
    validation_failure,
)
from portfolio.services.validation import CHAT_REQUIRED_FIELDS, CONTACT_REQUIRED_FIELDS, require_fields


class TestRequireFields:
    """Tests for require_fields."""

    def test_returns_body_unchanged(self):
        body = {"name": "Jane", "email": "jane@example.com", "message": "Hi", "extra": 1}

        assert require_fields(body, CONTACT_REQUIRED_FIELDS) is body

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"name": "Jane", "email": "jane@example.com"},
            {"name": "Jane", "email": "", "message": "Hi"},
            {"name": None, "email": "jane@example.com", "message": "Hi"},
        ],
    )
    def test_rejects_missing_or_falsy(self, body):
        with pytest.raises(ValidationError, match="required fields missing"):
            require_fields(body, CONTACT_REQUIRED_FIELDS)

    @pytest.mark.parametrize("body", [None, [], "message", 42])
    def test_non_dict_body_counts_as_empty(self, body):
        with pytest.raises(ValidationError):
            require_fields(body, CHAT_REQUIRED_FIELDS)

    def test_no_required_fields(self):
        assert require_fields({}, ()) == {}


class TestExtractReply:
    """Tests for chat reply normalization."""

    def test_text_field(self):
        assert extract_reply({"text": "Hello!"}).reply == "Hello!"

    @pytest.mark.parametrize(
        "result",
        [
            {},
            {"text": ""},
            {"text": "   "},
            {"text": None},
            {"text": 42},
            {"generated_text": "Hello!"},
            None,
            "Hello!",
        ],
    )
    def test_fallback(self, result):
        assert extract_reply(result).reply == FALLBACK_REPLY

    def test_fallback_constant(self):
        assert FALLBACK_REPLY == "Sorry, I could not understand your message."


class TestEnvelopes:
    """Tests for the JSON envelopes."""

    def test_contact_success(self):
        response = contact_success()

        assert response.status_code == 200
        assert json.loads(response.body) == {"message": "Form submitted and email sent successfully!"}

    def test_chat_success(self):
        response = chat_success({"text": "Hello!"})

        assert response.status_code == 200
        assert json.loads(response.body) == {"reply": "Hello!"}

    def test_chat_success_fallback(self):
        response = chat_success({})

        assert json.loads(response.body) == {"reply": FALLBACK_REPLY}

    def test_failures(self):
        assert validation_failure("Message is required").status_code == 400
        assert server_failure("Failed to process chatbot request").status_code == 500

        response = method_not_allowed()
        assert response.status_code == 405
        assert json.loads(response.body) == {"error": "Method Not Allowed"}
