"""
Tests for Chatbot API endpoints.
Tests validation, reply relaying, fallback substitution and error envelopes.
"""
import pytest

from portfolio.core.exceptions import UpstreamError


class TestChatbotValidation:
    """Tests for request validation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"message": ""}, {"text": "hi"}, {"message": None}])
    async def test_missing_message_returns_400(self, client, mock_generator, payload):
        """Test a missing or empty message is rejected without calling the generator."""
        response = await client.post("/api/chatbot", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
        mock_generator.generate.assert_not_awaited()


class TestChatbotReply:
    """Tests for successful generation."""

    @pytest.mark.asyncio
    async def test_reply_relayed(self, client, mock_generator):
        """Test a well-formed generator result is relayed unchanged."""
        mock_generator.generate.return_value = {"text": "Hello!"}

        response = await client.post("/api/chatbot", json={"message": "Hi there"})

        assert response.status_code == 200
        assert response.json() == {"reply": "Hello!"}
        mock_generator.generate.assert_awaited_once_with("Hi there")

    @pytest.mark.asyncio
    async def test_missing_text_uses_fallback(self, client, mock_generator):
        """Test a result without the text field yields the fallback reply."""
        mock_generator.generate.return_value = {}

        response = await client.post("/api/chatbot", json={"message": "Hi there"})

        assert response.status_code == 200
        assert response.json() == {"reply": "Sorry, I could not understand your message."}

    @pytest.mark.asyncio
    async def test_other_field_name_uses_fallback(self, client, mock_generator):
        """Test only the canonical text field is read."""
        mock_generator.generate.return_value = {"generated_text": "Hello!"}

        response = await client.post("/api/chatbot", json={"message": "Hi there"})

        assert response.status_code == 200
        assert response.json() == {"reply": "Sorry, I could not understand your message."}


class TestChatbotFailures:
    """Tests for generator failures."""

    @pytest.mark.asyncio
    async def test_upstream_error_returns_500(self, client, mock_generator):
        """Test a failed generation returns the generic error envelope."""
        mock_generator.generate.side_effect = UpstreamError("Anthropic API error: APIConnectionError")

        response = await client.post("/api/chatbot", json={"message": "Hi there"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process chatbot request"}
        mock_generator.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_500(self, client, mock_generator):
        """Test arbitrary exceptions are contained and not echoed."""
        mock_generator.generate.side_effect = RuntimeError("api_key=sk-ant-secret")

        response = await client.post("/api/chatbot", json={"message": "Hi there"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process chatbot request"}
        assert "sk-ant-secret" not in response.text


class TestChatbotMethods:
    """Tests for disallowed HTTP methods."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_disallowed_method_returns_405(self, client, mock_generator, method):
        """Test any verb other than POST is refused."""
        response = await client.request(method, "/api/chatbot")

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}
        mock_generator.generate.assert_not_awaited()
