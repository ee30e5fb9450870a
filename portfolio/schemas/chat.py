"""Chatbot schemas."""
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Chatbot request; lives for the duration of one request."""
    message: str = Field(..., min_length=1)


class ChatReply(BaseModel):
    """Chatbot reply relayed to the client."""
    reply: str = Field(..., min_length=1)


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint."""
    error: str
