"""Contact form schemas."""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContactFormRequest(BaseModel):
    """Contact form submission request."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactSubmission(BaseModel):
    """
    A validated contact form submission.

    Built only after the validator has passed; the submission time is
    stamped at construction.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    message: str
    submitted_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_request(cls, data: ContactFormRequest) -> "ContactSubmission":
        return cls(name=data.name, email=data.email, message=data.message)


class ContactFormResponse(BaseModel):
    """Contact form submission response."""
    message: str
