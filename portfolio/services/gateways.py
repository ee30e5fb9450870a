"""
Gateway adapters for the contact and chatbot pipelines.

Each adapter performs one logical unit of external work per call and
surfaces exactly one of a result or a GatewayError. Collaborators are
injected; nothing here reads module-level clients.
"""
from typing import Any, Protocol

import structlog

from portfolio.core.exceptions import DeliveryError, StoreError, UpstreamError
from portfolio.delivery.models import MailMessage
from portfolio.schemas.chat import ChatRequest
from portfolio.schemas.contact import ContactSubmission
from portfolio.services.email import ContactEmailRenderer

logger = structlog.get_logger(__name__)


# =============================================================================
# Collaborator interfaces
# =============================================================================


class SubmissionStore(Protocol):
    async def save(self, submission: ContactSubmission) -> None: ...

    async def ping(self) -> dict[str, Any]: ...


class MailTransport(Protocol):
    async def send(self, message: MailMessage) -> Any: ...


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> dict[str, Any]: ...


# =============================================================================
# Contact: persist, notify, auto-reply
# =============================================================================


class ContactGateway:
    """
    Persists a submission and sends the two contact emails.

    The steps run strictly in order and are not transactional. A send
    failure after a successful save leaves the record in the store; there
    is no compensating delete.
    """

    def __init__(
        self,
        store: SubmissionStore,
        transport: MailTransport,
        renderer: ContactEmailRenderer,
    ):
        self.store = store
        self.transport = transport
        self.renderer = renderer

    async def submit(self, submission: ContactSubmission) -> None:
        """
        Run the contact side effects for one submission.

        Raises:
            StoreError: If persisting fails; no email is sent.
            DeliveryError: If either email fails after persisting.
        """
        try:
            await self.store.save(submission)
        except StoreError:
            raise
        except Exception as e:
            raise StoreError("Failed to persist contact submission") from e

        steps = (
            ("notification", self.renderer.notification),
            ("auto_reply", self.renderer.auto_reply),
        )
        for step, build in steps:
            try:
                await self.transport.send(build(submission))
            except Exception as e:
                logger.error(
                    "contact_delivery_failed",
                    step=step,
                    email=submission.email,
                    error=str(e),
                    persisted=True,
                )
                raise DeliveryError(f"Failed to send {step} email") from e

        logger.info("contact_submission_processed", email=submission.email)


# =============================================================================
# Chatbot: one generation call
# =============================================================================


class ChatGateway:
    """Forwards a chat message to the text generator exactly once."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def generate(self, request: ChatRequest) -> dict[str, Any]:
        """
        Return the generator's raw result for one message.

        Raises:
            UpstreamError: If the generator call fails for any reason.
        """
        try:
            return await self.generator.generate(request.message)
        except UpstreamError:
            raise
        except Exception as e:
            raise UpstreamError(f"Text generation failed: {type(e).__name__}") from e
