"""
Long-lived collaborator handles.

Built once in the application lifespan and shared by every request through
``app.state.services``. Tests construct a Services instance directly with
doubles in place of the real clients.
"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from portfolio.core.config import Settings
from portfolio.database import SqlSubmissionStore, build_async_engine, build_session_factory
from portfolio.delivery.channels import SendGridTransport
from portfolio.services.email import ContactEmailRenderer
from portfolio.services.gateways import MailTransport, SubmissionStore, TextGenerator
from portfolio.services.generative import AnthropicTextGenerator


@dataclass(frozen=True)
class Services:
    """Collaborators injected into the request pipelines."""

    store: SubmissionStore
    transport: MailTransport
    generator: TextGenerator
    renderer: ContactEmailRenderer
    engine: Optional[AsyncEngine] = None


def build_services(settings: Settings) -> Services:
    """Open the store engine and create the mail and generator clients."""
    engine = build_async_engine(settings.async_database_url, echo=settings.debug)
    return Services(
        store=SqlSubmissionStore(build_session_factory(engine)),
        transport=SendGridTransport(api_key=settings.sendgrid_api_key),
        generator=AnthropicTextGenerator(
            api_key=settings.anthropic_api_key,
            model=settings.llm_model,
            max_tokens=settings.llm_max_tokens,
        ),
        renderer=ContactEmailRenderer(settings),
        engine=engine,
    )
