"""
Portfolio Email Rendering
Jinja2-based rendering of the contact notification and auto-reply emails.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog
from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from portfolio.core.config import Settings
from portfolio.delivery.models import MailMessage
from portfolio.schemas.contact import ContactSubmission


logger = structlog.get_logger(__name__)


# Template directory path
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class ContactEmailRenderer:
    """
    Builds the two emails sent for every contact submission.

    Renders HTML and plain-text bodies from Jinja2 templates with
    autoescaping enabled, since submissions are untrusted input.
    """

    def __init__(self, settings: Settings, templates_dir: Path = TEMPLATES_DIR):
        self._settings = settings
        self._templates_dir = templates_dir
        self._env: Optional[Environment] = None

    @property
    def env(self) -> Environment:
        """Lazy-loaded Jinja2 environment."""
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader(str(self._templates_dir)),
                autoescape=True,
                trim_blocks=True,
                lstrip_blocks=True,
            )
        return self._env

    def _get_base_context(self) -> dict[str, Any]:
        return {
            "app_name": self._settings.app_name,
            "owner_name": self._settings.from_name,
            "current_year": datetime.now().year,
        }

    def render_email(self, template_name: str, context: dict[str, Any]) -> tuple[str, str]:
        """
        Render both versions of an email template.

        Args:
            template_name: Base name of the template (without extension).
            context: Variables passed to the template.

        Returns:
            Tuple of (html_content, text_content).
        """
        full_context = {**self._get_base_context(), **context}
        text_content = self.env.get_template(f"{template_name}.txt").render(**full_context)

        try:
            html_content = self.env.get_template(f"{template_name}.html").render(**full_context)
        except TemplateNotFound:
            logger.warning("html_template_not_found", template=f"{template_name}.html")
            html_content = ""

        return html_content, text_content

    def notification(self, submission: ContactSubmission) -> MailMessage:
        """Message to the operator announcing a new submission."""
        html_content, text_content = self.render_email(
            "contact_notification",
            {
                "name": submission.name,
                "email": submission.email,
                "message": submission.message,
                "submitted_at": submission.submitted_at,
            },
        )
        return MailMessage(
            subject=f"New Portfolio Message from {submission.name}"[:200],
            body_text=text_content,
            body_html=html_content,
            from_email=self._settings.from_email,
            from_name=self._settings.from_name,
            to_email=self._settings.admin_email,
            reply_to=submission.email,
        )

    def auto_reply(self, submission: ContactSubmission) -> MailMessage:
        """Acknowledgement sent back to the submitter."""
        html_content, text_content = self.render_email(
            "contact_autoreply",
            {"name": submission.name},
        )
        return MailMessage(
            subject="Message Received",
            body_text=text_content,
            body_html=html_content,
            from_email=self._settings.from_email,
            from_name=self._settings.from_name,
            to_email=submission.email,
            to_name=submission.name,
            reply_to=self._settings.admin_email,
        )


__all__ = ["ContactEmailRenderer", "TEMPLATES_DIR"]
