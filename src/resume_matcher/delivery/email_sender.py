"""Deliver the tailored resume PDF by email through the Resend HTTP API."""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path

import httpx
from jinja2 import Environment, FileSystemLoader

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
RESEND_API_URL = "https://api.resend.com/emails"

# (minimum score, label, colour), highest band first
SCORE_BANDS = (
    (80, "Strong match", "#10b981"),
    (60, "Good match", "#f59e0b"),
    (40, "Partial match", "#f97316"),
    (0, "Weak match", "#ef4444"),
)


class EmailConfigError(ValueError):
    """Raised when the email sender is missing credentials."""


def _band(score: int) -> tuple[int, str, str]:
    for band in SCORE_BANDS:
        if score >= band[0]:
            return band
    return SCORE_BANDS[-1]


def score_label(score: int) -> str:
    return _band(score)[1]


def score_color(score: int) -> str:
    return _band(score)[2]


def render_email_html(score: int, summary: str) -> str:
    """Render the score-card email body."""
    env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=True)
    template = env.get_template("resume_email.html")
    return template.render(
        score=score,
        summary=summary,
        label=score_label(score),
        color=score_color(score),
    )


class EmailSender:
    """Sends resume PDFs as attachments via Resend."""

    def __init__(
        self,
        api_key: str | None = None,
        from_email: str = "onboarding@resend.dev",
        *,
        subject: str = "Your tailored resume is ready",
        attachment_filename: str = "tailored-resume.pdf",
        api_url: str = RESEND_API_URL,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else os.environ.get("RESEND_API_KEY", "")
        self.from_email = from_email
        self.subject = subject
        self.attachment_filename = attachment_filename
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def build_payload(self, to_email: str, pdf_bytes: bytes, score: int, summary: str) -> dict:
        return {
            "from": self.from_email,
            "to": to_email,
            "subject": self.subject,
            "html": render_email_html(score, summary),
            "attachments": [
                {
                    "filename": self.attachment_filename,
                    "content": base64.b64encode(pdf_bytes).decode("ascii"),
                }
            ],
        }

    async def send_resume(self, to_email: str, pdf_bytes: bytes, score: int, summary: str) -> str:
        """Send the PDF to ``to_email`` and return the provider message id."""
        if not self.api_key:
            raise EmailConfigError("RESEND_API_KEY is not set - email not sent")

        payload = self.build_payload(to_email, pdf_bytes, score, summary)
        headers = {"Authorization": f"Bearer {self.api_key}"}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.api_url, json=payload, headers=headers)
        response.raise_for_status()

        message_id = response.json().get("id", "")
        logger.info("Resume emailed to %s (id=%s, %d bytes)", to_email, message_id, len(pdf_bytes))
        return message_id
