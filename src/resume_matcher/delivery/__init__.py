"""Email delivery of rendered resumes."""
from resume_matcher.delivery.email_sender import (
    EmailConfigError,
    EmailSender,
    render_email_html,
    score_color,
    score_label,
)

__all__ = [
    "EmailConfigError",
    "EmailSender",
    "render_email_html",
    "score_color",
    "score_label",
]
