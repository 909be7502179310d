"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_matcher.layout.style import LayoutStyle


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    analysis_max_tokens: int = 1024
    timeout: int = 60

    def __post_init__(self) -> None:
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")
        if self.analysis_max_tokens < 1:
            raise ValueError(f"analysis_max_tokens must be >= 1, got {self.analysis_max_tokens}")


@dataclass(frozen=True)
class EmailConfig:
    from_email: str = "onboarding@resend.dev"
    subject: str = "Your tailored resume is ready"
    attachment_filename: str = "tailored-resume.pdf"
    api_url: str = "https://api.resend.com/emails"
    timeout: int = 30

    def __post_init__(self) -> None:
        if "@" not in self.from_email:
            raise ValueError(f"from_email must be an email address, got {self.from_email!r}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")

    @property
    def resolved_from_email(self) -> str:
        """Sender address, preferring RESEND_FROM_EMAIL from the environment."""
        return os.environ.get("RESEND_FROM_EMAIL") or self.from_email


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    layout: LayoutStyle = field(default_factory=LayoutStyle)
    email: EmailConfig = field(default_factory=EmailConfig)


def _layout_from_raw(raw: dict) -> LayoutStyle:
    # YAML has no tuples; colours arrive as lists
    values = {k: tuple(v) if isinstance(v, list) else v for k, v in raw.items()}
    return LayoutStyle(**values)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        layout=_layout_from_raw(raw.get("layout", {})),
        email=EmailConfig(**raw.get("email", {})),
    )
