"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import AsyncMock

import fitz
import pytest
from fpdf import FPDF

from resume_matcher.clients.llm_client import LLMClient, LLMResponse
from resume_matcher.layout.document import ResumeDocument
from resume_matcher.layout.fonts import FontSet
from resume_matcher.layout.page_flow import PageFlow
from resume_matcher.layout.style import LayoutStyle

SAMPLE_RESUME = """[NAME]
Jane Doe
Senior Backend Engineer

[CONTACT]
jane@example.com
(555) 010-2030
Berlin, Germany

[SUMMARY]
Backend engineer with eight years of experience building distributed systems in Go and Rust.

Focused on reliability, observability and developer tooling.

[EXPERIENCE]
Staff Engineer - Acme Corp | 2020 - Present
- Led migration of the billing platform to event sourcing, cutting reconciliation time by 70%
- Built a Rust ingestion service handling 2M events per minute
Software Engineer - Initech | 2016 - 2020
* Designed the internal deployment pipeline used by 40 teams

[EDUCATION]
B.Sc. Computer Science - TU Berlin | 2016

[SKILLS]
Languages: Go, Rust, Python, SQL
Infrastructure: Kubernetes, Terraform, AWS
"""


@dataclass
class FixedWidthFont:
    """Every character is half the font size wide."""

    ratio: float = 0.5

    def measure(self, text: str, size: float) -> float:
        return len(text) * size * self.ratio


@dataclass
class DrawnText:
    page: int
    text: str
    style: str  # "", "B" or "I"
    size: float
    color: tuple[int, int, int]
    x: float
    baseline: float


def record_text(flow: PageFlow) -> list[DrawnText]:
    """Capture every text run the flow puts on a page."""
    drawn: list[DrawnText] = []
    original = flow._put_text

    def _spy(text, font, size, color, x, baseline):
        drawn.append(DrawnText(flow.cursor.page, text, font.style, size, tuple(color), x, baseline))
        original(text, font, size, color, x, baseline)

    flow._put_text = _spy
    return drawn


def record_rules(flow: PageFlow) -> list[tuple[int, float]]:
    """Capture (page, y) for every horizontal rule."""
    rules: list[tuple[int, float]] = []
    original = flow._put_rule

    def _spy(y):
        rules.append((flow.cursor.page, y))
        original(y)

    flow._put_rule = _spy
    return rules


def pdf_spans(pdf_bytes: bytes) -> list[list[dict]]:
    """Text spans per page, as extracted by PyMuPDF."""
    pages = []
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        for page in doc:
            spans = []
            for block in page.get_text("dict")["blocks"]:
                for line in block.get("lines", []):
                    spans.extend(s for s in line["spans"] if s["text"].strip())
            pages.append(spans)
    return pages


def pdf_rule_counts(pdf_bytes: bytes) -> list[int]:
    """Number of vector paths drawn on each page."""
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return [len(page.get_drawings()) for page in doc]


def rgb_int(color: tuple[int, int, int]) -> int:
    r, g, b = color
    return (r << 16) | (g << 8) | b


@pytest.fixture
def style() -> LayoutStyle:
    return LayoutStyle()


@pytest.fixture
def fonts() -> FontSet:
    return FontSet.core()


@pytest.fixture
def flow(style, fonts) -> PageFlow:
    pdf = FPDF(unit="pt", format=(style.page_width, style.page_height))
    pdf.set_auto_page_break(auto=False)
    return PageFlow(pdf, fonts, style)


@pytest.fixture
def document() -> ResumeDocument:
    return ResumeDocument()


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="[NAME]\nJane Doe", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client
