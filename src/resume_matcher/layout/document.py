"""Assemble structured resume text into a paginated PDF."""

from __future__ import annotations

import logging
from io import BytesIO

from fpdf import FPDF

from resume_matcher.layout.fonts import FontSet
from resume_matcher.layout.page_flow import PageFlow
from resume_matcher.layout.renderer import SectionRenderer
from resume_matcher.layout.sections import split_sections
from resume_matcher.layout.style import LayoutStyle

logger = logging.getLogger(__name__)


class ResumeDocument:
    """One PDF document with its own fonts, cursor and pages.

    Instances are not shared; build one per resume. Errors raised while
    constructing the document or its fonts are fatal setup errors, while
    rendering itself never fails on content.
    """

    def __init__(self, style: LayoutStyle | None = None):
        self.style = style or LayoutStyle()
        self.pdf = FPDF(unit="pt", format=(self.style.page_width, self.style.page_height))
        self.pdf.set_auto_page_break(auto=False)
        self.fonts = FontSet.core(self.style.font_family)
        self.flow = PageFlow(self.pdf, self.fonts, self.style)
        self.renderer = SectionRenderer(self.flow)

    def render(self, text: str) -> int:
        """Render every section of ``text`` in order; return the section count."""
        sections = split_sections(text)
        for section in sections:
            self.renderer.render(section)
        logger.debug("Rendered %d sections onto %d pages", len(sections), self.flow.page_count)
        return len(sections)

    def to_bytes(self) -> bytes:
        buf = BytesIO()
        self.pdf.output(buf)
        return buf.getvalue()


def build_resume_pdf(text: str, style: LayoutStyle | None = None) -> bytes:
    """Render section-marked resume text to PDF bytes.

    Input without section markers produces a single blank page; callers
    that need a "nothing to render" error must check for sections first.
    """
    document = ResumeDocument(style)
    document.render(text)
    return document.to_bytes()
