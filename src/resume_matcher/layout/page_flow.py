"""Top-down text flow over an fpdf2 document with automatic page breaks.

The cursor works in a bottom-up coordinate system (``y == page_height`` at
the top edge, ``y == 0`` at the bottom edge) and is converted to fpdf2's
top-down coordinates only when something is actually drawn. Every primitive
that consumes vertical space calls :meth:`PageFlow.ensure_space` first, so
no section renderer needs page-break logic of its own.

Text is sanitized once on entry to each public drawing method; the same
sanitized string is then measured, wrapped and drawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fpdf import FPDF

from resume_matcher.layout.fonts import CoreFontMetrics, FontSet
from resume_matcher.layout.sanitizer import sanitize
from resume_matcher.layout.style import RGB, LayoutStyle
from resume_matcher.layout.wrapper import wrap_words

logger = logging.getLogger(__name__)

# (sanitized text, font, x offset from the left margin)
Run = tuple[str, CoreFontMetrics, float]


@dataclass
class Cursor:
    page: int
    y: float


class PageFlow:
    def __init__(self, pdf: FPDF, fonts: FontSet, style: LayoutStyle):
        self.pdf = pdf
        self.fonts = fonts
        self.style = style
        if pdf.page == 0:
            pdf.add_page()
        self.cursor = Cursor(page=pdf.page, y=style.top_y)

    @property
    def page_count(self) -> int:
        return len(self.pdf.pages)

    def ensure_space(self, height: float) -> None:
        """Start a new page unless ``height`` fits above the bottom margin."""
        if self.cursor.y - height < self.style.bottom_y:
            self.pdf.add_page()
            self.cursor.page = self.pdf.page
            self.cursor.y = self.style.top_y
            logger.debug("Page %d started (needed %.1fpt)", self.cursor.page, height)

    def skip(self, amount: float) -> None:
        """Move the cursor down without drawing, never past the bottom margin."""
        self.cursor.y = max(self.cursor.y - amount, self.style.bottom_y)

    def draw_line(
        self,
        text: str,
        font: CoreFontMetrics,
        size: float,
        color: RGB,
        x_offset: float = 0,
        line_height: float = 1.5,
    ) -> None:
        self.draw_runs([(sanitize(text), font, x_offset)], size, color, line_height)

    def draw_wrapped(
        self,
        text: str,
        font: CoreFontMetrics,
        size: float,
        color: RGB,
        indent: float = 0,
        line_height: float = 1.55,
    ) -> None:
        lines = wrap_words(sanitize(text), font, size, self.style.content_width - indent)
        for line in lines:
            self.draw_runs([(line, font, indent)], size, color, line_height)

    def draw_label_value(
        self,
        label: str,
        value: str,
        size: float,
        color: RGB,
        line_height: float = 1.55,
    ) -> None:
        """Bold label followed by a wrapped value on the same baseline.

        The value wraps into the width left of the label; continuation lines
        start back at the content margin.
        """
        bold, regular = self.fonts.bold, self.fonts.regular
        label = sanitize(label)
        label_width = bold.measure(label + " ", size)
        value_lines = wrap_words(
            sanitize(value), regular, size, self.style.content_width - label_width
        )
        self.draw_runs(
            [(label, bold, 0), (value_lines[0], regular, label_width)],
            size,
            color,
            line_height,
        )
        for extra in value_lines[1:]:
            self.draw_runs([(extra, regular, 0)], size, color, 1.5)

    def draw_section_header(self, label: str) -> None:
        """Upper-cased label with a full-width rule beneath it."""
        style = self.style
        self.skip(style.header_lead)
        # label and rule always land on the same page
        self.ensure_space(style.header_height)
        text = sanitize(label.upper())
        if text:
            self._put_text(
                text,
                self.fonts.bold,
                style.header_size,
                style.accent_color,
                style.margin_x,
                self.cursor.y - style.header_size,
            )
        self.cursor.y -= style.header_size + style.header_rule_gap
        self._put_rule(self.cursor.y)
        self.cursor.y -= style.header_trailing

    def draw_runs(self, runs: list[Run], size: float, color: RGB, line_height: float) -> None:
        """Draw already-sanitized runs on one shared baseline."""
        advance = size * line_height
        self.ensure_space(advance)
        baseline = self.cursor.y - size
        for text, font, x_offset in runs:
            if not text:
                continue
            self._put_text(text, font, size, color, self.style.margin_x + x_offset, baseline)
        self.cursor.y -= advance

    def _put_text(
        self,
        text: str,
        font: CoreFontMetrics,
        size: float,
        color: RGB,
        x: float,
        baseline: float,
    ) -> None:
        font.apply(self.pdf, size)
        self.pdf.set_text_color(*color)
        self.pdf.text(x, self.style.page_height - baseline, text)

    def _put_rule(self, y: float) -> None:
        style = self.style
        top = style.page_height - y
        self.pdf.set_draw_color(*style.rule_color)
        self.pdf.set_line_width(style.rule_thickness)
        self.pdf.line(style.margin_x, top, style.page_width - style.margin_x, top)
