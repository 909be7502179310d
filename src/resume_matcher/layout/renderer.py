"""Per-section formatting policies driving a PageFlow."""

from __future__ import annotations

import logging
import re
from typing import Callable

from resume_matcher.layout.page_flow import PageFlow
from resume_matcher.models.section import Section, SectionKind

logger = logging.getLogger(__name__)

BULLET_MARKER = re.compile(r"^[-*]\s*")

# Fraction of the body size skipped for a blank content line.
BLANK_LINE_SPACING: dict[SectionKind, float] = {
    SectionKind.SUMMARY: 0.4,
    SectionKind.EXPERIENCE: 0.5,
    SectionKind.EDUCATION: 0.4,
    SectionKind.SKILLS: 0.3,
    SectionKind.OTHER: 0.4,
}

ENTRY_HEADING_GAP = 5
NAME_BLOCK_GAP = 2
CONTACT_GAP = 4
SKILL_LINE_GAP = 1


class SectionRenderer:
    """Renders sections onto a shared PageFlow, one policy per SectionKind.

    Rendering never raises on malformed content; odd input degrades to
    plain paragraphs.
    """

    def __init__(self, flow: PageFlow):
        self.flow = flow
        self._policies: dict[SectionKind, Callable[[Section], None]] = {
            SectionKind.NAME: self._render_name,
            SectionKind.CONTACT: self._render_contact,
            SectionKind.SUMMARY: self._render_paragraphs,
            SectionKind.EXPERIENCE: self._render_entries,
            SectionKind.EDUCATION: self._render_entries,
            SectionKind.SKILLS: self._render_skills,
            SectionKind.OTHER: self._render_paragraphs,
        }

    def render(self, section: Section) -> None:
        logger.debug("Rendering [%s] as %s", section.key, section.kind.name)
        self._policies[section.kind](section)

    def _blank_line(self, kind: SectionKind) -> None:
        self.flow.skip(self.flow.style.body_size * BLANK_LINE_SPACING[kind])

    def _render_name(self, section: Section) -> None:
        flow, style, fonts = self.flow, self.flow.style, self.flow.fonts
        lines = [line for line in section.lines if line]
        if lines:
            flow.draw_line(lines[0], fonts.bold, style.name_size, style.text_color, line_height=1.3)
        if len(lines) > 1:
            flow.draw_line(
                lines[1], fonts.regular, style.subtitle_size, style.muted_color, line_height=1.4
            )
        flow.skip(NAME_BLOCK_GAP)

    def _render_contact(self, section: Section) -> None:
        flow, style = self.flow, self.flow.style
        contact = " | ".join(line for line in section.lines if line)
        if contact:
            flow.draw_wrapped(
                contact, flow.fonts.italic, style.contact_size, style.muted_color, line_height=1.5
            )
        flow.skip(CONTACT_GAP)

    def _render_paragraphs(self, section: Section) -> None:
        flow, style = self.flow, self.flow.style
        flow.draw_section_header(section.key)
        for line in section.lines:
            if not line:
                self._blank_line(section.kind)
                continue
            flow.draw_wrapped(line, flow.fonts.regular, style.body_size, style.text_color)

    def _render_entries(self, section: Section) -> None:
        """Entry headings (job or degree lines) with bulleted details."""
        flow, style = self.flow, self.flow.style
        flow.draw_section_header(section.key)
        for line in section.lines:
            if not line:
                self._blank_line(section.kind)
            elif line.startswith(("-", "*")):
                text = BULLET_MARKER.sub("", line)
                flow.draw_wrapped(
                    f"- {text}",
                    flow.fonts.regular,
                    style.bullet_size,
                    style.text_color,
                    indent=style.bullet_indent,
                    line_height=1.5,
                )
            else:
                flow.skip(ENTRY_HEADING_GAP)
                flow.draw_wrapped(line, flow.fonts.bold, style.body_size, style.text_color)

    def _render_skills(self, section: Section) -> None:
        """``Category: a, b, c`` lines with a bold category label."""
        flow, style = self.flow, self.flow.style
        flow.draw_section_header(section.key)
        for line in section.lines:
            if not line:
                self._blank_line(section.kind)
                continue
            # only the first colon separates label from values
            label, colon, values = line.partition(":")
            if colon:
                flow.draw_label_value(label + colon, values.strip(), style.body_size, style.text_color)
            else:
                flow.draw_wrapped(line, flow.fonts.regular, style.body_size, style.text_color)
            flow.skip(SKILL_LINE_GAP)
