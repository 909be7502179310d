"""Split structured resume text into sections on [MARKER] boundaries."""

from __future__ import annotations

import re

from resume_matcher.models.section import Section

SECTION_MARKER = re.compile(r"\[([A-Z]+)\]")


def split_sections(text: str) -> list[Section]:
    """Return sections in source order.

    Text before the first marker is dropped. Input without any marker
    yields an empty list.
    """
    matches = list(SECTION_MARKER.finditer(text))
    sections: list[Section] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        sections.append(Section(key=match.group(1), content=text[match.end() : end].strip()))
    return sections
