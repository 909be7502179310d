"""Reduce arbitrary text to what the core PDF fonts can render."""

from __future__ import annotations

import re

# Typographic punctuation commonly produced by LLMs and word processors.
_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile("[\u2018\u2019]"), "'"),  # smart single quotes
    (re.compile("[\u201c\u201d]"), '"'),  # smart double quotes
    (re.compile("\u2014"), " - "),  # em dash
    (re.compile("\u2013"), "-"),  # en dash
    (re.compile("[\u2022\u00b7]"), "-"),  # bullet / middle dot
    (re.compile("\u2026"), "..."),  # ellipsis
    (re.compile("\u2122"), "(TM)"),  # trademark
    (re.compile("\u00ae"), "(R)"),  # registered
]

# Printable Latin-1 plus the whitespace the word wrapper splits on.
_UNRENDERABLE = re.compile("[^\t\n\r\x20-\x7e\xa0-\xff]")


def sanitize(text: str) -> str:
    """Map typographic punctuation to ASCII and drop unrenderable characters."""
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return _UNRENDERABLE.sub("", text)
