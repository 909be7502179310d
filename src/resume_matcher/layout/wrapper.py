"""Greedy word wrapping against a font's width table."""

from __future__ import annotations

from typing import Protocol


class FontMetrics(Protocol):
    def measure(self, text: str, size: float) -> float: ...


def wrap_words(text: str, font: FontMetrics, size: float, max_width: float) -> list[str]:
    """Break text into lines no wider than max_width at the given size.

    Tokens are never split: a single word wider than max_width is emitted
    alone on its own line. Text with no tokens yields one empty line so
    callers always advance by at least one line.
    """
    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if font.measure(candidate, size) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
