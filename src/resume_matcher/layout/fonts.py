"""Font metrics backed by the fpdf2 core (non-embedded) fonts."""

from __future__ import annotations

from dataclasses import dataclass

from fpdf import FPDF


class CoreFontMetrics:
    """Width table for one core face (family + style).

    Measurement happens on a private FPDF probe, so measuring never changes
    the font state of the document being drawn.
    """

    def __init__(self, family: str, style: str = ""):
        self.family = family
        self.style = style
        self._probe = FPDF(unit="pt")
        self._probe.set_font(family, style)

    def measure(self, text: str, size: float) -> float:
        self._probe.set_font_size(size)
        return self._probe.get_string_width(text)

    def apply(self, pdf: FPDF, size: float) -> None:
        """Select this face on the document for drawing."""
        pdf.set_font(self.family, self.style, size)

    def __repr__(self) -> str:
        return f"CoreFontMetrics({self.family!r}, {self.style!r})"


@dataclass(frozen=True)
class FontSet:
    regular: CoreFontMetrics
    bold: CoreFontMetrics
    italic: CoreFontMetrics

    @classmethod
    def core(cls, family: str = "helvetica") -> FontSet:
        return cls(
            regular=CoreFontMetrics(family, ""),
            bold=CoreFontMetrics(family, "B"),
            italic=CoreFontMetrics(family, "I"),
        )
