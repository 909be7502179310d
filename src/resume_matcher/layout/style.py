"""Page geometry, typography and colours for the resume layout."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class LayoutStyle:
    # US Letter, in points
    page_width: float = 612
    page_height: float = 792
    margin_x: float = 58
    margin_y: float = 54

    font_family: str = "helvetica"
    name_size: float = 22
    subtitle_size: float = 11
    contact_size: float = 8.5
    header_size: float = 9.5
    body_size: float = 9.5
    bullet_size: float = 9

    text_color: RGB = (18, 18, 31)
    accent_color: RGB = (97, 46, 184)
    muted_color: RGB = (107, 107, 120)
    rule_color: RGB = (212, 212, 222)

    header_lead: float = 8
    header_rule_gap: float = 4
    header_trailing: float = 7
    rule_thickness: float = 0.6
    bullet_indent: float = 14

    def __post_init__(self) -> None:
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError("page_width and page_height must be positive")
        if not 0 <= self.margin_x < self.page_width / 2:
            raise ValueError(f"margin_x must be in [0, {self.page_width / 2}), got {self.margin_x}")
        if not 0 <= self.margin_y < self.page_height / 2:
            raise ValueError(f"margin_y must be in [0, {self.page_height / 2}), got {self.margin_y}")
        for name in (
            "name_size",
            "subtitle_size",
            "contact_size",
            "header_size",
            "body_size",
            "bullet_size",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("text_color", "accent_color", "muted_color", "rule_color"):
            color = getattr(self, name)
            if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
                raise ValueError(f"{name} must be three channels in 0-255, got {color}")

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin_x

    @property
    def top_y(self) -> float:
        """Cursor position at the top of a fresh page."""
        return self.page_height - self.margin_y

    @property
    def bottom_y(self) -> float:
        return self.margin_y

    @property
    def header_height(self) -> float:
        """Vertical space a section header consumes after its lead-in."""
        return self.header_size + self.header_rule_gap + self.header_trailing
