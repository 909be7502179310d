"""Pydantic models for section-marked resume text."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SectionKind(str, Enum):
    NAME = "NAME"
    CONTACT = "CONTACT"
    SUMMARY = "SUMMARY"
    EXPERIENCE = "EXPERIENCE"
    EDUCATION = "EDUCATION"
    SKILLS = "SKILLS"
    OTHER = "OTHER"  # any unrecognised marker; the raw key is kept on the Section

    @classmethod
    def from_key(cls, key: str) -> SectionKind:
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str  # marker label exactly as written, e.g. "EXPERIENCE"
    content: str

    @property
    def kind(self) -> SectionKind:
        return SectionKind.from_key(self.key)

    @property
    def lines(self) -> list[str]:
        """Content lines, each stripped of surrounding whitespace."""
        return [line.strip() for line in self.content.split("\n")]
