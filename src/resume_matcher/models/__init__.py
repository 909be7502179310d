"""Data models for the resume matcher."""

from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.models.section import Section, SectionKind

__all__ = [
    "AnalysisResult",
    "Section",
    "SectionKind",
]
