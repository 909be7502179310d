"""PDF layout engine for section-marked resume text."""
from resume_matcher.layout.document import ResumeDocument, build_resume_pdf
from resume_matcher.layout.sanitizer import sanitize
from resume_matcher.layout.sections import split_sections
from resume_matcher.layout.style import LayoutStyle
from resume_matcher.layout.wrapper import wrap_words

__all__ = [
    "LayoutStyle",
    "ResumeDocument",
    "build_resume_pdf",
    "sanitize",
    "split_sections",
    "wrap_words",
]
