"""Tests for the [MARKER] section splitter and section model."""

import pytest
from pydantic import ValidationError

from resume_matcher.layout.sections import split_sections
from resume_matcher.models.section import Section, SectionKind


class TestSplitSections:
    def test_round_trip(self):
        text = "[NAME] Jane Doe \n[SKILLS]\n  Languages: Go  \n"
        assert split_sections(text) == [
            Section(key="NAME", content="Jane Doe"),
            Section(key="SKILLS", content="Languages: Go"),
        ]

    def test_preamble_dropped(self):
        sections = split_sections("Sure! Here is your resume:\n[NAME]\nJane")
        assert [s.key for s in sections] == ["NAME"]
        assert sections[0].content == "Jane"

    def test_no_markers_returns_empty(self):
        assert split_sections("Jane Doe\nEngineer") == []
        assert split_sections("") == []

    def test_empty_content(self):
        sections = split_sections("[SUMMARY][SKILLS]Go")
        assert sections[0] == Section(key="SUMMARY", content="")
        assert sections[1] == Section(key="SKILLS", content="Go")

    def test_marker_mid_line(self):
        sections = split_sections("intro [NAME] Jane [CONTACT] jane@example.com")
        assert [(s.key, s.content) for s in sections] == [
            ("NAME", "Jane"),
            ("CONTACT", "jane@example.com"),
        ]

    @pytest.mark.parametrize("token", ["[Name]", "[name]", "[NAME1]", "[FULL NAME]", "[]", "[A_B]"])
    def test_non_uppercase_tokens_are_not_markers(self, token):
        sections = split_sections(f"[SUMMARY]\nSee {token} here")
        assert len(sections) == 1
        assert token in sections[0].content

    def test_repeated_keys_kept_in_order(self):
        sections = split_sections("[EXPERIENCE]\nA\n[SKILLS]\nB\n[EXPERIENCE]\nC")
        assert [(s.key, s.content) for s in sections] == [
            ("EXPERIENCE", "A"),
            ("SKILLS", "B"),
            ("EXPERIENCE", "C"),
        ]

    def test_sample_resume(self, sample_resume):
        keys = [s.key for s in split_sections(sample_resume)]
        assert keys == ["NAME", "CONTACT", "SUMMARY", "EXPERIENCE", "EDUCATION", "SKILLS"]


class TestSectionModel:
    @pytest.mark.parametrize(
        ("key", "kind"),
        [
            ("NAME", SectionKind.NAME),
            ("CONTACT", SectionKind.CONTACT),
            ("SUMMARY", SectionKind.SUMMARY),
            ("EXPERIENCE", SectionKind.EXPERIENCE),
            ("EDUCATION", SectionKind.EDUCATION),
            ("SKILLS", SectionKind.SKILLS),
            ("CERTIFICATIONS", SectionKind.OTHER),
            ("PROJECTS", SectionKind.OTHER),
        ],
    )
    def test_kind(self, key, kind):
        assert Section(key=key, content="").kind is kind

    def test_unknown_keeps_raw_key(self):
        section = Section(key="CERTIFICATIONS", content="AWS")
        assert section.kind is SectionKind.OTHER
        assert section.key == "CERTIFICATIONS"

    def test_lines_are_stripped(self):
        section = Section(key="SUMMARY", content="one  \n\n   two")
        assert section.lines == ["one", "", "two"]

    def test_frozen(self):
        section = Section(key="NAME", content="Jane")
        with pytest.raises(ValidationError):
            section.content = "John"
