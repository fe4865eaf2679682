"""
Tests for resume_builder.nlp.preprocessor — section segmentation.
"""

import pytest

from resume_builder.nlp.preprocessor import SECTION_KEYWORDS, TextPreprocessor
from resume_builder.utils.constants import SectionType


@pytest.fixture
def preprocessor():
    return TextPreprocessor()


class TestIdentifySectionHeader:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("SUMMARY", SectionType.SUMMARY),
            ("About Me", SectionType.SUMMARY),
            ("Work History", SectionType.EXPERIENCE),
            ("Professional Experience", SectionType.EXPERIENCE),
            ("Academic Background", SectionType.EDUCATION),
            ("Core Competencies", SectionType.SKILLS),
            ("Awards", SectionType.ACHIEVEMENTS),
            ("Portfolio", SectionType.PROJECTS),
            ("Licenses", SectionType.CERTIFICATIONS),
            ("Relevant Coursework", SectionType.COURSES),
        ],
    )
    def test_keywords(self, preprocessor, line, expected):
        assert preprocessor.identify_section_header(line) == expected

    def test_case_insensitive(self, preprocessor):
        assert preprocessor.identify_section_header("eDuCaTiOn") == SectionType.EDUCATION

    def test_first_section_in_table_order_wins(self, preprocessor):
        # "summary" is checked before "skills"
        assert preprocessor.identify_section_header("Skills Summary") == SectionType.SUMMARY

    def test_long_line_is_not_header(self, preprocessor):
        line = "I have extensive experience leading teams across three continents"
        assert len(line) >= 50
        assert preprocessor.identify_section_header(line) is None

    def test_plain_line_is_not_header(self, preprocessor):
        assert preprocessor.identify_section_header("Jane Doe") is None

    def test_keyword_table_covers_every_section(self):
        assert set(SECTION_KEYWORDS) == set(SectionType)


class TestSegment:
    def test_lines_grouped_under_header(self, preprocessor):
        result = preprocessor.segment(["Jane Doe", "SKILLS", "Python", "Go"])
        assert len(result.sections) == 1
        section = result.sections[0]
        assert section.section_type == SectionType.SKILLS
        assert section.title == "SKILLS"
        assert section.lines == ["Python", "Go"]
        assert section.start_line == 1
        assert section.content == "Python\nGo"

    def test_preamble_collected(self, preprocessor):
        result = preprocessor.segment(["Jane Doe", "jane@x.com", "SKILLS", "Python"])
        assert result.preamble == ["Jane Doe", "jane@x.com"]

    def test_header_without_body_dropped(self, preprocessor):
        result = preprocessor.segment(["EXPERIENCE", "EDUCATION", "Bachelor of Arts"])
        assert [s.section_type for s in result.sections] == [SectionType.EDUCATION]

    def test_repeated_sections_kept_in_order(self, preprocessor):
        result = preprocessor.segment(["SKILLS", "Python", "PROJECTS", "Alpha", "SKILLS", "Go"])
        skills = result.get_sections(SectionType.SKILLS)
        assert [s.lines for s in skills] == [["Python"], ["Go"]]

    def test_no_headers_gives_no_sections(self, preprocessor):
        result = preprocessor.segment(["Jane Doe", "Engineer", "Some text"])
        assert result.sections == []
        assert result.warnings

    def test_empty_input(self, preprocessor):
        result = preprocessor.segment([])
        assert result.sections == []
        assert result.preamble == []
