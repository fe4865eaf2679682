"""
Courses parser for resumes.
"""

from dataclasses import dataclass, field

from resume_builder.utils.constants import MIN_SINGLE_LINE_ENTRY_LENGTH


@dataclass
class ExtractedCourse:
    """A course extracted from a resume."""

    title: str = ""
    description: str = ""


@dataclass
class CoursesParseResult:
    """Result of courses parsing."""

    courses: list[ExtractedCourse] = field(default_factory=list)


class CoursesParser:
    """Parser for a courses / training section: one course per line."""

    def parse(self, lines: list[str]) -> CoursesParseResult:
        courses = [
            ExtractedCourse(title=line)
            for line in lines
            if len(line) > MIN_SINGLE_LINE_ENTRY_LENGTH
        ]
        return CoursesParseResult(courses=courses)
