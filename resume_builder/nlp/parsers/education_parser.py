"""
Education parser for resumes.

Extracts degrees, institutions, durations and locations.
"""

from dataclasses import dataclass, field

from resume_builder.nlp import classifier
from resume_builder.utils.logger import get_logger

from .base import EntryParser

logger = get_logger(__name__)


@dataclass
class ExtractedEducation:
    """An education entry extracted from a resume."""

    degree: str = ""
    institution: str = ""
    duration: str = ""
    location: str = ""


@dataclass
class EducationParseResult:
    """Result of education parsing."""

    education: list[ExtractedEducation] = field(default_factory=list)


class EducationParser(EntryParser[ExtractedEducation]):
    """
    Parser for extracting education from an education section.

    A degree line opens a new entry. Other lines are routed in order:
    institution, date range, location.
    """

    def is_entry_start(self, line: str) -> bool:
        return classifier.is_degree(line)

    def start_entry(self, line: str) -> ExtractedEducation:
        return ExtractedEducation(degree=line)

    def add_line(self, entry: ExtractedEducation, line: str) -> None:
        if classifier.is_institution(line):
            entry.institution = line
        elif classifier.is_date_range(line):
            entry.duration = line
        elif classifier.is_location(line):
            entry.location = line

    def parse(self, lines: list[str]) -> EducationParseResult:
        """Parse education entries from section lines."""
        education = self.parse_entries(lines)
        logger.debug(f"Parsed {len(education)} education entries")
        return EducationParseResult(education=education)
