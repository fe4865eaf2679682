"""
Work experience parser for resumes.

Extracts job titles, companies, dates, locations and accomplishments.
"""

from dataclasses import dataclass, field

from resume_builder.nlp import classifier
from resume_builder.utils.constants import MIN_FREE_TEXT_LENGTH
from resume_builder.utils.logger import get_logger

from .base import EntryParser

logger = get_logger(__name__)


@dataclass
class ExtractedExperience:
    """A work experience entry extracted from a resume."""

    title: str = ""
    company_name: str = ""
    date: str = ""
    company_location: str = ""
    accomplishment: list[str] = field(default_factory=list)


@dataclass
class ExperienceParseResult:
    """Result of experience parsing."""

    experiences: list[ExtractedExperience] = field(default_factory=list)


class ExperienceParser(EntryParser[ExtractedExperience]):
    """
    Parser for extracting work experience from an experience section.

    A job-title line opens a new entry. Other lines are routed in order:
    company name, date range, location, and otherwise (if long enough) an
    accomplishment.
    """

    def is_entry_start(self, line: str) -> bool:
        return classifier.is_job_title(line)

    def start_entry(self, line: str) -> ExtractedExperience:
        return ExtractedExperience(title=line)

    def add_line(self, entry: ExtractedExperience, line: str) -> None:
        if classifier.is_company_name(line):
            entry.company_name = line
        elif classifier.is_date_range(line):
            entry.date = line
        elif classifier.is_location(line):
            entry.company_location = line
        elif len(line) > MIN_FREE_TEXT_LENGTH:
            entry.accomplishment.append(line)

    def parse(self, lines: list[str]) -> ExperienceParseResult:
        """
        Parse work experience from section lines.

        Args:
            lines: Body lines of the experience section

        Returns:
            ExperienceParseResult with extracted experiences
        """
        experiences = self.parse_entries(lines)
        logger.debug(f"Parsed {len(experiences)} experience entries")
        return ExperienceParseResult(experiences=experiences)
