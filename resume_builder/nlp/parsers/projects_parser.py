"""
Projects parser for resumes.

Extracts project titles, durations and descriptions from a projects section.
"""

from dataclasses import dataclass, field

from resume_builder.nlp import classifier
from resume_builder.utils.constants import MIN_FREE_TEXT_LENGTH
from resume_builder.utils.logger import get_logger

from .base import EntryParser

logger = get_logger(__name__)


@dataclass
class ExtractedProject:
    """A project extracted from a resume."""

    title: str = ""
    description: str = ""
    duration: str = ""


@dataclass
class ProjectsParseResult:
    """Result of projects parsing."""

    projects: list[ExtractedProject] = field(default_factory=list)


class ProjectsParser(EntryParser[ExtractedProject]):
    """
    Parser for extracting projects from a projects section.

    A project-title line opens a new entry. A duration line sets the
    duration; other lines long enough to be prose are appended to the
    description, space-joined.
    """

    def is_entry_start(self, line: str) -> bool:
        return classifier.is_project_title(line)

    def start_entry(self, line: str) -> ExtractedProject:
        return ExtractedProject(title=line)

    def add_line(self, entry: ExtractedProject, line: str) -> None:
        if classifier.is_duration(line):
            entry.duration = line
        elif len(line) > MIN_FREE_TEXT_LENGTH:
            entry.description = f"{entry.description} {line}" if entry.description else line

    def parse(self, lines: list[str]) -> ProjectsParseResult:
        """Parse projects from section lines."""
        projects = self.parse_entries(lines)
        logger.debug(f"Parsed {len(projects)} projects")
        return ProjectsParseResult(projects=projects)
