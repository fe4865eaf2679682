"""
Section segmentation for resume text.

Walks the line sequence once, detects short section-header lines by keyword,
and groups the lines that follow into one bucket per section.
"""

from dataclasses import dataclass, field
from typing import Optional

from resume_builder.utils.constants import MAX_HEADER_LENGTH, SectionType
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)


# Section header keywords. Iteration order matters: the first section whose
# keyword occurs in a header line wins.
SECTION_KEYWORDS: dict[SectionType, tuple[str, ...]] = {
    SectionType.SUMMARY: ("summary", "profile", "objective", "about"),
    SectionType.EXPERIENCE: (
        "experience", "employment", "work history", "career",
        "professional experience",
    ),
    SectionType.EDUCATION: ("education", "academic", "qualification", "degree"),
    SectionType.SKILLS: ("skills", "technical skills", "competencies", "expertise"),
    SectionType.ACHIEVEMENTS: (
        "achievements", "accomplishments", "awards", "recognition",
    ),
    SectionType.PROJECTS: ("projects", "portfolio", "work samples"),
    SectionType.CERTIFICATIONS: ("certifications", "certificates", "licenses"),
    SectionType.COURSES: ("courses", "training", "coursework"),
}


@dataclass
class TextSection:
    """A detected section and the body lines that belong to it."""

    section_type: SectionType
    title: str
    lines: list[str] = field(default_factory=list)
    start_line: int = 0  # index of the header line

    @property
    def content(self) -> str:
        return "\n".join(self.lines)


@dataclass
class SegmentedText:
    """Result of section segmentation."""

    lines: list[str]
    sections: list[TextSection] = field(default_factory=list)
    # Lines before the first header; only the contact parser reads these
    preamble: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def get_sections(self, section_type: SectionType) -> list[TextSection]:
        """Get all sections of a specific type, in document order."""
        return [s for s in self.sections if s.section_type == section_type]


class TextPreprocessor:
    """
    Section segmenter for resume lines.

    State is the current section (or none before the first header) and the
    buffer of lines collected for it. A header line flushes the buffer and
    switches section; any other line is appended to the buffer.
    """

    def __init__(self, section_keywords: Optional[dict[SectionType, tuple[str, ...]]] = None):
        self.section_keywords = section_keywords or SECTION_KEYWORDS

    def segment(self, lines: list[str]) -> SegmentedText:
        """
        Group lines into sections.

        Args:
            lines: Trimmed, non-empty text lines in document order

        Returns:
            SegmentedText with one TextSection per header that has a body
        """
        result = SegmentedText(lines=list(lines))
        current: Optional[TextSection] = None

        for index, line in enumerate(lines):
            section_type = self.identify_section_header(line)

            if section_type is not None:
                self._flush(current, result)
                current = TextSection(
                    section_type=section_type,
                    title=line,
                    start_line=index,
                )
            elif current is not None:
                current.lines.append(line)
            else:
                result.preamble.append(line)

        self._flush(current, result)

        if not result.sections:
            result.warnings.append("Could not detect standard resume sections")

        logger.debug(
            f"Segmented {len(lines)} lines into {len(result.sections)} sections: "
            f"{[s.section_type.value for s in result.sections]}"
        )
        return result

    def identify_section_header(self, line: str) -> Optional[SectionType]:
        """
        Identify if a line is a section header.

        Returns the section type or None.
        """
        lower = line.lower()
        if len(lower) >= MAX_HEADER_LENGTH:
            return None

        for section_type, keywords in self.section_keywords.items():
            if any(keyword in lower for keyword in keywords):
                return section_type

        return None

    @staticmethod
    def _flush(section: Optional[TextSection], result: SegmentedText) -> None:
        """Keep a finished section if anything was collected for it."""
        if section is not None and section.lines:
            result.sections.append(section)
