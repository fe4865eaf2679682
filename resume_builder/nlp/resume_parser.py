"""
Main resume parser orchestrator.

Coordinates text extraction, header parsing, section segmentation, the
per-section parsers and normalization to turn a resume document into a
ResumeRecord.
"""

import time
from pathlib import Path
from typing import Optional

from resume_builder.data.models import (
    AchievementEntry,
    CertificationEntry,
    CourseEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resume_builder.utils.constants import MediaType, SectionType
from resume_builder.utils.logger import get_logger

from .exceptions import EmptyContentError
from .extractors import extract_file_lines, extract_lines, split_lines
from .normalizer import ResumeNormalizer
from .parsers import (
    AchievementsParser,
    CertificationsParser,
    ContactParser,
    CoursesParser,
    EducationParser,
    ExperienceParser,
    ProjectsParser,
    SkillsParser,
    SummaryParser,
)
from .preprocessor import TextPreprocessor

logger = get_logger(__name__)

class ResumeParser:
    """
    Main resume parser that orchestrates the parsing pipeline.

    Pipeline:
    1. Extract text lines from the document (PDF, Word, plain text)
    2. Read contact details from the header lines
    3. Segment the lines into sections
    4. Parse each section into entries
    5. Normalize the assembled record

    The parser holds no per-document state, so one instance can serve
    concurrent requests.
    """

    def __init__(self):
        """Initialize the resume parser with all component parsers."""
        self.preprocessor = TextPreprocessor()
        self.contact_parser = ContactParser()
        self.summary_parser = SummaryParser()
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()
        self.skills_parser = SkillsParser()
        self.achievements_parser = AchievementsParser()
        self.projects_parser = ProjectsParser()
        self.certifications_parser = CertificationsParser()
        self.courses_parser = CoursesParser()
        self.normalizer = ResumeNormalizer()

    def parse_content(
        self, source: bytes | str, media_type: str | MediaType
    ) -> ResumeRecord:
        """
        Parse a resume from document content.

        Args:
            source: Document bytes, or already-decoded text for text/plain
            media_type: MIME type of the document

        Returns:
            Normalized ResumeRecord

        Raises:
            UnsupportedMediaTypeError: media type is not supported
            ExtractionError: the document could not be decoded
            EmptyContentError: the document has no readable lines
        """
        start_time = time.time()

        try:
            lines = extract_lines(source, media_type)
            record = self.parse_lines(lines)
        except Exception as e:
            logger.error(f"Error parsing resume content: {e}")
            raise

        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Resume content parsed successfully ({len(lines)} lines, {elapsed_ms} ms)")
        return record

    def parse_file(
        self, file_path: str | Path, media_type: Optional[str | MediaType] = None
    ) -> ResumeRecord:
        """
        Parse a resume from a file.

        Args:
            file_path: Path to the resume file
            media_type: MIME type; inferred from the extension when omitted

        Returns:
            Normalized ResumeRecord

        Raises:
            FileNotFoundError: the path does not exist
            UnsupportedMediaTypeError: media type is not supported
            ExtractionError: the file is too large or could not be decoded
            EmptyContentError: the document has no readable lines
        """
        path = Path(file_path)
        logger.info(f"Parsing resume file: {path.name}")
        start_time = time.time()

        try:
            lines = extract_file_lines(path, media_type)
            record = self.parse_lines(lines)
        except Exception as e:
            logger.error(f"Error parsing resume file {path.name}: {e}")
            raise

        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Resume file parsed successfully ({len(lines)} lines, {elapsed_ms} ms)")
        return record

    def parse_text(self, text: str) -> ResumeRecord:
        """Parse a resume from raw text."""
        return self.parse_lines(split_lines(text))

    def parse_lines(self, lines: list[str]) -> ResumeRecord:
        """
        Build a normalized record from trimmed, non-empty document lines.

        Raises:
            EmptyContentError: there are no lines
        """
        if not lines:
            raise EmptyContentError()

        contact = self.contact_parser.parse(lines)
        segmented = self.preprocessor.segment(lines)

        for warning in segmented.warnings:
            logger.debug(warning)

        fields: dict = {
            "name": contact.name,
            "role": contact.role,
            "phone": contact.phone,
            "email": contact.email,
            "linkedin": contact.linkedin,
            "location": contact.location,
            "summary": "",
            "experience": [],
            "education": [],
            "achievements": [],
            "skills": [],
            "languages": [],
            "projects": [],
            "certifications": [],
            "courses": [],
        }

        # A later section of the same type replaces an earlier one
        for section in segmented.sections:
            logger.debug(f"Parsing {section.section_type.value} section ({len(section.lines)} lines)")

            if section.section_type == SectionType.SUMMARY:
                fields["summary"] = self.summary_parser.parse(section.lines).text

            elif section.section_type == SectionType.EXPERIENCE:
                fields["experience"] = [
                    ExperienceEntry(
                        title=e.title,
                        company_name=e.company_name,
                        date=e.date,
                        company_location=e.company_location,
                        accomplishment=list(e.accomplishment),
                    )
                    for e in self.experience_parser.parse(section.lines).experiences
                ]

            elif section.section_type == SectionType.EDUCATION:
                fields["education"] = [
                    EducationEntry(
                        degree=e.degree,
                        institution=e.institution,
                        duration=e.duration,
                        location=e.location,
                    )
                    for e in self.education_parser.parse(section.lines).education
                ]

            elif section.section_type == SectionType.SKILLS:
                fields["skills"] = self.skills_parser.parse(section.lines).skills

            elif section.section_type == SectionType.ACHIEVEMENTS:
                fields["achievements"] = [
                    AchievementEntry(key_achievements=a.key_achievements, describe=a.describe)
                    for a in self.achievements_parser.parse(section.lines).achievements
                ]

            elif section.section_type == SectionType.PROJECTS:
                fields["projects"] = [
                    ProjectEntry(title=p.title, description=p.description, duration=p.duration)
                    for p in self.projects_parser.parse(section.lines).projects
                ]

            elif section.section_type == SectionType.CERTIFICATIONS:
                fields["certifications"] = [
                    CertificationEntry(title=c.title, issued_by=c.issued_by, year=c.year)
                    for c in self.certifications_parser.parse(section.lines).certifications
                ]

            elif section.section_type == SectionType.COURSES:
                fields["courses"] = [
                    CourseEntry(title=c.title, description=c.description)
                    for c in self.courses_parser.parse(section.lines).courses
                ]

        return self.normalizer.normalize(ResumeRecord(**fields))


# Singleton instance
_resume_parser: Optional[ResumeParser] = None

def get_resume_parser() -> ResumeParser:
    """Get the resume parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser

def parse_resume_content(source: bytes | str, media_type: str | MediaType) -> ResumeRecord:
    """Parse document content of the given MIME type into a ResumeRecord."""
    return get_resume_parser().parse_content(source, media_type)

def parse_resume_file(
    file_path: str | Path, media_type: Optional[str | MediaType] = None
) -> ResumeRecord:
    """Parse a resume file into a ResumeRecord."""
    return get_resume_parser().parse_file(file_path, media_type)

def parse_text_to_record(text: str) -> ResumeRecord:
    """Parse plain resume text into a ResumeRecord."""
    return get_resume_parser().parse_text(text)
