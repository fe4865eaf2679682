"""
Resume text parsing pipeline.

Turns resume documents (PDF, Word, plain text) into structured resume
records using line-level heuristics.

Main Components:
- ResumeParser: Main orchestrator for parsing resumes
- ExtractorFactory: Document text extraction (PDF, DOCX, TXT)
- TextPreprocessor: Section detection
- ContactParser: Header/contact information extraction
- Section parsers: experience, education, projects, skills, ...
- ResumeNormalizer: Placeholder filling and entry filtering
"""

from .exceptions import (
    EmptyContentError,
    ExtractionError,
    ResumeParseError,
    UnsupportedMediaTypeError,
)

from .resume_parser import (
    ResumeParser,
    get_resume_parser,
    parse_resume_content,
    parse_resume_file,
    parse_text_to_record,
)

from .preprocessor import (
    TextPreprocessor,
    SegmentedText,
    TextSection,
    SECTION_KEYWORDS,
)

from .normalizer import ResumeNormalizer, normalize_record

from .extractors import (
    ExtractorFactory,
    ExtractionResult,
    BaseExtractor,
    PDFExtractor,
    DOCXExtractor,
    TextExtractor,
    extract_lines,
    extract_text,
    extract_file_lines,
    extract_file_text,
    split_lines,
)

from .parsers import (
    ContactParser,
    ContactInfo,
    SkillsParser,
    ExperienceParser,
    EducationParser,
    ProjectsParser,
    AchievementsParser,
    CertificationsParser,
    CoursesParser,
    SummaryParser,
)

__all__ = [
    # Errors
    "ResumeParseError",
    "ExtractionError",
    "EmptyContentError",
    "UnsupportedMediaTypeError",
    # Main parser
    "ResumeParser",
    "get_resume_parser",
    "parse_resume_content",
    "parse_resume_file",
    "parse_text_to_record",
    # Preprocessing
    "TextPreprocessor",
    "SegmentedText",
    "TextSection",
    "SECTION_KEYWORDS",
    # Normalization
    "ResumeNormalizer",
    "normalize_record",
    # Extractors
    "ExtractorFactory",
    "ExtractionResult",
    "BaseExtractor",
    "PDFExtractor",
    "DOCXExtractor",
    "TextExtractor",
    "extract_lines",
    "extract_text",
    "extract_file_lines",
    "extract_file_text",
    "split_lines",
    # Parsers
    "ContactParser",
    "ContactInfo",
    "SkillsParser",
    "ExperienceParser",
    "EducationParser",
    "ProjectsParser",
    "AchievementsParser",
    "CertificationsParser",
    "CoursesParser",
    "SummaryParser",
]
