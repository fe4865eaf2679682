"""
Application-wide constants for the resume builder.

This module contains the constant values used throughout the application.
The keyword tables are the load-bearing definition of parsing behaviour:
changing them changes what the heuristic parser extracts.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resume-builder"
APP_DISPLAY_NAME: Final[str] = "Resume Builder"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================


class MediaType(str, Enum):
    """MIME types accepted for resume uploads."""

    PDF = "application/pdf"
    DOC = "application/msword"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    TEXT = "text/plain"

    @property
    def is_word(self) -> bool:
        """True for both legacy and OOXML Word documents."""
        return self in (MediaType.DOC, MediaType.DOCX)


SUPPORTED_MEDIA_TYPES: Final[tuple[str, ...]] = tuple(m.value for m in MediaType)

EXTENSION_MEDIA_TYPES: Final[dict[str, MediaType]] = {
    ".pdf": MediaType.PDF,
    ".doc": MediaType.DOC,
    ".docx": MediaType.DOCX,
    ".txt": MediaType.TEXT,
    ".text": MediaType.TEXT,
    ".md": MediaType.TEXT,
}

SUPPORTED_RESUME_FORMATS: Final[tuple[str, ...]] = tuple(EXTENSION_MEDIA_TYPES)


# =============================================================================
# Parsing Constants
# =============================================================================

# Contact fields are only searched for in the document header
HEADER_SCAN_LINES: Final[int] = 10

# Role line is searched for in lines 2..5 (1-indexed)
ROLE_SCAN_START: Final[int] = 1
ROLE_SCAN_END: Final[int] = 5

# Section header lines are short
MAX_HEADER_LENGTH: Final[int] = 50

# Free-text lines shorter than this are dropped from accomplishments/descriptions
MIN_FREE_TEXT_LENGTH: Final[int] = 10

# Single-line entries (certifications, courses) must be longer than this
MIN_SINGLE_LINE_ENTRY_LENGTH: Final[int] = 5

ROLE_KEYWORDS: Final[tuple[str, ...]] = (
    "developer", "engineer", "manager", "analyst",
    "designer", "consultant", "specialist",
)

DEGREE_KEYWORDS: Final[tuple[str, ...]] = (
    "bachelor", "master", "phd", "doctorate",
    "associate", "diploma", "certificate",
)

INSTITUTION_KEYWORDS: Final[tuple[str, ...]] = (
    "university", "college", "institute", "school",
)

# Skills / languages lists are split on any of these
LIST_SEPARATORS: Final[tuple[str, ...]] = (",", "•", "·", "|", "\n", ";")


class SectionType(str, Enum):
    """Resume sections recognised by the section segmenter."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    ACHIEVEMENTS = "achievements"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    COURSES = "courses"


# =============================================================================
# Placeholders
# =============================================================================

# Substituted for required fields the parser could not determine
PLACEHOLDERS: Final[dict[str, str]] = {
    "name": "Your Name",
    "email": "your.email@example.com",
    "phone": "123-456-7890",
    "role": "Professional Role",
    "location": "Your City, Country",
}


# =============================================================================
# Enhancement Constants
# =============================================================================


class EnhancementStyle(str, Enum):
    """Tone requested from the enhancement service."""

    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    CONCISE = "concise"


ENHANCEABLE_SECTIONS: Final[tuple[str, ...]] = (
    "summary", "experience", "achievements", "projects", "skills", "education",
)

# Sections rewritten when a whole parsed resume is enhanced, in order
FULL_RESUME_ENHANCEMENT_ORDER: Final[tuple[str, ...]] = (
    "summary", "experience", "achievements", "projects",
)
