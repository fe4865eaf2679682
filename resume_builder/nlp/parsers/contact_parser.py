"""
Contact information parser for resumes.

Reads the document header (first lines) for the name, role, email, phone,
LinkedIn profile and location.
"""

from dataclasses import dataclass, field
from typing import Optional

from resume_builder.nlp import classifier
from resume_builder.utils.constants import (
    HEADER_SCAN_LINES,
    ROLE_SCAN_END,
    ROLE_SCAN_START,
)
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ContactInfo:
    """Contact information extracted from a resume header."""

    name: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    location: str = ""
    raw_matches: dict = field(default_factory=dict)


class ContactParser:
    """Parser for extracting contact information from resume lines."""

    def parse(self, lines: list[str]) -> ContactInfo:
        """
        Parse contact information from the start of the document.

        The name is the first line verbatim. Email, phone, LinkedIn and
        location come from the first matching line among the first
        ``HEADER_SCAN_LINES`` lines; later matches are ignored. The role is
        the first role-like line among lines 2-5.

        Args:
            lines: All document lines, in order

        Returns:
            ContactInfo with whatever could be found (missing fields are "")
        """
        result = ContactInfo()
        raw_matches: dict[str, int] = {}

        if lines:
            result.name = lines[0]

        for index, line in enumerate(lines[:HEADER_SCAN_LINES]):
            if not result.email:
                email = classifier.find_email(line)
                if email:
                    result.email = email
                    raw_matches["email"] = index

            if not result.phone:
                phone = classifier.find_phone(line)
                if phone:
                    result.phone = phone
                    raw_matches["phone"] = index

            if not result.linkedin:
                linkedin = classifier.find_linkedin(line)
                if linkedin:
                    result.linkedin = linkedin
                    raw_matches["linkedin"] = index

            if not result.location and classifier.is_location_line(line):
                result.location = line
                raw_matches["location"] = index

        role_index = self._find_role_line(lines)
        if role_index is not None:
            result.role = lines[role_index]
            raw_matches["role"] = role_index

        result.raw_matches = raw_matches
        logger.debug(f"Contact fields found on lines: {raw_matches}")
        return result

    def _find_role_line(self, lines: list[str]) -> Optional[int]:
        """Index of the first role-like line in the role window."""
        for index in range(ROLE_SCAN_START, min(ROLE_SCAN_END, len(lines))):
            if classifier.is_role_line(lines[index]):
                return index
        return None
