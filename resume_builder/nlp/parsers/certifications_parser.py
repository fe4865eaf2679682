"""
Certifications parser for resumes.

Each line of a certifications section is one certification; the year is
taken from the line when present. The issuer cannot be told apart from the
title on a single line and is left empty.
"""

from dataclasses import dataclass, field

from resume_builder.nlp import classifier
from resume_builder.utils.constants import MIN_SINGLE_LINE_ENTRY_LENGTH
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExtractedCertification:
    """A certification extracted from a resume."""

    title: str = ""
    issued_by: str = ""
    year: str = ""


@dataclass
class CertificationsParseResult:
    """Result of certifications parsing."""

    certifications: list[ExtractedCertification] = field(default_factory=list)


class CertificationsParser:
    """Parser for extracting certifications from a certifications section."""

    def parse(self, lines: list[str]) -> CertificationsParseResult:
        """Parse certifications from section lines."""
        certs = [
            ExtractedCertification(title=line, year=classifier.extract_year(line))
            for line in lines
            if len(line) > MIN_SINGLE_LINE_ENTRY_LENGTH
        ]
        logger.debug(f"Parsed {len(certs)} certifications")
        return CertificationsParseResult(certifications=certs)
