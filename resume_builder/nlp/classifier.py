"""
Line classifier for resume text.

Cheap, independent predicates that guess the role of a single line
(email, phone, date range, degree, ...). They are intentionally weak and
overlapping: a line may satisfy several of them, and each section parser
applies them in its own fixed priority order.
"""

import re
from typing import Optional

from resume_builder.utils.constants import (
    DEGREE_KEYWORDS,
    INSTITUTION_KEYWORDS,
    ROLE_KEYWORDS,
)

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")

PHONE_PATTERN = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

LINKEDIN_PATTERN = re.compile(
    r"(linkedin\.com/in/[\w-]+|linkedin\.com/pub/[\w-]+)",
    re.IGNORECASE,
)

LOCATION_PATTERNS = [
    re.compile(r"\b\w+,\s*\w+\b"),  # City, State
    re.compile(r"\b\w+,\s*\w{2}\b"),  # City, ST
    re.compile(r"\b\d{5}(-\d{4})?\b"),  # ZIP code
]

DATE_RANGE_PATTERNS = [
    re.compile(r"\d{4}\s*-\s*\d{4}"),  # 2020 - 2023
    re.compile(r"\d{1,2}/\d{4}\s*-\s*\d{1,2}/\d{4}"),  # 01/2020 - 12/2023
    re.compile(r"\w+\s+\d{4}\s*-\s*\w+\s+\d{4}"),  # Jan 2020 - Dec 2023
    re.compile(r"present|current", re.IGNORECASE),
]

# Spans such as "6 months" or "2 yrs"
SPAN_PATTERN = re.compile(
    r"\b\d+\+?\s*(?:years?|yrs?|months?|mos?|weeks?|days?)\b",
    re.IGNORECASE,
)

YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")

TITLE_START_PATTERN = re.compile(r"^[A-Z]")

# Sentences end with these; titles do not
SENTENCE_ENDINGS = (".", "!", "?")


def find_email(line: str) -> Optional[str]:
    """Return the first email address in the line."""
    match = EMAIL_PATTERN.search(line)
    return match.group(0) if match else None


def find_phone(line: str) -> Optional[str]:
    """Return the first phone number in the line."""
    match = PHONE_PATTERN.search(line)
    return match.group(0) if match else None


def find_linkedin(line: str) -> Optional[str]:
    """Return the LinkedIn profile URL in the line, always with an https scheme."""
    match = LINKEDIN_PATTERN.search(line)
    return f"https://{match.group(0)}" if match else None


def is_email(line: str) -> bool:
    return find_email(line) is not None


def is_phone(line: str) -> bool:
    return find_phone(line) is not None


def is_linkedin(line: str) -> bool:
    return find_linkedin(line) is not None


def is_location_line(line: str) -> bool:
    """Header location: "City, State", "City, ST" or a ZIP code."""
    return any(pattern.search(line) for pattern in LOCATION_PATTERNS)


def is_role_line(line: str) -> bool:
    lower = line.lower()
    return any(keyword in lower for keyword in ROLE_KEYWORDS)


def is_date_range(line: str) -> bool:
    return any(pattern.search(line) for pattern in DATE_RANGE_PATTERNS)


def is_duration(line: str) -> bool:
    """A date range, or a plain span like "6 months"."""
    return is_date_range(line) or SPAN_PATTERN.search(line) is not None


def is_degree(line: str) -> bool:
    lower = line.lower()
    return any(keyword in lower for keyword in DEGREE_KEYWORDS)


def is_institution(line: str) -> bool:
    """
    Institution keyword, or any line of plausible length.

    The length fallback accepts nearly everything that is not a date range,
    so callers must test more specific predicates first.
    """
    lower = line.lower()
    if any(keyword in lower for keyword in INSTITUTION_KEYWORDS):
        return True
    return 2 < len(line) < 100 and not is_date_range(line)


def _is_title(line: str) -> bool:
    return (
        5 < len(line) < 100
        and TITLE_START_PATTERN.match(line) is not None
        and not line.endswith(SENTENCE_ENDINGS)
        and not is_date_range(line)
    )


def is_job_title(line: str) -> bool:
    """Capitalised, title-length line that is not a sentence or a date."""
    return _is_title(line)


def is_project_title(line: str) -> bool:
    """Capitalised, title-length line that is not a sentence or a date."""
    return _is_title(line)


def is_company_name(line: str) -> bool:
    """Length-bound fallback: any short line that is not a date range."""
    return 2 < len(line) < 100 and not is_date_range(line)


def is_location(line: str) -> bool:
    """Length-bound fallback: a short line with letters that is not a date range."""
    return (
        3 < len(line) < 50
        and re.search(r"[A-Za-z]", line) is not None
        and not is_date_range(line)
    )


def extract_year(line: str) -> str:
    """First 19xx/20xx year in the line, or an empty string."""
    match = YEAR_PATTERN.search(line)
    return match.group(0) if match else ""


def leading_words(line: str, count: int = 3) -> str:
    """First ``count`` whitespace-separated words of the line."""
    return " ".join(line.split()[:count])
