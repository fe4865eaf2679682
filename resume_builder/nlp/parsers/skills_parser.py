"""
Skills parser for resumes.

Splits a skills (or languages) section into individual items.
"""

import re
from dataclasses import dataclass, field

from resume_builder.utils.constants import LIST_SEPARATORS
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)

SEPARATOR_PATTERN = re.compile("|".join(re.escape(sep) for sep in LIST_SEPARATORS))

# Items outside this length range are noise (stray letters, whole sentences)
MIN_ITEM_LENGTH = 2
MAX_ITEM_LENGTH = 49


@dataclass
class SkillsParseResult:
    """Result of skills parsing."""

    skills: list[str] = field(default_factory=list)
    raw_skill_text: str = ""


class SkillsParser:
    """Parser for list-style sections such as skills and languages."""

    def parse(self, lines: list[str]) -> SkillsParseResult:
        """
        Split section lines into items.

        The lines are joined and split on commas, bullets, pipes, semicolons
        and line breaks; each item is trimmed and kept if its length is
        between 2 and 49 characters.
        """
        text = " ".join(lines)
        skills = [
            item
            for item in (piece.strip() for piece in SEPARATOR_PATTERN.split(text))
            if MIN_ITEM_LENGTH <= len(item) <= MAX_ITEM_LENGTH
        ]
        logger.debug(f"Parsed {len(skills)} list items")
        return SkillsParseResult(skills=skills, raw_skill_text=text)
