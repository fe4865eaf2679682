"""
Achievements parser for resumes.

Every sufficiently long line is one achievement.
"""

from dataclasses import dataclass, field

from resume_builder.nlp import classifier
from resume_builder.utils.constants import MIN_FREE_TEXT_LENGTH
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)

# Number of leading words used as the achievement headline
TITLE_WORD_COUNT = 3


@dataclass
class ExtractedAchievement:
    """An achievement extracted from a resume."""

    key_achievements: str = ""
    describe: str = ""


@dataclass
class AchievementsParseResult:
    """Result of achievements parsing."""

    achievements: list[ExtractedAchievement] = field(default_factory=list)


class AchievementsParser:
    """Parser for extracting achievements from an achievements section."""

    def parse(self, lines: list[str]) -> AchievementsParseResult:
        """Turn each line longer than 10 characters into an achievement."""
        achievements = [
            ExtractedAchievement(
                key_achievements=classifier.leading_words(line, TITLE_WORD_COUNT),
                describe=line,
            )
            for line in lines
            if len(line) > MIN_FREE_TEXT_LENGTH
        ]
        logger.debug(f"Parsed {len(achievements)} achievements")
        return AchievementsParseResult(achievements=achievements)
