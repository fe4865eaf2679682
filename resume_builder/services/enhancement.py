"""
Resume enhancement orchestration.

The text rewriting itself is delegated to an external enhancer callable
``enhancer(section, text, style) -> str`` (a generative language model in
production). This module validates requests, cleans the enhancer output and
walks a parsed resume section by section.
"""

import re
import time
from typing import Callable, Optional

from resume_builder.data.models import ResumeRecord
from resume_builder.utils.config import get_settings
from resume_builder.utils.constants import (
    ENHANCEABLE_SECTIONS,
    FULL_RESUME_ENHANCEMENT_ORDER,
    EnhancementStyle,
)
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)

Enhancer = Callable[[str, str, str], str]

# Labels the model tends to prepend to its answer
_LABEL_PATTERNS = (
    re.compile(r"^Enhanced \w+:\s*", re.IGNORECASE),
    re.compile(r"^Creative \w+:\s*", re.IGNORECASE),
    re.compile(r"^Concise \w+:\s*", re.IGNORECASE),
    re.compile(r"^\*\*.*?\*\*\s*"),
)

ACCOMPLISHMENT_SEPARATOR = ". "


class EnhancementError(Exception):
    """Raised when a section cannot be enhanced."""


def resolve_enhancement_request(section: str, style: str) -> tuple[str, str]:
    """
    Validate a section/style pair, falling back to defaults.

    Unknown sections become ``summary`` and unknown styles ``professional``.
    """
    if section not in ENHANCEABLE_SECTIONS:
        logger.warning(f"Unknown section: {section}, using 'summary' as default")
        section = "summary"

    valid_styles = [s.value for s in EnhancementStyle]
    if style not in valid_styles:
        logger.warning(f"Unknown enhancement style: {style}, using 'professional' as default")
        style = EnhancementStyle.PROFESSIONAL.value

    return section, style


def clean_enhanced_text(text: str) -> str:
    """Strip leading labels and bold headings from enhancer output."""
    cleaned = (text or "").strip()
    for pattern in _LABEL_PATTERNS:
        cleaned = pattern.sub("", cleaned, count=1)
    cleaned = cleaned.strip()

    if not cleaned:
        raise EnhancementError("Enhancer returned empty content")
    return cleaned


class ResumeEnhancer:
    """
    Applies an enhancer to a parsed resume.

    Usage:
        enhancer = ResumeEnhancer(my_model_call)
        improved = enhancer.enhance_record(record)
    """

    def __init__(
        self,
        enhancer: Enhancer,
        style: Optional[str] = None,
        section_delay_seconds: Optional[float] = None,
    ):
        settings = get_settings().enhancement
        self.enhancer = enhancer
        self.style = style or settings.default_style
        self.section_delay_seconds = (
            settings.section_delay_seconds
            if section_delay_seconds is None
            else section_delay_seconds
        )

    def enhance_section(self, section: str, text: str, style: Optional[str] = None) -> str:
        """
        Enhance a single piece of section text.

        Raises:
            EnhancementError: text is empty, or the enhancer failed or returned nothing
        """
        if not text or not text.strip():
            raise EnhancementError("Content is required for enhancement")

        section, style = resolve_enhancement_request(section, style or self.style)

        try:
            enhanced = self.enhancer(section, text.strip(), style)
        except EnhancementError:
            raise
        except Exception as e:
            raise EnhancementError(f"Enhancer failed for {section}: {e}") from e

        cleaned = clean_enhanced_text(enhanced)
        logger.debug(f"Enhanced {section} content ({style} style)")
        return cleaned

    def enhance_record(self, record: ResumeRecord) -> ResumeRecord:
        """
        Enhance summary, experience, achievements and projects of a record.

        A section whose enhancement fails keeps its original content.

        Returns:
            New ResumeRecord; the input is left untouched
        """
        update: dict = {}
        handlers = {
            "summary": self._enhance_summary,
            "experience": self._enhance_experience,
            "achievements": self._enhance_achievements,
            "projects": self._enhance_projects,
        }

        for index, section in enumerate(FULL_RESUME_ENHANCEMENT_ORDER):
            try:
                value = handlers[section](record)
                if value is not None:
                    update[section] = value
            except EnhancementError as e:
                logger.warning(f"Failed to enhance {section}: {e}")

            if self.section_delay_seconds > 0 and index < len(FULL_RESUME_ENHANCEMENT_ORDER) - 1:
                time.sleep(self.section_delay_seconds)

        logger.info(f"Enhanced sections: {sorted(update) or 'none'}")
        return record.model_copy(update=update)

    def _enhance_summary(self, record: ResumeRecord) -> Optional[str]:
        if not record.summary.strip():
            return None
        return self.enhance_section("summary", record.summary)

    def _enhance_experience(self, record: ResumeRecord):
        if not record.experience:
            return None

        entries = []
        for entry in record.experience:
            if entry.accomplishment:
                text = ACCOMPLISHMENT_SEPARATOR.join(entry.accomplishment)
                enhanced = self.enhance_section("experience", text)
                accomplishments = [
                    item for item in enhanced.split(ACCOMPLISHMENT_SEPARATOR) if item.strip()
                ]
                entry = entry.model_copy(update={"accomplishment": accomplishments})
            entries.append(entry)
        return entries

    def _enhance_achievements(self, record: ResumeRecord):
        if not record.achievements:
            return None

        return [
            a.model_copy(update={"describe": self.enhance_section("achievements", a.describe)})
            if a.describe
            else a
            for a in record.achievements
        ]

    def _enhance_projects(self, record: ResumeRecord):
        if not record.projects:
            return None

        return [
            p.model_copy(update={"description": self.enhance_section("projects", p.description)})
            if p.description
            else p
            for p in record.projects
        ]


def enhance_full_resume(
    record: ResumeRecord, enhancer: Enhancer, style: Optional[str] = None
) -> ResumeRecord:
    """Enhance a parsed resume with the given enhancer callable."""
    return ResumeEnhancer(enhancer, style=style).enhance_record(record)
