"""
Data models for the resume builder.

Pydantic models describing the structured resume record.
"""

from .base import EmbeddedModel
from .resume import (
    AchievementEntry,
    CertificationEntry,
    CourseEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)

__all__ = [
    "EmbeddedModel",
    "AchievementEntry",
    "CertificationEntry",
    "CourseEntry",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "ResumeRecord",
]
