"""
Resume section parsers for extracting structured information.

Each parser is responsible for one part of the resume: the contact header,
or the body of one section (experience, education, skills, ...).
"""

from .base import EntryParser
from .contact_parser import ContactParser, ContactInfo
from .summary_parser import SummaryParser, SummaryParseResult
from .experience_parser import ExperienceParser, ExtractedExperience, ExperienceParseResult
from .education_parser import EducationParser, ExtractedEducation, EducationParseResult
from .skills_parser import SkillsParser, SkillsParseResult
from .achievements_parser import AchievementsParser, ExtractedAchievement, AchievementsParseResult
from .projects_parser import ProjectsParser, ExtractedProject, ProjectsParseResult
from .certifications_parser import CertificationsParser, ExtractedCertification, CertificationsParseResult
from .courses_parser import CoursesParser, ExtractedCourse, CoursesParseResult

__all__ = [
    "EntryParser",
    "ContactParser",
    "ContactInfo",
    "SummaryParser",
    "SummaryParseResult",
    "ExperienceParser",
    "ExtractedExperience",
    "ExperienceParseResult",
    "EducationParser",
    "ExtractedEducation",
    "EducationParseResult",
    "SkillsParser",
    "SkillsParseResult",
    "AchievementsParser",
    "ExtractedAchievement",
    "AchievementsParseResult",
    "ProjectsParser",
    "ExtractedProject",
    "ProjectsParseResult",
    "CertificationsParser",
    "ExtractedCertification",
    "CertificationsParseResult",
    "CoursesParser",
    "ExtractedCourse",
    "CoursesParseResult",
]
