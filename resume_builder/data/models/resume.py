"""
Resume record models.

Defines the canonical structured resume shape. The camelCase aliases are the
persisted schema shared with the editor, the PDF template renderer and the
enhancement service, so they must stay field-compatible.
"""

from pydantic import Field

from .base import EmbeddedModel


class ExperienceEntry(EmbeddedModel):
    """One job in the work experience section."""

    title: str = ""
    company_name: str = Field(default="", alias="companyName")
    date: str = ""
    company_location: str = Field(default="", alias="companyLocation")
    accomplishment: list[str] = Field(default_factory=list)


class EducationEntry(EmbeddedModel):
    """One degree in the education section."""

    degree: str = ""
    institution: str = ""
    duration: str = ""
    location: str = ""


class AchievementEntry(EmbeddedModel):
    """A single achievement line."""

    key_achievements: str = Field(default="", alias="keyAchievements")
    describe: str = ""


class ProjectEntry(EmbeddedModel):
    """A project with its free-text description."""

    title: str = ""
    description: str = ""
    duration: str = ""


class CertificationEntry(EmbeddedModel):
    """A certification or licence."""

    title: str = ""
    issued_by: str = Field(default="", alias="issuedBy")
    year: str = ""


class CourseEntry(EmbeddedModel):
    """A course or training item."""

    title: str = ""
    description: str = ""


class ResumeRecord(EmbeddedModel):
    """
    Structured resume produced by the parser.

    A record is a snapshot: later stages (persistence, enhancement) derive
    new records from it rather than mutating it.
    """

    # Identity / contact
    name: str = ""
    role: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    location: str = ""

    summary: str = ""

    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    achievements: list[AchievementEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    courses: list[CourseEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)

    def is_complete(self) -> bool:
        """Check the fields a finished resume needs are all present."""
        return bool(
            self.name
            and self.email
            and self.phone
            and self.role
            and self.summary
            and self.experience
            and self.education
        )

    def completeness_percentage(self) -> int:
        """Percentage of the ten scored resume parts that are filled in."""
        scored = [
            self.name,
            self.email,
            self.phone,
            self.role,
            self.summary,
            self.experience,
            self.education,
            self.skills,
            self.achievements,
            self.projects,
        ]
        score = sum(1 for part in scored if part)
        return round(score / len(scored) * 100)
