"""
Shared test fixtures for the resume builder test suite.

Sets environment variables before any package imports so settings are built
for testing, then provides sample resume text and document fixtures.
"""

import os

# === Set environment BEFORE any resume_builder imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("ENHANCE_SECTION_DELAY_SECONDS", "0")

import io
from typing import Optional

import pytest
from docx import Document

from resume_builder.data.models import (
    AchievementEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resume_builder.nlp import ResumeParser


# ---------------------------------------------------------------------------
# Sample resume text
# ---------------------------------------------------------------------------


FULL_RESUME_TEXT = """\
Jane Doe
Senior Software Engineer
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe
Austin, TX

SUMMARY
Backend engineer with eight years of experience building data platforms.

EXPERIENCE
Staff Engineer
2019 - Present
Led the migration of the billing system to event sourcing
Mentored six engineers

EDUCATION
Master of Science in Computer Science
Stanford University
2012 - 2014

SKILLS
Python, Go; Rust | Docker • Kubernetes

ACHIEVEMENTS
Won the internal hackathon two years in a row

PROJECTS
Project Alpha
6 months
Built a thing.

CERTIFICATIONS
AWS Solutions Architect 2021

COURSES
Distributed Systems Design
"""


@pytest.fixture
def full_resume_text() -> str:
    return FULL_RESUME_TEXT


@pytest.fixture
def parser() -> ResumeParser:
    return ResumeParser()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_docx_bytes():
    """Factory that builds a .docx document in memory with python-docx."""

    def _factory(
        paragraphs: list[str],
        table_rows: Optional[list[list[str]]] = None,
    ) -> bytes:
        doc = Document()
        for paragraph in paragraphs:
            doc.add_paragraph(paragraph)

        if table_rows:
            table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for row_index, row in enumerate(table_rows):
                for col_index, value in enumerate(row):
                    table.cell(row_index, col_index).text = value

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    return _factory


# ---------------------------------------------------------------------------
# Sample records
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_record() -> ResumeRecord:
    return ResumeRecord(
        name="Jane Doe",
        role="Software Engineer",
        phone="555-123-4567",
        email="jane@example.com",
        location="Austin, TX",
        summary="Backend engineer with eight years of experience.",
        experience=[
            ExperienceEntry(
                title="Staff Engineer",
                company_name="Acme Corp",
                date="2019 - Present",
                accomplishment=["Led the billing migration", "Mentored six engineers"],
            ),
            ExperienceEntry(title="Intern"),
        ],
        education=[
            EducationEntry(degree="Bachelor of Science", institution="MIT", duration="2010-2014"),
        ],
        achievements=[
            AchievementEntry(key_achievements="Won the hackathon", describe="Won the hackathon twice"),
        ],
        skills=["Python", "Go"],
        projects=[
            ProjectEntry(title="Project Alpha", description="Built a thing.", duration="6 months"),
            ProjectEntry(title="Project Beta"),
        ],
    )
