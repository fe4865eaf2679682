"""
Tests for the single-line section parsers — achievements, certifications, courses.
"""

import pytest

from resume_builder.nlp.parsers import (
    AchievementsParser,
    CertificationsParser,
    CoursesParser,
)


class TestAchievementsParser:
    @pytest.fixture
    def parser(self):
        return AchievementsParser()

    def test_key_is_first_three_words(self, parser):
        result = parser.parse(["Won the internal hackathon twice"])
        assert len(result.achievements) == 1
        achievement = result.achievements[0]
        assert achievement.key_achievements == "Won the internal"
        assert achievement.describe == "Won the internal hackathon twice"

    def test_short_lines_dropped(self, parser):
        assert parser.parse(["Top 10", "Dean list"]).achievements == []

    def test_one_entry_per_line(self, parser):
        result = parser.parse(["Employee of the year 2020", "Speaker at PyCon 2021"])
        assert len(result.achievements) == 2


class TestCertificationsParser:
    @pytest.fixture
    def parser(self):
        return CertificationsParser()

    def test_title_and_year(self, parser):
        result = parser.parse(["AWS Solutions Architect 2021"])
        assert len(result.certifications) == 1
        cert = result.certifications[0]
        assert cert.title == "AWS Solutions Architect 2021"
        assert cert.year == "2021"
        assert cert.issued_by == ""

    def test_without_year(self, parser):
        result = parser.parse(["Certified Kubernetes Administrator"])
        assert result.certifications[0].year == ""

    def test_short_lines_dropped(self, parser):
        assert parser.parse(["CKA", "PMP 2"]).certifications == []


class TestCoursesParser:
    @pytest.fixture
    def parser(self):
        return CoursesParser()

    def test_one_course_per_line(self, parser):
        result = parser.parse(["Distributed Systems", "Machine Learning"])
        assert [c.title for c in result.courses] == ["Distributed Systems", "Machine Learning"]
        assert result.courses[0].description == ""

    def test_short_lines_dropped(self, parser):
        assert parser.parse(["ML", "Algos"]).courses == []
