"""
Test suite for completeness confidence scoring.
"""

import pytest

from resume_import.core.confidence_calculator import ConfidenceCalculator
from resume_import.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    ExtractionResult,
    PersonalInfoGuess,
    SkillEntry,
    SummaryGuess,
)


def _experiences(n):
    return [ExperienceEntry(id=i + 1, role="Engineer", company=f"Co{i}", order=i) for i in range(n)]


def _education(n):
    return [EducationEntry(id=i + 1, degree="B.S.", field="Physics", order=i) for i in range(n)]


def _skills(n):
    return [SkillEntry(id=i + 1, name=f"Skill{i}", order=i) for i in range(n)]


def test_name_and_email_only():
    result = ExtractionResult(personal_info=PersonalInfoGuess(name="Jane Doe", email="jane@x.com"))
    assert ConfidenceCalculator.score(result) == pytest.approx(0.20)


def test_empty_result_scores_zero():
    assert ConfidenceCalculator.score(ExtractionResult()) == 0.0


def test_complete_result_scores_one():
    result = ExtractionResult(
        personal_info=PersonalInfoGuess(name="Jane Doe", email="jane@x.com", phone="555-123-4567", location="Portland, OR"),
        summary=SummaryGuess(content="Backend engineer."),
        experiences=_experiences(6),
        education=_education(3),
        skills=_skills(5),
    )
    assert ConfidenceCalculator.score(result) == pytest.approx(1.0)


def test_bucket_caps():
    assert ConfidenceCalculator.experience(10) == 30
    assert ConfidenceCalculator.experience(2) == 10
    assert ConfidenceCalculator.education(1) == 7
    assert ConfidenceCalculator.education(5) == 15
    assert ConfidenceCalculator.skills(4) == 12
    assert ConfidenceCalculator.skills(30) == 15


def test_role_and_links_do_not_score():
    info = PersonalInfoGuess(role="Engineer", linkedin_url="https://www.linkedin.com/in/jd", portfolio_url="https://jd.dev")
    assert ConfidenceCalculator.personal_info(info) == 0


def test_empty_summary_does_not_score():
    assert ConfidenceCalculator.summary(SummaryGuess(content=None)) == 0
    assert ConfidenceCalculator.summary(None) == 0


def test_partial_result():
    result = ExtractionResult(
        personal_info=PersonalInfoGuess(name="Jane Doe", phone="555-123-4567"),
        experiences=_experiences(2),
        skills=_skills(3),
    )
    # 10 + 5 + 10 + 9
    assert ConfidenceCalculator.score(result) == pytest.approx(0.34)


@pytest.mark.parametrize(
    "score,quality",
    [(1.0, "high"), (0.7, "high"), (0.69, "medium"), (0.4, "medium"), (0.39, "low"), (0.0, "low")],
)
def test_parse_quality_tiers(score, quality):
    assert ConfidenceCalculator.parse_quality(score) == quality
