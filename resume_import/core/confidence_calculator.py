"""
Confidence scoring for an aggregated extraction result.

The score is a deterministic completeness metric, not a statistical estimate.
Five weighted buckets sum to 100 points:

  Personal info   30  (name 10, email 10, phone 5, location 5)
  Summary         10
  Experience      30  (5 per entry)
  Education       15  (7 per entry)
  Skills          15  (3 per skill)

Score = achieved / 100, clamped to [0, 1].
"""

from typing import Optional

from resume_import.core.schemas import ExtractionResult, ParseQuality, PersonalInfoGuess, SummaryGuess


class ConfidenceCalculator:
    """Central place for all extraction confidence logic."""

    TOTAL_POINTS = 100

    @staticmethod
    def personal_info(info: Optional[PersonalInfoGuess]) -> int:
        if info is None:
            return 0
        points = 0
        if info.name:
            points += 10
        if info.email:
            points += 10
        if info.phone:
            points += 5
        if info.location:
            points += 5
        return points

    @staticmethod
    def summary(summary: Optional[SummaryGuess]) -> int:
        return 10 if summary is not None and summary.content else 0

    @staticmethod
    def experience(count: int) -> int:
        return min(30, 5 * count)

    @staticmethod
    def education(count: int) -> int:
        return min(15, 7 * count)

    @staticmethod
    def skills(count: int) -> int:
        return min(15, 3 * count)

    @classmethod
    def score(cls, result: ExtractionResult) -> float:
        """
        Examples:
          name + email only -> 0.2
          everything present with 6+ jobs, 3+ degrees, 5+ skills -> 1.0
        """
        achieved = (
            cls.personal_info(result.personal_info)
            + cls.summary(result.summary)
            + cls.experience(len(result.experiences or []))
            + cls.education(len(result.education or []))
            + cls.skills(len(result.skills or []))
        )
        return max(0.0, min(1.0, achieved / cls.TOTAL_POINTS))

    @staticmethod
    def parse_quality(score: float) -> ParseQuality:
        """
        Quality tiers:
          "high"   : score >= 0.7
          "medium" : score >= 0.4
          "low"    : Otherwise
        """
        if score >= 0.7:
            return "high"
        elif score >= 0.4:
            return "medium"
        else:
            return "low"
