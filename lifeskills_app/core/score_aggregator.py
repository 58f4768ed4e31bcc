"""Score aggregation for the 30-item rubric.

All functions are pure. Only question ids 1-30 count towards completeness.
Scores outside 0-3 are a caller error and are not clamped: the percentage can
then exceed 100 and the quality band still resolves to EXCELLENT.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from lifeskills_app.constants.rubric_constants import (
    EXCELLENT_THRESHOLD,
    FAIR_THRESHOLD,
    GOOD_THRESHOLD,
    MAX_TOTAL_SCORE,
    QUESTION_COUNT,
)
from lifeskills_app.core.models import QualityLevel
from lifeskills_app.core.rubric_catalog import QUESTION_IDS

_QUESTION_ID_SET = frozenset(QUESTION_IDS)


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Aggregated view of one score mapping."""

    total: int
    answered: int
    percentage: float
    quality: QualityLevel

    @property
    def is_complete(self) -> bool:
        return self.answered == QUESTION_COUNT

    @property
    def percentage_text(self) -> str:
        return f"{self.percentage:.2f}"


def total(scores: Mapping[int, int]) -> int:
    """Sum of the answered scores; unanswered items contribute nothing."""
    return sum(scores.values())


def answered_count(scores: Mapping[int, int]) -> int:
    """Number of rubric questions answered; ids outside 1-30 are not counted."""
    return sum(1 for question_id in scores if question_id in _QUESTION_ID_SET)


def unknown_question_ids(scores: Mapping[int, int]) -> list[int]:
    return sorted(question_id for question_id in scores if question_id not in _QUESTION_ID_SET)


def is_complete(scores: Mapping[int, int]) -> bool:
    """True only when every question id 1-30 has a score."""
    return _QUESTION_ID_SET.issubset(scores)


def percentage(total_score: int) -> float:
    """Unrounded percentage of the 90-point maximum."""
    return total_score / MAX_TOTAL_SCORE * 100


def rounded_percentage(total_score: int) -> float:
    return round(percentage(total_score), 2)


def format_percentage(total_score: int) -> str:
    return f"{percentage(total_score):.2f}"


def quality_level(percent: float) -> QualityLevel:
    """Map a percentage to its band; lower bounds are inclusive."""
    if percent >= EXCELLENT_THRESHOLD:
        return QualityLevel.EXCELLENT
    if percent >= GOOD_THRESHOLD:
        return QualityLevel.GOOD
    if percent >= FAIR_THRESHOLD:
        return QualityLevel.FAIR
    return QualityLevel.IMPROVE


def summarize(scores: Mapping[int, int]) -> ScoreSummary:
    total_score = total(scores)
    percent = rounded_percentage(total_score)
    return ScoreSummary(
        total=total_score,
        answered=answered_count(scores),
        percentage=percent,
        quality=quality_level(percent),
    )
