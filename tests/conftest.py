"""Shared fixtures for the evaluation console tests."""

from pathlib import Path

import pytest

from lifeskills_app.core.models import EvaluationRecord, Student, Teacher
from lifeskills_app.core.services.evaluation_store import EvaluationStore
from lifeskills_app.core.services.roster import Roster


def make_scores(total: int) -> dict[int, int]:
    """Complete 30-item answer set summing to ``total`` (0-90)."""
    scores = {}
    remaining = total
    for question_id in range(1, 31):
        score = min(3, remaining)
        scores[question_id] = score
        remaining -= score
    return scores


def make_record(student_id: int, total: int = 68, evaluator: str = "นางสาวสุภาพร ใจดี") -> EvaluationRecord:
    return EvaluationRecord(
        student_id=student_id,
        evaluator_name=evaluator,
        date="2024-06-01T03:15:00.000Z",
        scores=make_scores(total),
        strengths="ทำงานร่วมกับผู้อื่นได้ดี",
        improvements="",
    )


def student_of(roster: Roster, teacher: Teacher, student_id: int) -> Student:
    return next(s for s in roster.students_for(teacher) if s.id == student_id)


@pytest.fixture
def roster():
    return Roster.from_constants()


@pytest.fixture
def teacher_m4a() -> Teacher:
    return Teacher(username="teacherm4a", name="นางสาวสุภาพร ใจดี", class_level="ม.4", room="A")


@pytest.fixture
def teacher_m5a(roster) -> Teacher:
    return roster.authenticate("teacherm5a", "teacherm5a")


@pytest.fixture
def student_m4a_5(roster, teacher_m4a) -> Student:
    return student_of(roster, teacher_m4a, 5)


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "lifeSkillsEvaluations.json"


@pytest.fixture
def store(cache_path: Path) -> EvaluationStore:
    return EvaluationStore(cache_path)
