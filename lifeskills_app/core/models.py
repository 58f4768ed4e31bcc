"""Domain models for the evaluation console."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class Student:
    """Roster entry; ``id`` is unique within one class level and room."""

    id: int
    name: str
    class_level: str
    room: str


@dataclass(frozen=True, slots=True)
class Teacher:
    """Homeroom teacher account, bound to exactly one class level and room."""

    username: str
    name: str
    class_level: str
    room: str


@dataclass(frozen=True, slots=True)
class Question:
    id: int
    text: str


@dataclass(frozen=True, slots=True)
class Indicator:
    id: int
    title: str
    questions: tuple[Question, ...]


class QualityLevel(Enum):
    """Qualitative band derived from the percentage score."""

    EXCELLENT = "ดีเยี่ยม"
    GOOD = "ดี"
    FAIR = "พอใช้"
    IMPROVE = "ปรับปรุง"

    @property
    def label(self) -> str:
        return self.value

    @property
    def range_label(self) -> str:
        return _RANGE_LABELS[self]


_RANGE_LABELS = {
    QualityLevel.EXCELLENT: "75-100%",
    QualityLevel.GOOD: "50-74%",
    QualityLevel.FAIR: "25-49%",
    QualityLevel.IMPROVE: "ต่ำกว่า 25%",
}


@dataclass(frozen=True, slots=True)
class EvaluationKey:
    """Scopes a record to the class level and room it was recorded under."""

    class_level: str
    room: str
    student_id: int

    @classmethod
    def for_student(cls, teacher: Teacher, student_id: int) -> EvaluationKey:
        return cls(class_level=teacher.class_level, room=teacher.room, student_id=student_id)

    @classmethod
    def parse(cls, raw_key: str) -> EvaluationKey:
        """Parse ``"<classLevel>-<room>-<studentId>"``.

        Raises:
            ValueError: if the key does not have three parts or the id is not an integer.
        """
        parts = raw_key.rsplit("-", 2)
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Malformed evaluation key: {raw_key!r}")
        class_level, room, raw_id = parts
        return cls(class_level=class_level, room=room, student_id=int(raw_id))

    @property
    def storage_key(self) -> str:
        return f"{self.class_level}-{self.room}-{self.student_id}"

    def __str__(self) -> str:
        return self.storage_key


@dataclass(slots=True)
class EvaluationRecord:
    """One student's rubric answers as last saved.

    ``scores`` maps question id to a score in 0-3 and only holds answered
    items; a missing id means "not yet answered", never 0.
    """

    student_id: int
    evaluator_name: str
    date: str
    scores: dict[int, int] = field(default_factory=dict)
    strengths: str = ""
    improvements: str = ""
    comments: str | None = None


EvaluationCollection = dict[EvaluationKey, EvaluationRecord]
