"""Wire schema for evaluation records.

The same camelCase JSON shape is used by the local cache file, the Google
Sheets web app and the development sheet server, so every boundary parses
through :class:`EvaluationRecordPayload`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lifeskills_app.core.models import EvaluationRecord


class EvaluationRecordPayload(BaseModel):
    """Validated JSON form of :class:`EvaluationRecord`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    student_id: int = Field(alias="studentId")
    scores: dict[int, int] = Field(default_factory=dict)
    strengths: str | None = None
    improvements: str | None = None
    comments: str | None = None
    evaluator_name: str = Field(default="", alias="evaluatorName")
    date: str = ""

    @field_validator("scores")
    @classmethod
    def _check_score_values(cls, value: dict[int, int]) -> dict[int, int]:
        for question_id, score in value.items():
            if score not in (0, 1, 2, 3):
                raise ValueError(f"Score for question {question_id} must be 0-3, got {score}.")
        return value

    @classmethod
    def from_record(cls, record: EvaluationRecord) -> EvaluationRecordPayload:
        return cls(
            student_id=record.student_id,
            scores=dict(record.scores),
            strengths=record.strengths,
            improvements=record.improvements,
            comments=record.comments,
            evaluator_name=record.evaluator_name,
            date=record.date,
        )

    def to_record(self) -> EvaluationRecord:
        return EvaluationRecord(
            student_id=self.student_id,
            evaluator_name=self.evaluator_name,
            date=self.date,
            scores=dict(self.scores),
            strengths=self.strengths or "",
            improvements=self.improvements or "",
            comments=self.comments,
        )


def record_to_json(record: EvaluationRecord) -> dict[str, Any]:
    """Serialize a record to its camelCase JSON dict."""
    return EvaluationRecordPayload.from_record(record).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def record_from_json(data: Any) -> EvaluationRecord:
    """Parse a camelCase JSON dict into a record.

    Raises:
        pydantic.ValidationError: if the data does not match the schema.
    """
    return EvaluationRecordPayload.model_validate(data).to_record()
