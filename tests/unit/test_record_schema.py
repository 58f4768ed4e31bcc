"""
Unit tests for lifeskills_app/core/record_schema.py.
"""

import pytest
from pydantic import ValidationError

from conftest import make_record
from lifeskills_app.core.record_schema import record_from_json, record_to_json


class TestRecordToJson:
    def test_uses_camel_case_keys(self):
        data = record_to_json(make_record(5))
        assert data["studentId"] == 5
        assert data["evaluatorName"] == "นางสาวสุภาพร ใจดี"
        assert data["date"] == "2024-06-01T03:15:00.000Z"
        assert "student_id" not in data

    def test_omits_absent_comments(self):
        assert "comments" not in record_to_json(make_record(1))


class TestRecordFromJson:
    def test_parses_string_question_ids(self):
        record = record_from_json(
            {
                "studentId": "3",
                "scores": {"1": 3, "2": 0},
                "evaluatorName": "ครู",
                "date": "2024-06-01T00:00:00.000Z",
            }
        )
        assert record.student_id == 3
        assert record.scores == {1: 3, 2: 0}
        assert record.strengths == ""
        assert record.improvements == ""

    def test_null_text_fields_become_empty(self):
        record = record_from_json({"studentId": 1, "strengths": None, "improvements": None})
        assert record.strengths == ""
        assert record.improvements == ""
        assert record.comments is None

    def test_ignores_extra_sheet_columns(self):
        record = record_from_json({"studentId": 1, "studentName": "x", "classLevel": "ม.4", "room": "A"})
        assert record.student_id == 1

    @pytest.mark.parametrize("bad_score", [4, -1])
    def test_rejects_out_of_range_scores(self, bad_score):
        with pytest.raises(ValidationError):
            record_from_json({"studentId": 1, "scores": {"1": bad_score}})

    def test_rejects_missing_student_id(self):
        with pytest.raises(ValidationError):
            record_from_json({"scores": {}})

    def test_json_form_parses_back_to_equal_record(self):
        original = make_record(9, total=40)
        assert record_from_json(record_to_json(original)) == original
