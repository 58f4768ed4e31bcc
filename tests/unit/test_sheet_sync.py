"""
Unit tests for lifeskills_app/core/services/sheet_sync.py.

The requests session is mocked; no network calls are made.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_record
from lifeskills_app.core.services.sheet_sync import (
    SheetSyncClient,
    SyncStatus,
    sheet_name_for,
)

SCRIPT_URL = "https://script.google.com/macros/s/example/exec"


def _response(payload=None, status_code=200, text=None):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    if text is not None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return SheetSyncClient(SCRIPT_URL, timeout=5.0, session=session)


class TestSheetName:
    def test_joins_class_and_room(self):
        assert sheet_name_for("ม.4", "A") == "ม.4-A"

    def test_strips_all_whitespace(self):
        assert sheet_name_for("ม. 4 ", " A") == "ม.4-A"


class TestPush:
    def test_posts_text_plain_body(self, client, session, student_m4a_5, teacher_m4a):
        session.post.return_value = _response({"result": "success"})

        result = client.push(student_m4a_5, teacher_m4a, make_record(5))

        assert result.ok
        assert result.status is SyncStatus.SUCCESS
        args, kwargs = session.post.call_args
        assert args == (SCRIPT_URL,)
        assert kwargs["headers"] == {"Content-Type": "text/plain;charset=utf-8"}
        assert kwargs["timeout"] == 5.0
        body = json.loads(kwargs["data"].decode("utf-8"))
        assert body["sheetName"] == "ม.4-A"
        assert body["payload"]["studentId"] == 5
        assert body["payload"]["studentName"] == student_m4a_5.name
        assert body["payload"]["classLevel"] == "ม.4"
        assert body["payload"]["room"] == "A"

    def test_transport_failure(self, client, session, student_m4a_5, teacher_m4a):
        session.post.side_effect = requests.ConnectionError("offline")
        result = client.push(student_m4a_5, teacher_m4a, make_record(5))
        assert result.status is SyncStatus.TRANSPORT_ERROR
        assert not result.ok

    @pytest.mark.parametrize(
        "response",
        [
            _response({"result": "error", "message": "quota"}),
            _response({"result": "success"}, status_code=500),
            _response(text="<html>"),
            _response(["success"]),
        ],
    )
    def test_server_failures(self, client, session, student_m4a_5, teacher_m4a, response):
        session.post.return_value = response
        result = client.push(student_m4a_5, teacher_m4a, make_record(5))
        assert result.status is SyncStatus.SERVER_ERROR

    def test_unconfigured_client_makes_no_request(self, session, student_m4a_5, teacher_m4a):
        client = SheetSyncClient("  ", session=session)
        result = client.push(student_m4a_5, teacher_m4a, make_record(5))
        assert result.status is SyncStatus.NOT_CONFIGURED
        session.post.assert_not_called()


class TestPull:
    def test_requests_teacher_sheet(self, client, session, teacher_m4a):
        session.get.return_value = _response({"result": "success", "data": {}})

        result = client.pull(teacher_m4a)

        session.get.assert_called_once_with(SCRIPT_URL, params={"sheetName": "ม.4-A"}, timeout=5.0)
        assert result.ok
        assert result.records == {}

    def test_parses_records_keyed_by_student_id(self, client, session, teacher_m4a):
        session.get.return_value = _response(
            {
                "result": "success",
                "data": {
                    "3": {"studentId": 3, "scores": {"1": 2}, "evaluatorName": "ครู", "date": ""},
                    "7": {"scores": {"1": 1}, "studentName": "ignored"},
                },
            }
        )

        result = client.pull(teacher_m4a)

        assert set(result.records) == {3, 7}
        assert result.records[3].scores == {1: 2}
        assert result.records[7].student_id == 7

    def test_empty_data_differs_from_absent(self, client, session, teacher_m4a):
        session.get.return_value = _response({"result": "error", "message": "no sheet"})
        absent = client.pull(teacher_m4a)
        assert absent.records is None
        assert absent.status is SyncStatus.SERVER_ERROR

    def test_malformed_record_makes_pull_absent(self, client, session, teacher_m4a):
        session.get.return_value = _response(
            {"result": "success", "data": {"3": {"studentId": 3, "scores": {"1": 7}}}}
        )
        result = client.pull(teacher_m4a)
        assert result.records is None
        assert result.status is SyncStatus.SERVER_ERROR

    def test_non_object_data_makes_pull_absent(self, client, session, teacher_m4a):
        session.get.return_value = _response({"result": "success", "data": []})
        assert client.pull(teacher_m4a).records is None

    def test_transport_failure(self, client, session, teacher_m4a):
        session.get.side_effect = requests.Timeout("slow")
        result = client.pull(teacher_m4a)
        assert result.status is SyncStatus.TRANSPORT_ERROR
        assert result.records is None

    def test_unconfigured(self, session, teacher_m4a):
        result = SheetSyncClient("", session=session).pull(teacher_m4a)
        assert result.status is SyncStatus.NOT_CONFIGURED
        session.get.assert_not_called()
