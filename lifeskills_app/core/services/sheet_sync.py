"""Client for the Google Sheets web app that mirrors evaluations per class.

Every call makes exactly one request and never raises: failures come back as
a :class:`SyncStatus` with a short detail message so callers can log the
cause while treating the remote copy as best-effort.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

import requests
from pydantic import ValidationError

from lifeskills_app.constants.network_constants import (
    SHEET_POST_CONTENT_TYPE,
    SHEET_RESULT_SUCCESS,
)
from lifeskills_app.core.models import EvaluationRecord, Student, Teacher
from lifeskills_app.core.record_schema import record_from_json, record_to_json

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


class SyncStatus(Enum):
    SUCCESS = auto()
    TRANSPORT_ERROR = auto()
    SERVER_ERROR = auto()
    NOT_CONFIGURED = auto()


@dataclass(frozen=True, slots=True)
class PushResult:
    status: SyncStatus
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SyncStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class PullResult:
    """Outcome of a pull; ``records`` is None whenever nothing usable came back."""

    status: SyncStatus
    records: dict[int, EvaluationRecord] | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SyncStatus.SUCCESS


class _RemoteReplyError(Exception):
    """Reply arrived but is not a usable success payload."""


def sheet_name_for(class_level: str, room: str) -> str:
    """``"ม.4 " + "A"`` -> ``"ม.4-A"``: joined with a dash, all whitespace removed."""
    return _WHITESPACE.sub("", f"{class_level}-{room}")


def sheet_name_for_teacher(teacher: Teacher) -> str:
    return sheet_name_for(teacher.class_level, teacher.room)


class SheetSyncClient:
    """Pushes and pulls evaluation records for one teacher's class sheet."""

    def __init__(
        self,
        script_url: str,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._script_url = script_url.strip()
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self._script_url)

    def push(self, student: Student, teacher: Teacher, record: EvaluationRecord) -> PushResult:
        if not self.is_configured:
            logger.warning("Sheet URL is not configured; skipping remote save for student %s", student.id)
            return PushResult(SyncStatus.NOT_CONFIGURED, "Sheet URL is not configured.")

        payload = record_to_json(record)
        payload.update(
            studentName=student.name,
            classLevel=teacher.class_level,
            room=teacher.room,
        )
        body = {"sheetName": sheet_name_for_teacher(teacher), "payload": payload}

        try:
            # text/plain keeps Apps Script from requiring a CORS preflight
            response = self._session.post(
                self._script_url,
                data=json.dumps(body, ensure_ascii=False).encode("utf-8"),
                headers={"Content-Type": SHEET_POST_CONTENT_TYPE},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Error saving to Google Sheets: %s", exc)
            return PushResult(SyncStatus.TRANSPORT_ERROR, str(exc))

        try:
            self._read_success_reply(response)
        except _RemoteReplyError as exc:
            logger.warning("Google Sheets rejected evaluation for student %s: %s", student.id, exc)
            return PushResult(SyncStatus.SERVER_ERROR, str(exc))

        logger.info("Saved evaluation for student %s to sheet %s", student.id, body["sheetName"])
        return PushResult(SyncStatus.SUCCESS)

    def pull(self, teacher: Teacher) -> PullResult:
        if not self.is_configured:
            return PullResult(SyncStatus.NOT_CONFIGURED, detail="Sheet URL is not configured.")

        sheet_name = sheet_name_for_teacher(teacher)
        try:
            response = self._session.get(
                self._script_url,
                params={"sheetName": sheet_name},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Error loading from Google Sheets: %s", exc)
            return PullResult(SyncStatus.TRANSPORT_ERROR, detail=str(exc))

        try:
            reply = self._read_success_reply(response)
            records = _parse_sheet_records(reply.get("data"))
        except _RemoteReplyError as exc:
            logger.warning("Could not load sheet %s: %s", sheet_name, exc)
            return PullResult(SyncStatus.SERVER_ERROR, detail=str(exc))

        logger.info("Loaded %d evaluation(s) from sheet %s", len(records), sheet_name)
        return PullResult(SyncStatus.SUCCESS, records=records)

    @staticmethod
    def _read_success_reply(response: requests.Response) -> dict[str, Any]:
        if not response.ok:
            raise _RemoteReplyError(f"HTTP {response.status_code}")
        try:
            reply = response.json()
        except ValueError as exc:
            raise _RemoteReplyError("Reply is not valid JSON.") from exc
        if not isinstance(reply, dict):
            raise _RemoteReplyError("Reply is not a JSON object.")
        if reply.get("result") != SHEET_RESULT_SUCCESS:
            message = reply.get("message") or reply.get("error") or reply.get("result")
            raise _RemoteReplyError(f"Remote result: {message}")
        return reply


def _parse_sheet_records(data: Any) -> dict[int, EvaluationRecord]:
    """Parse the ``data`` member: a mapping of student id to record."""
    if not isinstance(data, dict):
        raise _RemoteReplyError("Reply data is not an object.")

    records: dict[int, EvaluationRecord] = {}
    for raw_id, raw_record in data.items():
        if not isinstance(raw_record, dict):
            raise _RemoteReplyError(f"Record {raw_id!r} is not an object.")
        item = dict(raw_record)
        item.setdefault("studentId", raw_id)
        try:
            record = record_from_json(item)
        except ValidationError as exc:
            raise _RemoteReplyError(f"Record {raw_id!r} is malformed: {exc}") from exc
        records[record.student_id] = record
    return records
