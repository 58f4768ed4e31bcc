"""Session state for one logged-in teacher, shared by the UI and its workers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock

from lifeskills_app.constants.rubric_constants import QUESTION_COUNT, SCORE_CHOICES
from lifeskills_app.core import score_aggregator
from lifeskills_app.core.evaluation_exporter import default_export_filename, export_to_excel
from lifeskills_app.core.models import EvaluationKey, EvaluationRecord, Student, Teacher
from lifeskills_app.core.services.evaluation_store import EvaluationStore, EvaluationStoreError
from lifeskills_app.core.services.reconciliation import ReconciliationReport, reconcile_on_login
from lifeskills_app.core.services.roster import Roster
from lifeskills_app.core.services.sheet_sync import PushResult, SheetSyncClient

logger = logging.getLogger(__name__)


class LoginError(Exception):
    """Raised when the username/password pair matches no teacher account."""


class NotLoggedInError(RuntimeError):
    """Raised when a session operation needs a teacher and none is logged in."""


class IncompleteEvaluationError(ValueError):
    """Raised when a rubric is submitted before every item is answered."""

    def __init__(self, answered: int, required: int = QUESTION_COUNT) -> None:
        super().__init__(f"Only {answered} of {required} items answered.")
        self.answered = answered
        self.required = required


class InvalidScoresError(ValueError):
    """Raised when a rubric carries unknown question ids or out-of-range scores."""


@dataclass(frozen=True, slots=True)
class LoginResult:
    teacher: Teacher
    reconciliation: ReconciliationReport


@dataclass(frozen=True, slots=True)
class SaveOutcome:
    """Result of the local-first, remote-best-effort save."""

    key: EvaluationKey
    record: EvaluationRecord
    local_written: bool
    remote_synced: bool
    push_result: PushResult | None = None
    local_error: str = ""


class EvaluationSession:
    """Facade over roster, local cache and sheet sync for the current teacher."""

    def __init__(self, store: EvaluationStore, sync_client: SheetSyncClient, roster: Roster) -> None:
        self._lock = Lock()
        self._store = store
        self._sync_client = sync_client
        self._roster = roster
        self._teacher: Teacher | None = None

    # --- Login ---

    def login(self, username: str, password: str) -> LoginResult:
        """Authenticate, then merge the teacher's sheet into the local cache."""
        teacher = self._roster.authenticate(username, password)
        if teacher is None:
            raise LoginError(f"Unknown user or wrong password for {username!r}.")

        pull_result = self._sync_client.pull(teacher)
        with self._lock:
            self._teacher = teacher
            try:
                report = reconcile_on_login(self._store, pull_result, teacher)
            except EvaluationStoreError:
                logger.exception("Could not persist reconciled evaluations for %s", teacher.username)
                report = ReconciliationReport(applied=False)
        logger.info("Teacher %s logged in (%s-%s)", teacher.username, teacher.class_level, teacher.room)
        return LoginResult(teacher=teacher, reconciliation=report)

    def logout(self) -> None:
        with self._lock:
            self._teacher = None

    @property
    def current_teacher(self) -> Teacher | None:
        with self._lock:
            return self._teacher

    def require_teacher(self) -> Teacher:
        teacher = self.current_teacher
        if teacher is None:
            raise NotLoggedInError("No teacher is logged in.")
        return teacher

    # --- Roster & cached evaluations ---

    def roster(self) -> list[Student]:
        return self._roster.students_for(self.require_teacher())

    def evaluation_for(self, student: Student) -> EvaluationRecord | None:
        key = EvaluationKey.for_student(self.require_teacher(), student.id)
        with self._lock:
            return self._store.get(key)

    def class_evaluations(self) -> dict[int, EvaluationRecord]:
        teacher = self.require_teacher()
        with self._lock:
            all_records = self._store.get_all()
        evaluations: dict[int, EvaluationRecord] = {}
        for student in self._roster.students_for(teacher):
            record = all_records.get(EvaluationKey.for_student(teacher, student.id))
            if record is not None:
                evaluations[student.id] = record
        return evaluations

    def progress(self) -> tuple[int, int]:
        """Evaluated students and roster size for the current class."""
        return len(self.class_evaluations()), len(self.roster())

    # --- Save ---

    def build_record(
        self,
        student: Student,
        scores: Mapping[int, int],
        strengths: str = "",
        improvements: str = "",
        now: datetime | None = None,
    ) -> EvaluationRecord:
        """Validate the answers and stamp them into a record.

        Raises:
            IncompleteEvaluationError: unless every question id 1-30 has a score.
            InvalidScoresError: for ids outside the rubric or scores outside 0-3.
        """
        teacher = self.require_teacher()
        if not score_aggregator.is_complete(scores):
            raise IncompleteEvaluationError(score_aggregator.answered_count(scores))

        unknown_ids = score_aggregator.unknown_question_ids(scores)
        if unknown_ids:
            raise InvalidScoresError(f"Unknown question ids: {unknown_ids}")
        bad_scores = {qid: score for qid, score in scores.items() if score not in SCORE_CHOICES}
        if bad_scores:
            raise InvalidScoresError(f"Scores must be one of {sorted(SCORE_CHOICES)}: {bad_scores}")

        timestamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        return EvaluationRecord(
            student_id=student.id,
            evaluator_name=teacher.name,
            date=timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            scores=dict(scores),
            strengths=strengths.strip(),
            improvements=improvements.strip(),
        )

    def save_evaluation(
        self,
        student: Student,
        scores: Mapping[int, int],
        strengths: str = "",
        improvements: str = "",
    ) -> SaveOutcome:
        """Write locally, then attempt the sheet push.

        Raises:
            IncompleteEvaluationError: before any write unless all 30 items are answered.
            InvalidScoresError: before any write for malformed answers.
        """
        record = self.build_record(student, scores, strengths, improvements)
        teacher = self.require_teacher()
        key = EvaluationKey.for_student(teacher, student.id)

        local_error = ""
        with self._lock:
            try:
                self._store.put(key, record)
                local_written = True
            except EvaluationStoreError as exc:
                logger.exception("Local save failed for %s", key)
                local_written = False
                local_error = str(exc)

        push_result = self._sync_client.push(student, teacher, record)
        summary = score_aggregator.summarize(record.scores)
        logger.info(
            "Saved %s: total=%d (%s%%, %s) local=%s remote=%s",
            key,
            summary.total,
            summary.percentage_text,
            summary.quality.name,
            local_written,
            push_result.status.name,
        )
        return SaveOutcome(
            key=key,
            record=record,
            local_written=local_written,
            remote_synced=push_result.ok,
            push_result=push_result,
            local_error=local_error,
        )

    # --- Export ---

    def default_export_path(self, directory: Path) -> Path:
        return directory / default_export_filename(self.require_teacher())

    def export_report(self, file_path: Path) -> Path:
        teacher = self.require_teacher()
        written = export_to_excel(file_path, teacher, self.roster(), self.class_evaluations())
        logger.info("Exported %s-%s report to %s", teacher.class_level, teacher.room, written)
        return written
