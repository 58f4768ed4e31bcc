"""
Unit tests for lifeskills_app/core/evaluation_session.py.

The sheet client is a MagicMock; the cache is a real store on tmp_path.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from conftest import make_record, make_scores, student_of
from lifeskills_app.core.evaluation_session import (
    EvaluationSession,
    IncompleteEvaluationError,
    InvalidScoresError,
    LoginError,
    NotLoggedInError,
)
from lifeskills_app.core.models import EvaluationKey, QualityLevel
from lifeskills_app.core.services.evaluation_store import EvaluationStore, EvaluationStoreError
from lifeskills_app.core.services.sheet_sync import PullResult, PushResult, SyncStatus


@pytest.fixture
def sync_client():
    client = MagicMock()
    client.pull.return_value = PullResult(SyncStatus.SUCCESS, records={})
    client.push.return_value = PushResult(SyncStatus.SUCCESS)
    return client


@pytest.fixture
def session(store, sync_client, roster):
    return EvaluationSession(store=store, sync_client=sync_client, roster=roster)


class TestLogin:
    def test_login_binds_teacher_and_reconciles(self, session, sync_client, store):
        sync_client.pull.return_value = PullResult(SyncStatus.SUCCESS, records={3: make_record(3)})

        result = session.login("teacherm5a", "teacherm5a")

        assert result.teacher.class_level == "ม.5"
        assert session.current_teacher == result.teacher
        assert result.reconciliation.applied
        assert EvaluationKey("ม.5", "A", 3) in store.get_all()

    def test_bad_credentials_raise_without_pulling(self, session, sync_client):
        with pytest.raises(LoginError):
            session.login("teacherm4a", "wrong")
        sync_client.pull.assert_not_called()
        assert session.current_teacher is None

    def test_remote_unavailable_keeps_cache(self, session, sync_client, store):
        key = EvaluationKey("ม.4", "A", 2)
        store.put(key, make_record(2))
        sync_client.pull.return_value = PullResult(SyncStatus.TRANSPORT_ERROR, detail="offline")

        result = session.login("teacherm4a", "teacherm4a")

        assert not result.reconciliation.applied
        assert store.get_all() == {key: make_record(2)}

    def test_cache_write_failure_during_login_is_not_fatal(self, session, sync_client, store):
        sync_client.pull.return_value = PullResult(SyncStatus.SUCCESS, records={3: make_record(3)})
        with patch.object(store, "replace_all", side_effect=EvaluationStoreError("read-only")):
            result = session.login("teacherm4a", "teacherm4a")
        assert not result.reconciliation.applied
        assert session.current_teacher is not None

    def test_logout_clears_teacher(self, session):
        session.login("teacherm4a", "teacherm4a")
        session.logout()
        with pytest.raises(NotLoggedInError):
            session.roster()


class TestBuildRecord:
    def test_date_is_utc_iso_with_milliseconds(self, session, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        student = student_of(roster, teacher, 1)
        now = datetime(2024, 6, 1, 3, 15, 0, 123000, tzinfo=timezone.utc)

        record = session.build_record(student, make_scores(45), "  ดี  ", "", now=now)

        assert record.date == "2024-06-01T03:15:00.123Z"
        assert record.evaluator_name == teacher.name
        assert record.strengths == "ดี"
        assert record.comments is None

    def test_requires_all_thirty_items(self, session, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        del scores[30]
        with pytest.raises(IncompleteEvaluationError) as excinfo:
            session.build_record(student_of(roster, teacher, 1), scores)
        assert excinfo.value.answered == 29
        assert excinfo.value.required == 30

    def test_stray_question_id_does_not_stand_in_for_a_missing_one(self, session, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        del scores[30]
        scores[31] = 3
        with pytest.raises(IncompleteEvaluationError) as excinfo:
            session.build_record(student_of(roster, teacher, 5), scores)
        assert excinfo.value.answered == 29

    def test_unknown_question_id_on_complete_form_is_rejected(self, session, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        scores[31] = 3
        with pytest.raises(InvalidScoresError):
            session.build_record(student_of(roster, teacher, 5), scores)

    @pytest.mark.parametrize("bad_score", [5, -1])
    def test_out_of_range_score_is_rejected(self, session, roster, bad_score):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        scores[1] = bad_score
        with pytest.raises(InvalidScoresError):
            session.build_record(student_of(roster, teacher, 5), scores)


class TestSaveEvaluation:
    def test_teacher_m4a_saves_student_five(self, session, sync_client, store, cache_path, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        student = student_of(roster, teacher, 5)

        outcome = session.save_evaluation(student, make_scores(68), "มีความรับผิดชอบ", "")

        assert outcome.local_written
        assert outcome.remote_synced
        assert outcome.key.storage_key == "ม.4-A-5"
        stored = EvaluationStore(cache_path).load()[outcome.key]
        assert stored.scores == make_scores(68)
        sync_client.push.assert_called_once_with(student, teacher, outcome.record)

        evaluations = session.class_evaluations()
        assert list(evaluations) == [5]
        assert session.progress() == (1, 10)

    def test_incomplete_form_writes_nothing(self, session, sync_client, store, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        with pytest.raises(IncompleteEvaluationError):
            session.save_evaluation(student_of(roster, teacher, 5), {1: 3, 2: 3})
        assert store.get_all() == {}
        sync_client.push.assert_not_called()

    def test_missing_item_with_stray_id_writes_nothing(self, session, sync_client, store, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        del scores[30]
        scores[31] = 3
        with pytest.raises(IncompleteEvaluationError):
            session.save_evaluation(student_of(roster, teacher, 5), scores)
        assert store.get_all() == {}
        sync_client.push.assert_not_called()

    def test_invalid_score_writes_nothing(self, session, sync_client, store, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        scores = make_scores(45)
        scores[1] = 5
        with pytest.raises(InvalidScoresError):
            session.save_evaluation(student_of(roster, teacher, 5), scores)
        assert store.get_all() == {}
        sync_client.push.assert_not_called()

    def test_remote_failure_keeps_local_write(self, session, sync_client, store, roster):
        sync_client.push.return_value = PushResult(SyncStatus.TRANSPORT_ERROR, "offline")
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        student = student_of(roster, teacher, 5)

        outcome = session.save_evaluation(student, make_scores(68))

        assert outcome.local_written
        assert not outcome.remote_synced
        assert store.get(outcome.key) == outcome.record

    def test_local_failure_still_attempts_push(self, session, sync_client, store, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        student = student_of(roster, teacher, 5)

        with patch.object(store, "put", side_effect=EvaluationStoreError("disk full")):
            outcome = session.save_evaluation(student, make_scores(68))

        assert not outcome.local_written
        assert "disk full" in outcome.local_error
        sync_client.push.assert_called_once()

    def test_resave_overwrites(self, session, store, roster):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        student = student_of(roster, teacher, 5)
        session.save_evaluation(student, make_scores(20))
        outcome = session.save_evaluation(student, make_scores(80))
        assert len(store.get_all()) == 1
        assert session.evaluation_for(student).scores == make_scores(80)
        assert outcome.push_result.ok

    def test_saved_record_summarizes_as_excellent(self, session, roster):
        from lifeskills_app.core import score_aggregator

        teacher = session.login("teacherm4a", "teacherm4a").teacher
        outcome = session.save_evaluation(student_of(roster, teacher, 5), make_scores(68))
        summary = score_aggregator.summarize(outcome.record.scores)
        assert summary.percentage_text == "75.56"
        assert summary.quality is QualityLevel.EXCELLENT


class TestExport:
    def test_default_path_uses_class_and_room(self, session, tmp_path):
        session.login("teacherm4a", "teacherm4a")
        path = session.default_export_path(tmp_path)
        assert path == tmp_path / "LifeSkills_Evaluation_ม.4A.xlsx"

    def test_export_writes_workbook(self, session, roster, tmp_path):
        teacher = session.login("teacherm4a", "teacherm4a").teacher
        session.save_evaluation(student_of(roster, teacher, 5), make_scores(68))

        written = session.export_report(tmp_path / "out" / "report.xlsx")

        assert written.exists()

    def test_export_requires_login(self, session, tmp_path):
        with pytest.raises(NotLoggedInError):
            session.export_report(tmp_path / "report.xlsx")
