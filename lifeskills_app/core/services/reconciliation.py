"""Merge of a remote sheet pull into the local evaluation cache."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from lifeskills_app.core.models import EvaluationCollection, EvaluationKey, EvaluationRecord, Teacher
from lifeskills_app.core.services.evaluation_store import EvaluationStore
from lifeskills_app.core.services.sheet_sync import PullResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationReport:
    applied: bool
    added: list[EvaluationKey] = field(default_factory=list)
    overwritten: list[EvaluationKey] = field(default_factory=list)


def merge_remote_records(
    local: Mapping[EvaluationKey, EvaluationRecord],
    remote: Mapping[int, EvaluationRecord],
    teacher: Teacher,
) -> EvaluationCollection:
    """Return ``local`` updated with ``remote``; remote wins on key collision.

    Remote records are keyed under the teacher's current class level and room,
    since a sheet only ever holds one class. Local keys are never dropped.
    """
    merged: EvaluationCollection = dict(local)
    for record in remote.values():
        merged[EvaluationKey.for_student(teacher, record.student_id)] = record
    return merged


def reconcile_on_login(
    store: EvaluationStore,
    pull_result: PullResult,
    teacher: Teacher,
) -> ReconciliationReport:
    """Apply a pull to the store; an absent pull leaves the store untouched."""
    if pull_result.records is None:
        logger.info(
            "No remote evaluations for %s-%s (%s); keeping local cache",
            teacher.class_level,
            teacher.room,
            pull_result.status.name,
        )
        return ReconciliationReport(applied=False)

    local = store.get_all()
    merged = merge_remote_records(local, pull_result.records, teacher)

    report = ReconciliationReport(applied=True)
    for key, record in merged.items():
        if key not in local:
            report.added.append(key)
        elif local[key] != record:
            report.overwritten.append(key)

    store.replace_all(merged)
    logger.info(
        "Reconciled %s-%s: %d added, %d overwritten",
        teacher.class_level,
        teacher.room,
        len(report.added),
        len(report.overwritten),
    )
    return report
