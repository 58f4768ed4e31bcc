"""Service for the durable local cache of evaluation records."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from lifeskills_app.core.models import EvaluationCollection, EvaluationKey, EvaluationRecord
from lifeskills_app.core.record_schema import record_from_json, record_to_json

logger = logging.getLogger(__name__)


class EvaluationStoreError(Exception):
    """Raised when the cache file cannot be written."""


class EvaluationStore:
    """Write-through cache of evaluation records backed by one JSON file.

    The whole collection is rewritten on every change. The in-memory view is
    only updated after the file has been replaced, so a failed write leaves
    both views on the previous state.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._records: EvaluationCollection = {}

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> EvaluationCollection:
        """Hydrate from disk; a missing or unreadable file yields an empty cache."""
        self._records = self._read_file()
        return dict(self._records)

    def get_all(self) -> EvaluationCollection:
        return dict(self._records)

    def get(self, key: EvaluationKey) -> EvaluationRecord | None:
        return self._records.get(key)

    def put(self, key: EvaluationKey, record: EvaluationRecord) -> None:
        updated = dict(self._records)
        updated[key] = record
        self._persist(updated)
        self._records = updated

    def replace_all(self, records: EvaluationCollection) -> None:
        updated = dict(records)
        self._persist(updated)
        self._records = updated

    def _read_file(self) -> EvaluationCollection:
        if not self._file_path.exists():
            return {}

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable evaluation cache %s: %s", self._file_path, exc)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Ignoring evaluation cache %s: top level is not an object", self._file_path)
            return {}

        records: EvaluationCollection = {}
        for raw_key, raw_record in raw.items():
            try:
                key = EvaluationKey.parse(raw_key)
                records[key] = record_from_json(raw_record)
            except (ValueError, ValidationError) as exc:
                logger.warning("Skipping cached evaluation %r: %s", raw_key, exc)
        return records

    def _persist(self, records: EvaluationCollection) -> None:
        document = {key.storage_key: record_to_json(record) for key, record in records.items()}
        payload = json.dumps(document, ensure_ascii=False, indent=2)

        target = self._file_path.resolve()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise EvaluationStoreError(f"Could not write evaluation cache {target}: {exc}") from exc
