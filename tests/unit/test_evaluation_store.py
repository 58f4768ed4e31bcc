"""
Unit tests for lifeskills_app/core/services/evaluation_store.py.

Files are written under pytest's tmp_path; no home-directory state is touched.
"""

import json
from unittest.mock import patch

import pytest

from conftest import make_record
from lifeskills_app.core.models import EvaluationKey
from lifeskills_app.core.services.evaluation_store import EvaluationStore, EvaluationStoreError


KEY = EvaluationKey("ม.4", "A", 5)


class TestLoad:
    def test_missing_file_yields_empty_cache(self, store):
        assert store.load() == {}
        assert store.get_all() == {}

    def test_corrupt_file_yields_empty_cache(self, cache_path):
        cache_path.parent.mkdir(parents=True)
        cache_path.write_text("{not json", encoding="utf-8")
        assert EvaluationStore(cache_path).load() == {}

    def test_non_object_top_level_yields_empty_cache(self, cache_path):
        cache_path.parent.mkdir(parents=True)
        cache_path.write_text("[1, 2, 3]", encoding="utf-8")
        assert EvaluationStore(cache_path).load() == {}

    def test_skips_malformed_entries_and_keeps_the_rest(self, cache_path):
        cache_path.parent.mkdir(parents=True)
        cache_path.write_text(
            json.dumps(
                {
                    "ม.4-A-1": {"studentId": 1, "scores": {"1": 3}},
                    "bad-key": {"studentId": 2},
                    "ม.4-A-3": {"studentId": 3, "scores": {"1": 9}},
                }
            ),
            encoding="utf-8",
        )
        loaded = EvaluationStore(cache_path).load()
        assert list(loaded) == [EvaluationKey("ม.4", "A", 1)]


class TestPut:
    def test_written_record_survives_reload(self, store, cache_path):
        record = make_record(5)
        store.put(KEY, record)

        reloaded = EvaluationStore(cache_path)
        assert reloaded.load() == {KEY: record}
        assert reloaded.get(KEY) == record

    def test_file_uses_storage_keys_and_keeps_thai_text(self, store, cache_path):
        store.put(KEY, make_record(5))
        text = cache_path.read_text(encoding="utf-8")
        document = json.loads(text)
        assert list(document) == ["ม.4-A-5"]
        assert document["ม.4-A-5"]["studentId"] == 5
        assert "สุภาพร" in text

    def test_overwrites_existing_key(self, store):
        store.put(KEY, make_record(5, total=10))
        newer = make_record(5, total=80)
        store.put(KEY, newer)
        assert store.get_all() == {KEY: newer}

    def test_leaves_no_temporary_files(self, store, cache_path):
        store.put(KEY, make_record(5))
        assert [p.name for p in cache_path.parent.iterdir()] == [cache_path.name]

    def test_write_failure_raises_and_keeps_previous_state(self, store, cache_path):
        original = make_record(5, total=10)
        store.put(KEY, original)

        with patch(
            "lifeskills_app.core.services.evaluation_store.os.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(EvaluationStoreError):
                store.put(KEY, make_record(5, total=80))

        assert store.get(KEY) == original
        assert EvaluationStore(cache_path).load() == {KEY: original}
        assert [p.name for p in cache_path.parent.iterdir()] == [cache_path.name]


class TestReplaceAll:
    def test_replaces_whole_collection(self, store):
        store.put(KEY, make_record(5))
        other = EvaluationKey("ม.5", "A", 3)
        store.replace_all({other: make_record(3)})
        assert list(store.get_all()) == [other]

    def test_get_all_returns_a_copy(self, store):
        store.put(KEY, make_record(5))
        snapshot = store.get_all()
        snapshot.clear()
        assert store.get(KEY) is not None
