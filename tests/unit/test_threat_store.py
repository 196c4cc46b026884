from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from storage.threatdb import ThreatRecord, ThreatStore

URL = "https://example.com/"


def test_get_absent_returns_none():
    store = ThreatStore()
    assert store.get(URL) is None
    assert len(store) == 0


def test_get_returns_copy_not_owned_record():
    store = ThreatStore()
    store.put(URL, ThreatRecord(score=40))
    first = store.get(URL)
    first.score = 99
    assert store.get(URL).score == 40


def test_put_overwrites_wholesale():
    store = ThreatStore()
    store.put(URL, ThreatRecord(score=40, feedback_count=2, positive_count=1, negative_count=1))
    store.put(URL, ThreatRecord(score=60))
    assert store.get(URL) == ThreatRecord(score=60)
    assert len(store) == 1


def test_mutate_absent_key_is_noop():
    store = ThreatStore()
    calls = []
    assert store.mutate(URL, calls.append) is False
    assert calls == []
    assert URL not in store


def test_mutate_commits_changes():
    store = ThreatStore()
    store.put(URL, ThreatRecord(score=40))

    def _bump(record):
        record.score = 45

    assert store.mutate(URL, _bump) is True
    assert store.get(URL).score == 45


def test_insert_if_absent_keeps_existing_record():
    store = ThreatStore()
    store.put(URL, ThreatRecord(score=70, feedback_count=1, positive_count=1))
    stored = store.insert_if_absent(URL, ThreatRecord(score=10))
    assert stored.score == 70
    assert store.get(URL).feedback_count == 1


def test_records_returns_independent_snapshot():
    store = ThreatStore()
    store.put("https://a.example/", ThreatRecord(score=10))
    store.put("https://b.example/", ThreatRecord(score=90))
    snapshot = store.records()
    snapshot["https://a.example/"].score = 55
    assert set(snapshot) == {"https://a.example/", "https://b.example/"}
    assert store.get("https://a.example/").score == 10
    assert sorted(store) == ["https://a.example/", "https://b.example/"]


def test_invalid_records_are_rejected():
    with pytest.raises(ValueError):
        ThreatRecord(score=101)
    with pytest.raises(ValueError):
        ThreatRecord(score=50, feedback_count=2, positive_count=1, negative_count=0)
    with pytest.raises(ValueError):
        ThreatRecord(score=50, feedback_count=-1, positive_count=0, negative_count=-1)


def test_concurrent_mutations_on_one_key_are_not_lost():
    store = ThreatStore()
    store.put(URL, ThreatRecord(score=50))

    def _count(record):
        record.feedback_count += 1
        record.positive_count += 1

    def _worker(_):
        for _ in range(250):
            store.mutate(URL, _count)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_worker, range(8)))

    record = store.get(URL)
    assert record.feedback_count == 2000
    assert record.positive_count == 2000


def test_record_round_trips_through_dict():
    record = ThreatRecord(score=33, feedback_count=3, positive_count=2, negative_count=1)
    assert ThreatRecord.from_dict(record.to_dict()) == record
