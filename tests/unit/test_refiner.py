from __future__ import annotations

from core.feedback.refiner import FeedbackRefiner, FeedbackVerdict
from storage.threatdb import ThreatRecord


def test_counts_verdicts_without_nudging_below_minimum():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=80)
    refiner.apply(record, FeedbackVerdict.negative)
    outcome = refiner.apply(record, FeedbackVerdict.negative)
    assert record.feedback_count == 2
    assert record.negative_count == 2
    assert record.score == 80
    assert outcome.nudged is False


def test_third_dispute_pulls_high_score_down():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=80)
    for _ in range(3):
        outcome = refiner.apply(record, FeedbackVerdict.negative)
    assert (record.feedback_count, record.positive_count, record.negative_count) == (3, 0, 3)
    assert record.score == 70
    assert outcome.previous_score == 80
    assert outcome.accuracy_ratio == 0.0
    assert outcome.nudged is True


def test_low_score_is_pushed_up():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=20)
    for _ in range(3):
        refiner.apply(record, "negative")
    assert record.score == 30


def test_mixed_feedback_below_threshold_still_nudges():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=90)
    refiner.apply(record, FeedbackVerdict.positive)
    refiner.apply(record, FeedbackVerdict.positive)
    refiner.apply(record, FeedbackVerdict.negative)
    # 2/3 agreement is below 0.7
    assert record.score == 80


def test_agreeing_feedback_leaves_score_alone():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=90)
    for _ in range(5):
        refiner.apply(record, FeedbackVerdict.positive)
    assert record.score == 90
    assert record.feedback_count == 5


def test_repeated_disputes_keep_nudging_and_can_oscillate():
    refiner = FeedbackRefiner()
    record = ThreatRecord(score=50)
    scores = []
    for _ in range(6):
        refiner.apply(record, FeedbackVerdict.negative)
        scores.append(record.score)
    # 50 is not above the pivot so it moves up first, then back down.
    assert scores == [50, 50, 60, 50, 60, 50]
    assert record.positive_count + record.negative_count == record.feedback_count


def test_nudge_respects_floor_and_ceiling():
    refiner = FeedbackRefiner({"step": 40})
    assert refiner.nudge(60) == 30
    assert refiner.nudge(51) == 30
    assert refiner.nudge(40) == 70
    assert refiner.nudge(0) == 40


def test_is_disputed_uses_configured_thresholds():
    refiner = FeedbackRefiner({"accuracy_threshold": 0.5, "min_feedback": 2})
    assert refiner.is_disputed(ThreatRecord(score=60, feedback_count=2, positive_count=0, negative_count=2))
    assert not refiner.is_disputed(ThreatRecord(score=60, feedback_count=2, positive_count=1, negative_count=1))
    assert not refiner.is_disputed(ThreatRecord(score=60, feedback_count=1, positive_count=0, negative_count=1))
