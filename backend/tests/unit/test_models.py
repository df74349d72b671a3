import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from flashmind.models import Flashcard, ReviewState


def test_review_state_defaults():
    state = ReviewState()
    assert state.repetition_count == 0
    assert state.ease_factor == 2.5
    assert state.interval_days == 1
    assert state.last_reviewed_at is None
    assert state.next_review_at is None
    assert state.accuracy_percent is None
    assert state.review_count == 0


def test_corrupt_state_is_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="flashmind.models.review"):
        state = ReviewState(ease_factor=0.9, interval_days=0, repetition_count=-3, accuracy_percent=140)
    assert state.ease_factor == 1.3
    assert state.interval_days == 1
    assert state.repetition_count == 0
    assert state.accuracy_percent == 100.0
    assert "ease_factor" in caplog.text
    assert "interval_days" in caplog.text


def test_state_is_immutable():
    state = ReviewState()
    with pytest.raises(ValidationError):
        state.interval_days = 3


def test_wrong_types_still_rejected():
    with pytest.raises(ValidationError):
        ReviewState(interval_days="soon")


def test_timestamps_parse_iso_strings():
    state = ReviewState(next_review_at="2024-03-02T09:00:00Z")
    assert state.next_review_at == datetime(2024, 3, 2, 9, 0, tzinfo=timezone.utc)


def test_flashcard_exposes_review_fields():
    card = Flashcard(
        id="c1",
        question="What is the powerhouse of the cell?",
        answer="Mitochondria",
        tags=["biology"],
        review={"accuracy_percent": 75, "last_reviewed_at": "2024-02-28T10:00:00+00:00"},
    )
    assert card.accuracy_percent == 75
    assert card.last_reviewed_at == datetime(2024, 2, 28, 10, 0, tzinfo=timezone.utc)
    assert card.next_review_at is None
    assert card.created_at.tzinfo is not None


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_ease_is_reset(bad, caplog):
    with caplog.at_level(logging.WARNING, logger="flashmind.models.review"):
        state = ReviewState(ease_factor=bad)
    assert state.ease_factor == 2.5
    assert "ease_factor" in caplog.text


def test_nan_accuracy_is_discarded():
    state = ReviewState(accuracy_percent=float("nan"))
    assert state.accuracy_percent is None


def test_infinite_accuracy_is_clamped():
    assert ReviewState(accuracy_percent=float("inf")).accuracy_percent == 100.0
