from datetime import datetime, timedelta, timezone

import pytest

from flashmind.config import Settings
from flashmind.models import Flashcard, ReviewState


@pytest.fixture
def now():
    return datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def config():
    # Pinned to defaults so FLASHMIND_* variables in the environment can't leak in
    return Settings(
        default_ease_factor=2.5,
        max_interval_days=None,
        easy_accuracy_threshold=90.0,
        medium_accuracy_threshold=70.0,
        default_queue_limit=20,
    )


@pytest.fixture
def make_card(now):
    counter = {"n": 0}

    def _make(
        card_id=None,
        *,
        reviewed_days_ago=None,
        due_in_days=None,
        accuracy=None,
        **state_fields,
    ):
        counter["n"] += 1
        last = now - timedelta(days=reviewed_days_ago) if reviewed_days_ago is not None else None
        nxt = now + timedelta(days=due_in_days) if due_in_days is not None else None
        state = ReviewState(
            last_reviewed_at=last,
            next_review_at=nxt,
            accuracy_percent=accuracy,
            **state_fields,
        )
        return Flashcard(
            id=card_id or f"card-{counter['n']}",
            question=f"Question {counter['n']}?",
            answer=f"Answer {counter['n']}",
            review=state,
        )

    return _make
