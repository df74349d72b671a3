"""Deck-level study figures built on the scheduler."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from flashmind.config import Settings
from flashmind.models import Difficulty, Flashcard, StudyStats
from flashmind.services.scheduler import recommend_difficulty, select_due_cards

logger = logging.getLogger(__name__)


def average_accuracy(cards: Sequence[Flashcard]) -> float:
    """Mean accuracy over cards that have one; 0.0 for an unstudied deck."""
    scores = [c.accuracy_percent for c in cards if c.accuracy_percent is not None]
    if not scores:
        return 0.0
    return round(sum(scores) / len(scores), 1)


def recommend_quiz_difficulty(
    cards: Sequence[Flashcard],
    config: Settings | None = None,
) -> Difficulty:
    return recommend_difficulty(average_accuracy(cards), config=config)


def summarize(
    cards: Sequence[Flashcard],
    now: datetime | None = None,
    config: Settings | None = None,
) -> StudyStats:
    """Return total, due, new and studied counts plus average accuracy."""
    new_cards = sum(1 for c in cards if c.last_reviewed_at is None)
    avg = average_accuracy(cards)
    stats = StudyStats(
        total_cards=len(cards),
        due_cards=len(select_due_cards(cards, now)),
        new_cards=new_cards,
        studied_cards=len(cards) - new_cards,
        average_accuracy=avg,
        recommended_difficulty=recommend_difficulty(avg, config=config),
    )
    logger.debug("Deck summary: %s", stats.model_dump())
    return stats
