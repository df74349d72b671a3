from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from flashmind.models.review import ReviewState


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Grade(str, Enum):
    """Four-button rating shown after a card is revealed."""

    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    answer: str
    difficulty: Difficulty | None = None
    tags: list[str] = Field(default_factory=list)
    set_id: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    review: ReviewState = Field(default_factory=ReviewState)

    @property
    def next_review_at(self) -> datetime | None:
        return self.review.next_review_at

    @property
    def last_reviewed_at(self) -> datetime | None:
        return self.review.last_reviewed_at

    @property
    def accuracy_percent(self) -> float | None:
        return self.review.accuracy_percent


class StudyStats(BaseModel):
    total_cards: int
    due_cards: int
    new_cards: int          # never reviewed
    studied_cards: int
    average_accuracy: float
    recommended_difficulty: Difficulty
