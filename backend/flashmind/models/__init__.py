from flashmind.models.flashcard import Difficulty, Flashcard, Grade, StudyStats
from flashmind.models.review import (
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    ReviewResult,
    ReviewState,
)

__all__ = [
    "DEFAULT_EASE_FACTOR",
    "Difficulty",
    "Flashcard",
    "Grade",
    "MIN_EASE_FACTOR",
    "ReviewResult",
    "ReviewState",
    "StudyStats",
]
