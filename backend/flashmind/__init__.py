from flashmind.models import (
    Difficulty,
    Flashcard,
    Grade,
    ReviewResult,
    ReviewState,
    StudyStats,
)
from flashmind.services.scheduler import (
    InvalidQualityError,
    SchedulerError,
    build_study_queue,
    compute_next_review,
    new_review_state,
    prioritize,
    quality_from_answer,
    quality_from_grade,
    recommend_difficulty,
    record_accuracy,
    review_card,
    select_due_cards,
)
from flashmind.services.stats import average_accuracy, recommend_quiz_difficulty, summarize

__version__ = "0.1.0"

__all__ = [
    "Difficulty",
    "Flashcard",
    "Grade",
    "InvalidQualityError",
    "ReviewResult",
    "ReviewState",
    "SchedulerError",
    "StudyStats",
    "average_accuracy",
    "build_study_queue",
    "compute_next_review",
    "new_review_state",
    "prioritize",
    "quality_from_answer",
    "quality_from_grade",
    "recommend_difficulty",
    "recommend_quiz_difficulty",
    "record_accuracy",
    "review_card",
    "select_due_cards",
    "summarize",
]
