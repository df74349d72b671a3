from __future__ import annotations

import logging
import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

logger = logging.getLogger(__name__)

MIN_EASE_FACTOR = 1.3
DEFAULT_EASE_FACTOR = 2.5


class ReviewState(BaseModel):
    """
    Review history of a single flashcard.

    Instances are immutable; the scheduler returns a new state per graded review.
    Out-of-range numeric fields loaded from storage are clamped on validation
    and logged.
    """

    model_config = ConfigDict(frozen=True)

    repetition_count: int = 0     # consecutive reviews with quality >= 3
    ease_factor: float = DEFAULT_EASE_FACTOR
    interval_days: int = 1
    last_reviewed_at: datetime | None = None
    next_review_at: datetime | None = None  # None = due immediately
    accuracy_percent: float | None = None   # 0–100, prioritisation only
    review_count: int = 0         # lifetime graded reviews

    @field_validator("ease_factor")
    @classmethod
    def _clamp_ease(cls, v: float) -> float:
        if not math.isfinite(v):
            logger.warning("ease_factor %s is not finite, resetting to %s", v, DEFAULT_EASE_FACTOR)
            return DEFAULT_EASE_FACTOR
        if v < MIN_EASE_FACTOR:
            logger.warning("ease_factor %.3f below floor, clamping to %s", v, MIN_EASE_FACTOR)
            return MIN_EASE_FACTOR
        return v

    @field_validator("interval_days")
    @classmethod
    def _clamp_interval(cls, v: int) -> int:
        if v < 1:
            logger.warning("interval_days %d below 1, clamping", v)
            return 1
        return v

    @field_validator("repetition_count", "review_count")
    @classmethod
    def _clamp_count(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            logger.warning("%s %d is negative, clamping to 0", info.field_name, v)
            return 0
        return v

    @field_validator("accuracy_percent")
    @classmethod
    def _clamp_accuracy(cls, v: float | None) -> float | None:
        if v is None:
            return None
        if math.isnan(v):
            logger.warning("accuracy_percent is NaN, discarding")
            return None
        if v < 0.0 or v > 100.0:
            logger.warning("accuracy_percent %.2f outside 0–100, clamping", v)
            return max(0.0, min(100.0, v))
        return v


class ReviewResult(BaseModel):
    state: ReviewState
    interval_days: int
    next_review_at: datetime
