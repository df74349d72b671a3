"""
Spaced-repetition scheduler (SM-2 variant).

Pure functions over ReviewState / Flashcard records:
  compute_next_review  — apply one graded review, return the new state
  select_due_cards     — stable filter of cards whose review time has arrived
  prioritize           — order cards for presentation
  recommend_difficulty — advisory easy/medium/hard tier from accuracy

Nothing here performs I/O or reads the clock unless `now` is omitted.
Callers load states, pass `now`, and persist what comes back.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from flashmind.config import Settings, settings
from flashmind.models import (
    MIN_EASE_FACTOR,
    Difficulty,
    Flashcard,
    Grade,
    ReviewResult,
    ReviewState,
)

logger = logging.getLogger(__name__)

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

# Grade buttons -> SM-2 quality (0–5)
_GRADE_QUALITY = {
    Grade.AGAIN: 0,
    Grade.HARD: 2,
    Grade.GOOD: 4,
    Grade.EASY: 5,
}
_KNOWN_QUALITY = 4
_UNKNOWN_QUALITY = 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


class SchedulerError(Exception):
    """Base class for scheduler errors."""


class InvalidQualityError(SchedulerError, ValueError):
    """Raised when a review quality is not an integer in 0–5."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(ts: datetime) -> datetime:
    """Naive timestamps are treated as UTC so they compare with aware ones."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _max_interval_from(now: datetime) -> int:
    """Longest interval whose due date is still representable as a datetime."""
    return (_LATEST - now).days


def validate_quality(quality: int) -> int:
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(f"quality must be an integer, got {quality!r}")
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidQualityError(
            f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )
    return quality


def next_ease_factor(ease_factor: float, quality: int) -> float:
    """EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)), floored at 1.3."""
    miss = MAX_QUALITY - quality
    updated = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(updated, MIN_EASE_FACTOR)


def new_review_state(config: Settings | None = None) -> ReviewState:
    cfg = config or settings
    return ReviewState(ease_factor=cfg.default_ease_factor)


def compute_next_review(
    state: ReviewState,
    quality: int,
    now: datetime | None = None,
    config: Settings | None = None,
) -> ReviewResult:
    """
    Apply one graded review to `state`.

    On success (quality >= 3) the interval goes 1 -> 6 -> round(interval * EF),
    using the ease factor from before this review. On a lapse the repetition
    count resets and the card comes back tomorrow. The ease factor is updated
    in both cases.
    """
    validate_quality(quality)
    cfg = config or settings
    now = _as_utc(now) if now is not None else _utcnow()

    if quality >= PASSING_QUALITY:
        if state.repetition_count == 0:
            interval = 1
        elif state.repetition_count == 1:
            interval = 6
        else:
            grown = state.interval_days * state.ease_factor
            latest = _max_interval_from(now)
            if grown > latest:
                logger.warning("interval %.0f days runs past the calendar, bounding to %d", grown, latest)
                grown = latest
            interval = _round_half_up(grown)
        repetitions = state.repetition_count + 1
    else:
        repetitions = 0
        interval = 1

    ease = next_ease_factor(state.ease_factor, quality)

    if cfg.max_interval_days is not None:
        interval = min(interval, cfg.max_interval_days)
    interval = max(min(interval, _max_interval_from(now)), 1)

    next_review_at = now + timedelta(days=interval)
    updated = state.model_copy(
        update={
            "repetition_count": repetitions,
            "ease_factor": ease,
            "interval_days": interval,
            "last_reviewed_at": now,
            "next_review_at": next_review_at,
        }
    )
    logger.debug(
        "SM-2 review q=%d: reps %d->%d interval %d->%d ease %.3f->%.3f",
        quality,
        state.repetition_count,
        repetitions,
        state.interval_days,
        interval,
        state.ease_factor,
        ease,
    )
    return ReviewResult(state=updated, interval_days=interval, next_review_at=next_review_at)


def quality_from_grade(grade: Grade | str) -> int:
    try:
        return _GRADE_QUALITY[Grade(grade)]
    except ValueError:
        raise InvalidQualityError(f"unknown grade {grade!r}") from None


def quality_from_answer(is_correct: bool) -> int:
    """Map a known / need-more-review answer to a quality."""
    return _KNOWN_QUALITY if is_correct else _UNKNOWN_QUALITY


def record_accuracy(state: ReviewState, quality: int) -> ReviewState:
    """Fold one review into the running accuracy; quality >= 3 counts as correct."""
    validate_quality(quality)
    hit = 100.0 if quality >= PASSING_QUALITY else 0.0
    seen = state.review_count
    if seen == 0 or state.accuracy_percent is None:
        accuracy = hit
    else:
        accuracy = (state.accuracy_percent * seen + hit) / (seen + 1)
    return state.model_copy(
        update={"review_count": seen + 1, "accuracy_percent": round(accuracy, 2)}
    )


def review_card(
    card: Flashcard,
    quality: int,
    now: datetime | None = None,
    config: Settings | None = None,
) -> Flashcard:
    """Schedule `card` after a graded review and update its accuracy."""
    result = compute_next_review(card.review, quality, now=now, config=config)
    state = record_accuracy(result.state, quality)
    return card.model_copy(update={"review": state})


def is_due(card: Flashcard, now: datetime) -> bool:
    if card.next_review_at is None:
        return True
    return _as_utc(card.next_review_at) <= _as_utc(now)


def select_due_cards(cards: Iterable[Flashcard], now: datetime | None = None) -> list[Flashcard]:
    now = now if now is not None else _utcnow()
    return [card for card in cards if is_due(card, now)]


def _priority_key(card: Flashcard) -> tuple[bool, float, datetime]:
    last = card.last_reviewed_at
    return (
        last is not None,
        card.accuracy_percent or 0.0,
        _as_utc(last) if last is not None else _EPOCH,
    )


def prioritize(cards: Iterable[Flashcard]) -> list[Flashcard]:
    """
    Order cards for study: never-studied first, then lowest accuracy,
    then least recently reviewed. Ties keep their input order.
    """
    return sorted(cards, key=_priority_key)


def build_study_queue(
    cards: Sequence[Flashcard],
    now: datetime | None = None,
    limit: int | None = None,
    config: Settings | None = None,
) -> list[Flashcard]:
    cfg = config or settings
    if limit is None:
        limit = cfg.default_queue_limit
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    queue = prioritize(select_due_cards(cards, now))
    logger.debug("Study queue: %d due of %d cards (limit %s)", len(queue), len(cards), limit)
    return queue[:limit] if limit else queue


def recommend_difficulty(
    accuracy_percent: float | None,
    config: Settings | None = None,
) -> Difficulty:
    cfg = config or settings
    accuracy = accuracy_percent or 0.0
    if accuracy >= cfg.easy_accuracy_threshold:
        return Difficulty.EASY
    if accuracy >= cfg.medium_accuracy_threshold:
        return Difficulty.MEDIUM
    return Difficulty.HARD
