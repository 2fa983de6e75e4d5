"""
Data models for otter-coach.

Value objects consumed and produced by the adaptive difficulty engine.
None of them are persisted here; the service layer owns storage.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from .config import HISTORY_LIMIT, TIER_MODIFIERS, TREND_WEIGHTS

FeedbackType = Literal["too_easy", "just_right", "bit_too_hard", "way_too_hard"]
UserTier = Literal["beginner", "casual", "fit", "athlete"]
WorkoutFrequency = Literal["daily", "three_per_week", "flexible"]
Trend = Literal["easier", "harder", "stable"]

FEEDBACK_TYPES: tuple[str, ...] = tuple(TREND_WEIGHTS)
USER_TIERS: tuple[str, ...] = tuple(TIER_MODIFIERS)
HARD_FEEDBACK: frozenset[str] = frozenset({"bit_too_hard", "way_too_hard"})


class InvalidFeedbackError(ValueError):
    """Raised when a feedback value is not one of the four categories."""

    pass


class InvalidTierError(ValueError):
    """Raised when a user tier is not one of the known tiers."""

    pass


def validate_feedback(feedback: str) -> FeedbackType:
    """
    Validate a feedback category.

    Args:
        feedback: Feedback string to validate

    Returns:
        Validated feedback

    Raises:
        InvalidFeedbackError: If feedback is not a recognized category
    """
    if feedback not in FEEDBACK_TYPES:
        raise InvalidFeedbackError(
            f"invalid feedback category: {feedback!r}. Must be one of {FEEDBACK_TYPES}"
        )
    return feedback  # type: ignore


def validate_tier(tier: str | None) -> UserTier | None:
    """Validate a user tier; None (tier unknown) passes through."""
    if tier is None:
        return None
    if tier not in USER_TIERS:
        raise InvalidTierError(f"invalid user tier: {tier!r}. Must be one of {USER_TIERS}")
    return tier  # type: ignore


def recent_window(
    history: Iterable[str], limit: int = HISTORY_LIMIT
) -> tuple[FeedbackType, ...]:
    """
    Return the trailing ``limit`` entries of a feedback history, validated.

    Args:
        history: Chronological feedback, oldest first
        limit: Maximum entries to keep

    Returns:
        Tuple of at most ``limit`` entries, order preserved

    Raises:
        InvalidFeedbackError: If any retained entry is not a recognized category
    """
    entries = list(history)[-limit:] if limit > 0 else []
    return tuple(validate_feedback(f) for f in entries)


def push_feedback(
    history: Sequence[str], feedback: str, limit: int = HISTORY_LIMIT
) -> tuple[FeedbackType, ...]:
    """
    Append a feedback event to the sliding window.

    The input is not modified; the oldest entries beyond ``limit`` are dropped.
    """
    return recent_window([*history, validate_feedback(feedback)], limit)


@dataclass(frozen=True)
class Recommendation:
    """Coaching decision attached to a difficulty update."""

    adjust_difficulty: bool
    adjust_volume: bool
    adjust_rest: bool
    message: str

    def __post_init__(self) -> None:
        if not self.message or not self.message.strip():
            raise ValueError("message must be a non-empty string")


@dataclass(frozen=True)
class AdaptiveSettings:
    """New difficulty level plus the recommendation explaining it."""

    difficulty_level: float
    recommendation: Recommendation


@dataclass(frozen=True)
class PatternMetrics:
    """
    Streak and trend metrics over the recent feedback window.

    Streak counts scan backward from the most recent entry.
    """

    consistent_easy: int
    consistent_hard: int
    stable: int
    trending: Trend


@dataclass(frozen=True)
class PerformanceSummary:
    """Recent completion performance supplied by the analytics layer."""

    completion_rate: float  # fraction of planned workouts completed, 0..1
    average_feedback: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.completion_rate <= 1.0:
            raise ValueError("completion_rate must be between 0 and 1")


@dataclass(frozen=True)
class FrequencyRecommendation:
    """Recommended weekly cadence with a rest-day note."""

    days_per_week: int
    rest_day_recommendation: str


@dataclass
class UserProfile:
    """
    Projection of the user record that the engine reads.

    current_difficulty_level is None before onboarding has stored a level;
    last_workout_feedback is None until the first feedback is given.
    """

    current_difficulty_level: float | None = None
    fitness_level: UserTier | None = None
    workout_frequency: str | None = None
    last_workout_feedback: FeedbackType | None = None

    def __post_init__(self) -> None:
        """Validate profile data."""
        if self.current_difficulty_level is not None and self.current_difficulty_level < 0:
            raise ValueError("current_difficulty_level must be non-negative")
        validate_tier(self.fitness_level)
        if self.last_workout_feedback is not None:
            validate_feedback(self.last_workout_feedback)
