"""
Weekly workout frequency recommendation.

Starts from the user's stated preference and nudges it by one day
based on recent completion rate and feedback.
"""

from .config import (
    BASE_DAYS_PER_WEEK,
    FALLBACK_PREFERENCE,
    FALLBACK_REST_DAYS,
    HIGH_AVERAGE_FEEDBACK,
    HIGH_COMPLETION_RATE,
    LOW_COMPLETION_RATE,
    MAX_DAYS_PER_WEEK,
    MIN_DAYS_PER_WEEK,
    REST_DAY_MESSAGES,
)
from .logger import logger
from .models import FrequencyRecommendation, PerformanceSummary


def base_days(preference: str | None) -> int:
    """Base day count for a preference; unknown preferences use 'flexible'."""
    if preference not in BASE_DAYS_PER_WEEK:
        logger.warning(
            f"Unrecognized workout frequency {preference!r}, using '{FALLBACK_PREFERENCE}'"
        )
        return BASE_DAYS_PER_WEEK[FALLBACK_PREFERENCE]
    return BASE_DAYS_PER_WEEK[preference]


def rest_day_message(days_per_week: int) -> str:
    """Rest-day note for a weekly day count (the 4-day note outside 2..6)."""
    return REST_DAY_MESSAGES.get(days_per_week, REST_DAY_MESSAGES[FALLBACK_REST_DAYS])


def optimize_frequency(
    preference: str | None,
    performance: PerformanceSummary,
) -> FrequencyRecommendation:
    """
    Recommend workout days per week.

    - completion_rate < 0.7: one day fewer (not below 2)
    - completion_rate > 0.9 and average_feedback > 3.5: one day more (not above 6)
    - otherwise: keep the preference's base

    Args:
        preference: daily, three_per_week or flexible
        performance: Recent completion summary

    Returns:
        FrequencyRecommendation with days and rest-day note
    """
    days = base_days(preference)

    if performance.completion_rate < LOW_COMPLETION_RATE:
        days = max(MIN_DAYS_PER_WEEK, days - 1)
    elif (
        performance.completion_rate > HIGH_COMPLETION_RATE
        and performance.average_feedback > HIGH_AVERAGE_FEEDBACK
    ):
        days = min(MAX_DAYS_PER_WEEK, days + 1)

    return FrequencyRecommendation(
        days_per_week=days,
        rest_day_recommendation=rest_day_message(days),
    )
