"""
JSON serialization for engine value objects.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import json
from typing import Any

from ..core.models import (
    AdaptiveSettings,
    FeedbackType,
    FrequencyRecommendation,
    PatternMetrics,
    PerformanceSummary,
    Recommendation,
    UserProfile,
    validate_feedback,
    validate_tier,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValidationError(f"Missing required field: {key}")
    return data[key]


def _require_bool(data: dict[str, Any], key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise ValidationError(f"{key} must be a boolean, got {value!r}")
    return value


def _require_number(data: dict[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number, got {value!r}")
    return float(value)


def parse_feedback_history(raw: str | list[str] | None) -> list[FeedbackType]:
    """
    Parse a feedback history.

    Accepts a list of categories or a comma-separated string
    ("too_easy,just_right"), oldest first.  Blank items are skipped.

    Args:
        raw: History to parse

    Returns:
        List of validated feedback categories

    Raises:
        ValidationError: If an item is not a recognized category
    """
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else list(raw)

    history: list[FeedbackType] = []
    for item in items:
        if not isinstance(item, str):
            raise ValidationError(f"Feedback entries must be strings, got {item!r}")
        item = item.strip()
        if not item:
            continue
        try:
            history.append(validate_feedback(item))
        except ValueError as e:
            raise ValidationError(str(e)) from e
    return history


def recommendation_to_dict(recommendation: Recommendation) -> dict[str, Any]:
    """Convert Recommendation to JSON-compatible dict."""
    return {
        "adjust_difficulty": recommendation.adjust_difficulty,
        "adjust_volume": recommendation.adjust_volume,
        "adjust_rest": recommendation.adjust_rest,
        "message": recommendation.message,
    }


def dict_to_recommendation(data: dict[str, Any]) -> Recommendation:
    """
    Convert dict to Recommendation.

    Raises:
        ValidationError: If a field is missing or has the wrong type
    """
    message = _require(data, "message")
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("message must be a non-empty string")

    return Recommendation(
        adjust_difficulty=_require_bool(data, "adjust_difficulty"),
        adjust_volume=_require_bool(data, "adjust_volume"),
        adjust_rest=_require_bool(data, "adjust_rest"),
        message=message,
    )


def adaptive_settings_to_dict(settings: AdaptiveSettings) -> dict[str, Any]:
    """
    Convert AdaptiveSettings to JSON-compatible dict.

    Args:
        settings: AdaptiveSettings to convert

    Returns:
        Dict representation
    """
    return {
        "difficulty_level": settings.difficulty_level,
        "recommendation": recommendation_to_dict(settings.recommendation),
    }


def dict_to_adaptive_settings(data: dict[str, Any]) -> AdaptiveSettings:
    """
    Convert dict to AdaptiveSettings.

    Args:
        data: Dict representation

    Returns:
        AdaptiveSettings instance

    Raises:
        ValidationError: If data is invalid
    """
    recommendation = _require(data, "recommendation")
    if not isinstance(recommendation, dict):
        raise ValidationError("recommendation must be an object")

    return AdaptiveSettings(
        difficulty_level=_require_number(data, "difficulty_level"),
        recommendation=dict_to_recommendation(recommendation),
    )


def adaptive_settings_to_json(settings: AdaptiveSettings) -> str:
    """Serialize AdaptiveSettings to a JSON string (UTF-8 text, emoji kept)."""
    return json.dumps(adaptive_settings_to_dict(settings), ensure_ascii=False)


def json_to_adaptive_settings(text: str) -> AdaptiveSettings:
    """
    Parse AdaptiveSettings from a JSON string.

    Raises:
        ValidationError: If the text is not valid JSON or the data is invalid
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("AdaptiveSettings JSON must be an object")
    return dict_to_adaptive_settings(data)


def pattern_metrics_to_dict(metrics: PatternMetrics) -> dict[str, Any]:
    """Convert PatternMetrics to JSON-compatible dict."""
    return {
        "consistent_easy": metrics.consistent_easy,
        "consistent_hard": metrics.consistent_hard,
        "stable": metrics.stable,
        "trending": metrics.trending,
    }


def frequency_recommendation_to_dict(rec: FrequencyRecommendation) -> dict[str, Any]:
    """Convert FrequencyRecommendation to JSON-compatible dict."""
    return {
        "days_per_week": rec.days_per_week,
        "rest_day_recommendation": rec.rest_day_recommendation,
    }


def dict_to_performance_summary(data: dict[str, Any]) -> PerformanceSummary:
    """
    Convert dict to PerformanceSummary.

    Raises:
        ValidationError: If a field is missing or out of range
    """
    completion_rate = _require_number(data, "completion_rate")
    average_feedback = _require_number(data, "average_feedback")
    try:
        return PerformanceSummary(
            completion_rate=completion_rate,
            average_feedback=average_feedback,
        )
    except ValueError as e:
        raise ValidationError(str(e)) from e


def dict_to_user_profile(data: dict[str, Any]) -> UserProfile:
    """
    Convert dict to the UserProfile projection.

    All fields are optional; absent feedback means no workout was rated yet.

    Raises:
        ValidationError: If a present field is invalid
    """
    level = data.get("current_difficulty_level")
    if level is not None:
        level = _require_number(data, "current_difficulty_level")

    feedback = data.get("last_workout_feedback")
    try:
        tier = validate_tier(data.get("fitness_level"))
        if feedback is not None:
            feedback = validate_feedback(feedback)
        return UserProfile(
            current_difficulty_level=level,
            fitness_level=tier,
            workout_frequency=data.get("workout_frequency"),
            last_workout_feedback=feedback,
        )
    except ValueError as e:
        raise ValidationError(str(e)) from e
