"""
Feedback pattern analysis: streaks and short-term trend.

Works on the recent feedback window (oldest first) supplied by the
persistence layer.
"""

from collections.abc import Container, Sequence

from .config import HISTORY_LIMIT, TREND_WEIGHTS, TREND_WINDOW
from .models import HARD_FEEDBACK, FeedbackType, PatternMetrics, Trend, recent_window


def count_trailing(history: Sequence[str], targets: Container[str]) -> int:
    """
    Count consecutive entries in ``targets``, scanning back from the newest.

    Args:
        history: Chronological feedback, oldest first
        targets: Feedback values that extend the streak

    Returns:
        Length of the trailing streak (0 if the newest entry does not match)
    """
    count = 0
    for feedback in reversed(history):
        if feedback not in targets:
            break
        count += 1
    return count


def feedback_trend(history: Sequence[FeedbackType]) -> Trend:
    """
    Direction of the last three feedback entries.

    Compares the weight of the newest of the three against the oldest:
    a rise means workouts feel easier, a fall means harder.
    """
    if len(history) < TREND_WINDOW:
        return "stable"

    weights = [TREND_WEIGHTS[f] for f in history[-TREND_WINDOW:]]
    delta = weights[-1] - weights[0]

    if delta > 0:
        return "easier"
    if delta < 0:
        return "harder"
    return "stable"


def analyze_pattern(
    history: Sequence[str], limit: int = HISTORY_LIMIT
) -> PatternMetrics:
    """
    Derive streak and trend metrics from recent feedback.

    Args:
        history: Chronological feedback, oldest first
        limit: Size of the window considered

    Returns:
        PatternMetrics for the trailing window

    Raises:
        InvalidFeedbackError: If the window contains an unknown category
    """
    window = recent_window(history, limit)

    return PatternMetrics(
        consistent_easy=count_trailing(window, {"too_easy"}),
        consistent_hard=count_trailing(window, HARD_FEEDBACK),
        stable=count_trailing(window, {"just_right"}),
        trending=feedback_trend(window),
    )
