"""
Coaching recommendations and the adaptive settings pipeline.

get_adaptive_settings() is the entry point the service layer calls after a
feedback submission: it adjusts the difficulty, reads the feedback pattern
and turns both into a Recommendation.
"""

from collections.abc import Sequence

from .config import (
    CONSISTENT_EASY_STREAK,
    CONSISTENT_HARD_STREAK,
    DEFAULT_TUNING,
    STABLE_STREAK,
    TuningParams,
)
from .difficulty import compute_difficulty
from .logger import logger
from .models import (
    AdaptiveSettings,
    PatternMetrics,
    Recommendation,
    UserProfile,
    recent_window,
    validate_feedback,
)
from .patterns import analyze_pattern

NO_FEEDBACK_MESSAGE = "Complete a workout to get personalized recommendations!"

BEGINNER_STEP_UP_SUFFIX = " Remember, every step forward is progress! 🌟"
ATHLETE_STEP_DOWN_SUFFIX = " Even champions need recovery days. 🏆"


def neutral_recommendation() -> Recommendation:
    """Recommendation shown before any feedback has been given."""
    return Recommendation(
        adjust_difficulty=False,
        adjust_volume=False,
        adjust_rest=False,
        message=NO_FEEDBACK_MESSAGE,
    )


def generate_recommendation(
    old_difficulty: float,
    new_difficulty: float,
    last_feedback: str | None,
    tier: str | None,
    metrics: PatternMetrics,
    tuning: TuningParams | None = None,
) -> Recommendation:
    """
    Build the coaching decision for a difficulty update.

    Decision table by last feedback:
    - too_easy: step up; repeated easy feedback also adds volume
    - just_right: keep level; a long stable run forces a small challenge
    - bit_too_hard: scale back and add rest
    - way_too_hard: manageable next session; repeated hard feedback
      rebuilds from a lower base with less volume and more rest

    Args:
        old_difficulty: Difficulty before the update
        new_difficulty: Difficulty after the update
        last_feedback: Latest feedback, or None if none was ever given
        tier: User tier (only used for the closing encouragement)
        metrics: Pattern metrics over the recent feedback window
        tuning: Tuning parameters (defaults from config.py)

    Returns:
        Recommendation with flags and message

    Raises:
        InvalidFeedbackError: If last_feedback is not a recognized category
    """
    if last_feedback is None:
        return neutral_recommendation()

    tuning = tuning or DEFAULT_TUNING
    last_feedback = validate_feedback(last_feedback)

    # Levels carry 2 decimals; compare the change at that precision
    adjust_difficulty = round(abs(new_difficulty - old_difficulty), 2) > tuning.significant_change
    adjust_volume = False
    adjust_rest = False

    if last_feedback == "too_easy":
        if metrics.consistent_easy >= CONSISTENT_EASY_STREAK:
            message = "You're crushing it! 💪 I'm increasing the challenge to keep you growing."
            adjust_volume = True
        else:
            message = "Great work! Let's step it up a notch. 🚀"

    elif last_feedback == "just_right":
        if metrics.stable >= STABLE_STREAK:
            message = "Perfect consistency! 🎯 Let's add a tiny bit more challenge."
            adjust_difficulty = True
        else:
            message = "Excellent! You've found your sweet spot. Keep it up! ⭐"

    elif last_feedback == "bit_too_hard":
        message = "No worries! 😊 I'm scaling things back to keep you progressing comfortably."
        adjust_rest = True

    else:  # way_too_hard
        if metrics.consistent_hard >= CONSISTENT_HARD_STREAK:
            message = "Let's take a step back and rebuild your foundation. 🌱 You've got this!"
            adjust_volume = True
            adjust_rest = True
        else:
            message = "That was tough! 💙 I'm making the next workout more manageable."
            adjust_rest = True

    if tier == "beginner" and new_difficulty > old_difficulty:
        message += BEGINNER_STEP_UP_SUFFIX
    elif tier == "athlete" and new_difficulty < old_difficulty:
        message += ATHLETE_STEP_DOWN_SUFFIX

    return Recommendation(
        adjust_difficulty=adjust_difficulty,
        adjust_volume=adjust_volume,
        adjust_rest=adjust_rest,
        message=message,
    )


def get_adaptive_settings(
    profile: UserProfile,
    history: Sequence[str] = (),
    tuning: TuningParams | None = None,
) -> AdaptiveSettings:
    """
    Compute the adaptive settings for a user after a feedback submission.

    The caller persists the returned difficulty_level back onto the profile.

    Args:
        profile: User profile projection
        history: Recent feedback, oldest first
        tuning: Tuning parameters (defaults from config.py)

    Returns:
        AdaptiveSettings with the new level and its recommendation

    Raises:
        InvalidFeedbackError: If the feedback or history holds an unknown category
        InvalidTierError: If the profile's tier is unknown
    """
    tuning = tuning or DEFAULT_TUNING
    current = profile.current_difficulty_level or tuning.default_difficulty

    if profile.last_workout_feedback is None:
        logger.debug(f"No feedback yet, keeping difficulty at {current}")
        return AdaptiveSettings(
            difficulty_level=current,
            recommendation=neutral_recommendation(),
        )

    window = recent_window(history, tuning.history_limit)

    new_level = compute_difficulty(
        current,
        profile.last_workout_feedback,
        window,
        profile.fitness_level,
        tuning,
    )
    metrics = analyze_pattern(window, tuning.history_limit)

    recommendation = generate_recommendation(
        current,
        new_level,
        profile.last_workout_feedback,
        profile.fitness_level,
        metrics,
        tuning,
    )

    logger.debug(
        f"Adaptive settings: {current} -> {new_level}, trend={metrics.trending}, "
        f"volume={recommendation.adjust_volume}, rest={recommendation.adjust_rest}"
    )
    return AdaptiveSettings(difficulty_level=new_level, recommendation=recommendation)
