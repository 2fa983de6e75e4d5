"""
Difficulty adjustment from post-workout feedback.

new = clamp(round(current * (1 + rate), 2), MIN, MAX)

where rate is the feedback's base rate, amplified once when the same
complaint closes the recent history, then scaled by the user's tier.
"""

import math
from collections.abc import Sequence

from .config import (
    DEFAULT_TUNING,
    DIFFICULTY_LABELS,
    DIFFICULTY_STYLES,
    TOP_DIFFICULTY_LABEL,
    TOP_DIFFICULTY_STYLE,
    TuningParams,
)
from .logger import logger
from .models import recent_window, validate_feedback, validate_tier


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals with halves going up (not banker's rounding)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def clamp_difficulty(level: float, tuning: TuningParams = DEFAULT_TUNING) -> float:
    """Constrain a level to [min_difficulty, max_difficulty]."""
    return max(tuning.min_difficulty, min(tuning.max_difficulty, level))


def is_streak(history: Sequence[str], feedback: str, length: int) -> bool:
    """
    Check whether the last ``length`` history entries all equal ``feedback``.

    Only the trailing entries are inspected; a longer streak does not
    count for more.
    """
    if len(history) < length:
        return False
    return all(f == feedback for f in history[-length:])


def adjustment_rate(
    feedback: str,
    history: Sequence[str] = (),
    tier: str | None = None,
    tuning: TuningParams = DEFAULT_TUNING,
) -> float:
    """
    Effective relative change for one feedback event.

    Args:
        feedback: Latest feedback category
        history: Prior feedback, oldest first
        tier: User tier, or None to skip the tier modifier
        tuning: Tuning parameters

    Returns:
        Signed rate (e.g. 0.15 for +15%)

    Raises:
        InvalidFeedbackError: If feedback or a history entry is not a recognized category
        InvalidTierError: If tier is given but unknown
    """
    feedback = validate_feedback(feedback)
    tier = validate_tier(tier)
    history = recent_window(history, tuning.history_limit)

    rate = tuning.adjustment_rates[feedback]

    if feedback != "just_right" and is_streak(history, feedback, tuning.streak_length):
        rate *= tuning.streak_amplifier
        logger.debug(f"Repeated '{feedback}' feedback, rate amplified to {rate:.4f}")

    if tier is not None:
        rate *= tuning.tier_modifiers[tier]

    return rate


def compute_difficulty(
    current: float,
    feedback: str,
    history: Sequence[str] = (),
    tier: str | None = None,
    tuning: TuningParams | None = None,
) -> float:
    """
    Calculate the new difficulty level from the latest feedback.

    Args:
        current: Current difficulty multiplier
        feedback: Latest feedback category
        history: Prior feedback, oldest first (at most the last few entries matter)
        tier: User tier, or None when unknown
        tuning: Tuning parameters (defaults from config.py)

    Returns:
        New difficulty rounded to 2 decimals and clamped to the safe range

    Raises:
        InvalidFeedbackError: If feedback is not a recognized category
        InvalidTierError: If tier is given but unknown
    """
    tuning = tuning or DEFAULT_TUNING

    rate = adjustment_rate(feedback, history, tier, tuning)

    # A zero rate must leave the level untouched, rounding included
    if rate == 0.0:
        return clamp_difficulty(current, tuning)

    raw = round_half_up(current * (1 + rate), 2)
    new_level = clamp_difficulty(raw, tuning)

    logger.debug(
        f"Difficulty {current} -> {new_level} (feedback={feedback}, tier={tier}, "
        f"rate={rate:+.4f}, raw={raw})"
    )
    return new_level


def describe_difficulty(level: float) -> str:
    """Human-friendly label for a difficulty level."""
    for upper, label in DIFFICULTY_LABELS:
        if level < upper:
            return label
    return TOP_DIFFICULTY_LABEL


def difficulty_style(level: float) -> str:
    """Rich colour used when displaying a difficulty level."""
    for upper, style in DIFFICULTY_STYLES:
        if level < upper:
            return style
    return TOP_DIFFICULTY_STYLE
