"""
Configuration constants for the adaptive difficulty engine.

All adjustable parameters are centralized here for easy tuning.
The tuning values can be overridden through tuning.yaml (see
core/engine/config_loader.py); everything else is fixed product copy.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

# =============================================================================
# DIFFICULTY BOUNDS
# =============================================================================

MIN_DIFFICULTY: Final[float] = 0.3  # Easiest allowed intensity multiplier
MAX_DIFFICULTY: Final[float] = 2.5  # Hardest allowed intensity multiplier
DEFAULT_DIFFICULTY: Final[float] = 1.0  # Level assigned at onboarding

# =============================================================================
# FEEDBACK ADJUSTMENT RATES
# =============================================================================

ADJUSTMENT_RATES: Final[dict[str, float]] = {
    "too_easy": 0.15,  # +15%
    "just_right": 0.0,
    "bit_too_hard": -0.10,  # -10%
    "way_too_hard": -0.20,  # -20%
}

# =============================================================================
# STREAK AMPLIFICATION
# =============================================================================

STREAK_AMPLIFIER: Final[float] = 1.5  # Applied once when the complaint repeats
STREAK_LENGTH: Final[int] = 2  # Trailing history entries that must match

# =============================================================================
# USER TIER MODIFIERS
# =============================================================================

TIER_MODIFIERS: Final[dict[str, float]] = {
    "beginner": 0.8,  # Conservative swings
    "casual": 0.9,
    "fit": 1.0,
    "athlete": 1.2,  # Aggressive swings
}

# =============================================================================
# RECOMMENDATIONS
# =============================================================================

SIGNIFICANT_CHANGE: Final[float] = 0.05  # |new - old| above this flags a difficulty change
CONSISTENT_EASY_STREAK: Final[int] = 2
CONSISTENT_HARD_STREAK: Final[int] = 2
STABLE_STREAK: Final[int] = 3

# =============================================================================
# FEEDBACK HISTORY
# =============================================================================

HISTORY_LIMIT: Final[int] = 5  # Sliding window kept by the persistence layer
TREND_WINDOW: Final[int] = 3

TREND_WEIGHTS: Final[dict[str, int]] = {
    "way_too_hard": -2,
    "bit_too_hard": -1,
    "just_right": 0,
    "too_easy": 1,
}

# =============================================================================
# MOTIVATION
# =============================================================================

# (upper bound exclusive, bucket); counts at or above the last bound are legendary
MOTIVATION_BUCKETS: Final[list[tuple[int, str]]] = [
    (5, "newbie"),
    (20, "building"),
    (50, "strong"),
]
MOTIVATION_TOP_BUCKET: Final[str] = "legendary"

MOTIVATION_MESSAGES: Final[dict[str, list[str]]] = {
    "newbie": [
        "Welcome to your fitness journey! Every workout counts! 🌟",
        "You're building something amazing, one workout at a time! 💪",
        "Great start! Your future self will thank you! 🚀",
    ],
    "building": [
        "Look at you go! The habit is forming! 🔥",
        "Consistency is key, and you're nailing it! 👏",
        "Your dedication is inspiring! Keep it up! ⭐",
    ],
    "strong": [
        "You're officially a fitness champion! 🏆",
        "Your commitment is incredible! Nothing can stop you! 💎",
        "You've proven that consistency creates results! 🌟",
    ],
    "legendary": [
        "LEGENDARY status achieved! You're unstoppable! 👑",
        "You're not just working out, you're inspiring others! 🌟",
        "Your discipline is next level! Absolutely amazing! 🚀",
    ],
}

# =============================================================================
# WORKOUT FREQUENCY
# =============================================================================

BASE_DAYS_PER_WEEK: Final[dict[str, int]] = {
    "daily": 6,
    "three_per_week": 3,
    "flexible": 4,
}
FALLBACK_PREFERENCE: Final[str] = "flexible"

MIN_DAYS_PER_WEEK: Final[int] = 2
MAX_DAYS_PER_WEEK: Final[int] = 6

LOW_COMPLETION_RATE: Final[float] = 0.7  # Below this: one fewer day
HIGH_COMPLETION_RATE: Final[float] = 0.9  # Above this (with good feedback): one more day
HIGH_AVERAGE_FEEDBACK: Final[float] = 3.5

REST_DAY_MESSAGES: Final[dict[int, str]] = {
    2: "Take plenty of rest days to build consistency! 🌱",
    3: "Great balance of work and recovery! 💪",
    4: "You're finding your rhythm! Keep it sustainable! ⚖️",
    5: "Strong routine! Don't forget to rest and recover! 🔄",
    6: "Incredible dedication! Make sure to listen to your body! 👂",
}
FALLBACK_REST_DAYS: Final[int] = 4

# =============================================================================
# DIFFICULTY LABELS
# =============================================================================

# (upper bound exclusive, label)
DIFFICULTY_LABELS: Final[list[tuple[float, str]]] = [
    (0.6, "Very Easy"),
    (0.8, "Easy"),
    (1.0, "Gentle"),
    (1.2, "Moderate"),
    (1.5, "Challenging"),
    (1.8, "Hard"),
    (2.1, "Very Hard"),
]
TOP_DIFFICULTY_LABEL: Final[str] = "Extreme"

DIFFICULTY_STYLES: Final[list[tuple[float, str]]] = [
    (0.8, "green"),
    (1.2, "blue"),
    (1.6, "yellow"),
    (2.0, "dark_orange"),
]
TOP_DIFFICULTY_STYLE: Final[str] = "red"


# =============================================================================
# TUNING PARAMETERS
# =============================================================================


@dataclass(frozen=True)
class TuningParams:
    """Tunable knobs of the difficulty engine, overridable from YAML."""

    min_difficulty: float = MIN_DIFFICULTY
    max_difficulty: float = MAX_DIFFICULTY
    default_difficulty: float = DEFAULT_DIFFICULTY
    adjustment_rates: Mapping[str, float] = field(
        default_factory=lambda: dict(ADJUSTMENT_RATES)
    )
    streak_amplifier: float = STREAK_AMPLIFIER
    streak_length: int = STREAK_LENGTH
    tier_modifiers: Mapping[str, float] = field(
        default_factory=lambda: dict(TIER_MODIFIERS)
    )
    significant_change: float = SIGNIFICANT_CHANGE
    history_limit: int = HISTORY_LIMIT

    def __post_init__(self) -> None:
        """Validate tuning values."""
        # Read-only copies; a shared instance must not change under its users
        object.__setattr__(self, "adjustment_rates", MappingProxyType(dict(self.adjustment_rates)))
        object.__setattr__(self, "tier_modifiers", MappingProxyType(dict(self.tier_modifiers)))

        if self.min_difficulty <= 0:
            raise ValueError("min_difficulty must be positive")
        if self.min_difficulty > self.max_difficulty:
            raise ValueError("min_difficulty must not exceed max_difficulty")
        if not self.min_difficulty <= self.default_difficulty <= self.max_difficulty:
            raise ValueError("default_difficulty must lie within the difficulty bounds")
        missing = set(ADJUSTMENT_RATES) - set(self.adjustment_rates)
        if missing:
            raise ValueError(f"adjustment_rates missing: {', '.join(sorted(missing))}")
        if self.adjustment_rates["just_right"] != 0.0:
            raise ValueError("adjustment_rates.just_right must be 0.0")
        missing = set(TIER_MODIFIERS) - set(self.tier_modifiers)
        if missing:
            raise ValueError(f"tier_modifiers missing: {', '.join(sorted(missing))}")
        if self.streak_amplifier < 1.0:
            raise ValueError("streak_amplifier must be at least 1.0")
        if self.streak_length < 1:
            raise ValueError("streak_length must be at least 1")
        if self.streak_length > self.history_limit:
            raise ValueError("streak_length must not exceed history_limit")
        if self.significant_change < 0:
            raise ValueError("significant_change must be non-negative")
        if self.history_limit < TREND_WINDOW:
            raise ValueError(f"history_limit must be at least {TREND_WINDOW}")


DEFAULT_TUNING: Final[TuningParams] = TuningParams()
