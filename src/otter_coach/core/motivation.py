"""Motivational messages bucketed by total completed workouts."""

import random

from .config import MOTIVATION_BUCKETS, MOTIVATION_MESSAGES, MOTIVATION_TOP_BUCKET

_default_rng = random.Random()


def motivation_tier(total_workouts: int) -> str:
    """
    Bucket a workout count: newbie, building, strong or legendary.

    Each bound belongs to the higher bucket (5 workouts is "building").
    """
    for upper, bucket in MOTIVATION_BUCKETS:
        if total_workouts < upper:
            return bucket
    return MOTIVATION_TOP_BUCKET


def pick_message(total_workouts: int, rng: random.Random | None = None) -> str:
    """
    Pick one encouragement string for the user's progress bucket.

    Args:
        total_workouts: Completed workouts so far
        rng: Random source; pass a seeded random.Random for reproducible picks

    Returns:
        One of the bucket's messages, drawn uniformly
    """
    rng = rng or _default_rng
    return rng.choice(MOTIVATION_MESSAGES[motivation_tier(total_workouts)])
