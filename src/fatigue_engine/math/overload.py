"""Neural overload detection over a daily effective-RPE trace."""

from __future__ import annotations

from fatigue_engine.models.enums import (
    NEURAL_OVERLOAD_RPE_THRESHOLD,
    NEURAL_OVERLOAD_STREAK_REQUIRED,
)


def detect_neural_overload(
    daily_rpe: list[float] | tuple[float, ...],
    rpe_threshold: float = NEURAL_OVERLOAD_RPE_THRESHOLD,
    streak_required: int = NEURAL_OVERLOAD_STREAK_REQUIRED,
) -> bool:
    """True once *streak_required* consecutive days reach *rpe_threshold*.

    Any day below the threshold resets the streak.
    """
    streak = 0
    for rpe in daily_rpe:
        if rpe >= rpe_threshold:
            streak += 1
            if streak >= streak_required:
                return True
        else:
            streak = 0
    return False


def longest_high_intensity_streak(
    daily_rpe: list[float] | tuple[float, ...],
    rpe_threshold: float = NEURAL_OVERLOAD_RPE_THRESHOLD,
) -> int:
    """Length of the longest run of days at or above *rpe_threshold*."""
    longest = 0
    streak = 0
    for rpe in daily_rpe:
        if rpe >= rpe_threshold:
            streak += 1
            longest = max(longest, streak)
        else:
            streak = 0
    return longest
