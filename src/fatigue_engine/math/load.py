"""Session load calculations: load score → RPE → session load → fatigue injection.

Formulas:
    RPE            = load_score × 2
    effective RPE  = clamp(RPE × intensity_scale, 1, 10)
    session load   = duration(min) × (effective RPE / 10) / 10
    injection (%)  = session load × coefficient × 100

A 60 minute session at RPE 10 is 6.0 load units. At coefficient 0.1 that
injects 60% fatigue; anything above 100% saturates when it is added.
"""

from __future__ import annotations

import math

from fatigue_engine.models.enums import LOAD_SCORE_RPE_FACTOR, RPE_MAX, RPE_MIN


def load_score_to_rpe(load_score: float) -> float:
    """Map a 1-5 load score onto the 2-10 RPE scale."""
    return load_score * LOAD_SCORE_RPE_FACTOR


def effective_rpe(load_score: float, intensity_scale: float = 1.0) -> float:
    """Intensity-scaled RPE for a planned day, clamped to [1, 10].

    Args:
        load_score: Coarse 1-5 intensity rating of the day.
        intensity_scale: Week-level multiplier (<1 deload, >1 overload).

    Returns:
        Effective RPE. Out-of-range inputs are absorbed by the clamp.
    """
    return min(RPE_MAX, max(RPE_MIN, load_score_to_rpe(load_score) * intensity_scale))


def session_load(duration_min: float, rpe: float) -> float:
    """Dimensionless load of one session.

    Negative and NaN durations count as no training. An infinite duration
    gives an infinite load, which saturates every loaded muscle.
    """
    if math.isnan(duration_min) or duration_min < 0.0:
        return 0.0
    return duration_min * (rpe / 10) / 10


def fatigue_injection(load: float, coefficient: float) -> float:
    """Fatigue percentage a session of *load* adds to a muscle with *coefficient*.

    A zero load or zero coefficient injects nothing, even against an
    infinite factor.
    """
    if load == 0.0 or coefficient == 0.0:
        return 0.0
    return load * coefficient * 100.0
