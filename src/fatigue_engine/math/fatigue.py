"""Per-muscle fatigue state: injection, linear decay, classification, rounding.

The fatigue state is a float64 vector in canonical muscle order (see
``fatigue_engine.models.muscles.ALL_MUSCLE_GROUPS``). All operations keep
every entry inside [0, 100].
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Mapping

import numpy as np

from fatigue_engine.math.load import fatigue_injection
from fatigue_engine.models.enums import (
    DEFAULT_MUSCLE_WEIGHT,
    FATIGUE_DECAY_PERCENT_PER_HOUR,
    FATIGUE_DECIMALS,
    FATIGUE_MAX_PERCENT,
    FATIGUE_MIN_PERCENT,
    MUSCLE_WEIGHTS,
    STATUS_FATIGUED_MAX,
    STATUS_FRESH_MAX,
    STATUS_STIMULATED_MAX,
    FatigueStatus,
    MuscleGroup,
)
from fatigue_engine.models.muscles import MUSCLE_COUNT, muscle_index

if TYPE_CHECKING:
    from fatigue_engine.models.simulation_result import MuscleFatigue


def new_fatigue_state() -> np.ndarray:
    """A fresh state vector: every muscle at 0%."""
    return np.zeros(MUSCLE_COUNT, dtype=np.float64)


def apply_decay(current_percent: float, hours_elapsed: float) -> float:
    """Linear recovery: max(0, current - hours × decay rate)."""
    decayed = current_percent - hours_elapsed * FATIGUE_DECAY_PERCENT_PER_HOUR
    if decayed < FATIGUE_MIN_PERCENT:
        return FATIGUE_MIN_PERCENT
    return decayed


def add_fatigue(current_percent: float, injection_percent: float) -> float:
    """Add an injection to a muscle, saturating at 100%.

    A NaN injection leaves the muscle unchanged.
    """
    if math.isnan(injection_percent):
        return current_percent
    new_total = current_percent + injection_percent
    if new_total > FATIGUE_MAX_PERCENT:
        return FATIGUE_MAX_PERCENT
    if new_total < FATIGUE_MIN_PERCENT:
        return FATIGUE_MIN_PERCENT
    return new_total


def decay(state: np.ndarray, hours_elapsed: float) -> None:
    """Apply linear decay to every muscle of *state* in place."""
    np.maximum(
        state - hours_elapsed * FATIGUE_DECAY_PERCENT_PER_HOUR,
        FATIGUE_MIN_PERCENT,
        out=state,
    )


def inject(
    state: np.ndarray,
    coefficients: Mapping[MuscleGroup, float],
    load: float,
) -> list[tuple[MuscleGroup, float, float]]:
    """Add one session's fatigue to *state* in place.

    Only muscles present in *coefficients* are touched.

    Returns:
        (muscle, injected percent, new total) for each touched muscle.
    """
    applied: list[tuple[MuscleGroup, float, float]] = []
    for muscle, coefficient in coefficients.items():
        idx = muscle_index(muscle)
        injection = fatigue_injection(load, coefficient)
        new_total = add_fatigue(float(state[idx]), injection)
        state[idx] = new_total
        applied.append((muscle, injection, new_total))
    return applied


def round_half_up(value: float, decimals: int = FATIGUE_DECIMALS) -> float:
    """Round half away from zero for non-negative values (2.25 → 2.3)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def classify_fatigue(percent: float) -> FatigueStatus:
    """Classify a fatigue percentage; boundaries belong to the lower category.

    0-25 fresh, 25-50 stimulated, 50-75 fatigued, above 75 overreached.
    """
    if percent <= STATUS_FRESH_MAX:
        return FatigueStatus.FRESH
    if percent <= STATUS_STIMULATED_MAX:
        return FatigueStatus.STIMULATED
    if percent <= STATUS_FATIGUED_MAX:
        return FatigueStatus.FATIGUED
    return FatigueStatus.OVERREACHED


def overall_fatigue_score(muscles: Iterable[MuscleFatigue]) -> float:
    """Weighted average fatigue, larger muscle groups weighing more.

    Returns 0.0 for an empty collection.
    """
    total_weight = 0.0
    weighted_sum = 0.0
    for entry in muscles:
        weight = MUSCLE_WEIGHTS.get(entry.muscle, DEFAULT_MUSCLE_WEIGHT)
        total_weight += weight
        weighted_sum += entry.fatigue_percent * weight
    if total_weight == 0:
        return 0.0
    return round_half_up(weighted_sum / total_weight)
