"""Planned training day, the unit of input to a fatigue simulation."""

from __future__ import annotations

from dataclasses import dataclass

from fatigue_engine.models.enums import TrainingType


@dataclass(frozen=True)
class DayTemplate:
    """One planned training day.

    Days are simulated strictly in the order they are given, assumed to be
    24 hours apart.
    """

    training_type: TrainingType | str  # enum or raw tag; unknown tags are allowed
    load_score: float  # 1-5 coarse intensity rating, fractions allowed
    duration_min: float
