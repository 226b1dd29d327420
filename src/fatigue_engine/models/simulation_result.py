"""Simulation output: final per-muscle fatigue plus a per-day audit trail."""

from __future__ import annotations

from dataclasses import dataclass, field

from fatigue_engine.models.enums import Archetype, FatigueStatus, MuscleGroup
from fatigue_engine.models.muscles import MUSCLE_DISPLAY_NAMES


@dataclass(frozen=True)
class MuscleFatigue:
    """Predicted fatigue for one muscle group at the end of the simulation."""

    muscle: MuscleGroup
    fatigue_percent: float  # 0-100, one decimal
    status: FatigueStatus

    @property
    def display_name(self) -> str:
        return MUSCLE_DISPLAY_NAMES[self.muscle]


@dataclass(frozen=True)
class MuscleInjection:
    """Fatigue added to one muscle by one simulated day."""

    muscle: MuscleGroup
    injected_percent: float
    new_total: float


@dataclass(frozen=True)
class DayReport:
    """Record of a single simulated day.

    ``fatigue_after`` is the unrounded state vector in canonical muscle
    order once the day's decay and injection have been applied.
    """

    day_index: int
    archetype: Archetype
    effective_rpe: float
    session_load: float
    injections: tuple[MuscleInjection, ...] = field(default_factory=tuple)
    fatigue_after: tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SimulationResult:
    """Output of FatigueSimulator.simulate().

    ``muscle_fatigues`` always holds all 15 muscle groups in canonical order,
    including muscles no day touched.
    """

    muscle_fatigues: tuple[MuscleFatigue, ...] = field(default_factory=tuple)
    neural_overload: bool = False
    daily_effective_rpe: tuple[float, ...] = field(default_factory=tuple)
    day_reports: tuple[DayReport, ...] = field(default_factory=tuple)
    overall_score: float = 0.0  # weighted mean fatigue across the body

    def fatigue_for(self, muscle: MuscleGroup) -> MuscleFatigue:
        for entry in self.muscle_fatigues:
            if entry.muscle == muscle:
                return entry
        raise KeyError(muscle)

    @property
    def most_fatigued(self) -> MuscleFatigue | None:
        """Muscle with the highest predicted fatigue (first in body order on ties)."""
        if not self.muscle_fatigues:
            return None
        return max(self.muscle_fatigues, key=lambda m: m.fatigue_percent)
