"""FatigueSimulator — folds a sequence of planned days into predicted muscle fatigue."""

from __future__ import annotations

import logging
from typing import Sequence

from fatigue_engine.math.fatigue import (
    classify_fatigue,
    decay,
    inject,
    new_fatigue_state,
    overall_fatigue_score,
    round_half_up,
)
from fatigue_engine.math.load import effective_rpe, session_load
from fatigue_engine.math.overload import detect_neural_overload, longest_high_intensity_streak
from fatigue_engine.models.archetypes import DEFAULT_ARCHETYPES, ArchetypeTable
from fatigue_engine.models.day_template import DayTemplate
from fatigue_engine.models.enums import HOURS_BETWEEN_DAYS, MuscleGroup, TrainingType
from fatigue_engine.models.muscles import ALL_MUSCLE_GROUPS, muscle_index
from fatigue_engine.models.simulation_result import (
    DayReport,
    MuscleFatigue,
    MuscleInjection,
    SimulationResult,
)
from fatigue_engine.models.training_types import lookup_training_type, resolve_archetype

logger = logging.getLogger(__name__)


class FatigueSimulator:
    """Predicts per-muscle fatigue for a planned block of training days.

    Pure with respect to its inputs: each call starts from a fresh, all-zero
    state and keeps nothing afterwards, so one simulator may serve any
    number of independent calls.

    Usage:
        simulator = FatigueSimulator(archetype_table)
        result = simulator.simulate(days, intensity_scale=0.8)
    """

    def __init__(self, archetypes: ArchetypeTable | None = None) -> None:
        self.archetypes = archetypes if archetypes is not None else DEFAULT_ARCHETYPES

    def simulate(
        self,
        days: Sequence[DayTemplate],
        intensity_scale: float = 1.0,
        archetypes: ArchetypeTable | None = None,
    ) -> SimulationResult:
        """Simulate *days* in order and report the final fatigue picture.

        Each day after the first starts with 24 hours of decay; then the
        day's session load is injected through its archetype's coefficients.
        Unknown training types fall back to the low-impact archetype and an
        archetype missing from the table injects nothing.

        Args:
            days: Planned days, simulated strictly in the given order.
            intensity_scale: Week-level RPE multiplier (1.0 = as planned).
            archetypes: Coefficient table for this call; defaults to the
                        simulator's own table.

        Returns:
            A SimulationResult covering all 15 muscle groups.
        """
        table = archetypes if archetypes is not None else self.archetypes
        state = new_fatigue_state()
        daily_rpe: list[float] = []
        reports: list[DayReport] = []
        if table.is_empty and days:
            logger.warning("Archetype table is empty, no fatigue will be injected")

        for i, day in enumerate(days):
            if i > 0:
                decay(state, HOURS_BETWEEN_DAYS)

            rpe = effective_rpe(day.load_score, intensity_scale)
            daily_rpe.append(rpe)

            self._log_unknown_training_type(i, day)
            archetype = resolve_archetype(day.training_type)
            coefficients = table.coefficients_for(archetype)
            if not coefficients and not table.is_empty:
                logger.warning(
                    "Day %d: no coefficients for archetype %s, skipping injection",
                    i, archetype.tag,
                )

            load = session_load(day.duration_min, rpe)
            applied = inject(state, coefficients, load)

            reports.append(
                DayReport(
                    day_index=i,
                    archetype=archetype,
                    effective_rpe=rpe,
                    session_load=load,
                    injections=tuple(
                        MuscleInjection(muscle=m, injected_percent=inj, new_total=total)
                        for m, inj, total in applied
                    ),
                    fatigue_after=tuple(float(v) for v in state),
                )
            )
            logger.debug(
                "Day %d: archetype=%s rpe=%.1f load=%.3f", i, archetype.tag, rpe, load
            )

        neural_overload = detect_neural_overload(daily_rpe)
        if neural_overload:
            logger.info(
                "Neural overload predicted: %d consecutive high-intensity days",
                longest_high_intensity_streak(daily_rpe),
            )

        muscle_fatigues = tuple(
            self._build_muscle_fatigue(muscle, float(state[muscle_index(muscle)]))
            for muscle in ALL_MUSCLE_GROUPS
        )

        return SimulationResult(
            muscle_fatigues=muscle_fatigues,
            neural_overload=neural_overload,
            daily_effective_rpe=tuple(daily_rpe),
            day_reports=tuple(reports),
            overall_score=overall_fatigue_score(muscle_fatigues),
        )

    @staticmethod
    def _build_muscle_fatigue(muscle: MuscleGroup, percent: float) -> MuscleFatigue:
        """Round to one decimal, then classify the rounded value."""
        rounded = round_half_up(percent)
        return MuscleFatigue(
            muscle=muscle,
            fatigue_percent=rounded,
            status=classify_fatigue(rounded),
        )

    @staticmethod
    def _log_unknown_training_type(day_index: int, day: DayTemplate) -> None:
        if isinstance(day.training_type, TrainingType):
            return
        if lookup_training_type(str(day.training_type)) is None:
            logger.debug(
                "Day %d: unknown training type %r, using low-impact archetype",
                day_index, day.training_type,
            )


def simulate_fatigue(
    days: Sequence[DayTemplate],
    intensity_scale: float = 1.0,
    archetypes: ArchetypeTable | None = None,
) -> SimulationResult:
    """Convenience wrapper: one-off simulation with a throwaway FatigueSimulator."""
    return FatigueSimulator(archetypes).simulate(days, intensity_scale)
