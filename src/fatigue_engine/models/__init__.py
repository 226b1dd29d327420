"""Data models for the fatigue engine."""

from fatigue_engine.models.enums import (
    Archetype,
    FatigueStatus,
    MuscleGroup,
    TrainingType,
)
from fatigue_engine.models.muscles import ALL_MUSCLE_GROUPS, MUSCLE_DISPLAY_NAMES
from fatigue_engine.models.archetypes import (
    DEFAULT_ARCHETYPES,
    ArchetypeConfig,
    ArchetypeTable,
)
from fatigue_engine.models.training_types import resolve_archetype
from fatigue_engine.models.day_template import DayTemplate
from fatigue_engine.models.simulation_result import (
    DayReport,
    MuscleFatigue,
    MuscleInjection,
    SimulationResult,
)

__all__ = [
    "ALL_MUSCLE_GROUPS",
    "Archetype",
    "ArchetypeConfig",
    "ArchetypeTable",
    "DEFAULT_ARCHETYPES",
    "DayReport",
    "DayTemplate",
    "FatigueStatus",
    "MUSCLE_DISPLAY_NAMES",
    "MuscleFatigue",
    "MuscleGroup",
    "MuscleInjection",
    "SimulationResult",
    "TrainingType",
    "resolve_archetype",
]
