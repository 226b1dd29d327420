"""Muscle fatigue simulation engine.

Turns a sequence of planned training days into per-muscle fatigue
percentages, a neural overload warning and a daily effective-RPE trace.
"""

from fatigue_engine.engine import FatigueSimulator, simulate_fatigue
from fatigue_engine.models import (
    DEFAULT_ARCHETYPES,
    ArchetypeConfig,
    ArchetypeTable,
    DayTemplate,
    SimulationResult,
)

__all__ = [
    "ArchetypeConfig",
    "ArchetypeTable",
    "DEFAULT_ARCHETYPES",
    "DayTemplate",
    "FatigueSimulator",
    "SimulationResult",
    "simulate_fatigue",
]
