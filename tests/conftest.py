"""Shared test fixtures: archetype tables, planned weeks, simulators."""

from __future__ import annotations

from typing import Callable

import pytest

from fatigue_engine.engine import FatigueSimulator
from fatigue_engine.models.archetypes import ArchetypeConfig, ArchetypeTable
from fatigue_engine.models.day_template import DayTemplate
from fatigue_engine.models.enums import Archetype, MuscleGroup


@pytest.fixture
def upper_chest_table() -> ArchetypeTable:
    """Only the "upper" archetype, loading nothing but the chest at 0.7."""
    return ArchetypeTable.from_configs(
        ArchetypeConfig.from_mapping(Archetype.UPPER, {MuscleGroup.CHEST: 0.7}),
    )


@pytest.fixture
def full_coverage_table() -> ArchetypeTable:
    """Upper, full body and low-impact cardio with a coefficient for every muscle."""
    return ArchetypeTable.from_configs(
        ArchetypeConfig.from_mapping(Archetype.UPPER, {
            MuscleGroup.CHEST: 0.7,
            MuscleGroup.FRONT_DELT: 0.7,
            MuscleGroup.TRICEPS: 0.5,
            MuscleGroup.SIDE_DELT: 0.3,
            MuscleGroup.LATS: 0.4,
            MuscleGroup.TRAPS: 0.3,
            MuscleGroup.BICEPS: 0.3,
            MuscleGroup.REAR_DELT: 0.2,
            MuscleGroup.FOREARMS: 0.2,
            MuscleGroup.QUADS: 0.0,
            MuscleGroup.GLUTES: 0.0,
            MuscleGroup.HAMSTRINGS: 0.0,
            MuscleGroup.CALVES: 0.0,
            MuscleGroup.LOWER_BACK: 0.1,
            MuscleGroup.CORE: 0.3,
        }),
        ArchetypeConfig.from_mapping(Archetype.FULL_BODY, {
            MuscleGroup.CHEST: 0.5,
            MuscleGroup.FRONT_DELT: 0.5,
            MuscleGroup.TRICEPS: 0.4,
            MuscleGroup.SIDE_DELT: 0.3,
            MuscleGroup.LATS: 0.5,
            MuscleGroup.TRAPS: 0.4,
            MuscleGroup.BICEPS: 0.4,
            MuscleGroup.REAR_DELT: 0.3,
            MuscleGroup.FOREARMS: 0.3,
            MuscleGroup.QUADS: 0.5,
            MuscleGroup.GLUTES: 0.5,
            MuscleGroup.HAMSTRINGS: 0.4,
            MuscleGroup.CALVES: 0.3,
            MuscleGroup.LOWER_BACK: 0.4,
            MuscleGroup.CORE: 0.5,
        }),
        ArchetypeConfig.from_mapping(Archetype.CARDIO_LOW, {
            MuscleGroup.QUADS: 0.1,
            MuscleGroup.GLUTES: 0.1,
            MuscleGroup.HAMSTRINGS: 0.05,
            MuscleGroup.CALVES: 0.1,
            MuscleGroup.LOWER_BACK: 0.05,
            MuscleGroup.CORE: 0.1,
        }),
    )


@pytest.fixture
def empty_table() -> ArchetypeTable:
    return ArchetypeTable()


@pytest.fixture
def simulator() -> FatigueSimulator:
    """Simulator backed by the default seed table."""
    return FatigueSimulator()


@pytest.fixture
def day_factory() -> Callable[..., DayTemplate]:
    """Factory fixture for DayTemplate instances.

    Usage:
        day = day_factory("run", load_score=4)
    """

    def factory(
        training_type: str = "strength",
        load_score: int = 3,
        duration_min: float = 60.0,
    ) -> DayTemplate:
        return DayTemplate(
            training_type=training_type,
            load_score=load_score,
            duration_min=duration_min,
        )

    return factory


@pytest.fixture
def typical_week(day_factory: Callable[..., DayTemplate]) -> list[DayTemplate]:
    """Seven-day mixed week: lifting, running, conditioning and rest."""
    return [
        day_factory("strength", load_score=4, duration_min=60),
        day_factory("run", load_score=3, duration_min=40),
        day_factory("mobility", load_score=1, duration_min=20),
        day_factory("strength", load_score=4, duration_min=60),
        day_factory("hiit", load_score=5, duration_min=30),
        day_factory("walking", load_score=1, duration_min=45),
        day_factory("rest", load_score=1, duration_min=10),
    ]
