"""Muscle catalog: canonical order, display names and parsing."""

from __future__ import annotations

from fatigue_engine.exceptions import InvalidMuscleGroupError
from fatigue_engine.models.enums import MuscleGroup

# Body-map order; every simulation result lists muscles in exactly this order.
ALL_MUSCLE_GROUPS: tuple[MuscleGroup, ...] = tuple(MuscleGroup)

MUSCLE_COUNT = len(ALL_MUSCLE_GROUPS)

MUSCLE_DISPLAY_NAMES: dict[MuscleGroup, str] = {
    MuscleGroup.CHEST: "Chest",
    MuscleGroup.FRONT_DELT: "Front Delts",
    MuscleGroup.TRICEPS: "Triceps",
    MuscleGroup.SIDE_DELT: "Side Delts",
    MuscleGroup.LATS: "Lats",
    MuscleGroup.TRAPS: "Traps",
    MuscleGroup.BICEPS: "Biceps",
    MuscleGroup.REAR_DELT: "Rear Delts",
    MuscleGroup.FOREARMS: "Forearms",
    MuscleGroup.QUADS: "Quads",
    MuscleGroup.GLUTES: "Glutes",
    MuscleGroup.HAMSTRINGS: "Hamstrings",
    MuscleGroup.CALVES: "Calves",
    MuscleGroup.LOWER_BACK: "Lower Back",
    MuscleGroup.CORE: "Core/Abs",
}

_BY_TAG: dict[str, MuscleGroup] = {m.tag: m for m in ALL_MUSCLE_GROUPS}


def muscle_index(muscle: MuscleGroup) -> int:
    """Zero-based position of *muscle* in the fatigue state vector."""
    return muscle.value - 1


def lookup_muscle_group(tag: str) -> MuscleGroup | None:
    """Return the muscle group for a wire tag, or None if unknown."""
    return _BY_TAG.get(tag)


def parse_muscle_group(tag: str) -> MuscleGroup:
    """Strictly convert a wire tag to a MuscleGroup.

    Raises:
        InvalidMuscleGroupError: If *tag* is not one of the 15 tracked groups.
    """
    muscle = lookup_muscle_group(tag)
    if muscle is None:
        raise InvalidMuscleGroupError(tag)
    return muscle
