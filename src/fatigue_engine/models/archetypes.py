"""Archetype coefficient table: per-muscle loading profile of each movement pattern.

The table is supplied by the caller (normally fetched from the server); the
engine only reads it. ``DEFAULT_ARCHETYPES`` carries the server's seed values
for callers that have no table of their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fatigue_engine.exceptions import InvalidArchetypeError
from fatigue_engine.models.enums import Archetype, MuscleGroup

ARCHETYPE_DISPLAY_NAMES: dict[Archetype, str] = {
    Archetype.PUSH: "Push",
    Archetype.PULL: "Pull",
    Archetype.LEGS: "Legs",
    Archetype.UPPER: "Upper Body",
    Archetype.LOWER: "Lower Body",
    Archetype.FULL_BODY: "Full Body",
    Archetype.CARDIO_IMPACT: "Cardio (Impact)",
    Archetype.CARDIO_LOW: "Cardio (Low Impact)",
}

_BY_TAG: dict[str, Archetype] = {a.tag: a for a in Archetype}


def lookup_archetype(tag: str) -> Archetype | None:
    """Return the archetype for a wire tag, or None if unknown."""
    return _BY_TAG.get(tag)


def parse_archetype(tag: str) -> Archetype:
    """Strictly convert a wire tag to an Archetype.

    Raises:
        InvalidArchetypeError: If *tag* is not a known archetype.
    """
    archetype = lookup_archetype(tag)
    if archetype is None:
        raise InvalidArchetypeError(tag)
    return archetype


@dataclass(frozen=True)
class ArchetypeConfig:
    """Coefficient vector for one archetype.

    ``coefficients`` holds (muscle, coefficient) pairs; muscles that are not
    listed have an implicit coefficient of 0.
    """

    name: Archetype
    coefficients: tuple[tuple[MuscleGroup, float], ...] = field(default_factory=tuple)
    display_name: str = ""

    @classmethod
    def from_mapping(
        cls,
        name: Archetype,
        coefficients: dict[MuscleGroup, float],
        display_name: str | None = None,
    ) -> ArchetypeConfig:
        """Build a config from a muscle → coefficient dict."""
        return cls(
            name=name,
            coefficients=tuple(coefficients.items()),
            display_name=display_name if display_name is not None else ARCHETYPE_DISPLAY_NAMES[name],
        )

    def coefficient_map(self) -> dict[MuscleGroup, float]:
        """Return a fresh muscle → coefficient dict."""
        return dict(self.coefficients)


@dataclass(frozen=True)
class ArchetypeTable:
    """Frozen lookup of archetype configs by name.

    When two configs share a name the later one wins, matching how a
    name-keyed map is built from a list.
    """

    configs: tuple[ArchetypeConfig, ...] = field(default_factory=tuple)

    @classmethod
    def from_configs(cls, *configs: ArchetypeConfig) -> ArchetypeTable:
        return cls(configs=tuple(configs))

    def get(self, name: Archetype) -> ArchetypeConfig | None:
        """Return the config for *name*, or None if the table lacks it."""
        found = None
        for config in self.configs:
            if config.name == name:
                found = config
        return found

    def coefficients_for(self, name: Archetype) -> dict[MuscleGroup, float]:
        """Coefficients for *name*; an empty dict when the table lacks it."""
        config = self.get(name)
        if config is None:
            return {}
        return config.coefficient_map()

    @property
    def names(self) -> tuple[Archetype, ...]:
        return tuple(dict.fromkeys(c.name for c in self.configs))

    @property
    def is_empty(self) -> bool:
        return len(self.configs) == 0


# Server seed values for the eight archetypes.
DEFAULT_ARCHETYPES = ArchetypeTable.from_configs(
    ArchetypeConfig.from_mapping(Archetype.PUSH, {
        MuscleGroup.CHEST: 1.0,
        MuscleGroup.FRONT_DELT: 1.0,
        MuscleGroup.TRICEPS: 0.7,
        MuscleGroup.SIDE_DELT: 0.7,
        MuscleGroup.CORE: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.PULL, {
        MuscleGroup.LATS: 1.0,
        MuscleGroup.TRAPS: 1.0,
        MuscleGroup.BICEPS: 0.7,
        MuscleGroup.REAR_DELT: 0.7,
        MuscleGroup.FOREARMS: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.LEGS, {
        MuscleGroup.QUADS: 1.0,
        MuscleGroup.GLUTES: 1.0,
        MuscleGroup.HAMSTRINGS: 0.7,
        MuscleGroup.CALVES: 0.7,
        MuscleGroup.LOWER_BACK: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.UPPER, {
        MuscleGroup.CHEST: 0.7,
        MuscleGroup.LATS: 0.7,
        MuscleGroup.FRONT_DELT: 0.7,
        MuscleGroup.TRAPS: 0.5,
        MuscleGroup.BICEPS: 0.5,
        MuscleGroup.TRICEPS: 0.5,
    }),
    ArchetypeConfig.from_mapping(Archetype.LOWER, {
        MuscleGroup.QUADS: 0.8,
        MuscleGroup.GLUTES: 0.8,
        MuscleGroup.HAMSTRINGS: 0.8,
        MuscleGroup.CALVES: 0.6,
        MuscleGroup.LOWER_BACK: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.FULL_BODY, {
        MuscleGroup.CHEST: 0.5,
        MuscleGroup.LATS: 0.5,
        MuscleGroup.QUADS: 0.5,
        MuscleGroup.GLUTES: 0.5,
        MuscleGroup.FRONT_DELT: 0.4,
        MuscleGroup.HAMSTRINGS: 0.4,
        MuscleGroup.CORE: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.CARDIO_IMPACT, {
        MuscleGroup.CALVES: 1.0,
        MuscleGroup.HAMSTRINGS: 1.0,
        MuscleGroup.QUADS: 0.7,
        MuscleGroup.GLUTES: 0.7,
        MuscleGroup.CORE: 0.4,
    }),
    ArchetypeConfig.from_mapping(Archetype.CARDIO_LOW, {
        MuscleGroup.QUADS: 0.5,
        MuscleGroup.GLUTES: 0.5,
        MuscleGroup.HAMSTRINGS: 0.3,
        MuscleGroup.CALVES: 0.3,
    }),
)
