"""Tests for the muscle catalog, archetype table and training type resolution."""

from __future__ import annotations

import pytest

from fatigue_engine.exceptions import (
    FatigueEngineError,
    InvalidArchetypeError,
    InvalidMuscleGroupError,
)
from fatigue_engine.models.archetypes import (
    ARCHETYPE_DISPLAY_NAMES,
    DEFAULT_ARCHETYPES,
    ArchetypeConfig,
    ArchetypeTable,
    parse_archetype,
)
from fatigue_engine.models.enums import Archetype, MuscleGroup, TrainingType
from fatigue_engine.models.muscles import (
    ALL_MUSCLE_GROUPS,
    MUSCLE_DISPLAY_NAMES,
    muscle_index,
    parse_muscle_group,
)
from fatigue_engine.models.training_types import (
    FALLBACK_ARCHETYPE,
    TRAINING_TYPE_ARCHETYPES,
    resolve_archetype,
)


class TestMuscleCatalog:
    def test_fifteen_muscles(self) -> None:
        assert len(ALL_MUSCLE_GROUPS) == 15

    def test_canonical_order(self) -> None:
        assert [m.tag for m in ALL_MUSCLE_GROUPS] == [
            "chest", "front_delt", "triceps", "side_delt", "lats", "traps",
            "biceps", "rear_delt", "forearms", "quads", "glutes", "hamstrings",
            "calves", "lower_back", "core",
        ]

    def test_every_muscle_has_display_name(self) -> None:
        assert set(MUSCLE_DISPLAY_NAMES) == set(ALL_MUSCLE_GROUPS)
        assert MUSCLE_DISPLAY_NAMES[MuscleGroup.CORE] == "Core/Abs"

    def test_index_is_zero_based_id(self) -> None:
        assert muscle_index(MuscleGroup.CHEST) == 0
        assert muscle_index(MuscleGroup.CORE) == 14

    def test_parse_valid(self) -> None:
        assert parse_muscle_group("lower_back") == MuscleGroup.LOWER_BACK

    def test_parse_invalid_raises(self) -> None:
        with pytest.raises(InvalidMuscleGroupError) as excinfo:
            parse_muscle_group("neck")
        assert excinfo.value.value == "neck"
        assert isinstance(excinfo.value, FatigueEngineError)


class TestTrainingTypeResolution:
    def test_every_training_type_mapped(self) -> None:
        assert set(TRAINING_TYPE_ARCHETYPES) == set(TrainingType)

    @pytest.mark.parametrize(
        "tag, archetype",
        [
            ("strength", Archetype.UPPER),
            ("calisthenics", Archetype.FULL_BODY),
            ("hiit", Archetype.FULL_BODY),
            ("run", Archetype.CARDIO_IMPACT),
            ("row", Archetype.PULL),
            ("cycle", Archetype.CARDIO_LOW),
            ("gmb", Archetype.FULL_BODY),
            ("rest", Archetype.CARDIO_LOW),
            ("mixed", Archetype.FULL_BODY),
        ],
    )
    def test_known_tags(self, tag: str, archetype: Archetype) -> None:
        assert resolve_archetype(tag) == archetype

    def test_enum_input(self) -> None:
        assert resolve_archetype(TrainingType.ROW) == Archetype.PULL

    def test_tag_normalised(self) -> None:
        assert resolve_archetype("  Run ") == Archetype.CARDIO_IMPACT

    @pytest.mark.parametrize("tag", ["", "swimming", "yoga!", "None"])
    def test_unknown_falls_back_to_low_impact(self, tag: str) -> None:
        assert resolve_archetype(tag) == FALLBACK_ARCHETYPE == Archetype.CARDIO_LOW


class TestArchetypeTable:
    def test_default_table_has_all_archetypes(self) -> None:
        assert set(DEFAULT_ARCHETYPES.names) == set(Archetype)

    def test_default_coefficients_in_unit_range(self) -> None:
        for config in DEFAULT_ARCHETYPES.configs:
            for _, coefficient in config.coefficients:
                assert 0.0 <= coefficient <= 1.0

    def test_default_push_profile(self) -> None:
        push = DEFAULT_ARCHETYPES.coefficients_for(Archetype.PUSH)
        assert push[MuscleGroup.CHEST] == 1.0
        assert push[MuscleGroup.CORE] == 0.4
        assert MuscleGroup.LATS not in push

    def test_missing_archetype_gives_empty_map(self) -> None:
        assert ArchetypeTable().coefficients_for(Archetype.LEGS) == {}
        assert ArchetypeTable().get(Archetype.LEGS) is None

    def test_later_config_wins(self) -> None:
        table = ArchetypeTable.from_configs(
            ArchetypeConfig.from_mapping(Archetype.LEGS, {MuscleGroup.QUADS: 0.2}),
            ArchetypeConfig.from_mapping(Archetype.LEGS, {MuscleGroup.QUADS: 0.9}),
        )
        assert table.coefficients_for(Archetype.LEGS) == {MuscleGroup.QUADS: 0.9}
        assert table.names == (Archetype.LEGS,)

    def test_coefficient_map_is_a_copy(self) -> None:
        coefficients = DEFAULT_ARCHETYPES.coefficients_for(Archetype.PULL)
        coefficients[MuscleGroup.LATS] = 0.0
        assert DEFAULT_ARCHETYPES.coefficients_for(Archetype.PULL)[MuscleGroup.LATS] == 1.0

    def test_display_name_defaults(self) -> None:
        config = ArchetypeConfig.from_mapping(Archetype.CARDIO_IMPACT, {})
        assert config.display_name == ARCHETYPE_DISPLAY_NAMES[Archetype.CARDIO_IMPACT]

    def test_is_empty(self) -> None:
        assert ArchetypeTable().is_empty
        assert not DEFAULT_ARCHETYPES.is_empty

    def test_parse_archetype(self) -> None:
        assert parse_archetype("full_body") == Archetype.FULL_BODY
        with pytest.raises(InvalidArchetypeError):
            parse_archetype("arms")
