"""camelCase JSON wire format for plans, archetype tables and simulation results.

Matches the shapes the web client exchanges with the server:
    day template   {"trainingType", "loadScore", "durationMin"}
    archetype      {"name", "displayName", "coefficients": {muscle: coefficient}}
    result         {"muscleFatigues", "neuralOverload", "dailyEffectiveRPEs", "overallScore"}

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from fatigue_engine.exceptions import PlanFormatError
from fatigue_engine.models.archetypes import (
    ARCHETYPE_DISPLAY_NAMES,
    ArchetypeConfig,
    ArchetypeTable,
    lookup_archetype,
)
from fatigue_engine.models.day_template import DayTemplate
from fatigue_engine.models.muscles import lookup_muscle_group
from fatigue_engine.models.simulation_result import MuscleFatigue, SimulationResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def day_template_from_dict(data: dict[str, Any]) -> DayTemplate:
    """Build a DayTemplate from a ``{"trainingType", "loadScore", "durationMin"}`` dict.

    Fractional load scores are kept as given.

    Raises:
        PlanFormatError: If a field is missing or not numeric.
    """
    try:
        return DayTemplate(
            training_type=str(data["trainingType"]),
            load_score=float(data["loadScore"]),
            duration_min=float(data["durationMin"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PlanFormatError(f"Invalid day template {data!r}: {exc}") from exc


def archetype_config_from_dict(data: dict[str, Any]) -> ArchetypeConfig | None:
    """Build an ArchetypeConfig; None when the entry is unusable.

    Entries that are not objects, carry an unknown name, or whose
    ``coefficients`` is not an object are skipped with a warning. Unknown
    muscle tags inside ``coefficients`` are dropped.
    """
    if not isinstance(data, dict):
        logger.warning("Skipping archetype entry %r: expected an object", data)
        return None

    name = lookup_archetype(str(data.get("name", "")))
    if name is None:
        logger.warning("Skipping unknown archetype %r", data.get("name"))
        return None

    raw_coefficients = data.get("coefficients") or {}
    if not isinstance(raw_coefficients, dict):
        logger.warning(
            "Skipping archetype %s: coefficients must be an object, got %r",
            name.tag, raw_coefficients,
        )
        return None

    coefficients = {}
    for tag, value in raw_coefficients.items():
        muscle = lookup_muscle_group(tag)
        if muscle is None:
            logger.warning("Archetype %s: skipping unknown muscle %r", name.tag, tag)
            continue
        try:
            coefficients[muscle] = float(value)
        except (TypeError, ValueError):
            logger.warning("Archetype %s: skipping non-numeric coefficient for %s", name.tag, tag)

    return ArchetypeConfig.from_mapping(
        name,
        coefficients,
        display_name=data.get("displayName") or ARCHETYPE_DISPLAY_NAMES[name],
    )


def archetype_table_from_dicts(items: Iterable[dict[str, Any]]) -> ArchetypeTable:
    """Build an ArchetypeTable from a list of archetype dicts (e.g. GET /api/archetypes)."""
    configs = []
    for item in items:
        config = archetype_config_from_dict(item)
        if config is not None:
            configs.append(config)
    return ArchetypeTable.from_configs(*configs)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _muscle_fatigue_to_dict(entry: MuscleFatigue) -> dict:
    return {
        "muscleGroupId": entry.muscle.value,
        "muscle": entry.muscle.tag,
        "displayName": entry.display_name,
        "fatiguePercent": entry.fatigue_percent,
        "status": entry.status.label,
    }


def to_json(result: SimulationResult) -> dict:
    """Convert a SimulationResult to its wire dict."""
    return {
        "muscleFatigues": [_muscle_fatigue_to_dict(m) for m in result.muscle_fatigues],
        "neuralOverload": result.neural_overload,
        "dailyEffectiveRPEs": list(result.daily_effective_rpe),
        "overallScore": result.overall_score,
    }


def to_json_string(result: SimulationResult, indent: int = 2) -> str:
    """Convert a SimulationResult to a JSON string."""
    return json.dumps(to_json(result), indent=indent)
