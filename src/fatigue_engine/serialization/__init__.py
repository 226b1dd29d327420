"""Serialization module — wire JSON and pandas views of simulations."""

from fatigue_engine.serialization.frame import final_fatigue_series, trajectory_frame
from fatigue_engine.serialization.wire import (
    archetype_table_from_dicts,
    day_template_from_dict,
    to_json,
    to_json_string,
)

__all__ = [
    "archetype_table_from_dicts",
    "day_template_from_dict",
    "final_fatigue_series",
    "to_json",
    "to_json_string",
    "trajectory_frame",
]
