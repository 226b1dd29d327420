"""Tabular views of a simulation for analysis and charting."""

from __future__ import annotations

import numpy as np
import pandas as pd

from fatigue_engine.models.muscles import ALL_MUSCLE_GROUPS
from fatigue_engine.models.simulation_result import SimulationResult


def trajectory_frame(result: SimulationResult) -> pd.DataFrame:
    """Fatigue after each simulated day.

    One row per day (index ``day``), one column per muscle tag, plus
    ``archetype``, ``effective_rpe`` and ``session_load`` columns. Values are
    unrounded.
    """
    columns = [m.tag for m in ALL_MUSCLE_GROUPS]
    if not result.day_reports:
        frame = pd.DataFrame(columns=["archetype", "effective_rpe", "session_load", *columns])
        frame.index.name = "day"
        return frame

    fatigue = np.array([r.fatigue_after for r in result.day_reports], dtype=np.float64)
    frame = pd.DataFrame(fatigue, columns=columns)
    frame.insert(0, "archetype", [r.archetype.tag for r in result.day_reports])
    frame.insert(1, "effective_rpe", [r.effective_rpe for r in result.day_reports])
    frame.insert(2, "session_load", [r.session_load for r in result.day_reports])
    frame.index = pd.RangeIndex(len(result.day_reports), name="day")
    return frame


def final_fatigue_series(result: SimulationResult) -> pd.Series:
    """Rounded final fatigue percent, indexed by muscle tag in body order."""
    return pd.Series(
        [m.fatigue_percent for m in result.muscle_fatigues],
        index=pd.Index([m.muscle.tag for m in result.muscle_fatigues], name="muscle"),
        dtype=np.float64,
        name="fatigue_percent",
    )
