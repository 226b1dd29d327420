"""Fatigue preview: simulate a planned week from a JSON file and print the result.

Usage:
    python -m preview.run plan.json
    python -m preview.run plan.json --intensity-scale 0.7 --archetypes archetypes.json

The plan file is either a list of day templates or an object
``{"days": [...], "intensityScale": 0.8}``. An explicit --intensity-scale
overrides the file's value.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from fatigue_engine.engine import FatigueSimulator
from fatigue_engine.exceptions import FatigueEngineError, PlanFormatError
from fatigue_engine.models.archetypes import DEFAULT_ARCHETYPES, ArchetypeTable
from fatigue_engine.models.day_template import DayTemplate
from fatigue_engine.serialization import (
    archetype_table_from_dicts,
    day_template_from_dict,
    to_json_string,
)

from preview.config import ARCHETYPES_PATH, INTENSITY_SCALE, LOG_LEVEL

logger = logging.getLogger(__name__)


def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_plan(path: Path) -> tuple[list[DayTemplate], float | None]:
    """Read day templates (and an optional intensity scale) from *path*."""
    raw = _load_json(path)
    scale = None
    if isinstance(raw, dict):
        scale = raw.get("intensityScale")
        raw = raw.get("days")
    if not isinstance(raw, list):
        raise PlanFormatError(f"{path}: expected a list of days")
    days = [day_template_from_dict(item) for item in raw]
    if scale is None:
        return days, None
    try:
        return days, float(scale)
    except (TypeError, ValueError) as exc:
        raise PlanFormatError(f"{path}: invalid intensityScale {scale!r}") from exc


def load_archetypes(path: Path | None) -> ArchetypeTable:
    """Read an archetype table from *path*, or the default table when None."""
    if path is None:
        return DEFAULT_ARCHETYPES
    raw = _load_json(path)
    if not isinstance(raw, list):
        raise PlanFormatError(f"{path}: expected a list of archetypes")
    return archetype_table_from_dicts(raw)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Muscle fatigue preview for a planned week")
    parser.add_argument("plan", type=Path, help="JSON file with the planned days")
    parser.add_argument("--intensity-scale", type=float, default=None,
                        help=f"Week-level RPE multiplier (default {INTENSITY_SCALE})")
    parser.add_argument("--archetypes", type=Path, default=ARCHETYPES_PATH,
                        help="JSON archetype coefficient table (default: built-in table)")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        days, file_scale = load_plan(args.plan)
        table = load_archetypes(args.archetypes)
    except (FatigueEngineError, OSError, json.JSONDecodeError) as exc:
        logger.error("Could not load inputs: %s", exc)
        return 1

    if args.intensity_scale is not None:
        scale = args.intensity_scale
    elif file_scale is not None:
        scale = file_scale
    else:
        scale = INTENSITY_SCALE

    result = FatigueSimulator(table).simulate(days, intensity_scale=scale)
    logger.info(
        "Simulated %d days at scale %.2f, overall %.1f%%, neural overload: %s",
        len(days), scale, result.overall_score, result.neural_overload,
    )
    print(to_json_string(result, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
