"""Environment-variable-based configuration for the fatigue preview CLI."""

from __future__ import annotations

import os
from pathlib import Path

_archetypes_env = os.environ.get("PREVIEW_ARCHETYPES_PATH", "")
ARCHETYPES_PATH: Path | None = Path(_archetypes_env).expanduser() if _archetypes_env else None
INTENSITY_SCALE: float = float(os.environ.get("PREVIEW_INTENSITY_SCALE", "1.0"))
LOG_LEVEL: str = os.environ.get("PREVIEW_LOG_LEVEL", "INFO").upper()
