"""Custom exception hierarchy for the fatigue engine.

The simulation itself never raises on bad categorical data; these are for
callers that validate input up front.
"""

from __future__ import annotations


class FatigueEngineError(Exception):
    """Base exception for all fatigue_engine errors."""


class InvalidMuscleGroupError(FatigueEngineError):
    """A string does not name one of the 15 tracked muscle groups."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid muscle group: {value!r}")
        self.value = value


class InvalidArchetypeError(FatigueEngineError):
    """A string does not name a known archetype."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid archetype: {value!r}")
        self.value = value


class PlanFormatError(FatigueEngineError):
    """A serialized training plan could not be interpreted."""
