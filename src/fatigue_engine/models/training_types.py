"""Training type → archetype resolution."""

from __future__ import annotations

from fatigue_engine.models.enums import Archetype, TrainingType

# Archetype that best represents each training type's muscle loading pattern.
TRAINING_TYPE_ARCHETYPES: dict[TrainingType, Archetype] = {
    TrainingType.STRENGTH: Archetype.UPPER,
    TrainingType.CALISTHENICS: Archetype.FULL_BODY,
    TrainingType.HIIT: Archetype.FULL_BODY,
    TrainingType.RUN: Archetype.CARDIO_IMPACT,
    TrainingType.ROW: Archetype.PULL,
    TrainingType.CYCLE: Archetype.CARDIO_LOW,
    TrainingType.MOBILITY: Archetype.CARDIO_LOW,
    TrainingType.GMB: Archetype.FULL_BODY,
    TrainingType.WALKING: Archetype.CARDIO_LOW,
    TrainingType.QIGONG: Archetype.CARDIO_LOW,
    TrainingType.REST: Archetype.CARDIO_LOW,
    TrainingType.MIXED: Archetype.FULL_BODY,
}

# Lowest-impact pattern, used for any tag we do not recognise
FALLBACK_ARCHETYPE = Archetype.CARDIO_LOW

_BY_TAG: dict[str, TrainingType] = {t.tag: t for t in TrainingType}


def lookup_training_type(tag: str) -> TrainingType | None:
    """Return the TrainingType for a tag (case/whitespace-insensitive), or None."""
    return _BY_TAG.get(tag.strip().lower())


def resolve_archetype(training_type: TrainingType | str) -> Archetype:
    """Map a training type (enum or wire tag) to its archetype.

    Total function: unknown tags resolve to ``FALLBACK_ARCHETYPE``.
    """
    if not isinstance(training_type, TrainingType):
        training_type = lookup_training_type(str(training_type))
    if training_type is None:
        return FALLBACK_ARCHETYPE
    return TRAINING_TYPE_ARCHETYPES.get(training_type, FALLBACK_ARCHETYPE)
