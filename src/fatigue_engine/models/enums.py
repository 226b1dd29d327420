"""Enumerations and model constants for the fatigue engine.

Every constant here is shared with the server-side fatigue computation; a
preview that drifts from it is wrong, so change both or neither.
"""

from enum import IntEnum, auto


class MuscleGroup(IntEnum):
    """The 15 tracked muscle groups in canonical body-map order.

    The integer value is the muscle group id used by the server.
    """

    CHEST = 1
    FRONT_DELT = 2
    TRICEPS = 3
    SIDE_DELT = 4
    LATS = 5
    TRAPS = 6
    BICEPS = 7
    REAR_DELT = 8
    FOREARMS = 9
    QUADS = 10
    GLUTES = 11
    HAMSTRINGS = 12
    CALVES = 13
    LOWER_BACK = 14
    CORE = 15

    @property
    def tag(self) -> str:
        """Wire identifier, e.g. ``"front_delt"``."""
        return self.name.lower()


class Archetype(IntEnum):
    """Movement-pattern categories with a fixed muscle loading profile."""

    PUSH = 1
    PULL = 2
    LEGS = 3
    UPPER = 4
    LOWER = 5
    FULL_BODY = 6
    CARDIO_IMPACT = 7
    CARDIO_LOW = 8

    @property
    def tag(self) -> str:
        return self.name.lower()


class TrainingType(IntEnum):
    """Training-type tags a planned day can carry."""

    STRENGTH = auto()
    CALISTHENICS = auto()
    HIIT = auto()
    RUN = auto()
    ROW = auto()
    CYCLE = auto()
    MOBILITY = auto()
    GMB = auto()
    WALKING = auto()
    QIGONG = auto()
    REST = auto()
    MIXED = auto()

    @property
    def tag(self) -> str:
        return self.name.lower()


class FatigueStatus(IntEnum):
    """Ordinal fatigue classification; higher value = more fatigued."""

    FRESH = auto()        # 0-25%
    STIMULATED = auto()   # 25-50%
    FATIGUED = auto()     # 50-75%
    OVERREACHED = auto()  # 75-100%

    @property
    def label(self) -> str:
        return self.name.lower()


# ---------------------------------------------------------------------------
# Fatigue model constants
# ---------------------------------------------------------------------------

# Recovery rate: a 48%-fatigued muscle is fully recovered after 24 hours
FATIGUE_DECAY_PERCENT_PER_HOUR = 2.0

# Planned days are assumed to be exactly one day apart
HOURS_BETWEEN_DAYS = 24.0

# Fatigue is a percentage
FATIGUE_MIN_PERCENT = 0.0
FATIGUE_MAX_PERCENT = 100.0

# Load score (1-5) → RPE (2-10)
LOAD_SCORE_RPE_FACTOR = 2
RPE_MIN = 1.0
RPE_MAX = 10.0

# Status boundaries, inclusive toward the lower category
STATUS_FRESH_MAX = 25.0
STATUS_STIMULATED_MAX = 50.0
STATUS_FATIGUED_MAX = 75.0

# Neural overload: this many consecutive days at or above the RPE threshold
NEURAL_OVERLOAD_RPE_THRESHOLD = 8.0
NEURAL_OVERLOAD_STREAK_REQUIRED = 3

# Reported percentages are rounded half-up to this many decimals
FATIGUE_DECIMALS = 1

# Relative weights for the overall body score; larger muscle groups count more
MUSCLE_WEIGHTS = {
    MuscleGroup.CHEST: 1.2,
    MuscleGroup.LATS: 1.2,
    MuscleGroup.QUADS: 1.3,
    MuscleGroup.GLUTES: 1.3,
    MuscleGroup.HAMSTRINGS: 1.0,
    MuscleGroup.TRAPS: 0.8,
    MuscleGroup.TRICEPS: 0.6,
    MuscleGroup.BICEPS: 0.6,
    MuscleGroup.FRONT_DELT: 0.5,
    MuscleGroup.REAR_DELT: 0.5,
    MuscleGroup.SIDE_DELT: 0.5,
    MuscleGroup.FOREARMS: 0.4,
    MuscleGroup.CALVES: 0.5,
    MuscleGroup.LOWER_BACK: 0.7,
    MuscleGroup.CORE: 0.8,
}
DEFAULT_MUSCLE_WEIGHT = 0.5
