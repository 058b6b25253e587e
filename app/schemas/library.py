"""
Exercise library schemas.

The exercise library is owned by the caller.  The analytics engine only
reads it: every lookup goes through :class:`ExerciseLibrary`, which returns
``None`` for unknown ids so that a missing entry simply removes that
exercise's contribution instead of failing a whole computation.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Enums
# ======================================================================


class UserLevel(str, Enum):
    """Lifter experience level used by the progression engine."""
    NOVICE = "NOVICE"
    INTERMEDIATE = "INTERMEDIATE"


class Tier(str, Enum):
    """Exercise priority classification.

    * ``TIER_1``: main lift / heavy compound
    * ``TIER_2``: assistance / volume
    * ``TIER_3``: accessory / isolation
    """
    TIER_1 = "TIER_1"
    TIER_2 = "TIER_2"
    TIER_3 = "TIER_3"


class BodyRegion(str, Enum):
    UPPER = "UPPER"
    LOWER = "LOWER"
    CORE = "CORE"
    FULL = "FULL"


class TargetMuscle(str, Enum):
    CHEST_UPPER = "CHEST_UPPER"
    CHEST_MIDDLE = "CHEST_MIDDLE"
    CHEST_LOWER = "CHEST_LOWER"
    LATS = "LATS"
    TRAPS_MID = "TRAPS_MID"
    TRAPS_UPPER = "TRAPS_UPPER"
    LOWER_BACK = "LOWER_BACK"
    DELT_FRONT = "DELT_FRONT"
    DELT_SIDE = "DELT_SIDE"
    DELT_REAR = "DELT_REAR"
    BICEPS = "BICEPS"
    TRICEPS_LONG = "TRICEPS_LONG"
    TRICEPS_LATERAL = "TRICEPS_LATERAL"
    FOREARMS = "FOREARMS"
    QUADS = "QUADS"
    HAMSTRINGS = "HAMSTRINGS"
    GLUTES = "GLUTES"
    CALVES = "CALVES"
    TIBIALIS = "TIBIALIS"
    ADDUCTORS = "ADDUCTORS"
    ABDUCTORS = "ABDUCTORS"
    HIPFLEXORS = "HIPFLEXORS"
    ABS = "ABS"
    OBLIQUES = "OBLIQUES"


class MovementPattern(str, Enum):
    SQUAT = "SQUAT"
    HINGE = "HINGE"
    LUNGE = "LUNGE"
    PUSH_HORIZONTAL = "PUSH_HORIZONTAL"
    PUSH_VERTICAL = "PUSH_VERTICAL"
    PULL_HORIZONTAL = "PULL_HORIZONTAL"
    PULL_VERTICAL = "PULL_VERTICAL"
    CARRY = "CARRY"
    ISOLATION_ELBOW_FLEXION = "ISOLATION_ELBOW_FLEXION"
    ISOLATION_ELBOW_EXTENSION = "ISOLATION_ELBOW_EXTENSION"
    ISOLATION_SHOULDER_ABDUCTION = "ISOLATION_SHOULDER_ABDUCTION"
    ISOLATION_SHOULDER_FLEXION = "ISOLATION_SHOULDER_FLEXION"
    ISOLATION_SHOULDER_EXTENSION = "ISOLATION_SHOULDER_EXTENSION"
    ISOLATION_KNEE_FLEXION = "ISOLATION_KNEE_FLEXION"
    ISOLATION_KNEE_EXTENSION = "ISOLATION_KNEE_EXTENSION"
    ISOLATION_PLANTAR_FLEXION = "ISOLATION_PLANTAR_FLEXION"
    CORE_FLEXION = "CORE_FLEXION"
    CORE_STABILITY = "CORE_STABILITY"
    OTHER = "OTHER"


class Mechanics(str, Enum):
    COMPOUND = "COMPOUND"
    ISOLATION = "ISOLATION"


# ======================================================================
# Library items
# ======================================================================


class ExerciseLibraryItem(BaseModel):
    """A single exercise definition.

    ``region`` may be absent; the fatigue engine then derives it from
    ``primary_targets``.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    region: Optional[BodyRegion] = None
    pattern: Optional[MovementPattern] = None
    tier: Optional[Tier] = None
    primary_targets: list[TargetMuscle] = Field(default_factory=list)
    secondary_targets: list[TargetMuscle] = Field(default_factory=list)
    manual_mechanics: Optional[Mechanics] = Field(
        None,
        description="Explicit mechanics override; derived from targets when absent",
    )

    @property
    def mechanics(self) -> Mechanics:
        if self.manual_mechanics is not None:
            return self.manual_mechanics
        if self.secondary_targets or len(self.primary_targets) > 1:
            return Mechanics.COMPOUND
        return Mechanics.ISOLATION


class ExerciseLibrary:
    """Read-only, id-keyed view over a list of library items."""

    def __init__(self, items: Iterable[ExerciseLibraryItem] = ()) -> None:
        self._items: dict[int, ExerciseLibraryItem] = {item.id: item for item in items}

    def get(self, exercise_id: int) -> Optional[ExerciseLibraryItem]:
        """Look up an exercise by id.  Returns ``None`` if not found."""
        return self._items.get(exercise_id)

    def items(self) -> list[ExerciseLibraryItem]:
        return list(self._items.values())

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    @classmethod
    def coerce(
        cls,
        library: "ExerciseLibrary | Iterable[ExerciseLibraryItem] | None",
    ) -> "ExerciseLibrary":
        """Accept either a library or a plain list of items."""
        if isinstance(library, ExerciseLibrary):
            return library
        return cls(library or ())
