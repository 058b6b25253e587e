"""
Built-in exercise library.

Each entry is an :class:`~app.schemas.library.ExerciseLibraryItem` with a
body region, movement pattern, tier and target muscles.  Region and tier
drive the fatigue engine; the targets let a custom exercise without an
explicit region still be classified.

Ids 1-99 are the long-standing ids of the first exercise list and must
stay stable because logged history references them.  Newer entries start
at 100.

To add a new exercise, call :func:`register_exercise` or append to
``_EXERCISES`` at import time.
"""

from __future__ import annotations

from app.schemas.library import (
    BodyRegion,
    ExerciseLibrary,
    ExerciseLibraryItem,
    MovementPattern,
    TargetMuscle,
    Tier,
)

# ======================================================================
# Catalog storage
# ======================================================================

EXERCISE_CATALOG: dict[int, ExerciseLibraryItem] = {}


def register_exercise(item: ExerciseLibraryItem) -> None:
    """Register an exercise in the built-in catalog."""
    EXERCISE_CATALOG[item.id] = item


def get_exercise(exercise_id: int) -> ExerciseLibraryItem | None:
    """Look up an exercise by its id.  Returns ``None`` if not found."""
    return EXERCISE_CATALOG.get(exercise_id)


def default_library() -> ExerciseLibrary:
    """An :class:`ExerciseLibrary` over every built-in exercise."""
    return ExerciseLibrary(EXERCISE_CATALOG.values())


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
UP = BodyRegion.UPPER
LO = BodyRegion.LOWER
CO = BodyRegion.CORE
FB = BodyRegion.FULL
T1 = Tier.TIER_1
T2 = Tier.TIER_2
T3 = Tier.TIER_3
P = MovementPattern
M = TargetMuscle

# ======================================================================
# Built-in exercises
# ======================================================================

_EXERCISES: list[ExerciseLibraryItem] = [
    # ── Long-standing ids ─────────────────────────────────────────
    ExerciseLibraryItem(
        id=1, name="Deadlift (Barbell)", region=LO, pattern=P.HINGE, tier=T1,
        primary_targets=[M.HAMSTRINGS, M.GLUTES, M.LOWER_BACK],
        secondary_targets=[M.TRAPS_UPPER, M.FOREARMS, M.QUADS, M.ADDUCTORS],
    ),
    ExerciseLibraryItem(
        id=2, name="Back Squat (Barbell)", region=LO, pattern=P.SQUAT, tier=T1,
        primary_targets=[M.QUADS, M.GLUTES, M.ADDUCTORS],
        secondary_targets=[M.LOWER_BACK, M.ABS],
    ),
    ExerciseLibraryItem(
        id=4, name="Bicep Curl (Dumbbell)", region=UP,
        pattern=P.ISOLATION_ELBOW_FLEXION, tier=T3,
        primary_targets=[M.BICEPS], secondary_targets=[M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=5, name="Triceps Pushdown (Cable)", region=UP,
        pattern=P.ISOLATION_ELBOW_EXTENSION, tier=T3,
        primary_targets=[M.TRICEPS_LATERAL],
    ),
    ExerciseLibraryItem(
        id=7, name="Bench Press (Barbell)", region=UP, pattern=P.PUSH_HORIZONTAL, tier=T1,
        primary_targets=[M.CHEST_MIDDLE, M.TRICEPS_LATERAL, M.DELT_FRONT],
        secondary_targets=[M.CHEST_UPPER],
    ),
    ExerciseLibraryItem(
        id=8, name="Split Squat (Barbell)", region=LO, pattern=P.LUNGE, tier=T2,
        primary_targets=[M.QUADS, M.GLUTES],
        secondary_targets=[M.ADDUCTORS, M.CALVES],
    ),
    ExerciseLibraryItem(
        id=9, name="Calf Raise (Machine)", region=LO,
        pattern=P.ISOLATION_PLANTAR_FLEXION, tier=T3,
        primary_targets=[M.CALVES],
    ),
    ExerciseLibraryItem(
        id=10, name="Decline Bench Press (Barbell)", region=UP,
        pattern=P.PUSH_HORIZONTAL, tier=T2,
        primary_targets=[M.CHEST_LOWER, M.TRICEPS_LATERAL],
        secondary_targets=[M.DELT_FRONT],
    ),
    ExerciseLibraryItem(
        id=11, name="Incline Dumbbell Press", region=UP, pattern=P.PUSH_HORIZONTAL, tier=T2,
        primary_targets=[M.CHEST_UPPER, M.DELT_FRONT],
        secondary_targets=[M.TRICEPS_LATERAL],
    ),
    ExerciseLibraryItem(
        id=12, name="Seated Cable Row", region=UP, pattern=P.PULL_HORIZONTAL, tier=T1,
        primary_targets=[M.LATS, M.TRAPS_MID],
        secondary_targets=[M.BICEPS, M.DELT_REAR],
    ),
    ExerciseLibraryItem(
        id=13, name="Triceps Extension (Single Arm)", region=UP,
        pattern=P.ISOLATION_ELBOW_EXTENSION, tier=T3,
        primary_targets=[M.TRICEPS_LONG],
    ),
    ExerciseLibraryItem(
        id=14, name="Machine Shoulder Press", region=UP, pattern=P.PUSH_VERTICAL, tier=T2,
        primary_targets=[M.DELT_FRONT, M.DELT_SIDE],
        secondary_targets=[M.TRICEPS_LATERAL, M.TRAPS_UPPER],
    ),
    ExerciseLibraryItem(
        id=15, name="Dips (Bodyweight)", region=UP, pattern=P.PUSH_VERTICAL, tier=T2,
        primary_targets=[M.CHEST_LOWER, M.TRICEPS_LATERAL],
        secondary_targets=[M.DELT_FRONT],
    ),
    ExerciseLibraryItem(
        id=16, name="Abdominal Crunch (Machine)", region=CO, pattern=P.CORE_FLEXION, tier=T3,
        primary_targets=[M.ABS],
    ),
    ExerciseLibraryItem(
        id=17, name="Bench Press (Paused)", region=UP, pattern=P.PUSH_HORIZONTAL, tier=T1,
        primary_targets=[M.CHEST_MIDDLE, M.TRICEPS_LATERAL],
        secondary_targets=[M.DELT_FRONT],
    ),
    ExerciseLibraryItem(
        id=18, name="Leg Curl (Machine)", region=LO,
        pattern=P.ISOLATION_KNEE_FLEXION, tier=T3,
        primary_targets=[M.HAMSTRINGS],
    ),

    # ── Upper body: push ──────────────────────────────────────────
    ExerciseLibraryItem(
        id=100, name="Overhead Press (Barbell)", region=UP, pattern=P.PUSH_VERTICAL, tier=T1,
        primary_targets=[M.DELT_FRONT, M.TRICEPS_LATERAL],
        secondary_targets=[M.TRAPS_UPPER, M.ABS],
    ),
    ExerciseLibraryItem(
        id=118, name="Dumbbell Shoulder Press (Seated)", region=UP,
        pattern=P.PUSH_VERTICAL, tier=T2,
        primary_targets=[M.DELT_FRONT, M.DELT_SIDE],
        secondary_targets=[M.TRICEPS_LATERAL],
    ),
    ExerciseLibraryItem(
        id=131, name="Push Up", region=UP, pattern=P.PUSH_HORIZONTAL, tier=T3,
        primary_targets=[M.CHEST_MIDDLE, M.TRICEPS_LATERAL],
        secondary_targets=[M.ABS, M.DELT_FRONT],
    ),
    ExerciseLibraryItem(
        id=117, name="Pec Deck / Machine Fly", region=UP, pattern=P.PUSH_HORIZONTAL, tier=T3,
        primary_targets=[M.CHEST_MIDDLE], secondary_targets=[M.DELT_FRONT],
    ),
    ExerciseLibraryItem(
        id=129, name="Cable Crossover", region=UP,
        pattern=P.ISOLATION_SHOULDER_FLEXION, tier=T3,
        primary_targets=[M.CHEST_LOWER, M.CHEST_MIDDLE],
    ),
    ExerciseLibraryItem(
        id=116, name="Incline Dumbbell Fly", region=UP,
        pattern=P.ISOLATION_SHOULDER_FLEXION, tier=T3,
        primary_targets=[M.CHEST_UPPER], secondary_targets=[M.DELT_FRONT],
    ),

    # ── Upper body: pull ──────────────────────────────────────────
    ExerciseLibraryItem(
        id=101, name="Pull Up (Bodyweight)", region=UP, pattern=P.PULL_VERTICAL, tier=T1,
        primary_targets=[M.LATS, M.BICEPS],
        secondary_targets=[M.TRAPS_MID, M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=102, name="Chin Up", region=UP, pattern=P.PULL_VERTICAL, tier=T2,
        primary_targets=[M.LATS, M.BICEPS], secondary_targets=[M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=106, name="Lat Pulldown (Wide Grip)", region=UP, pattern=P.PULL_VERTICAL, tier=T2,
        primary_targets=[M.LATS, M.TRAPS_MID],
        secondary_targets=[M.BICEPS, M.DELT_REAR],
    ),
    ExerciseLibraryItem(
        id=128, name="Barbell Row (Pendlay)", region=UP, pattern=P.PULL_HORIZONTAL, tier=T1,
        primary_targets=[M.LATS, M.TRAPS_MID, M.LOWER_BACK],
        secondary_targets=[M.BICEPS, M.DELT_REAR],
    ),
    ExerciseLibraryItem(
        id=107, name="Dumbbell Row", region=UP, pattern=P.PULL_HORIZONTAL, tier=T2,
        primary_targets=[M.LATS, M.TRAPS_MID],
        secondary_targets=[M.BICEPS, M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=124, name="Barbell Shrug", region=UP, pattern=P.PULL_VERTICAL, tier=T3,
        primary_targets=[M.TRAPS_UPPER], secondary_targets=[M.FOREARMS],
    ),

    # ── Upper body: arms and shoulders ────────────────────────────
    ExerciseLibraryItem(
        id=109, name="Lateral Raise (Dumbbell)", region=UP,
        pattern=P.ISOLATION_SHOULDER_ABDUCTION, tier=T3,
        primary_targets=[M.DELT_SIDE], secondary_targets=[M.TRAPS_UPPER],
    ),
    ExerciseLibraryItem(
        id=108, name="Face Pull (Cable)", region=UP,
        pattern=P.ISOLATION_SHOULDER_EXTENSION, tier=T3,
        primary_targets=[M.DELT_REAR, M.TRAPS_MID],
        secondary_targets=[M.BICEPS, M.TRAPS_UPPER],
    ),
    ExerciseLibraryItem(
        id=119, name="Reverse Fly (Dumbbell)", region=UP,
        pattern=P.ISOLATION_SHOULDER_EXTENSION, tier=T3,
        primary_targets=[M.DELT_REAR], secondary_targets=[M.TRAPS_MID],
    ),
    ExerciseLibraryItem(
        id=112, name="Skullcrusher (EZ Bar)", region=UP,
        pattern=P.ISOLATION_ELBOW_EXTENSION, tier=T3,
        primary_targets=[M.TRICEPS_LONG, M.TRICEPS_LATERAL],
    ),
    ExerciseLibraryItem(
        id=113, name="Hammer Curl (Dumbbell)", region=UP,
        pattern=P.ISOLATION_ELBOW_FLEXION, tier=T3,
        primary_targets=[M.BICEPS, M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=130, name="Preacher Curl (EZ Bar)", region=UP,
        pattern=P.ISOLATION_ELBOW_FLEXION, tier=T3,
        primary_targets=[M.BICEPS],
    ),

    # ── Lower body: squat ─────────────────────────────────────────
    ExerciseLibraryItem(
        id=114, name="Front Squat (Barbell)", region=LO, pattern=P.SQUAT, tier=T1,
        primary_targets=[M.QUADS, M.ABS, M.TRAPS_MID], secondary_targets=[M.GLUTES],
    ),
    ExerciseLibraryItem(
        id=127, name="Goblet Squat", region=LO, pattern=P.SQUAT, tier=T2,
        primary_targets=[M.QUADS, M.GLUTES], secondary_targets=[M.ABS, M.TRAPS_MID],
    ),
    ExerciseLibraryItem(
        id=104, name="Leg Press", region=LO, pattern=P.SQUAT, tier=T2,
        primary_targets=[M.QUADS, M.GLUTES], secondary_targets=[M.ADDUCTORS],
    ),
    ExerciseLibraryItem(
        id=110, name="Leg Extension (Machine)", region=LO,
        pattern=P.ISOLATION_KNEE_EXTENSION, tier=T3,
        primary_targets=[M.QUADS],
    ),

    # ── Lower body: hinge ─────────────────────────────────────────
    ExerciseLibraryItem(
        id=103, name="Romanian Deadlift (Barbell)", region=LO, pattern=P.HINGE, tier=T1,
        primary_targets=[M.HAMSTRINGS, M.GLUTES],
        secondary_targets=[M.LOWER_BACK, M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=123, name="Sumo Deadlift", region=LO, pattern=P.HINGE, tier=T1,
        primary_targets=[M.HAMSTRINGS, M.GLUTES, M.QUADS],
        secondary_targets=[M.ADDUCTORS, M.LOWER_BACK],
    ),
    ExerciseLibraryItem(
        id=111, name="Hip Thrust (Barbell)", region=LO, pattern=P.HINGE, tier=T1,
        primary_targets=[M.GLUTES], secondary_targets=[M.HAMSTRINGS, M.ABS],
    ),
    ExerciseLibraryItem(
        id=126, name="Glute Bridge (Barbell)", region=LO, pattern=P.HINGE, tier=T2,
        primary_targets=[M.GLUTES], secondary_targets=[M.HAMSTRINGS],
    ),

    # ── Lower body: lunge ─────────────────────────────────────────
    ExerciseLibraryItem(
        id=105, name="Bulgarian Split Squat (Dumbbell)", region=LO, pattern=P.LUNGE, tier=T2,
        primary_targets=[M.QUADS, M.GLUTES], secondary_targets=[M.ADDUCTORS, M.ABS],
    ),
    ExerciseLibraryItem(
        id=115, name="Walking Lunges", region=LO, pattern=P.LUNGE, tier=T2,
        primary_targets=[M.QUADS, M.GLUTES], secondary_targets=[M.CALVES, M.ABS],
    ),

    # ── Full body and core ────────────────────────────────────────
    ExerciseLibraryItem(
        id=125, name="Farmer's Walk", region=FB, pattern=P.CARRY, tier=T2,
        primary_targets=[M.FOREARMS, M.TRAPS_UPPER], secondary_targets=[M.ABS, M.CALVES],
    ),
    ExerciseLibraryItem(
        id=120, name="Hanging Leg Raise", region=CO, pattern=P.CORE_FLEXION, tier=T3,
        primary_targets=[M.ABS], secondary_targets=[M.FOREARMS],
    ),
    ExerciseLibraryItem(
        id=122, name="Cable Woodchopper", region=CO, pattern=P.CORE_STABILITY, tier=T3,
        primary_targets=[M.OBLIQUES], secondary_targets=[M.ABS],
    ),
    ExerciseLibraryItem(
        id=121, name="Plank", region=CO, pattern=P.CORE_STABILITY, tier=T3,
        primary_targets=[M.ABS, M.OBLIQUES],
    ),
]

for _ex in _EXERCISES:
    register_exercise(_ex)
