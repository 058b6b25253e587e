"""What would the analytics engine tell you TODAY (2026-02-08)?

Replays a logged training block against the built-in exercise library and
prints current readiness, the daily fatigue trend, 1RM projections and the
next heavy-day suggestion for each main lift.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import sys
from collections import defaultdict
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.activities import score_activity
from app.core.logging import configure_logging
from app.engine.progression import get_suggestion
from app.engine.readiness import evaluate_readiness
from app.engine.strength import (
    estimate_one_rm_progression,
    session_workout_types,
    sets_for_exercise,
)
from app.engine.timeline import calculate_daily_fatigue_with_decay
from app.library import default_library
from app.schemas.fatigue import ActivityType
from app.schemas.training import ExerciseSet, TrainingSession

TODAY = datetime.datetime(2026, 2, 8, 9, 0)

# ─── Logged exercise name → library id ──────────────────────────────
EXERCISE_MAP = {
    "Deadlift": 1,
    "Back Squat": 2,
    "Bench Press": 7,
    "Overhead Press": 100,
    "Pull Up": 101,
    "Bicep Curl": 4,
    "Plank": 121,
}

MAIN_LIFTS = ["Deadlift", "Back Squat", "Bench Press", "Overhead Press"]

# (date, exercise, weight kg, reps, rpe)
RAW_DATA = [
    ("2026/01/05", "Back Squat", 80, 5, 7.5),
    ("2026/01/05", "Back Squat", 80, 5, 8.0),
    ("2026/01/05", "Bench Press", 60, 5, 7.5),
    ("2026/01/05", "Bench Press", 60, 5, 8.0),
    ("2026/01/05", "Bicep Curl", 12, 10, None),
    ("2026/01/08", "Deadlift", 110, 5, 8.0),
    ("2026/01/08", "Overhead Press", 40, 5, 8.0),
    ("2026/01/08", "Pull Up", 0, 8, 8.0),
    ("2026/01/12", "Back Squat", 82.5, 5, 8.0),
    ("2026/01/12", "Back Squat", 82.5, 5, 8.0),
    ("2026/01/12", "Bench Press", 62.5, 5, 8.0),
    ("2026/01/12", "Plank", 0, 1, None),
    ("2026/01/15", "Deadlift", 115, 5, 8.0),
    ("2026/01/15", "Overhead Press", 42.5, 5, 8.5),
    ("2026/01/19", "Back Squat", 85, 5, 8.0),
    ("2026/01/19", "Bench Press", 62.5, 5, 8.5),
    ("2026/01/22", "Deadlift", 120, 5, 8.5),
    ("2026/01/22", "Overhead Press", 42.5, 5, 9.0),
    ("2026/01/22", "Pull Up", 0, 8, 8.5),
    ("2026/01/26", "Back Squat", 87.5, 5, 8.5),
    ("2026/01/26", "Bench Press", 65, 5, 8.5),
    ("2026/01/29", "Deadlift", 122.5, 5, 9.0),
    ("2026/01/29", "Overhead Press", 42.5, 4, 9.5),
    ("2026/02/02", "Back Squat", 90, 5, 8.5),
    ("2026/02/02", "Bench Press", 65, 5, 8.0),
    ("2026/02/05", "Deadlift", 125, 5, 9.0),
    ("2026/02/05", "Overhead Press", 42.5, 5, 9.5),
    ("2026/02/07", "Back Squat", 92.5, 5, 9.0),
    ("2026/02/07", "Bench Press", 67.5, 5, 8.5),
]


def build_history(raw_data):
    """Group raw set rows into training sessions."""
    by_date = defaultdict(list)
    for date, exercise, weight, reps, rpe in raw_data:
        by_date[date].append(ExerciseSet(
            exercise_id=EXERCISE_MAP[exercise],
            exercise_name=exercise,
            set_number=len(by_date[date]) + 1,
            date=date,
            weight=weight,
            reps=reps,
            rpe=rpe,
            completed=True,
            workout_type="heavy",
        ))

    return [
        TrainingSession(
            training_number=number,
            date=date,
            exercises=sets,
            default_workout_type="heavy",
            duration_seconds=75 * 60,
        )
        for number, date in enumerate(sorted(by_date), start=1)
    ]


def main():
    configure_logging("WARNING")
    history = build_history(RAW_DATA)
    library = default_library()

    # A 40-minute run the evening before
    run = score_activity(
        ActivityType.RUNNING,
        datetime.datetime(2026, 2, 7, 18, 0),
        datetime.datetime(2026, 2, 7, 18, 40),
        activity_id="run-2026-02-07",
    )

    readiness = evaluate_readiness(history, library, activities=[run], as_of=TODAY)

    print()
    print("=" * 65)
    print(f"  Training Analytics - {TODAY.strftime('%A %d %B %Y')}")
    print("=" * 65)
    print()

    f = readiness.fatigue
    print(f"  Fatigue now:  lower {f.lower:5.1f}   upper {f.upper:5.1f}   systemic {f.systemic:5.1f}")
    print()
    print(f"  {'Activity':<20} {'Status':<8} {'Fresh in':>9}  Message")
    print("  " + "-" * 63)
    for label, status in [
        ("Run / cycle", readiness.run_cycle),
        ("Swim", readiness.swim),
        ("Lower-body lifting", readiness.lower_lift),
        ("Upper-body lifting", readiness.upper_lift),
    ]:
        fresh = (
            f"{status.time_until_fresh_ms / 3_600_000:.0f} h"
            if status.time_until_fresh_ms is not None
            else "--"
        )
        print(f"  {label:<20} {status.status.value:<8} {fresh:>9}  {status.message}")
    print()
    print(f"  {readiness.context_note}")

    # ── Daily fatigue, last 7 days ──────────────────────────────────
    print()
    print("  End-of-day fatigue (last 7 days):")
    for day in calculate_daily_fatigue_with_decay(
        history, library, activities=[run], as_of=TODAY,
    ):
        eod = day.end_of_day
        print(
            f"    {day.date}  lower {eod.lower:5.1f}  upper {eod.upper:5.1f}  "
            f"systemic {eod.systemic:5.1f}  (logged {day.raw_systemic:5.1f})"
        )

    # ── Main lifts ──────────────────────────────────────────────────
    print()
    print(f"  {'Lift':<16} {'1RM':>7} {'in 3mo':>8} {'Next':>8}  Badge / note")
    print("  " + "-" * 63)
    types = session_workout_types(history)
    for lift in MAIN_LIFTS:
        exercise_id = EXERCISE_MAP[lift]
        projection = estimate_one_rm_progression(
            sets_for_exercise(history, exercise_id), types, as_of=TODAY,
        )
        suggestion = get_suggestion(exercise_id, history, library, as_of=TODAY)
        note = suggestion.badge or suggestion.human_explanation
        print(
            f"  {lift:<16} {projection.current_1rm:>7.1f} {projection.expected_1rm:>8.1f} "
            f"{suggestion.proposed_heavy_weight:>8.2f}  {note}"
        )
        for warning in projection.warnings:
            print(f"  {'':<16} ! {warning}")
    print()


if __name__ == "__main__":
    main()
