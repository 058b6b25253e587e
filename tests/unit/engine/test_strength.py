"""
Unit tests for 1RM estimation and projection.
"""

import datetime

import pytest
from pydantic import ValidationError

from app.engine.common import add_months
from app.engine.strength import (
    EstimationSettings,
    calculate_one_rm,
    estimate_one_rm_progression,
    get_damping_factor,
    perform_weighted_linear_regression,
    session_workout_types,
    sets_for_exercise,
)
from app.schemas.training import ExerciseSet, TrainingSession

AS_OF = datetime.datetime(2026, 2, 4, 9, 0)
EPLEY_5 = 1.0 + 5 / 30.0


# ======================================================================
# Helpers
# ======================================================================


def _make_set(date: str, weight: float, reps: int = 5, rpe: float | None = None) -> ExerciseSet:
    return ExerciseSet(exercise_id=2, date=date, weight=weight, reps=reps, rpe=rpe)


def _linear_sets() -> list[ExerciseSet]:
    """Four weekly sessions, +2.5 kg each, 5 reps without RPE."""
    return [
        _make_set("2026/01/12", 100.0),
        _make_set("2026/01/19", 102.5),
        _make_set("2026/01/26", 105.0),
        _make_set("2026/02/02", 107.5),
    ]


# ======================================================================
# calculate_one_rm
# ======================================================================


class TestCalculateOneRM:

    @pytest.mark.parametrize("weight,reps,rpe,expected", [
        (100.0, 1, None, 100.0),
        (100.0, 5, None, 100.0 * EPLEY_5),
        (100.0, 5, 8.0, 100.0 * (1.0 + 7 / 30.0)),
        (100.0, 5, 8.5, 120.0),          # 6.5 effective reps truncated to 6
        (100.0, 3, 6.5, 120.0),
        (100.0, 8, None, 100.0 * (1.0 + 8 / 30.0)),
        (100.0, 10, None, 100.0 * 36.0 / 27.0),
        (100.0, 8, 8.0, 100.0 * 36.0 / 27.0),
        (100.0, 15, None, 100.0 * 36.0 / 22.0),
    ])
    def test_formulas(self, weight, reps, rpe, expected):
        assert calculate_one_rm(weight, reps, rpe) == pytest.approx(expected)

    def test_low_rpe_is_not_predictive(self):
        assert calculate_one_rm(100.0, 5, 6.0) is None

    @pytest.mark.parametrize("reps", [16, 20, 37, 50])
    def test_high_reps_are_unreliable(self, reps):
        assert calculate_one_rm(100.0, reps) is None

    def test_rpe_pushes_reps_over_limit(self):
        """12 reps @ RPE 7 → 15 effective (still valid); 13 → 16 (dropped)."""
        assert calculate_one_rm(60.0, 12, 7.0) is not None
        assert calculate_one_rm(60.0, 13, 7.0) is None

    def test_out_of_range_rpe_is_ignored(self):
        assert calculate_one_rm(100.0, 5, 11.0) == pytest.approx(100.0 * EPLEY_5)

    def test_rpe_10_single_is_the_weight(self):
        assert calculate_one_rm(140.0, 1, 10.0) == 140.0


# ======================================================================
# Damping
# ======================================================================


class TestDamping:

    @pytest.mark.parametrize("months,factor", [
        (1, 1.0),
        (2, 0.9),
        (3, 0.8),
        (4, 0.5),
        (6, 0.5),
        (7, 0.3),
        (24, 0.3),
    ])
    def test_table(self, months, factor):
        assert get_damping_factor(months) == factor


# ======================================================================
# Weighted regression
# ======================================================================


class TestRegression:

    def test_perfect_line(self):
        start = datetime.date(2026, 1, 1)
        points = [(start + datetime.timedelta(days=d), 100.0 + d) for d in (0, 3, 10, 21)]
        result = perform_weighted_linear_regression(points, datetime.date(2026, 1, 30))
        assert result.slope == pytest.approx(1.0)
        assert result.intercept == pytest.approx(100.0)
        assert result.standard_error == pytest.approx(0.0, abs=1e-9)

    def test_zero_spread_gives_flat_slope(self):
        day = datetime.date(2026, 1, 1)
        result = perform_weighted_linear_regression([(day, 100.0), (day, 110.0)], day)
        assert result.slope == 0.0
        assert result.intercept == pytest.approx(105.0)
        assert result.sum_squared_deviations == 0.0

    def test_recent_points_weigh_more(self):
        """The fit is pulled toward the most recent point."""
        start = datetime.date(2025, 10, 1)
        points = [
            (start, 100.0),
            (start + datetime.timedelta(days=60), 100.0),
            (start + datetime.timedelta(days=120), 130.0),
        ]
        result = perform_weighted_linear_regression(points, start + datetime.timedelta(days=120))
        unweighted_mean_y = 110.0
        fitted_last = result.slope * 120 + result.intercept
        assert fitted_last > unweighted_mean_y

    def test_two_points_have_no_standard_error(self):
        start = datetime.date(2026, 1, 1)
        points = [(start, 100.0), (start + datetime.timedelta(days=7), 105.0)]
        result = perform_weighted_linear_regression(points, start + datetime.timedelta(days=7))
        assert result.standard_error == 0.0


# ======================================================================
# Input collection
# ======================================================================


class TestInputCollection:

    def test_sets_for_exercise(self):
        other = ExerciseSet(exercise_id=7, date="2026/01/12", weight=80.0, reps=5)
        history = [
            TrainingSession(date="2026/01/12", exercises=[_make_set("2026/01/12", 100.0), other]),
            TrainingSession(date="2026/01/19", exercises=[_make_set("2026/01/19", 102.5)]),
        ]
        sets = sets_for_exercise(history, 2)
        assert [s.weight for s in sets] == [100.0, 102.5]

    def test_session_workout_types(self):
        history = [
            TrainingSession(date="2026/01/12", default_workout_type="light"),
            TrainingSession(date="2026/01/19"),
        ]
        assert session_workout_types(history) == {"2026/01/12": "light"}


# ======================================================================
# estimate_one_rm_progression
# ======================================================================


class TestEstimateProgression:

    def test_no_sets(self):
        result = estimate_one_rm_progression([], as_of=AS_OF)
        assert result.current_1rm == 0.0
        assert result.expected_1rm == 0.0
        assert result.projection_date is None
        assert not result.is_qualified
        assert result.warnings[0].startswith("Insufficient data for estimation")

    def test_only_unpredictive_sets(self):
        sets = [_make_set("2026/02/02", 100.0, reps=20)]
        result = estimate_one_rm_progression(sets, as_of=AS_OF)
        assert result.current_1rm == 0.0
        assert result.sessions == []

    def test_single_session(self):
        sets = [_make_set("2026/02/02", 100.0), _make_set("2026/02/02", 90.0)]
        result = estimate_one_rm_progression(sets, as_of=AS_OF)

        assert result.current_1rm == pytest.approx(100.0 * EPLEY_5)
        assert result.expected_1rm == result.current_1rm
        assert result.projection_date == datetime.date(2026, 2, 2)
        assert result.improvement_kg == 0.0
        assert not result.is_qualified
        assert "Limited data: Estimation based on only 1 session" in result.warnings
        assert "Insufficient data for estimation" in result.warnings
        assert len(result.sessions) == 1

    def test_qualified_linear_projection(self):
        result = estimate_one_rm_progression(_linear_sets(), as_of=AS_OF)

        current = 107.5 * EPLEY_5
        slope = 2.5 * EPLEY_5 / 7.0
        intercept = 100.0 * EPLEY_5
        undamped = slope * 89 + intercept
        expected = current + (undamped - current) * 0.8

        assert result.is_qualified
        assert result.warnings == []
        assert result.current_1rm == pytest.approx(current)
        assert result.projection_date == datetime.date(2026, 5, 2)
        assert result.slope_kg_per_day == pytest.approx(slope)
        assert result.expected_1rm == pytest.approx(expected)
        assert result.improvement_kg == pytest.approx(expected - current)
        assert result.improvement_percent == pytest.approx((expected - current) / current * 100.0)

    def test_sessions_sorted_oldest_first(self):
        sets = list(reversed(_linear_sets()))
        result = estimate_one_rm_progression(sets, as_of=AS_OF)
        assert [p.date for p in result.sessions] == sorted(p.date for p in result.sessions)

    def test_best_set_per_session(self):
        sets = _linear_sets() + [_make_set("2026/02/02", 115.0, reps=3)]
        result = estimate_one_rm_progression(sets, as_of=AS_OF)
        assert result.current_1rm == pytest.approx(115.0 * 1.1)

    def test_limited_data_warning(self):
        result = estimate_one_rm_progression(_linear_sets()[:3], as_of=AS_OF)
        assert not result.is_qualified
        assert "Limited data: Estimation based on only 3 sessions" in result.warnings

    def test_stale_data_warning(self):
        late = datetime.datetime(2026, 3, 20, 9, 0)
        result = estimate_one_rm_progression(_linear_sets(), as_of=late)
        assert not result.is_qualified
        assert "No recent data: Last session was 46 days ago" in result.warnings

    def test_inconsistent_data_warning(self):
        sets = [
            _make_set("2026/01/12", 100.0),
            _make_set("2026/01/19", 60.0),
            _make_set("2026/01/26", 120.0),
            _make_set("2026/02/02", 70.0),
        ]
        result = estimate_one_rm_progression(sets, as_of=AS_OF)
        assert not result.is_qualified
        assert "Inconsistent progression: Results may vary" in result.warnings

    def test_min_data_points_override(self):
        result = estimate_one_rm_progression(_linear_sets()[:2], min_data_points=2, as_of=AS_OF)
        assert result.is_qualified

    def test_longer_horizon_damps_more(self):
        short = estimate_one_rm_progression(_linear_sets(), projection_months=1, as_of=AS_OF)
        long = estimate_one_rm_progression(_linear_sets(), projection_months=12, as_of=AS_OF)
        assert short.projection_date == datetime.date(2026, 3, 2)
        assert long.projection_date == datetime.date(2027, 2, 2)
        assert long.improvement_kg > 0

    def test_workout_types_are_normalised(self):
        types = {"2026/01/12": "LIGHT", "2026/01/19": "deload", "2026/01/26": "custom"}
        result = estimate_one_rm_progression(_linear_sets(), types, as_of=AS_OF)
        assert [p.workout_type for p in result.sessions] == ["light", "heavy", "custom", "heavy"]

    def test_unparsable_dates_skipped(self):
        sets = _linear_sets() + [_make_set("02-03-2026", 200.0)]
        result = estimate_one_rm_progression(sets, as_of=AS_OF)
        assert len(result.sessions) == 4


# ======================================================================
# Settings / calendar
# ======================================================================


class TestEstimationSettings:

    def test_defaults(self):
        cfg = EstimationSettings()
        assert (cfg.projection_months, cfg.min_data_points, cfg.recent_data_window_days) == (3, 4, 30)

    @pytest.mark.parametrize("months", [0, 25])
    def test_projection_months_bounds(self, months):
        with pytest.raises(ValidationError):
            EstimationSettings(projection_months=months)


class TestAddMonths:

    @pytest.mark.parametrize("start,months,expected", [
        (datetime.date(2026, 2, 2), 3, datetime.date(2026, 5, 2)),
        (datetime.date(2026, 1, 31), 1, datetime.date(2026, 2, 28)),
        (datetime.date(2024, 1, 31), 1, datetime.date(2024, 2, 29)),
        (datetime.date(2026, 11, 15), 3, datetime.date(2027, 2, 15)),
    ])
    def test_clamps_to_month_end(self, start, months, expected):
        assert add_months(start, months) == expected
