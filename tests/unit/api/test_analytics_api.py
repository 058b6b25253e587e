"""
HTTP-level tests for the analytics, library and activity endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app

AS_OF = "2026-02-09T18:00:00"


@pytest.fixture
def client():
    return TestClient(app)


# ======================================================================
# Helpers
# ======================================================================


def _set(date: str, weight: float, rpe: float | None = 8.0, exercise_id: int = 2) -> dict:
    return {"exercise_id": exercise_id, "date": date, "weight": weight, "reps": 5, "rpe": rpe}


def _session(date: str, *sets: dict, **extra) -> dict:
    return {"date": date, "exercises": list(sets), **extra}


def _heavy_squat_day() -> list[dict]:
    sets = [_set("2026/02/09", 100.0, 9.0) for _ in range(5)]
    return [_session("2026/02/09", *sets)]


# ======================================================================
# Service
# ======================================================================


class TestService:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "healthy"
        assert body["message"] == "LiftPath Analytics API"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["service"] == "liftpath-analytics"

    def test_info(self, client):
        assert client.get("/info").json()["project name"] == "LiftPath Training Analytics"


# ======================================================================
# Library
# ======================================================================


class TestLibraryEndpoints:

    def test_list(self, client):
        items = client.get("/api/v1/library/exercises").json()
        assert len(items) == 48
        ids = [item["id"] for item in items]
        assert ids == sorted(ids)

    def test_region_filter(self, client):
        items = client.get("/api/v1/library/exercises", params={"region": "CORE"}).json()
        assert len(items) == 4
        assert {item["region"] for item in items} == {"CORE"}

    def test_tier_filter(self, client):
        items = client.get("/api/v1/library/exercises", params={"tier": "TIER_1"}).json()
        assert items
        assert all(item["tier"] == "TIER_1" for item in items)

    def test_invalid_filter(self, client):
        response = client.get("/api/v1/library/exercises", params={"region": "ARMS"})
        assert response.status_code == 422

    def test_read_one(self, client):
        response = client.get("/api/v1/library/exercises/2")
        assert response.status_code == 200
        assert response.json()["name"] == "Back Squat (Barbell)"

    def test_not_found(self, client):
        assert client.get("/api/v1/library/exercises/9999").status_code == 404


# ======================================================================
# Fatigue and readiness
# ======================================================================


class TestFatigueEndpoints:

    def test_session_fatigue(self, client):
        body = {"session": _session("2026/02/08", _set("2026/02/08", 100.0))}
        response = client.post("/api/v1/analytics/fatigue", json=body)
        assert response.status_code == 200
        scores = response.json()
        assert scores["lower"] == pytest.approx(12.0)
        assert scores["upper"] == 0.0
        assert scores["systemic"] == pytest.approx(12.0)

    def test_custom_library(self, client):
        library = [{"id": 2, "name": "Squat", "region": "UPPER", "tier": "TIER_3"}]
        body = {"session": _session("2026/02/08", _set("2026/02/08", 100.0)), "library": library}
        scores = client.post("/api/v1/analytics/fatigue", json=body).json()
        assert scores["lower"] == 0.0
        assert scores["upper"] == pytest.approx(6.4)

    def test_readiness_empty_history(self, client):
        response = client.post("/api/v1/analytics/readiness", json={"as_of": AS_OF})
        assert response.status_code == 200
        body = response.json()
        assert body["context_note"] == "All activities ready."
        assert body["run_cycle"]["status"] == "GREEN"

    def test_readiness_after_heavy_squats(self, client):
        body = {"history": _heavy_squat_day(), "as_of": AS_OF}
        result = client.post("/api/v1/analytics/readiness", json=body).json()
        assert result["run_cycle"]["status"] == "RED"
        assert result["lower_lift"]["status"] == "RED"
        assert result["upper_lift"]["status"] == "GREEN"
        assert result["run_cycle"]["time_until_fresh_ms"] > 0

    def test_timeline(self, client):
        body = {"history": _heavy_squat_day(), "as_of": AS_OF}
        timeline = client.post("/api/v1/analytics/timeline", json=body).json()
        assert len(timeline["graph_points"]) == 216
        assert len(timeline["daily_end_values"]) == 10

    def test_daily_fatigue(self, client):
        body = {"history": _heavy_squat_day(), "as_of": AS_OF}
        days = client.post("/api/v1/analytics/daily-fatigue", json=body).json()
        assert len(days) == 7
        assert days[-1]["date"] == "2026-02-09"
        assert days[-1]["raw_systemic"] == pytest.approx(67.5)

    def test_daily_fatigue_range_validated(self, client):
        body = {"days_back": 0, "as_of": AS_OF}
        assert client.post("/api/v1/analytics/daily-fatigue", json=body).status_code == 422


# ======================================================================
# Strength and progression
# ======================================================================


class TestStrengthEndpoints:

    def test_one_rm_single_session(self, client):
        body = {
            "exercise_id": 2,
            "history": [_session("2026/02/08", _set("2026/02/08", 100.0, rpe=None))],
            "as_of": AS_OF,
        }
        result = client.post("/api/v1/analytics/one-rm", json=body).json()
        assert result["current_1rm"] == pytest.approx(100.0 * (1 + 5 / 30))
        assert result["is_qualified"] is False
        assert "Insufficient data for estimation" in result["warnings"]

    def test_one_rm_settings_validated(self, client):
        body = {"exercise_id": 2, "settings": {"projection_months": 0}}
        assert client.post("/api/v1/analytics/one-rm", json=body).status_code == 422

    def test_progression_deload(self, client):
        history = [
            _session(date, _set(date, 100.0, rpe))
            for date, rpe in (("2026/02/02", 9.0), ("2026/02/05", 9.2), ("2026/02/08", 9.3))
        ]
        body = {"exercise_id": 2, "history": history, "as_of": AS_OF}
        result = client.post("/api/v1/analytics/progression", json=body).json()
        assert result["badge"] == "DELOAD WEEK"
        assert result["proposed_heavy_weight"] == 70.0
        assert result["exercise_name"] == "Back Squat (Barbell)"

    def test_progression_first_time(self, client):
        body = {"exercise_id": 7, "as_of": AS_OF}
        result = client.post("/api/v1/analytics/progression", json=body).json()
        assert result["is_first_time"] is True

    def test_progression_settings_validated(self, client):
        body = {
            "exercise_id": 2,
            "settings": {"time_decay_thresholds": [14], "time_decay_multipliers": [0.9, 0.8]},
        }
        assert client.post("/api/v1/analytics/progression", json=body).status_code == 422


# ======================================================================
# External activities
# ======================================================================


class TestActivityEndpoints:

    def test_profiles(self, client):
        profiles = client.get("/api/v1/activities/profiles").json()
        assert {p["profile_id"] for p in profiles} == {
            "running", "cycling", "swimming", "weightlifting", "general",
        }

    def test_score_and_flag(self, client):
        body = {
            "activities": [
                {
                    "id": "run-1",
                    "activity_type": "RUNNING",
                    "start_time": "2026-02-08T07:00:00",
                    "end_time": "2026-02-08T07:30:00",
                },
                {
                    "id": "lift-1",
                    "activity_type": "WEIGHTLIFTING",
                    "start_time": "2026-02-08T12:00:00",
                    "end_time": "2026-02-08T13:00:00",
                },
            ],
            "history": [_session("2026/02/08", duration_seconds=3600)],
        }
        scored = client.post("/api/v1/activities/score", json=body).json()

        run, lift = scored
        assert run["fatigue"]["lower"] == pytest.approx(45.0)
        assert run["ignored"] is False
        assert lift["ignored"] is True
        assert lift["ignore_reason"] == "Overlaps with registered workout"
