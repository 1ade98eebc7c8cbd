"""
API tests for the health, workout and user endpoints.
"""

import datetime

from app.core.config import settings


class TestRecoveryEndpoints:
    """Test recovery scoring through the API."""

    def test_save_and_read(self, client):
        client.post("/api/health/sleep", json={"bedtime": "23:00", "wake_time": "07:00", "quality_rating": 5})
        response = client.post("/api/health/recovery", json={
            "muscle_soreness": 1, "energy_level": 5, "hrv_score": 80, "resting_hr": 50,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["recovery_score"] == 100
        assert data["recommendation"]["status"] == "excellent"

        overview = client.get("/api/health/recovery").json()
        assert overview["recovery"]["recovery_score"] == 100
        assert overview["sleep"]["hours_slept"] == 8.0
        assert overview["heart_rate"]["resting_hr"] == 50

    def test_out_of_range_rating_is_400(self, client):
        response = client.post("/api/health/recovery", json={"muscle_soreness": 7})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("muscle_soreness:")


class TestSleepAndHeartRateEndpoints:
    """Test upsert status codes and deletion."""

    def test_sleep_upsert_status(self, client):
        first = client.post("/api/health/sleep", json={"hours_slept": 7})
        second = client.post("/api/health/sleep", json={"hours_slept": 8})
        assert first.status_code == 201
        assert second.status_code == 200
        assert first.json()["id"] == second.json()["id"]

    def test_sleep_delete(self, client):
        today = datetime.date.today().isoformat()
        client.post("/api/health/sleep", json={"hours_slept": 7})
        assert client.delete(f"/api/health/sleep/{today}").status_code == 204
        assert client.delete(f"/api/health/sleep/{today}").status_code == 404

    def test_heart_rate(self, client):
        client.post("/api/health/heart-rate", json={"resting_hr": 54, "max_hr": 180})
        data = client.get("/api/health/heart-rate").json()
        assert data["latest"]["resting_hr"] == 54
        assert data["stats"]["total_logs"] == 1

    def test_body_metrics(self, client):
        response = client.post("/api/health/body", json={"weight_kg": 80.5})
        assert response.status_code == 201
        assert client.get("/api/health/body").json()["latest"]["weight_kg"] == 80.5


class TestWorkoutEndpoints:
    """Test workouts, sets and cardio routing."""

    def _create(self, client):
        response = client.post("/api/workouts", json={
            "title": "Legs",
            "exercises": [{"exercise_name": "Squat", "sets": [
                {"reps": 5, "weight_kg": 120}, {"reps": 5, "weight_kg": 120},
            ]}],
        })
        assert response.status_code == 201
        return response.json()["workout_id"]

    def test_create_and_get(self, client):
        workout_id = self._create(client)
        detail = client.get(f"/api/workouts/{workout_id}").json()
        assert detail["total_volume"] == 1200.0
        assert detail["exercises"][0]["sets_completed"] == 2
        assert client.get("/api/workouts").json()["workouts"][0]["exercise_count"] == 1

    def test_missing_workout(self, client):
        assert client.get("/api/workouts/999").status_code == 404

    def test_set_patch_and_delete(self, client):
        workout_id = self._create(client)
        sets = client.get(f"/api/workouts/{workout_id}").json()["exercises"][0]["sets"]

        assert client.patch(f"/api/workouts/sets/{sets[0]['id']}", json={}).status_code == 400
        response = client.patch(f"/api/workouts/sets/{sets[0]['id']}", json={"weight_kg": 100})
        assert response.json()["set"]["weight_kg"] == 100

        assert client.delete(f"/api/workouts/sets/{sets[1]['id']}").status_code == 204
        detail = client.get(f"/api/workouts/{workout_id}").json()
        assert detail["total_volume"] == 500.0
        assert detail["exercises"][0]["sets_completed"] == 1

    def test_cardio(self, client):
        response = client.post("/api/workouts/cardio", json={"cardio_type": "cycling", "duration_minutes": 45})
        assert response.status_code == 201
        sessions = client.get("/api/workouts/cardio").json()["sessions"]
        assert sessions[0]["cardio_type"] == "cycling"


class TestUserEndpoint:
    """Test the owner profile."""

    def test_me(self, client):
        data = client.get("/api/users/me").json()
        assert data["email"] == settings.DEFAULT_USER_EMAIL
        assert data["is_active"] is True
