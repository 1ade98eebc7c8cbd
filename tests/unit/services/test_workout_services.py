"""
Service tests for workouts, set edits and cardio sessions.
"""

import datetime

import pytest
from fastapi import HTTPException

from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.workout import (
    CardioSessionCreate,
    ExerciseCreate,
    ExerciseSetCreate,
    ExerciseSetUpdate,
    WorkoutCreate,
)
from app.services.cardio_service import CardioService
from app.services.workout_service import WorkoutService


# ======================================================================
# Helpers
# ======================================================================


def _make_workout(**overrides) -> WorkoutCreate:
    """Bench 3 x 5 @ 100 kg and rows 1 x 10 @ 50 kg (volume 2000)."""
    defaults = {
        "title": "Push day",
        "exercises": [
            ExerciseCreate(exercise_name="Bench Press", muscle_group="chest", sets=[
                ExerciseSetCreate(reps=5, weight_kg=100),
                ExerciseSetCreate(reps=5, weight_kg=100),
                ExerciseSetCreate(reps=5, weight_kg=100),
            ]),
            ExerciseCreate(exercise_name="Cable Row", muscle_group="back", sets=[
                ExerciseSetCreate(reps=10, weight_kg=50),
            ]),
        ],
    }
    defaults.update(overrides)
    return WorkoutCreate(**defaults)


# ======================================================================
# WorkoutService
# ======================================================================


class TestWorkoutCreate:
    """Test workout creation and reads."""

    def test_volume_and_counts(self, session, user):
        service = WorkoutService(session)
        workout = service.create(user.id, _make_workout())
        assert workout.total_volume == 2000.0
        assert workout.date == datetime.date.today()
        assert workout.started_at is not None

        detail = service.get(user.id, workout.id)
        assert detail.exercise_count == 2
        bench, row = detail.exercises
        assert bench.sets_completed == 3
        assert [s.set_number for s in bench.sets] == [1, 2, 3]
        assert row.sets_completed == 1

    def test_no_sets_has_no_volume(self, session, user):
        workout = WorkoutService(session).create(user.id, _make_workout(exercises=[
            ExerciseCreate(exercise_name="Plank"),
        ]))
        assert workout.total_volume is None

    def test_list_recent_and_by_date(self, session, user):
        service = WorkoutService(session)
        yesterday = datetime.date.today() - datetime.timedelta(days=1)
        service.create(user.id, _make_workout(title="Old", date=yesterday))
        service.create(user.id, _make_workout(title="New"))

        recent = service.list_workouts(user.id)
        assert [w.title for w in recent] == ["New", "Old"]
        assert recent[0].exercise_count == 2

        assert [w.title for w in service.list_workouts(user.id, date=yesterday)] == ["Old"]
        assert len(service.list_workouts(user.id, limit=1)) == 1

    def test_get_missing(self, session, user):
        with pytest.raises(HTTPException) as exc:
            WorkoutService(session).get(user.id, 999)
        assert exc.value.status_code == 404

    def test_get_other_users_workout(self, session, user):
        other = UserRepository(session).create(User(email="other@example.com"))
        workout = WorkoutService(session).create(other.id, _make_workout())
        with pytest.raises(HTTPException) as exc:
            WorkoutService(session).get(user.id, workout.id)
        assert exc.value.status_code == 404


class TestSetEdits:
    """Test set update and delete keep derived fields consistent."""

    def _bench_sets(self, service, user_id, workout_id):
        return service.get(user_id, workout_id).exercises[0].sets

    def test_update_recomputes_volume(self, session, user):
        service = WorkoutService(session)
        workout = service.create(user.id, _make_workout())
        first = self._bench_sets(service, user.id, workout.id)[0]

        updated = service.update_set(user.id, first.id, ExerciseSetUpdate(reps=8, rpe=9))
        assert updated.reps == 8
        assert updated.weight_kg == 100
        assert updated.rpe == 9
        # 2000 - 500 + 800
        assert service.get(user.id, workout.id).total_volume == 2300.0

    def test_empty_update_rejected(self, session, user):
        service = WorkoutService(session)
        workout = service.create(user.id, _make_workout())
        first = self._bench_sets(service, user.id, workout.id)[0]
        with pytest.raises(HTTPException) as exc:
            service.update_set(user.id, first.id, ExerciseSetUpdate())
        assert exc.value.status_code == 400

    def test_update_missing_set(self, session, user):
        with pytest.raises(HTTPException) as exc:
            WorkoutService(session).update_set(user.id, 999, ExerciseSetUpdate(reps=1))
        assert exc.value.status_code == 404

    def test_delete_renumbers_and_recomputes(self, session, user):
        service = WorkoutService(session)
        workout = service.create(user.id, _make_workout())
        sets = self._bench_sets(service, user.id, workout.id)
        service.update_set(user.id, sets[2].id, ExerciseSetUpdate(reps=3))

        service.delete_set(user.id, sets[0].id)

        detail = service.get(user.id, workout.id)
        bench = detail.exercises[0]
        assert [s.set_number for s in bench.sets] == [1, 2]
        assert [s.reps for s in bench.sets] == [5, 3]
        assert bench.sets_completed == 2
        # 500 + 300 + 500
        assert detail.total_volume == 1300.0

    def test_delete_other_users_set(self, session, user):
        other = UserRepository(session).create(User(email="other@example.com"))
        service = WorkoutService(session)
        workout = service.create(other.id, _make_workout())
        set_id = self._bench_sets(service, other.id, workout.id)[0].id
        with pytest.raises(HTTPException) as exc:
            service.delete_set(user.id, set_id)
        assert exc.value.status_code == 404


# ======================================================================
# CardioService
# ======================================================================


class TestCardioService:
    """Test cardio logging."""

    def test_create_and_list(self, session, user):
        service = CardioService(session)
        entry = service.create(user.id, CardioSessionCreate(cardio_type="running", duration_minutes=30,
                                                            distance_km=5.2, avg_heart_rate=150))
        assert entry.date == datetime.date.today()
        assert entry.distance_km == 5.2

        sessions = service.list_sessions(user.id)
        assert [s.id for s in sessions] == [entry.id]
        assert service.list_sessions(user.id, date=datetime.date.today() - datetime.timedelta(days=1)) == []
