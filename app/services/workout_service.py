"""
Workout service.

Creates strength workouts with their exercises and sets, and keeps the
derived fields consistent when individual sets are edited or removed:

- ``Exercise.sets_completed`` equals the number of stored sets,
- ``ExerciseSet.set_number`` stays 1..n without gaps,
- ``Workout.total_volume`` equals the sum of ``weight_kg * reps``.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import WorkoutRepository
from app.models.workout import Exercise, ExerciseSet, Workout
from app.schemas.workout import (
    ExerciseResponse,
    ExerciseSetResponse,
    ExerciseSetUpdate,
    WorkoutCreate,
    WorkoutDetail,
    WorkoutSummary,
)


class WorkoutService:
    """Service for workout logging."""

    def __init__(self, session: Session):
        self.repository = WorkoutRepository(session)

    def create(self, user_id: int, data: WorkoutCreate) -> Workout:
        total_volume = sum(s.weight_kg * s.reps for ex in data.exercises for s in ex.sets)
        now = datetime.datetime.utcnow()

        workout = Workout(user_id=user_id, date=data.date or datetime.date.today(), workout_type=data.workout_type,
                          title=data.title, notes=data.notes, duration_minutes=data.duration_minutes,
                          total_volume=total_volume or None, started_at=now, completed_at=now, )

        exercises: list[tuple[Exercise, list[ExerciseSet]]] = []
        for ex in data.exercises:
            exercise = Exercise(exercise_name=ex.exercise_name, muscle_group=ex.muscle_group,
                                target_sets=ex.target_sets, sets_completed=len(ex.sets), )
            sets = [
                ExerciseSet(set_number=i, reps=s.reps, weight_kg=s.weight_kg, rest_seconds=s.rest_seconds,
                            rpe=s.rpe, )
                for i, s in enumerate(ex.sets, start=1)
            ]
            exercises.append((exercise, sets))

        return self.repository.create(workout, exercises)

    def list_workouts(self, user_id: int, date: Optional[datetime.date] = None, limit: int = 10) -> list[WorkoutSummary]:
        if date:
            workouts = self.repository.get_by_user_and_date(user_id, date)
        else:
            workouts = self.repository.get_recent_by_user(user_id, limit)
        return [self._to_summary(w) for w in workouts]

    def get(self, user_id: int, workout_id: int) -> WorkoutDetail:
        workout = self.repository.get_by_id(workout_id)
        if not workout or workout.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

        exercises = [
            ExerciseResponse(
                id=ex.id, exercise_name=ex.exercise_name, muscle_group=ex.muscle_group,
                target_sets=ex.target_sets, sets_completed=ex.sets_completed, weight_kg=ex.weight_kg,
                notes=ex.notes,
                sets=[ExerciseSetResponse.model_validate(s) for s in self.repository.get_sets(ex.id)],
            )
            for ex in self.repository.get_exercises(workout.id)
        ]
        summary = self._to_summary(workout, exercise_count=len(exercises))
        return WorkoutDetail(**summary.model_dump(), exercises=exercises)

    # ------------------------------------------------------------------
    # Sets
    # ------------------------------------------------------------------

    def update_set(self, user_id: int, set_id: int, data: ExerciseSetUpdate) -> ExerciseSet:
        changes = data.model_dump(exclude_none=True)
        if not changes:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")

        exercise_set, exercise, workout = self._get_owned_set(user_id, set_id)
        for key, value in changes.items():
            setattr(exercise_set, key, value)
        self.repository.add(exercise_set)

        workout.total_volume = self.repository.sum_volume(workout.id)
        self.repository.add(workout)
        self.repository.commit()
        return exercise_set

    def delete_set(self, user_id: int, set_id: int) -> None:
        exercise_set, exercise, workout = self._get_owned_set(user_id, set_id)
        deleted_number = exercise_set.set_number
        self.repository.delete_set(exercise_set)

        # Close the gap in numbering.
        remaining = self.repository.get_sets(exercise.id)
        for s in remaining:
            if s.set_number > deleted_number:
                s.set_number -= 1
                self.repository.add(s)

        exercise.sets_completed = len(remaining)
        self.repository.add(exercise)

        workout.total_volume = self.repository.sum_volume(workout.id)
        self.repository.add(workout)
        self.repository.commit()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_set(self, user_id: int, set_id: int) -> tuple[ExerciseSet, Exercise, Workout]:
        exercise_set = self.repository.get_set(set_id)
        exercise = self.repository.get_exercise(exercise_set.exercise_id) if exercise_set else None
        workout = self.repository.get_by_id(exercise.workout_id) if exercise else None
        if not workout or workout.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
        return exercise_set, exercise, workout

    def _to_summary(self, workout: Workout, exercise_count: Optional[int] = None) -> WorkoutSummary:
        if exercise_count is None:
            exercise_count = self.repository.count_exercises(workout.id)
        return WorkoutSummary(id=workout.id, date=workout.date, workout_type=workout.workout_type,
                              title=workout.title, duration_minutes=workout.duration_minutes,
                              total_volume=workout.total_volume, notes=workout.notes,
                              started_at=workout.started_at, completed_at=workout.completed_at,
                              exercise_count=exercise_count, )
