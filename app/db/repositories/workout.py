"""
Workout repository.

Handles workouts, their exercises and sets. Includes the volume
aggregation kept denormalised on :class:`Workout`.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.workout import Exercise, ExerciseSet, Workout


class WorkoutRepository:
    """Repository for Workout, Exercise and ExerciseSet database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, workout: Workout, exercises: list[tuple[Exercise, list[ExerciseSet]]]) -> Workout:
        """Insert a workout with its exercises and sets in one transaction."""
        self.session.add(workout)
        self.session.flush()
        for exercise, sets in exercises:
            exercise.workout_id = workout.id
            self.session.add(exercise)
            self.session.flush()
            for exercise_set in sets:
                exercise_set.exercise_id = exercise.id
                self.session.add(exercise_set)
        self.session.commit()
        self.session.refresh(workout)
        return workout

    def get_by_id(self, workout_id: int) -> Optional[Workout]:
        return self.session.get(Workout, workout_id)

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> list[Workout]:
        statement = (
            select(Workout)
            .where(Workout.user_id == user_id, Workout.date == date)
            .order_by(Workout.started_at.desc())
        )
        return list(self.session.exec(statement).all())

    def get_recent_by_user(self, user_id: int, limit: int = 10) -> list[Workout]:
        statement = (
            select(Workout)
            .where(Workout.user_id == user_id)
            .order_by(Workout.date.desc(), Workout.started_at.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_exercises(self, workout_id: int) -> list[Exercise]:
        statement = select(Exercise).where(Exercise.workout_id == workout_id).order_by(Exercise.id)
        return list(self.session.exec(statement).all())

    def count_exercises(self, workout_id: int) -> int:
        statement = select(func.count()).select_from(Exercise).where(Exercise.workout_id == workout_id)
        return self.session.exec(statement).first() or 0

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    # ------------------------------------------------------------------
    # Sets
    # ------------------------------------------------------------------

    def get_set(self, set_id: int) -> Optional[ExerciseSet]:
        return self.session.get(ExerciseSet, set_id)

    def get_sets(self, exercise_id: int) -> list[ExerciseSet]:
        statement = (
            select(ExerciseSet)
            .where(ExerciseSet.exercise_id == exercise_id)
            .order_by(ExerciseSet.set_number)
        )
        return list(self.session.exec(statement).all())

    def sum_volume(self, workout_id: int) -> float:
        """Sum of ``weight_kg * reps`` over every set of the workout."""
        statement = (
            select(func.coalesce(func.sum(ExerciseSet.weight_kg * ExerciseSet.reps), 0.0))
            .select_from(ExerciseSet)
            .join(Exercise, ExerciseSet.exercise_id == Exercise.id)
            .where(Exercise.workout_id == workout_id)
        )
        return float(self.session.exec(statement).first() or 0.0)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, entry) -> None:
        """Stage a change; the caller commits."""
        self.session.add(entry)
        self.session.flush()

    def delete_set(self, exercise_set: ExerciseSet) -> None:
        self.session.delete(exercise_set)
        self.session.flush()

    def commit(self) -> None:
        self.session.commit()
