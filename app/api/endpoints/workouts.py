"""
Workout endpoints.

Strength workouts with exercises and sets, set edits and cardio sessions.
Static paths are declared before ``/{workout_id}``.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import (
    CardioCreatedResponse,
    CardioListResponse,
    CardioSessionCreate,
    CardioSessionResponse,
    ExerciseSetResponse,
    ExerciseSetUpdate,
    SetUpdatedResponse,
    WorkoutCreate,
    WorkoutCreatedResponse,
    WorkoutDetail,
    WorkoutListResponse,
)
from app.services.cardio_service import CardioService
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", summary="List workouts for a date or the most recent ones.", response_model=WorkoutListResponse, )
def list_workouts(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
                  limit: int = Query(10, ge=1, le=100, description="Max workouts when no date is given"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return WorkoutListResponse(workouts=service.list_workouts(user.id, date, limit))


@router.post("", summary="Log a workout with exercises and sets.", response_model=WorkoutCreatedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    workout = service.create(user.id, data)
    return WorkoutCreatedResponse(workout_id=workout.id)


# ---------------------------------------------------------------------------
# Cardio
# ---------------------------------------------------------------------------

@router.get("/cardio", summary="List cardio sessions.", response_model=CardioListResponse, )
def list_cardio(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
                limit: int = Query(10, ge=1, le=100, description="Max sessions when no date is given"),
                db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CardioService(db)
    sessions = service.list_sessions(user.id, date, limit)
    return CardioListResponse(sessions=[CardioSessionResponse.model_validate(s) for s in sessions])


@router.post("/cardio", summary="Log a cardio session.", response_model=CardioCreatedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_cardio(data: CardioSessionCreate, db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), ):
    service = CardioService(db)
    entry = service.create(user.id, data)
    return CardioCreatedResponse(session_id=entry.id)


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------

@router.patch("/sets/{set_id}", summary="Edit reps, weight or RPE of a set.", response_model=SetUpdatedResponse, )
def update_set(set_id: int, data: ExerciseSetUpdate, db: Session = Depends(get_db),
               user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    exercise_set = service.update_set(user.id, set_id, data)
    return SetUpdatedResponse(set=ExerciseSetResponse.model_validate(exercise_set))


@router.delete("/sets/{set_id}", summary="Delete a set and renumber the rest.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_set(set_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    service.delete_set(user.id, set_id)


@router.get("/{workout_id}", summary="Workout with exercises and sets.", response_model=WorkoutDetail, )
def get_workout(workout_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.get(user.id, workout_id)
