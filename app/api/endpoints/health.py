"""
Health endpoints.

Body metrics, sleep, heart rate and recovery. Sleep and heart rate are
upserted per date.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.fittrack.recovery import get_recovery_recommendation
from app.models.user import User
from app.schemas.health import (
    BodyMetricsCreate,
    BodyMetricsOverview,
    HeartRateLogCreate,
    HeartRateOverview,
    RecoveryOverview,
    SavedResponse,
    SleepLogCreate,
    SleepOverview,
)
from app.schemas.recovery import RecoveryCreate, RecoverySaveResponse
from app.services.body_metrics_service import BodyMetricsService
from app.services.heart_rate_service import HeartRateService
from app.services.recovery_service import RecoveryService
from app.services.sleep_service import SleepService

router = APIRouter()


# ---------------------------------------------------------------------------
# Body metrics
# ---------------------------------------------------------------------------

@router.get("/body", summary="Latest body metrics, history and change.", response_model=BodyMetricsOverview, )
def get_body_metrics(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
                     days: int = Query(30, ge=1, le=365, description="History window (days)"),
                     db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = BodyMetricsService(db)
    return service.overview(user.id, date, days)


@router.post("/body", summary="Log body metrics.", response_model=SavedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_body_metrics(data: BodyMetricsCreate, db: Session = Depends(get_db),
                        user: User = Depends(get_current_user), ):
    service = BodyMetricsService(db)
    entry = service.create(user.id, data)
    return SavedResponse(id=entry.id)


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------

@router.get("/sleep", summary="Latest sleep, history and weekly averages.", response_model=SleepOverview, )
def get_sleep(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
              days: int = Query(7, ge=1, le=365, description="History window (days)"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.overview(user.id, date, days)


@router.post("/sleep", summary="Create or update the sleep entry for a date.", response_model=SavedResponse, )
def upsert_sleep(data: SleepLogCreate, response: Response, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    """Upsert: creates the entry if it doesn't exist, replaces it if it does."""
    service = SleepService(db)
    entry, created = service.upsert(user.id, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return SavedResponse(id=entry.id)


@router.delete("/sleep/{date}", summary="Delete the sleep entry for a date.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_sleep(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    service.delete_by_date(user.id, date)


# ---------------------------------------------------------------------------
# Heart rate
# ---------------------------------------------------------------------------

@router.get("/heart-rate", summary="Latest heart rate, history and resting HR stats.",
            response_model=HeartRateOverview, )
def get_heart_rate(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
                   days: int = Query(7, ge=1, le=365, description="History window (days)"),
                   db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = HeartRateService(db)
    return service.overview(user.id, date, days)


@router.post("/heart-rate", summary="Create or update the heart rate entry for a date.",
             response_model=SavedResponse, )
def upsert_heart_rate(data: HeartRateLogCreate, response: Response, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    service = HeartRateService(db)
    entry, created = service.upsert(user.id, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return SavedResponse(id=entry.id)


@router.delete("/heart-rate/{date}", summary="Delete the heart rate entry for a date.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_heart_rate(date: datetime.date, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    service = HeartRateService(db)
    service.delete_by_date(user.id, date)


# ---------------------------------------------------------------------------
# Recovery
# ---------------------------------------------------------------------------

@router.get("/recovery", summary="Recovery score, recommendation and inputs for a date.",
            response_model=RecoveryOverview, )
def get_recovery(date: Optional[datetime.date] = Query(None, description="Defaults to today"),
                 days: int = Query(7, ge=1, le=365, description="History window (days)"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.overview(user.id, date, days)


@router.post("/recovery", summary="Compute and store the recovery score for a date.",
             response_model=RecoverySaveResponse, )
def save_recovery(data: RecoveryCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """
    The score is computed from the submitted soreness, energy, HRV and
    resting heart rate together with the date's sleep log. Submitting
    again for the same date overwrites the stored score.
    """
    service = RecoveryService(db)
    entry = service.save(user.id, data)
    return RecoverySaveResponse(id=entry.id, recovery_score=entry.recovery_score,
                                recommendation=get_recovery_recommendation(entry.recovery_score), )
