"""
Service tests for sleep, heart rate, body metrics and recovery.
"""

import datetime

import pytest
from fastapi import HTTPException

from app.schemas.health import BodyMetricsCreate, HeartRateLogCreate, SleepLogCreate
from app.schemas.recovery import RecoveryCreate
from app.services.body_metrics_service import BodyMetricsService
from app.services.heart_rate_service import HeartRateService
from app.services.recovery_service import RecoveryService
from app.services.sleep_service import SleepService, hours_between

TODAY = datetime.date.today()
YESTERDAY = TODAY - datetime.timedelta(days=1)


# ======================================================================
# Sleep
# ======================================================================


class TestHoursBetween:
    """Test sleep duration across midnight."""

    @pytest.mark.parametrize("bed,wake,expected", [
        (datetime.time(23, 0), datetime.time(7, 0), 8.0),
        (datetime.time(23, 15), datetime.time(6, 45), 7.5),
        (datetime.time(1, 0), datetime.time(8, 30), 7.5),
        (datetime.time(22, 0), datetime.time(22, 0), 0.0),
        (datetime.time(13, 0), datetime.time(14, 20), 1.3),
    ])
    def test_hours(self, bed, wake, expected):
        assert hours_between(bed, wake) == pytest.approx(expected)


class TestSleepService:
    """Test sleep upsert, overview and deletion."""

    def test_hours_derived_from_times(self, session, user):
        entry, created = SleepService(session).upsert(
            user.id, SleepLogCreate(bedtime=datetime.time(23, 0), wake_time=datetime.time(7, 0), quality_rating=4),
        )
        assert created is True
        assert entry.hours_slept == 8.0
        assert entry.date == TODAY

    def test_explicit_hours_win(self, session, user):
        entry, _ = SleepService(session).upsert(
            user.id, SleepLogCreate(bedtime=datetime.time(23, 0), wake_time=datetime.time(7, 0), hours_slept=7.2),
        )
        assert entry.hours_slept == 7.2

    def test_upsert_replaces_same_date(self, session, user):
        service = SleepService(session)
        first, _ = service.upsert(user.id, SleepLogCreate(hours_slept=6, quality_rating=2))
        second, created = service.upsert(user.id, SleepLogCreate(hours_slept=8, quality_rating=5))
        assert created is False
        assert second.id == first.id
        assert service.get_by_date(user.id, TODAY).quality_rating == 5

    def test_overview_stats(self, session, user):
        service = SleepService(session)
        service.upsert(user.id, SleepLogCreate(date=YESTERDAY, hours_slept=6, quality_rating=3))
        service.upsert(user.id, SleepLogCreate(date=TODAY, hours_slept=8, quality_rating=5))

        overview = service.overview(user.id)
        assert overview.latest.date == TODAY
        assert len(overview.history) == 2
        assert overview.stats.avg_hours == 7.0
        assert overview.stats.avg_quality == 4.0
        assert overview.stats.total_logs == 2

    def test_delete(self, session, user):
        service = SleepService(session)
        service.upsert(user.id, SleepLogCreate(hours_slept=7))
        service.delete_by_date(user.id, TODAY)
        assert service.get_by_date(user.id, TODAY) is None

    def test_delete_missing(self, session, user):
        with pytest.raises(HTTPException) as exc:
            SleepService(session).delete_by_date(user.id, TODAY)
        assert exc.value.status_code == 404


# ======================================================================
# Heart rate
# ======================================================================


class TestHeartRateService:
    """Test heart rate upsert and stats."""

    def test_upsert_and_stats(self, session, user):
        service = HeartRateService(session)
        _, created = service.upsert(user.id, HeartRateLogCreate(date=YESTERDAY, resting_hr=60, max_hr=170))
        assert created is True
        service.upsert(user.id, HeartRateLogCreate(date=TODAY, resting_hr=55))
        _, created = service.upsert(user.id, HeartRateLogCreate(date=TODAY, resting_hr=53))
        assert created is False

        overview = service.overview(user.id)
        assert overview.latest.resting_hr == 53
        assert overview.stats.avg_resting_hr == 56.5
        assert overview.stats.min_resting_hr == 53
        assert overview.stats.max_resting_hr == 60
        assert overview.stats.total_logs == 2

    def test_record_resting_hr_keeps_other_readings(self, session, user):
        service = HeartRateService(session)
        service.upsert(user.id, HeartRateLogCreate(date=TODAY, resting_hr=60, avg_hr=80, max_hr=150))
        entry = service.record_resting_hr(user.id, TODAY, 52)
        assert entry.resting_hr == 52
        assert entry.max_hr == 150

    def test_delete_missing(self, session, user):
        with pytest.raises(HTTPException) as exc:
            HeartRateService(session).delete_by_date(user.id, TODAY)
        assert exc.value.status_code == 404


# ======================================================================
# Body metrics
# ======================================================================


class TestBodyMetricsService:
    """Test body metrics overview and change."""

    def test_change_vs_previous(self, session, user):
        service = BodyMetricsService(session)
        service.create(user.id, BodyMetricsCreate(date=YESTERDAY, weight_kg=80.4, body_fat_percent=18.0))
        service.create(user.id, BodyMetricsCreate(date=TODAY, weight_kg=79.9, waist_cm=84))

        overview = service.overview(user.id)
        assert overview.latest.weight_kg == 79.9
        assert len(overview.history) == 2
        assert overview.changes.weight == pytest.approx(-0.5)
        assert overview.changes.body_fat is None

    def test_single_entry_has_no_change(self, session, user):
        service = BodyMetricsService(session)
        service.create(user.id, BodyMetricsCreate(weight_kg=80))
        assert service.overview(user.id).changes is None

    def test_date_filter(self, session, user):
        service = BodyMetricsService(session)
        service.create(user.id, BodyMetricsCreate(date=YESTERDAY, weight_kg=80))
        service.create(user.id, BodyMetricsCreate(date=TODAY, weight_kg=79))
        overview = service.overview(user.id, date=YESTERDAY)
        assert [e.weight_kg for e in overview.history] == [80]


# ======================================================================
# Recovery
# ======================================================================


class TestRecoveryService:
    """Test server-side recovery scoring and upsert."""

    def test_score_uses_sleep_log(self, session, user):
        SleepService(session).upsert(user.id, SleepLogCreate(hours_slept=8, quality_rating=5))
        entry = RecoveryService(session).save(
            user.id, RecoveryCreate(muscle_soreness=1, energy_level=5, hrv_score=80, resting_hr=50),
        )
        assert entry.recovery_score == 100
        assert entry.sleep_score == 100
        assert entry.hrv_score == 80

    def test_resting_hr_is_stored(self, session, user):
        RecoveryService(session).save(user.id, RecoveryCreate(resting_hr=58))
        assert HeartRateService(session).get_by_date(user.id, TODAY).resting_hr == 58

    def test_logged_resting_hr_is_used(self, session, user):
        HeartRateService(session).upsert(user.id, HeartRateLogCreate(resting_hr=80))
        entry = RecoveryService(session).save(user.id, RecoveryCreate())
        # sleep 50, hrv 50, rhr 0, soreness 50, energy 50: 15 + 12.5 + 0 + 6.25 + 6.25
        assert entry.recovery_score == 40

    def test_without_sleep_data(self, session, user):
        entry = RecoveryService(session).save(user.id, RecoveryCreate(muscle_soreness=5, energy_level=1))
        assert entry.sleep_score is None
        assert entry.recovery_score == 38

    def test_resubmit_overwrites(self, session, user):
        service = RecoveryService(session)
        first = service.save(user.id, RecoveryCreate(muscle_soreness=5, energy_level=1))
        first_id = first.id
        second = service.save(user.id, RecoveryCreate(muscle_soreness=1, energy_level=5))
        assert second.id == first_id
        assert second.recovery_score == 63

    def test_overview(self, session, user):
        SleepService(session).upsert(user.id, SleepLogCreate(hours_slept=7.5))
        RecoveryService(session).save(user.id, RecoveryCreate(energy_level=4))

        overview = RecoveryService(session).overview(user.id)
        assert overview.date == TODAY
        assert overview.recovery is not None
        assert overview.recommendation.status == "good"
        assert overview.sleep.hours_slept == 7.5
        assert overview.heart_rate is None
        assert len(overview.history) == 1

    def test_overview_without_data(self, session, user):
        overview = RecoveryService(session).overview(user.id)
        assert overview.recovery is None
        assert overview.recommendation is None
        assert overview.history == []
