from datetime import date, datetime

import pytest

from cronograma.application import (
    GenerateScheduleUseCase,
    ScheduleGenerationRequest,
    SimulateAttendanceUseCase,
    save_schedule,
)
from cronograma.core.models import Conditioning, Role, ScheduleFilters
from cronograma.core.services import generar_horarios_estaticos
from cronograma.exceptions import DataError
from cronograma.infrastructure.config import Settings
from cronograma.infrastructure.data_sources import (
    InMemorySavedScheduleRepository,
    InMemoryScheduleDataSource,
)
from cronograma.utils import get_period_days

from conftest import CASHIER, NORTH

ANCHOR = date(2025, 2, 1)


@pytest.fixture
def config(monkeypatch):
    for name in ("CRONOGRAMA_DEBUG", "CRONOGRAMA_LOG_LEVEL", "CRONOGRAMA_CASHIER_JOB_TITLE",
                 "CRONOGRAMA_PERIOD_START_DAY", "CRONOGRAMA_PERIOD_END_DAY"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def data_source():
    collaborators = [
        {"id": f"c{i}", "name": f"Cajero {i}", "originalJobTitle": "Cajero de Recaudo",
         "originalLocation": "Sede Norte"}
        for i in range(1, 6)
    ]
    collaborators.append({"id": "a1", "nombres": "Ana", "apellidos": "Ruiz",
                          "cargo": "Analista", "ubicacion": "Sede Norte"})
    return InMemoryScheduleDataSource.from_payload({
        "collaborators": collaborators,
        "shiftPatterns": [{"jobTitle": CASHIER, "scheduleType": "ROTATING",
                           "cycle": ["M8", "T8", "N8", "LIB"]}],
        "overtimeRules": [
            {"jobTitle": CASHIER, "dayType": "NORMAL", "shift": "M8", "startTime": "06:00", "endTime": "14:00"},
            {"jobTitle": CASHIER, "dayType": "NORMAL", "shift": "T8", "startTime": "14:00", "endTime": "22:00"},
            {"jobTitle": CASHIER, "dayType": "NORMAL", "shift": "N8", "startTime": "22:00", "endTime": "06:00"},
        ],
    })


def cashier_request(**kwargs):
    return ScheduleGenerationRequest(ANCHOR, Role.COORDINATOR,
                                     ScheduleFilters(location=NORTH, job_title=CASHIER), **kwargs)


def test_period_runs_from_21st_to_20th(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))

    assert result.period_identifier == "2025-02"
    assert len(result.days) == 31
    assert result.days[0] == date(2025, 1, 21)
    assert result.days[-1] == date(2025, 2, 20)
    assert not result.locked
    assert len(result.schedule) == 6 * 31


def test_cashier_view_uses_default_manual_conditioning(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(cashier_request())

    assert result.conditioning == Conditioning(4, 4, 2, is_automatic=False)
    # Cinco cajeros no alcanzan para diez turnos diarios
    assert result.shortfalls
    assert not result.is_fully_staffed


def test_other_views_are_automatic(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))

    assert result.conditioning.is_automatic
    assert result.shortfalls == []


def test_explicit_conditioning_is_used(data_source, config):
    request = cashier_request(conditioning=Conditioning(1, 1, 1))
    result = GenerateScheduleUseCase(data_source, config=config).execute(request)

    assert result.conditioning == Conditioning(1, 1, 1)
    assert result.shortfalls == []


def test_missing_pattern_is_reported_as_warning(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))
    assert any("ANALISTA" in warning for warning in result.warnings)


def test_validation_can_be_disabled(data_source, config):
    config.update_setting("debug.validate_inputs", False)
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))
    assert result.warnings == []


def test_saved_schedule_is_locked(data_source, config):
    repository = InMemorySavedScheduleRepository()
    use_case = GenerateScheduleUseCase(data_source, repository, config)
    request = cashier_request(conditioning=Conditioning(2, 1, 1))

    first = use_case.execute(request)
    saved = save_schedule(repository, request, first, saved_by={"id": "coord-1"})

    assert first.locked
    assert saved.id == f"2025-02_{NORTH}_{CASHIER}"
    assert repository.exists(saved.id)

    second = use_case.execute(cashier_request())

    assert second.locked
    assert second.schedule == first.schedule
    assert second.conditioning == Conditioning(2, 1, 1, is_automatic=False)


def test_locked_schedule_cannot_be_saved_again(data_source, config):
    repository = InMemorySavedScheduleRepository()
    request = cashier_request()
    result = GenerateScheduleUseCase(data_source, repository, config).execute(request)
    save_schedule(repository, request, result)

    with pytest.raises(DataError):
        save_schedule(repository, request, result)


def test_only_single_group_views_can_be_saved(data_source, config):
    request = ScheduleGenerationRequest(ANCHOR)
    result = GenerateScheduleUseCase(data_source, config=config).execute(request)

    with pytest.raises(DataError):
        save_schedule(InMemorySavedScheduleRepository(), request, result)


def test_simulate_attendance_until_today(data_source, config):
    generation = GenerateScheduleUseCase(data_source, config=config).execute(cashier_request())

    records = SimulateAttendanceUseCase(data_source, config).execute(
        generation, now=datetime(2025, 2, 1, 0, 0))

    # Del 21 de enero al 1 de febrero, seis colaboradores
    assert len(records) == 12 * 6
    assert "2025-02-02-c1" not in records
    analyst_monday = records["2025-01-27-a1"]
    assert analyst_monday.scheduled_shift == "N9"


def test_stagger_follows_first_day_of_period(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))

    expected = generar_horarios_estaticos(data_source.get_collaborators(), get_period_days(ANCHOR),
                                          data_source.get_shift_patterns())

    assert result.period_identifier == "2025-02"
    assert result.schedule == expected


def test_cashier_view_reports_staffing(data_source, config):
    request = cashier_request(conditioning=Conditioning(2, 1, 1))
    staffing = GenerateScheduleUseCase(data_source, config=config).execute(request).staffing

    assert staffing.total_daily_shifts == 4
    assert staffing.recommended_collaborators == 6
    assert staffing.available_collaborators == 5
    assert staffing.is_understaffed


def test_staffing_factor_comes_from_settings(data_source, config):
    config.update_setting("schedule.staffing_factor", 1.0)
    request = cashier_request(conditioning=Conditioning(2, 1, 1))
    staffing = GenerateScheduleUseCase(data_source, config=config).execute(request).staffing

    assert staffing.recommended_collaborators == 4
    assert not staffing.is_understaffed


def test_automatic_views_have_no_staffing(data_source, config):
    result = GenerateScheduleUseCase(data_source, config=config).execute(ScheduleGenerationRequest(ANCHOR))
    assert result.staffing is None
