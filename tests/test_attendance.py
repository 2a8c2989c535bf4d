from datetime import datetime

import pytest

from cronograma.core.models import (
    ComplianceStatus,
    Holiday,
    OvertimeRule,
    RegistrationStatus,
    Schedule,
)
from cronograma.core.services.attendance import (
    AttendanceSimulator,
    classify_punches,
    generate_attendance_records,
)

from conftest import CASHIER, MONDAY, cashier, make_days

START = datetime(2025, 1, 6, 6, 0)
END = datetime(2025, 1, 6, 14, 0)
AFTER_PERIOD = datetime(2025, 1, 20, 12, 0)

M8_RULES = [
    OvertimeRule(CASHIER, "NORMAL", "M8", start_time="06:00", end_time="14:00", sup50=1.5),
    OvertimeRule(CASHIER, "FESTIVO", "M8", start_time="07:00", end_time="15:00", ext100=8.0),
]


@pytest.fixture
def collaborator():
    return cashier("C1")


def single_shift(shift, day=MONDAY):
    schedule = Schedule()
    schedule.set("C1", day, shift)
    return schedule


def reliable_simulator(**kwargs):
    return AttendanceSimulator(overtime_rules=M8_RULES, absence_probability=0,
                               forgot_clock_out_probability=0, **kwargs)


def test_future_days_are_skipped(collaborator):
    days = make_days(MONDAY, 4)
    schedule = Schedule()
    for day in days:
        schedule.set("C1", day, None)

    records = reliable_simulator().generate([collaborator], days, schedule,
                                            now=datetime(2025, 1, 7, 20, 0))

    assert sorted(records) == ["2025-01-06-C1", "2025-01-07-C1"]


def test_status_cells_get_observations(collaborator):
    days = make_days(MONDAY, 4)
    schedule = Schedule()
    for day, value in zip(days, ["VAC", "TRA", "PM", None]):
        schedule.set("C1", day, value)

    records = reliable_simulator().generate([collaborator], days, schedule, now=AFTER_PERIOD)

    observations = [records[f"{day.isoformat()}-C1"].observations for day in days]
    assert observations == ["Vacaciones", "Traslado", "Permiso Médico", "Día Libre"]
    for record in records.values():
        assert record.registration_status == RegistrationStatus.NOT_APPLICABLE
        assert record.entry_time is None


def test_shift_without_schedule_is_reported(collaborator):
    records = reliable_simulator().generate([collaborator], [MONDAY], single_shift("XYZ"), now=AFTER_PERIOD)
    assert records["2025-01-06-C1"].observations == "Turno sin horario definido en reglas: XYZ"


def test_collaborators_outside_schedule_are_skipped(collaborator):
    records = reliable_simulator().generate([collaborator, cashier("C2")], [MONDAY],
                                            single_shift("M8"), now=AFTER_PERIOD)
    assert list(records) == ["2025-01-06-C1"]


def test_completed_shift_with_overtime(collaborator):
    record = reliable_simulator().generate([collaborator], [MONDAY], single_shift("M8"),
                                           now=AFTER_PERIOD)["2025-01-06-C1"]

    assert record.registration_status == RegistrationStatus.COMPLETE
    assert record.compliance_status in (ComplianceStatus.ON_TIME, ComplianceStatus.LATE)
    assert record.is_entry_registered and record.is_exit_registered
    assert abs((record.entry_time - START).total_seconds()) <= 20 * 60
    assert abs((record.exit_time - END).total_seconds()) <= 15 * 60
    assert record.worked_hours is not None
    assert record.extra_hours_50 == 1.5
    assert record.extra_hours_100 == 0


def test_holiday_uses_festive_rule(collaborator):
    holiday = Holiday("Reyes", MONDAY, MONDAY)
    record = reliable_simulator(holidays=[holiday]).generate(
        [collaborator], [MONDAY], single_shift("M8"), now=AFTER_PERIOD)["2025-01-06-C1"]

    assert record.entry_time.hour in (6, 7)
    assert record.extra_hours_100 == 8.0
    assert record.extra_hours_50 == 0


def test_certain_absence(collaborator):
    simulator = AttendanceSimulator(overtime_rules=M8_RULES, absence_probability=1)
    record = simulator.generate([collaborator], [MONDAY], single_shift("M8"),
                                now=AFTER_PERIOD)["2025-01-06-C1"]

    assert record.registration_status == RegistrationStatus.ABSENT
    assert record.observations == "No se presenta al turno"
    assert record.extra_hours_50 == 0


def test_forgotten_clock_out(collaborator):
    simulator = AttendanceSimulator(overtime_rules=M8_RULES, absence_probability=0,
                                    forgot_clock_out_probability=1)
    record = simulator.generate([collaborator], [MONDAY], single_shift("M8"),
                                now=AFTER_PERIOD)["2025-01-06-C1"]

    assert record.registration_status == RegistrationStatus.INCOMPLETE
    assert record.observations == "Salida no registrada"
    assert record.exit_time is None


def test_today_before_entry_window_is_scheduled(collaborator):
    record = reliable_simulator().generate([collaborator], [MONDAY], single_shift("M8"),
                                           now=datetime(2025, 1, 6, 4, 0))["2025-01-06-C1"]

    assert record.entry_time is None
    assert record.registration_status == RegistrationStatus.SCHEDULED
    assert record.observations == "Turno programado"


def test_today_during_shift_is_in_progress(collaborator):
    record = reliable_simulator().generate([collaborator], [MONDAY], single_shift("M8"),
                                           now=datetime(2025, 1, 6, 10, 0))["2025-01-06-C1"]

    assert record.entry_time is not None
    assert record.exit_time is None
    assert record.registration_status == RegistrationStatus.INCOMPLETE
    assert record.observations == "Turno en progreso"


def test_simulation_is_deterministic(collaborator):
    days = make_days(MONDAY, 5)
    schedule = Schedule()
    for day in days:
        schedule.set("C1", day, "M8")

    first = generate_attendance_records([collaborator], days, schedule, overtime_rules=M8_RULES, now=AFTER_PERIOD)
    second = generate_attendance_records([collaborator], days, schedule, overtime_rules=M8_RULES, now=AFTER_PERIOD)

    assert first == second


def test_classify_late_entry():
    result = classify_punches(START, END, datetime(2025, 1, 6, 6, 5), datetime(2025, 1, 6, 14, 0))

    assert result.registration_status == RegistrationStatus.COMPLETE
    assert result.compliance_status == ComplianceStatus.LATE
    assert result.lateness_in_minutes == 5
    assert result.worked_hours == 475 / 60


def test_classify_partial_minute_is_not_late():
    result = classify_punches(START, END, datetime(2025, 1, 6, 6, 0, 59), datetime(2025, 1, 6, 14, 0))

    assert result.compliance_status == ComplianceStatus.ON_TIME
    assert result.observations == "Turno cumplido"
    assert result.lateness_in_minutes == 0


def test_classify_early_entry_is_on_time():
    result = classify_punches(START, END, datetime(2025, 1, 6, 5, 50), datetime(2025, 1, 6, 14, 10))
    assert result.compliance_status == ComplianceStatus.ON_TIME
    assert result.worked_hours == 500 / 60


def test_classify_missing_entry_in_past_day():
    result = classify_punches(START, END, None, None)
    assert result.registration_status == RegistrationStatus.ABSENT
    assert result.compliance_status == ComplianceStatus.NOT_APPLICABLE


def test_classify_missing_entry_after_shift_end_today():
    result = classify_punches(START, END, None, None, is_today=True, now=datetime(2025, 1, 6, 15, 0))
    assert result.registration_status == RegistrationStatus.ABSENT


def test_classify_missing_exit():
    result = classify_punches(START, END, datetime(2025, 1, 6, 6, 0), None)
    assert result.registration_status == RegistrationStatus.INCOMPLETE
    assert result.observations == "Salida no registrada"
    assert result.worked_hours is None


def test_datetime_days_are_accepted(collaborator):
    days = [datetime(2025, 1, 6, 0, 0), datetime(2025, 1, 8, 0, 0)]
    schedule = Schedule()
    for day in days:
        schedule.set("C1", day, None)

    records = reliable_simulator().generate([collaborator], days, schedule,
                                            now=datetime(2025, 1, 7, 12, 0))

    assert list(records) == ["2025-01-06-C1"]
