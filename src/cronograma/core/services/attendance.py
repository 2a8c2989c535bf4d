"""
Servicio de asistencia - Dominio puro.

Deriva registros de asistencia a partir del cronograma final. Las marcaciones
de entrada y salida se simulan de forma determinista (misma semilla por día y
colaborador); la clasificación de estados es la misma que se aplica a
marcaciones reales mediante classify_punches.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Dict, NamedTuple, Optional, Sequence

from ..models import (
    ABSENCE_DESCRIPTIONS,
    AttendanceRecord,
    Collaborator,
    ComplianceStatus,
    DayType,
    Holiday,
    OvertimeRule,
    RegistrationStatus,
    RoleChange,
    Schedule,
    ShiftDetails,
    TemporaryTransfer,
    TRANSFER_CODE,
    VACATION_CODE,
)
from ..rules.assignment import get_effective_details
from ..rules.shift_rules import find_overtime_rule, get_shift_details_from_rules
from .shuffler import SeededRandom, simple_hash
from ...utils.date_utils import day_key, to_date

logger = logging.getLogger(__name__)

# Probabilidades de la simulación
ABSENCE_PROBABILITY = 0.03
FORGOT_CLOCK_OUT_PROBABILITY = 0.05

# Una entrada del día en curso solo existe desde una hora antes del turno
EARLY_ENTRY_WINDOW = timedelta(minutes=60)

STATUS_OBSERVATIONS: Dict[str, str] = {
    VACATION_CODE: "Vacaciones",
    TRANSFER_CODE: "Traslado",
    **ABSENCE_DESCRIPTIONS,
}


class PunchClassification(NamedTuple):
    """Resultado de clasificar las marcaciones de un turno."""
    registration_status: RegistrationStatus
    compliance_status: ComplianceStatus
    observations: str
    lateness_in_minutes: int = 0
    worked_hours: Optional[float] = None


def _minutes_between(later: datetime, earlier: datetime) -> int:
    # Minutos completos, truncando hacia cero
    return int((later - earlier).total_seconds() / 60)


def classify_punches(shift_start: datetime,
                     shift_end: datetime,
                     entry_time: Optional[datetime],
                     exit_time: Optional[datetime],
                     is_today: bool = False,
                     now: Optional[datetime] = None) -> PunchClassification:
    """
    Clasifica las marcaciones de un turno.

    Args:
        shift_start: Inicio programado del turno
        shift_end: Fin programado del turno
        entry_time: Marcación de entrada (o None)
        exit_time: Marcación de salida (o None)
        is_today: El turno corresponde al día en curso
        now: Momento de referencia para turnos del día en curso

    Returns:
        PunchClassification
    """
    now = now or datetime.now()
    worked_hours = None
    if entry_time and exit_time:
        worked_hours = _minutes_between(exit_time, entry_time) / 60

    if not entry_time:
        if not is_today or now > shift_end:
            return PunchClassification(RegistrationStatus.ABSENT, ComplianceStatus.NOT_APPLICABLE,
                                       "No se presenta al turno")
        return PunchClassification(RegistrationStatus.SCHEDULED, ComplianceStatus.NOT_APPLICABLE,
                                   "Turno programado")

    if not exit_time:
        observations = "Turno en progreso" if is_today and now < shift_end else "Salida no registrada"
        return PunchClassification(RegistrationStatus.INCOMPLETE, ComplianceStatus.NOT_APPLICABLE,
                                   observations)

    lateness = max(0, _minutes_between(entry_time, shift_start))
    if lateness > 0:
        return PunchClassification(RegistrationStatus.COMPLETE, ComplianceStatus.LATE,
                                   "Llegada tarde", lateness, worked_hours)
    return PunchClassification(RegistrationStatus.COMPLETE, ComplianceStatus.ON_TIME,
                               "Turno cumplido", 0, worked_hours)


def shift_window(day: date, details: ShiftDetails):
    """Inicio y fin programados de un turno en un día."""
    start = datetime(day.year, day.month, day.day, details.start_hour, details.start_minute)
    return start, start + timedelta(minutes=details.hours * 60)


class AttendanceSimulator:
    """
    Genera registros de asistencia para días pasados y el día en curso.

    Los días futuros se omiten. Cada registro usa una semilla derivada de
    "{día}-{colaborador}", por lo que la simulación es reproducible.
    """

    def __init__(self,
                 holidays: Sequence[Holiday] = (),
                 overtime_rules: Sequence[OvertimeRule] = (),
                 transfers: Sequence[TemporaryTransfer] = (),
                 role_changes: Sequence[RoleChange] = (),
                 absence_probability: float = ABSENCE_PROBABILITY,
                 forgot_clock_out_probability: float = FORGOT_CLOCK_OUT_PROBABILITY,
                 early_entry_window: timedelta = EARLY_ENTRY_WINDOW):
        self.holidays = list(holidays)
        self.overtime_rules = list(overtime_rules)
        self.transfers = list(transfers)
        self.role_changes = list(role_changes)
        self.absence_probability = absence_probability
        self.forgot_clock_out_probability = forgot_clock_out_probability
        self.early_entry_window = early_entry_window

    def generate(self,
                 collaborators: Sequence[Collaborator],
                 days: Sequence[date],
                 schedule: Schedule,
                 now: Optional[datetime] = None) -> Dict[str, AttendanceRecord]:
        """
        Genera los registros de asistencia.

        Args:
            collaborators: Colaboradores a procesar
            days: Días del período
            schedule: Cronograma final
            now: Momento de referencia (por defecto, el actual)

        Returns:
            Dict[str, AttendanceRecord]: Registros por id "{día}-{colaborador}"
        """
        records: Dict[str, AttendanceRecord] = {}
        if not days or not collaborators:
            return records

        now = now or datetime.now()
        today = now.date()

        for day in map(to_date, days):
            if day > today:
                continue

            is_today = day == today
            day_type = DayType.FESTIVO if any(h.covers(day) for h in self.holidays) else DayType.NORMAL

            for collaborator in collaborators:
                if not schedule.has_collaborator(collaborator.id):
                    continue
                record = self._build_record(collaborator, day, schedule, day_type, is_today, now)
                records[record.id] = record

        logger.debug("Asistencia generada: %d registros", len(records))
        return records

    def _build_record(self, collaborator: Collaborator, day: date, schedule: Schedule,
                      day_type: DayType, is_today: bool, now: datetime) -> AttendanceRecord:
        key = day_key(day)
        scheduled_shift = schedule.get(collaborator.id, key)
        record = AttendanceRecord(
            id=f"{key}-{collaborator.id}",
            collaborator=collaborator,
            date=day,
            scheduled_shift=scheduled_shift,
        )

        if scheduled_shift in STATUS_OBSERVATIONS:
            record.observations = STATUS_OBSERVATIONS[scheduled_shift]
            return record

        if not scheduled_shift:
            record.observations = "Día Libre"
            return record

        job_title = get_effective_details(collaborator, day, self.transfers, self.role_changes).job_title
        details = get_shift_details_from_rules(scheduled_shift, job_title, day_type, self.overtime_rules)
        if details is None:
            record.observations = f"Turno sin horario definido en reglas: {scheduled_shift}"
            return record

        shift_start, shift_end = shift_window(day, details)
        self._simulate_punches(record, key, collaborator.id, shift_start, shift_end, is_today, now)

        result = classify_punches(shift_start, shift_end, record.entry_time, record.exit_time,
                                  is_today, now)
        record.registration_status = result.registration_status
        record.compliance_status = result.compliance_status
        record.observations = result.observations
        record.lateness_in_minutes = result.lateness_in_minutes
        record.worked_hours = result.worked_hours

        if record.was_worked:
            rule = find_overtime_rule(scheduled_shift, job_title, day_type, self.overtime_rules)
            if rule is not None:
                record.extra_hours_25 = rule.night_surcharge
                record.extra_hours_50 = rule.sup50
                record.extra_hours_100 = rule.ext100

        return record

    def _simulate_punches(self, record: AttendanceRecord, key: str, collaborator_id: str,
                          shift_start: datetime, shift_end: datetime,
                          is_today: bool, now: datetime) -> None:
        random = SeededRandom(simple_hash(f"{key}-{collaborator_id}"))

        if random() < self.absence_probability:
            return

        arrival_delay = (random() - 0.2) * 20
        if is_today and now <= shift_start - self.early_entry_window:
            return

        record.entry_time = shift_start + timedelta(minutes=arrival_delay)
        record.is_entry_registered = True

        forgot_to_clock_out = random() < self.forgot_clock_out_probability
        if is_today and now <= shift_end:
            return
        if forgot_to_clock_out:
            return

        departure_offset = (random() - 0.5) * 30
        record.exit_time = shift_end + timedelta(minutes=departure_offset)
        record.is_exit_registered = True


def generate_attendance_records(collaborators: Sequence[Collaborator],
                                days: Sequence[date],
                                schedule: Schedule,
                                holidays: Sequence[Holiday] = (),
                                overtime_rules: Sequence[OvertimeRule] = (),
                                now: Optional[datetime] = None,
                                transfers: Sequence[TemporaryTransfer] = (),
                                role_changes: Sequence[RoleChange] = ()) -> Dict[str, AttendanceRecord]:
    """Genera la asistencia simulada (ver AttendanceSimulator)."""
    simulator = AttendanceSimulator(holidays, overtime_rules, transfers, role_changes)
    return simulator.generate(collaborators, days, schedule, now)
