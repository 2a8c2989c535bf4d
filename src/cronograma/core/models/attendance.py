"""
Registros de asistencia derivados del cronograma.
"""

from datetime import date, datetime
from typing import Optional
from enum import Enum
from dataclasses import dataclass

from .collaborator import Collaborator


class RegistrationStatus(Enum):
    """Estado de las marcaciones de un turno."""
    COMPLETE = "Completo"
    INCOMPLETE = "Incompleto"
    ABSENT = "Falta"
    SCHEDULED = "Programado"
    NOT_APPLICABLE = "N/A"


class ComplianceStatus(Enum):
    """Cumplimiento de la hora de entrada."""
    ON_TIME = "A Tiempo"
    LATE = "Atraso"
    NOT_APPLICABLE = "N/A"


@dataclass
class AttendanceRecord:
    """Asistencia de un colaborador en un día."""
    id: str
    collaborator: Collaborator
    date: date
    scheduled_shift: Optional[str]
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None
    is_entry_registered: bool = False
    is_exit_registered: bool = False
    lateness_in_minutes: int = 0
    worked_hours: Optional[float] = None
    extra_hours_25: float = 0.0
    extra_hours_50: float = 0.0
    extra_hours_100: float = 0.0
    observations: str = ""
    registration_status: RegistrationStatus = RegistrationStatus.NOT_APPLICABLE
    compliance_status: ComplianceStatus = ComplianceStatus.NOT_APPLICABLE

    @property
    def was_worked(self) -> bool:
        return (self.registration_status == RegistrationStatus.COMPLETE or
                self.compliance_status in (ComplianceStatus.ON_TIME, ComplianceStatus.LATE))
