"""
Shift model - Dominio puro para representar turnos y patrones de turno.

Este módulo contiene los códigos de turno, los patrones cíclicos por cargo,
las reglas de horas extra y la lógica para caracterizar un turno.
"""

from typing import Any, Dict, List, Optional
from enum import Enum
from dataclasses import dataclass, field

from ...exceptions import DataError
from ...utils.text import normalize_text


# Códigos de estado que no son turnos programables
VACATION_CODE = "VAC"
TRANSFER_CODE = "TRA"
GENERIC_ABSENCE_CODE = "PERMISO"
DAY_OFF_LABEL = "LIB"

# Descripción de cada código de ausencia (el motivo de un permiso empieza con ella)
ABSENCE_DESCRIPTIONS: Dict[str, str] = {
    "PM": "Permiso Médico",
    "LIC": "Licencia",
    "SUS": "Suspensión",
    "RET": "Retiro",
    "FI": "Falta Injustificada",
}

# Estados que pausan el avance del ciclo de un colaborador
NON_WORKING_CODES = frozenset({VACATION_CODE, TRANSFER_CODE, *ABSENCE_DESCRIPTIONS})

# Turnos por defecto
DEFAULT_ADMIN_SHIFT = "N9"
DEFAULT_WEEKDAY_SHIFT = "D12"
LACTATION_FALLBACK_SHIFT = "M8"

# Orden de presentación de los turnos más comunes
ORDERED_SHIFT_CODES = ['M8', 'T8', 'N8', 'D12', 'N12', 'TA', 'T24', 'D10', 'D9']


class ScheduleType(Enum):
    """Tipos de patrón de turnos."""
    ROTATING = "ROTATING"                   # Semana completa, ciclo continuo
    MONDAY_TO_FRIDAY = "MONDAY_TO_FRIDAY"   # Lunes a viernes, fines de semana libres

    @classmethod
    def from_string(cls, value: str) -> 'ScheduleType':
        """Convierte string a ScheduleType."""
        for schedule_type in cls:
            if schedule_type.value == value:
                return schedule_type
        raise DataError(f"Tipo de patrón inválido: {value}")


class ShiftSlot(Enum):
    """Franjas de turno que el acondicionamiento de cajeros puede reasignar."""
    MORNING = "M8"
    AFTERNOON = "T8"
    NIGHT = "N8"

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Retorna todos los códigos como strings."""
        return [slot.value for slot in cls]


class DayType(Enum):
    """Tipo de jornada para las reglas de horas extra."""
    NORMAL = "NORMAL"
    FESTIVO = "FESTIVO"


def normalize_shift_code(value: Optional[str]) -> Optional[str]:
    """Normaliza un código de turno de un ciclo: 'LIB' o vacío significan descanso."""
    if value is None:
        return None
    code = str(value).strip().upper()
    if not code or code == DAY_OFF_LABEL:
        return None
    return code


class ShiftCharacteristics:
    """
    Determina las características especiales de un código de turno.
    """

    @staticmethod
    def is_night_shift(shift: Optional[str]) -> bool:
        """Turno nocturno o de 24 horas (restringido durante la lactancia)."""
        if not shift:
            return False
        return 'N' in shift or 'T24' in shift

    @staticmethod
    def is_working_shift(shift: Optional[str]) -> bool:
        """Indica si el valor es un turno trabajado."""
        return bool(shift) and shift not in NON_WORKING_CODES

    @staticmethod
    def absence_code_for_reason(reason: Optional[str]) -> str:
        """
        Obtiene el código de ausencia a partir del motivo de un permiso.

        El motivo tiene la forma "Descripción: detalle"; la descripción debe
        coincidir exactamente con una de ABSENCE_DESCRIPTIONS.
        """
        description = (reason or '').split(':')[0].strip()
        for code, known_description in ABSENCE_DESCRIPTIONS.items():
            if known_description == description:
                return code
        return GENERIC_ABSENCE_CODE


@dataclass
class ShiftPattern:
    """Patrón de turnos de un cargo."""
    job_title: str
    schedule_type: ScheduleType
    cycle: List[Optional[str]] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.schedule_type, str):
            self.schedule_type = ScheduleType.from_string(self.schedule_type)
        self.cycle = [normalize_shift_code(code) for code in (self.cycle or [])]

    @property
    def first_shift(self) -> Optional[str]:
        return self.cycle[0] if self.cycle else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], normalize: bool = False) -> 'ShiftPattern':
        try:
            job_title = data['jobTitle']
            return cls(
                job_title=normalize_text(job_title) if normalize else job_title,
                schedule_type=data.get('scheduleType', ScheduleType.ROTATING.value),
                cycle=list(data.get('cycle') or []),
            )
        except KeyError as e:
            raise DataError(f"Patrón de turno sin campo requerido: {e}") from e


@dataclass(frozen=True)
class ShiftDetails:
    """Hora de inicio y duración (en horas) de un turno."""
    start_hour: int
    start_minute: int
    hours: float

    @property
    def minutes(self) -> int:
        return int(round(self.hours * 60))


@dataclass
class OvertimeRule:
    """Regla de horario y recargos para (cargo, tipo de día, turno)."""
    job_title: str
    day_type: DayType
    shift: str
    start_time: Optional[str] = None   # HH:mm
    end_time: Optional[str] = None     # HH:mm
    night_surcharge: float = 0.0
    sup50: float = 0.0
    ext100: float = 0.0

    def __post_init__(self):
        if isinstance(self.day_type, str):
            try:
                self.day_type = DayType(self.day_type)
            except ValueError as e:
                raise DataError(f"Tipo de día inválido: {self.day_type}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OvertimeRule':
        try:
            return cls(
                job_title=data['jobTitle'],
                day_type=data.get('dayType', DayType.NORMAL.value),
                shift=data['shift'],
                start_time=data.get('startTime'),
                end_time=data.get('endTime'),
                night_surcharge=float(data.get('nightSurcharge') or 0),
                sup50=float(data.get('sup50') or 0),
                ext100=float(data.get('ext100') or 0),
            )
        except KeyError as e:
            raise DataError(f"Regla de horas extra sin campo requerido: {e}") from e
