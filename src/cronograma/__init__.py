"""
cronograma - Motor de cronogramas de turnos por ciclos.

Genera el cronograma de un período a partir de los patrones de turno por
cargo, aplicando vacaciones, permisos, traslados, cambios de rol,
lactancias, acondicionamiento de cajeros, ediciones manuales y solicitudes
de cambio.
"""

from .exceptions import CronogramaError, ConfigError, DataError
from .core.models import (
    Collaborator,
    Schedule,
    SavedSchedule,
    ShiftPattern,
    ScheduleType,
    TemporaryTransfer,
    RoleChange,
    AbsenceRequest,
    Lactation,
    Holiday,
    ManualOverride,
    Notification,
    NotificationChange,
    OvertimeRule,
    DayType,
    Role,
    ScheduleFilters,
    Conditioning,
    ScheduleContext,
)
from .core.rules import get_effective_details, get_shift_details_from_rules
from .core.services import (
    generar_horarios_estaticos,
    apply_conditioning_rebalance,
    generate_attendance_records,
    obtener_horario_unificado,
    seeded_shuffle,
    simple_hash,
)
from .utils import get_period_days, get_period_identifier, normalize_text

__version__ = "1.0.0"

__all__ = [
    'CronogramaError',
    'ConfigError',
    'DataError',
    'Collaborator',
    'Schedule',
    'SavedSchedule',
    'ShiftPattern',
    'ScheduleType',
    'TemporaryTransfer',
    'RoleChange',
    'AbsenceRequest',
    'Lactation',
    'Holiday',
    'ManualOverride',
    'Notification',
    'NotificationChange',
    'OvertimeRule',
    'DayType',
    'Role',
    'ScheduleFilters',
    'Conditioning',
    'ScheduleContext',
    'get_effective_details',
    'get_shift_details_from_rules',
    'generar_horarios_estaticos',
    'apply_conditioning_rebalance',
    'generate_attendance_records',
    'obtener_horario_unificado',
    'seeded_shuffle',
    'simple_hash',
    'get_period_days',
    'get_period_identifier',
    'normalize_text',
]
