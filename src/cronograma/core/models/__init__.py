"""
Core Models - Modelos de dominio puro para el motor de cronogramas.

Este paquete contiene todas las entidades y objetos de valor del dominio,
sin dependencias externas ni lógica de infraestructura.
"""

from .collaborator import Collaborator
from .schedule import Schedule, SavedSchedule
from .shift import (
    ScheduleType,
    ShiftSlot,
    DayType,
    ShiftCharacteristics,
    ShiftPattern,
    ShiftDetails,
    OvertimeRule,
    normalize_shift_code,
    ABSENCE_DESCRIPTIONS,
    NON_WORKING_CODES,
    ORDERED_SHIFT_CODES,
    VACATION_CODE,
    TRANSFER_CODE,
    GENERIC_ABSENCE_CODE,
    DAY_OFF_LABEL,
    DEFAULT_ADMIN_SHIFT,
    DEFAULT_WEEKDAY_SHIFT,
    LACTATION_FALLBACK_SHIFT,
)
from .overrides import (
    IntervalRecord,
    TemporaryTransfer,
    RoleChange,
    RequestType,
    AbsenceRequest,
    Lactation,
    Holiday,
    ManualOverride,
    ManualOverrides,
    NotificationStatus,
    NotificationChange,
    Notification,
    SCHEDULED_SHIFT_FIELD,
    manual_overrides_from_dict,
)
from .attendance import AttendanceRecord, RegistrationStatus, ComplianceStatus
from .context import ALL, Role, ScheduleFilters, Conditioning, ScheduleContext

__all__ = [
    # Collaborator
    'Collaborator',

    # Schedule
    'Schedule',
    'SavedSchedule',

    # Shift
    'ScheduleType',
    'ShiftSlot',
    'DayType',
    'ShiftCharacteristics',
    'ShiftPattern',
    'ShiftDetails',
    'OvertimeRule',
    'normalize_shift_code',
    'ABSENCE_DESCRIPTIONS',
    'NON_WORKING_CODES',
    'ORDERED_SHIFT_CODES',
    'VACATION_CODE',
    'TRANSFER_CODE',
    'GENERIC_ABSENCE_CODE',
    'DAY_OFF_LABEL',
    'DEFAULT_ADMIN_SHIFT',
    'DEFAULT_WEEKDAY_SHIFT',
    'LACTATION_FALLBACK_SHIFT',

    # Overrides
    'IntervalRecord',
    'TemporaryTransfer',
    'RoleChange',
    'RequestType',
    'AbsenceRequest',
    'Lactation',
    'Holiday',
    'ManualOverride',
    'ManualOverrides',
    'NotificationStatus',
    'NotificationChange',
    'Notification',
    'SCHEDULED_SHIFT_FIELD',
    'manual_overrides_from_dict',

    # Attendance
    'AttendanceRecord',
    'RegistrationStatus',
    'ComplianceStatus',

    # Context
    'ALL',
    'Role',
    'ScheduleFilters',
    'Conditioning',
    'ScheduleContext',
]
