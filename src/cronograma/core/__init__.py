"""
Core Domain - Dominio puro del motor de cronogramas.

Este paquete contiene toda la lógica de dominio del sistema,
incluyendo modelos, reglas de negocio y servicios de dominio.
"""

# Models - Entidades y objetos de valor
from .models import (
    Collaborator,
    Schedule,
    SavedSchedule,
    ScheduleType,
    ShiftSlot,
    DayType,
    ShiftPattern,
    ShiftDetails,
    OvertimeRule,
    TemporaryTransfer,
    RoleChange,
    AbsenceRequest,
    Lactation,
    Holiday,
    ManualOverride,
    Notification,
    NotificationChange,
    AttendanceRecord,
    Role,
    ScheduleFilters,
    Conditioning,
    ScheduleContext,
)

# Rules - Resolución de asignaciones, horarios y validadores
from .rules import (
    EffectiveAssignment,
    get_effective_details,
    get_shift_details_from_rules,
    DataQualityIssue,
    CompositeValidator,
    default_validator,
)

# Services - Servicios de dominio
from .services import (
    BaseScheduleBuilder,
    ConditioningRebalancer,
    ScheduleUnifier,
    AttendanceSimulator,
    generar_horarios_estaticos,
    apply_conditioning_rebalance,
    generate_attendance_records,
    obtener_horario_unificado,
    seeded_shuffle,
    simple_hash,
)

__all__ = [
    # Models
    'Collaborator',
    'Schedule',
    'SavedSchedule',
    'ScheduleType',
    'ShiftSlot',
    'DayType',
    'ShiftPattern',
    'ShiftDetails',
    'OvertimeRule',
    'TemporaryTransfer',
    'RoleChange',
    'AbsenceRequest',
    'Lactation',
    'Holiday',
    'ManualOverride',
    'Notification',
    'NotificationChange',
    'AttendanceRecord',
    'Role',
    'ScheduleFilters',
    'Conditioning',
    'ScheduleContext',

    # Rules
    'EffectiveAssignment',
    'get_effective_details',
    'get_shift_details_from_rules',
    'DataQualityIssue',
    'CompositeValidator',
    'default_validator',

    # Services
    'BaseScheduleBuilder',
    'ConditioningRebalancer',
    'ScheduleUnifier',
    'AttendanceSimulator',
    'generar_horarios_estaticos',
    'apply_conditioning_rebalance',
    'generate_attendance_records',
    'obtener_horario_unificado',
    'seeded_shuffle',
    'simple_hash',
]
