"""
Core Services - Servicios de dominio para el motor de cronogramas.

Este paquete contiene los servicios que orquestan la lógica de dominio:
barajado determinista, generación base, acondicionamiento, asistencia,
unificación y análisis del cronograma.
"""

# Shuffler
from .shuffler import SeededRandom, seeded_shuffle, simple_hash

# Generator service
from .generator import (
    BaseScheduleBuilder,
    GenerationContext,
    generar_horarios_estaticos,
)

# Rebalancer service
from .rebalancer import (
    ConditioningRebalancer,
    RebalanceResult,
    Shortfall,
    StaffingRecommendation,
    apply_conditioning_rebalance,
    default_cashier_conditioning,
    recommend_staffing,
)

# Attendance service
from .attendance import (
    AttendanceSimulator,
    PunchClassification,
    classify_punches,
    generate_attendance_records,
)

# Unifier service
from .unifier import (
    DEFAULT_CASHIER_JOB_TITLE,
    ScheduleUnifier,
    UnificationReport,
    apply_manual_overrides,
    apply_notifications,
    obtener_horario_unificado,
)

# Analyzer service
from .analyzer import (
    collaborator_summary,
    coverage_gaps,
    daily_shift_counts,
    plot_daily_coverage,
    schedule_to_frame,
)

__all__ = [
    # Shuffler
    'SeededRandom',
    'seeded_shuffle',
    'simple_hash',

    # Generator
    'BaseScheduleBuilder',
    'GenerationContext',
    'generar_horarios_estaticos',

    # Rebalancer
    'ConditioningRebalancer',
    'RebalanceResult',
    'Shortfall',
    'StaffingRecommendation',
    'apply_conditioning_rebalance',
    'default_cashier_conditioning',
    'recommend_staffing',

    # Attendance
    'AttendanceSimulator',
    'PunchClassification',
    'classify_punches',
    'generate_attendance_records',

    # Unifier
    'DEFAULT_CASHIER_JOB_TITLE',
    'ScheduleUnifier',
    'UnificationReport',
    'apply_manual_overrides',
    'apply_notifications',
    'obtener_horario_unificado',

    # Analyzer
    'collaborator_summary',
    'coverage_gaps',
    'daily_shift_counts',
    'plot_daily_coverage',
    'schedule_to_frame',
]
