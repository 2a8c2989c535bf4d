"""
Core Rules - Reglas de dominio para el motor de cronogramas.

Este paquete contiene la resolución de cargo/ubicación efectivos, la
resolución de horarios de turno y los validadores de calidad de datos.
"""

from .assignment import (
    EffectiveAssignment,
    get_effective_details,
    find_active_role_change,
    find_active_transfer,
    find_overlapping_records,
)

from .shift_rules import (
    ADMIN_SHIFT_DETAILS,
    FALLBACK_SHIFT_DETAILS,
    find_rule,
    find_overtime_rule,
    get_shift_details_from_rules,
)

from .validators import (
    DataQualityIssue,
    InputValidator,
    ShiftPatternValidator,
    IntervalValidator,
    OverlapValidator,
    ManualOverrideValidator,
    CompositeValidator,
    default_validator,
)

__all__ = [
    # Assignment
    'EffectiveAssignment',
    'get_effective_details',
    'find_active_role_change',
    'find_active_transfer',
    'find_overlapping_records',

    # Shift rules
    'ADMIN_SHIFT_DETAILS',
    'FALLBACK_SHIFT_DETAILS',
    'find_rule',
    'find_overtime_rule',
    'get_shift_details_from_rules',

    # Validators
    'DataQualityIssue',
    'InputValidator',
    'ShiftPatternValidator',
    'IntervalValidator',
    'OverlapValidator',
    'ManualOverrideValidator',
    'CompositeValidator',
    'default_validator',
]
