"""
Infrastructure Config - Configuración del sistema.

Este paquete contiene toda la configuración del sistema,
incluyendo constantes, configuraciones y utilidades.
"""

from .constants import (
    PERIOD_START_DAY,
    PERIOD_END_DAY,
    CASHIER_JOB_TITLE,
    DEFAULT_CONDITIONING,
    STAFFING_FACTOR,
    ATTENDANCE_SIMULATION,
    LOG_LEVELS,
    LOGGING_CONFIG,
    DEBUG_CONFIG
)

from .settings import (
    Settings,
    settings,
    configure_logging,
    get_cashier_job_title,
    get_period_bounds
)

__all__ = [
    # Constants
    'PERIOD_START_DAY',
    'PERIOD_END_DAY',
    'CASHIER_JOB_TITLE',
    'DEFAULT_CONDITIONING',
    'STAFFING_FACTOR',
    'ATTENDANCE_SIMULATION',
    'LOG_LEVELS',
    'LOGGING_CONFIG',
    'DEBUG_CONFIG',

    # Settings
    'Settings',
    'settings',
    'configure_logging',
    'get_cashier_job_title',
    'get_period_bounds',
]
