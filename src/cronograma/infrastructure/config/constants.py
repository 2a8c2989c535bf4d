"""
Constantes del motor de cronogramas.

Este módulo contiene los valores por defecto de la configuración,
organizados por categorías.
"""

# =====================================================================
# Período de programación
# =====================================================================

# El período va del día 21 del mes anterior al día 20 del mes de referencia
PERIOD_START_DAY = 21
PERIOD_END_DAY = 20

# =====================================================================
# Acondicionamiento de cajeros
# =====================================================================

# Cargo al que aplica el acondicionamiento manual
CASHIER_JOB_TITLE = "CAJERO DE RECAUDO"

# Personal por franja cuando no hay un cronograma guardado
DEFAULT_CONDITIONING = {
    "morning": 4,
    "afternoon": 4,
    "night": 2,
    "is_automatic": False
}

# Colaboradores recomendados por turno diario requerido
STAFFING_FACTOR = 1.4

# =====================================================================
# Simulación de asistencia
# =====================================================================

ATTENDANCE_SIMULATION = {
    "absence_probability": 0.03,
    "forgot_clock_out_probability": 0.05,
    "early_entry_window_minutes": 60
}

# =====================================================================
# Configuración de Logging
# =====================================================================

LOG_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}

LOGGING_CONFIG = {
    "level": "INFO",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}

# =====================================================================
# Configuración de Desarrollo y Debug
# =====================================================================

DEBUG_CONFIG = {
    "enable_debug": False,
    "validate_inputs": True
}
