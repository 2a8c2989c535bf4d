"""
Configuración del motor de cronogramas.

Este módulo proporciona una interfaz unificada para acceder a toda la configuración
del sistema, incluyendo valores por defecto y validaciones.
"""

import os
import json
import copy
import logging
from typing import Dict, Any, Optional
from pathlib import Path

from .constants import *
from ...exceptions import ConfigError

logger = logging.getLogger(__name__)


class Settings:
    """
    Clase principal de configuración del sistema.

    Maneja la carga de configuración desde múltiples fuentes:
    - Valores por defecto
    - Archivo de configuración JSON
    - Variables de entorno
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Inicializa la configuración.

        Args:
            config_file: Ruta al archivo de configuración personalizado (opcional)
        """
        self._config_data = {}
        self._config_file = config_file
        self._load_configuration()

    def _load_configuration(self):
        """Carga la configuración desde todas las fuentes disponibles."""
        # 1. Cargar valores por defecto
        self._load_defaults()

        # 2. Cargar desde archivo de configuración si existe
        if self._config_file and Path(self._config_file).exists():
            self._load_from_file(self._config_file)

        # 3. Cargar desde variables de entorno
        self._load_from_environment()

        # 4. Validar configuración
        self._validate_configuration()

    def _load_defaults(self):
        """Carga los valores por defecto desde constants.py."""
        self._config_data = copy.deepcopy({
            "schedule": {
                "cashier_job_title": CASHIER_JOB_TITLE,
                "period_start_day": PERIOD_START_DAY,
                "period_end_day": PERIOD_END_DAY,
                "default_conditioning": DEFAULT_CONDITIONING,
                "staffing_factor": STAFFING_FACTOR
            },
            "attendance": ATTENDANCE_SIMULATION,
            "logging": LOGGING_CONFIG,
            "debug": DEBUG_CONFIG
        })

    def _load_from_file(self, config_file: str):
        """Carga configuración desde archivo JSON."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"No se pudo cargar el archivo de configuración {config_file}: {e}") from e

        # Merge de configuración usando deep update
        self._deep_update(self._config_data, file_config)

    def _load_from_environment(self):
        """Carga configuración desde variables de entorno."""
        # Mapeo de variables de entorno a configuración
        env_mappings = {
            "CRONOGRAMA_DEBUG": ("debug", "enable_debug", bool),
            "CRONOGRAMA_LOG_LEVEL": ("logging", "level", str),
            "CRONOGRAMA_CASHIER_JOB_TITLE": ("schedule", "cashier_job_title", str),
            "CRONOGRAMA_PERIOD_START_DAY": ("schedule", "period_start_day", int),
            "CRONOGRAMA_PERIOD_END_DAY": ("schedule", "period_end_day", int)
        }

        for env_var, (section, key, var_type) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue

            if var_type == bool:
                value = env_value.lower() in ('true', '1', 'yes', 'on')
            elif var_type == int:
                try:
                    value = int(env_value)
                except ValueError as e:
                    raise ConfigError(f"Valor inválido para {env_var}: {env_value}") from e
            else:
                value = env_value

            self._config_data.setdefault(section, {})[key] = value

    def _validate_configuration(self):
        """Valida que la configuración sea coherente."""
        errors = []
        schedule = self._config_data["schedule"]

        for key in ("period_start_day", "period_end_day"):
            if not 1 <= schedule[key] <= 28:
                errors.append(f"{key} debe estar entre 1 y 28")

        if not schedule["cashier_job_title"]:
            errors.append("Debe definirse el cargo de cajero")

        conditioning = schedule["default_conditioning"]
        if min(conditioning["morning"], conditioning["afternoon"], conditioning["night"]) < 0:
            errors.append("El personal por turno no puede ser negativo")

        if schedule["staffing_factor"] < 1:
            errors.append("El factor de cobertura debe ser al menos 1")

        attendance = self._config_data["attendance"]
        for key in ("absence_probability", "forgot_clock_out_probability"):
            if not 0 <= attendance[key] <= 1:
                errors.append(f"{key} debe estar entre 0 y 1")

        if str(self._config_data["logging"]["level"]).upper() not in LOG_LEVELS:
            errors.append(f"Nivel de log inválido: {self._config_data['logging']['level']}")

        if errors:
            raise ConfigError("Errores en la configuración: " + "; ".join(errors))

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Actualiza recursivamente un diccionario."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    # =====================================================================
    # Métodos de acceso a configuración específica
    # =====================================================================

    def get_schedule_config(self) -> Dict[str, Any]:
        """Obtiene la configuración del cronograma."""
        return self._config_data["schedule"]

    def get_attendance_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de la simulación de asistencia."""
        return self._config_data["attendance"]

    def get_logging_config(self) -> Dict[str, Any]:
        """Obtiene la configuración de logging."""
        return self._config_data["logging"]

    # =====================================================================
    # Métodos de utilidad
    # =====================================================================

    def is_debug_enabled(self) -> bool:
        """Verifica si el modo debug está habilitado."""
        return self._config_data["debug"]["enable_debug"]

    def get_cashier_job_title(self) -> str:
        return self._config_data["schedule"]["cashier_job_title"]

    def get_period_bounds(self):
        """Días de inicio y cierre del período (inicio en el mes anterior)."""
        schedule = self._config_data["schedule"]
        return schedule["period_start_day"], schedule["period_end_day"]

    def get_default_conditioning(self) -> Dict[str, Any]:
        return dict(self._config_data["schedule"]["default_conditioning"])

    def get_log_level(self) -> int:
        """Nivel de log numérico (DEBUG si el modo debug está activo)."""
        if self.is_debug_enabled():
            return LOG_LEVELS["DEBUG"]
        return LOG_LEVELS[str(self._config_data["logging"]["level"]).upper()]

    # =====================================================================
    # Métodos de configuración dinámica
    # =====================================================================

    def update_setting(self, path: str, value: Any):
        """
        Actualiza un valor de configuración dinámicamente.

        Args:
            path: Ruta del setting en formato "section.key" o "section.subsection.key"
            value: Nuevo valor
        """
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        Obtiene un valor de configuración por ruta.

        Args:
            path: Ruta del setting en formato "section.key"
            default: Valor por defecto si no se encuentra

        Returns:
            Valor de configuración o default
        """
        keys = path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default


def configure_logging(config: Optional[Settings] = None):
    """Aplica el formato y el nivel de LOGGING_CONFIG al logger raíz."""
    config = config or settings
    logging_config = config.get_logging_config()
    logging.basicConfig(
        level=config.get_log_level(),
        format=logging_config["log_format"],
        datefmt=logging_config["date_format"]
    )
    logger.debug("Logging configurado")


# =====================================================================
# Instancia global de configuración
# =====================================================================

# Instancia global que puede ser importada y usada en toda la aplicación
settings = Settings()

# Funciones de conveniencia para acceso rápido
def get_cashier_job_title() -> str:
    """Obtiene el cargo al que aplica el acondicionamiento."""
    return settings.get_cashier_job_title()

def get_period_bounds():
    """Obtiene los días de inicio y cierre del período."""
    return settings.get_period_bounds()