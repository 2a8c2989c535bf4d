"""
Excepciones del motor de cronogramas.
"""


class CronogramaError(Exception):
    """Error base del motor de cronogramas."""
    pass


class ConfigError(CronogramaError):
    """Error en la configuración del sistema."""
    pass


class DataError(CronogramaError):
    """Error en los registros de entrada (colaboradores, novedades, reglas, etc.)."""
    pass
