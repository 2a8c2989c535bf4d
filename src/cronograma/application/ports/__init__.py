"""
Application Ports - Puertos e interfaces de la capa de aplicación.

Este paquete define los contratos entre la capa de aplicación
y la infraestructura externa.
"""

from .interfaces import (
    ScheduleDataSource,
    SavedScheduleRepository
)

__all__ = [
    'ScheduleDataSource',
    'SavedScheduleRepository',
]
