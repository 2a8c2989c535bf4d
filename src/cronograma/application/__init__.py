"""
Application - Casos de uso y puertos del motor de cronogramas.

Este paquete contiene los casos de uso que orquestan el núcleo y los
contratos que la infraestructura debe implementar.
"""

from .ports import (
    ScheduleDataSource,
    SavedScheduleRepository
)

from .use_cases import (
    GenerateScheduleUseCase,
    ScheduleGenerationRequest,
    GenerationResult,
    save_schedule,
    SimulateAttendanceUseCase
)

__all__ = [
    # Ports
    'ScheduleDataSource',
    'SavedScheduleRepository',

    # Generate Schedule
    'GenerateScheduleUseCase',
    'ScheduleGenerationRequest',
    'GenerationResult',
    'save_schedule',

    # Simulate Attendance
    'SimulateAttendanceUseCase',
]
