"""
Application Use Cases - Casos de uso del motor de cronogramas.
"""

from .generate_schedule import (
    GenerateScheduleUseCase,
    ScheduleGenerationRequest,
    GenerationResult,
    save_schedule
)

from .simulate_attendance import SimulateAttendanceUseCase

__all__ = [
    'GenerateScheduleUseCase',
    'ScheduleGenerationRequest',
    'GenerationResult',
    'save_schedule',
    'SimulateAttendanceUseCase',
]
