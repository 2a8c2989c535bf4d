"""
Caso de uso: Simular la asistencia de un período.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from ...core.models import AttendanceRecord, RegistrationStatus
from ...core.services import AttendanceSimulator
from ...infrastructure.config import Settings, settings as default_settings
from ..ports import ScheduleDataSource
from .generate_schedule import GenerationResult

logger = logging.getLogger(__name__)


class SimulateAttendanceUseCase:
    """
    Genera la asistencia simulada a partir del cronograma de un período.

    Usa los festivos y las reglas de horas extra de la fuente de datos y
    las probabilidades de la sección "attendance" de la configuración.
    """

    def __init__(self, data_source: ScheduleDataSource, config: Optional[Settings] = None):
        self.data_source = data_source
        self.config = config or default_settings

    def execute(self, generation: GenerationResult,
                now: Optional[datetime] = None) -> Dict[str, AttendanceRecord]:
        """
        Ejecuta la simulación.

        Args:
            generation: Resultado de GenerateScheduleUseCase
            now: Momento de referencia (por defecto, el actual)

        Returns:
            Dict[str, AttendanceRecord]: Registros por id "{día}-{colaborador}"
        """
        attendance_config = self.config.get_attendance_config()
        simulator = AttendanceSimulator(
            holidays=self.data_source.get_holidays(),
            overtime_rules=self.data_source.get_overtime_rules(),
            absence_probability=attendance_config["absence_probability"],
            forgot_clock_out_probability=attendance_config["forgot_clock_out_probability"],
            early_entry_window=timedelta(minutes=attendance_config["early_entry_window_minutes"]),
        )

        records = simulator.generate(self.data_source.get_collaborators(),
                                     generation.days, generation.schedule, now)

        absences = sum(1 for r in records.values()
                       if r.registration_status == RegistrationStatus.ABSENT)
        logger.info("Asistencia del período %s: %d registros, %d faltas",
                    generation.period_identifier, len(records), absences)
        return records
