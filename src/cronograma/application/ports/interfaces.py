"""
Interfaces y contratos para la capa de aplicación.

Este módulo define las interfaces que la capa de aplicación necesita para
leer las entradas del cronograma y persistir los cronogramas aprobados.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...core.models import (
    AbsenceRequest,
    Collaborator,
    Holiday,
    Lactation,
    ManualOverrides,
    Notification,
    OvertimeRule,
    RoleChange,
    SavedSchedule,
    ShiftPattern,
    TemporaryTransfer,
)


# =====================================================================
# Data Source Interfaces
# =====================================================================

class ScheduleDataSource(ABC):
    """Interfaz para las entradas del motor de cronogramas."""

    @abstractmethod
    def get_collaborators(self) -> List[Collaborator]:
        """
        Obtiene la nómina completa.

        Returns:
            List[Collaborator]: Colaboradores con su cargo y ubicación originales
        """
        pass

    @abstractmethod
    def get_shift_patterns(self) -> List[ShiftPattern]:
        """Obtiene los patrones de turno por cargo."""
        pass

    @abstractmethod
    def get_vacations(self) -> List[AbsenceRequest]:
        """Obtiene las solicitudes de vacaciones y permisos."""
        pass

    @abstractmethod
    def get_transfers(self) -> List[TemporaryTransfer]:
        pass

    @abstractmethod
    def get_lactations(self) -> List[Lactation]:
        pass

    @abstractmethod
    def get_role_changes(self) -> List[RoleChange]:
        pass

    @abstractmethod
    def get_manual_overrides(self) -> ManualOverrides:
        """
        Obtiene las ediciones manuales.

        Returns:
            ManualOverrides: colaborador -> día -> edición
        """
        pass

    @abstractmethod
    def get_notifications(self) -> List[Notification]:
        """Obtiene las solicitudes de cambio de turno."""
        pass

    @abstractmethod
    def get_overtime_rules(self) -> List[OvertimeRule]:
        pass

    @abstractmethod
    def get_holidays(self) -> List[Holiday]:
        pass


# =====================================================================
# Repository Interfaces
# =====================================================================

class SavedScheduleRepository(ABC):
    """Interfaz para el repositorio de cronogramas aprobados."""

    @abstractmethod
    def get(self, schedule_id: str) -> Optional[SavedSchedule]:
        """
        Obtiene un cronograma guardado.

        Args:
            schedule_id: "{período}_{ubicación}_{cargo}"

        Returns:
            SavedSchedule o None si no existe
        """
        pass

    @abstractmethod
    def save(self, saved_schedule: SavedSchedule) -> None:
        """Guarda (o reemplaza) un cronograma aprobado."""
        pass

    @abstractmethod
    def delete(self, schedule_id: str) -> bool:
        """
        Elimina un cronograma guardado.

        Returns:
            bool: True si existía
        """
        pass

    @abstractmethod
    def list_by_period(self, period_identifier: str) -> List[SavedSchedule]:
        """Lista los cronogramas guardados de un período."""
        pass

    def exists(self, schedule_id: str) -> bool:
        return self.get(schedule_id) is not None
