"""
Adaptadores en memoria para las entradas y los cronogramas guardados.

InMemoryScheduleDataSource se construye desde un diccionario con las
colecciones del almacén de documentos (registros camelCase), por ejemplo
el contenido de un archivo JSON exportado.
"""

import json
import copy
import logging
from typing import Any, Dict, List, Optional

from ..application.ports import ScheduleDataSource, SavedScheduleRepository
from ..core.models import (
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
    manual_overrides_from_dict,
)
from ..exceptions import DataError

logger = logging.getLogger(__name__)


class InMemoryScheduleDataSource(ScheduleDataSource):
    """Fuente de datos respaldada por listas en memoria."""

    def __init__(self,
                 collaborators: Optional[List[Collaborator]] = None,
                 shift_patterns: Optional[List[ShiftPattern]] = None,
                 vacations: Optional[List[AbsenceRequest]] = None,
                 transfers: Optional[List[TemporaryTransfer]] = None,
                 lactations: Optional[List[Lactation]] = None,
                 role_changes: Optional[List[RoleChange]] = None,
                 manual_overrides: Optional[ManualOverrides] = None,
                 notifications: Optional[List[Notification]] = None,
                 overtime_rules: Optional[List[OvertimeRule]] = None,
                 holidays: Optional[List[Holiday]] = None):
        self.collaborators = list(collaborators or [])
        self.shift_patterns = list(shift_patterns or [])
        self.vacations = list(vacations or [])
        self.transfers = list(transfers or [])
        self.lactations = list(lactations or [])
        self.role_changes = list(role_changes or [])
        self.manual_overrides = manual_overrides or {}
        self.notifications = list(notifications or [])
        self.overtime_rules = list(overtime_rules or [])
        self.holidays = list(holidays or [])

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], normalize: bool = True) -> 'InMemoryScheduleDataSource':
        """
        Construye la fuente desde un diccionario de colecciones.

        Claves reconocidas: collaborators, shiftPatterns, vacations, transfers,
        lactations, roleChanges, manualOverrides, notifications, overtimeRules,
        holidays. Las ausentes se toman como vacías.

        Args:
            payload: Colecciones en formato camelCase
            normalize: Normalizar cargos y ubicaciones de colaboradores, patrones,
                traslados y cambios de rol

        Raises:
            DataError: Si algún registro está incompleto o es inválido
        """
        def records(key):
            value = payload.get(key) or []
            if not isinstance(value, list):
                raise DataError(f"La colección {key} debe ser una lista")
            return value

        source = cls(
            collaborators=[Collaborator.from_dict(r, normalize=normalize) for r in records('collaborators')],
            shift_patterns=[ShiftPattern.from_dict(r, normalize=normalize) for r in records('shiftPatterns')],
            vacations=[AbsenceRequest.from_dict(r) for r in records('vacations')],
            transfers=[TemporaryTransfer.from_dict(r, normalize=normalize) for r in records('transfers')],
            lactations=[Lactation.from_dict(r) for r in records('lactations')],
            role_changes=[RoleChange.from_dict(r, normalize=normalize) for r in records('roleChanges')],
            manual_overrides=manual_overrides_from_dict(payload.get('manualOverrides') or {}),
            notifications=[Notification.from_dict(r) for r in records('notifications')],
            overtime_rules=[OvertimeRule.from_dict(r) for r in records('overtimeRules')],
            holidays=[Holiday.from_dict(r) for r in records('holidays')],
        )
        logger.debug("Fuente cargada: %d colaboradores, %d patrones",
                     len(source.collaborators), len(source.shift_patterns))
        return source

    @classmethod
    def from_json_file(cls, path: str, normalize: bool = True) -> 'InMemoryScheduleDataSource':
        """Carga la fuente desde un archivo JSON."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataError(f"No se pudo leer {path}: {e}") from e
        return cls.from_payload(payload, normalize=normalize)

    def get_collaborators(self) -> List[Collaborator]:
        return list(self.collaborators)

    def get_shift_patterns(self) -> List[ShiftPattern]:
        return list(self.shift_patterns)

    def get_vacations(self) -> List[AbsenceRequest]:
        return list(self.vacations)

    def get_transfers(self) -> List[TemporaryTransfer]:
        return list(self.transfers)

    def get_lactations(self) -> List[Lactation]:
        return list(self.lactations)

    def get_role_changes(self) -> List[RoleChange]:
        return list(self.role_changes)

    def get_manual_overrides(self) -> ManualOverrides:
        return {cid: dict(days) for cid, days in self.manual_overrides.items()}

    def get_notifications(self) -> List[Notification]:
        return list(self.notifications)

    def get_overtime_rules(self) -> List[OvertimeRule]:
        return list(self.overtime_rules)

    def get_holidays(self) -> List[Holiday]:
        return list(self.holidays)


class InMemorySavedScheduleRepository(SavedScheduleRepository):
    """Repositorio de cronogramas aprobados en memoria."""

    def __init__(self):
        self._schedules: Dict[str, SavedSchedule] = {}

    def get(self, schedule_id: str) -> Optional[SavedSchedule]:
        saved = self._schedules.get(schedule_id)
        return copy.deepcopy(saved) if saved is not None else None

    def save(self, saved_schedule: SavedSchedule) -> None:
        self._schedules[saved_schedule.id] = copy.deepcopy(saved_schedule)

    def delete(self, schedule_id: str) -> bool:
        return self._schedules.pop(schedule_id, None) is not None

    def list_by_period(self, period_identifier: str) -> List[SavedSchedule]:
        return [
            copy.deepcopy(saved) for schedule_id, saved in sorted(self._schedules.items())
            if saved.period_identifier == period_identifier
        ]
