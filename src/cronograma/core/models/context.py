"""
Contexto de entrada del motor de cronogramas.

Agrupa los datos planos que la aplicación carga antes de invocar el núcleo:
nómina, patrones, novedades, ediciones manuales y solicitudes de cambio.
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from .collaborator import Collaborator
from .overrides import (
    AbsenceRequest,
    Holiday,
    Lactation,
    ManualOverrides,
    Notification,
    RoleChange,
    TemporaryTransfer,
)
from .shift import OvertimeRule, ShiftPattern, ShiftSlot
from ...exceptions import DataError

ALL = "todos"


class Role(Enum):
    """Rol de quien consulta el cronograma."""
    COORDINATOR = "coordinator"
    ADMIN = "admin"
    HR = "rrhh"
    COLLABORATOR = "collaborator"


@dataclass
class ScheduleFilters:
    """Filtros de la vista del cronograma ('todos' = sin filtro)."""
    location: str = ALL
    job_title: str = ALL
    collaborator_id: str = ALL

    @property
    def has_specific_location(self) -> bool:
        return bool(self.location) and self.location != ALL


@dataclass
class Conditioning:
    """Personal requerido por franja para el acondicionamiento de cajeros."""
    morning: int = 0
    afternoon: int = 0
    night: int = 0
    is_automatic: bool = False

    def __post_init__(self):
        if min(self.morning, self.afternoon, self.night) < 0:
            raise DataError("El personal requerido por turno no puede ser negativo")

    @property
    def total_daily_shifts(self) -> int:
        return self.morning + self.afternoon + self.night

    def targets(self) -> Dict[str, int]:
        """Objetivo por código de turno (M8, T8, N8)."""
        return {
            ShiftSlot.MORNING.value: self.morning,
            ShiftSlot.AFTERNOON.value: self.afternoon,
            ShiftSlot.NIGHT.value: self.night,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Conditioning':
        return cls(
            morning=int(data.get('morning') or 0),
            afternoon=int(data.get('afternoon') or 0),
            night=int(data.get('night') or 0),
            is_automatic=bool(data.get('isAutomatic', False)),
        )


@dataclass
class ScheduleContext:
    """Datos de entrada para generar el cronograma unificado."""
    all_collaborators: List[Collaborator] = field(default_factory=list)
    shift_patterns: List[ShiftPattern] = field(default_factory=list)
    vacations: List[AbsenceRequest] = field(default_factory=list)
    transfers: List[TemporaryTransfer] = field(default_factory=list)
    lactations: List[Lactation] = field(default_factory=list)
    role_changes: List[RoleChange] = field(default_factory=list)
    manual_overrides: ManualOverrides = field(default_factory=dict)
    notifications: List[Notification] = field(default_factory=list)
    overtime_rules: List[OvertimeRule] = field(default_factory=list)
    holidays: List[Holiday] = field(default_factory=list)
    is_automatic: Optional[bool] = None
    draft_conditioning: Optional[Conditioning] = None
    filters: ScheduleFilters = field(default_factory=ScheduleFilters)
    period_identifier: Optional[str] = None
