"""
Schedule model - Dominio puro para representar cronogramas.

Este módulo contiene la estructura colaborador -> día -> turno que producen
los servicios de generación, y la instantánea de un cronograma aprobado.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from ...exceptions import DataError
from ...utils.date_utils import day_key as format_day_key


class Schedule:
    """
    Cronograma de un período: para cada colaborador y cada día, un código
    de turno, un estado (VAC, TRA, PM...) o None (día libre).

    Cada par (colaborador, día) tiene como máximo un valor. Las copias
    nunca comparten los diccionarios internos.
    """

    def __init__(self, collaborator_ids: Iterable[str] = ()):
        """
        Inicializa un cronograma vacío.

        Args:
            collaborator_ids: Colaboradores que tendrán fila (aunque vacía)
        """
        self._cells: Dict[str, Dict[str, Optional[str]]] = {
            collaborator_id: {} for collaborator_id in collaborator_ids
        }

    # ------------------------------------------------------------------
    # Acceso a celdas
    # ------------------------------------------------------------------

    def set(self, collaborator_id: str, day: Any, shift: Optional[str]) -> None:
        """Asigna el valor de una celda; `day` puede ser date o clave 'yyyy-MM-dd'."""
        self._cells.setdefault(collaborator_id, {})[self._key(day)] = shift

    def get(self, collaborator_id: str, day: Any, default: Optional[str] = None) -> Optional[str]:
        """Obtiene el valor de una celda (o `default` si no existe)."""
        row = self._cells.get(collaborator_id)
        if row is None:
            return default
        return row.get(self._key(day), default)

    def has(self, collaborator_id: str, day: Any) -> bool:
        """Indica si la celda existe (un día libre existe con valor None)."""
        row = self._cells.get(collaborator_id)
        return row is not None and self._key(day) in row

    def has_collaborator(self, collaborator_id: str) -> bool:
        return collaborator_id in self._cells

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def collaborator_ids(self) -> List[str]:
        return list(self._cells.keys())

    def cells(self) -> Iterator[Tuple[str, str, Optional[str]]]:
        """Itera (colaborador, día, valor)."""
        for collaborator_id, row in self._cells.items():
            for key, shift in row.items():
                yield collaborator_id, key, shift

    def values_on(self, day: Any, collaborator_ids: Optional[Iterable[str]] = None) -> Dict[str, Optional[str]]:
        """Valores de un día para los colaboradores indicados (solo celdas existentes)."""
        key = self._key(day)
        ids = self._cells.keys() if collaborator_ids is None else collaborator_ids
        return {cid: self._cells[cid][key] for cid in ids if self.has(cid, key)}

    # ------------------------------------------------------------------
    # Copia y serialización
    # ------------------------------------------------------------------

    def copy(self) -> 'Schedule':
        """Copia independiente (sin compartir las filas)."""
        clone = Schedule()
        clone._cells = {cid: dict(row) for cid, row in self._cells.items()}
        return clone

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {cid: dict(row) for cid, row in self._cells.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Optional[str]]]) -> 'Schedule':
        schedule = cls()
        for collaborator_id, row in (data or {}).items():
            schedule._cells[collaborator_id] = dict(row or {})
        return schedule

    @staticmethod
    def _key(day: Any) -> str:
        if isinstance(day, str):
            return day
        return format_day_key(day)

    def __len__(self) -> int:
        return sum(len(row) for row in self._cells.values())

    def __contains__(self, collaborator_id: str) -> bool:
        return collaborator_id in self._cells

    def __eq__(self, other) -> bool:
        if not isinstance(other, Schedule):
            return False
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Schedule(collaborators={len(self._cells)}, cells={len(self)})"


@dataclass
class SavedSchedule:
    """
    Cronograma aprobado y guardado por un coordinador.

    Una vez guardado, el período queda bloqueado para esa ubicación y cargo.
    """
    period_identifier: str
    location: str
    job_title: str
    schedule: Schedule
    is_automatic: bool = True
    morning: int = 0
    afternoon: int = 0
    night: int = 0
    saved_at: Optional[float] = None
    saved_by: Dict[str, str] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.build_id(self.period_identifier, self.location, self.job_title)

    @staticmethod
    def build_id(period_identifier: str, location: str, job_title: str) -> str:
        return f"{period_identifier}_{location}_{job_title}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'schedule': self.schedule.to_dict(),
            'conditioning': {
                'isAutomatic': self.is_automatic,
                'morning': self.morning,
                'afternoon': self.afternoon,
                'night': self.night,
            },
            'location': self.location,
            'jobTitle': self.job_title,
            'savedAt': self.saved_at,
            'savedBy': dict(self.saved_by),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SavedSchedule':
        try:
            record_id = data['id']
            conditioning = data.get('conditioning') or {}
            return cls(
                period_identifier=record_id.split('_')[0],
                location=data['location'],
                job_title=data['jobTitle'],
                schedule=Schedule.from_dict(data.get('schedule') or {}),
                is_automatic=bool(conditioning.get('isAutomatic', True)),
                morning=int(conditioning.get('morning') or 0),
                afternoon=int(conditioning.get('afternoon') or 0),
                night=int(conditioning.get('night') or 0),
                saved_at=data.get('savedAt'),
                saved_by=dict(data.get('savedBy') or {}),
            )
        except KeyError as e:
            raise DataError(f"Cronograma guardado sin campo requerido: {e}") from e
