"""
Resolución del cargo y la ubicación efectivos de un colaborador en un día.

Un cambio de rol tiene prioridad sobre un traslado temporal; un traslado
solo cambia la ubicación, nunca el cargo.
"""

from datetime import date
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from ..models import Collaborator, IntervalRecord, RoleChange, TemporaryTransfer

R = TypeVar('R', bound=IntervalRecord)


class EffectiveAssignment(NamedTuple):
    """Ubicación y cargo vigentes para un día."""
    location: str
    job_title: str

    @property
    def group_key(self) -> str:
        """Clave del grupo de rotación "{ubicación}-{cargo}"."""
        return f"{self.location}-{self.job_title}"


def _first_active(records: Sequence[R], collaborator_id: str, day: date) -> Optional[R]:
    # Si hay varios registros vigentes gana el primero en orden de entrada.
    for record in records:
        if record.applies_to(collaborator_id, day):
            return record
    return None


def find_active_role_change(collaborator_id: str, day: date,
                            role_changes: Sequence[RoleChange]) -> Optional[RoleChange]:
    """Cambio de rol vigente para el colaborador en el día, si existe."""
    return _first_active(role_changes, collaborator_id, day)


def find_active_transfer(collaborator_id: str, day: date,
                         transfers: Sequence[TemporaryTransfer]) -> Optional[TemporaryTransfer]:
    """Traslado temporal vigente para el colaborador en el día, si existe."""
    return _first_active(transfers, collaborator_id, day)


def get_effective_details(collaborator: Collaborator,
                          day: date,
                          transfers: Sequence[TemporaryTransfer] = (),
                          role_changes: Sequence[RoleChange] = ()) -> EffectiveAssignment:
    """
    Obtiene la ubicación y el cargo efectivos de un colaborador en un día.

    Args:
        collaborator: Colaborador
        day: Día a evaluar
        transfers: Traslados temporales
        role_changes: Cambios de rol

    Returns:
        EffectiveAssignment: Valores a usar en todas las decisiones del día
    """
    role_change = find_active_role_change(collaborator.id, day, role_changes)
    if role_change:
        return EffectiveAssignment(role_change.new_location, role_change.new_job_title)

    transfer = find_active_transfer(collaborator.id, day, transfers)
    if transfer:
        return EffectiveAssignment(transfer.new_location, collaborator.original_job_title)

    return EffectiveAssignment(collaborator.original_location, collaborator.original_job_title)


def find_overlapping_records(records: Sequence[R]) -> List[Tuple[R, R]]:
    """
    Detecta pares de registros del mismo colaborador con intervalos solapados.

    Returns:
        List[Tuple]: Pares (anterior, posterior) en orden de entrada
    """
    by_collaborator: Dict[str, List[R]] = {}
    for record in records:
        by_collaborator.setdefault(record.collaborator_id, []).append(record)

    overlaps = []
    for collaborator_records in by_collaborator.values():
        for i, first in enumerate(collaborator_records):
            for second in collaborator_records[i + 1:]:
                if first.start_date <= second.end_date and second.start_date <= first.end_date:
                    overlaps.append((first, second))
    return overlaps
