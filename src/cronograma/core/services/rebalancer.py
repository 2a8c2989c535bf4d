"""
Servicio de acondicionamiento de cajeros - Dominio puro.

Ajusta el cronograma base de una cohorte (ubicación + cargo) para acercarse
al personal requerido por franja (M8, T8, N8) moviendo colaboradores entre
franjas y días libres. Los estados (VAC, TRA, PM...) no se tocan.
"""

import logging
import math
from datetime import date
from typing import Dict, List, Optional, Sequence
from dataclasses import dataclass, field

from ..models import Collaborator, Conditioning, Schedule, ShiftSlot
from ...utils.date_utils import day_key

logger = logging.getLogger(__name__)

# Personal por defecto del acondicionamiento manual de cajeros
DEFAULT_CASHIER_MORNING = 4
DEFAULT_CASHIER_AFTERNOON = 4
DEFAULT_CASHIER_NIGHT = 2

# Factor de cobertura: colaboradores recomendados por turno diario
STAFFING_FACTOR = 1.4


@dataclass(frozen=True)
class Shortfall:
    """Franja que quedó por debajo del objetivo en un día."""
    day_key: str
    shift: str
    missing: int


@dataclass
class RebalanceResult:
    """Cronograma ajustado y faltantes que no se pudieron cubrir."""
    schedule: Schedule
    shortfalls: List[Shortfall] = field(default_factory=list)

    @property
    def is_fully_staffed(self) -> bool:
        return not self.shortfalls


class ConditioningRebalancer:
    """
    Reasigna colaboradores de una cohorte para cumplir el personal por franja.

    Por cada día:
        1. Cuenta M8, T8, N8 y libres dentro de la cohorte.
        2. Calcula la necesidad de cada franja (objetivo - actual).
        3. Para cada franja con necesidad positiva toma donantes, primero
           de los libres y luego de franjas con exceso, hasta cubrirla o
           quedarse sin donantes.

    El total de la cohorte en {M8, T8, N8, libre} se conserva cada día.
    """

    def __init__(self, conditioning: Conditioning):
        self.conditioning = conditioning

    def rebalance(self,
                  base_schedule: Schedule,
                  cohort: Sequence[Collaborator],
                  days: Sequence[date]) -> RebalanceResult:
        """
        Aplica el acondicionamiento sobre una copia del cronograma.

        Args:
            base_schedule: Cronograma base (no se modifica)
            cohort: Colaboradores de la ubicación y cargo a ajustar
            days: Días a ajustar

        Returns:
            RebalanceResult: Copia ajustada y faltantes por día
        """
        schedule = base_schedule.copy()
        shortfalls: List[Shortfall] = []

        for day in days:
            shortfalls.extend(self._rebalance_day(schedule, cohort, day_key(day)))

        if shortfalls:
            logger.info("Acondicionamiento incompleto: %d franjas sin cubrir", len(shortfalls))
        return RebalanceResult(schedule, shortfalls)

    def _rebalance_day(self, schedule: Schedule, cohort: Sequence[Collaborator],
                       key: str) -> List[Shortfall]:
        slots = ShiftSlot.get_all_values()
        assignments: Dict[Optional[str], List[str]] = {slot: [] for slot in slots}
        assignments[None] = []

        for collaborator in cohort:
            if not schedule.has(collaborator.id, key):
                continue
            shift = schedule.get(collaborator.id, key)
            if shift in assignments:
                assignments[shift].append(collaborator.id)

        targets = self.conditioning.targets()
        needs = {slot: targets[slot] - len(assignments[slot]) for slot in slots}

        shifts_to_fill = [slot for slot in slots if needs[slot] > 0]
        surplus_shifts = [slot for slot in slots if needs[slot] < 0]

        shortfalls = []
        for shift_to_fill in shifts_to_fill:
            while needs[shift_to_fill] > 0:
                donor_pool = list(assignments[None])
                for surplus in surplus_shifts:
                    if needs[surplus] < 0:
                        donor_pool.extend(assignments[surplus])

                if not donor_pool:
                    break

                donor_id = donor_pool[0]
                original_shift = schedule.get(donor_id, key)

                schedule.set(donor_id, key, shift_to_fill)
                needs[shift_to_fill] -= 1

                assignments[original_shift].remove(donor_id)
                assignments[shift_to_fill].append(donor_id)

                if original_shift is not None:
                    needs[original_shift] += 1

            if needs[shift_to_fill] > 0:
                logger.debug("Sin donantes para %s el %s: faltan %d",
                             shift_to_fill, key, needs[shift_to_fill])
                shortfalls.append(Shortfall(key, shift_to_fill, needs[shift_to_fill]))

        return shortfalls


def apply_conditioning_rebalance(base_schedule: Schedule,
                                 conditioning: Conditioning,
                                 cohort: Sequence[Collaborator],
                                 days: Sequence[date]) -> Schedule:
    """Acondicionamiento de mejor esfuerzo; los faltantes no son un error."""
    return ConditioningRebalancer(conditioning).rebalance(base_schedule, cohort, days).schedule


def default_cashier_conditioning() -> Conditioning:
    """Acondicionamiento manual por defecto para cajeros (4/4/2)."""
    return Conditioning(
        morning=DEFAULT_CASHIER_MORNING,
        afternoon=DEFAULT_CASHIER_AFTERNOON,
        night=DEFAULT_CASHIER_NIGHT,
        is_automatic=False,
    )


@dataclass(frozen=True)
class StaffingRecommendation:
    """Resumen de personal para un acondicionamiento."""
    total_daily_shifts: int
    recommended_collaborators: int
    available_collaborators: int
    rest_slots: int

    @property
    def is_understaffed(self) -> bool:
        return self.available_collaborators < self.recommended_collaborators


def recommend_staffing(conditioning: Conditioning,
                       total_collaborators: int,
                       factor: float = STAFFING_FACTOR) -> StaffingRecommendation:
    """
    Calcula el personal recomendado para cubrir un acondicionamiento.

    Args:
        conditioning: Personal requerido por franja
        total_collaborators: Colaboradores disponibles en la cohorte
        factor: Colaboradores por turno diario (incluye descansos)

    Returns:
        StaffingRecommendation
    """
    total = conditioning.total_daily_shifts
    return StaffingRecommendation(
        total_daily_shifts=total,
        recommended_collaborators=math.ceil(total * factor),
        available_collaborators=total_collaborators,
        rest_slots=max(0, total_collaborators - total),
    )
