"""
Servicio de generación del cronograma base - Dominio puro.

Asigna a cada colaborador, para cada día del período, el turno que le
corresponde según el ciclo de su cargo, respetando ediciones manuales,
vacaciones, permisos, traslados y lactancias.
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..models import (
    AbsenceRequest,
    Collaborator,
    Lactation,
    ManualOverrides,
    RoleChange,
    Schedule,
    ShiftCharacteristics,
    ShiftPattern,
    ScheduleType,
    TemporaryTransfer,
    DEFAULT_ADMIN_SHIFT,
    DEFAULT_WEEKDAY_SHIFT,
    LACTATION_FALLBACK_SHIFT,
    NON_WORKING_CODES,
    TRANSFER_CODE,
    VACATION_CODE,
)
from ..rules.assignment import (
    EffectiveAssignment,
    find_active_role_change,
    get_effective_details,
)
from .shuffler import seeded_shuffle, simple_hash
from ...utils.date_utils import day_key, is_weekend

logger = logging.getLogger(__name__)


class GenerationContext:
    """
    Estado de una sola generación.

    Guarda las particiones de grupos por día, el orden barajado de cada
    grupo y el avance de ciclo de cada colaborador. Se crea por llamada y
    nunca se comparte entre generaciones.
    """

    def __init__(self,
                 collaborators: Sequence[Collaborator],
                 days: Sequence[date],
                 transfers: Sequence[TemporaryTransfer],
                 role_changes: Sequence[RoleChange],
                 period_identifier: str):
        self.period_identifier = period_identifier
        self.assignments: Dict[str, Dict[str, EffectiveAssignment]] = {}
        self.daily_groups: Dict[str, Dict[str, List[Collaborator]]] = {}
        self._group_positions: Dict[str, Dict[str, Dict[str, int]]] = {}
        self.cycle_days_consumed: Dict[str, int] = {c.id: 0 for c in collaborators}

        for day in days:
            key = day_key(day)
            assignments_for_day = {}
            groups_for_day: Dict[str, List[Collaborator]] = {}
            for collaborator in collaborators:
                assignment = get_effective_details(collaborator, day, transfers, role_changes)
                assignments_for_day[collaborator.id] = assignment
                groups_for_day.setdefault(assignment.group_key, []).append(collaborator)
            self.assignments[key] = assignments_for_day
            self.daily_groups[key] = groups_for_day

    def position_in_group(self, key: str, group_key: str, collaborator_id: str) -> int:
        """Índice del colaborador en el orden barajado de su grupo ese día."""
        positions_for_day = self._group_positions.setdefault(key, {})
        positions = positions_for_day.get(group_key)
        if positions is None:
            group = self.daily_groups[key].get(group_key, [])
            seed = simple_hash(f"{self.period_identifier}-{group_key}")
            positions = {c.id: index for index, c in enumerate(seeded_shuffle(group, seed))}
            positions_for_day[group_key] = positions
        return positions.get(collaborator_id, -1)

    def group_size(self, key: str, group_key: str) -> int:
        return len(self.daily_groups[key].get(group_key, []))

    def record(self, collaborator_id: str, shift: Optional[str]) -> None:
        """Registra el valor del día; los estados no laborales pausan el ciclo."""
        if shift not in NON_WORKING_CODES:
            self.cycle_days_consumed[collaborator_id] += 1


class BaseScheduleBuilder:
    """
    Constructor del cronograma base a partir de los patrones de turno.

    Para cada colaborador y día aplica, en orden estricto y deteniéndose en
    la primera coincidencia:

        a. Edición manual
        b. Vacaciones aprobadas -> VAC
        c. Permiso aprobado -> código de ausencia
        d. Traslado sin cambio de rol -> TRA
        e. Cargo sin patrón -> N9 entre semana, libre el fin de semana
        f. Patrón lunes a viernes -> primer turno del ciclo entre semana
        g. Patrón rotativo escalonado por grupo
        h. Lactancia: turnos nocturnos o de 24h pasan a M8
    """

    def __init__(self,
                 shift_patterns: Sequence[ShiftPattern],
                 vacations: Sequence[AbsenceRequest] = (),
                 transfers: Sequence[TemporaryTransfer] = (),
                 lactations: Sequence[Lactation] = (),
                 role_changes: Sequence[RoleChange] = (),
                 manual_overrides: Optional[ManualOverrides] = None):
        # Si un cargo tiene varios patrones, prevalece el último
        self.job_cycles: Dict[str, ShiftPattern] = {p.job_title: p for p in shift_patterns}
        self.vacations = [v for v in vacations if v.is_approved]
        self.transfers = list(transfers)
        self.lactations = list(lactations)
        self.role_changes = list(role_changes)
        self.manual_overrides = manual_overrides or {}

    def build(self,
              collaborators: Sequence[Collaborator],
              days: Sequence[date],
              period_identifier: Optional[str] = None) -> Schedule:
        """
        Genera el cronograma base.

        Args:
            collaborators: Nómina completa
            days: Días del período en orden cronológico
            period_identifier: Semilla del escalonamiento ('yyyy-MM');
                por defecto el mes del primer día

        Returns:
            Schedule: Valor para cada colaborador x día
        """
        schedule = Schedule(c.id for c in collaborators)
        if not collaborators or not days:
            return schedule

        if period_identifier is None:
            period_identifier = days[0].strftime("%Y-%m")

        context = GenerationContext(collaborators, days, self.transfers,
                                    self.role_changes, period_identifier)

        for day in days:
            key = day_key(day)
            for collaborator in collaborators:
                shift = self._resolve_cell(collaborator, day, key, context)
                schedule.set(collaborator.id, key, shift)
                context.record(collaborator.id, shift)

        logger.debug("Cronograma base generado: %d colaboradores, %d días (semilla %s)",
                     len(collaborators), len(days), period_identifier)
        return schedule

    def _resolve_cell(self, collaborator: Collaborator, day: date, key: str,
                      context: GenerationContext) -> Optional[str]:
        override = self.manual_overrides.get(collaborator.id, {}).get(key)
        if override is not None:
            return override.shift

        absence = self._find_absence(collaborator.id, day)
        if absence is not None:
            if absence.is_vacation:
                return VACATION_CODE
            return ShiftCharacteristics.absence_code_for_reason(absence.reason)

        assignment = context.assignments[key][collaborator.id]
        if (assignment.location != collaborator.original_location and
                not find_active_role_change(collaborator.id, day, self.role_changes)):
            return TRANSFER_CODE

        pattern = self.job_cycles.get(assignment.job_title)
        if pattern is None:
            return None if is_weekend(day) else DEFAULT_ADMIN_SHIFT

        if pattern.schedule_type == ScheduleType.MONDAY_TO_FRIDAY:
            if is_weekend(day):
                return None
            return pattern.first_shift or DEFAULT_WEEKDAY_SHIFT

        shift = self._rotating_shift(collaborator, pattern, assignment, key, context)

        if (ShiftCharacteristics.is_night_shift(shift) and
                any(l.applies_to(collaborator.id, day) for l in self.lactations)):
            shift = LACTATION_FALLBACK_SHIFT

        return shift

    def _find_absence(self, collaborator_id: str, day: date) -> Optional[AbsenceRequest]:
        # Las vacaciones se revisan antes que los permisos
        for wants_vacation in (True, False):
            for request in self.vacations:
                if request.is_vacation == wants_vacation and request.applies_to(collaborator_id, day):
                    return request
        return None

    def _rotating_shift(self, collaborator: Collaborator, pattern: ShiftPattern,
                        assignment: EffectiveAssignment, key: str,
                        context: GenerationContext) -> Optional[str]:
        cycle = pattern.cycle
        if not cycle:
            logger.warning("Patrón sin ciclo para %s; %s queda libre el %s",
                           pattern.job_title, collaborator.id, key)
            return None

        group_key = assignment.group_key
        group_size = context.group_size(key, group_key)
        position = context.position_in_group(key, group_key, collaborator.id)

        effective_day_index = context.cycle_days_consumed[collaborator.id]
        stagger_step = max(1, len(cycle) // group_size)
        offset = (effective_day_index + position * stagger_step) % len(cycle)
        return cycle[offset]


def generar_horarios_estaticos(all_collaborators: Sequence[Collaborator],
                               days: Sequence[date],
                               shift_patterns: Sequence[ShiftPattern],
                               vacations: Sequence[AbsenceRequest] = (),
                               transfers: Sequence[TemporaryTransfer] = (),
                               lactations: Sequence[Lactation] = (),
                               role_changes: Sequence[RoleChange] = (),
                               manual_overrides: Optional[ManualOverrides] = None,
                               period_identifier: Optional[str] = None) -> Schedule:
    """Genera el cronograma base (ver BaseScheduleBuilder)."""
    builder = BaseScheduleBuilder(shift_patterns, vacations, transfers,
                                  lactations, role_changes, manual_overrides)
    return builder.build(all_collaborators, days, period_identifier)
