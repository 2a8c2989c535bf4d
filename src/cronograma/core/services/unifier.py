"""
Servicio de unificación del cronograma - Punto de entrada del núcleo.

Orquesta la generación base, el acondicionamiento de cajeros, las ediciones
manuales y las solicitudes de cambio para producir el cronograma final.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence, Union
from dataclasses import dataclass, field

from ..models import (
    Collaborator,
    ManualOverrides,
    Notification,
    Role,
    Schedule,
    ScheduleContext,
    DAY_OFF_LABEL,
    SCHEDULED_SHIFT_FIELD,
)
from .generator import generar_horarios_estaticos
from .rebalancer import ConditioningRebalancer, Shortfall

logger = logging.getLogger(__name__)

DEFAULT_CASHIER_JOB_TITLE = "CAJERO DE RECAUDO"


def _notification_value(value: Optional[str]) -> Optional[str]:
    return None if value == DAY_OFF_LABEL else value


@dataclass
class UnificationReport:
    """Cronograma final junto con el detalle del acondicionamiento."""
    schedule: Schedule
    rebalanced: bool = False
    shortfalls: List[Shortfall] = field(default_factory=list)


def apply_manual_overrides(schedule: Schedule, manual_overrides: ManualOverrides) -> Schedule:
    """
    Reaplica las ediciones manuales sobre celdas existentes.

    Modifica `schedule` en sitio y lo retorna.
    """
    for collaborator_id, overrides in manual_overrides.items():
        if not schedule.has_collaborator(collaborator_id):
            continue
        for key, override in overrides.items():
            if override is not None and schedule.has(collaborator_id, key):
                schedule.set(collaborator_id, key, override.shift)
    return schedule


def apply_notifications(schedule: Schedule, notifications: Sequence[Notification]) -> Schedule:
    """
    Superpone las solicitudes de cambio de turno pendientes y aprobadas.

    Las pendientes se muestran como si ya estuvieran vigentes. "LIB" como
    destino significa día libre. Modifica `schedule` en sitio y lo retorna.
    """
    for notification in notifications:
        if not notification.is_active:
            continue

        for change in notification.changes:
            if change.field != SCHEDULED_SHIFT_FIELD:
                continue
            collaborator_id = notification.collaborator_id
            key = notification.day_key
            if schedule.has(collaborator_id, key):
                schedule.set(collaborator_id, key, _notification_value(change.to_value))
            else:
                logger.debug("Solicitud %s sin celda en el cronograma", notification.record_id)
    return schedule


class ScheduleUnifier:
    """
    Construye el cronograma final.

    1. Cronograma base.
    2. Acondicionamiento de la cohorte de cajeros (solo coordinador, con
       ubicación concreta, cargo de cajero y modo manual con objetivo).
    3. Reaplicación de ediciones manuales.
    4. Solicitudes de cambio pendientes y aprobadas.
    """

    def __init__(self, cashier_job_title: str = DEFAULT_CASHIER_JOB_TITLE):
        self.cashier_job_title = cashier_job_title

    def unify(self, days: Sequence[date], context: ScheduleContext,
              role: Union[Role, str] = Role.COLLABORATOR) -> Schedule:
        """Cronograma final para los días indicados."""
        return self.unify_with_report(days, context, role).schedule

    def unify_with_report(self, days: Sequence[date], context: ScheduleContext,
                          role: Union[Role, str] = Role.COLLABORATOR) -> UnificationReport:
        """
        Cronograma final y faltantes del acondicionamiento.

        Args:
            days: Días del período en orden cronológico
            context: Datos de entrada
            role: Rol de quien consulta

        Returns:
            UnificationReport
        """
        role = Role(role) if isinstance(role, str) else role

        schedule = generar_horarios_estaticos(
            context.all_collaborators,
            days,
            context.shift_patterns,
            context.vacations,
            context.transfers,
            context.lactations,
            context.role_changes,
            context.manual_overrides,
            context.period_identifier,
        )
        report = UnificationReport(schedule)

        if self.should_rebalance(context, role):
            cohort = self.cashier_cohort(context.all_collaborators, context.filters.location)
            result = ConditioningRebalancer(context.draft_conditioning).rebalance(schedule, cohort, days)
            report.schedule = result.schedule
            report.rebalanced = True
            report.shortfalls = result.shortfalls
            logger.info("Acondicionamiento aplicado a %d cajeros de %s",
                        len(cohort), context.filters.location)

        apply_manual_overrides(report.schedule, context.manual_overrides)
        apply_notifications(report.schedule, context.notifications)
        return report

    def should_rebalance(self, context: ScheduleContext, role: Role) -> bool:
        filters = context.filters
        return (role == Role.COORDINATOR and
                filters.has_specific_location and
                filters.job_title == self.cashier_job_title and
                context.is_automatic is False and
                context.draft_conditioning is not None)

    def cashier_cohort(self, collaborators: Sequence[Collaborator], location: str) -> List[Collaborator]:
        return [
            c for c in collaborators
            if c.original_job_title == self.cashier_job_title and c.original_location == location
        ]


def obtener_horario_unificado(days: Sequence[date],
                              context: ScheduleContext,
                              role: Union[Role, str] = Role.COLLABORATOR,
                              cashier_job_title: Optional[str] = None) -> Schedule:
    """Cronograma final (ver ScheduleUnifier)."""
    unifier = ScheduleUnifier(cashier_job_title or DEFAULT_CASHIER_JOB_TITLE)
    return unifier.unify(days, context, role)
