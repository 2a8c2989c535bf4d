"""
Caso de uso: Generar el cronograma de un período.

Este módulo carga las entradas desde la fuente de datos, respeta los
cronogramas ya aprobados (bloqueados) y, si no hay uno guardado, calcula
el cronograma unificado con el acondicionamiento que corresponda.
"""

import time
import logging
from datetime import date
from typing import List, Dict, Optional, Union
from dataclasses import dataclass, field

from ...core.models import (
    ALL,
    Conditioning,
    Role,
    SavedSchedule,
    Schedule,
    ScheduleContext,
    ScheduleFilters,
)
from ...core.rules import default_validator
from ...core.services import ScheduleUnifier, Shortfall, StaffingRecommendation, recommend_staffing
from ...exceptions import DataError
from ...infrastructure.config import Settings, settings as default_settings
from ...utils.date_utils import get_period_days, get_period_identifier
from ..ports import ScheduleDataSource, SavedScheduleRepository

logger = logging.getLogger(__name__)


@dataclass
class ScheduleGenerationRequest:
    """Solicitud de generación del cronograma de un período."""
    anchor_date: date
    role: Union[Role, str] = Role.COORDINATOR
    filters: ScheduleFilters = field(default_factory=ScheduleFilters)
    conditioning: Optional[Conditioning] = None
    period_identifier: Optional[str] = None

    @property
    def resolved_period_identifier(self) -> str:
        return self.period_identifier or get_period_identifier(self.anchor_date)

    @property
    def targets_single_group(self) -> bool:
        """La vista corresponde a una ubicación y un cargo concretos."""
        return self.filters.has_specific_location and self.filters.job_title != ALL

    @property
    def saved_schedule_id(self) -> str:
        return SavedSchedule.build_id(self.resolved_period_identifier,
                                      self.filters.location, self.filters.job_title)


@dataclass
class GenerationResult:
    """Resultado de la generación."""
    schedule: Schedule
    days: List[date]
    period_identifier: str
    locked: bool
    conditioning: Conditioning
    shortfalls: List[Shortfall] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    staffing: Optional[StaffingRecommendation] = None
    generation_time: float = 0.0

    @property
    def is_fully_staffed(self) -> bool:
        return not self.shortfalls


class GenerateScheduleUseCase:
    """
    Caso de uso para obtener el cronograma de un período.

    Si existe un cronograma guardado para "{período}_{ubicación}_{cargo}",
    se retorna bloqueado sin recalcular. En otro caso se construye el
    contexto desde la fuente de datos y se unifica.
    """

    def __init__(self,
                 data_source: ScheduleDataSource,
                 saved_schedules: Optional[SavedScheduleRepository] = None,
                 config: Optional[Settings] = None):
        """
        Inicializa el caso de uso.

        Args:
            data_source: Fuente de las entradas del cronograma
            saved_schedules: Repositorio de cronogramas aprobados (opcional)
            config: Configuración (por defecto, la instancia global)
        """
        self.data_source = data_source
        self.saved_schedules = saved_schedules
        self.config = config or default_settings
        self.unifier = ScheduleUnifier(self.config.get_cashier_job_title())

    def execute(self, request: ScheduleGenerationRequest) -> GenerationResult:
        """
        Ejecuta la generación.

        Args:
            request: Solicitud de generación

        Returns:
            GenerationResult
        """
        start_time = time.time()
        start_day, end_day = self.config.get_period_bounds()
        days = get_period_days(request.anchor_date, start_day, end_day)
        period_identifier = request.resolved_period_identifier

        # 1. Cronograma aprobado: se retorna tal cual
        saved = self._find_saved(request)
        if saved is not None:
            logger.info("Cronograma %s bloqueado; se usa la versión guardada", saved.id)
            return GenerationResult(
                schedule=saved.schedule.copy(),
                days=days,
                period_identifier=period_identifier,
                locked=True,
                conditioning=Conditioning(saved.morning, saved.afternoon, saved.night,
                                          saved.is_automatic),
                generation_time=time.time() - start_time,
            )

        # 2. Contexto de entrada
        conditioning = request.conditioning or self.default_conditioning(request.filters)
        context = self.build_context(request, conditioning)

        warnings = []
        if self.config.get_setting("debug.validate_inputs", True):
            for issue in default_validator.validate(context):
                logger.warning(issue.message)
                warnings.append(issue.message)

        # 3. Unificación
        report = self.unifier.unify_with_report(days, context, request.role)
        staffing = self.recommend_staffing(context, conditioning)

        return GenerationResult(
            schedule=report.schedule,
            days=days,
            period_identifier=period_identifier,
            locked=False,
            conditioning=conditioning,
            shortfalls=report.shortfalls,
            warnings=warnings,
            staffing=staffing,
            generation_time=time.time() - start_time,
        )

    def default_conditioning(self, filters: ScheduleFilters) -> Conditioning:
        """
        Acondicionamiento inicial cuando no hay cronograma guardado.

        Los cajeros de una ubicación concreta arrancan en modo manual con los
        valores por defecto; el resto, en modo automático sin objetivo.
        """
        if filters.has_specific_location and filters.job_title == self.config.get_cashier_job_title():
            defaults = self.config.get_default_conditioning()
            return Conditioning(
                morning=defaults["morning"],
                afternoon=defaults["afternoon"],
                night=defaults["night"],
                is_automatic=defaults.get("is_automatic", False),
            )
        return Conditioning(is_automatic=True)

    def recommend_staffing(self, context: ScheduleContext,
                           conditioning: Conditioning) -> Optional[StaffingRecommendation]:
        """Personal recomendado para la cohorte de cajeros en modo manual."""
        filters = context.filters
        if (conditioning.is_automatic or not filters.has_specific_location or
                filters.job_title != self.unifier.cashier_job_title):
            return None

        cohort = self.unifier.cashier_cohort(context.all_collaborators, filters.location)
        factor = self.config.get_schedule_config()["staffing_factor"]
        return recommend_staffing(conditioning, len(cohort), factor)

    def build_context(self, request: ScheduleGenerationRequest,
                      conditioning: Conditioning) -> ScheduleContext:
        # El escalonamiento usa el mes del primer día salvo que se indique otro
        source = self.data_source
        return ScheduleContext(
            all_collaborators=source.get_collaborators(),
            shift_patterns=source.get_shift_patterns(),
            vacations=source.get_vacations(),
            transfers=source.get_transfers(),
            lactations=source.get_lactations(),
            role_changes=source.get_role_changes(),
            manual_overrides=source.get_manual_overrides(),
            notifications=source.get_notifications(),
            overtime_rules=source.get_overtime_rules(),
            holidays=source.get_holidays(),
            is_automatic=conditioning.is_automatic,
            draft_conditioning=conditioning,
            filters=request.filters,
            period_identifier=request.period_identifier,
        )

    def _find_saved(self, request: ScheduleGenerationRequest) -> Optional[SavedSchedule]:
        if self.saved_schedules is None or not request.targets_single_group:
            return None
        return self.saved_schedules.get(request.saved_schedule_id)


def save_schedule(repository: SavedScheduleRepository,
                  request: ScheduleGenerationRequest,
                  result: GenerationResult,
                  saved_by: Optional[Dict[str, str]] = None) -> SavedSchedule:
    """
    Guarda y bloquea el cronograma de una ubicación y un cargo.

    Raises:
        DataError: Si la vista no es de una ubicación y un cargo concretos,
            o si el cronograma ya estaba bloqueado
    """
    if not request.targets_single_group:
        raise DataError("Solo se puede guardar el cronograma de una ubicación y un cargo concretos")
    if result.locked:
        raise DataError(f"El cronograma {request.saved_schedule_id} ya está guardado")

    saved = SavedSchedule(
        period_identifier=result.period_identifier,
        location=request.filters.location,
        job_title=request.filters.job_title,
        schedule=result.schedule.copy(),
        is_automatic=result.conditioning.is_automatic,
        morning=result.conditioning.morning,
        afternoon=result.conditioning.afternoon,
        night=result.conditioning.night,
        saved_at=time.time() * 1000,
        saved_by=dict(saved_by or {}),
    )
    repository.save(saved)
    result.locked = True
    logger.info("Cronograma %s guardado", saved.id)
    return saved
