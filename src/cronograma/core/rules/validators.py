"""
Validadores de calidad de datos para las entradas del cronograma.

Ninguna de estas verificaciones impide generar el cronograma: el motor
aplica valores por defecto. Los hallazgos se reportan como advertencias
para que administración corrija la configuración.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass

from ..models import ScheduleType
from ..models.context import ScheduleContext
from .assignment import find_overlapping_records


@dataclass(frozen=True)
class DataQualityIssue:
    """Hallazgo de calidad de datos."""
    code: str
    message: str
    collaborator_id: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class InputValidator(ABC):
    """Interfaz para validadores de las entradas del cronograma."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre del validador."""

    @abstractmethod
    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        """Retorna los hallazgos encontrados en el contexto."""


class ShiftPatternValidator(InputValidator):
    """
    Verifica los patrones de turno.

    - Cargos de la nómina sin patrón (se usará N9 entre semana y LIB el fin de semana)
    - Ciclos vacíos
    - Patrones duplicados para un mismo cargo
    """

    @property
    def name(self) -> str:
        return "shift_pattern_validator"

    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        issues = []
        seen = set()

        for pattern in context.shift_patterns:
            if pattern.job_title in seen:
                issues.append(DataQualityIssue(
                    "duplicate_pattern",
                    f"Patrón duplicado para el cargo {pattern.job_title}; se usa el último"
                ))
            seen.add(pattern.job_title)

            if not pattern.cycle:
                issues.append(DataQualityIssue(
                    "empty_cycle",
                    f"El patrón del cargo {pattern.job_title} no tiene turnos en el ciclo"
                ))
            elif pattern.schedule_type == ScheduleType.MONDAY_TO_FRIDAY and not pattern.first_shift:
                issues.append(DataQualityIssue(
                    "monday_to_friday_without_shift",
                    f"El patrón lunes a viernes de {pattern.job_title} inicia en descanso; se usará D12"
                ))

        job_titles = {c.original_job_title for c in context.all_collaborators}
        job_titles.update(rc.new_job_title for rc in context.role_changes)
        for job_title in sorted(job_titles - seen):
            issues.append(DataQualityIssue(
                "missing_pattern",
                f"El cargo {job_title} no tiene patrón de turnos; se asigna N9 entre semana"
            ))

        return issues


class IntervalValidator(InputValidator):
    """Verifica que las novedades tengan fecha de inicio anterior o igual a la de fin."""

    @property
    def name(self) -> str:
        return "interval_validator"

    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        issues = []
        groups = [
            ("vacaciones/permisos", context.vacations),
            ("traslados", context.transfers),
            ("lactancias", context.lactations),
            ("cambios de rol", context.role_changes),
        ]
        for label, records in groups:
            for record in records:
                if not record.is_well_formed:
                    issues.append(DataQualityIssue(
                        "inverted_interval",
                        f"Registro de {label} con inicio {record.start_date} posterior al fin "
                        f"{record.end_date}",
                        record.collaborator_id
                    ))
        return issues


class OverlapValidator(InputValidator):
    """
    Detecta cambios de rol o traslados solapados para un mismo colaborador.

    En un solapamiento se aplica el primer registro en orden de entrada.
    """

    @property
    def name(self) -> str:
        return "overlap_validator"

    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        issues = []
        for label, records in (("cambios de rol", context.role_changes),
                               ("traslados", context.transfers)):
            for first, second in find_overlapping_records(records):
                issues.append(DataQualityIssue(
                    "overlapping_records",
                    f"{label.capitalize()} solapados para {first.collaborator_id}: "
                    f"{first.start_date}..{first.end_date} y {second.start_date}..{second.end_date}",
                    first.collaborator_id
                ))
        return issues


class ManualOverrideValidator(InputValidator):
    """Verifica que las ediciones manuales correspondan a colaboradores de la nómina."""

    @property
    def name(self) -> str:
        return "manual_override_validator"

    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        known = {c.id for c in context.all_collaborators}
        return [
            DataQualityIssue(
                "unknown_collaborator",
                f"Edición manual para colaborador inexistente {collaborator_id}",
                collaborator_id
            )
            for collaborator_id in context.manual_overrides
            if collaborator_id not in known
        ]


class CompositeValidator(InputValidator):
    """
    Validador compuesto que ejecuta múltiples validadores.
    """

    def __init__(self, validators: List[InputValidator] = None):
        self.validators = validators if validators is not None else [
            ShiftPatternValidator(),
            IntervalValidator(),
            OverlapValidator(),
            ManualOverrideValidator(),
        ]

    @property
    def name(self) -> str:
        return "composite_validator"

    def validate(self, context: ScheduleContext) -> List[DataQualityIssue]:
        issues = []
        for validator in self.validators:
            issues.extend(validator.validate(context))
        return issues

    def list_validators(self) -> List[str]:
        return [validator.name for validator in self.validators]


# Instancia por defecto
default_validator = CompositeValidator()
