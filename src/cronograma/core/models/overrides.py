"""
Novedades con vigencia en el tiempo que modifican el cronograma base.

Incluye traslados temporales, cambios de rol, vacaciones y permisos,
lactancias, festivos, ediciones manuales y solicitudes de cambio.
"""

from datetime import date
from typing import Any, Dict, List, Optional
from enum import Enum
from dataclasses import dataclass, field

from ...exceptions import DataError
from ...utils.date_utils import to_date
from ...utils.text import normalize_text


def _require(data: Dict[str, Any], *keys: str) -> Any:
    """Obtiene el primer campo presente entre varios alias."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    raise DataError(f"Registro sin campo requerido ({' / '.join(keys)}): {data!r}")


def _text(value: str, normalize: bool) -> str:
    return normalize_text(value) if normalize else value


def record_date(value: Any, field_name: str) -> date:
    """Convierte una fecha de un registro; los valores inválidos son DataError."""
    try:
        return to_date(value)
    except (TypeError, ValueError) as e:
        raise DataError(f"Fecha inválida en {field_name}: {value!r}") from e


@dataclass
class IntervalRecord:
    """Registro de un colaborador vigente en un intervalo inclusivo de fechas."""
    collaborator_id: str
    start_date: date
    end_date: date

    def __post_init__(self):
        self.start_date = record_date(self.start_date, "startDate")
        self.end_date = record_date(self.end_date, "endDate")

    def covers(self, day: date) -> bool:
        """Indica si el intervalo contiene el día (extremos incluidos)."""
        return self.start_date <= to_date(day) <= self.end_date

    def applies_to(self, collaborator_id: str, day: date) -> bool:
        return self.collaborator_id == collaborator_id and self.covers(day)

    @property
    def is_well_formed(self) -> bool:
        return self.start_date <= self.end_date


@dataclass
class TemporaryTransfer(IntervalRecord):
    """Traslado temporal de ubicación; el cargo no cambia."""
    new_location: str = ""
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], normalize: bool = False) -> 'TemporaryTransfer':
        return cls(
            collaborator_id=str(_require(data, 'collaboratorId')),
            start_date=_require(data, 'startDate'),
            end_date=_require(data, 'endDate'),
            new_location=_text(_require(data, 'newLocation'), normalize),
            id=data.get('id'),
        )


@dataclass
class RoleChange(IntervalRecord):
    """Cambio de rol: nuevo cargo y nueva ubicación durante el intervalo."""
    new_job_title: str = ""
    new_location: str = ""
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], normalize: bool = False) -> 'RoleChange':
        return cls(
            collaborator_id=str(_require(data, 'collaboratorId')),
            start_date=_require(data, 'startDate'),
            end_date=_require(data, 'endDate'),
            new_job_title=_text(_require(data, 'newJobTitle'), normalize),
            new_location=_text(_require(data, 'newLocation'), normalize),
            id=data.get('id'),
        )


class RequestType(Enum):
    """Tipos de solicitud de ausencia."""
    VACATION = "vacaciones"
    PERMISSION = "permiso"


@dataclass
class AbsenceRequest(IntervalRecord):
    """Solicitud de vacaciones o de permiso."""
    request_type: RequestType = RequestType.VACATION
    reason: Optional[str] = None
    status: str = "approved"
    id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.request_type, str):
            try:
                self.request_type = RequestType(self.request_type)
            except ValueError as e:
                raise DataError(f"Tipo de solicitud inválido: {self.request_type}") from e

    @property
    def is_approved(self) -> bool:
        return self.status == "approved"

    @property
    def is_vacation(self) -> bool:
        return self.request_type == RequestType.VACATION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AbsenceRequest':
        return cls(
            collaborator_id=str(_require(data, 'userId', 'collaboratorId')),
            start_date=_require(data, 'startDate'),
            end_date=_require(data, 'endDate'),
            request_type=data.get('requestType', RequestType.VACATION.value),
            reason=data.get('reason'),
            status=data.get('status') or "approved",
            id=data.get('id'),
        )


@dataclass
class Lactation(IntervalRecord):
    """Período de lactancia: sin turnos nocturnos ni de 24 horas."""
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Lactation':
        return cls(
            collaborator_id=str(_require(data, 'collaboratorId')),
            start_date=_require(data, 'startDate'),
            end_date=_require(data, 'endDate'),
            id=data.get('id'),
        )


@dataclass
class Holiday:
    """Festivo (puede abarcar varios días)."""
    name: str
    start_date: date
    end_date: date
    id: Optional[str] = None

    def __post_init__(self):
        self.start_date = record_date(self.start_date, "startDate")
        self.end_date = record_date(self.end_date, "endDate")

    def covers(self, day: date) -> bool:
        return self.start_date <= to_date(day) <= self.end_date

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Holiday':
        return cls(
            name=data.get('name', ''),
            start_date=_require(data, 'startDate'),
            end_date=_require(data, 'endDate'),
            id=data.get('id'),
        )


@dataclass
class ManualOverride:
    """Edición manual de una celda del cronograma."""
    shift: Optional[str]
    note: str = ""
    original_shift: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManualOverride':
        return cls(
            shift=data.get('shift'),
            note=data.get('note') or "",
            original_shift=data.get('originalShift'),
        )


# collaborator_id -> day_key -> ManualOverride
ManualOverrides = Dict[str, Dict[str, ManualOverride]]


class NotificationStatus(Enum):
    """Estados de una solicitud de cambio."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


SCHEDULED_SHIFT_FIELD = "scheduledShift"


@dataclass
class NotificationChange:
    """Cambio puntual solicitado sobre un registro."""
    field: str
    from_value: Optional[str] = None
    to_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NotificationChange':
        return cls(
            field=_require(data, 'field'),
            from_value=data.get('from'),
            to_value=data.get('to'),
        )


@dataclass
class Notification:
    """
    Solicitud de cambio sobre un registro de asistencia/cronograma.

    `record_id` tiene la forma "yyyy-MM-dd-{collaborator_id}".
    """
    record_id: str
    changes: List[NotificationChange] = field(default_factory=list)
    status: NotificationStatus = NotificationStatus.PENDING
    id: Optional[str] = None
    requester_id: Optional[str] = None
    request_note: str = ""

    def __post_init__(self):
        if isinstance(self.status, str):
            try:
                self.status = NotificationStatus(self.status)
            except ValueError as e:
                raise DataError(f"Estado de notificación inválido: {self.status}") from e

    @property
    def is_active(self) -> bool:
        """Las solicitudes pendientes y aprobadas se reflejan en el cronograma."""
        return self.status in (NotificationStatus.PENDING, NotificationStatus.APPROVED)

    @property
    def day_key(self) -> str:
        return '-'.join(self.record_id.split('-')[:3])

    @property
    def collaborator_id(self) -> str:
        return '-'.join(self.record_id.split('-')[3:])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Notification':
        return cls(
            record_id=_require(data, 'recordId'),
            changes=[NotificationChange.from_dict(c) for c in data.get('changes') or []],
            status=data.get('status', NotificationStatus.PENDING.value),
            id=data.get('id'),
            requester_id=data.get('requesterId'),
            request_note=data.get('requestNote') or "",
        )


def manual_overrides_from_dict(data: Dict[str, Dict[str, Dict[str, Any]]]) -> ManualOverrides:
    """Convierte {colaborador: {día: {...}}} en ManualOverrides."""
    return {
        collaborator_id: {key: ManualOverride.from_dict(value) for key, value in days.items()}
        for collaborator_id, days in (data or {}).items()
    }
