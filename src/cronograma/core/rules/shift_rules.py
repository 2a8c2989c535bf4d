"""
Resolución del horario (hora de inicio y duración) de un turno.

Consulta la tabla de reglas de horas extra y, si no hay regla para el turno,
recurre a los horarios fijos de los turnos más comunes.
"""

import logging
from datetime import datetime
from typing import Dict, Optional, Sequence, Union

from ..models import DayType, OvertimeRule, ShiftDetails
from ...utils.text import normalize_text

logger = logging.getLogger(__name__)

# Turno administrativo: siempre 08:30, 9 horas, sin consultar reglas
ADMIN_SHIFT_DETAILS = ShiftDetails(8, 30, 9)

# Horarios por defecto cuando no existe regla
FALLBACK_SHIFT_DETAILS: Dict[str, ShiftDetails] = {
    'N12': ShiftDetails(18, 0, 12),
    'D12': ShiftDetails(6, 0, 12),
    'T24': ShiftDetails(6, 0, 24),
}


def _day_type(value: Union[DayType, str]) -> DayType:
    return value if isinstance(value, DayType) else DayType(value)


def find_rule(shift: str, job_title: str, day_type: Union[DayType, str],
              overtime_rules: Sequence[OvertimeRule]) -> Optional[OvertimeRule]:
    """Regla para el turno comparando el cargo normalizado."""
    normalized_title = normalize_text(job_title)
    day_type = _day_type(day_type)
    for rule in overtime_rules:
        if (normalize_text(rule.job_title) == normalized_title and
                rule.shift == shift and rule.day_type == day_type):
            return rule
    return None


def find_overtime_rule(shift: str, job_title: str, day_type: Union[DayType, str],
                       overtime_rules: Sequence[OvertimeRule]) -> Optional[OvertimeRule]:
    """Regla para recargos y horas extra: el cargo debe coincidir exactamente."""
    day_type = _day_type(day_type)
    for rule in overtime_rules:
        if rule.job_title == job_title and rule.day_type == day_type and rule.shift == shift:
            return rule
    return None


def get_shift_details_from_rules(shift: str,
                                 job_title: str,
                                 day_type: Union[DayType, str],
                                 overtime_rules: Sequence[OvertimeRule]) -> Optional[ShiftDetails]:
    """
    Obtiene la hora de inicio y la duración de un turno.

    Orden de resolución:
        1. N9 siempre es 08:30 con 9 horas.
        2. Regla exacta (cargo normalizado, turno, tipo de día).
        3. Sin regla: N12, D12 y T24 tienen horario por defecto.
        4. Con regla: duración = fin - inicio (+24h si cruza medianoche).

    Args:
        shift: Código del turno
        job_title: Cargo efectivo del colaborador
        day_type: NORMAL o FESTIVO
        overtime_rules: Tabla de reglas

    Returns:
        ShiftDetails o None si el turno no tiene horario definido
    """
    if shift == 'N9':
        return ADMIN_SHIFT_DETAILS

    rule = find_rule(shift, job_title, day_type, overtime_rules)

    if rule is None:
        return FALLBACK_SHIFT_DETAILS.get(shift)

    if not rule.start_time or not rule.end_time:
        return None

    try:
        start = datetime.strptime(rule.start_time, "%H:%M")
        end = datetime.strptime(rule.end_time, "%H:%M")
    except ValueError as e:
        logger.error("Formato de hora inválido en la regla del turno %s (%s): %s",
                     shift, job_title, e)
        return None

    diff_minutes = int((end - start).total_seconds() // 60)
    if diff_minutes < 0:
        diff_minutes += 24 * 60

    return ShiftDetails(start.hour, start.minute, diff_minutes / 60)
