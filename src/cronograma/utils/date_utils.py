"""
Utilidades para manejo de fechas y períodos de programación.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, List, Union

DAY_KEY_FORMAT = "%Y-%m-%d"

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Convierte datetime, date o 'yyyy-MM-dd' a un objeto date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value[:10])
    raise TypeError(f"No se puede convertir a fecha: {value!r}")


def parse_date(date_str: str, format_str: str = DAY_KEY_FORMAT) -> date:
    """Convierte string a objeto date."""
    return datetime.strptime(date_str, format_str).date()


def day_key(day: DateLike) -> str:
    """Clave de día 'yyyy-MM-dd' usada en los mapas de horario."""
    return to_date(day).strftime(DAY_KEY_FORMAT)


def date_range(start_date: date, end_date: date) -> Iterator[date]:
    """Genera un rango de fechas entre inicio y fin, inclusivo."""
    current_date = start_date
    while current_date <= end_date:
        yield current_date
        current_date += timedelta(days=1)


def is_weekend(day: date) -> bool:
    """Verifica si una fecha cae en fin de semana."""
    return day.weekday() >= 5  # 5=Sábado, 6=Domingo


def get_period_days(anchor: date, start_day: int = 21, end_day: int = 20) -> List[date]:
    """
    Retorna los días del período de programación de un mes.

    El período va del día `start_day` del mes anterior al día `end_day`
    del mes de `anchor` (por convención, del 21 al 20).

    Args:
        anchor: Cualquier fecha del mes que da nombre al período
        start_day: Día de inicio en el mes anterior
        end_day: Día de cierre en el mes de referencia

    Returns:
        List[date]: Días del período en orden cronológico
    """
    anchor = to_date(anchor)
    previous_month_last = anchor.replace(day=1) - timedelta(days=1)
    start = previous_month_last.replace(day=start_day)
    end = anchor.replace(day=end_day)
    return list(date_range(start, end))


def get_period_identifier(anchor: date) -> str:
    """Identificador 'yyyy-MM' del período cuyo mes de referencia es `anchor`."""
    return to_date(anchor).strftime("%Y-%m")
