"""
Utilidades compartidas: fechas de período y normalización de texto.
"""

from .date_utils import (
    DAY_KEY_FORMAT,
    day_key,
    parse_date,
    to_date,
    date_range,
    is_weekend,
    get_period_days,
    get_period_identifier,
)
from .text import normalize_text

__all__ = [
    'DAY_KEY_FORMAT',
    'day_key',
    'parse_date',
    'to_date',
    'date_range',
    'is_weekend',
    'get_period_days',
    'get_period_identifier',
    'normalize_text',
]
