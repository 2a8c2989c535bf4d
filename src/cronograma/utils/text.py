"""
Normalización de textos (cargos, ubicaciones) para comparaciones.
"""

import re
import unicodedata
from typing import Optional


def normalize_text(text: Optional[str]) -> str:
    """
    Normaliza un texto: sin tildes, en mayúsculas y con espacios simples.

    Ejemplo: "  Cajero  de recaudo " -> "CAJERO DE RECAUDO"
    """
    if not text:
        return ''
    decomposed = unicodedata.normalize('NFD', text)
    stripped = ''.join(ch for ch in decomposed if not '\u0300' <= ch <= '\u036f')
    return re.sub(r'\s+', ' ', stripped.upper()).strip()
