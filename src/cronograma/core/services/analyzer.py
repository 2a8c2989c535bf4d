"""
Servicio de análisis de cronogramas.

Resume el cronograma final en tablas de pandas (conteo diario de turnos,
resumen por colaborador, brechas frente al acondicionamiento) y genera la
gráfica de cobertura diaria con matplotlib.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd
import matplotlib.pyplot as plt

from ..models import (
    ALL,
    Collaborator,
    Conditioning,
    RoleChange,
    Schedule,
    ScheduleFilters,
    ShiftCharacteristics,
    ShiftSlot,
    TemporaryTransfer,
    NON_WORKING_CODES,
    ORDERED_SHIFT_CODES,
)
from ..rules.assignment import get_effective_details
from ...utils.date_utils import day_key

logger = logging.getLogger(__name__)

DAY_OFF_COLUMN = "LIB"

SLOT_COLORS = {
    'M8': '#4CAF50',
    'T8': '#F44336',
    'N8': '#2196F3',
}


def order_shift_codes(codes) -> List[str]:
    """Turnos conocidos en su orden de presentación, luego el resto alfabéticamente."""
    codes = set(codes)
    ordered = [code for code in ORDERED_SHIFT_CODES if code in codes]
    ordered.extend(sorted(codes - set(ORDERED_SHIFT_CODES)))
    return ordered


def schedule_to_frame(schedule: Schedule) -> pd.DataFrame:
    """
    Convierte el cronograma en un DataFrame largo.

    Returns:
        DataFrame con columnas collaborator_id, day_key, shift
    """
    rows = [
        {'collaborator_id': cid, 'day_key': key, 'shift': shift}
        for cid, key, shift in schedule.cells()
    ]
    frame = pd.DataFrame(rows, columns=['collaborator_id', 'day_key', 'shift'])
    return frame.sort_values(['collaborator_id', 'day_key']).reset_index(drop=True)


def daily_shift_counts(schedule: Schedule,
                       collaborators: Sequence[Collaborator],
                       days: Sequence[date],
                       transfers: Sequence[TemporaryTransfer] = (),
                       role_changes: Sequence[RoleChange] = (),
                       filters: Optional[ScheduleFilters] = None) -> pd.DataFrame:
    """
    Cuenta los turnos trabajados por día.

    Solo se cuentan los colaboradores cuya ubicación y cargo efectivos en el
    día coinciden con los filtros. Los estados (VAC, TRA, ausencias) y los
    días libres no cuentan.

    Returns:
        DataFrame indexado por día, una columna por turno
    """
    filters = filters or ScheduleFilters()
    counts = {}

    for day in days:
        key = day_key(day)
        day_counts = {}
        for collaborator in collaborators:
            location, job_title = get_effective_details(collaborator, day, transfers, role_changes)
            if filters.location != ALL and location != filters.location:
                continue
            if filters.job_title != ALL and job_title != filters.job_title:
                continue

            shift = schedule.get(collaborator.id, key)
            if not shift or shift in NON_WORKING_CODES:
                continue
            day_counts[shift] = day_counts.get(shift, 0) + 1
        counts[key] = day_counts

    frame = pd.DataFrame.from_dict(counts, orient='index')
    frame = frame.reindex(index=[day_key(d) for d in days],
                          columns=order_shift_codes(frame.columns))
    frame.index.name = 'day_key'
    return frame.fillna(0).astype(int)


def collaborator_summary(schedule: Schedule) -> pd.DataFrame:
    """
    Resumen por colaborador: días trabajados, libres y cada estado.

    Returns:
        DataFrame indexado por colaborador
    """
    frame = schedule_to_frame(schedule)
    columns = ['worked_days', DAY_OFF_COLUMN] + sorted(NON_WORKING_CODES)
    if frame.empty:
        return pd.DataFrame(columns=columns, dtype=int)

    # None y NaN son días libres
    labels = frame['shift'].fillna(DAY_OFF_COLUMN).map(
        lambda shift: 'worked_days' if ShiftCharacteristics.is_working_shift(shift)
        and shift != DAY_OFF_COLUMN else shift
    )
    summary = pd.crosstab(frame['collaborator_id'], labels)
    summary = summary.reindex(columns=columns, fill_value=0)
    summary.index.name = 'collaborator_id'
    summary.columns.name = None
    return summary


def coverage_gaps(counts: pd.DataFrame, conditioning: Conditioning) -> pd.DataFrame:
    """
    Diferencia diaria entre el personal asignado y el objetivo por franja.

    Valores negativos indican faltantes; positivos, exceso.
    """
    gaps = pd.DataFrame(index=counts.index)
    for slot, target in conditioning.targets().items():
        assigned = counts[slot] if slot in counts.columns else 0
        gaps[slot] = assigned - target
    return gaps.astype(int)


def plot_daily_coverage(counts: pd.DataFrame, output_path: str,
                        title: str = "Cobertura diaria por turno") -> str:
    """Genera un gráfico de barras apiladas con los turnos por día y lo guarda como imagen."""
    import matplotlib
    matplotlib.use('Agg')  # Para generar gráficos sin interfaz

    slots = [slot for slot in ShiftSlot.get_all_values() if slot in counts.columns]
    others = [code for code in counts.columns if code not in slots]

    plt.figure(figsize=(14, 7))

    bottom = [0] * len(counts.index)
    for code in slots + others:
        values = counts[code].tolist()
        plt.bar(counts.index, values, bottom=bottom, label=code, color=SLOT_COLORS.get(code))
        bottom = [b + v for b, v in zip(bottom, values)]

    plt.xlabel('Día')
    plt.ylabel('Colaboradores')
    plt.title(title)
    plt.xticks(rotation=90)
    plt.legend()
    plt.tight_layout()

    plt.savefig(output_path)
    plt.close()

    logger.debug("Gráfico de cobertura guardado en %s", output_path)
    return output_path
