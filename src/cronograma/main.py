"""
Generador de cronogramas de turnos por período.

Uso:
    cronograma <mes> <año> <datos.json> [ubicación] [cargo]

Ejemplo:
    cronograma 5 2025 datos.json "SEDE NORTE" "CAJERO DE RECAUDO"
"""

import sys
import logging
from datetime import date

from .application import GenerateScheduleUseCase, ScheduleGenerationRequest
from .core.models import ALL, Role, ScheduleFilters
from .core.services import daily_shift_counts, plot_daily_coverage, schedule_to_frame
from .exceptions import CronogramaError
from .infrastructure.config import configure_logging
from .infrastructure.data_sources import InMemoryScheduleDataSource
from .utils.text import normalize_text

logger = logging.getLogger(__name__)

USAGE = 'Uso: cronograma <mes> <año> <datos.json> [ubicación] [cargo]'


def main(argv=None):
    """Función principal del generador de cronogramas."""
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    if len(argv) < 3:
        print(USAGE)
        return 1

    # Procesar argumentos
    try:
        month = int(argv[0])
        year = int(argv[1])
        if month < 1 or month > 12:
            raise ValueError("El mes debe estar entre 1 y 12")
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    location = normalize_text(argv[3]) if len(argv) > 3 else ALL
    job_title = normalize_text(argv[4]) if len(argv) > 4 else ALL

    try:
        data_source = InMemoryScheduleDataSource.from_json_file(argv[2])
        request = ScheduleGenerationRequest(
            anchor_date=date(year, month, 1),
            role=Role.COORDINATOR,
            filters=ScheduleFilters(location=location, job_title=job_title),
        )
        result = GenerateScheduleUseCase(data_source).execute(request)
    except CronogramaError as e:
        print(f"Error: {e}")
        return 1

    period = result.period_identifier
    print(f"Cronograma del período {period}: {result.days[0]} a {result.days[-1]}")

    if result.warnings:
        print(f"\n¡ADVERTENCIA! Se encontraron {len(result.warnings)} problemas en los datos:")
        for warning in result.warnings[:10]:
            print(f"  - {warning}")

    if result.shortfalls:
        print(f"\nFranjas sin cubrir por falta de personal: {len(result.shortfalls)}")

    staffing = result.staffing
    if staffing is not None and staffing.is_understaffed:
        print(f"Personal recomendado: {staffing.recommended_collaborators} "
              f"(disponibles: {staffing.available_collaborators})")

    # Exportar el cronograma (colaborador x día)
    frame = schedule_to_frame(result.schedule)
    table = frame.pivot(index='collaborator_id', columns='day_key', values='shift')
    csv_filename = f"horario_{period}.csv"
    table.fillna('LIB').to_csv(csv_filename)
    print(f"\nCronograma exportado en: {csv_filename}")

    # Cobertura diaria
    counts = daily_shift_counts(result.schedule, data_source.get_collaborators(), result.days,
                                data_source.get_transfers(), data_source.get_role_changes(),
                                request.filters)
    chart_filename = plot_daily_coverage(counts, f"cobertura_{period}.png")
    print(f"Gráfico de cobertura generado en: {chart_filename}")

    print("\nProceso completado con éxito.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
