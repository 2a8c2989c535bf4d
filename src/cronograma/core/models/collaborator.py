"""
Modelo de dominio para colaboradores.
Núcleo del dominio - puro, sin dependencias externas.
"""

from datetime import date
from typing import Any, Dict, Optional
from dataclasses import dataclass

from ...exceptions import DataError
from ...utils.text import normalize_text
from .overrides import record_date


@dataclass
class Collaborator:
    """
    Colaborador de la nómina visto por el motor de cronogramas.

    `original_job_title` y `original_location` son la base contractual;
    los cambios temporales llegan como traslados o cambios de rol.
    """

    id: str
    name: str = ""
    original_job_title: str = ""
    original_location: str = ""
    entry_date: Optional[date] = None
    job_title: Optional[str] = None
    location: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise DataError("El colaborador debe tener un id")
        if self.entry_date is not None:
            self.entry_date = record_date(self.entry_date, "entryDate")
        if self.job_title is None:
            self.job_title = self.original_job_title
        if self.location is None:
            self.location = self.original_location

    @classmethod
    def from_dict(cls, data: Dict[str, Any], normalize: bool = False) -> 'Collaborator':
        """
        Construye un colaborador desde un registro del almacén de documentos.

        Acepta tanto el formato del cronograma (originalJobTitle, originalLocation)
        como el perfil de usuario (cargo, ubicacion, nombres, apellidos).

        Args:
            data: Registro plano
            normalize: Normalizar cargo y ubicación con normalize_text
        """
        if 'id' not in data:
            raise DataError("Registro de colaborador sin id")

        job_title = data.get('originalJobTitle') or data.get('jobTitle') or data.get('cargo') or ''
        location = data.get('originalLocation') or data.get('location') or data.get('ubicacion') or 'N/A'
        name = data.get('name')
        if name is None:
            name = f"{data.get('nombres', '')} {data.get('apellidos', '')}".strip()

        if normalize:
            job_title = normalize_text(job_title)
            location = normalize_text(location)

        return cls(
            id=str(data['id']),
            name=name,
            original_job_title=job_title,
            original_location=location,
            entry_date=data.get('entryDate') or data.get('fechaIngreso'),
        )

    def __str__(self) -> str:
        return f"{self.name or self.id} ({self.original_job_title} - {self.original_location})"
