from datetime import date, timedelta

import pytest

from cronograma.core.models import Collaborator, ShiftPattern

CASHIER = "CAJERO DE RECAUDO"
NORTH = "SEDE NORTE"
SOUTH = "SEDE SUR"

# 2025-01-06 es lunes
MONDAY = date(2025, 1, 6)


def make_days(start: date, count: int):
    return [start + timedelta(days=i) for i in range(count)]


def cashier(collaborator_id: str, location: str = NORTH) -> Collaborator:
    return Collaborator(
        id=collaborator_id,
        name=f"Cajero {collaborator_id}",
        original_job_title=CASHIER,
        original_location=location,
    )


@pytest.fixture
def week_days():
    """Lunes a domingo."""
    return make_days(MONDAY, 7)


@pytest.fixture
def four_days():
    return make_days(MONDAY, 4)


@pytest.fixture
def rotating_pattern():
    return ShiftPattern(CASHIER, "ROTATING", ["M8", "T8", "N8", "LIB"])


@pytest.fixture
def lone_cashier():
    return cashier("C1")
