from datetime import date

from cronograma.core.models import RoleChange, TemporaryTransfer
from cronograma.core.rules.assignment import (
    EffectiveAssignment,
    find_overlapping_records,
    get_effective_details,
)

from conftest import CASHIER, NORTH, SOUTH, cashier

DAY = date(2025, 1, 10)


def test_without_records_uses_original_values():
    collaborator = cashier("C1")
    assert get_effective_details(collaborator, DAY) == EffectiveAssignment(NORTH, CASHIER)


def test_transfer_changes_location_only():
    collaborator = cashier("C1")
    transfers = [TemporaryTransfer("C1", "2025-01-08", "2025-01-12", new_location=SOUTH)]

    assignment = get_effective_details(collaborator, DAY, transfers=transfers)

    assert assignment.location == SOUTH
    assert assignment.job_title == CASHIER
    assert assignment.group_key == f"{SOUTH}-{CASHIER}"


def test_role_change_takes_precedence_over_transfer():
    collaborator = cashier("C1")
    transfers = [TemporaryTransfer("C1", DAY, DAY, new_location=SOUTH)]
    role_changes = [RoleChange("C1", DAY, DAY, new_job_title="SUPERVISOR", new_location="SEDE CENTRO")]

    assignment = get_effective_details(collaborator, DAY, transfers, role_changes)

    assert assignment == EffectiveAssignment("SEDE CENTRO", "SUPERVISOR")


def test_interval_bounds_are_inclusive():
    collaborator = cashier("C1")
    transfers = [TemporaryTransfer("C1", "2025-01-10", "2025-01-11", new_location=SOUTH)]

    assert get_effective_details(collaborator, date(2025, 1, 9), transfers).location == NORTH
    assert get_effective_details(collaborator, date(2025, 1, 10), transfers).location == SOUTH
    assert get_effective_details(collaborator, date(2025, 1, 11), transfers).location == SOUTH
    assert get_effective_details(collaborator, date(2025, 1, 12), transfers).location == NORTH


def test_records_of_other_collaborators_are_ignored():
    collaborator = cashier("C1")
    transfers = [TemporaryTransfer("C2", DAY, DAY, new_location=SOUTH)]
    assert get_effective_details(collaborator, DAY, transfers).location == NORTH


def test_first_overlapping_record_in_input_order_wins():
    collaborator = cashier("C1")
    transfers = [
        TemporaryTransfer("C1", "2025-01-01", "2025-01-31", new_location="SEDE A"),
        TemporaryTransfer("C1", "2025-01-10", "2025-01-10", new_location="SEDE B"),
    ]
    assert get_effective_details(collaborator, DAY, transfers).location == "SEDE A"


def test_find_overlapping_records():
    first = RoleChange("C1", "2025-01-01", "2025-01-15", new_job_title="A", new_location=NORTH)
    second = RoleChange("C1", "2025-01-15", "2025-01-20", new_job_title="B", new_location=NORTH)
    third = RoleChange("C1", "2025-01-21", "2025-01-25", new_job_title="C", new_location=NORTH)
    other = RoleChange("C2", "2025-01-01", "2025-01-31", new_job_title="D", new_location=NORTH)

    assert find_overlapping_records([first, second, third, other]) == [(first, second)]
