from cronograma.core.models import (
    AbsenceRequest,
    Collaborator,
    ManualOverride,
    RoleChange,
    ScheduleContext,
    ShiftPattern,
    TemporaryTransfer,
)
from cronograma.core.rules.validators import (
    CompositeValidator,
    IntervalValidator,
    ManualOverrideValidator,
    OverlapValidator,
    ShiftPatternValidator,
    default_validator,
)

from conftest import CASHIER, NORTH, SOUTH, cashier


def codes(issues):
    return [issue.code for issue in issues]


def test_clean_context_has_no_issues(rotating_pattern):
    context = ScheduleContext(all_collaborators=[cashier("C1")], shift_patterns=[rotating_pattern])
    assert default_validator.validate(context) == []


def test_shift_pattern_issues():
    context = ScheduleContext(
        all_collaborators=[cashier("C1"), Collaborator("A1", original_job_title="ANALISTA")],
        shift_patterns=[
            ShiftPattern(CASHIER, "ROTATING", ["M8"]),
            ShiftPattern(CASHIER, "ROTATING", []),
            ShiftPattern("AUXILIAR", "MONDAY_TO_FRIDAY", ["LIB"]),
        ],
    )

    issues = ShiftPatternValidator().validate(context)

    assert codes(issues) == ["duplicate_pattern", "empty_cycle",
                             "monday_to_friday_without_shift", "missing_pattern"]
    assert "ANALISTA" in issues[-1].message


def test_role_change_job_title_needs_pattern(rotating_pattern):
    context = ScheduleContext(
        all_collaborators=[cashier("C1")],
        shift_patterns=[rotating_pattern],
        role_changes=[RoleChange("C1", "2025-01-06", "2025-01-07", new_job_title="SUPERVISOR", new_location=NORTH)],
    )
    assert codes(ShiftPatternValidator().validate(context)) == ["missing_pattern"]


def test_inverted_interval_is_reported():
    context = ScheduleContext(vacations=[AbsenceRequest("C1", "2025-01-10", "2025-01-05")])

    issues = IntervalValidator().validate(context)

    assert codes(issues) == ["inverted_interval"]
    assert issues[0].collaborator_id == "C1"


def test_overlapping_transfers_are_reported():
    context = ScheduleContext(transfers=[
        TemporaryTransfer("C1", "2025-01-01", "2025-01-10", new_location=SOUTH),
        TemporaryTransfer("C1", "2025-01-05", "2025-01-15", new_location="SEDE CENTRO"),
    ])

    issues = OverlapValidator().validate(context)

    assert codes(issues) == ["overlapping_records"]
    assert str(issues[0]).startswith("Traslados solapados para C1")


def test_override_for_unknown_collaborator():
    context = ScheduleContext(
        all_collaborators=[cashier("C1")],
        manual_overrides={"C1": {"2025-01-06": ManualOverride("M8")},
                          "X9": {"2025-01-06": ManualOverride("T8")}},
    )
    assert codes(ManualOverrideValidator().validate(context)) == ["unknown_collaborator"]


def test_composite_validator_lists_validators():
    validator = CompositeValidator([IntervalValidator(), OverlapValidator()])
    assert validator.list_validators() == ["interval_validator", "overlap_validator"]
    assert validator.validate(ScheduleContext()) == []
