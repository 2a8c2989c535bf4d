from collections import Counter

from cronograma.core.models import Conditioning, Schedule
from cronograma.core.services.rebalancer import (
    ConditioningRebalancer,
    Shortfall,
    apply_conditioning_rebalance,
    default_cashier_conditioning,
    recommend_staffing,
)
from cronograma.utils.date_utils import day_key

from conftest import MONDAY, cashier, make_days

KEY = day_key(MONDAY)


def schedule_from(values):
    schedule = Schedule()
    for collaborator_id, shift in values.items():
        schedule.set(collaborator_id, MONDAY, shift)
    return schedule


def test_fills_from_day_off_then_surplus():
    cohort = [cashier(f"c{i}") for i in range(1, 5)]
    base = schedule_from({"c1": "M8", "c2": "M8", "c3": "M8", "c4": None})

    result = ConditioningRebalancer(Conditioning(1, 1, 1)).rebalance(base, cohort, [MONDAY])

    assert result.schedule.values_on(MONDAY) == {"c1": "N8", "c2": "M8", "c3": "M8", "c4": "T8"}
    assert result.is_fully_staffed


def test_records_shortfall_when_no_donors():
    cohort = [cashier("c1"), cashier("c2")]
    base = schedule_from({"c1": "M8", "c2": "VAC"})

    result = ConditioningRebalancer(Conditioning(1, 1, 0)).rebalance(base, cohort, [MONDAY])

    assert result.schedule.values_on(MONDAY) == {"c1": "M8", "c2": "VAC"}
    assert result.shortfalls == [Shortfall(KEY, "T8", 1)]
    assert not result.is_fully_staffed


def test_surplus_slot_donates():
    cohort = [cashier("c1"), cashier("c2")]
    base = schedule_from({"c1": "M8", "c2": "M8"})

    rebalanced = apply_conditioning_rebalance(base, Conditioning(1, 1, 0), cohort, [MONDAY])

    assert rebalanced.values_on(MONDAY) == {"c1": "T8", "c2": "M8"}


def test_non_cohort_and_status_cells_are_untouched():
    cohort = [cashier("c1"), cashier("c2")]
    base = schedule_from({"c1": None, "c2": "TRA", "outsider": None})

    rebalanced = apply_conditioning_rebalance(base, Conditioning(0, 0, 2), cohort, [MONDAY])

    assert rebalanced.values_on(MONDAY) == {"c1": "N8", "c2": "TRA", "outsider": None}


def test_cohort_total_is_conserved():
    days = make_days(MONDAY, 3)
    cohort = [cashier(f"c{i}") for i in range(6)]
    cycle = ["M8", "M8", None, "T8", "N8", "M8"]
    base = Schedule()
    for index, collaborator in enumerate(cohort):
        for offset, day in enumerate(days):
            base.set(collaborator.id, day, cycle[(index + offset) % len(cycle)])

    rebalanced = apply_conditioning_rebalance(base, Conditioning(2, 2, 1), cohort, days)

    for day in days:
        before = base.values_on(day)
        after = rebalanced.values_on(day)
        assert sum(Counter(before.values()).values()) == sum(Counter(after.values()).values())
        assert set(after.values()) <= {"M8", "T8", "N8", None}


def test_base_schedule_is_not_mutated():
    cohort = [cashier("c1")]
    base = schedule_from({"c1": None})

    rebalanced = apply_conditioning_rebalance(base, Conditioning(1, 0, 0), cohort, [MONDAY])

    assert base.get("c1", MONDAY) is None
    assert rebalanced.get("c1", MONDAY) == "M8"


def test_zero_targets_leave_schedule_unchanged():
    cohort = [cashier("c1"), cashier("c2")]
    base = schedule_from({"c1": "M8", "c2": None})

    rebalanced = apply_conditioning_rebalance(base, Conditioning(), cohort, [MONDAY])

    assert rebalanced == base


def test_default_cashier_conditioning():
    conditioning = default_cashier_conditioning()
    assert (conditioning.morning, conditioning.afternoon, conditioning.night) == (4, 4, 2)
    assert conditioning.is_automatic is False


def test_recommend_staffing():
    recommendation = recommend_staffing(Conditioning(2, 1, 1), total_collaborators=5)

    assert recommendation.total_daily_shifts == 4
    assert recommendation.recommended_collaborators == 6
    assert recommendation.rest_slots == 1
    assert recommendation.is_understaffed


def test_recommend_staffing_without_rest_slots():
    recommendation = recommend_staffing(Conditioning(2, 2, 0), total_collaborators=3)
    assert recommendation.rest_slots == 0
