import copy

import pytest

from clinic_capacity.capacity_reporting.capacity_models import (
    BreakdownEntry,
    CapacityState,
    CapacityTier,
    Provider,
    ShiftType,
    SlotKey,
)
from clinic_capacity.capacity_reporting.capacity_usecase import run_capacity_projection


def _assign(**slots):
    base = {slot: () for slot in SlotKey}
    base.update({SlotKey(name): tuple(ids) for name, ids in slots.items()})
    return base


def test_closed_at_latest_close(providers):
    result = run_capacity_projection(20, 5, ShiftType.STANDARD, providers, _assign(close=[1]), 4)
    assert result.state is CapacityState.CLOSED
    assert result.value is None
    assert result.tier is None
    assert result.breakdown == ()


def test_closed_boundary_is_inclusive(providers):
    result = run_capacity_projection(20, 0, ShiftType.STANDARD, providers, _assign(close=[1]))
    assert result.state is CapacityState.CLOSED


def test_closed_regardless_of_roster_or_lobby():
    result = run_capacity_projection(21, 0, ShiftType.STANDARD, [], {}, 12)
    assert result.state is CapacityState.CLOSED


def test_compressed_day_closes_earlier(providers):
    assignments = _assign(track1=[1], close=[2])
    compressed = run_capacity_projection(19, 0, ShiftType.COMPRESSED_DAY, providers, assignments)
    standard = run_capacity_projection(19, 0, ShiftType.STANDARD, providers, assignments)

    assert compressed.state is CapacityState.CLOSED
    assert standard.state is CapacityState.COMPUTED


def test_no_providers_assigned_reports_negative_lobby(providers, empty_assignments):
    result = run_capacity_projection(12, 0, ShiftType.COMPRESSED_DAY, providers, empty_assignments, 3)
    assert result.state is CapacityState.NO_PROVIDERS_ASSIGNED
    assert result.value == -3
    assert result.tier is None
    assert result.breakdown == ()


def test_stale_ids_are_ignored(providers):
    result = run_capacity_projection(12, 0, ShiftType.STANDARD, providers, _assign(mid=[99, 100]), 1)
    assert result.state is CapacityState.NO_PROVIDERS_ASSIGNED
    assert result.value == -1


def test_other_shift_type_slots_do_not_count(providers):
    result = run_capacity_projection(12, 0, ShiftType.STANDARD, providers, _assign(track1=[1]))
    assert result.state is CapacityState.NO_PROVIDERS_ASSIGNED
    assert result.value == 0


def test_final_half_hour_credits_floor(providers):
    result = run_capacity_projection(19, 30, ShiftType.STANDARD, providers, _assign(close=[1]))
    assert result.state is CapacityState.COMPUTED
    assert result.total_capacity == 2.0
    assert result.value == 2
    assert result.tier is CapacityTier.WARNING
    assert result.breakdown == (
        BreakdownEntry(provider_name="Ryan", shift_label="Close", remaining_hours=0.5, remaining_patients=2),
    )


def test_mid_shift_provider_projection(providers):
    result = run_capacity_projection(12, 0, ShiftType.STANDARD, providers, _assign(mid=[2]))
    assert result.total_capacity == pytest.approx(12.8)
    assert result.value == 12
    assert result.breakdown[0].remaining_hours == 7.0
    assert result.breakdown[0].remaining_patients == 12


def test_total_keeps_fractions_that_breakdown_truncates():
    roster = [
        Provider(id=1, name="A", patients_per_hour=1.5),
        Provider(id=2, name="B", patients_per_hour=1.5),
    ]
    # 12:30 on mid: 6.5 hours left -> 5.5 * 1.5 + 2 = 10.25 each
    result = run_capacity_projection(12, 30, ShiftType.STANDARD, roster, _assign(mid=[1, 2]))

    assert [e.remaining_patients for e in result.breakdown] == [10, 10]
    assert result.total_capacity == pytest.approx(20.5)
    assert result.value == 20


def test_two_providers_with_lobby():
    roster = [
        Provider(id=10, name="Kristy", patients_per_hour=1.8),
        Provider(id=11, name="Temp", patients_per_hour=2.46),
    ]
    # mid: 7h left -> 12.8, opening: 6h left -> 14.3
    result = run_capacity_projection(12, 0, ShiftType.STANDARD, roster, _assign(mid=[10], opening=[11]), 5)

    assert result.total_capacity == pytest.approx(27.1)
    assert result.value == 22
    assert result.tier is CapacityTier.HEALTHY


def test_before_opening_everyone_gets_full_shift(providers):
    result = run_capacity_projection(9, 0, ShiftType.STANDARD, providers, _assign(opening=[1], mid=[2]), 5)
    # opening 9h left -> 8*2.0+2 = 18.0; mid starts now, 10h -> 9*1.8+2 = 18.2
    assert result.total_capacity == pytest.approx(36.2)
    assert result.value == 31
    assert [e.shift_label for e in result.breakdown] == ["Opening", "Mid"]


def test_breakdown_follows_slot_then_assignment_order(providers):
    result = run_capacity_projection(
        11, 0, ShiftType.STANDARD, providers, _assign(close=[3], opening=[2, 1])
    )
    assert [(e.provider_name, e.shift_label) for e in result.breakdown] == [
        ("Kristy", "Opening"),
        ("Ryan", "Opening"),
        ("Nicole", "Close"),
    ]


def test_finished_providers_still_count_as_assigned(providers):
    result = run_capacity_projection(18, 30, ShiftType.STANDARD, providers, _assign(opening=[1]), 0)
    assert result.state is CapacityState.COMPUTED
    assert result.value == 0
    assert result.tier is CapacityTier.CRITICAL
    assert result.breakdown == ()


@pytest.mark.parametrize(
    "lobby, value, tier",
    [
        (0, 2, CapacityTier.WARNING),
        (1, 1, CapacityTier.CRITICAL),
        (3, -1, CapacityTier.NEGATIVE),
    ],
)
def test_lobby_drives_tier(providers, lobby, value, tier):
    result = run_capacity_projection(19, 30, ShiftType.STANDARD, providers, _assign(close=[1]), lobby)
    assert result.value == value
    assert result.tier is tier


def test_floor_override(providers):
    result = run_capacity_projection(
        19, 30, ShiftType.STANDARD, providers, _assign(close=[1, 2]), floor_patients=1.8
    )
    assert result.total_capacity == pytest.approx(3.6)
    assert result.value == 3


def test_projection_is_idempotent_and_read_only(providers):
    assignments = {slot: [] for slot in SlotKey}
    assignments[SlotKey.MID] = [1, 2]
    assignments[SlotKey.CLOSE] = [3, 42]
    before_roster = copy.deepcopy(providers)
    before_assignments = copy.deepcopy(assignments)

    first = run_capacity_projection(14, 10, ShiftType.STANDARD, providers, assignments, 2)
    second = run_capacity_projection(14, 10, ShiftType.STANDARD, providers, assignments, 2)

    assert first == second
    assert providers == before_roster
    assert assignments == before_assignments
