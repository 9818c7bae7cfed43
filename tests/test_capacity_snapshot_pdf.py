from datetime import date

import pytest

from clinic_capacity.capacity_reporting.capacity_models import (
    BreakdownEntry,
    CapacityResult,
    CapacityState,
    CapacityTier,
    ShiftType,
)
from clinic_capacity.reports.models.status_theme import (
    CLOSED_STYLE,
    NO_PROVIDERS_STYLE,
    TIER_THEME,
    theme_for,
)
from clinic_capacity.reports.pdf.capacity_snapshot_page import (
    BREAKDOWN_COLUMNS,
    breakdown_frame,
    write_capacity_snapshot,
)

COMPUTED = CapacityResult(
    state=CapacityState.COMPUTED,
    shift_type=ShiftType.STANDARD,
    current_time=12.0,
    latest_close=20.0,
    value=22,
    tier=CapacityTier.HEALTHY,
    breakdown=(
        BreakdownEntry("Kristy", "Mid", 7.0, 12),
        BreakdownEntry("Ryan", "Opening", 6.0, 12),
    ),
    total_capacity=24.8,
)
CLOSED = CapacityResult(
    state=CapacityState.CLOSED,
    shift_type=ShiftType.STANDARD,
    current_time=20.5,
    latest_close=20.0,
)
NO_PROVIDERS = CapacityResult(
    state=CapacityState.NO_PROVIDERS_ASSIGNED,
    shift_type=ShiftType.COMPRESSED_DAY,
    current_time=12.0,
    latest_close=19.0,
    value=-3,
)


def test_theme_for_each_state():
    assert theme_for(CLOSED) is CLOSED_STYLE
    assert theme_for(NO_PROVIDERS) is NO_PROVIDERS_STYLE
    assert theme_for(COMPUTED) is TIER_THEME[CapacityTier.HEALTHY]
    assert set(TIER_THEME) == set(CapacityTier)


def test_breakdown_frame():
    df = breakdown_frame(COMPUTED)
    assert list(df.columns) == BREAKDOWN_COLUMNS
    assert df["Provider"].tolist() == ["Kristy", "Ryan"]
    assert df["Hours Remaining"].tolist() == ["7.00", "6.00"]


def test_breakdown_frame_empty_for_closed():
    assert breakdown_frame(CLOSED).empty


@pytest.mark.parametrize("result", [COMPUTED, CLOSED, NO_PROVIDERS])
def test_write_capacity_snapshot(tmp_path, result):
    path = write_capacity_snapshot(result, tmp_path / "out" / "snapshot.pdf", date(2026, 10, 19))
    assert path.exists()
    assert path.read_bytes()[:4] == b"%PDF"
