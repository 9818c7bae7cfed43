from __future__ import annotations

import io

from clinic_capacity.capacity_reporting.capacity_models import (
    CapacityResult,
    CapacityState,
)
from clinic_capacity.reports.models.status_theme import theme_for


LOBBY_OVER_MESSAGE = "Lobby is over capacity. Time to encourage patients to leave."


def format_clock(hour: int, minute: int) -> str:
    """24h clock -> '7:30 PM'."""
    display_hour = 12 if hour % 12 == 0 else hour % 12
    ampm = "PM" if hour >= 12 else "AM"
    return f"{display_hour}:{minute:02d} {ampm}"


def format_decimal_clock(value: float) -> str:
    hour = int(value)
    minute = int(round((value - hour) * 60))
    return format_clock(hour, minute)


def render_capacity_result(result: CapacityResult) -> str:
    out = io.StringIO()
    style = theme_for(result)

    hour = int(result.current_time)
    minute = int(round((result.current_time - hour) * 60))

    print("=" * 70, file=out)
    print("REMAINING PATIENT CAPACITY – FRONT DESK", file=out)
    print("=" * 70, file=out)
    print(f"Shift Type:   {result.shift_type.value}", file=out)
    print(f"Current Time: {format_clock(hour, minute)} ({hour}:{minute:02d})", file=out)
    print(file=out)

    if result.state is CapacityState.CLOSED:
        print("CLOSED", file=out)
        print(
            f"The clinic closed at {format_decimal_clock(result.latest_close)}. "
            "No remaining patient capacity after closing time.",
            file=out,
        )
        return out.getvalue()

    print(f"Remaining Capacity: {result.value}  [{style.label}]", file=out)

    if result.value is not None and result.value < 0:
        print(LOBBY_OVER_MESSAGE, file=out)
    print(file=out)

    if result.state is CapacityState.NO_PROVIDERS_ASSIGNED:
        print("No Providers Selected", file=out)
        print("  Assign a provider to a shift to calculate remaining patient capacity.", file=out)
        return out.getvalue()

    print("Breakdown:", file=out)
    if not result.breakdown:
        print("  All assigned providers have completed their shifts.", file=out)
    for entry in result.breakdown:
        print(
            f"  • {entry.provider_name} ({entry.shift_label}): "
            f"{entry.remaining_patients} patients "
            f"({entry.remaining_hours:.2f} hrs remaining)",
            file=out,
        )

    return out.getvalue()
