"""
Capacity Domain Logic

Enterprise rules:
- Pure functions only
- No storage access
- No printing
- No config
- No side effects

Inputs are assumed validated by the caller: hour/minute are finite
integers and the lobby count is non-negative.
"""

from __future__ import annotations

from clinic_capacity.capacity_reporting.capacity_models import (
    LAST_HOUR_FLOOR,
    CapacityTier,
    Provider,
    ShiftWindow,
)


# ----------------------------
# Clock
# ----------------------------

def decimal_time(hour: int, minute: int) -> float:
    return hour + minute / 60


# ----------------------------
# Remaining hours
# ----------------------------

def remaining_hours(hour: int, minute: int, window: ShiftWindow) -> float:
    """
    Working time left in a shift window.

    A shift that has not started yet is credited with its full duration,
    so providers can be assigned ahead of time. At or after the window end
    nothing remains.
    """
    t = decimal_time(hour, minute)

    if t < window.start:
        return window.duration
    if t >= window.end:
        return 0.0
    return window.end - t


# ----------------------------
# Throughput
# ----------------------------

def remaining_patients(
    provider: Provider,
    hours_left: float,
    floor_patients: float = LAST_HOUR_FLOOR,
) -> float:
    """
    Patients a provider can still see.

    The final hour always yields exactly `floor_patients`, whatever the
    provider's rate, and a partial final hour is not pro-rated. Time before
    the final hour is billed at the provider's hourly rate.
    """
    if hours_left <= 0:
        return 0.0
    if hours_left < 1:
        return floor_patients
    return (hours_left - 1) * provider.patients_per_hour + floor_patients


# ----------------------------
# Tier
# ----------------------------

def classify_tier(result: int) -> CapacityTier:
    """
    Classify the post-lobby capacity number.

    - NEGATIVE  < 0
    - CRITICAL  0..1
    - WARNING   2..4
    - HEALTHY   >= 5
    """
    if result < 0:
        return CapacityTier.NEGATIVE
    if result <= 1:
        return CapacityTier.CRITICAL
    if result <= 4:
        return CapacityTier.WARNING
    return CapacityTier.HEALTHY
