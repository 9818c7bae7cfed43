"""
Remaining Patient Capacity Use Case (Front desk)

Purpose:
- Project how many more patients the clinic can take before closing
- ONE clock reading per run
- Recomputed from scratch on every change (roster, assignment, clock, lobby)

Important:
- Reads roster and assignments, never mutates them
- Eviction on reassignment is the roster's job, not this module's
- Caller must not invoke this without a valid clock reading
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Mapping, Sequence

from clinic_capacity.capacity_reporting.capacity_domain import (
    classify_tier,
    decimal_time,
    remaining_hours,
    remaining_patients,
)
from clinic_capacity.capacity_reporting.capacity_models import (
    LAST_HOUR_FLOOR,
    BreakdownEntry,
    CapacityResult,
    CapacityState,
    Provider,
    ShiftType,
    SlotKey,
)
from clinic_capacity.capacity_reporting.shift_schedule import (
    latest_close,
    shift_windows,
)
from clinic_capacity.utils.logger import get_logger

logger = get_logger(__name__)


def run_capacity_projection(
    hour: int,
    minute: int,
    shift_type: ShiftType,
    roster: Iterable[Provider],
    assignments: Mapping[SlotKey, Sequence[int]],
    patients_in_lobby: int = 0,
    floor_patients: float = LAST_HOUR_FLOOR,
) -> CapacityResult:
    """
    Run the remaining-capacity projection for a single clock reading.
    """
    now = decimal_time(hour, minute)
    close = latest_close(shift_type)

    logger.debug(
        "Projecting capacity | shift_type=%s time=%.2f lobby=%s",
        shift_type.value,
        now,
        patients_in_lobby,
    )

    # ------------------------------------------------------------
    # Clinic closed: nothing else matters
    # ------------------------------------------------------------
    if now >= close:
        logger.info("Clinic closed | time=%.2f close=%.2f", now, close)
        return CapacityResult(
            state=CapacityState.CLOSED,
            shift_type=shift_type,
            current_time=now,
            latest_close=close,
        )

    by_id: Dict[int, Provider] = {p.id: p for p in roster}

    # ------------------------------------------------------------
    # Per-slot projection
    # ------------------------------------------------------------
    total_capacity = 0.0
    has_any_providers = False
    breakdown: List[BreakdownEntry] = []

    for slot, window in shift_windows(shift_type).items():
        # Stale ids (deleted providers) are dropped silently
        assigned = [by_id[pid] for pid in assignments.get(slot, ()) if pid in by_id]

        if assigned:
            has_any_providers = True

        for provider in assigned:
            hours_left = remaining_hours(hour, minute, window)
            patients = remaining_patients(provider, hours_left, floor_patients)

            # Running total keeps the fraction; only the breakdown is floored
            total_capacity += patients

            if patients > 0:
                breakdown.append(
                    BreakdownEntry(
                        provider_name=provider.name,
                        shift_label=window.label,
                        remaining_hours=hours_left,
                        remaining_patients=math.floor(patients),
                    )
                )

    # ------------------------------------------------------------
    # Nobody on the floor: any lobby occupancy is already over
    # ------------------------------------------------------------
    if not has_any_providers:
        logger.info("No providers assigned | shift_type=%s", shift_type.value)
        return CapacityResult(
            state=CapacityState.NO_PROVIDERS_ASSIGNED,
            shift_type=shift_type,
            current_time=now,
            latest_close=close,
            value=0 - patients_in_lobby,
        )

    result = math.floor(total_capacity) - patients_in_lobby
    tier = classify_tier(result)

    logger.info(
        "Capacity computed | total=%.2f lobby=%s result=%s tier=%s",
        total_capacity,
        patients_in_lobby,
        result,
        tier.value,
    )

    return CapacityResult(
        state=CapacityState.COMPUTED,
        shift_type=shift_type,
        current_time=now,
        latest_close=close,
        value=result,
        tier=tier,
        breakdown=tuple(breakdown),
        total_capacity=total_capacity,
    )
