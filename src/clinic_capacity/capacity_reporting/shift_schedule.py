"""
Shift windows per shift type.

These are fixed business hours; do not derive them from anything else.
"""

from __future__ import annotations

from typing import Dict

from clinic_capacity.capacity_reporting.capacity_models import (
    ShiftType,
    ShiftWindow,
    SlotKey,
)


# Insertion order is display order
SHIFT_WINDOWS: Dict[ShiftType, Dict[SlotKey, ShiftWindow]] = {
    ShiftType.STANDARD: {
        SlotKey.OPENING: ShiftWindow(start=8.0, end=18.0, label="Opening"),
        SlotKey.MID: ShiftWindow(start=9.0, end=19.0, label="Mid"),
        SlotKey.CLOSE: ShiftWindow(start=10.0, end=20.0, label="Close"),
    },
    ShiftType.COMPRESSED_DAY: {
        SlotKey.TRACK_1: ShiftWindow(start=9.0, end=19.0, label="Shift 1"),
        SlotKey.TRACK_2: ShiftWindow(start=9.0, end=19.0, label="Shift 2"),
        SlotKey.TRACK_3: ShiftWindow(start=9.0, end=19.0, label="Shift 3"),
    },
}


def shift_windows(shift_type: ShiftType) -> Dict[SlotKey, ShiftWindow]:
    """Slot -> window map for the active shift type."""
    return dict(SHIFT_WINDOWS[shift_type])


def latest_close(shift_type: ShiftType) -> float:
    """Hour the clinic closes: the latest window end for the shift type."""
    return max(w.end for w in SHIFT_WINDOWS[shift_type].values())


def all_slot_keys():
    return [slot for windows in SHIFT_WINDOWS.values() for slot in windows]
