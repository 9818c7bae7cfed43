"""
Capacity Domain Models

Enterprise rules:
- No logic
- No storage
- No formatting
- Pure data containers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


# Baseline last-hour credit; deployments may override via config
LAST_HOUR_FLOOR = 2.0


# -------------------------------------------------
# Shift types and slots
# -------------------------------------------------

class ShiftType(Enum):
    STANDARD = "standard"
    COMPRESSED_DAY = "compressed"


class SlotKey(Enum):
    OPENING = "opening"
    MID = "mid"
    CLOSE = "close"
    TRACK_1 = "track1"
    TRACK_2 = "track2"
    TRACK_3 = "track3"


@dataclass(frozen=True)
class ShiftWindow:
    start: float    # hour of day, e.g. 9.0
    end: float
    label: str

    @property
    def duration(self) -> float:
        return self.end - self.start


# -------------------------------------------------
# Providers
# -------------------------------------------------

class ProviderOrigin(Enum):
    HOUSE = "HOUSE"        # preloaded, stable ordering
    AD_HOC = "AD_HOC"      # added during a session, newest first


@dataclass
class Provider:
    id: int
    name: str = ""
    patients_per_hour: float = 0.0
    locked: bool = False
    origin: ProviderOrigin = ProviderOrigin.AD_HOC


# -------------------------------------------------
# Projection result
# -------------------------------------------------

class CapacityState(Enum):
    CLOSED = "CLOSED"
    NO_PROVIDERS_ASSIGNED = "NO_PROVIDERS_ASSIGNED"
    COMPUTED = "COMPUTED"


class CapacityTier(Enum):
    NEGATIVE = "NEGATIVE"
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    HEALTHY = "HEALTHY"


@dataclass(frozen=True)
class BreakdownEntry:
    provider_name: str
    shift_label: str
    remaining_hours: float
    remaining_patients: int     # floored for display only


@dataclass(frozen=True)
class CapacityResult:
    state: CapacityState
    shift_type: ShiftType
    current_time: float         # decimal hours
    latest_close: float
    value: Optional[int] = None
    tier: Optional[CapacityTier] = None
    breakdown: Tuple[BreakdownEntry, ...] = field(default_factory=tuple)

    # Un-floored provider sum, kept for audit output
    total_capacity: float = 0.0
