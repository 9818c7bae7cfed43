from dataclasses import dataclass
from typing import Optional

from reportlab.lib import colors

from clinic_capacity.capacity_reporting.capacity_models import (
    CapacityResult,
    CapacityState,
    CapacityTier,
)


@dataclass(frozen=True)
class StatusStyle:
    label: str
    fill_color: object      # ReportLab color
    legend_color: str       # HTML color name


TIER_THEME = {
    CapacityTier.NEGATIVE: StatusStyle(
        label="Over Capacity",
        fill_color=colors.darkred,
        legend_color="darkred",
    ),
    CapacityTier.CRITICAL: StatusStyle(
        label="At Capacity",
        fill_color=colors.lightcoral,
        legend_color="red",
    ),
    CapacityTier.WARNING: StatusStyle(
        label="Nearly Full",
        fill_color=colors.gold,
        legend_color="gold",
    ),
    CapacityTier.HEALTHY: StatusStyle(
        label="Accepting Patients",
        fill_color=colors.lightgreen,
        legend_color="green",
    ),
}

CLOSED_STYLE = StatusStyle(
    label="Clinic Closed",
    fill_color=colors.lightgrey,
    legend_color="gray",
)

NO_PROVIDERS_STYLE = StatusStyle(
    label="No Providers Selected",
    fill_color=colors.burlywood,
    legend_color="brown",
)


def theme_for(result: CapacityResult) -> StatusStyle:
    if result.state is CapacityState.CLOSED:
        return CLOSED_STYLE
    if result.state is CapacityState.NO_PROVIDERS_ASSIGNED:
        return NO_PROVIDERS_STYLE
    return tier_style(result.tier)


def tier_style(tier: Optional[CapacityTier]) -> StatusStyle:
    return TIER_THEME[tier]
