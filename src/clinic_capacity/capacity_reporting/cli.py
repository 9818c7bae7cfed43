import argparse
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Tuple

from clinic_capacity.capacity_reporting.capacity_models import ShiftType, SlotKey
from clinic_capacity.capacity_reporting.capacity_usecase import (
    run_capacity_projection,
)
from clinic_capacity.capacity_reporting.shift_schedule import shift_windows
from clinic_capacity.presentation.console import render_capacity_result
from clinic_capacity.reports.pdf.capacity_snapshot_page import write_capacity_snapshot
from clinic_capacity.roster.house_providers import load_house_providers
from clinic_capacity.roster.roster_manager import ProviderRoster
from clinic_capacity.utils.config import config
from clinic_capacity.utils.logger import get_logger

logger = get_logger(__name__)

# Exit status when the clock reading is missing or malformed
EXIT_NO_TIME = 2


def parse_clock(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """'HH:MM' -> (hour, minute); None when absent or invalid."""
    if not value:
        return None
    try:
        parsed = datetime.strptime(value.strip(), "%H:%M")
    except ValueError:
        return None
    return parsed.hour, parsed.minute


def _default_clock() -> str:
    return datetime.now().strftime("%H:%M")


def default_snapshot_path(hour: int, minute: int, today: Optional[date] = None) -> Path:
    today = today or date.today()
    return Path(config.output_dir) / f"Capacity_Snapshot_{today.isoformat()}_{hour:02d}{minute:02d}.pdf"


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError("patients in lobby cannot be negative")
    return n


def parse_assignment(value: str) -> Tuple[SlotKey, List[str]]:
    """'opening=Ryan,Kristy' -> (SlotKey.OPENING, ['Ryan', 'Kristy'])."""
    slot_name, sep, names = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected SLOT=Name[,Name], got {value!r}")
    try:
        slot = SlotKey(slot_name.strip().lower())
    except ValueError:
        choices = ", ".join(s.value for s in SlotKey)
        raise argparse.ArgumentTypeError(f"unknown slot {slot_name!r} (choose from {choices})")
    return slot, [n.strip() for n in names.split(",") if n.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Remaining Patient Capacity (Front Desk)"
    )

    parser.add_argument(
        "--time",
        type=str,
        default=None,
        help="Current time (HH:MM, 24h). Defaults to now.",
    )

    parser.add_argument(
        "--shift-type",
        choices=[t.value for t in ShiftType],
        default=config.default_shift_type.value,
        help="Shift layout for today.",
    )

    parser.add_argument(
        "--lobby",
        type=_non_negative_int,
        default=0,
        help="Patients currently waiting in the lobby.",
    )

    parser.add_argument(
        "--assign",
        type=parse_assignment,
        action="append",
        default=[],
        metavar="SLOT=Name[,Name]",
        help="Assign providers to a slot. Repeatable; a provider named twice keeps the last slot.",
    )

    parser.add_argument(
        "--roster",
        type=str,
        default=config.house_roster_file,
        help="CSV of house providers (name, patients_per_hour).",
    )

    parser.add_argument(
        "--floor",
        type=float,
        default=None,
        help="Patients credited for a provider's final hour (overrides CLINIC_LAST_HOUR_FLOOR).",
    )

    parser.add_argument(
        "--pdf",
        type=str,
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Also write a one-page PDF snapshot. Without PATH, writes under CLINIC_OUTPUT_DIR.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    shift_type = ShiftType(args.shift_type)

    roster = ProviderRoster(load_house_providers(args.roster))

    active_slots = shift_windows(shift_type)
    for slot, names in args.assign:
        if slot not in active_slots:
            parser.error(f"slot {slot.value!r} is not used on a {shift_type.value} day")
        for name in names:
            provider = roster.find_by_name(name)
            if provider is None:
                parser.error(f"unknown provider {name!r}")
            roster.assign(slot, provider.id)

    # No valid clock: show nothing rather than a stale or zero number
    clock = parse_clock(_default_clock() if args.time is None else args.time)
    if clock is None:
        logger.warning("Invalid or missing time %r; capacity not calculated", args.time)
        print("Enter a valid time (HH:MM) to calculate remaining capacity.", file=sys.stderr)
        return EXIT_NO_TIME

    hour, minute = clock
    floor_patients = args.floor if args.floor is not None else config.last_hour_floor

    result = run_capacity_projection(
        hour=hour,
        minute=minute,
        shift_type=shift_type,
        roster=roster.providers,
        assignments=roster.as_mapping(),
        patients_in_lobby=args.lobby,
        floor_patients=floor_patients,
    )

    print(render_capacity_result(result), end="")

    if args.pdf is not None:
        write_capacity_snapshot(result, args.pdf or default_snapshot_path(hour, minute))

    return 0


if __name__ == "__main__":
    sys.exit(main())
