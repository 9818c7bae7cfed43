from __future__ import annotations

import time
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from clinic_capacity.capacity_reporting.capacity_models import (
    Provider,
    ProviderOrigin,
    SlotKey,
)
from clinic_capacity.capacity_reporting.shift_schedule import all_slot_keys
from clinic_capacity.roster.house_providers import default_house_providers
from clinic_capacity.utils.logger import get_logger

log = get_logger(__name__)

# Placeholder entries left behind by manual testing at the desk
_DISCARDED_NAMES = {"test"}


class UnknownProviderError(KeyError):
    pass


class ProviderLockedError(ValueError):
    pass


def _is_discarded(name: Optional[str]) -> bool:
    return bool(name) and name.strip().lower() in _DISCARDED_NAMES


def _parse_rate(value) -> float:
    """Blank input means 0; anything else must be a non-negative number."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Patients per hour must be a number, got {value!r}")
    if rate < 0:
        raise ValueError(f"Patients per hour cannot be negative, got {rate}")
    return rate


class ProviderRoster:
    """
    Ordered provider list plus per-slot assignments.

    A provider id sits in at most one slot at a time; assigning it to a
    slot removes it from wherever it was.
    """

    def __init__(self, providers: Optional[Iterable[Provider]] = None):
        if providers is None:
            providers = default_house_providers()
        self.providers: List[Provider] = list(providers)
        self._house_order: Dict[str, int] = {
            p.name.lower(): i
            for i, p in enumerate(self.providers)
            if p.origin is ProviderOrigin.HOUSE
        }
        self.assignments: Dict[SlotKey, List[int]] = {slot: [] for slot in all_slot_keys()}

    # ------------------------------------------------------------
    # Saved state
    # ------------------------------------------------------------
    @classmethod
    def from_saved(
        cls,
        saved_providers: Iterable[Mapping],
        saved_assignments: Optional[Mapping[str, Iterable[int]]] = None,
        house: Optional[Iterable[Provider]] = None,
    ) -> "ProviderRoster":
        roster = cls(house)
        roster.merge_saved_providers(saved_providers)
        if saved_assignments:
            roster.merge_saved_assignments(saved_assignments)
        return roster

    def merge_saved_providers(self, saved: Iterable[Mapping]) -> None:
        """
        Overlay previously saved provider records on the house list.

        - a record with a house id replaces that house entry (stays HOUSE)
        - any other record is added as AD_HOC
        - records named "test" are dropped
        """
        house_index = {
            p.id: i for i, p in enumerate(self.providers) if p.origin is ProviderOrigin.HOUSE
        }

        for record in saved:
            name = (record.get("name") or "").strip()
            if _is_discarded(name):
                log.info("Discarding placeholder provider record id=%s", record.get("id"))
                continue

            provider = Provider(
                id=int(record["id"]),
                name=name,
                patients_per_hour=_parse_rate(record.get("patients_per_hour")),
                locked=bool(record.get("locked", False)),
            )

            if provider.locked and (not provider.name or provider.patients_per_hour <= 0):
                log.warning(
                    "Saved provider id=%s is locked without a name and rate; loading unlocked",
                    provider.id,
                )
                provider.locked = False

            if provider.id in house_index:
                provider.origin = ProviderOrigin.HOUSE
                self.providers[house_index[provider.id]] = provider
            else:
                provider.origin = ProviderOrigin.AD_HOC
                self.providers.append(provider)

        self.providers = [p for p in self.providers if not _is_discarded(p.name)]

    def merge_saved_assignments(self, saved: Mapping[str, Iterable[int]]) -> None:
        known = {slot.value: slot for slot in self.assignments}
        for key, ids in saved.items():
            slot = known.get(key)
            if slot is None:
                log.warning("Ignoring saved assignments for unknown slot %r", key)
                continue
            for pid in ids:
                if not any(p.id == int(pid) for p in self.providers):
                    log.warning("Dropping stale provider id %s from slot %r", pid, key)
                    continue
                self.assign(slot, int(pid))

    # ------------------------------------------------------------
    # Provider edits
    # ------------------------------------------------------------
    def get(self, provider_id: int) -> Provider:
        for p in self.providers:
            if p.id == provider_id:
                return p
        raise UnknownProviderError(provider_id)

    def find_by_name(self, name: str) -> Optional[Provider]:
        wanted = name.strip().lower()
        for p in self.providers:
            if p.name.lower() == wanted:
                return p
        return None

    def add_provider(self) -> Provider:
        """New blank, unlocked provider at the top of the list."""
        provider_id = int(time.time() * 1000)
        existing = {p.id for p in self.providers}
        while provider_id in existing:
            provider_id += 1

        provider = Provider(id=provider_id)
        self.providers.insert(0, provider)
        log.info("Added provider id=%s", provider_id)
        return provider

    def _editable(self, provider_id: int) -> Provider:
        provider = self.get(provider_id)
        if provider.locked:
            raise ProviderLockedError(
                f"Provider {provider.name or provider.id} is locked; unlock before editing"
            )
        return provider

    def update_name(self, provider_id: int, name: str) -> None:
        self._editable(provider_id).name = name.strip()

    def update_rate(self, provider_id: int, value) -> None:
        provider = self._editable(provider_id)
        provider.patients_per_hour = _parse_rate(value)

    def lock(self, provider_id: int) -> None:
        provider = self.get(provider_id)
        if not provider.name.strip() or provider.patients_per_hour <= 0:
            raise ValueError(
                "Enter a provider name and patients per hour before locking"
            )
        provider.locked = True

    def unlock(self, provider_id: int) -> None:
        self.get(provider_id).locked = False

    def delete(self, provider_id: int) -> None:
        provider = self.get(provider_id)
        self.providers = [p for p in self.providers if p.id != provider_id]
        self._evict(provider_id)
        log.info("Deleted provider %s (id=%s)", provider.name or "(unnamed)", provider_id)

    def sorted_providers(self) -> List[Provider]:
        """House providers in house order, then ad-hoc providers newest first."""
        house = [p for p in self.providers if p.origin is ProviderOrigin.HOUSE]
        ad_hoc = [p for p in self.providers if p.origin is not ProviderOrigin.HOUSE]

        house.sort(key=lambda p: self._house_order.get(p.name.lower(), 999))
        ad_hoc.sort(key=lambda p: p.id, reverse=True)
        return house + ad_hoc

    # ------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------
    def _evict(self, provider_id: int) -> None:
        for slot, ids in self.assignments.items():
            self.assignments[slot] = [pid for pid in ids if pid != provider_id]

    def assign(self, slot: SlotKey, provider_id: int) -> None:
        self.get(provider_id)
        self._evict(provider_id)
        self.assignments[slot].append(provider_id)

    def unassign(self, slot: SlotKey, provider_id: int) -> None:
        self.assignments[slot] = [pid for pid in self.assignments[slot] if pid != provider_id]

    def clear_all(self) -> None:
        for slot in self.assignments:
            self.assignments[slot] = []

    def available_for(self, slot: SlotKey) -> List[Provider]:
        taken = set(self.assignments[slot])
        return [p for p in self.sorted_providers() if p.id not in taken]

    def as_mapping(self) -> Dict[SlotKey, Tuple[int, ...]]:
        """Snapshot handed to the capacity projection."""
        return {slot: tuple(ids) for slot, ids in self.assignments.items()}
