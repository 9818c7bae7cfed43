import pytest

from clinic_capacity.capacity_reporting.capacity_models import (
    Provider,
    ProviderOrigin,
    SlotKey,
)


@pytest.fixture
def providers():
    return [
        Provider(id=1, name="Ryan", patients_per_hour=2.0, locked=True, origin=ProviderOrigin.HOUSE),
        Provider(id=2, name="Kristy", patients_per_hour=1.8, locked=True, origin=ProviderOrigin.HOUSE),
        Provider(id=3, name="Nicole", patients_per_hour=2.2, locked=True, origin=ProviderOrigin.HOUSE),
    ]


@pytest.fixture
def empty_assignments():
    return {slot: () for slot in SlotKey}
