"""
House provider list.

Built-in list matches the clinic's regular staff. A CSV with columns
`name` and `patients_per_hour` may replace it for another site.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd

from clinic_capacity.capacity_reporting.capacity_models import Provider, ProviderOrigin
from clinic_capacity.utils.logger import get_logger

logger = get_logger(__name__)


HOUSE_PROVIDERS = [
    ("Ryan", 2.0),
    ("Kristy", 1.8),
    ("Mikaela", 2.0),
    ("Dan", 1.8),
    ("Johny", 1.9),
    ("Nicole", 2.2),
    ("Lauren", 2.0),
]


def _house_provider(idx: int, name: str, rate: float) -> Provider:
    return Provider(
        id=idx,
        name=name,
        patients_per_hour=rate,
        locked=True,
        origin=ProviderOrigin.HOUSE,
    )


def default_house_providers() -> List[Provider]:
    # Fresh objects every call; callers mutate their own copies
    return [
        _house_provider(i, name, rate)
        for i, (name, rate) in enumerate(HOUSE_PROVIDERS, start=1)
    ]


def load_house_providers(path: Optional[str] = None) -> List[Provider]:
    """
    Load house providers from CSV, or the built-in list when no path is set.

    Expected columns:
      - name
      - patients_per_hour
    """
    if not path:
        return default_house_providers()

    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"House roster file not found: {csv_path}")

    df = pd.read_csv(csv_path)

    missing = {"name", "patients_per_hour"} - set(df.columns)
    if missing:
        raise ValueError(f"House roster missing columns: {sorted(missing)}")

    providers: List[Provider] = []
    for _, row in df.iterrows():
        name = str(row["name"]).strip() if pd.notna(row["name"]) else ""
        rate = float(row["patients_per_hour"]) if pd.notna(row["patients_per_hour"]) else 0.0

        if not name or rate <= 0:
            logger.warning("Skipping invalid house roster row: %r", row.to_dict())
            continue

        providers.append(_house_provider(len(providers) + 1, name, rate))

    logger.info("Loaded %s house providers from %s", len(providers), csv_path)
    return providers
