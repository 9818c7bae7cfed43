# src/clinic_capacity/utils/config.py
"""
Deployment settings for the front-desk capacity calculator.

Values come from the environment (prefix CLINIC_) or a .env file in the
working directory. The last-hour floor differs between deployments, so it
lives here rather than in the capacity code.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from clinic_capacity.capacity_reporting.capacity_models import ShiftType


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CLINIC_",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Patients credited for a provider's final hour, regardless of rate
    last_hour_floor: float = 2.0

    default_shift_type: ShiftType = ShiftType.STANDARD

    # Optional CSV (name, patients_per_hour) replacing the built-in house list
    house_roster_file: Optional[str] = None

    output_dir: str = "output"

    def __repr__(self):
        return (
            f"<AppConfig floor={self.last_hour_floor} "
            f"shift_type={self.default_shift_type.value}>"
        )


# Singleton
config = AppConfig()
