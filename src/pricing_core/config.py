"""Application configuration and settings management."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimeMultipliers(BaseModel):
    """Fare multipliers for each time-of-day pricing class."""

    standard: float = Field(default=1.0, ge=0.0)
    weekday_peak: float = Field(default=1.5, ge=0.0)
    weekday_off_peak: float = Field(default=1.0, ge=0.0)
    weekend_peak: float = Field(default=1.3, ge=0.0)
    weekend_standard: float = Field(default=1.2, ge=0.0)
    holiday: float = Field(default=1.5, ge=0.0)


class TimeSurcharges(BaseModel):
    """Fixed surcharges (GBP) for each time-of-day pricing class."""

    standard: float = Field(default=0.0, ge=0.0)
    weekday_peak: float = Field(default=3.54, ge=0.0)
    weekday_off_peak: float = Field(default=0.0, ge=0.0)
    weekend_peak: float = Field(default=5.0, ge=0.0)
    weekend_standard: float = Field(default=3.0, ge=0.0)
    holiday: float = Field(default=5.0, ge=0.0)


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    app_name: str = "Chauffeur Pricing Rules"
    max_service_distance_miles: float = Field(
        default=300.0,
        ge=0.0,
        description="Longest journey (miles) accepted for booking.",
    )
    multipliers: TimeMultipliers = Field(default_factory=TimeMultipliers)
    surcharges: TimeSurcharges = Field(default_factory=TimeSurcharges)
    default_holiday_year: Optional[int] = Field(
        default=None,
        description="Year used to seed moveable bank holidays at start-up (defaults to the current year).",
    )

    @field_validator("default_holiday_year", mode="before")
    @classmethod
    def _parse_optional_year(cls, value: Any) -> Optional[int]:
        """Treat blank environment values as unset."""
        if value is None:
            return None
        if isinstance(value, str):
            if not value.strip():
                return None
            return int(value.strip())
        return int(value)


settings = Settings()
