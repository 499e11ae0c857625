"""Pydantic models for administrative holiday updates."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, ValidationInfo, model_validator


class HolidayUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    @model_validator(mode="after")
    def validate_calendar_day(self, info: ValidationInfo) -> "HolidayUpdate":
        # Without a target year, 2000 (a leap year) accepts 29 February.
        year = (info.context or {}).get("year", 2000)
        try:
            date(year, self.month, self.day)
        except ValueError as exc:
            raise ValueError(f"{self.month}/{self.day} is not a calendar day in {year}") from exc
        return self
