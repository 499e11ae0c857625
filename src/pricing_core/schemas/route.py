"""Pydantic models for provider-native route geometry."""

from __future__ import annotations

from typing import Annotated, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class StepGeometry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Provider ordering: [longitude, latitude, optional elevation...].
    coordinates: Sequence[Annotated[list[float], Field(min_length=2)]] = Field(default_factory=list)


class RouteStep(BaseModel):
    model_config = ConfigDict(extra="ignore")

    geometry: StepGeometry = Field(default_factory=StepGeometry)


class RouteLeg(BaseModel):
    model_config = ConfigDict(extra="ignore")

    steps: Sequence[RouteStep] = Field(default_factory=list)


route_legs_adapter = TypeAdapter(list[RouteLeg])
