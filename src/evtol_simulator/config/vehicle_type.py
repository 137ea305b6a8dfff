"""Vehicle type — static performance profile shared by many aircraft."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VehicleType(BaseModel):
    """One aircraft model as published by its operator.

    Flight duration and range are derived on every call, so a type never
    carries a stale cached value.
    """

    model_config = ConfigDict(frozen=True)

    operator: str = Field(min_length=1, description="Company that owns and operates this type")
    cruise_speed_mph: float = Field(gt=0, allow_inf_nan=False, description="Cruise speed (mph)")
    battery_capacity_kwh: float = Field(gt=0, allow_inf_nan=False, description="Usable battery capacity (kWh)")
    time_to_charge_hours: float = Field(
        ge=0, allow_inf_nan=False,
        description="Time to recharge from empty to full (hours). Fixed, independent of state of charge.",
    )
    energy_per_mile_kwh: float = Field(gt=0, allow_inf_nan=False, description="Energy use at cruise (kWh/mile)")
    passenger_count: int = Field(ge=0, description="Seats filled on every flight")
    fault_probability_per_hour: float = Field(
        ge=0, allow_inf_nan=False,
        description="Fault rate per flight hour. Applied linearly over a flight, "
                    "so rate × duration can exceed 1 for long flights.",
    )

    @model_validator(mode="after")
    def _check_flight_envelope(self) -> VehicleType:
        duration = self.flight_duration_hours()
        if not (math.isfinite(duration) and duration > 0):
            raise ValueError(
                f"flight duration for {self.operator!r} must be finite and positive, got {duration}"
            )
        if not math.isfinite(self.distance_per_flight_miles()):
            raise ValueError(f"distance per flight for {self.operator!r} is not finite")
        return self

    def flight_duration_hours(self) -> float:
        """Airborne time on one full battery = capacity / (speed × energy per mile)."""
        return self.battery_capacity_kwh / (self.cruise_speed_mph * self.energy_per_mile_kwh)

    def distance_per_flight_miles(self) -> float:
        """Miles covered on one full battery = speed × flight duration."""
        return self.cruise_speed_mph * self.flight_duration_hours()
