"""Activity and weather snapshots supplied for each trip day."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from models.taxonomy import (
    ActivityType,
    FormalityLevel,
    WeatherCondition,
    validate_activity_type,
    validate_condition,
    validate_formality,
)


@dataclass
class Activity:
    """A planned activity and the formality it calls for."""

    activity_type: ActivityType
    name: str
    formality_level: FormalityLevel = FormalityLevel.CASUAL
    description: Optional[str] = None

    def __post_init__(self) -> None:
        self.activity_type = validate_activity_type(self.activity_type)
        self.name = str(self.name or "").strip()
        self.formality_level = validate_formality(self.formality_level)


@dataclass
class WeatherSnapshot:
    """Forecast for a single day, temperatures in degrees Celsius."""

    date: date
    temp_min: float
    temp_max: float
    precipitation_probability: float = 0.0
    precipitation_amount: Optional[float] = None
    wind_speed: float = 0.0
    condition: WeatherCondition = WeatherCondition.SUNNY
    uv_index: float = 0.0
    humidity: Optional[float] = None

    def __post_init__(self) -> None:
        self.temp_min = float(self.temp_min)
        self.temp_max = float(self.temp_max)
        if self.temp_min > self.temp_max:
            raise ValueError(
                f"temp_min ({self.temp_min}) cannot exceed temp_max ({self.temp_max})"
            )
        self.precipitation_probability = float(self.precipitation_probability)
        if not 0.0 <= self.precipitation_probability <= 1.0:
            raise ValueError(
                f"precipitation_probability must be within [0, 1], got {self.precipitation_probability}"
            )
        self.condition = validate_condition(self.condition)

    @property
    def midpoint_temperature(self) -> float:
        return (self.temp_min + self.temp_max) / 2


@dataclass
class TripDay:
    """One day of the itinerary: its forecast and planned activities."""

    date: date
    weather: WeatherSnapshot
    activities: List[Activity] = field(default_factory=list)


__all__ = ["Activity", "WeatherSnapshot", "TripDay"]
