"""Pydantic schemas for payloads handed to the engine by its collaborators."""

from __future__ import annotations

from datetime import date as dt_date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from models.clothing_item import ClothingItem
from models.packing import PackingConstraints
from models.taxonomy import (
    ActivityType,
    BagSize,
    ClothingCategory,
    WeatherCondition,
    WeatherType,
)
from models.trip_context import Activity, TripDay, WeatherSnapshot


class ClothingItemPayload(BaseModel):
    """Wardrobe entry as delivered by the wardrobe store or image analysis."""

    item_id: str = Field(min_length=1)
    name: str = ""
    category: ClothingCategory
    subcategory: str = ""
    color: str = ""
    brand: Optional[str] = None
    tags: List[str] = []
    weather_suitability: List[WeatherType] = []
    formality_level: int = Field(default=2, ge=1, le=5)

    def to_domain(self) -> ClothingItem:
        return ClothingItem(
            item_id=self.item_id,
            name=self.name or self.subcategory or self.item_id,
            category=self.category,
            subcategory=self.subcategory,
            color=self.color,
            brand=self.brand,
            tags=self.tags,
            weather_suitability=self.weather_suitability,
            formality_level=self.formality_level,
        )


class ActivityPayload(BaseModel):
    type: ActivityType
    name: str = ""
    formality_level: int = Field(default=2, ge=1, le=5)
    description: Optional[str] = None

    def to_domain(self) -> Activity:
        return Activity(
            activity_type=self.type,
            name=self.name,
            formality_level=self.formality_level,
            description=self.description,
        )


class WeatherPayload(BaseModel):
    date: dt_date
    temp_min: float
    temp_max: float
    precipitation_probability: float = Field(default=0.0, ge=0.0, le=1.0)
    precipitation_amount: Optional[float] = Field(default=None, ge=0.0)
    wind_speed: float = Field(default=0.0, ge=0.0)
    condition: WeatherCondition = WeatherCondition.SUNNY
    uv_index: float = Field(default=0.0, ge=0.0)
    humidity: Optional[float] = None

    @model_validator(mode="after")
    def _validate_range(self) -> "WeatherPayload":
        if self.temp_min > self.temp_max:
            raise ValueError("temp_min cannot exceed temp_max")
        return self

    def to_domain(self) -> WeatherSnapshot:
        return WeatherSnapshot(**self.model_dump())


class TripDayPayload(BaseModel):
    weather: WeatherPayload
    activities: List[ActivityPayload] = []

    def to_domain(self) -> TripDay:
        weather = self.weather.to_domain()
        return TripDay(
            date=weather.date,
            weather=weather,
            activities=[activity.to_domain() for activity in self.activities],
        )


class OutfitRequest(BaseModel):
    """Input contract for a single day's outfit."""

    date: dt_date
    weather: WeatherPayload
    activities: List[ActivityPayload] = []
    items: List[ClothingItemPayload] = []
    cultural_notes: List[str] = []


class PackingRequest(BaseModel):
    """Input contract for packing optimisation."""

    items: List[ClothingItemPayload] = []
    essential_keywords: List[str] = []
    bag_size: BagSize
    max_weight: Optional[float] = Field(default=None, ge=0.0)
    max_items: Optional[int] = Field(default=None, ge=0)

    @field_validator("essential_keywords")
    @classmethod
    def _strip_keywords(cls, keywords: List[str]) -> List[str]:
        return [keyword.strip() for keyword in keywords if keyword.strip()]

    def to_constraints(self) -> PackingConstraints:
        return PackingConstraints(
            bag_size=self.bag_size,
            essential_keywords=self.essential_keywords,
            max_weight=self.max_weight,
            max_items=self.max_items,
        )


class TripPlanRequest(BaseModel):
    days: List[TripDayPayload] = Field(min_length=1)
    items: List[ClothingItemPayload] = []
    essential_keywords: Optional[List[str]] = None
    bag_size: Optional[BagSize] = None
    cultural_notes: List[str] = []


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False, include_context=False)).model_dump()


def parse_items(raw_items: List[Dict[str, Any]]) -> List[ClothingItem]:
    return [ClothingItemPayload.model_validate(raw).to_domain() for raw in raw_items]


__all__ = [
    "ActivityPayload",
    "ClothingItemPayload",
    "OutfitRequest",
    "PackingRequest",
    "TripDayPayload",
    "TripPlanRequest",
    "ValidationResult",
    "WeatherPayload",
    "parse_items",
    "validation_failure",
]
