"""Canonical taxonomy definitions for clothing, weather, activities and bags.

This module centralises the closed vocabularies the packing engine works with.
Helper functions keep validation logic consistent across models, logic modules
and the payload schemas.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable, List, Type, TypeVar

E = TypeVar("E", bound=Enum)


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return str(value).strip().lower().replace(" ", "_").replace("-", "_")


class ClothingCategory(str, Enum):
    TOPS = "tops"
    BOTTOMS = "bottoms"
    OUTERWEAR = "outerwear"
    DRESSES = "dresses"
    SHOES = "shoes"
    UNDERGARMENTS = "undergarments"
    ACCESSORIES = "accessories"
    SWIMWEAR = "swimwear"
    SLEEPWEAR = "sleepwear"
    ATHLETIC = "athletic"


class WeatherType(str, Enum):
    HOT = "hot"
    WARM = "warm"
    MILD = "mild"
    COOL = "cool"
    COLD = "cold"
    RAINY = "rainy"
    SNOWY = "snowy"
    WINDY = "windy"
    HUMID = "humid"
    DRY = "dry"


class WeatherCondition(str, Enum):
    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    STORMY = "stormy"
    SNOWY = "snowy"
    FOGGY = "foggy"
    WINDY = "windy"


class ActivityType(str, Enum):
    SIGHTSEEING = "sightseeing"
    DINING = "dining"
    BUSINESS = "business"
    OUTDOOR = "outdoor"
    CULTURAL = "cultural"
    NIGHTLIFE = "nightlife"
    SPORTS = "sports"
    RELAXATION = "relaxation"
    SHOPPING = "shopping"
    ADVENTURE = "adventure"


class FormalityLevel(IntEnum):
    VERY_CASUAL = 1
    CASUAL = 2
    SMART_CASUAL = 3
    SEMI_FORMAL = 4
    FORMAL = 5


class BagSize(str, Enum):
    CARRY_ON = "carry_on"
    CHECKED_SMALL = "checked_small"
    CHECKED_MEDIUM = "checked_medium"
    CHECKED_LARGE = "checked_large"
    BACKPACK = "backpack"
    DUFFEL = "duffel"


# Smallest first; used when suggesting a bag.
BAG_SIZE_PREFERENCE: List[BagSize] = [
    BagSize.CARRY_ON,
    BagSize.BACKPACK,
    BagSize.DUFFEL,
    BagSize.CHECKED_SMALL,
    BagSize.CHECKED_MEDIUM,
    BagSize.CHECKED_LARGE,
]

CORE_OUTFIT_CATEGORIES: List[ClothingCategory] = [
    ClothingCategory.TOPS,
    ClothingCategory.BOTTOMS,
    ClothingCategory.SHOES,
    ClothingCategory.UNDERGARMENTS,
]


def _coerce_enum(enum_cls: Type[E], value: object, label: str) -> E:
    if isinstance(value, enum_cls):
        return value
    key = _normalize_key(getattr(value, "value", value))
    try:
        return enum_cls(key)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise ValueError(f"Unsupported {label} '{value}'. Allowed: {allowed}") from None


def validate_category(value: object) -> ClothingCategory:
    """Validate and normalise a clothing category.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    return _coerce_enum(ClothingCategory, value, "category")


def validate_weather_type(value: object) -> WeatherType:
    return _coerce_enum(WeatherType, value, "weather type")


def validate_condition(value: object) -> WeatherCondition:
    return _coerce_enum(WeatherCondition, value, "weather condition")


def validate_activity_type(value: object) -> ActivityType:
    return _coerce_enum(ActivityType, value, "activity type")


def validate_bag_size(value: object) -> BagSize:
    return _coerce_enum(BagSize, value, "bag size")


def validate_formality(value: object) -> FormalityLevel:
    """Validate that a formality level is an integer ordinal in [1, 5]."""

    message = f"Formality level must be an integer in [1, 5], got {value!r}"
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(message)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(message)
    try:
        return FormalityLevel(int(value))
    except ValueError:
        raise ValueError(message) from None


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Trim and deduplicate free-text tags, keeping first-seen order."""

    normalised = []
    seen = set()
    for value in values:
        tag = str(value).strip()
        if tag and tag.lower() not in seen:
            normalised.append(tag)
            seen.add(tag.lower())
    return normalised


def normalise_weather_tags(values: Iterable[object]) -> List[WeatherType]:
    """Validate and deduplicate weather-suitability tags."""

    normalised: List[WeatherType] = []
    for value in values:
        tag = validate_weather_type(value)
        if tag not in normalised:
            normalised.append(tag)
    return normalised


__all__ = [
    "ActivityType",
    "BAG_SIZE_PREFERENCE",
    "BagSize",
    "CORE_OUTFIT_CATEGORIES",
    "ClothingCategory",
    "FormalityLevel",
    "WeatherCondition",
    "WeatherType",
    "normalise_tags",
    "normalise_weather_tags",
    "validate_activity_type",
    "validate_bag_size",
    "validate_category",
    "validate_condition",
    "validate_formality",
    "validate_weather_type",
]
