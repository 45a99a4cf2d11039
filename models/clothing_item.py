"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from models.taxonomy import (
    ClothingCategory,
    FormalityLevel,
    WeatherType,
    normalise_tags,
    normalise_weather_tags,
    validate_category,
    validate_formality,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


@dataclass
class ClothingItem:
    """Represents one piece of clothing in the traveller's wardrobe.

    Volume and weight are never stored on the item; they are estimated from the
    category, tags and brand by :mod:`logic.dimension_estimator`.
    """

    item_id: str
    name: str
    category: ClothingCategory
    subcategory: str
    color: str
    brand: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    weather_suitability: List[WeatherType] = field(default_factory=list)
    formality_level: FormalityLevel = FormalityLevel.CASUAL

    def __post_init__(self) -> None:
        self.category = validate_category(self.category)
        self.subcategory = str(self.subcategory or "").strip()
        self.color = str(self.color or "").strip()
        self.brand = str(self.brand).strip() if self.brand else None
        self.tags = normalise_tags(_ensure_list(self.tags))
        self.weather_suitability = normalise_weather_tags(_ensure_list(self.weather_suitability))
        self.formality_level = validate_formality(self.formality_level)

    @property
    def identity_key(self) -> Tuple[str, str, str]:
        """Key used to spot duplicates in a packing list."""

        return (self.category.value, self.subcategory.lower(), self.color.lower())

    def has_tag(self, tag: str) -> bool:
        wanted = tag.lower()
        return any(existing.lower() == wanted for existing in self.tags)

    def has_tag_containing(self, fragment: str) -> bool:
        wanted = fragment.lower()
        return any(wanted in existing.lower() for existing in self.tags)


__all__ = ["ClothingItem"]
