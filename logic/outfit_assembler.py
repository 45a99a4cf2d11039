"""Deterministic daily outfit assembly with transparent diagnostics."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence

from logic.suitability import filter_suitable_items
from models.clothing_item import ClothingItem
from models.outfit import DailyOutfit, OutfitSlots
from models.taxonomy import (
    CORE_OUTFIT_CATEGORIES,
    ActivityType,
    ClothingCategory,
    FormalityLevel,
    WeatherCondition,
)
from models.trip_context import Activity, WeatherSnapshot

logger = logging.getLogger(__name__)

FORMAL_THRESHOLD = FormalityLevel.SEMI_FORMAL
FORMAL_ACCESSORY_MIN = FormalityLevel.SMART_CASUAL
ATHLETIC_ACTIVITY_TYPES = frozenset({ActivityType.SPORTS, ActivityType.OUTDOOR})

HOT_DAY_MAX_TEMP = 30.0
RAIN_WARNING_PROBABILITY = 0.7
UMBRELLA_PROBABILITY = 0.5
SUNGLASSES_UV_INDEX = 6.0

HYDRATION_NOTE = "Stay hydrated and seek shade during peak sun hours"
RAIN_NOTE = "High chance of rain - consider waterproof options"
FORMAL_NOTE = "Formal attire required for some activities"


@dataclass(frozen=True)
class OutfitBuildResult:
    outfit: DailyOutfit
    diagnostics: Dict[str, object]


def needs_athletic_wear(activities: Sequence[Activity]) -> bool:
    return any(activity.activity_type in ATHLETIC_ACTIVITY_TYPES for activity in activities)


def needs_formal_wear(activities: Sequence[Activity]) -> bool:
    return any(activity.formality_level >= FORMAL_THRESHOLD for activity in activities)


def is_beach_activity(activity: Activity) -> bool:
    return activity.activity_type is ActivityType.RELAXATION and "beach" in activity.name.lower()


def needs_swimwear(activities: Sequence[Activity]) -> bool:
    return any(is_beach_activity(activity) for activity in activities)


def required_categories(activities: Sequence[Activity]) -> List[ClothingCategory]:
    """Core categories plus whatever the day's activities call for, in a fixed order."""

    categories = list(CORE_OUTFIT_CATEGORIES)
    if needs_athletic_wear(activities):
        categories.append(ClothingCategory.ATHLETIC)
    if needs_formal_wear(activities):
        categories.append(ClothingCategory.DRESSES)
    if needs_swimwear(activities):
        categories.append(ClothingCategory.SWIMWEAR)
    return categories


def target_formality(activities: Sequence[Activity]) -> int:
    """Mean activity formality rounded half up; 0 when nothing is planned."""

    if not activities:
        return 0
    mean = sum(int(activity.formality_level) for activity in activities) / len(activities)
    return int(math.floor(mean + 0.5))


def score_item(item: ClothingItem, target: int) -> float:
    score = max(0, 10 - abs(int(item.formality_level) - target))
    score += 0.5 * len(item.tags)
    score += 0.3 * len(item.weather_suitability)
    return score


def select_best_item(items: Sequence[ClothingItem], target: int) -> Optional[ClothingItem]:
    """Highest-scoring item; the first one seen wins a tie."""

    best: Optional[ClothingItem] = None
    best_score = -math.inf
    for item in items:
        score = score_item(item, target)
        if score > best_score:
            best, best_score = item, score
    return best


def _group_by_category(items: Sequence[ClothingItem]) -> Dict[ClothingCategory, List[ClothingItem]]:
    grouped: Dict[ClothingCategory, List[ClothingItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def _is_umbrella(item: ClothingItem) -> bool:
    return "umbrella" in item.name.lower() or item.has_tag_containing("rain")


def _is_sunglasses(item: ClothingItem) -> bool:
    return "sunglasses" in item.name.lower() or item.has_tag_containing("sun")


def select_accessories(
    suitable_items: Sequence[ClothingItem],
    weather: WeatherSnapshot,
    activities: Sequence[Activity],
    max_formal: int = 2,
) -> List[ClothingItem]:
    """Pick situational accessories from the already suitable pool."""

    accessories = [item for item in suitable_items if item.category is ClothingCategory.ACCESSORIES]
    selected: List[ClothingItem] = []

    if weather.condition is WeatherCondition.RAINY and weather.precipitation_probability > UMBRELLA_PROBABILITY:
        umbrella = next((item for item in accessories if _is_umbrella(item)), None)
        if umbrella:
            selected.append(umbrella)

    if weather.uv_index > SUNGLASSES_UV_INDEX:
        sunglasses = next((item for item in accessories if _is_sunglasses(item)), None)
        if sunglasses and all(sunglasses.item_id != item.item_id for item in selected):
            selected.append(sunglasses)

    if needs_formal_wear(activities):
        taken = {item.item_id for item in selected}
        formal = [
            item
            for item in accessories
            if item.formality_level >= FORMAL_ACCESSORY_MIN and item.item_id not in taken
        ]
        selected.extend(formal[:max_formal])

    return selected


def outfit_notes(
    weather: WeatherSnapshot, activities: Sequence[Activity], cultural_notes: Sequence[str] | None = None
) -> List[str]:
    notes: List[str] = []
    if weather.temp_max > HOT_DAY_MAX_TEMP:
        notes.append(HYDRATION_NOTE)
    if weather.precipitation_probability > RAIN_WARNING_PROBABILITY:
        notes.append(RAIN_NOTE)
    if needs_formal_wear(activities):
        notes.append(FORMAL_NOTE)
    if cultural_notes:
        notes.extend(cultural_notes)
    return notes


class OutfitAssembler:
    """Builds one outfit per trip day from the traveller's wardrobe."""

    def __init__(self, max_formal_accessories: int = 2) -> None:
        self.max_formal_accessories = max_formal_accessories

    def assemble(
        self,
        day: date,
        weather: WeatherSnapshot,
        activities: Sequence[Activity],
        available_items: Sequence[ClothingItem],
        cultural_notes: Sequence[str] | None = None,
    ) -> OutfitBuildResult:
        activities = list(activities)
        filtering = filter_suitable_items(available_items, weather, activities)
        grouped = _group_by_category(filtering.items)
        categories = required_categories(activities)
        target = target_formality(activities)

        slots = OutfitSlots()
        missing: List[str] = []
        for category in categories:
            best = select_best_item(grouped.get(category, []), target)
            if best is None:
                missing.append(category.value)
                continue
            slots.set(category, best)
            logger.debug("Chose %s for %s on %s", best.item_id, category.value, day)

        accessories = select_accessories(
            filtering.items, weather, activities, max_formal=self.max_formal_accessories
        )
        notes = outfit_notes(weather, activities, cultural_notes)
        logger.info(
            "Assembled outfit for %s: %s slots filled, %s accessories, missing=%s",
            day,
            len(slots),
            len(accessories),
            missing,
        )

        diagnostics: Dict[str, object] = {
            "filtering": filtering.debug,
            "removed": filtering.removed,
            "required_categories": [category.value for category in categories],
            "missing_categories": missing,
            "target_formality": target,
            "chosen_ids": [item.item_id for item in slots.items()],
            "accessory_ids": [item.item_id for item in accessories],
        }
        outfit = DailyOutfit(
            date=day,
            weather=weather,
            activities=activities,
            outfit=slots,
            accessories=accessories,
            notes=notes,
        )
        return OutfitBuildResult(outfit=outfit, diagnostics=diagnostics)

    def generate_daily_outfit(
        self,
        day: date,
        weather: WeatherSnapshot,
        activities: Sequence[Activity],
        available_items: Sequence[ClothingItem],
        cultural_notes: Sequence[str] | None = None,
    ) -> DailyOutfit:
        return self.assemble(day, weather, activities, available_items, cultural_notes).outfit


def generate_daily_outfit(
    day: date,
    weather: WeatherSnapshot,
    activities: Sequence[Activity],
    available_items: Sequence[ClothingItem],
    cultural_notes: Sequence[str] | None = None,
) -> DailyOutfit:
    """Module-level shortcut using the default assembler settings."""

    return OutfitAssembler().generate_daily_outfit(day, weather, activities, available_items, cultural_notes)


__all__ = [
    "OutfitAssembler",
    "OutfitBuildResult",
    "generate_daily_outfit",
    "is_beach_activity",
    "needs_athletic_wear",
    "needs_formal_wear",
    "needs_swimwear",
    "outfit_notes",
    "required_categories",
    "score_item",
    "select_accessories",
    "select_best_item",
    "target_formality",
]
