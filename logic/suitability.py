"""Deterministic weather and formality suitability checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Tuple

from models.clothing_item import ClothingItem
from models.taxonomy import WeatherType
from models.trip_context import Activity, WeatherSnapshot

# (exclusive lower bound on midpoint temperature, accepted weather tags), warmest first.
TEMPERATURE_BANDS: Tuple[Tuple[float, FrozenSet[WeatherType]], ...] = (
    (25.0, frozenset({WeatherType.HOT, WeatherType.WARM, WeatherType.DRY})),
    (15.0, frozenset({WeatherType.WARM, WeatherType.MILD})),
    (5.0, frozenset({WeatherType.MILD, WeatherType.COOL})),
)
COLD_BAND: FrozenSet[WeatherType] = frozenset({WeatherType.COOL, WeatherType.COLD})


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a suitability pass."""

    items: List[ClothingItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def weather_band(weather: WeatherSnapshot) -> FrozenSet[WeatherType]:
    """Weather tags accepted for the day's midpoint temperature."""

    midpoint = weather.midpoint_temperature
    for lower_bound, accepted in TEMPERATURE_BANDS:
        if midpoint > lower_bound:
            return accepted
    return COLD_BAND


def formality_range(activities: Sequence[Activity]) -> Tuple[int, int] | None:
    """Return (min, max) activity formality, or None when nothing is planned."""

    if not activities:
        return None
    levels = [int(activity.formality_level) for activity in activities]
    return min(levels), max(levels)


def is_weather_suitable(item: ClothingItem, weather: WeatherSnapshot) -> bool:
    return bool(weather_band(weather).intersection(item.weather_suitability))


def is_activity_suitable(item: ClothingItem, activities: Sequence[Activity]) -> bool:
    """Item formality must sit within [lowest, highest + 1] of the day's activities.

    An empty activity list imposes no formality constraint.
    """

    bounds = formality_range(activities)
    if bounds is None:
        return True
    lowest, highest = bounds
    return lowest <= int(item.formality_level) <= highest + 1


def filter_suitable_items(
    items: Sequence[ClothingItem], weather: WeatherSnapshot, activities: Sequence[Activity]
) -> FilteringResult:
    """Keep items passing both checks, in input order, recording why others were dropped."""

    removed: Dict[str, str] = {}
    kept: List[ClothingItem] = []
    for item in items:
        reason = None
        if not is_weather_suitable(item, weather):
            reason = "not suited to the day's temperature band"
        elif not is_activity_suitable(item, activities):
            reason = "formality outside the day's activity range"
        if reason:
            removed[item.item_id] = reason
        else:
            kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "midpoint_temperature": weather.midpoint_temperature,
        "accepted_weather_tags": sorted(tag.value for tag in weather_band(weather)),
        "formality_range": formality_range(activities),
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


__all__ = [
    "FilteringResult",
    "filter_suitable_items",
    "formality_range",
    "is_activity_suitable",
    "is_weather_suitable",
    "weather_band",
]
