"""Weather band and formality range filtering."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.suitability import (
    filter_suitable_items,
    formality_range,
    is_activity_suitable,
    weather_band,
)
from models.clothing_item import ClothingItem
from models.taxonomy import WeatherType
from models.trip_context import Activity, WeatherSnapshot


def _item(item_id: str, weather, formality: int = 2, category: str = "tops") -> ClothingItem:
    return ClothingItem(
        item_id=item_id,
        name=item_id,
        category=category,
        subcategory="shirt",
        color="white",
        weather_suitability=weather,
        formality_level=formality,
    )


def _weather(temp_min: float, temp_max: float) -> WeatherSnapshot:
    return WeatherSnapshot(date=date(2024, 6, 1), temp_min=temp_min, temp_max=temp_max)


@pytest.mark.parametrize(
    "temp_min,temp_max,expected",
    [
        (24.0, 32.0, {WeatherType.HOT, WeatherType.WARM, WeatherType.DRY}),
        (20.0, 30.0, {WeatherType.WARM, WeatherType.MILD}),
        (10.0, 20.0, {WeatherType.MILD, WeatherType.COOL}),
        (0.0, 10.0, {WeatherType.COOL, WeatherType.COLD}),
        (-10.0, 0.0, {WeatherType.COOL, WeatherType.COLD}),
    ],
)
def test_weather_band_uses_midpoint_with_exclusive_bounds(temp_min, temp_max, expected):
    assert set(weather_band(_weather(temp_min, temp_max))) == expected


def test_formality_range_and_empty_activities():
    activities = [
        Activity(activity_type="dining", name="Dinner", formality_level=4),
        Activity(activity_type="sightseeing", name="Walk", formality_level=2),
    ]
    assert formality_range(activities) == (2, 4)
    assert formality_range([]) is None
    assert is_activity_suitable(_item("any", ["mild"], formality=5), [])


def test_activity_range_allows_one_level_above_highest():
    activities = [Activity(activity_type="sightseeing", name="Walk", formality_level=2)]
    assert is_activity_suitable(_item("f2", ["mild"], formality=2), activities)
    assert is_activity_suitable(_item("f3", ["mild"], formality=3), activities)
    assert not is_activity_suitable(_item("f4", ["mild"], formality=4), activities)
    assert not is_activity_suitable(_item("f1", ["mild"], formality=1), activities)


def test_filter_keeps_input_order_and_records_reasons():
    items = [
        _item("winter", ["cold"]),
        _item("summer_a", ["hot"]),
        _item("too_formal", ["warm"], formality=5),
        _item("summer_b", ["dry", "warm"]),
    ]
    activities = [Activity(activity_type="relaxation", name="Pool", formality_level=2)]

    result = filter_suitable_items(items, _weather(26.0, 34.0), activities)

    assert [item.item_id for item in result.items] == ["summer_a", "summer_b"]
    assert set(result.removed) == {"winter", "too_formal"}
    assert result.debug["kept_count"] == 2
    assert result.debug["formality_range"] == (2, 2)


def test_items_without_weather_tags_are_never_suitable():
    result = filter_suitable_items([_item("untagged", [])], _weather(15.0, 20.0), [])
    assert result.items == []
