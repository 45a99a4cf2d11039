"""Evaluation scenarios exercising weather bands, activities and bag limits."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from models.taxonomy import BagSize, WeatherCondition
from models.trip_context import Activity, TripDay, WeatherSnapshot


@dataclass
class EvaluationScenario:
    name: str
    description: str
    bag_size: BagSize
    days: List[TripDay]
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    essential_keywords: Optional[List[str]] = None
    cultural_notes: List[str] = field(default_factory=list)


def _day(
    start: date,
    offset: int,
    temp_min: float,
    temp_max: float,
    activities: List[Activity],
    condition: WeatherCondition = WeatherCondition.SUNNY,
    precipitation: float = 0.0,
    uv_index: float = 3.0,
) -> TripDay:
    day = start + timedelta(days=offset)
    weather = WeatherSnapshot(
        date=day,
        temp_min=temp_min,
        temp_max=temp_max,
        precipitation_probability=precipitation,
        condition=condition,
        uv_index=uv_index,
    )
    return TripDay(date=day, weather=weather, activities=activities)


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {
            "item_id": "top_linen_shirt",
            "name": "Linen shirt",
            "category": "tops",
            "subcategory": "shirt",
            "color": "white",
            "tags": ["linen", "light"],
            "weather_suitability": ["hot", "warm"],
            "formality_level": 3,
        },
        {
            "item_id": "top_tee",
            "name": "Cotton tee",
            "category": "tops",
            "subcategory": "tee",
            "color": "gray",
            "tags": ["cotton"],
            "weather_suitability": ["hot", "warm", "mild"],
            "formality_level": 1,
        },
        {
            "item_id": "top_sweater",
            "name": "Merino sweater",
            "category": "tops",
            "subcategory": "sweater",
            "color": "navy",
            "tags": ["wool", "thick"],
            "weather_suitability": ["cool", "cold"],
            "formality_level": 3,
        },
        {
            "item_id": "top_dress_shirt",
            "name": "Dress shirt",
            "category": "tops",
            "subcategory": "dress shirt",
            "color": "white",
            "tags": ["cotton", "wrinkle-free"],
            "weather_suitability": ["warm", "mild", "cool"],
            "formality_level": 4,
        },
        {
            "item_id": "bottom_chinos",
            "name": "Chinos",
            "category": "bottoms",
            "subcategory": "chinos",
            "color": "beige",
            "tags": ["cotton"],
            "weather_suitability": ["warm", "mild"],
            "formality_level": 3,
        },
        {
            "item_id": "bottom_shorts",
            "name": "Shorts",
            "category": "bottoms",
            "subcategory": "shorts",
            "color": "blue",
            "weather_suitability": ["hot", "warm", "dry"],
            "formality_level": 1,
        },
        {
            "item_id": "bottom_wool_trousers",
            "name": "Wool trousers",
            "category": "bottoms",
            "subcategory": "trousers",
            "color": "charcoal",
            "tags": ["wool"],
            "weather_suitability": ["cool", "cold"],
            "formality_level": 4,
        },
        {
            "item_id": "shoes_sneakers",
            "name": "Sneakers",
            "category": "shoes",
            "subcategory": "sneakers",
            "color": "white",
            "tags": ["walking"],
            "weather_suitability": ["hot", "warm", "mild", "cool"],
            "formality_level": 2,
        },
        {
            "item_id": "shoes_oxfords",
            "name": "Oxfords",
            "category": "shoes",
            "subcategory": "oxfords",
            "color": "brown",
            "tags": ["leather"],
            "weather_suitability": ["warm", "mild", "cool", "cold"],
            "formality_level": 5,
        },
        {
            "item_id": "shoes_boots",
            "name": "Winter boots",
            "category": "shoes",
            "subcategory": "boots",
            "color": "black",
            "tags": ["waterproof", "heavy"],
            "weather_suitability": ["cool", "cold", "rainy", "snowy"],
            "formality_level": 3,
        },
        {
            "item_id": "under_briefs",
            "name": "Briefs",
            "category": "undergarments",
            "subcategory": "briefs",
            "color": "black",
            "weather_suitability": ["hot", "warm", "mild", "cool", "cold"],
            "formality_level": 3,
        },
        {
            "item_id": "under_dress_set",
            "name": "Dress undershirt",
            "category": "undergarments",
            "subcategory": "undershirt",
            "color": "white",
            "weather_suitability": ["warm", "mild", "cool", "cold"],
            "formality_level": 4,
        },
        {
            "item_id": "dress_evening",
            "name": "Evening dress",
            "category": "dresses",
            "subcategory": "evening dress",
            "color": "black",
            "tags": ["silk"],
            "weather_suitability": ["warm", "mild"],
            "formality_level": 5,
        },
        {
            "item_id": "swim_trunks",
            "name": "Swim trunks",
            "category": "swimwear",
            "subcategory": "trunks",
            "color": "teal",
            "tags": ["quick-dry"],
            "weather_suitability": ["hot", "warm"],
            "formality_level": 1,
        },
        {
            "item_id": "athletic_running_top",
            "name": "Running top",
            "category": "athletic",
            "subcategory": "running top",
            "color": "red",
            "tags": ["moisture-wicking", "light"],
            "weather_suitability": ["hot", "warm", "mild", "cool"],
            "formality_level": 1,
        },
        {
            "item_id": "outer_rain_jacket",
            "name": "Rain jacket",
            "category": "outerwear",
            "subcategory": "rain jacket",
            "color": "yellow",
            "tags": ["waterproof", "light"],
            "weather_suitability": ["mild", "cool", "rainy", "windy"],
            "formality_level": 2,
        },
        {
            "item_id": "outer_wool_coat",
            "name": "Wool coat",
            "category": "outerwear",
            "subcategory": "coat",
            "color": "camel",
            "tags": ["wool", "thick"],
            "weather_suitability": ["cool", "cold"],
            "formality_level": 4,
        },
        {
            "item_id": "acc_umbrella",
            "name": "Compact umbrella",
            "category": "accessories",
            "subcategory": "umbrella",
            "color": "black",
            "tags": ["rain"],
            "weather_suitability": ["mild", "cool", "rainy"],
            "formality_level": 4,
        },
        {
            "item_id": "acc_sunglasses",
            "name": "Polarised sunglasses",
            "category": "accessories",
            "subcategory": "sunglasses",
            "color": "tortoise",
            "tags": ["sun"],
            "weather_suitability": ["hot", "warm", "dry"],
            "formality_level": 2,
        },
        {
            "item_id": "acc_tie",
            "name": "Silk tie",
            "category": "accessories",
            "subcategory": "tie",
            "color": "navy",
            "tags": ["silk"],
            "weather_suitability": ["warm", "mild", "cool"],
            "formality_level": 4,
        },
        {
            "item_id": "sleep_pajamas",
            "name": "Pajamas",
            "category": "sleepwear",
            "subcategory": "pajamas",
            "color": "gray",
            "tags": ["cotton"],
            "weather_suitability": ["mild", "cool"],
            "formality_level": 1,
        },
    ]


SCENARIOS = [
    EvaluationScenario(
        name="hot_beach_break",
        description="Two scorching days by the sea with a beach afternoon and snorkelling.",
        bag_size=BagSize.CARRY_ON,
        days=[
            _day(
                date(2024, 7, 14),
                0,
                29.0,
                35.0,
                [
                    Activity(activity_type="relaxation", name="Beach afternoon", formality_level=1),
                    Activity(activity_type="dining", name="Seafood dinner", formality_level=2),
                ],
                uv_index=9.0,
            ),
            _day(
                date(2024, 7, 14),
                1,
                28.0,
                34.0,
                [
                    Activity(activity_type="sightseeing", name="Old town walk", formality_level=2),
                    Activity(activity_type="sports", name="Snorkelling", formality_level=1),
                ],
                uv_index=8.0,
            ),
        ],
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "slots": ["swimwear", "athletic"],
            "accessories_include": ["acc_sunglasses"],
            "min_weather_warnings": 2,
            "capacity_exceeded": False,
        },
    ),
    EvaluationScenario(
        name="rainy_business_trip",
        description="Client meeting and formal dinner on a cool, wet day.",
        bag_size=BagSize.CARRY_ON,
        days=[
            _day(
                date(2024, 10, 2),
                0,
                10.0,
                16.0,
                [
                    Activity(activity_type="business", name="Client meeting", formality_level=4),
                    Activity(activity_type="dining", name="Team dinner", formality_level=5),
                ],
                condition=WeatherCondition.RAINY,
                precipitation=0.8,
                uv_index=2.0,
            ),
        ],
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "slots": ["tops", "dresses", "shoes"],
            "accessories_include": ["acc_umbrella", "acc_tie"],
            "min_weather_warnings": 1,
            "capacity_exceeded": False,
        },
        cultural_notes=["Business dress is expected at client sites"],
    ),
    EvaluationScenario(
        name="cold_city_weekend",
        description="Freezing weekend of sightseeing and museums.",
        bag_size=BagSize.BACKPACK,
        days=[
            _day(
                date(2024, 1, 20),
                offset,
                -3.0,
                3.0,
                [
                    Activity(activity_type="sightseeing", name="City walk", formality_level=2),
                    Activity(activity_type="cultural", name="Museum visit", formality_level=3),
                ],
                condition=WeatherCondition.SNOWY,
                precipitation=0.3,
                uv_index=1.0,
            )
            for offset in range(2)
        ],
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "slot_items": {"tops": "top_sweater", "shoes": "shoes_boots"},
            "min_weather_warnings": 0,
            "capacity_exceeded": False,
        },
    ),
    EvaluationScenario(
        name="overstuffed_carry_on",
        description="Everything marked essential against a carry-on's 7kg limit.",
        bag_size=BagSize.CARRY_ON,
        days=[
            _day(
                date(2024, 5, 18),
                0,
                15.0,
                21.0,
                [Activity(activity_type="sightseeing", name="Gallery hop", formality_level=2)],
            ),
        ],
        wardrobe_items=_wardrobe_fixtures(),
        essential_keywords=["outerwear", "shoes", "dresses", "tops", "bottoms"],
        expectations={
            "capacity_exceeded": True,
            "min_utilization": 100.0,
            "suggested_bag_not": BagSize.CARRY_ON.value,
        },
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
