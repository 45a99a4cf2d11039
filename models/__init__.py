"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.capacity import (
    BagCapacity,
    CapacityModel,
    CategoryDimensions,
    DEFAULT_CAPACITY_MODEL,
    DEFAULT_DIMENSION_TABLE,
    DimensionTable,
)
from models.clothing_item import ClothingItem
from models.outfit import DailyOutfit, OutfitSlots
from models.packing import (
    ItemDimensions,
    PackingConstraints,
    PackingPlan,
    PackingRecommendation,
    PackingScore,
    SpaceUtilization,
)
from models.trip_context import Activity, TripDay, WeatherSnapshot

__all__ = [
    "Activity",
    "BagCapacity",
    "CapacityModel",
    "CategoryDimensions",
    "ClothingItem",
    "DailyOutfit",
    "DEFAULT_CAPACITY_MODEL",
    "DEFAULT_DIMENSION_TABLE",
    "DimensionTable",
    "ItemDimensions",
    "OutfitSlots",
    "PackingConstraints",
    "PackingPlan",
    "PackingRecommendation",
    "PackingScore",
    "SpaceUtilization",
    "TripDay",
    "WeatherSnapshot",
]
