"""Space utilisation analytics and bag size suggestions."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from logic.dimension_estimator import ItemDimensionEstimator
from models.capacity import DEFAULT_CAPACITY_MODEL, BagCapacity, CapacityModel
from models.clothing_item import ClothingItem
from models.packing import ItemDimensions, SpaceUtilization
from models.taxonomy import BAG_SIZE_PREFERENCE, BagSize, ClothingCategory

logger = logging.getLogger(__name__)

DEFAULT_SAFETY_MARGIN = 0.85
NEARLY_FULL = 0.9
MOSTLY_EMPTY = 0.5
COMPRESSIBLE_ITEM_LIMIT = 3
SHOE_PAIR_LIMIT = 2
OUTERWEAR_LIMIT = 1

VOLUME_FULL_TIP = "Your bag is nearly at volume capacity. Consider compression packing cubes."
SPACE_LEFT_TIP = "You have plenty of space left. Consider adding versatile items."
WEIGHT_FULL_TIP = "Your bag is nearly at weight capacity. Consider lighter alternatives."
COMPRESSION_TIP = "Use compression packing cubes to save 20-30% space on soft items."
SHOES_TIP = "Consider limiting shoes to 2 pairs and wearing the heaviest pair while traveling."
OUTERWEAR_TIP = "Wear your heaviest coat/jacket while traveling to save space."
WELL_OPTIMIZED_TIP = "Your packing looks well-optimized for the chosen bag size."


class SpaceAnalyzer:
    """Measures how full a bag is and advises on packing it."""

    def __init__(
        self,
        capacity_model: CapacityModel | None = None,
        estimator: ItemDimensionEstimator | None = None,
        safety_margin: float = DEFAULT_SAFETY_MARGIN,
    ) -> None:
        if not 0 < safety_margin <= 1:
            raise ValueError(f"safety_margin must be within (0, 1], got {safety_margin}")
        self.capacity_model = capacity_model or DEFAULT_CAPACITY_MODEL
        self.estimator = estimator or ItemDimensionEstimator()
        self.safety_margin = safety_margin

    def get_item_dimensions(self, item: ClothingItem) -> ItemDimensions:
        return self.estimator.get_item_dimensions(item)

    def calculate_total_dimensions(self, items: Sequence[ClothingItem]) -> Tuple[float, float]:
        return self.estimator.totals(items)

    def calculate_space_utilization(self, items: Sequence[ClothingItem], bag_size: BagSize | str) -> SpaceUtilization:
        """Utilisation is the larger of the volume and weight fractions, in percent.

        The percentage is not clamped: values above 100 mean the bag overflows.
        """

        capacity = self.capacity_model.capacity(bag_size)
        used_volume, used_weight = self.calculate_total_dimensions(items)
        utilization_percentage = max(used_volume / capacity.volume, used_weight / capacity.weight) * 100
        recommendations = self.generate_recommendations(used_volume, used_weight, capacity, items)
        logger.info(
            "Bag %s at %.1f%% (%.2f/%sL, %.2f/%skg)",
            getattr(bag_size, "value", bag_size),
            utilization_percentage,
            used_volume,
            capacity.volume,
            used_weight,
            capacity.weight,
        )
        return SpaceUtilization(
            used_volume=used_volume,
            total_volume=capacity.volume,
            used_weight=used_weight,
            total_weight=capacity.weight,
            utilization_percentage=utilization_percentage,
            recommendations=recommendations,
        )

    def generate_recommendations(
        self,
        used_volume: float,
        used_weight: float,
        capacity: BagCapacity,
        items: Sequence[ClothingItem],
    ) -> List[str]:
        recommendations: List[str] = []
        volume_ratio = used_volume / capacity.volume
        weight_ratio = used_weight / capacity.weight

        if volume_ratio > NEARLY_FULL:
            recommendations.append(VOLUME_FULL_TIP)
        elif volume_ratio < MOSTLY_EMPTY:
            recommendations.append(SPACE_LEFT_TIP)

        if weight_ratio > NEARLY_FULL:
            recommendations.append(WEIGHT_FULL_TIP)

        compressible = sum(1 for item in items if self.get_item_dimensions(item).compressible)
        if compressible > COMPRESSIBLE_ITEM_LIMIT:
            recommendations.append(COMPRESSION_TIP)

        shoes = sum(1 for item in items if item.category is ClothingCategory.SHOES)
        if shoes > SHOE_PAIR_LIMIT:
            recommendations.append(SHOES_TIP)

        outerwear = sum(1 for item in items if item.category is ClothingCategory.OUTERWEAR)
        if outerwear > OUTERWEAR_LIMIT:
            recommendations.append(OUTERWEAR_TIP)

        if not recommendations:
            recommendations.append(WELL_OPTIMIZED_TIP)
        return recommendations

    def space_efficiency(self, item: ClothingItem) -> float:
        dimensions = self.get_item_dimensions(item)
        versatility = len(item.tags) + len(item.weather_suitability)
        return versatility / (dimensions.volume + dimensions.weight)

    def optimize_space_usage(self, items: Sequence[ClothingItem]) -> List[ClothingItem]:
        """Return a new list, most space-efficient first; ties keep input order."""

        return sorted(items, key=self.space_efficiency, reverse=True)

    def suggest_bag_size(self, items: Sequence[ClothingItem]) -> BagSize:
        """Smallest bag that holds the items within the safety margin, else checked_large."""

        total_volume, total_weight = self.calculate_total_dimensions(items)
        for bag_size in BAG_SIZE_PREFERENCE:
            limit = self.capacity_model.capacity(bag_size).scaled(self.safety_margin)
            if total_volume <= limit.volume and total_weight <= limit.weight:
                logger.info("Suggested %s for %.2fL/%.2fkg", bag_size.value, total_volume, total_weight)
                return bag_size
        logger.info("No bag fits %.2fL/%.2fkg within margin; falling back to checked_large", total_volume, total_weight)
        return BagSize.CHECKED_LARGE


__all__ = [
    "COMPRESSION_TIP",
    "DEFAULT_SAFETY_MARGIN",
    "OUTERWEAR_TIP",
    "SHOES_TIP",
    "SPACE_LEFT_TIP",
    "SpaceAnalyzer",
    "VOLUME_FULL_TIP",
    "WEIGHT_FULL_TIP",
    "WELL_OPTIMIZED_TIP",
]
