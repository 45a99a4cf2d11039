"""Volume and weight estimates for clothing items."""

from __future__ import annotations

from typing import Iterable, Tuple

from models.capacity import DEFAULT_DIMENSION_TABLE, DimensionTable
from models.clothing_item import ClothingItem
from models.packing import ItemDimensions

BULKY_TAGS = ("thick", "heavy")
SLIM_TAGS = ("light", "thin")
PREMIUM_TAGS = ("premium", "luxury")

BULKY_VOLUME, BULKY_WEIGHT = 1.3, 1.4
SLIM_VOLUME, SLIM_WEIGHT = 0.8, 0.7
PREMIUM_WEIGHT = 1.1


class ItemDimensionEstimator:
    """Scales per-category base dimensions by tag-driven multipliers.

    The estimate depends only on the item's category, tags and brand, so it is
    safe to call repeatedly and from several threads.
    """

    def __init__(self, table: DimensionTable | None = None) -> None:
        self.table = table or DEFAULT_DIMENSION_TABLE

    def get_item_dimensions(self, item: ClothingItem) -> ItemDimensions:
        base = self.table.base(item.category)
        volume_multiplier = 1.0
        weight_multiplier = 1.0

        if any(item.has_tag(tag) for tag in BULKY_TAGS):
            volume_multiplier *= BULKY_VOLUME
            weight_multiplier *= BULKY_WEIGHT
        if any(item.has_tag(tag) for tag in SLIM_TAGS):
            volume_multiplier *= SLIM_VOLUME
            weight_multiplier *= SLIM_WEIGHT
        if item.brand and any(item.has_tag(tag) for tag in PREMIUM_TAGS):
            weight_multiplier *= PREMIUM_WEIGHT

        return ItemDimensions(
            volume=base.volume * volume_multiplier,
            weight=base.weight * weight_multiplier,
            foldable=base.foldable,
            compressible=base.compressible,
        )

    def totals(self, items: Iterable[ClothingItem]) -> Tuple[float, float]:
        """Summed (volume, weight) of the given items."""

        total_volume = 0.0
        total_weight = 0.0
        for item in items:
            dimensions = self.get_item_dimensions(item)
            total_volume += dimensions.volume
            total_weight += dimensions.weight
        return total_volume, total_weight


__all__ = ["ItemDimensionEstimator"]
