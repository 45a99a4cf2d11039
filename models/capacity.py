"""Immutable bag capacity and item dimension tables.

Both tables are plain configuration: the packing selector and the space
analyzer receive them at construction time, so alternative airline limits or
re-measured garment sizes can be swapped in without touching the algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

from models.taxonomy import BagSize, ClothingCategory, validate_bag_size, validate_category


@dataclass(frozen=True)
class BagCapacity:
    """Volume budget in liters and weight budget in kilograms."""

    volume: float
    weight: float

    def scaled(self, factor: float) -> "BagCapacity":
        return BagCapacity(volume=self.volume * factor, weight=self.weight * factor)


@dataclass(frozen=True)
class CategoryDimensions:
    """Base size of a garment category before tag adjustments."""

    volume: float
    weight: float
    foldable: bool
    compressible: bool


_DEFAULT_CAPACITIES: Dict[BagSize, BagCapacity] = {
    BagSize.CARRY_ON: BagCapacity(volume=56, weight=7),
    BagSize.CHECKED_SMALL: BagCapacity(volume=68, weight=23),
    BagSize.CHECKED_MEDIUM: BagCapacity(volume=85, weight=23),
    BagSize.CHECKED_LARGE: BagCapacity(volume=119, weight=32),
    BagSize.BACKPACK: BagCapacity(volume=45, weight=15),
    BagSize.DUFFEL: BagCapacity(volume=60, weight=20),
}

_DEFAULT_DIMENSIONS: Dict[ClothingCategory, CategoryDimensions] = {
    ClothingCategory.TOPS: CategoryDimensions(2, 0.3, foldable=True, compressible=True),
    ClothingCategory.BOTTOMS: CategoryDimensions(3, 0.5, foldable=True, compressible=False),
    ClothingCategory.OUTERWEAR: CategoryDimensions(8, 1.2, foldable=True, compressible=True),
    ClothingCategory.DRESSES: CategoryDimensions(4, 0.4, foldable=True, compressible=True),
    ClothingCategory.SHOES: CategoryDimensions(6, 0.8, foldable=False, compressible=False),
    ClothingCategory.UNDERGARMENTS: CategoryDimensions(0.5, 0.1, foldable=True, compressible=True),
    ClothingCategory.ACCESSORIES: CategoryDimensions(1, 0.2, foldable=False, compressible=False),
    ClothingCategory.SWIMWEAR: CategoryDimensions(1, 0.2, foldable=True, compressible=True),
    ClothingCategory.SLEEPWEAR: CategoryDimensions(2, 0.3, foldable=True, compressible=True),
    ClothingCategory.ATHLETIC: CategoryDimensions(2, 0.4, foldable=True, compressible=True),
}


@dataclass(frozen=True)
class CapacityModel:
    """Maps every bag size to its capacity."""

    capacities: Mapping[BagSize, BagCapacity] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_CAPACITIES))
    )

    def __post_init__(self) -> None:
        normalised = {validate_bag_size(key): value for key, value in self.capacities.items()}
        missing = [size.value for size in BagSize if size not in normalised]
        if missing:
            raise ValueError(f"Capacity table is missing bag sizes: {missing}")
        empty = [size.value for size, cap in normalised.items() if cap.volume <= 0 or cap.weight <= 0]
        if empty:
            raise ValueError(f"Bag capacities must be positive: {empty}")
        object.__setattr__(self, "capacities", MappingProxyType(normalised))

    def capacity(self, bag_size: BagSize | str) -> BagCapacity:
        return self.capacities[validate_bag_size(bag_size)]

    def with_overrides(self, overrides: Mapping[BagSize, BagCapacity]) -> "CapacityModel":
        merged = dict(self.capacities)
        merged.update({validate_bag_size(key): value for key, value in overrides.items()})
        return CapacityModel(capacities=merged)


@dataclass(frozen=True)
class DimensionTable:
    """Maps every clothing category to its base dimensions."""

    dimensions: Mapping[ClothingCategory, CategoryDimensions] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_DIMENSIONS))
    )

    def __post_init__(self) -> None:
        normalised = {validate_category(key): value for key, value in self.dimensions.items()}
        missing = [category.value for category in ClothingCategory if category not in normalised]
        if missing:
            raise ValueError(f"Dimension table is missing categories: {missing}")
        empty = [
            category.value for category, dims in normalised.items() if dims.volume <= 0 or dims.weight <= 0
        ]
        if empty:
            raise ValueError(f"Category dimensions must be positive: {empty}")
        object.__setattr__(self, "dimensions", MappingProxyType(normalised))

    def base(self, category: ClothingCategory | str) -> CategoryDimensions:
        return self.dimensions[validate_category(category)]


DEFAULT_CAPACITY_MODEL = CapacityModel()
DEFAULT_DIMENSION_TABLE = DimensionTable()


__all__ = [
    "BagCapacity",
    "CapacityModel",
    "CategoryDimensions",
    "DimensionTable",
    "DEFAULT_CAPACITY_MODEL",
    "DEFAULT_DIMENSION_TABLE",
]
