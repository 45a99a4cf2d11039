"""Packing plan, space utilisation and trip recommendation schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Union

from models.clothing_item import ClothingItem
from models.outfit import DailyOutfit
from models.taxonomy import BagSize, ClothingCategory, validate_bag_size

EssentialKeyword = Union[ClothingCategory, str]


def essential_keyword_list(keywords: EssentialKeyword | Sequence[EssentialKeyword] | None) -> List[EssentialKeyword]:
    """A single keyword is one keyword, not a sequence of characters."""

    if keywords is None:
        return []
    if isinstance(keywords, str):
        return [keywords]
    return list(keywords)


@dataclass(frozen=True)
class ItemDimensions:
    """Estimated size of a single item."""

    volume: float
    weight: float
    foldable: bool
    compressible: bool


@dataclass(frozen=True)
class PackingScore:
    utilization: float
    versatility: float
    weather_match: float
    activity_match: float
    overall: float


@dataclass
class PackingConstraints:
    """Bag choice plus the caller's essential-item classification."""

    bag_size: BagSize
    essential_keywords: Sequence[EssentialKeyword] = field(default_factory=list)
    max_weight: Optional[float] = None
    max_items: Optional[int] = None

    def __post_init__(self) -> None:
        self.bag_size = validate_bag_size(self.bag_size)
        self.essential_keywords = essential_keyword_list(self.essential_keywords)
        if self.max_weight is not None and self.max_weight < 0:
            raise ValueError(f"max_weight cannot be negative, got {self.max_weight}")
        if self.max_items is not None and self.max_items < 0:
            raise ValueError(f"max_items cannot be negative, got {self.max_items}")


@dataclass
class PackingPlan:
    """Deduplicated selection with its score.

    ``capacity_exceeded`` is set when the essential items alone do not fit the
    bag; the plan is still returned so the caller can decide what to drop.
    """

    items: List[ClothingItem]
    score: PackingScore
    essential_items: List[ClothingItem] = field(default_factory=list)
    optional_items: List[ClothingItem] = field(default_factory=list)
    capacity_exceeded: bool = False
    notes: List[str] = field(default_factory=list)


@dataclass
class SpaceUtilization:
    used_volume: float
    total_volume: float
    used_weight: float
    total_weight: float
    utilization_percentage: float
    recommendations: List[str] = field(default_factory=list)

    @property
    def overflowing(self) -> bool:
        return self.utilization_percentage > 100


@dataclass
class PackingRecommendation:
    """Everything the caller needs to pack for a whole trip."""

    daily_outfits: List[DailyOutfit]
    total_items: List[ClothingItem]
    packing_score: PackingScore
    bag_size: BagSize
    bag_utilization: float
    space: SpaceUtilization
    suggested_bag_size: BagSize
    capacity_exceeded: bool
    cultural_notes: List[str] = field(default_factory=list)
    weather_warnings: List[str] = field(default_factory=list)
    packing_notes: List[str] = field(default_factory=list)
    generated_at: Optional[datetime] = None


__all__ = [
    "EssentialKeyword",
    "essential_keyword_list",
    "ItemDimensions",
    "PackingConstraints",
    "PackingPlan",
    "PackingRecommendation",
    "PackingScore",
    "SpaceUtilization",
]
