"""Daily outfit schemas."""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import List, Optional

from models.clothing_item import ClothingItem
from models.taxonomy import ClothingCategory
from models.trip_context import Activity, WeatherSnapshot


@dataclass
class OutfitSlots:
    """One slot per clothing category; a slot holds at most one item."""

    tops: Optional[ClothingItem] = None
    bottoms: Optional[ClothingItem] = None
    outerwear: Optional[ClothingItem] = None
    dresses: Optional[ClothingItem] = None
    shoes: Optional[ClothingItem] = None
    undergarments: Optional[ClothingItem] = None
    accessories: Optional[ClothingItem] = None
    swimwear: Optional[ClothingItem] = None
    sleepwear: Optional[ClothingItem] = None
    athletic: Optional[ClothingItem] = None

    def get(self, category: ClothingCategory) -> Optional[ClothingItem]:
        return getattr(self, ClothingCategory(category).value)

    def set(self, category: ClothingCategory, item: ClothingItem) -> None:
        category = ClothingCategory(category)
        if item.category is not category:
            raise ValueError(
                f"Item {item.item_id} is {item.category.value}, cannot fill the {category.value} slot"
            )
        setattr(self, category.value, item)

    def filled(self) -> List[ClothingCategory]:
        return [ClothingCategory(f.name) for f in fields(self) if getattr(self, f.name) is not None]

    def items(self) -> List[ClothingItem]:
        return [getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None]

    def __len__(self) -> int:
        return len(self.filled())


@dataclass
class DailyOutfit:
    date: date
    weather: WeatherSnapshot
    activities: List[Activity]
    outfit: OutfitSlots = field(default_factory=OutfitSlots)
    accessories: List[ClothingItem] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def worn_items(self) -> List[ClothingItem]:
        """Outfit pieces followed by accessories."""

        return self.outfit.items() + list(self.accessories)
