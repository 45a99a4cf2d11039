"""Capacity-constrained packing selection.

Essential items are always packed. The remaining volume and weight budget is
filled greedily with the highest-scoring optional items in a single pass. This
is a polynomial-time approximation of the two-dimensional knapsack problem: an
item rejected because it does not fit is never reconsidered. Callers needing an
exact answer can inject a different admission strategy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from logic.dimension_estimator import ItemDimensionEstimator
from models.capacity import DEFAULT_CAPACITY_MODEL, BagCapacity, CapacityModel
from models.clothing_item import ClothingItem
from models.packing import (
    EssentialKeyword,
    PackingConstraints,
    PackingPlan,
    PackingScore,
    essential_keyword_list,
)
from models.taxonomy import BagSize, ClothingCategory

logger = logging.getLogger(__name__)

# Per-trip weather/activity matching is not computed yet; these stand in for it.
WEATHER_MATCH_PLACEHOLDER = 0.8
ACTIVITY_MATCH_PLACEHOLDER = 0.8

SCORE_WEIGHTS = {
    "utilization": 0.2,
    "versatility": 0.3,
    "weather_match": 0.3,
    "activity_match": 0.2,
}
VERSATILITY_CATEGORY_TARGET = len(ClothingCategory)

_TOLERANCE = 1e-9

AdmissionStrategy = Callable[
    [Sequence[ClothingItem], BagCapacity, ItemDimensionEstimator, Optional[int]], List[ClothingItem]
]


@dataclass(frozen=True)
class SelectionResult:
    items: List[ClothingItem]
    essential_items: List[ClothingItem]
    admitted_items: List[ClothingItem]
    remaining_capacity: BagCapacity
    capacity_exceeded: bool
    diagnostics: Dict[str, object] = field(default_factory=dict)


def _keyword_matches(item: ClothingItem, keyword: EssentialKeyword) -> bool:
    if isinstance(keyword, ClothingCategory):
        return item.category is keyword
    needle = str(keyword).strip().lower()
    if not needle:
        return False
    return needle in item.category.value or needle in item.subcategory.lower()


def is_essential(item: ClothingItem, keywords: EssentialKeyword | Sequence[EssentialKeyword]) -> bool:
    """Categories match exactly; free-text keywords match category or subcategory substrings."""

    return any(_keyword_matches(item, keyword) for keyword in essential_keyword_list(keywords))


def partition_essentials(
    items: Sequence[ClothingItem], keywords: Sequence[EssentialKeyword]
) -> Tuple[List[ClothingItem], List[ClothingItem]]:
    essential: List[ClothingItem] = []
    optional: List[ClothingItem] = []
    for item in items:
        (essential if is_essential(item, keywords) else optional).append(item)
    return essential, optional


def optional_item_score(item: ClothingItem) -> float:
    # Trip-specific signals are not part of the ranking yet.
    return 0.2 * int(item.formality_level) + 0.1 * len(item.tags) + 0.3 * len(item.weather_suitability)


def rank_optional_items(items: Sequence[ClothingItem]) -> List[ClothingItem]:
    """Descending by score; equal scores keep their input order."""

    return sorted(items, key=optional_item_score, reverse=True)


def greedy_admission(
    ranked_items: Sequence[ClothingItem],
    remaining: BagCapacity,
    estimator: ItemDimensionEstimator,
    max_count: Optional[int] = None,
) -> List[ClothingItem]:
    """Admit items in rank order while both budgets hold; rejected items are not retried."""

    admitted: List[ClothingItem] = []
    used_volume = 0.0
    used_weight = 0.0
    for item in ranked_items:
        if max_count is not None and len(admitted) >= max_count:
            break
        dimensions = estimator.get_item_dimensions(item)
        fits_volume = used_volume + dimensions.volume <= remaining.volume + _TOLERANCE
        fits_weight = used_weight + dimensions.weight <= remaining.weight + _TOLERANCE
        if fits_volume and fits_weight:
            admitted.append(item)
            used_volume += dimensions.volume
            used_weight += dimensions.weight
        else:
            logger.debug(
                "Skipped %s: needs %.2fL/%.2fkg, %.2fL/%.2fkg left",
                item.item_id,
                dimensions.volume,
                dimensions.weight,
                remaining.volume - used_volume,
                remaining.weight - used_weight,
            )
    return admitted


def remove_duplicates(items: Sequence[ClothingItem]) -> List[ClothingItem]:
    """Keep the first item for each (category, subcategory, color)."""

    seen = set()
    unique: List[ClothingItem] = []
    for item in items:
        if item.identity_key in seen:
            continue
        seen.add(item.identity_key)
        unique.append(item)
    return unique


class PackingSelector:
    """Chooses what goes into the bag for a whole trip."""

    def __init__(
        self,
        capacity_model: CapacityModel | None = None,
        estimator: ItemDimensionEstimator | None = None,
        admission_strategy: AdmissionStrategy = greedy_admission,
    ) -> None:
        self.capacity_model = capacity_model or DEFAULT_CAPACITY_MODEL
        self.estimator = estimator or ItemDimensionEstimator()
        self.admission_strategy = admission_strategy

    def _budget(self, constraints: PackingConstraints) -> BagCapacity:
        capacity = self.capacity_model.capacity(constraints.bag_size)
        if constraints.max_weight is not None:
            return BagCapacity(volume=capacity.volume, weight=min(capacity.weight, constraints.max_weight))
        return capacity

    def select(self, item_pool: Sequence[ClothingItem], constraints: PackingConstraints) -> SelectionResult:
        budget = self._budget(constraints)
        essentials, optionals = partition_essentials(item_pool, constraints.essential_keywords)
        essential_volume, essential_weight = self.estimator.totals(essentials)

        capacity_exceeded = (
            essential_volume > budget.volume + _TOLERANCE or essential_weight > budget.weight + _TOLERANCE
        )
        remaining = BagCapacity(
            volume=max(0.0, budget.volume - essential_volume),
            weight=max(0.0, budget.weight - essential_weight),
        )
        if capacity_exceeded:
            logger.warning(
                "Essential items need %.2fL/%.2fkg but %s holds %.2fL/%.2fkg; no optional items admitted",
                essential_volume,
                essential_weight,
                constraints.bag_size.value,
                budget.volume,
                budget.weight,
            )
            remaining = BagCapacity(volume=0.0, weight=0.0)

        max_count = None
        if constraints.max_items is not None:
            max_count = max(0, constraints.max_items - len(essentials))

        ranked = rank_optional_items(optionals)
        admitted = [] if capacity_exceeded else self.admission_strategy(ranked, remaining, self.estimator, max_count)
        selection = remove_duplicates(essentials + admitted)
        duplicates_removed = len(essentials) + len(admitted) - len(selection)
        # Partitions only hold what survived de-duplication.
        essential_ids = {id(item) for item in essentials}
        essentials = [item for item in selection if id(item) in essential_ids]
        admitted = [item for item in selection if id(item) not in essential_ids]

        diagnostics: Dict[str, object] = {
            "pool_count": len(item_pool),
            "essential_count": len(essentials),
            "optional_count": len(optionals),
            "admitted_count": len(admitted),
            "duplicates_removed": duplicates_removed,
            "essential_volume": essential_volume,
            "essential_weight": essential_weight,
            "budget": {"volume": budget.volume, "weight": budget.weight},
        }
        logger.info(
            "Selected %s items for %s (%s essential, %s optional admitted)",
            len(selection),
            constraints.bag_size.value,
            len(essentials),
            len(admitted),
        )
        return SelectionResult(
            items=selection,
            essential_items=essentials,
            admitted_items=admitted,
            remaining_capacity=remaining,
            capacity_exceeded=capacity_exceeded,
            diagnostics=diagnostics,
        )

    def optimize(
        self,
        item_pool: Sequence[ClothingItem],
        essential_keywords: Sequence[EssentialKeyword],
        bag_size: BagSize | str,
    ) -> List[ClothingItem]:
        constraints = PackingConstraints(bag_size=bag_size, essential_keywords=essential_keywords)
        return self.select(item_pool, constraints).items

    def calculate_packing_score(self, selection: Sequence[ClothingItem], bag_size: BagSize | str) -> PackingScore:
        capacity = self.capacity_model.capacity(bag_size)
        total_volume, _ = self.estimator.totals(selection)
        utilization = min(total_volume / capacity.volume, 1.0) if capacity.volume > 0 else 1.0
        distinct_categories = len({item.category for item in selection})
        versatility = min(distinct_categories / VERSATILITY_CATEGORY_TARGET, 1.0)
        weather_match = WEATHER_MATCH_PLACEHOLDER
        activity_match = ACTIVITY_MATCH_PLACEHOLDER
        overall = (
            utilization * SCORE_WEIGHTS["utilization"]
            + versatility * SCORE_WEIGHTS["versatility"]
            + weather_match * SCORE_WEIGHTS["weather_match"]
            + activity_match * SCORE_WEIGHTS["activity_match"]
        )
        return PackingScore(
            utilization=utilization,
            versatility=versatility,
            weather_match=weather_match,
            activity_match=activity_match,
            overall=overall,
        )

    def build_plan(self, item_pool: Sequence[ClothingItem], constraints: PackingConstraints) -> PackingPlan:
        """Selection, score and advisory notes in one record."""

        result = self.select(item_pool, constraints)
        notes: List[str] = []
        if result.capacity_exceeded:
            notes.append(
                "Essential items alone exceed the {bag} capacity "
                "({volume:.1f}L / {weight:.1f}kg needed); choose a larger bag or fewer essentials.".format(
                    bag=constraints.bag_size.value,
                    volume=result.diagnostics["essential_volume"],
                    weight=result.diagnostics["essential_weight"],
                )
            )
        if constraints.max_items is not None and len(result.items) >= constraints.max_items:
            notes.append(f"Item limit of {constraints.max_items} reached.")
        return PackingPlan(
            items=result.items,
            score=self.calculate_packing_score(result.items, constraints.bag_size),
            essential_items=result.essential_items,
            optional_items=result.admitted_items,
            capacity_exceeded=result.capacity_exceeded,
            notes=notes,
        )


__all__ = [
    "ACTIVITY_MATCH_PLACEHOLDER",
    "AdmissionStrategy",
    "PackingSelector",
    "SelectionResult",
    "WEATHER_MATCH_PLACEHOLDER",
    "greedy_admission",
    "is_essential",
    "optional_item_score",
    "partition_essentials",
    "rank_optional_items",
    "remove_duplicates",
]
