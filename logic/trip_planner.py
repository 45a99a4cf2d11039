"""Trip-wide planning: daily outfits plus one packing list for the whole trip."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from logic.outfit_assembler import HYDRATION_NOTE, RAIN_NOTE, OutfitAssembler
from logic.packing_selector import PackingSelector, is_essential
from logic.space_analyzer import SpaceAnalyzer
from models.clothing_item import ClothingItem
from models.outfit import DailyOutfit
from models.packing import EssentialKeyword, PackingConstraints, PackingRecommendation
from models.taxonomy import BagSize
from models.trip_context import TripDay

logger = logging.getLogger(__name__)

WARNING_NOTES = (HYDRATION_NOTE, RAIN_NOTE)


def candidate_pool(
    daily_outfits: Sequence[DailyOutfit],
    wardrobe: Sequence[ClothingItem],
    essential_keywords: Sequence[EssentialKeyword],
) -> List[ClothingItem]:
    """Everything worn across the trip in first-use order, then unworn essentials."""

    pool: List[ClothingItem] = []
    seen = set()
    for outfit in daily_outfits:
        for item in outfit.worn_items():
            if item.item_id not in seen:
                seen.add(item.item_id)
                pool.append(item)
    for item in wardrobe:
        if item.item_id not in seen and is_essential(item, essential_keywords):
            seen.add(item.item_id)
            pool.append(item)
    return pool


def weather_warnings(daily_outfits: Sequence[DailyOutfit]) -> List[str]:
    warnings: List[str] = []
    for outfit in daily_outfits:
        for note in outfit.notes:
            if note in WARNING_NOTES:
                warnings.append(f"{outfit.date.isoformat()}: {note}")
    return warnings


class TripPlanner:
    """Runs the outfit assembler per day and the packing pipeline once per trip."""

    def __init__(
        self,
        assembler: OutfitAssembler | None = None,
        selector: PackingSelector | None = None,
        analyzer: SpaceAnalyzer | None = None,
    ) -> None:
        self.assembler = assembler or OutfitAssembler()
        self.selector = selector or PackingSelector()
        self.analyzer = analyzer or SpaceAnalyzer(
            capacity_model=self.selector.capacity_model, estimator=self.selector.estimator
        )

    def plan_trip(
        self,
        days: Sequence[TripDay],
        wardrobe: Sequence[ClothingItem],
        bag_size: BagSize | str,
        essential_keywords: Sequence[EssentialKeyword] = (),
        cultural_notes: Sequence[str] | None = None,
        generated_at: Optional[datetime] = None,
    ) -> PackingRecommendation:
        cultural_notes = list(cultural_notes or [])
        daily_outfits = [
            self.assembler.generate_daily_outfit(day.date, day.weather, day.activities, wardrobe, cultural_notes)
            for day in days
        ]

        constraints = PackingConstraints(bag_size=bag_size, essential_keywords=essential_keywords)
        pool = candidate_pool(daily_outfits, wardrobe, constraints.essential_keywords)
        plan = self.selector.build_plan(pool, constraints)
        space = self.analyzer.calculate_space_utilization(plan.items, constraints.bag_size)
        suggested = self.analyzer.suggest_bag_size(plan.items)

        logger.info(
            "Planned %s days: %s candidates, %s packed, %.1f%% of %s",
            len(daily_outfits),
            len(pool),
            len(plan.items),
            space.utilization_percentage,
            constraints.bag_size.value,
        )
        return PackingRecommendation(
            daily_outfits=daily_outfits,
            total_items=plan.items,
            packing_score=plan.score,
            bag_size=constraints.bag_size,
            bag_utilization=space.utilization_percentage,
            space=space,
            suggested_bag_size=suggested,
            capacity_exceeded=plan.capacity_exceeded,
            cultural_notes=cultural_notes,
            weather_warnings=weather_warnings(daily_outfits),
            packing_notes=list(plan.notes),
            generated_at=generated_at or datetime.now(timezone.utc),
        )


__all__ = ["TripPlanner", "candidate_pool", "weather_warnings"]
