"""Packing engine facade.

Bundles the outfit assembler, packing selector, space analyzer and trip
planner behind the calls the orchestration layer makes. Every call is a pure
computation over the arguments; the engine holds configuration only, so one
instance can be shared across threads.
"""

from __future__ import annotations

import logging
from datetime import date as dt_date, datetime
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from logic.dimension_estimator import ItemDimensionEstimator
from logic.outfit_assembler import OutfitAssembler
from logic.packing_selector import AdmissionStrategy, PackingSelector, greedy_admission
from logic.space_analyzer import SpaceAnalyzer
from logic.trip_planner import TripPlanner
from logic.validation import (
    OutfitRequest,
    PackingRequest,
    TripPlanRequest,
    validation_failure,
)
from models.capacity import CapacityModel, DimensionTable
from models.clothing_item import ClothingItem
from models.outfit import DailyOutfit
from models.packing import (
    EssentialKeyword,
    PackingConstraints,
    PackingPlan,
    PackingRecommendation,
    SpaceUtilization,
    essential_keyword_list,
)
from models.taxonomy import BagSize
from models.trip_context import Activity, TripDay, WeatherSnapshot
from packr_app.config import PackrConfig
from packr_app.logging_config import get_logger, log_event
from tools.observability import instrument_operation

LOGGER = get_logger(__name__)


class PackrEngine:
    """Wires the decision modules together from one configuration."""

    def __init__(
        self,
        config: PackrConfig | None = None,
        capacity_model: CapacityModel | None = None,
        dimension_table: DimensionTable | None = None,
        admission_strategy: AdmissionStrategy = greedy_admission,
    ) -> None:
        self.config = config or PackrConfig.from_env()
        self.estimator = ItemDimensionEstimator(dimension_table)
        self.capacity_model = capacity_model or CapacityModel()
        self.assembler = OutfitAssembler(max_formal_accessories=self.config.max_accessories_for_formal)
        self.selector = PackingSelector(
            capacity_model=self.capacity_model,
            estimator=self.estimator,
            admission_strategy=admission_strategy,
        )
        self.analyzer = SpaceAnalyzer(
            capacity_model=self.capacity_model,
            estimator=self.estimator,
            safety_margin=self.config.bag_safety_margin,
        )
        self.planner = TripPlanner(assembler=self.assembler, selector=self.selector, analyzer=self.analyzer)

    def _keywords(self, essential_keywords: EssentialKeyword | Sequence[EssentialKeyword] | None) -> List[EssentialKeyword]:
        if essential_keywords is None:
            return list(self.config.essential_keywords)
        return essential_keyword_list(essential_keywords)

    def _bag(self, bag_size: BagSize | str | None) -> BagSize | str:
        return self.config.default_bag_size if bag_size is None else bag_size

    @instrument_operation("generate_daily_outfit")
    def generate_daily_outfit(
        self,
        date: dt_date,
        weather: WeatherSnapshot,
        activities: Sequence[Activity],
        items: Sequence[ClothingItem],
        cultural_notes: Sequence[str] | None = None,
    ) -> DailyOutfit:
        return self.assembler.generate_daily_outfit(date, weather, activities, items, cultural_notes)

    @instrument_operation("optimize_packing")
    def optimize_packing(
        self,
        items: Sequence[ClothingItem],
        essential_keywords: EssentialKeyword | Sequence[EssentialKeyword] | None = None,
        bag_size: BagSize | str | None = None,
        max_weight: float | None = None,
        max_items: int | None = None,
    ) -> PackingPlan:
        """Selected items and their packing score.

        ``capacity_exceeded`` on the returned plan flags essentials that do not
        fit the bag on their own.
        """

        constraints = PackingConstraints(
            bag_size=self._bag(bag_size),
            essential_keywords=self._keywords(essential_keywords),
            max_weight=max_weight,
            max_items=max_items,
        )
        return self.selector.build_plan(items, constraints)

    @instrument_operation("analyze_space")
    def analyze_space(self, items: Sequence[ClothingItem], bag_size: BagSize | str | None = None) -> SpaceUtilization:
        return self.analyzer.calculate_space_utilization(items, self._bag(bag_size))

    @instrument_operation("suggest_bag_size")
    def suggest_bag_size(self, items: Sequence[ClothingItem]) -> BagSize:
        return self.analyzer.suggest_bag_size(items)

    @instrument_operation("optimize_space_usage")
    def optimize_space_usage(self, items: Sequence[ClothingItem]) -> List[ClothingItem]:
        return self.analyzer.optimize_space_usage(items)

    @instrument_operation("plan_trip")
    def plan_trip(
        self,
        days: Sequence[TripDay],
        items: Sequence[ClothingItem],
        bag_size: BagSize | str | None = None,
        essential_keywords: EssentialKeyword | Sequence[EssentialKeyword] | None = None,
        cultural_notes: Sequence[str] | None = None,
        generated_at: Optional[datetime] = None,
    ) -> PackingRecommendation:
        return self.planner.plan_trip(
            days,
            items,
            self._bag(bag_size),
            essential_keywords=self._keywords(essential_keywords),
            cultural_notes=cultural_notes,
            generated_at=generated_at,
        )

    def generate_daily_outfit_from_payload(self, payload: Dict[str, Any]) -> DailyOutfit | Dict[str, Any]:
        """Validate a raw outfit request; returns a review envelope if it is malformed."""

        try:
            request = OutfitRequest.model_validate(payload)
        except ValidationError as exc:
            self._log_invalid("generate_daily_outfit", exc)
            return validation_failure("Invalid outfit request payload", exc)
        return self.generate_daily_outfit(
            request.date,
            request.weather.to_domain(),
            [activity.to_domain() for activity in request.activities],
            [item.to_domain() for item in request.items],
            request.cultural_notes,
        )

    def optimize_packing_from_payload(self, payload: Dict[str, Any]) -> PackingPlan | Dict[str, Any]:
        try:
            request = PackingRequest.model_validate(payload)
        except ValidationError as exc:
            self._log_invalid("optimize_packing", exc)
            return validation_failure("Invalid packing request payload", exc)
        constraints = request.to_constraints()
        return self.optimize_packing(
            [item.to_domain() for item in request.items],
            essential_keywords=constraints.essential_keywords,
            bag_size=constraints.bag_size,
            max_weight=constraints.max_weight,
            max_items=constraints.max_items,
        )

    def plan_trip_from_payload(self, payload: Dict[str, Any]) -> PackingRecommendation | Dict[str, Any]:
        try:
            request = TripPlanRequest.model_validate(payload)
        except ValidationError as exc:
            self._log_invalid("plan_trip", exc)
            return validation_failure("Invalid trip plan payload", exc)
        return self.plan_trip(
            [day.to_domain() for day in request.days],
            [item.to_domain() for item in request.items],
            bag_size=request.bag_size,
            essential_keywords=request.essential_keywords,
            cultural_notes=request.cultural_notes,
        )

    @staticmethod
    def _log_invalid(operation: str, exc: ValidationError) -> None:
        log_event(
            LOGGER,
            logging.WARNING,
            "request_invalid",
            operation=operation,
            error_count=exc.error_count(),
            errors=exc.errors(include_url=False, include_context=False),
        )


__all__ = ["PackrEngine"]
