"""Lightweight evaluation harness for deterministic trip scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.validation import parse_items
from models.packing import PackingRecommendation
from packr_app.config import PackrConfig
from packr_app.engine import PackrEngine


def _evaluate_expectations(expectations: Dict[str, object], recommendation: PackingRecommendation) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    outfits = recommendation.daily_outfits
    checks["one_outfit_per_day"] = all(len(outfit.outfit) >= 1 for outfit in outfits)

    for slot in expectations.get("slots", []):
        checks[f"slot:{slot}"] = any(outfit.outfit.get(slot) is not None for outfit in outfits)
    for slot, item_id in dict(expectations.get("slot_items", {})).items():
        checks[f"slot_item:{slot}"] = all(
            outfit.outfit.get(slot) is not None and outfit.outfit.get(slot).item_id == item_id for outfit in outfits
        )
    for item_id in expectations.get("accessories_include", []):
        checks[f"accessory:{item_id}"] = any(
            any(accessory.item_id == item_id for accessory in outfit.accessories) for outfit in outfits
        )
    if "min_weather_warnings" in expectations:
        checks["min_weather_warnings"] = len(recommendation.weather_warnings) >= int(
            expectations["min_weather_warnings"]
        )
    if "capacity_exceeded" in expectations:
        checks["capacity_exceeded"] = recommendation.capacity_exceeded is bool(expectations["capacity_exceeded"])
    if "min_utilization" in expectations:
        checks["min_utilization"] = recommendation.bag_utilization > float(expectations["min_utilization"])
    if "suggested_bag_not" in expectations:
        checks["suggested_bag_not"] = recommendation.suggested_bag_size.value != expectations["suggested_bag_not"]
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, engine: PackrEngine | None = None) -> Dict[str, object]:
    # Defaults only, so local environment variables cannot skew the suite.
    engine = engine or PackrEngine(config=PackrConfig())
    wardrobe = parse_items(scenario.wardrobe_items)
    recommendation = engine.plan_trip(
        scenario.days,
        wardrobe,
        bag_size=scenario.bag_size,
        essential_keywords=scenario.essential_keywords,
        cultural_notes=scenario.cultural_notes,
    )
    evaluation = _evaluate_expectations(scenario.expectations, recommendation)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(recommendation.daily_outfits),
        "packed_count": len(recommendation.total_items),
        "recommendation": recommendation,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    engine = PackrEngine(config=PackrConfig())
    return [run_scenario(scenario, engine) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
