"""Engine facade: configuration defaults, payload validation and instrumentation."""
from __future__ import annotations

import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import parse_items
from models.capacity import BagCapacity, CapacityModel
from models.outfit import DailyOutfit
from models.packing import PackingConstraints, PackingPlan, PackingRecommendation, SpaceUtilization
from models.taxonomy import BagSize
from models.trip_context import WeatherSnapshot
from packr_app.config import PackrConfig
from packr_app.engine import PackrEngine
from packr_app.logging_config import JsonFormatter, correlation_context


def _raw_items() -> List[Dict[str, object]]:
    return [
        {"item_id": "tee", "category": "tops", "subcategory": "tee", "color": "white", "weather_suitability": ["warm"]},
        {"item_id": "jeans", "category": "bottoms", "subcategory": "jeans", "color": "blue", "weather_suitability": ["warm"]},
        {"item_id": "briefs", "category": "undergarments", "subcategory": "briefs", "color": "black", "weather_suitability": ["warm"]},
        {"item_id": "pjs", "category": "sleepwear", "subcategory": "pajamas", "color": "grey", "weather_suitability": ["mild"]},
        {"item_id": "loafers", "category": "shoes", "subcategory": "loafers", "color": "brown", "weather_suitability": ["warm"], "formality_level": 3},
    ]


def _engine(**overrides) -> PackrEngine:
    return PackrEngine(config=PackrConfig(**overrides))


def test_optimize_packing_defaults_come_from_config():
    engine = _engine(default_bag_size="backpack", essential_keywords=["sleepwear"])
    plan = engine.optimize_packing(parse_items(_raw_items()))

    assert isinstance(plan, PackingPlan)
    assert [item.item_id for item in plan.essential_items] == ["pjs"]
    assert len(plan.items) == 5
    assert plan.score.utilization == pytest.approx(13.5 / 45)


def test_optimize_packing_reports_overflow(caplog):
    engine = _engine()
    items = parse_items(
        [{"item_id": f"boot{index}", "category": "shoes", "subcategory": "boots", "color": str(index)} for index in range(12)]
    )
    with caplog.at_level(logging.WARNING):
        plan = engine.optimize_packing(items, essential_keywords=["shoes"], bag_size=BagSize.CARRY_ON)

    assert plan.capacity_exceeded
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Essential items need" in warnings[0].getMessage()


def test_single_keyword_string_is_one_keyword():
    engine = _engine()
    plan = engine.optimize_packing(parse_items(_raw_items()), essential_keywords="undergarments")

    assert [item.item_id for item in plan.essential_items] == ["briefs"]
    assert PackingConstraints(bag_size="carry_on", essential_keywords="jeans").essential_keywords == ["jeans"]


def test_engine_accepts_custom_capacity_model():
    tight = CapacityModel().with_overrides({BagSize.CARRY_ON: BagCapacity(volume=3, weight=1)})
    engine = PackrEngine(config=PackrConfig(), capacity_model=tight)
    usage = engine.analyze_space(parse_items(_raw_items())[:2])

    assert isinstance(usage, SpaceUtilization)
    assert usage.total_volume == 3
    assert usage.utilization_percentage == pytest.approx(5 / 3 * 100)


def test_suggest_and_reorder_through_engine():
    engine = _engine()
    items = parse_items(_raw_items())
    assert engine.suggest_bag_size(items) is BagSize.CARRY_ON
    assert sorted(item.item_id for item in engine.optimize_space_usage(items)) == sorted(
        item.item_id for item in items
    )


def test_daily_outfit_from_payload():
    engine = _engine()
    outfit = engine.generate_daily_outfit_from_payload(
        {
            "date": "2024-06-12",
            "weather": {"date": "2024-06-12", "temp_min": 18, "temp_max": 26},
            "activities": [{"type": "sightseeing", "name": "Market", "formality_level": 2}],
            "items": _raw_items(),
            "cultural_notes": ["Shops close at noon"],
        }
    )

    assert isinstance(outfit, DailyOutfit)
    assert outfit.outfit.tops.item_id == "tee"
    assert outfit.outfit.shoes.item_id == "loafers"
    assert outfit.notes == ["Shops close at noon"]


def test_invalid_payload_returns_review_envelope():
    engine = _engine()
    response = engine.generate_daily_outfit_from_payload(
        {
            "date": "2024-06-12",
            "weather": {"date": "2024-06-12", "temp_min": 30, "temp_max": 20},
            "items": [{"item_id": "x", "category": "capes"}],
        }
    )

    assert response["status"] == "needs_review"
    assert response["message"] == "Invalid outfit request payload"
    locations = [tuple(detail["loc"]) for detail in response["details"]]
    assert ("weather",) in locations
    assert ("items", 0, "category") in locations
    json.dumps(response)


def test_packing_payload_validation():
    engine = _engine()
    bad = engine.optimize_packing_from_payload({"items": [], "bag_size": "steamer_trunk", "max_items": -1})
    assert bad["status"] == "needs_review"
    assert {detail["loc"][0] for detail in bad["details"]} == {"bag_size", "max_items"}

    plan = engine.optimize_packing_from_payload(
        {"items": _raw_items(), "bag_size": "carry_on", "essential_keywords": [" briefs ", ""], "max_items": 2}
    )
    assert [item.item_id for item in plan.essential_items] == ["briefs"]
    assert len(plan.items) == 2


def test_plan_trip_from_payload():
    engine = _engine()
    payload = {
        "days": [
            {
                "weather": {"date": "2024-06-12", "temp_min": 18, "temp_max": 26},
                "activities": [{"type": "shopping", "name": "Market", "formality_level": 2}],
            }
        ],
        "items": _raw_items(),
    }
    recommendation = engine.plan_trip_from_payload(payload)

    assert isinstance(recommendation, PackingRecommendation)
    assert recommendation.bag_size is BagSize.CARRY_ON
    assert "pjs" in [item.item_id for item in recommendation.total_items]

    empty = engine.plan_trip_from_payload({"days": [], "items": []})
    assert empty["status"] == "needs_review"


def test_operations_emit_structured_events(caplog):
    engine = _engine()
    with caplog.at_level(logging.INFO):
        engine.suggest_bag_size([])

    events = [getattr(record, "event", None) for record in caplog.records]
    assert "operation_started" in events
    assert "operation_completed" in events
    completed = next(record for record in caplog.records if getattr(record, "event", None) == "operation_completed")
    assert completed.operation == "suggest_bag_size"
    assert completed.duration_ms >= 0

    rendered = json.loads(JsonFormatter().format(completed))
    assert rendered["event"] == "operation_completed"
    assert rendered["correlation_id"]


def test_failed_operation_is_logged_and_reraised(caplog):
    engine = _engine()
    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValueError):
            engine.analyze_space([], bag_size="steamer_trunk")
    assert any(getattr(record, "event", None) == "operation_failed" for record in caplog.records)


def test_outfit_for_day_without_activities():
    engine = _engine()
    weather = WeatherSnapshot(date=date(2024, 6, 12), temp_min=18, temp_max=26)
    outfit = engine.generate_daily_outfit(date(2024, 6, 12), weather, [], parse_items(_raw_items()))

    assert outfit.outfit.tops.item_id == "tee"
    assert outfit.outfit.shoes.item_id == "loafers"


def _completed_ids(caplog) -> List[str]:
    return [
        record.correlation_id
        for record in caplog.records
        if getattr(record, "event", None) == "operation_completed"
    ]


def test_each_operation_gets_its_own_correlation_id(caplog):
    engine = _engine()
    with caplog.at_level(logging.INFO):
        engine.suggest_bag_size([])
        engine.suggest_bag_size([])

    first, second = _completed_ids(caplog)
    assert first and second
    assert first != second


def test_operations_inside_an_outer_context_share_its_id(caplog):
    engine = _engine()
    with caplog.at_level(logging.INFO):
        with correlation_context("trip-9"):
            engine.suggest_bag_size([])
            engine.analyze_space([])

    assert _completed_ids(caplog) == ["trip-9", "trip-9"]


def test_invalid_payload_log_record_is_redacted_json(caplog):
    engine = _engine()
    with caplog.at_level(logging.WARNING):
        engine.optimize_packing_from_payload({"items": [{"item_id": "x", "category": "capes"}], "bag_size": "duffel"})

    record = next(record for record in caplog.records if getattr(record, "event", None) == "request_invalid")
    rendered = json.loads(JsonFormatter().format(record))

    assert rendered["operation"] == "optimize_packing"
    assert rendered["error_count"] == 1
    assert rendered["errors"][0]["input"] == "[redacted]"
