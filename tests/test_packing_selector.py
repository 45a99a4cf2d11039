"""Essential partitioning, greedy admission, deduplication and packing scores."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.dimension_estimator import ItemDimensionEstimator
from logic.packing_selector import (
    ACTIVITY_MATCH_PLACEHOLDER,
    WEATHER_MATCH_PLACEHOLDER,
    PackingSelector,
    greedy_admission,
    is_essential,
    optional_item_score,
    rank_optional_items,
    remove_duplicates,
)
from models.capacity import BagCapacity, CategoryDimensions, DimensionTable
from models.clothing_item import ClothingItem
from models.packing import PackingConstraints
from models.taxonomy import BagSize, ClothingCategory


def _item(
    item_id: str,
    category: str = "tops",
    subcategory: str | None = None,
    color: str | None = None,
    formality: int = 2,
    tags: List[str] | None = None,
    weather: List[str] | None = None,
) -> ClothingItem:
    return ClothingItem(
        item_id=item_id,
        name=item_id,
        category=category,
        subcategory=subcategory or item_id,
        color=color or item_id,
        tags=tags or [],
        weather_suitability=weather or [],
        formality_level=formality,
    )


def _fifty_litre_selector() -> PackingSelector:
    # Dresses sized so ten of them come to exactly 50L / 5kg.
    dimensions = dict(DimensionTable().dimensions)
    dimensions[ClothingCategory.DRESSES] = CategoryDimensions(5, 0.5, foldable=True, compressible=True)
    return PackingSelector(estimator=ItemDimensionEstimator(DimensionTable(dimensions=dimensions)))


def test_essential_keywords_match_category_or_subcategory_substring():
    briefs = _item("briefs", "undergarments", subcategory="boxer briefs")
    pjs = _item("pjs", "sleepwear", subcategory="Pajama set")
    tee = _item("tee", "tops", subcategory="t-shirt")

    assert is_essential(briefs, ["UNDERGARMENT"])
    assert is_essential(briefs, ["boxer"])
    assert is_essential(pjs, ["pajama"])
    assert not is_essential(tee, ["undergarments", "", "  "])
    assert is_essential(briefs, "undergarments")
    assert not is_essential(tee, "undergarments")


def test_category_keywords_match_exactly():
    tee = _item("tee", "tops", subcategory="tops and tees")
    assert is_essential(tee, [ClothingCategory.TOPS])
    assert not is_essential(_item("pants", "bottoms", subcategory="tops"), [ClothingCategory.TOPS])


def test_optional_ranking_is_descending_and_stable():
    low = _item("low", formality=1)
    tagged = _item("tagged", formality=1, tags=["a", "b"])
    weathery = _item("weathery", formality=1, weather=["warm"])
    twin = _item("twin", formality=1, weather=["mild"])

    assert optional_item_score(weathery) == pytest.approx(0.5)
    ranked = rank_optional_items([low, weathery, tagged, twin])
    assert [item.item_id for item in ranked] == ["weathery", "twin", "tagged", "low"]


def test_carry_on_with_fifty_litres_of_essentials_admits_three_optionals():
    selector = _fifty_litre_selector()
    essentials = [_item(f"dress{index}", "dresses") for index in range(10)]
    optionals = [_item(f"top{index}", "tops") for index in range(10)]

    result = selector.select(
        essentials + optionals,
        PackingConstraints(bag_size=BagSize.CARRY_ON, essential_keywords=[ClothingCategory.DRESSES]),
    )

    assert not result.capacity_exceeded
    assert result.remaining_capacity.volume == pytest.approx(6)
    assert result.remaining_capacity.weight == pytest.approx(2)
    assert [item.item_id for item in result.admitted_items] == ["top0", "top1", "top2"]
    assert len(result.items) == 13


def test_admitted_optionals_never_exceed_remaining_capacity():
    selector = PackingSelector()
    pool = [_item(f"essential-shoe{index}", "shoes") for index in range(4)] + [
        _item(f"coat{index}", "outerwear", weather=["cold"] * (index % 3 + 1)) for index in range(6)
    ] + [_item(f"tee{index}", "tops", tags=["cotton"]) for index in range(8)]

    result = selector.select(pool, PackingConstraints(bag_size="backpack", essential_keywords=["shoes"]))
    volume, weight = selector.estimator.totals(result.admitted_items)

    assert volume <= result.remaining_capacity.volume + 1e-9
    assert weight <= result.remaining_capacity.weight + 1e-9


def test_greedy_admission_does_not_backtrack():
    estimator = ItemDimensionEstimator()
    ranked = [_item("coat", "outerwear"), _item("shoe", "shoes"), _item("tee", "tops")]
    admitted = greedy_admission(ranked, BagCapacity(volume=7, weight=5), estimator)
    # The coat is rejected and never retried; the shoe and then the tee are checked in order.
    assert [item.item_id for item in admitted] == ["shoe"]


def test_duplicates_are_collapsed_to_first_occurrence():
    clones = [_item(f"clone{index}", "tops", subcategory="Polo", color="Navy" if index % 2 else "navy") for index in range(5)]
    plan = PackingSelector().build_plan(clones, PackingConstraints(bag_size="checked_large"))

    assert [item.item_id for item in plan.items] == ["clone0"]
    assert remove_duplicates(clones) == [clones[0]]
    assert [item.item_id for item in plan.optional_items] == ["clone0"]
    assert len({item.identity_key for item in plan.optional_items}) == len(plan.optional_items)


def test_partitions_and_counts_exclude_collapsed_duplicates():
    pool = [_item(f"sock{index}", "undergarments", subcategory="socks", color="grey") for index in range(3)] + [
        _item(f"tee{index}", "tops", subcategory="tee", color="white") for index in range(3)
    ]
    result = PackingSelector().select(
        pool, PackingConstraints(bag_size="checked_large", essential_keywords=["socks"])
    )

    assert [item.item_id for item in result.essential_items] == ["sock0"]
    assert [item.item_id for item in result.admitted_items] == ["tee0"]
    assert result.diagnostics["essential_count"] == 1
    assert result.diagnostics["admitted_count"] == 1
    assert result.diagnostics["duplicates_removed"] == 4


def test_essential_overflow_is_flagged_and_blocks_optionals(caplog):
    selector = PackingSelector()
    essentials = [_item(f"boots{index}", "shoes") for index in range(10)]
    optional = _item("scarf", "accessories")

    with caplog.at_level("WARNING", logger="logic.packing_selector"):
        plan = selector.build_plan(
            essentials + [optional],
            PackingConstraints(bag_size=BagSize.CARRY_ON, essential_keywords=["shoes"]),
        )

    assert plan.capacity_exceeded
    assert plan.optional_items == []
    assert len(plan.items) == 10
    assert "carry_on" in plan.notes[0]
    assert any("Essential items need" in record.getMessage() for record in caplog.records)


def test_max_items_caps_optionals_but_keeps_essentials():
    pool = [_item("briefs", "undergarments")] + [_item(f"tee{index}", "tops") for index in range(5)]
    plan = PackingSelector().build_plan(
        pool, PackingConstraints(bag_size="checked_large", essential_keywords=["undergarments"], max_items=3)
    )
    assert [item.item_id for item in plan.items] == ["briefs", "tee0", "tee1"]
    assert plan.notes == ["Item limit of 3 reached."]


def test_max_weight_tightens_budget():
    pool = [_item(f"coat{index}", "outerwear") for index in range(5)]
    plan = PackingSelector().build_plan(pool, PackingConstraints(bag_size="checked_large", max_weight=2.5))
    assert len(plan.items) == 2


def test_constraints_reject_negative_limits():
    with pytest.raises(ValueError):
        PackingConstraints(bag_size="carry_on", max_weight=-1)
    with pytest.raises(ValueError):
        PackingConstraints(bag_size="carry_on", max_items=-1)
    with pytest.raises(ValueError):
        PackingConstraints(bag_size="steamer_trunk")


def test_packing_score_uses_named_placeholders():
    selection = [_item("tee", "tops"), _item("jeans", "bottoms"), _item("sneakers", "shoes")]
    score = PackingSelector().calculate_packing_score(selection, BagSize.CARRY_ON)

    assert score.utilization == pytest.approx(11 / 56)
    assert score.versatility == pytest.approx(0.3)
    assert score.weather_match == WEATHER_MATCH_PLACEHOLDER
    assert score.activity_match == ACTIVITY_MATCH_PLACEHOLDER
    expected = 0.2 * (11 / 56) + 0.3 * 0.3 + 0.3 * 0.8 + 0.2 * 0.8
    assert score.overall == pytest.approx(expected)


def test_utilization_component_is_capped_at_one():
    selection = [_item(f"coat{index}", "outerwear") for index in range(10)]
    score = PackingSelector().calculate_packing_score(selection, BagSize.CARRY_ON)
    assert score.utilization == 1.0


def test_custom_admission_strategy_is_used():
    calls = []

    def take_nothing(ranked, remaining, estimator, max_count):
        calls.append(len(ranked))
        return []

    selector = PackingSelector(admission_strategy=take_nothing)
    items = selector.optimize([_item("tee"), _item("briefs", "undergarments")], ["undergarments"], "carry_on")

    assert [item.item_id for item in items] == ["briefs"]
    assert calls == [1]
