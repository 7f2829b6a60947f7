"""Tests for the shelf bin packer.

Tests cover:
- Reference layouts (mixed sizes, oversized, rotation, full shelf)
- Placement invariants: inside the sheet, no overlap, shelf alignment
- Best-width-fit shelf choice and tie-breaking
- Height-descending order with stable ties
- Quantity expansion and zero quantities
- Input validation before any placement
- Per-call isolation and determinism
"""

from __future__ import annotations

import pytest

from sheetfit.domain.errors import InvalidDimension, InvalidQuantity
from sheetfit.domain.value_objects import (
    ItemInstance,
    ItemRequest,
    PackResult,
    StockSheet,
)
from sheetfit.infrastructure.bin_packing import (
    ShelfBinPacker,
    ShelfManager,
    calculate_efficiency,
    fit,
)


# =============================================================================
# Helpers
# =============================================================================


def _item(
    id: int | str, width: float, height: float, quantity: int = 1
) -> ItemRequest:
    return ItemRequest(
        id=id, label=f"Item {id}", width=width, height=height, quantity=quantity
    )


def _instance(width: float, height: float, index: int = 0) -> ItemInstance:
    return ItemInstance(
        request_id="x", index=index, label="x", width=width, height=height
    )


def _overlaps(a, b) -> bool:
    return (
        a.x < b.right_edge
        and b.x < a.right_edge
        and a.y < b.top_edge
        and b.y < a.top_edge
    )


def _assert_valid_layout(result: PackResult) -> None:
    sheet = result.sheet
    for p in result.placed:
        assert p.x >= 0 and p.y >= 0
        assert p.right_edge <= sheet.width
        assert p.top_edge <= sheet.height
    for i, a in enumerate(result.placed):
        for b in result.placed[i + 1 :]:
            assert not _overlaps(a, b), f"{a} overlaps {b}"


# =============================================================================
# Reference layouts
# =============================================================================


class TestReferenceLayouts:
    """Known inputs with hand-checked layouts."""

    def test_mixed_sizes_all_placed(self) -> None:
        """Seven units on a 200x100 sheet all fit."""
        result = fit(200, 100, [_item(1, 30, 20, 5), _item(2, 40, 40, 2)])

        assert len(result.placed) == 7
        assert result.unplaced == ()
        assert result.efficiency > 0
        _assert_valid_layout(result)

    def test_mixed_sizes_layout(self) -> None:
        """Tall items open the first shelf; the short ones fill it, then overflow."""
        result = fit(200, 100, [_item(1, 30, 20, 5), _item(2, 40, 40, 2)])

        positions = [(p.item.request_id, p.x, p.y) for p in result.placed]
        assert positions == [
            (2, 0, 0),
            (2, 40, 0),
            (1, 80, 0),
            (1, 110, 0),
            (1, 140, 0),
            (1, 170, 0),
            (1, 0, 40),
        ]
        assert result.efficiency == pytest.approx(31.0)

    def test_item_larger_than_sheet_is_unplaced(self) -> None:
        result = fit(10, 10, [_item(1, 20, 20)])

        assert result.placed == ()
        assert len(result.unplaced) == 1
        assert result.efficiency == 0

    def test_rotation_used_when_original_does_not_fit(self) -> None:
        result = fit(50, 10, [_item(1, 5, 20)])

        assert len(result.placed) == 1
        placed = result.placed[0]
        assert placed.rotated is True
        assert (placed.x, placed.y) == (0, 0)
        assert (placed.width, placed.height) == (20, 5)

    def test_full_shelf_and_no_room_for_another(self) -> None:
        """Second unit fails the shelf (3 < 5) and a new shelf at y=10."""
        result = fit(8, 10, [_item(1, 5, 10, 2)])

        assert len(result.placed) == 1
        assert result.placed[0].x == 0
        assert len(result.unplaced) == 1
        assert result.unplaced[0].index == 1


# =============================================================================
# Shelf selection
# =============================================================================


class TestShelfManager:
    """Tests for shelf opening and best-width-fit selection."""

    def test_first_item_opens_shelf_at_origin(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        assert manager.place_item(_instance(60, 20)) == (0, 0)
        assert len(manager.shelves) == 1
        assert manager.shelves[0].height == 20
        assert manager.shelves[0].free_width == 40

    def test_new_shelf_stacks_on_previous(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        manager.place_item(_instance(60, 20))
        assert manager.place_item(_instance(60, 30)) == (0, 20)
        assert manager.used_height == 50

    def test_best_fit_prefers_least_leftover(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        manager.place_item(_instance(60, 20))  # shelf 0: 40 free
        manager.place_item(_instance(70, 30))  # shelf 1: 30 free

        assert manager.place_item(_instance(25, 10)) == (70, 20)

    def test_tie_goes_to_earliest_shelf(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        manager.place_item(_instance(60, 20))  # shelf 0: 40 free
        manager.place_item(_instance(60, 30))  # shelf 1: 40 free

        assert manager.place_item(_instance(30, 10)) == (60, 0)

    def test_item_taller_than_shelf_not_accepted(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        manager.place_item(_instance(10, 20))
        assert manager.best_shelf(_instance(10, 25)) is None

    def test_failed_placement_leaves_shelves_untouched(self) -> None:
        manager = ShelfManager(StockSheet(100, 30))
        manager.place_item(_instance(60, 20))

        assert manager.place_item(_instance(50, 20)) is None
        assert len(manager.shelves) == 1
        assert manager.shelves[0].free_width == 40

    def test_item_wider_than_sheet_opens_no_shelf(self) -> None:
        manager = ShelfManager(StockSheet(100, 100))
        assert manager.open_shelf(_instance(120, 10)) is None
        assert manager.shelves == []

    def test_exact_fit_is_accepted(self) -> None:
        manager = ShelfManager(StockSheet(100, 50))
        assert manager.place_item(_instance(100, 50)) == (0, 0)
        assert manager.shelves[0].free_width == 0


# =============================================================================
# Ordering and expansion
# =============================================================================


class TestOrdering:
    """Tests for height-descending order and quantity expansion."""

    def test_taller_items_placed_first(self) -> None:
        result = fit(100, 100, [_item("short", 10, 10), _item("tall", 10, 40)])
        assert [p.item.request_id for p in result.placed] == ["tall", "short"]

    def test_equal_heights_keep_input_order(self) -> None:
        items = [_item("b", 10, 20), _item("a", 15, 20), _item("c", 5, 20)]
        result = fit(100, 100, items)
        assert [p.item.request_id for p in result.placed] == ["b", "a", "c"]

    def test_quantity_expands_into_indexed_instances(self) -> None:
        result = fit(100, 100, [_item(7, 10, 10, 3)])
        assert [p.item.instance_id for p in result.placed] == ["7-0", "7-1", "7-2"]

    def test_zero_quantity_places_nothing(self) -> None:
        result = fit(100, 100, [_item(1, 10, 10, 0)])
        assert result.placed == ()
        assert result.unplaced == ()
        assert result.efficiency == 0

    def test_empty_request_list(self) -> None:
        result = fit(100, 100, [])
        assert result.all_placed is True
        assert result.efficiency == 0

    def test_unplaced_keeps_original_dimensions(self) -> None:
        result = fit(10, 10, [_item(1, 12, 30)])
        unplaced = result.unplaced[0]
        assert (unplaced.width, unplaced.height) == (12, 30)
        assert unplaced.rotated is False

    def test_placed_count_plus_unplaced_equals_total_quantity(self) -> None:
        items = [_item(1, 30, 30, 4), _item(2, 45, 10, 6), _item(3, 90, 90, 1)]
        result = fit(100, 60, items)

        assert len(result.placed) + len(result.unplaced) == 11
        _assert_valid_layout(result)


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    """Invalid input is rejected before packing starts."""

    @pytest.mark.parametrize(
        "width,height", [(0, 10), (10, -5), (float("nan"), 10), (10, float("inf"))]
    )
    def test_invalid_sheet_dimension(self, width: float, height: float) -> None:
        with pytest.raises(InvalidDimension):
            fit(width, height, [])

    @pytest.mark.parametrize("width,height", [(0, 10), (10, -1), ("10", 5)])
    def test_invalid_item_dimension(self, width, height) -> None:
        with pytest.raises(InvalidDimension):
            _item(1, width, height)

    @pytest.mark.parametrize("quantity", [-1, 1.5, True, "2"])
    def test_invalid_quantity(self, quantity) -> None:
        with pytest.raises(InvalidQuantity):
            _item(1, 10, 10, quantity)

    def test_invalid_dimension_names_the_field(self) -> None:
        with pytest.raises(InvalidDimension, match="height of 'Item 1'"):
            _item(1, 10, 0)


# =============================================================================
# Isolation and efficiency
# =============================================================================


class TestShelfBinPacker:
    """Tests for packer reuse and efficiency."""

    def test_repeated_calls_are_identical(self) -> None:
        packer = ShelfBinPacker(StockSheet(120, 80))
        items = [_item(1, 30, 20, 5), _item(2, 50, 25, 3), _item(3, 15, 60, 2)]

        first = packer.fit(items)
        second = packer.fit(items)

        assert first == second

    def test_previous_call_does_not_consume_space(self) -> None:
        packer = ShelfBinPacker(StockSheet(10, 10))
        packer.fit([_item(1, 10, 10)])
        result = packer.fit([_item(2, 10, 10)])
        assert len(result.placed) == 1

    def test_full_sheet_is_100_percent(self) -> None:
        result = fit(20, 10, [_item(1, 10, 10, 2)])
        assert result.efficiency == pytest.approx(100.0)
        assert result.waste_percentage == pytest.approx(0.0)

    def test_efficiency_matches_placed_area(self) -> None:
        result = fit(100, 100, [_item(1, 25, 20, 3)])
        assert result.used_area == 1500
        assert calculate_efficiency(result.placed, result.sheet) == pytest.approx(15.0)
