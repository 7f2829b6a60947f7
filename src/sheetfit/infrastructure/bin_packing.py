"""Shelf bin packing for a single stock sheet.

Items are packed into horizontal shelves spanning the full sheet width.
Each shelf's height is fixed by the first item placed on it and items are
laid left-to-right along it. Requests are sorted tallest first, each unit
is tried in its original orientation and then rotated, and anything that
fits neither way is reported back as unplaced rather than raised.

This is a greedy heuristic: it produces guillotine-compatible layouts
but makes no attempt at a minimum-waste solution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sheetfit.domain.value_objects import (
    ItemInstance,
    ItemRequest,
    PackResult,
    PlacedItem,
    StockSheet,
)

logger = logging.getLogger(__name__)


@dataclass
class _Shelf:
    """Internal shelf representation for the packing algorithm.

    Attributes:
        y: Offset of the shelf from the packing origin.
        height: Height of shelf (set by first item placed).
        width: Shelf width, always the sheet width.
        free_width: Width remaining for more items; only ever decreases.
        x: Left edge of the shelf, always 0.
    """

    y: float
    height: float
    width: float
    free_width: float
    x: float = 0.0

    @property
    def used_width(self) -> float:
        return self.width - self.free_width

    def accepts(self, item: ItemInstance) -> bool:
        return item.width <= self.free_width and item.height <= self.height

    def consume(self, item: ItemInstance) -> tuple[float, float]:
        """Claim room for item at the shelf's cursor and return its position."""
        position = (self.x + self.used_width, self.y)
        self.free_width -= item.width
        return position


class ShelfManager:
    """Ordered, append-only list of shelves carved out of one sheet.

    A manager belongs to exactly one packing run. Shelves are never
    compacted, merged or reclaimed once created.
    """

    def __init__(self, sheet: StockSheet) -> None:
        self.sheet = sheet
        self.shelves: list[_Shelf] = []

    @property
    def used_height(self) -> float:
        """Combined height of all shelves, i.e. the y of the next shelf."""
        return sum(shelf.height for shelf in self.shelves)

    def best_shelf(self, item: ItemInstance) -> _Shelf | None:
        """Find the eligible shelf leaving the least width behind.

        Ties go to the earliest shelf.
        """
        best: _Shelf | None = None
        best_leftover = float("inf")
        for shelf in self.shelves:
            if not shelf.accepts(item):
                continue
            leftover = shelf.free_width - item.width
            if leftover < best_leftover:
                best = shelf
                best_leftover = leftover
        return best

    def open_shelf(self, item: ItemInstance) -> _Shelf | None:
        """Start a new shelf sized for item, if the sheet has room for it."""
        y = self.used_height
        if y + item.height > self.sheet.height or item.width > self.sheet.width:
            return None
        shelf = _Shelf(
            y=y,
            height=item.height,
            width=self.sheet.width,
            free_width=self.sheet.width,
        )
        self.shelves.append(shelf)
        logger.debug(
            "Opened shelf %d at y=%s (height %s)", len(self.shelves) - 1, y, item.height
        )
        return shelf

    def place_item(self, item: ItemInstance) -> tuple[float, float] | None:
        """Place item in its current orientation.

        Returns:
            The (x, y) position assigned, or None if it fits nowhere.
            A failed attempt leaves every shelf untouched.
        """
        shelf = self.best_shelf(item) or self.open_shelf(item)
        if shelf is None:
            return None
        return shelf.consume(item)


class ShelfBinPacker:
    """Packs item requests onto a single stock sheet using shelves.

    The packer only holds the immutable sheet; every call to ``fit``
    starts from an empty shelf list, so one instance can be reused or
    shared between threads.

    Attributes:
        sheet: The stock sheet to pack onto.
    """

    def __init__(self, sheet: StockSheet) -> None:
        self.sheet = sheet

    def fit(self, items: Sequence[ItemRequest]) -> PackResult:
        """Pack the requested items onto the sheet.

        Args:
            items: Item requests in caller order. Equal heights keep this
                order.

        Returns:
            PackResult with placed items in placement order, unplaced
            instances with their original dimensions, and the efficiency.
        """
        instances = self._expand(self._sort_by_height(items))
        logger.debug(
            "Packing %d item instances onto %sx%s sheet",
            len(instances),
            self.sheet.width,
            self.sheet.height,
        )

        shelves = ShelfManager(self.sheet)
        placed: list[PlacedItem] = []
        unplaced: list[ItemInstance] = []

        for instance in instances:
            placement = self._place(shelves, instance)
            if placement is None:
                logger.debug(
                    "Item '%s' (%sx%s) does not fit the sheet",
                    instance.instance_id,
                    instance.width,
                    instance.height,
                )
                unplaced.append(instance)
            else:
                placed.append(placement)

        efficiency = calculate_efficiency(placed, self.sheet)
        logger.info(
            "Placed %d of %d items on %d shelves, %.1f%% efficiency",
            len(placed),
            len(instances),
            len(shelves.shelves),
            efficiency,
        )
        return PackResult(
            sheet=self.sheet,
            placed=tuple(placed),
            unplaced=tuple(unplaced),
            efficiency=efficiency,
        )

    def _sort_by_height(self, items: Sequence[ItemRequest]) -> list[ItemRequest]:
        """Sort requests tallest first; sorted() is stable so ties keep input order."""
        return sorted(items, key=lambda item: item.height, reverse=True)

    def _expand(self, items: Sequence[ItemRequest]) -> list[ItemInstance]:
        """Expand each request into one instance per unit of quantity."""
        expanded: list[ItemInstance] = []
        for item in items:
            expanded.extend(item.instances())
        return expanded

    def _place(
        self, shelves: ShelfManager, instance: ItemInstance
    ) -> PlacedItem | None:
        """Try the original orientation, then the rotated one."""
        position = shelves.place_item(instance)
        if position is not None:
            return PlacedItem(item=instance, x=position[0], y=position[1])

        rotated = instance.rotate()
        position = shelves.place_item(rotated)
        if position is not None:
            logger.debug(
                "Item '%s' placed rotated at (%s, %s) as %sx%s",
                instance.instance_id,
                position[0],
                position[1],
                rotated.width,
                rotated.height,
            )
            return PlacedItem(item=rotated, x=position[0], y=position[1])

        return None


def calculate_efficiency(placed: Sequence[PlacedItem], sheet: StockSheet) -> float:
    """Placed area as a percentage of the sheet area, within [0, 100]."""
    used_area = sum(p.area for p in placed)
    return min(100.0, max(0.0, used_area / sheet.area * 100))


def fit(
    sheet_width: float,
    sheet_height: float,
    items: Sequence[ItemRequest],
) -> PackResult:
    """Pack items onto a sheet of the given size.

    Raises:
        InvalidDimension: If the sheet size is not positive.
    """
    return ShelfBinPacker(StockSheet(sheet_width, sheet_height)).fit(items)
