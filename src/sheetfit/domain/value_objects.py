"""Value objects for sheet packing.

All dataclasses are frozen (immutable) so a packing run can share them
freely; the only mutable state of a run lives in its shelf list.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from .errors import InvalidDimension, InvalidQuantity


def _check_dimension(field: str, value: Any) -> None:
    """Raise InvalidDimension unless value is a positive finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDimension(field, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimension(field, value)


@dataclass(frozen=True)
class StockSheet:
    """The rectangular stock sheet items are cut from.

    Attributes:
        width: Horizontal extent of the sheet (shelf width).
        height: Vertical extent of the sheet (shelves stack along it).
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        _check_dimension("sheet width", self.width)
        _check_dimension("sheet height", self.height)

    @property
    def area(self) -> float:
        """Total sheet area."""
        return self.width * self.height


@dataclass(frozen=True)
class ItemRequest:
    """A requested rectangle and how many of it to cut.

    Attributes:
        id: Caller identity of the request (echoed back in results).
        label: Display label.
        width: Requested width.
        height: Requested height.
        quantity: Number of units to place, zero allowed.
        color: Optional display attribute, passed through untouched.
    """

    id: str | int
    label: str
    width: float
    height: float
    quantity: int = 1
    color: str | None = None

    def __post_init__(self) -> None:
        _check_dimension(f"width of '{self.label}'", self.width)
        _check_dimension(f"height of '{self.label}'", self.height)
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidQuantity(self.label, self.quantity)
        if self.quantity < 0:
            raise InvalidQuantity(self.label, self.quantity)

    @property
    def area(self) -> float:
        """Area of a single unit."""
        return self.width * self.height

    def instances(self) -> list[ItemInstance]:
        """Expand this request into one instance per unit of quantity."""
        return [
            ItemInstance(
                request_id=self.id,
                index=i,
                label=self.label,
                width=self.width,
                height=self.height,
                color=self.color,
            )
            for i in range(self.quantity)
        ]


@dataclass(frozen=True)
class ItemInstance:
    """One physical unit of an ItemRequest.

    Width and height are the effective dimensions, swapped when
    ``rotated`` is True.
    """

    request_id: str | int
    index: int
    label: str
    width: float
    height: float
    rotated: bool = False
    color: str | None = None

    @property
    def instance_id(self) -> str:
        return f"{self.request_id}-{self.index}"

    @property
    def area(self) -> float:
        return self.width * self.height

    def rotate(self) -> ItemInstance:
        """Return this instance turned 90 degrees."""
        return replace(
            self, width=self.height, height=self.width, rotated=not self.rotated
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.request_id,
            "instance": self.index,
            "label": self.label,
            "width": self.width,
            "height": self.height,
        }
        if self.color is not None:
            data["color"] = self.color
        return data


@dataclass(frozen=True)
class PlacedItem:
    """An item instance placed at a position on the sheet.

    Coordinates are measured from the packing origin (x to the right,
    y along the shelf stack).

    Attributes:
        item: The instance as placed (dimensions already swapped if rotated).
        x: Left edge of the item.
        y: Bottom edge of the item (the shelf's offset).
    """

    item: ItemInstance
    x: float
    y: float

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def width(self) -> float:
        return self.item.width

    @property
    def height(self) -> float:
        return self.item.height

    @property
    def rotated(self) -> bool:
        return self.item.rotated

    @property
    def right_edge(self) -> float:
        """X coordinate of the item's right edge."""
        return self.x + self.item.width

    @property
    def top_edge(self) -> float:
        """Y coordinate of the item's top edge."""
        return self.y + self.item.height

    @property
    def area(self) -> float:
        return self.item.area

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.item.request_id,
            "instance": self.item.index,
            "label": self.item.label,
            "x": self.x,
            "y": self.y,
            "width": self.item.width,
            "height": self.item.height,
            "rotated": self.item.rotated,
        }
        if self.item.color is not None:
            data["color"] = self.item.color
        return data


@dataclass(frozen=True)
class PackResult:
    """Outcome of packing a list of requests onto one sheet.

    Attributes:
        sheet: The sheet that was packed.
        placed: Placed items in placement order.
        unplaced: Instances that did not fit, with original dimensions.
        efficiency: Placed area as a percentage of sheet area.
    """

    sheet: StockSheet
    placed: tuple[PlacedItem, ...]
    unplaced: tuple[ItemInstance, ...]
    efficiency: float

    def __post_init__(self) -> None:
        if self.efficiency < 0 or self.efficiency > 100:
            raise ValueError("Efficiency must be between 0 and 100")

    @property
    def used_area(self) -> float:
        return sum(p.area for p in self.placed)

    @property
    def waste_percentage(self) -> float:
        return 100.0 - self.efficiency

    @property
    def all_placed(self) -> bool:
        return not self.unplaced

    def to_dict(self) -> dict[str, Any]:
        """Serializable form for diagram renderers and API clients."""
        return {
            "sheet": {"width": self.sheet.width, "height": self.sheet.height},
            "placed": [p.to_dict() for p in self.placed],
            "unplaced": [u.to_dict() for u in self.unplaced],
            "efficiency": self.efficiency,
        }
