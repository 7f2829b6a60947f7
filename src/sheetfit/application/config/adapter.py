"""Conversion from job file models to domain objects."""

from __future__ import annotations

from sheetfit.application.config.schema import ItemConfig, PackingJobConfiguration
from sheetfit.domain.value_objects import ItemRequest, StockSheet

# Display colors cycled by integer item id.
ITEM_PALETTE: tuple[str, ...] = (
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#06b6d4",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
)


def color_for(item_id: int | str) -> str | None:
    """Palette color for an item id; string ids get none."""
    if isinstance(item_id, int):
        return ITEM_PALETTE[item_id % len(ITEM_PALETTE)]
    return None


def config_to_sheet(config: PackingJobConfiguration) -> StockSheet:
    return StockSheet(width=config.sheet.width, height=config.sheet.height)


def item_config_to_request(item: ItemConfig) -> ItemRequest:
    return ItemRequest(
        id=item.id,
        label=item.display_label,
        width=item.width,
        height=item.height,
        quantity=item.quantity,
        color=item.color or color_for(item.id),
    )


def config_to_items(config: PackingJobConfiguration) -> list[ItemRequest]:
    """Convert item entries, keeping file order."""
    return [item_config_to_request(item) for item in config.items]
