"""Sheet packing endpoint."""

import logging

from fastapi import APIRouter

from sheetfit.domain.value_objects import ItemRequest, StockSheet
from sheetfit.infrastructure.bin_packing import ShelfBinPacker
from sheetfit.web.schemas.requests import OptimizeRequest
from sheetfit.web.schemas.responses import PackResultSchema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["optimize"])


@router.post("/optimize", response_model=PackResultSchema)
async def optimize(request: OptimizeRequest) -> PackResultSchema:
    """Pack the requested items onto one sheet.

    Invalid dimensions or quantities are rejected with 422 before any
    item is placed.
    """
    sheet = StockSheet(width=request.sheet.width, height=request.sheet.height)
    items = [
        ItemRequest(
            id=item.id,
            label=item.label or f"Item {item.id}",
            width=item.width,
            height=item.height,
            quantity=item.quantity,
            color=item.color,
        )
        for item in request.items
    ]

    result = ShelfBinPacker(sheet).fit(items)
    return PackResultSchema.model_validate(result.to_dict())
