"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlacedItemSchema(BaseModel):
    """An item placed on the sheet."""

    id: int | str
    instance: int = Field(..., description="Unit index within the request")
    label: str
    x: float
    y: float
    width: float = Field(..., description="Width as placed")
    height: float = Field(..., description="Height as placed")
    rotated: bool
    color: str | None = None


class UnplacedItemSchema(BaseModel):
    """An item unit that did not fit, with its original dimensions."""

    id: int | str
    instance: int
    label: str
    width: float
    height: float
    color: str | None = None


class PackResultSchema(BaseModel):
    """Response for sheet packing."""

    sheet: dict[str, float]
    placed: list[PlacedItemSchema]
    unplaced: list[UnplacedItemSchema]
    efficiency: float = Field(..., description="Placed area as % of sheet area")


class QuoteResponseSchema(BaseModel):
    """Response for quote pricing."""

    area_raw_cm2: float
    area_final_m2: float
    material_cost: float
    unit_cost: float
    unit_price: float
    unit_profit: float
    total_cost: float
    total_revenue: float
    total_profit: float
    record_id: str | None = Field(default=None, description="Set when saved")


class AnalysisResponseSchema(BaseModel):
    """Response for quote history analysis."""

    analysis: str = Field(..., description="Markdown report")
    record_count: int


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str
    error_type: str
    details: Any | None = None
