"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from sheetfit.domain.services.pricing import DEFAULT_WASTE_FACTOR, MaterialGrade


class SheetSchema(BaseModel):
    """Stock sheet dimensions. Positivity is checked by the packer."""

    width: float = Field(..., description="Sheet width")
    height: float = Field(..., description="Sheet height")


class ItemRequestSchema(BaseModel):
    """One requested item."""

    id: int | str = Field(..., description="Item identity echoed in results")
    label: str | None = Field(default=None, description="Display label")
    width: float = Field(..., description="Item width")
    height: float = Field(..., description="Item height")
    quantity: int = Field(default=1, description="Units to place")
    color: str | None = Field(default=None, description="Display color, passed through")


class OptimizeRequest(BaseModel):
    """Request for packing items onto one sheet."""

    sheet: SheetSchema
    items: list[ItemRequestSchema] = Field(default_factory=list)


class QuoteRequest(BaseModel):
    """Request for pricing a box."""

    length: float = Field(..., description="Box length in cm")
    width: float = Field(..., description="Box width in cm")
    height: float = Field(..., description="Box height in cm")
    material: MaterialGrade = Field(default=MaterialGrade.A, description="Board grade")
    price_a: float = Field(default=0.85, ge=0, description="Grade A price per m2")
    price_b: float = Field(default=1.20, ge=0, description="Grade B price per m2")
    fabrication_cost: float = Field(default=0.50, ge=0)
    marketing_cost: float = Field(default=0.20, ge=0)
    margin_percent: float = Field(default=30.0, ge=0)
    volume: int = Field(default=1000, ge=1)
    waste_factor: float = Field(default=DEFAULT_WASTE_FACTOR, ge=1)
    save: bool = Field(default=False, description="Append the quote to history")


class AnalysisRequest(BaseModel):
    """Request for an analysis of recent quotes."""

    limit: int = Field(default=50, ge=1, le=500, description="Quotes to analyze")
