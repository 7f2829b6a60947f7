"""Unit pricing for corrugated boxes.

Prices a box from its outer dimensions, the cost of the chosen board
grade per square metre, fixed per-unit fabrication and marketing costs
and a target margin. Pure arithmetic: nothing here reads or writes
packing data or quote history.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from sheetfit.domain.errors import InvalidDimension

# Extra board consumed by flaps, trim and glue tabs.
DEFAULT_WASTE_FACTOR = 1.25

CM2_PER_M2 = 10_000.0


class MaterialGrade(str, Enum):
    """Board grade offered in quotes."""

    A = "A"
    B = "B"


@dataclass(frozen=True)
class BoxDimensions:
    """Outer box dimensions in centimetres."""

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidDimension(f"box {name}", value)

    @property
    def surface_area_cm2(self) -> float:
        """Unfolded surface of the six faces."""
        lw = self.length * self.width
        lh = self.length * self.height
        wh = self.width * self.height
        return 2 * (lw + lh + wh)


@dataclass(frozen=True)
class MaterialCosts:
    """Board price per square metre for each grade."""

    grade_a: float = 0.85
    grade_b: float = 1.20

    def __post_init__(self) -> None:
        if self.grade_a < 0 or self.grade_b < 0:
            raise ValueError("Material costs must be non-negative")

    def price_for(self, grade: MaterialGrade) -> float:
        return self.grade_a if grade == MaterialGrade.A else self.grade_b


@dataclass(frozen=True)
class QuoteInput:
    """Everything the calculator needs to price one box design.

    Attributes:
        dimensions: Outer box dimensions (cm).
        material: Board grade used.
        material_costs: Price per m² of each grade.
        fabrication_cost: Per-unit fabrication cost.
        marketing_cost: Per-unit marketing cost.
        margin_percent: Markup applied on top of unit cost.
        volume: Number of units in the project.
        waste_factor: Multiplier applied to raw surface area.
    """

    dimensions: BoxDimensions
    material: MaterialGrade = MaterialGrade.A
    material_costs: MaterialCosts = field(default_factory=MaterialCosts)
    fabrication_cost: float = 0.50
    marketing_cost: float = 0.20
    margin_percent: float = 30.0
    volume: int = 1000
    waste_factor: float = DEFAULT_WASTE_FACTOR

    def __post_init__(self) -> None:
        if self.fabrication_cost < 0 or self.marketing_cost < 0:
            raise ValueError("Operational costs must be non-negative")
        if self.margin_percent < 0:
            raise ValueError("Margin must be non-negative")
        if self.volume < 1:
            raise ValueError("Volume must be at least 1")
        if self.waste_factor < 1:
            raise ValueError("Waste factor must be at least 1")


@dataclass(frozen=True)
class QuoteBreakdown:
    """Result of pricing a QuoteInput. Money values are per unit unless
    prefixed with ``total_``."""

    area_raw_cm2: float
    area_final_m2: float
    material_cost: float
    unit_cost: float
    unit_price: float
    unit_profit: float
    total_cost: float
    total_revenue: float
    total_profit: float


def calculate_quote(quote: QuoteInput) -> QuoteBreakdown:
    """Price one box design.

    Example:
        >>> q = QuoteInput(dimensions=BoxDimensions(30, 20, 15))
        >>> round(calculate_quote(q).unit_price, 4)
        1.2829
    """
    area_raw = quote.dimensions.surface_area_cm2
    area_final = area_raw / CM2_PER_M2 * quote.waste_factor
    material_cost = area_final * quote.material_costs.price_for(quote.material)

    unit_cost = material_cost + quote.fabrication_cost + quote.marketing_cost
    unit_price = unit_cost * (1 + quote.margin_percent / 100)
    unit_profit = unit_price - unit_cost

    return QuoteBreakdown(
        area_raw_cm2=area_raw,
        area_final_m2=area_final,
        material_cost=material_cost,
        unit_cost=unit_cost,
        unit_price=unit_price,
        unit_profit=unit_profit,
        total_cost=unit_cost * quote.volume,
        total_revenue=unit_price * quote.volume,
        total_profit=unit_profit * quote.volume,
    )
