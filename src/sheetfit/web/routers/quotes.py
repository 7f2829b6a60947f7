"""Quote pricing and history endpoints."""

import logging

from fastapi import APIRouter, Query

from sheetfit.application.commands import QuoteCommand
from sheetfit.domain.services.pricing import BoxDimensions, MaterialCosts, QuoteInput
from sheetfit.infrastructure.quote_store import QuoteRecord
from sheetfit.web.dependencies import QuoteAnalystDep, QuoteStoreDep
from sheetfit.web.exceptions import EmptyHistoryError
from sheetfit.web.schemas.requests import AnalysisRequest, QuoteRequest
from sheetfit.web.schemas.responses import AnalysisResponseSchema, QuoteResponseSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


def _to_quote_input(request: QuoteRequest) -> QuoteInput:
    return QuoteInput(
        dimensions=BoxDimensions(
            length=request.length, width=request.width, height=request.height
        ),
        material=request.material,
        material_costs=MaterialCosts(grade_a=request.price_a, grade_b=request.price_b),
        fabrication_cost=request.fabrication_cost,
        marketing_cost=request.marketing_cost,
        margin_percent=request.margin_percent,
        volume=request.volume,
        waste_factor=request.waste_factor,
    )


@router.post("", response_model=QuoteResponseSchema)
async def create_quote(
    request: QuoteRequest, store: QuoteStoreDep
) -> QuoteResponseSchema:
    """Price a box design, saving it to history when ``save`` is set."""
    outcome = QuoteCommand(store).execute(_to_quote_input(request), save=request.save)
    b = outcome.breakdown
    return QuoteResponseSchema(
        area_raw_cm2=b.area_raw_cm2,
        area_final_m2=b.area_final_m2,
        material_cost=b.material_cost,
        unit_cost=b.unit_cost,
        unit_price=b.unit_price,
        unit_profit=b.unit_profit,
        total_cost=b.total_cost,
        total_revenue=b.total_revenue,
        total_profit=b.total_profit,
        record_id=outcome.record.id if outcome.record else None,
    )


@router.get("", response_model=list[QuoteRecord])
async def list_quotes(
    store: QuoteStoreDep,
    limit: int = Query(default=50, ge=1, le=500),
) -> list[QuoteRecord]:
    """Return saved quotes, newest first."""
    return store.recent(limit)


@router.post("/analysis", response_model=AnalysisResponseSchema)
async def analyze_quotes(
    request: AnalysisRequest,
    store: QuoteStoreDep,
    analyst: QuoteAnalystDep,
) -> AnalysisResponseSchema:
    """Review recent quotes for margin and volume risks."""
    records = store.recent(request.limit)
    if not records:
        raise EmptyHistoryError()

    logger.info("Analyzing %d saved quotes", len(records))
    analysis = await analyst.analyze(records)
    return AnalysisResponseSchema(analysis=analysis, record_count=len(records))
