"""
API Routes for the Travel Savings Planner.
"""
import logging
import random

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..errors import TripValidationError
from ..models.price_trend import PriceTrend
from ..models.savings_plan import SavingsPlan
from ..models.trip import PriceTrendRequest, TripRequest
from ..services.currency import format_currency
from ..services.estimator import get_cost_estimator
from ..services.price_trends import PriceSeriesGenerator
from ..services.travel_data import travel_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["travel-savings"])


# Request/Response Models
class DestinationsResponse(BaseModel):
    destinations: list[str]
    origins: list[str]


class TripStylesResponse(BaseModel):
    trip_styles: list[dict]


class SavingsPlanResponse(BaseModel):
    plan: SavingsPlan
    currency: str
    formatted: dict


# Endpoints

@router.get("/destinations", response_model=DestinationsResponse)
async def list_destinations():
    """Destinations and origins the planner has prices for."""
    return DestinationsResponse(
        destinations=travel_data.destinations(),
        origins=travel_data.origins(),
    )


@router.get("/trip-styles", response_model=TripStylesResponse)
async def list_trip_styles():
    """Spending tiers with their cost multipliers."""
    return TripStylesResponse(trip_styles=travel_data.get_trip_styles())


@router.post("/savings-plan", response_model=SavingsPlanResponse)
async def calculate_savings_plan(request: TripRequest):
    """Calculate the cost breakdown and monthly savings target."""
    try:
        plan = get_cost_estimator().estimate_request(request)
    except TripValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_detail())

    currency = request.currency
    return SavingsPlanResponse(
        plan=plan,
        currency=currency.value,
        formatted=plan.to_display_dict(lambda amount: format_currency(amount, currency)),
    )


@router.post("/price-trends", response_model=PriceTrend)
async def get_price_trends(request: PriceTrendRequest):
    """Twelve-month flight price trend for the chart."""
    rng = random.Random(request.seed) if request.seed is not None else None
    generator = PriceSeriesGenerator(rng=rng)
    try:
        return generator.build_trend_request(request)
    except TripValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_detail())
