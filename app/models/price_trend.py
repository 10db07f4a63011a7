"""
Price trend models - the synthetic monthly flight price series.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from enum import Enum

from .trip import Currency, TripStyle


class Season(str, Enum):
    SUMMER = "summer"
    WINTER = "winter"
    SPRING = "spring"
    FALL = "fall"


class PricePoint(BaseModel):
    """One month of the trend."""
    month: str = Field(..., description="Label, e.g. 'Jan 2027'")
    month_date: date = Field(..., description="Date the month was advanced to")
    season: Season
    price: int = Field(..., description="Round-trip price in the series currency")
    is_low_price: bool = Field(
        default=False,
        description="Below the style-adjusted base price"
    )


class ChartBounds(BaseModel):
    """Vertical axis range for the trend chart."""
    lower: int
    upper: int
    unit: int = Field(..., description="Rounding unit of the currency")


class PriceTrend(BaseModel):
    """Twelve-month price series with the values the chart needs."""
    destination: str
    origin: Optional[str] = None
    trip_style: TripStyle
    currency: Currency
    points: list[PricePoint] = Field(default_factory=list)
    lowest_price: int
    highest_price: int
    best_month: str = Field(..., description="First month with the lowest price")
    bounds: ChartBounds
