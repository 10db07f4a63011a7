"""Data models for the travel savings planner."""
from .trip import TripRequest, PriceTrendRequest, TripStyle, Currency
from .savings_plan import SavingsPlan, CostBreakdown
from .price_trend import PricePoint, PriceTrend, ChartBounds, Season

__all__ = [
    "TripRequest",
    "PriceTrendRequest",
    "TripStyle",
    "Currency",
    "SavingsPlan",
    "CostBreakdown",
    "PricePoint",
    "PriceTrend",
    "ChartBounds",
    "Season",
]
