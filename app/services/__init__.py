"""Services for the travel savings planner."""
from .travel_data import TravelDataCatalog
from .estimator import CostEstimator
from .price_trends import PriceSeriesGenerator

__all__ = [
    "TravelDataCatalog",
    "CostEstimator",
    "PriceSeriesGenerator",
]
