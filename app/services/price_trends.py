"""
Flight Price Trends.
Generates a synthetic twelve-month flight price series for the trend chart.
"""
import calendar
import logging
import random
from datetime import date
from typing import Optional

from ..config import settings
from ..models.price_trend import ChartBounds, PricePoint, PriceTrend, Season
from ..models.trip import (
    Currency,
    PriceTrendRequest,
    TripStyle,
    parse_currency,
    parse_trip_style,
    require_destination,
)
from .currency import axis_unit, convert, round_half_up, round_outward
from .travel_data import TravelDataCatalog, travel_data

logger = logging.getLogger(__name__)

# Random noise applied to every month
VARIATION_RANGE = (0.9, 1.1)


def add_months(start: date, months: int) -> date:
    """Advance by calendar months, clamping the day to the month's length."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def season_for_month(month_index: int) -> Season:
    """Season of a 0-indexed calendar month (0 = January)."""
    if 5 <= month_index <= 7:
        return Season.SUMMER
    if month_index >= 11 or month_index <= 1:
        return Season.WINTER
    if 2 <= month_index <= 4:
        return Season.SPRING
    return Season.FALL


class PriceSeriesGenerator:
    """Seasonal flight prices with bounded random noise."""

    def __init__(self, rng: random.Random = None, catalog: TravelDataCatalog = None):
        self.rng = rng or random.Random()
        self.catalog = catalog or travel_data

    def generate_series(
        self,
        destination: str,
        origin: Optional[str],
        trip_style: TripStyle,
        as_of: Optional[date] = None,
        months: Optional[int] = None,
    ) -> list[PricePoint]:
        """Monthly USD prices starting at ``as_of``."""
        as_of = as_of or date.today()
        if months is None:
            months = settings.price_trend_months
        destination = require_destination(destination)
        trip_style = parse_trip_style(trip_style)

        base_price = self.catalog.get_base_flight_price(origin, destination)
        seasonal = self.catalog.get_seasonal_multipliers(destination)
        style_multiplier = self.catalog.get_style_multipliers(trip_style)["flight"]
        # "Low" means below the style-adjusted sticker price, not the seasonal one
        low_threshold = base_price * style_multiplier

        points = []
        for i in range(months):
            month_date = add_months(as_of, i)
            season = season_for_month(month_date.month - 1)
            variation = self.rng.uniform(*VARIATION_RANGE)
            price = round_half_up(base_price * seasonal[season] * variation * style_multiplier)
            points.append(PricePoint(
                month=month_date.strftime("%b %Y"),
                month_date=month_date,
                season=season,
                price=price,
                is_low_price=price < low_threshold,
            ))
        return points

    def build_trend(
        self,
        destination: str,
        origin: Optional[str],
        trip_style: TripStyle,
        currency: Currency = Currency.USD,
        as_of: Optional[date] = None,
    ) -> PriceTrend:
        """Series in the display currency plus the lowest month and axis bounds."""
        destination = require_destination(destination)
        trip_style = parse_trip_style(trip_style)
        currency = parse_currency(currency)
        points = [
            point.model_copy(update={"price": int(convert(point.price, currency))})
            for point in self.generate_series(destination, origin, trip_style, as_of)
        ]

        prices = [p.price for p in points]
        lowest = min(prices)
        highest = max(prices)
        best = next(p for p in points if p.price == lowest)
        lower, upper = round_outward(lowest, highest, currency)

        logger.debug(
            f"Price trend {origin or '-'} -> {destination} ({trip_style.value}): "
            f"{lowest}-{highest} {currency.value}, best {best.month}"
        )
        return PriceTrend(
            destination=destination,
            origin=origin,
            trip_style=trip_style,
            currency=currency,
            points=points,
            lowest_price=lowest,
            highest_price=highest,
            best_month=best.month,
            bounds=ChartBounds(lower=lower, upper=upper, unit=axis_unit(currency)),
        )

    def build_trend_request(self, request: PriceTrendRequest, as_of: Optional[date] = None) -> PriceTrend:
        return self.build_trend(
            destination=request.destination,
            origin=request.origin or settings.default_origin,
            trip_style=request.trip_style,
            currency=request.currency,
            as_of=as_of,
        )
