"""
Cost Estimator.
Turns a trip request into a cost breakdown and a monthly savings target.
"""
import logging
import math
from datetime import date
from typing import Optional

from ..config import settings
from ..errors import (
    InvalidRangeError,
    MissingDateError,
    PastArrivalError,
    TripValidationError,
    ZeroSavingsWindowError,
)
from ..models.savings_plan import CostBreakdown, SavingsPlan
from ..models.trip import TripRequest, TripStyle, parse_trip_style, require_destination
from .travel_data import DEFAULT_DESTINATION, TravelDataCatalog, travel_data

logger = logging.getLogger(__name__)


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end, floored.

    A month counts only once the end date reaches the start's day-of-month,
    so Jan 31 -> Feb 28 is 0 months (date-fns differenceInMonths says 1).
    Under the "clamp" policy this only changes the short_window flag.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def validate_dates(arrival_date: Optional[date], departure_date: Optional[date], today: date):
    """Raise the first failing date rule."""
    if not arrival_date or not departure_date:
        raise MissingDateError()
    if arrival_date >= departure_date:
        raise InvalidRangeError()
    if arrival_date <= today:
        raise PastArrivalError()


class CostEstimator:
    """Stateless savings calculator over the mock cost tables."""

    def __init__(self, catalog: TravelDataCatalog = None, short_window_policy: str = None):
        self.catalog = catalog or travel_data
        self._short_window_policy = short_window_policy

    @property
    def short_window_policy(self) -> str:
        """Explicit policy, else the current setting."""
        return self._short_window_policy or settings.short_window_policy

    def estimate(
        self,
        destination: str,
        origin: Optional[str],
        trip_style: TripStyle,
        arrival_date: Optional[date],
        departure_date: Optional[date],
        today: Optional[date] = None,
    ) -> SavingsPlan:
        """
        Compute a savings plan.

        Raises:
            MissingDestinationError, InvalidTripStyleError: bad selectors.
            MissingDateError, InvalidRangeError, PastArrivalError: bad dates,
                checked in that order.
            ZeroSavingsWindowError: trip is under a month away and the
                policy is "reject".
        """
        today = today or date.today()
        destination = require_destination(destination)
        trip_style = parse_trip_style(trip_style)

        try:
            validate_dates(arrival_date, departure_date, today)
        except TripValidationError as e:
            logger.info(f"Rejected trip to {destination} ({arrival_date} - {departure_date}): {e.code}")
            raise

        stay_duration = (departure_date - arrival_date).days
        months_until_trip = months_between(today, arrival_date)

        short_window = months_until_trip == 0
        if short_window:
            if self.short_window_policy == "reject":
                logger.info(f"Rejected trip to {destination} on {arrival_date}: under a month away")
                raise ZeroSavingsWindowError()
            months_until_trip = 1

        if self.catalog.is_known_destination(destination):
            cost_profile = destination
        else:
            cost_profile = DEFAULT_DESTINATION
        base_costs = self.catalog.get_cost_profile(destination)
        multipliers = self.catalog.get_style_multipliers(trip_style)

        # Route prices replace the destination's flight cost when known
        flight_base = self.catalog.get_route_price(origin, destination)
        if flight_base is None:
            flight_base = base_costs["flight"]

        breakdown = CostBreakdown(
            flight=flight_base * multipliers["flight"],
            accommodation=base_costs["accommodation"] * multipliers["accommodation"] * stay_duration,
            food=base_costs["food"] * multipliers["food"] * stay_duration,
            activities=base_costs["activities"] * multipliers["activities"] * stay_duration,
        )
        total_cost = breakdown.total()

        plan = SavingsPlan(
            destination=destination,
            cost_profile=cost_profile,
            trip_style=trip_style,
            total_cost=total_cost,
            monthly_savings=math.ceil(total_cost / months_until_trip),
            stay_duration_days=stay_duration,
            months_to_save=months_until_trip,
            short_window=short_window,
            breakdown=breakdown,
        )
        logger.debug(
            f"Savings plan for {destination} ({trip_style.value}): "
            f"total={plan.total_cost} monthly={plan.monthly_savings} months={plan.months_to_save}"
        )
        return plan

    def estimate_request(self, request: TripRequest, today: Optional[date] = None) -> SavingsPlan:
        """Estimate from a submitted form."""
        return self.estimate(
            destination=request.destination,
            origin=request.origin or settings.default_origin,
            trip_style=request.trip_style,
            arrival_date=request.arrival_date,
            departure_date=request.departure_date,
            today=today,
        )


# Global estimator
cost_estimator: Optional[CostEstimator] = None


def get_cost_estimator() -> CostEstimator:
    """Get or create the global cost estimator."""
    global cost_estimator
    if cost_estimator is None:
        cost_estimator = CostEstimator()
    return cost_estimator
