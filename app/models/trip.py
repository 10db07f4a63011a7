"""
Trip request schema - what the planner form submits.
Date ordering is checked by the estimator so errors keep their precedence.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date
from enum import Enum

from ..errors import InvalidCurrencyError, InvalidTripStyleError, MissingDestinationError


class TripStyle(str, Enum):
    """Spending tiers."""
    BUDGET = "budget"
    COMFORT = "comfort"
    LUXURY = "luxury"


class Currency(str, Enum):
    """Supported display currencies."""
    USD = "USD"
    KRW = "KRW"


def _clean_city(v):
    """Trim city names; blank ones count as not given."""
    if isinstance(v, str):
        v = v.strip()
        if v == "":
            return None
    return v


class TripRequest(BaseModel):
    """Inputs for a savings plan calculation."""
    destination: str = Field(
        ...,
        min_length=1,
        description="Destination city, e.g. 'Paris'"
    )
    origin: Optional[str] = Field(
        None,
        description="Departure city; enables route-based flight prices"
    )
    arrival_date: Optional[date] = Field(
        None,
        description="Arrival date at the destination"
    )
    departure_date: Optional[date] = Field(
        None,
        description="Departure date from the destination"
    )
    currency: Currency = Field(
        default=Currency.USD,
        description="Currency used for formatted amounts"
    )
    trip_style: TripStyle = Field(
        default=TripStyle.COMFORT,
        description="Spending tier"
    )

    @field_validator('destination', 'origin', mode='before')
    @classmethod
    def strip_city(cls, v):
        return _clean_city(v)


class PriceTrendRequest(BaseModel):
    """Inputs for the flight price trend chart."""
    destination: str = Field(..., min_length=1)
    origin: Optional[str] = None
    trip_style: TripStyle = TripStyle.COMFORT
    currency: Currency = Currency.USD
    seed: Optional[int] = Field(
        None,
        description="Seed for the price noise; omit for a fresh series"
    )

    @field_validator('destination', 'origin', mode='before')
    @classmethod
    def strip_city(cls, v):
        return _clean_city(v)


def parse_trip_style(value) -> TripStyle:
    """Coerce a tier selector, raising InvalidTripStyleError for unknown tiers."""
    try:
        return TripStyle(value)
    except ValueError:
        raise InvalidTripStyleError(f"Unknown trip style: {value!r}") from None


def parse_currency(value) -> Currency:
    """Coerce a currency code, raising InvalidCurrencyError for unknown codes."""
    try:
        return Currency(value)
    except ValueError:
        raise InvalidCurrencyError(f"Unknown currency: {value!r}") from None


def require_destination(value) -> str:
    """Trimmed destination name, MissingDestinationError if blank."""
    destination = _clean_city(value)
    if not isinstance(destination, str):
        raise MissingDestinationError()
    return destination
