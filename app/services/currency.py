"""
Currency helper.
All amounts are computed in USD; KRW is derived with a fixed exchange rate.
"""
import math
from typing import Optional, Union

from ..config import settings
from ..models.trip import Currency, parse_currency


CURRENCY_DISPLAY = {
    Currency.USD: {"symbol": "$", "decimals": 2, "axis_unit": 100},
    Currency.KRW: {"symbol": "₩", "decimals": 0, "axis_unit": 10000},
}


def round_half_up(amount: float) -> int:
    """Round to the nearest integer with halves going up, like JS Math.round."""
    return math.floor(amount + 0.5)


def _rate() -> int:
    return settings.krw_exchange_rate


def convert(amount_usd: float, currency: Union[Currency, str]) -> float:
    """Convert a USD amount to the display currency."""
    currency = parse_currency(currency)
    if currency == Currency.KRW:
        return round_half_up(amount_usd * _rate())
    return amount_usd


def format_converted(amount: float, currency: Union[Currency, str]) -> str:
    """Format an amount that is already in ``currency``."""
    currency = parse_currency(currency)
    display = CURRENCY_DISPLAY[currency]
    sign = "-" if amount < 0 else ""
    amount = abs(amount)

    if display["decimals"] == 0:
        text = f"{round_half_up(amount):,}"
    else:
        text = f"{amount:,.{display['decimals']}f}"
        # whole amounts drop their ".00"
        if text.endswith(".00"):
            text = text[:-3]
    return f"{sign}{display['symbol']}{text}"


def format_currency(amount_usd: float, currency: Union[Currency, str] = None) -> str:
    """Convert a USD amount and format it, e.g. '$1,100' or '₩1,446,500'."""
    currency = parse_currency(currency or settings.default_currency)
    return format_converted(convert(amount_usd, currency), currency)


def axis_unit(currency: Union[Currency, str]) -> int:
    """Rounding unit for chart axis bounds."""
    return CURRENCY_DISPLAY[parse_currency(currency)]["axis_unit"]


def round_outward(low: float, high: float, currency: Union[Currency, str],
                  padding: Optional[float] = 0.1) -> tuple[int, int]:
    """Pad a price range and widen it to whole axis units."""
    unit = axis_unit(currency)
    padding = padding or 0.0
    lower = math.floor(low * (1 - padding) / unit) * unit
    upper = math.ceil(high * (1 + padding) / unit) * unit
    return int(lower), int(upper)
