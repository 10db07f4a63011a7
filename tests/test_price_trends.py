"""Tests for the flight price trend generator."""
import random
import pytest
from datetime import date

from app.errors import InvalidCurrencyError, InvalidTripStyleError, MissingDestinationError
from app.models.price_trend import Season
from app.models.trip import Currency, PriceTrendRequest, TripStyle
from app.services.price_trends import PriceSeriesGenerator, add_months, season_for_month


class FixedRandom:
    """Randomness source that always returns the same variation."""

    def __init__(self, value: float = 1.0):
        self.value = value

    def uniform(self, a, b):
        return self.value


AS_OF = date(2026, 1, 15)


class TestCalendarHelpers:
    """Test month arithmetic and season classification."""

    def test_add_months_clamps_day(self):
        assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
        assert add_months(date(2026, 11, 30), 3) == date(2027, 2, 28)

    def test_add_months_across_year(self):
        assert add_months(date(2026, 10, 19), 11) == date(2027, 9, 19)

    def test_season_boundaries(self):
        seasons = [season_for_month(m) for m in range(12)]
        assert seasons == [
            Season.WINTER, Season.WINTER,
            Season.SPRING, Season.SPRING, Season.SPRING,
            Season.SUMMER, Season.SUMMER, Season.SUMMER,
            Season.FALL, Season.FALL, Season.FALL,
            Season.WINTER,
        ]


class TestPriceSeriesGenerator:
    """Test the synthetic monthly series."""

    def test_twelve_labelled_months(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Paris", "Seoul", TripStyle.COMFORT, as_of=AS_OF)

        assert len(points) == 12
        assert points[0].month == "Jan 2026"
        assert points[11].month == "Dec 2026"

    def test_seasonal_prices_without_noise(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Paris", "Seoul", "comfort", as_of=AS_OF)
        prices = [p.price for p in points]

        assert prices == [990, 990, 1320, 1320, 1320, 1650, 1650, 1650, 1100, 1100, 1100, 990]

    def test_low_price_uses_style_adjusted_base(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Paris", "Seoul", "luxury", as_of=AS_OF)

        january = points[0]
        september = points[8]
        assert january.price == 1485
        assert january.is_low_price is True
        # equal to the style-adjusted base is not "low"
        assert september.price == 1650
        assert september.is_low_price is False

    def test_prices_positive_and_bounded(self):
        generator = PriceSeriesGenerator(rng=random.Random(42))
        points = generator.generate_series("Tokyo", "Seoul", "budget", as_of=AS_OF)
        seasonal = {Season.SUMMER: 1.3, Season.WINTER: 1.1, Season.SPRING: 1.4, Season.FALL: 1.0}

        for point in points:
            assert point.price > 0
            assert point.season == season_for_month(point.month_date.month - 1)
            expected = 400 * seasonal[point.season]
            assert round(expected * 0.9) <= point.price <= round(expected * 1.1)

    def test_seeded_series_is_reproducible(self):
        first = PriceSeriesGenerator(rng=random.Random(7)).generate_series("Paris", None, "comfort", as_of=AS_OF)
        second = PriceSeriesGenerator(rng=random.Random(7)).generate_series("Paris", None, "comfort", as_of=AS_OF)

        assert [p.price for p in first] == [p.price for p in second]

    def test_unknown_destination_uses_defaults(self):
        """Atlantis gets the default base price and season table."""
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Atlantis", "Seoul", "comfort", as_of=AS_OF)

        assert points[0].price == round(1200 * 1.1)
        assert points[6].price == round(1200 * 1.3)
        assert points[8].price == 1200

    def test_unknown_route_uses_destination_flight(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Tokyo", "Atlantis", "comfort", as_of=AS_OF)

        assert points[8].price == 1800

    def test_self_route_still_priced(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        points = generator.generate_series("Seoul", "Seoul", "comfort", as_of=AS_OF)

        assert all(p.price > 0 for p in points)


class TestPriceTrend:
    """Test chart post-processing."""

    def test_usd_trend(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        trend = generator.build_trend("Paris", "Seoul", "comfort", Currency.USD, as_of=AS_OF)

        assert trend.lowest_price == 990
        assert trend.highest_price == 1650
        assert trend.best_month == "Jan 2026"
        assert trend.bounds.unit == 100
        assert trend.bounds.lower == 800
        assert trend.bounds.upper == 1900

    def test_krw_trend(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        trend = generator.build_trend("Paris", "Seoul", "comfort", Currency.KRW, as_of=AS_OF)

        assert trend.points[0].price == 990 * 1315
        assert trend.lowest_price == 990 * 1315
        assert trend.highest_price == 1650 * 1315
        assert trend.bounds.unit == 10000
        assert trend.bounds.lower == 1170000
        assert trend.bounds.upper == 2390000

    def test_krw_differs_by_exchange_rate(self):
        usd = PriceSeriesGenerator(rng=FixedRandom()).build_trend("Tokyo", None, "luxury", "USD", as_of=AS_OF)
        krw = PriceSeriesGenerator(rng=FixedRandom()).build_trend("Tokyo", None, "luxury", "KRW", as_of=AS_OF)

        for usd_point, krw_point in zip(usd.points, krw.points):
            assert krw_point.price == usd_point.price * 1315
            assert krw_point.is_low_price == usd_point.is_low_price

    def test_bounds_contain_all_prices(self):
        generator = PriceSeriesGenerator(rng=random.Random(3))
        trend = generator.build_trend("New York", "Seoul", "budget", "USD", as_of=AS_OF)

        assert all(trend.bounds.lower <= p.price <= trend.bounds.upper for p in trend.points)
        assert trend.bounds.lower % 100 == 0
        assert trend.bounds.upper % 100 == 0

    def test_build_from_request(self):
        request = PriceTrendRequest(destination="Paris", origin="Seoul", currency="KRW")
        trend = PriceSeriesGenerator(rng=FixedRandom()).build_trend_request(request, as_of=AS_OF)

        assert trend.trip_style == TripStyle.COMFORT
        assert trend.currency == Currency.KRW
        assert len(trend.points) == 12


class TestTrendInputs:
    """Test input handling of the generator."""

    def test_explicit_month_count(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())

        assert len(generator.generate_series("Paris", None, "comfort", as_of=AS_OF, months=3)) == 3
        assert generator.generate_series("Paris", None, "comfort", as_of=AS_OF, months=0) == []

    def test_unknown_currency(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        with pytest.raises(InvalidCurrencyError) as exc_info:
            generator.build_trend("Paris", None, "comfort", "EUR", as_of=AS_OF)
        assert exc_info.value.to_detail()["code"] == "invalid_currency"

    def test_unknown_trip_style(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        with pytest.raises(InvalidTripStyleError):
            generator.build_trend("Paris", None, "backpacker", "USD", as_of=AS_OF)
        with pytest.raises(InvalidTripStyleError):
            generator.generate_series("Paris", None, "backpacker", as_of=AS_OF)

    def test_missing_destination(self):
        generator = PriceSeriesGenerator(rng=FixedRandom())
        with pytest.raises(MissingDestinationError):
            generator.build_trend(None, "Seoul", "comfort", "USD", as_of=AS_OF)
