"""
Travel Data Service.
Static mock cost tables and lookups with fallbacks for unknown cities.
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Optional

from ..models.price_trend import Season
from ..models.trip import TripStyle, parse_trip_style

logger = logging.getLogger(__name__)


TRIP_STYLES = MappingProxyType({
    TripStyle.BUDGET: {
        "label": "Budget",
        "description": "Hostels, public transport, local eateries",
        "multipliers": MappingProxyType({
            "flight": 1,
            "accommodation": 0.7,
            "food": 0.6,
            "activities": 0.5,
        }),
    },
    TripStyle.COMFORT: {
        "label": "Comfort",
        "description": "3-star hotels, occasional taxis, casual restaurants",
        "multipliers": MappingProxyType({
            "flight": 1,
            "accommodation": 1,
            "food": 1,
            "activities": 1,
        }),
    },
    TripStyle.LUXURY: {
        "label": "Luxury",
        "description": "4-5 star hotels, private transport, fine dining",
        "multipliers": MappingProxyType({
            "flight": 1.5,
            "accommodation": 2.5,
            "food": 2,
            "activities": 2,
        }),
    },
})

# Order matters: the first destination is the fallback profile.
DESTINATION_COSTS = MappingProxyType({
    "New York": MappingProxyType({
        "flight": 1200,
        "accommodation": 200,
        "food": 60,
        "activities": 100,
    }),
    "Paris": MappingProxyType({
        "flight": 1500,
        "accommodation": 180,
        "food": 50,
        "activities": 80,
    }),
    "Tokyo": MappingProxyType({
        "flight": 1800,
        "accommodation": 150,
        "food": 40,
        "activities": 70,
    }),
})

DEFAULT_DESTINATION = next(iter(DESTINATION_COSTS))

# Symmetric round-trip prices, zero on the diagonal.
ROUTE_PRICES = MappingProxyType({
    "Seoul": MappingProxyType({"Seoul": 0, "New York": 1300, "Paris": 1100, "Tokyo": 400}),
    "New York": MappingProxyType({"Seoul": 1300, "New York": 0, "Paris": 800, "Tokyo": 1400}),
    "Paris": MappingProxyType({"Seoul": 1100, "New York": 800, "Paris": 0, "Tokyo": 1200}),
    "Tokyo": MappingProxyType({"Seoul": 400, "New York": 1400, "Paris": 1200, "Tokyo": 0}),
})

DEFAULT_BASE_PRICE = 1200

SEASONAL_MULTIPLIERS = MappingProxyType({
    "New York": MappingProxyType({
        Season.SUMMER: 1.4, Season.WINTER: 1.2, Season.SPRING: 1.1, Season.FALL: 1.0,
    }),
    "Paris": MappingProxyType({
        Season.SUMMER: 1.5, Season.WINTER: 0.9, Season.SPRING: 1.2, Season.FALL: 1.0,
    }),
    "Tokyo": MappingProxyType({
        Season.SUMMER: 1.3, Season.WINTER: 1.1, Season.SPRING: 1.4, Season.FALL: 1.0,
    }),
})

DEFAULT_SEASONAL_MULTIPLIERS = MappingProxyType({
    Season.SUMMER: 1.3, Season.WINTER: 1.1, Season.SPRING: 1.2, Season.FALL: 1.0,
})


class TravelDataCatalog:
    """Read-only access to the mock travel tables."""

    def destinations(self) -> List[str]:
        return list(DESTINATION_COSTS)

    def origins(self) -> List[str]:
        return list(ROUTE_PRICES)

    def is_known_destination(self, destination: Optional[str]) -> bool:
        return destination in DESTINATION_COSTS

    def get_cost_profile(self, destination: Optional[str]) -> Dict[str, float]:
        """
        Base costs for a destination.
        Unknown destinations get the first listed profile.
        """
        profile = DESTINATION_COSTS.get(destination)
        if profile is None:
            logger.debug(f"No cost profile for {destination!r}, using {DEFAULT_DESTINATION}")
            profile = DESTINATION_COSTS[DEFAULT_DESTINATION]
        return dict(profile)

    def get_style_multipliers(self, trip_style: TripStyle) -> Dict[str, float]:
        return dict(TRIP_STYLES[parse_trip_style(trip_style)]["multipliers"])

    def get_route_price(self, origin: Optional[str], destination: Optional[str]) -> Optional[int]:
        """Round-trip price between two cities, None if the route is unknown."""
        if not origin:
            return None
        return ROUTE_PRICES.get(origin, {}).get(destination)

    def get_base_flight_price(self, origin: Optional[str], destination: Optional[str]) -> int:
        """
        Base price for the trend chart.
        Missing and zero-cost routes fall back to the destination's
        flight cost, then to DEFAULT_BASE_PRICE.
        """
        route_price = self.get_route_price(origin, destination)
        if route_price:
            return route_price

        logger.debug(f"No route price for {origin!r} -> {destination!r}")
        if destination in DESTINATION_COSTS:
            return DESTINATION_COSTS[destination]["flight"]
        return DEFAULT_BASE_PRICE

    def get_seasonal_multipliers(self, destination: Optional[str]) -> Dict[Season, float]:
        multipliers = SEASONAL_MULTIPLIERS.get(destination)
        if multipliers is None:
            logger.debug(f"No seasonal table for {destination!r}, using default")
            multipliers = DEFAULT_SEASONAL_MULTIPLIERS
        return dict(multipliers)

    def get_trip_styles(self) -> List[Dict]:
        """Tier descriptions for the style picker."""
        return [
            {
                "value": style.value,
                "label": info["label"],
                "description": info["description"],
                "multipliers": dict(info["multipliers"]),
            }
            for style, info in TRIP_STYLES.items()
        ]


# Global instance
travel_data = TravelDataCatalog()
