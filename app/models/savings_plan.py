"""
Savings plan models - Structured output of the cost estimator.
"""
from pydantic import BaseModel, ConfigDict, Field

from .trip import TripStyle


class CostBreakdown(BaseModel):
    """Per-category trip cost, already scaled by stay duration."""
    model_config = ConfigDict(frozen=True)

    flight: float = Field(..., ge=0, description="One-time round-trip flight cost")
    accommodation: float = Field(..., ge=0, description="Accommodation for all nights")
    food: float = Field(..., ge=0, description="Food for all days")
    activities: float = Field(..., ge=0, description="Activities for all days")

    def total(self) -> float:
        return self.flight + self.accommodation + self.food + self.activities


class SavingsPlan(BaseModel):
    """A monthly savings target for one trip."""
    model_config = ConfigDict(frozen=True)

    destination: str = Field(..., description="Requested destination")
    cost_profile: str = Field(
        ...,
        description="Destination whose base costs were used"
    )
    trip_style: TripStyle
    total_cost: float = Field(..., ge=0)
    monthly_savings: int = Field(..., ge=0)
    stay_duration_days: int = Field(..., ge=1)
    months_to_save: int = Field(
        ...,
        ge=1,
        description="Divisor used for the monthly target"
    )
    short_window: bool = Field(
        default=False,
        description="True when the trip is less than a month away"
    )
    breakdown: CostBreakdown

    def to_display_dict(self, formatter) -> dict:
        """Format every amount with ``formatter(amount)``."""
        return {
            "total_cost": formatter(self.total_cost),
            "monthly_savings": formatter(self.monthly_savings),
            "breakdown": {
                "flight": formatter(self.breakdown.flight),
                "accommodation": formatter(self.breakdown.accommodation),
                "food": formatter(self.breakdown.food),
                "activities": formatter(self.breakdown.activities),
            },
        }
