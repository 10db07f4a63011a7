"""
Validation errors raised by the savings calculator.
Each error names the form field it belongs to so the UI can show it inline.
"""


class TripValidationError(ValueError):
    """Base class for rejected trip inputs."""
    field = "form"
    code = "invalid_trip"
    default_message = "Invalid trip details"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_detail(self) -> dict:
        """Field-level error payload for API responses."""
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
        }


class MissingDateError(TripValidationError):
    field = "dates"
    code = "missing_date"
    default_message = "Please select both arrival and departure dates"


class InvalidRangeError(TripValidationError):
    field = "departure_date"
    code = "invalid_range"
    default_message = "Departure date must be after arrival date"


class PastArrivalError(TripValidationError):
    field = "arrival_date"
    code = "past_arrival"
    default_message = "Arrival date must be in the future"


class ZeroSavingsWindowError(TripValidationError):
    field = "arrival_date"
    code = "zero_savings_window"
    default_message = "Trip is less than a month away, there is no time left to save"


class MissingDestinationError(TripValidationError):
    field = "destination"
    code = "missing_destination"
    default_message = "Please choose a destination"


class InvalidTripStyleError(TripValidationError):
    field = "trip_style"
    code = "invalid_trip_style"
    default_message = "Trip style must be one of: budget, comfort, luxury"


class InvalidCurrencyError(TripValidationError):
    field = "currency"
    code = "invalid_currency"
    default_message = "Currency must be one of: USD, KRW"
