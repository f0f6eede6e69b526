"""Error types shared by the planner, weather cache and API layer."""


class InvalidInput(ValueError):
    """Raised when a caller passes out-of-range parameters."""


class WeatherProviderError(Exception):
    """Raised by a forecast provider when it cannot return data.

    Carries the HTTP-like status of the failure when one is known.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WeatherUnavailable(Exception):
    """Raised when forecast data is missing from the cache and cannot be fetched.

    Callers should treat this as retryable.
    """
