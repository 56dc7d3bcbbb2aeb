class MockFrameworkError(Exception):
    """Base exception for the mock service framework."""

    pass


class MockServiceError(MockFrameworkError):
    """Structured failure produced by a simulated fault scenario.

    Carries the HTTP-equivalent status of the real service failure it stands in for.
    """

    code = "MOCK_SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str, *, scenario: str, operation: str):
        self.message = message
        self.scenario = scenario
        self.operation = operation
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "code": self.code,
            "http_status": self.http_status,
        }


class ApiError(MockServiceError):
    """Raised for the api_error scenario."""

    code = "API_ERROR"
    http_status = 500


class RequestTimeoutError(MockServiceError):
    """Raised for the timeout scenario."""

    code = "TIMEOUT"
    http_status = 408


class RateLimitError(MockServiceError):
    """Raised for the rate_limit scenario."""

    code = "RATE_LIMIT"
    http_status = 429


class InvalidInputError(MockServiceError):
    """Raised for the invalid_input scenario."""

    code = "INVALID_INPUT"
    http_status = 400


class InputValidationError(MockFrameworkError):
    """Raised when a caller violates an operation precondition (not a simulated fault)."""

    pass


class FixtureNotFoundError(MockFrameworkError):
    """Raised when no base fixture exists for an (operation, locale) pair."""

    def __init__(self, operation: str, locale: str, available: list[str] | None = None):
        self.operation = operation
        self.locale = locale
        self.available = available or []
        super().__init__(
            f"No fixture for operation '{operation}' and locale '{locale}'. "
            f"Available locales: {', '.join(self.available) or 'none'}"
        )


class MalformedFixtureError(MockFrameworkError):
    """Raised when fixture data does not match the expected payload shape."""

    def __init__(self, operation: str, issues: list[str]):
        self.operation = operation
        self.issues = issues
        super().__init__(
            f"Fixture data for '{operation}' failed validation:\n" + "\n".join(issues)
        )


class MockConfigurationError(MockFrameworkError):
    """Raised when mock mode is misconfigured."""

    INVALID_TEST_ENV = "INVALID_TEST_ENV"
    MOCK_MODE_IN_PRODUCTION = "MOCK_MODE_IN_PRODUCTION"
    INVALID_LATENCY_RANGE = "INVALID_LATENCY_RANGE"
    MOCK_SERVICE_CREATION_FAILED = "MOCK_SERVICE_CREATION_FAILED"

    def __init__(self, message: str, code: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)
