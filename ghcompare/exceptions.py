"""ghcompare exception classes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of error conditions surfaced by the library."""

    RATE_LIMITED = "RATE_LIMITED"
    AUTH_FAILED = "AUTH_FAILED"
    ACCESS_DENIED = "ACCESS_DENIED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    FILE_NOT_IN_COMPARISON = "FILE_NOT_IN_COMPARISON"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN = "UNKNOWN"


class GhCompareError(Exception):
    """Base exception for all ghcompare errors."""

    def __init__(
        self, code: ErrorCode, message: str, status_code: int | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code.value}] {message}")


class ConfigurationError(GhCompareError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.CONFIGURATION_ERROR, message)


class RateLimitedError(GhCompareError):
    """Raised when the GitHub request quota is exhausted."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reset_at: int | None = None,
    ) -> None:
        super().__init__(ErrorCode.RATE_LIMITED, message, status_code)
        self.reset_at = reset_at


class AuthFailedError(GhCompareError):
    """Raised when the supplied token is rejected."""

    def __init__(self, message: str, status_code: int | None = 401) -> None:
        super().__init__(ErrorCode.AUTH_FAILED, message, status_code)


class AccessDeniedError(GhCompareError):
    """Raised on a 403 that is not a rate limit."""

    def __init__(self, message: str, status_code: int | None = 403) -> None:
        super().__init__(ErrorCode.ACCESS_DENIED, message, status_code)


class NotFoundError(GhCompareError):
    """Raised when a repository or ref does not exist or is not accessible."""

    def __init__(self, message: str, status_code: int | None = 404) -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, status_code)


class InvalidRequestError(GhCompareError):
    """Raised for malformed refs or repository identifiers."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(ErrorCode.INVALID_REQUEST, message, status_code)


class FileNotInComparisonError(GhCompareError):
    """Raised when a requested file is absent from a comparison."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            ErrorCode.FILE_NOT_IN_COMPARISON,
            f"File not found in comparison: {filename}",
        )
        self.filename = filename


class UnknownAPIError(GhCompareError):
    """Raised for any other failure (unexpected status, transport error, bad JSON)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: ErrorCode = ErrorCode.UNKNOWN,
    ) -> None:
        super().__init__(code, message, status_code)
