"""
HTTP Transport for ghcompare.

Handles HTTP communication with the GitHub REST API: default headers,
optional token authentication, and translation of error responses into
typed exceptions. Requests are never retried here.
"""

import time
from typing import Any

import httpx

from ghcompare.config import ClientConfig
from ghcompare.exceptions import (
    AccessDeniedError,
    AuthFailedError,
    ErrorCode,
    GhCompareError,
    InvalidRequestError,
    NotFoundError,
    RateLimitedError,
    UnknownAPIError,
)
from ghcompare.logging import get_logger, log_http_request, log_http_response

logger = get_logger("http")

RATE_LIMIT_MESSAGE = (
    "GitHub API rate limit exceeded. Please wait before making more requests "
    "or add a GitHub token for higher limits."
)
AUTH_FAILED_MESSAGE = (
    "GitHub API authentication failed. Please check your token or try without "
    "authentication for public repositories."
)
NOT_FOUND_MESSAGE = (
    "Repository not found or not accessible. This might be a private repository "
    "that requires authentication."
)
ACCESS_DENIED_MESSAGE = (
    "Access denied. This repository requires authentication or you do not have "
    "permission to access it."
)


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return "Unknown error"
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return "Unknown error"


def _rate_limit_reset(response: httpx.Response) -> int | None:
    value = response.headers.get("X-RateLimit-Reset")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_error_response(response: httpx.Response) -> GhCompareError:
    """
    Parse an error response into a typed exception.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate GhCompareError subclass
    """
    status_code = response.status_code
    message = _error_message(response)

    if status_code == 429 or (status_code == 403 and "rate limit" in message.lower()):
        return RateLimitedError(RATE_LIMIT_MESSAGE, status_code, _rate_limit_reset(response))
    elif status_code == 401:
        return AuthFailedError(AUTH_FAILED_MESSAGE, status_code)
    elif status_code == 404:
        return NotFoundError(NOT_FOUND_MESSAGE, status_code)
    elif status_code == 403:
        return AccessDeniedError(ACCESS_DENIED_MESSAGE, status_code)
    elif status_code in (400, 422):
        return InvalidRequestError(f"Invalid request: {message}", status_code)
    else:
        return UnknownAPIError(f"GitHub API Error: {status_code} - {message}", status_code)


def decode_json(response: httpx.Response) -> Any:
    """Decode a successful response body."""
    try:
        return response.json()
    except ValueError as exc:
        raise UnknownAPIError(
            "GitHub API returned invalid JSON.", response.status_code
        ) from exc


class HTTPTransport:
    """
    Blocking HTTP transport built on ``httpx.Client``.

    Handles:
    - Accept/User-Agent headers and optional token authentication
    - Error response parsing into typed exceptions
    - Debug logging of requests and responses with the token masked
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            config: Client configuration (token, base URL, timeout, user agent)
            client: Pre-built httpx client, mainly for tests; headers are still
                added per request
        """
        self.config = config or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            follow_redirects=True,
        )
        self.request_count = 0

    @property
    def http_client(self) -> httpx.Client:
        """The underlying httpx client (shared by clients made with ``with_token``)."""
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Args:
            path: API path (e.g., "/repos/owner/repo/tags")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            GhCompareError: On API or transport errors
        """
        url = f"{self.config.base_url}{path}"
        headers = self.config.headers()
        log_http_request("GET", url, headers=headers, params=params)

        self.request_count += 1
        start = time.perf_counter()
        try:
            response = self._client.request(
                "GET", url, params=params, headers=headers, follow_redirects=True
            )
        except httpx.RequestError as e:
            logger.warning("GitHub request to %s failed: %s", path, e)
            raise UnknownAPIError(
                f"Could not reach GitHub API: {e}", code=ErrorCode.CONNECTION_ERROR
            ) from e

        log_http_response(
            response.status_code,
            url,
            elapsed_ms=(time.perf_counter() - start) * 1000,
            rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
        )

        if not response.is_success:
            error = parse_error_response(response)
            logger.info("GitHub API error on %s: %s", path, error)
            raise error

        return decode_json(response)
