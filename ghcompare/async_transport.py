"""
Async HTTP Transport for ghcompare.

Same contract as ``HTTPTransport`` using the httpx async client.
"""

import time
from typing import Any

import httpx

from ghcompare.config import ClientConfig
from ghcompare.exceptions import ErrorCode, UnknownAPIError
from ghcompare.logging import get_logger, log_http_request, log_http_response
from ghcompare.transport import decode_json, parse_error_response

logger = get_logger("http")


class AsyncHTTPTransport:
    """
    Async HTTP transport built on ``httpx.AsyncClient``.

    Handles:
    - Accept/User-Agent headers and optional token authentication
    - Error response parsing into typed exceptions
    - Debug logging of requests and responses with the token masked
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            config: Client configuration (token, base URL, timeout, user agent)
            client: Pre-built httpx async client, mainly for tests
        """
        self.config = config or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            follow_redirects=True,
        )
        self.request_count = 0

    @property
    def http_client(self) -> httpx.AsyncClient:
        """The underlying httpx async client."""
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Raises:
            GhCompareError: On API or transport errors
        """
        url = f"{self.config.base_url}{path}"
        headers = self.config.headers()
        log_http_request("GET", url, headers=headers, params=params)

        self.request_count += 1
        start = time.perf_counter()
        try:
            response = await self._client.request(
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
