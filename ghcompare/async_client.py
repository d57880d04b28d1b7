"""
ghcompare async client.

Provides the async interface for comparing versions of a GitHub repository.
"""

from typing import Any

import httpx

from ghcompare.async_clients import AsyncCompareClient, AsyncTagsClient, AsyncUsersClient
from ghcompare.async_transport import AsyncHTTPTransport
from ghcompare.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from ghcompare.store import PreferenceStore
from ghcompare.types.compare import ComparisonResult
from ghcompare.types.diff import FileDiff


class AsyncComparatorClient:
    """
    Async client for comparing two refs of a GitHub repository.

    Example:
        ```python
        import asyncio
        from ghcompare import AsyncComparatorClient

        async def main():
            async with AsyncComparatorClient() as client:
                versions = await client.list_versions("psf", "requests")
                result = await client.compare_versions(
                    "psf", "requests", versions[1], versions[0]
                )
                print(result.from_version, "->", result.to_version)

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: GitHub access token; None for unauthenticated access
            base_url: API root (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value
            config: Full configuration; overrides the individual arguments
            http_client: Pre-built httpx async client (mainly for tests)
        """
        self.config = config or ClientConfig(
            token=token or None,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            user_agent=user_agent,
        )
        self._http_client = http_client

        self._transport = AsyncHTTPTransport(config=self.config, client=http_client)

        self.tags = AsyncTagsClient(self._transport)
        self.compare = AsyncCompareClient(self._transport)
        self.users = AsyncUsersClient(self._transport)

    @classmethod
    def from_env(cls, store: PreferenceStore | None = None) -> "AsyncComparatorClient":
        """Create a client from environment variables, falling back to ``store``'s token."""
        config = ClientConfig.from_env()
        if not config.has_token and store is not None:
            config = config.with_token(store.get_token())
        return cls(config=config)

    def with_token(self, token: str | None) -> "AsyncComparatorClient":
        """
        Return a new client using ``token``.

        The new client shares this client's connection pool, which stays owned
        by this client.
        """
        return type(self)(
            config=self.config.with_token(token), http_client=self._transport.http_client
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def list_versions(self, owner: str, repo: str) -> list[str]:
        return await self.tags.list_versions(owner, repo)

    async def compare_versions(
        self,
        owner: str,
        repo: str,
        base: str,
        head: str,
        concurrent: bool = False,
        recompute_changes: bool = False,
    ) -> ComparisonResult:
        return await self.compare.compare_versions(
            owner,
            repo,
            base,
            head,
            concurrent=concurrent,
            recompute_changes=recompute_changes,
        )

    async def fetch_file_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> str:
        return await self.compare.fetch_file_diff(owner, repo, base, head, filename)

    async def fetch_parsed_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> FileDiff:
        return await self.compare.fetch_parsed_diff(owner, repo, base, head, filename)

    async def validate_token(self) -> bool:
        return await self.users.validate_token()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncComparatorClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
