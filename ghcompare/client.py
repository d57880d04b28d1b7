"""
ghcompare main client.

Provides the primary interface for comparing versions of a GitHub repository.
"""

from typing import Any

import httpx

from ghcompare.clients import CompareClient, TagsClient, UsersClient
from ghcompare.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from ghcompare.store import PreferenceStore
from ghcompare.transport import HTTPTransport
from ghcompare.types.compare import ComparisonResult
from ghcompare.types.diff import FileDiff


class ComparatorClient:
    """
    Main client for comparing two refs of a GitHub repository.

    Aggregates the resource clients and holds the access token.

    Example:
        ```python
        from ghcompare import ComparatorClient

        with ComparatorClient(token="ghp_...") as client:
            versions = client.list_versions("psf", "requests")
            result = client.compare_versions("psf", "requests", "v2.31.0", "v2.32.0")
            print(result.stats.insertions, result.stats.deletions)

        # Or read GITHUB_TOKEN and friends from the environment
        client = ComparatorClient.from_env()
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
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: GitHub access token; None for unauthenticated access
            base_url: API root (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value
            config: Full configuration; overrides the individual arguments
            http_client: Pre-built httpx client (mainly for tests)
        """
        self.config = config or ClientConfig(
            token=token or None,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            user_agent=user_agent,
        )
        self._http_client = http_client

        self._transport = HTTPTransport(config=self.config, client=http_client)

        self.tags = TagsClient(self._transport)
        self.compare = CompareClient(self._transport)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_env(cls, store: PreferenceStore | None = None) -> "ComparatorClient":
        """
        Create a client from environment variables.

        Falls back to the token saved in ``store`` when neither GITHUB_TOKEN
        nor GH_TOKEN is set.

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        config = ClientConfig.from_env()
        if not config.has_token and store is not None:
            config = config.with_token(store.get_token())
        return cls(config=config)

    def with_token(self, token: str | None) -> "ComparatorClient":
        """
        Return a new client using ``token``.

        Requests already running on this client keep the token they started with.
        The new client shares this client's connection pool, which stays owned
        by this client: closing the new one leaves the pool open.
        """
        return type(self)(
            config=self.config.with_token(token), http_client=self._transport.http_client
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def list_versions(self, owner: str, repo: str) -> list[str]:
        """List up to 100 tag names of a repository."""
        return self.tags.list_versions(owner, repo)

    def compare_versions(
        self, owner: str, repo: str, base: str, head: str, recompute_changes: bool = False
    ) -> ComparisonResult:
        """Compare two refs, swapping them once if the first direction is empty."""
        return self.compare.compare_versions(
            owner, repo, base, head, recompute_changes=recompute_changes
        )

    def fetch_file_diff(self, owner: str, repo: str, base: str, head: str, filename: str) -> str:
        """Return the patch text of one file in the ``base...head`` comparison."""
        return self.compare.fetch_file_diff(owner, repo, base, head, filename)

    def fetch_parsed_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> FileDiff:
        return self.compare.fetch_parsed_diff(owner, repo, base, head, filename)

    def validate_token(self) -> bool:
        """Return True if the configured token is accepted; False if absent or rejected."""
        return self.users.validate_token()

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "ComparatorClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
