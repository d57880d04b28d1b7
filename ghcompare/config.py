"""Client configuration.

Environment variables:
    GITHUB_TOKEN / GH_TOKEN: personal access token (optional)
    GHCOMPARE_BASE_URL: API root (default: https://api.github.com)
    GHCOMPARE_TIMEOUT: request timeout in seconds (default: 30)
    GHCOMPARE_USER_AGENT: User-Agent header value
"""

import os
from dataclasses import dataclass, replace

from ghcompare.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "GitHub-Version-Comparator"
ACCEPT_HEADER = "application/vnd.github.v3+json"


def _get(name: str, default: str = "") -> str:
    """Get an environment variable value."""
    return os.environ.get(name, "").strip() or default


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request a client makes."""

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid base URL: {self.base_url!r}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        if not self.user_agent:
            raise ConfigurationError("User-Agent must not be empty")

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def with_token(self, token: str | None) -> "ClientConfig":
        """Return a copy using ``token`` (empty string clears it)."""
        return replace(self, token=token or None)

    def headers(self) -> dict[str, str]:
        """Request headers, including Authorization when a token is set."""
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    @classmethod
    def from_env(cls, token: str | None = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Args:
            token: Explicit token; overrides GITHUB_TOKEN/GH_TOKEN when given

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        timeout_str = _get("GHCOMPARE_TIMEOUT")
        try:
            timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(
                f"Invalid GHCOMPARE_TIMEOUT: {timeout_str}. Must be a number of seconds"
            ) from None

        return cls(
            token=token or _get("GITHUB_TOKEN") or _get("GH_TOKEN") or None,
            base_url=_get("GHCOMPARE_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            user_agent=_get("GHCOMPARE_USER_AGENT", DEFAULT_USER_AGENT),
        )
