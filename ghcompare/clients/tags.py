"""Tags resource client."""

from typing import TYPE_CHECKING

from ghcompare.clients._common import TAGS_PER_PAGE, repo_path
from ghcompare.logging import get_logger
from ghcompare.types.payloads import Tag, parse_tags

if TYPE_CHECKING:
    from ghcompare.transport import HTTPTransport

logger = get_logger()


class TagsClient:
    """Client for listing the versions of a repository."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the tags client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_tags(self, owner: str, repo: str) -> list[Tag]:
        """
        List the first page (up to 100) of repository tags.

        Raises:
            NotFoundError: If the repository does not exist or is inaccessible
            RateLimitedError: If the request quota is exhausted
            AuthFailedError: If the configured token is rejected
        """
        data = self.transport.get(
            f"{repo_path(owner, repo)}/tags",
            params={"per_page": TAGS_PER_PAGE},
        )
        return parse_tags(data)

    def list_versions(self, owner: str, repo: str) -> list[str]:
        """
        List tag names in the order GitHub returns them.

        Only the first page is fetched; repositories with more than 100 tags
        are truncated.
        """
        versions = [tag.name for tag in self.list_tags(owner, repo)]
        logger.debug("Found %d versions for %s/%s", len(versions), owner, repo)
        return versions
