"""Async tags resource client."""

from typing import TYPE_CHECKING

from ghcompare.clients._common import TAGS_PER_PAGE, repo_path
from ghcompare.types.payloads import Tag, parse_tags

if TYPE_CHECKING:
    from ghcompare.async_transport import AsyncHTTPTransport


class AsyncTagsClient:
    """Async client for listing the versions of a repository."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def list_tags(self, owner: str, repo: str) -> list[Tag]:
        """List the first page (up to 100) of repository tags."""
        data = await self.transport.get(
            f"{repo_path(owner, repo)}/tags",
            params={"per_page": TAGS_PER_PAGE},
        )
        return parse_tags(data)

    async def list_versions(self, owner: str, repo: str) -> list[str]:
        """List tag names in the order GitHub returns them."""
        return [tag.name for tag in await self.list_tags(owner, repo)]
