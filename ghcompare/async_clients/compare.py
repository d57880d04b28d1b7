"""Async compare resource client."""

import asyncio
from typing import TYPE_CHECKING

from ghcompare.clients._common import compare_path, select_patch
from ghcompare.direction import CompareOutcome, DirectionalCompare, resolve_concurrent
from ghcompare.logging import get_logger
from ghcompare.normalize import normalize_comparison
from ghcompare.patch import summarize_patch
from ghcompare.types.compare import CompareState, ComparisonResult
from ghcompare.types.diff import FileDiff
from ghcompare.types.payloads import ComparePayload, parse_compare_payload

if TYPE_CHECKING:
    from ghcompare.async_transport import AsyncHTTPTransport

logger = get_logger()


class AsyncCompareClient:
    """Async client for comparing two refs of a repository."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async compare client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def compare_once(
        self, owner: str, repo: str, base: str, head: str
    ) -> ComparePayload:
        """Issue a single compare request in the given direction."""
        data = await self.transport.get(compare_path(owner, repo, base, head))
        return parse_compare_payload(data)

    async def compare(
        self,
        owner: str,
        repo: str,
        base: str,
        head: str,
        concurrent: bool = False,
    ) -> CompareOutcome:
        """
        Compare two refs, retrying once with the refs swapped if the first
        result is empty.

        Args:
            concurrent: Request both directions at once instead of one after
                the other. Always costs two requests; the outcome is the same.
        """
        if concurrent:
            return await self._compare_concurrent(owner, repo, base, head)

        machine = DirectionalCompare(base, head)
        while (refs := machine.next_request()) is not None:
            if machine.state is CompareState.SWAPPED:
                logger.info("No changes from %s to %s, trying reversed order", base, head)
            machine.record(await self.compare_once(owner, repo, *refs))
        return machine.outcome()

    async def _compare_concurrent(
        self, owner: str, repo: str, base: str, head: str
    ) -> CompareOutcome:
        forward, reverse = await asyncio.gather(
            self.compare_once(owner, repo, base, head),
            self.compare_once(owner, repo, head, base),
            return_exceptions=True,
        )
        # Surface errors in the order the sequential path would hit them
        if isinstance(forward, BaseException):
            raise forward
        if not forward.is_empty:
            return resolve_concurrent(base, head, forward, None)
        if isinstance(reverse, BaseException):
            raise reverse
        return resolve_concurrent(base, head, forward, reverse)

    async def compare_versions(
        self,
        owner: str,
        repo: str,
        base: str,
        head: str,
        concurrent: bool = False,
        recompute_changes: bool = False,
    ) -> ComparisonResult:
        """Compare two refs and normalize the result."""
        outcome = await self.compare(owner, repo, base, head, concurrent=concurrent)
        return normalize_comparison(
            outcome.payload,
            owner=owner,
            repo=repo,
            from_version=outcome.from_version,
            to_version=outcome.to_version,
            swapped=outcome.swapped,
            state=outcome.state,
            recompute_changes=recompute_changes,
        )

    async def fetch_file_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> str:
        """
        Return one file's patch from the ``base...head`` comparison.

        Raises:
            FileNotInComparisonError: If no changed file has exactly this path
        """
        payload = await self.compare_once(owner, repo, base, head)
        return select_patch(payload, filename)

    async def fetch_parsed_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> FileDiff:
        """Fetch one file's patch and parse it into diff lines."""
        patch = await self.fetch_file_diff(owner, repo, base, head, filename)
        return summarize_patch(filename, patch)
