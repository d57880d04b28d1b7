"""Compare resource client."""

from typing import TYPE_CHECKING

from ghcompare.clients._common import compare_path, select_patch
from ghcompare.direction import CompareOutcome, DirectionalCompare
from ghcompare.logging import get_logger
from ghcompare.normalize import normalize_comparison
from ghcompare.patch import summarize_patch
from ghcompare.types.compare import CompareState, ComparisonResult
from ghcompare.types.diff import FileDiff
from ghcompare.types.payloads import ComparePayload, parse_compare_payload

if TYPE_CHECKING:
    from ghcompare.transport import HTTPTransport

logger = get_logger()


class CompareClient:
    """Client for comparing two refs of a repository."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the compare client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def compare_once(self, owner: str, repo: str, base: str, head: str) -> ComparePayload:
        """
        Issue a single compare request in the given direction.

        Raises:
            InvalidRequestError: If an identifier is empty
            NotFoundError: If the repository or a ref does not exist
        """
        data = self.transport.get(compare_path(owner, repo, base, head))
        return parse_compare_payload(data)

    def compare(self, owner: str, repo: str, base: str, head: str) -> CompareOutcome:
        """
        Compare two refs, retrying once with the refs swapped if the first
        result is empty.

        Returns:
            CompareOutcome carrying the winning payload and its direction
        """
        machine = DirectionalCompare(base, head)
        while (refs := machine.next_request()) is not None:
            if machine.state is CompareState.SWAPPED:
                logger.info("No changes from %s to %s, trying reversed order", base, head)
            machine.record(self.compare_once(owner, repo, *refs))

        outcome = machine.outcome()
        if outcome.state is CompareState.EXHAUSTED:
            logger.info("No differences between %s and %s in either direction", base, head)
        return outcome

    def compare_versions(
        self,
        owner: str,
        repo: str,
        base: str,
        head: str,
        recompute_changes: bool = False,
    ) -> ComparisonResult:
        """
        Compare two refs and normalize the result.

        ``from_version``/``to_version`` on the result follow whichever request
        produced the data.
        """
        outcome = self.compare(owner, repo, base, head)
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

    def fetch_file_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> str:
        """
        Return one file's patch from the ``base...head`` comparison.

        The comparison is fetched in the given direction only. Binary or
        oversized files have no patch and yield an empty string.

        Raises:
            FileNotInComparisonError: If no changed file has exactly this path
        """
        payload = self.compare_once(owner, repo, base, head)
        return select_patch(payload, filename)

    def fetch_parsed_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> FileDiff:
        """Fetch one file's patch and parse it into diff lines."""
        return summarize_patch(filename, self.fetch_file_diff(owner, repo, base, head, filename))
