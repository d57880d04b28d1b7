"""
Request orchestration for interactive front ends.

``ComparisonSession`` exposes the comparison operations as async calls that
never raise for API errors. Each call returns a ``Success`` or ``Failure``
and also updates a shared ``ViewState`` (loading flag, error message, last
comparison) that a UI can render.

Every call is stamped with a generation number. Only the most recently
started call may write to ``ViewState``; a slower, older response is still
returned to its caller but cannot overwrite newer state.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ghcompare.async_client import AsyncComparatorClient
from ghcompare.exceptions import GhCompareError
from ghcompare.logging import get_logger
from ghcompare.store import PreferenceStore
from ghcompare.types.compare import ComparisonResult
from ghcompare.types.diff import FileDiff

T = TypeVar("T")

logger = get_logger("session")


@dataclass
class Success(Generic[T]):
    value: T
    generation: int

    @property
    def ok(self) -> bool:
        return True


@dataclass
class Failure:
    error: GhCompareError
    generation: int

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


OperationResult = Union[Success[T], Failure]


@dataclass
class ViewState:
    """What a UI shows: a spinner, an error banner, and the last comparison."""

    loading: bool = False
    error: str | None = None
    comparison: ComparisonResult | None = None
    generation: int = 0


class ComparisonSession:
    """
    One user's comparison session.

    Example:
        ```python
        session = ComparisonSession(AsyncComparatorClient())
        result = await session.compare_versions("psf", "requests", "v2.31.0", "v2.32.0")
        if result.ok:
            render(result.value)
        else:
            show_error(session.state.error)
        ```
    """

    def __init__(
        self,
        client: AsyncComparatorClient,
        store: PreferenceStore | None = None,
        concurrent_compare: bool = False,
    ) -> None:
        self._client = client
        self._root_client = client
        self._store = store
        self._generation = 0
        self.concurrent_compare = concurrent_compare
        self.state = ViewState()

    @property
    def client(self) -> AsyncComparatorClient:
        return self._client

    def set_token(self, token: str | None) -> None:
        """
        Switch to a new access token for subsequent calls.

        Calls already in flight keep the previous token. The new client
        shares the connection pool of the client the session was created
        with, so switching tokens opens no new connections. When a store is
        attached the token is saved there (an empty token removes it).
        """
        self._client = self._root_client.with_token(token)
        if self._store is not None:
            self._store.set_token(token)

    async def _run(self, operation: str, call: Callable[[], Awaitable[T]]) -> OperationResult[T]:
        self._generation += 1
        generation = self._generation
        self.state.loading = True
        self.state.error = None
        self.state.generation = generation

        try:
            value = await call()
        except GhCompareError as e:
            logger.warning("%s failed: %s", operation, e)
            if generation == self._generation:
                self.state.error = e.message
            else:
                logger.debug("Discarding stale %s error (generation %d)", operation, generation)
            return Failure(error=e, generation=generation)
        finally:
            if generation == self._generation:
                self.state.loading = False

        if generation == self._generation and isinstance(value, ComparisonResult):
            self.state.comparison = value
        return Success(value=value, generation=generation)

    async def list_versions(self, owner: str, repo: str) -> OperationResult[list[str]]:
        client = self._client
        return await self._run("list_versions", lambda: client.list_versions(owner, repo))

    async def compare_versions(
        self, owner: str, repo: str, base: str, head: str
    ) -> OperationResult[ComparisonResult]:
        """Compare two refs; a failure leaves the previous comparison in ``state``."""
        client = self._client
        return await self._run(
            "compare_versions",
            lambda: client.compare_versions(
                owner, repo, base, head, concurrent=self.concurrent_compare
            ),
        )

    async def get_file_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> OperationResult[str]:
        client = self._client
        return await self._run(
            "get_file_diff",
            lambda: client.fetch_file_diff(owner, repo, base, head, filename),
        )

    async def get_parsed_diff(
        self, owner: str, repo: str, base: str, head: str, filename: str
    ) -> OperationResult[FileDiff]:
        client = self._client
        return await self._run(
            "get_parsed_diff",
            lambda: client.fetch_parsed_diff(owner, repo, base, head, filename),
        )

    async def validate_token(self) -> bool:
        """
        Check the current token without touching ``state``.

        API and connection errors are logged and reported as False.
        """
        try:
            return await self._client.validate_token()
        except GhCompareError as e:
            logger.warning("Token validation failed: %s", e)
            return False

    async def aclose(self) -> None:
        """Close the connection pool shared by every client this session has used."""
        await self._root_client.close()
