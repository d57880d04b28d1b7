"""ghcompare - compare two versions of a GitHub repository."""

from ghcompare.async_client import AsyncComparatorClient
from ghcompare.client import ComparatorClient
from ghcompare.config import ClientConfig
from ghcompare.direction import CompareOutcome, DirectionalCompare
from ghcompare.exceptions import (
    AccessDeniedError,
    AuthFailedError,
    ConfigurationError,
    ErrorCode,
    FileNotInComparisonError,
    GhCompareError,
    InvalidRequestError,
    NotFoundError,
    RateLimitedError,
    UnknownAPIError,
)
from ghcompare.logging import configure_logging, get_logger
from ghcompare.normalize import normalize_comparison
from ghcompare.orchestrator import ComparisonSession, Failure, Success, ViewState
from ghcompare.patch import parse_patch, summarize_patch
from ghcompare.store import PreferenceStore
from ghcompare.types import (
    Commit,
    CompareState,
    ComparisonResult,
    ComparisonStats,
    DiffLine,
    FileChange,
    FileDiff,
    RepositoryRef,
    parse_repository_url,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "ComparatorClient",
    "AsyncComparatorClient",
    "ClientConfig",
    # Session
    "ComparisonSession",
    "ViewState",
    "Success",
    "Failure",
    "PreferenceStore",
    # Comparison pipeline
    "DirectionalCompare",
    "CompareOutcome",
    "normalize_comparison",
    "parse_patch",
    "summarize_patch",
    # Types
    "Commit",
    "FileChange",
    "ComparisonStats",
    "ComparisonResult",
    "CompareState",
    "DiffLine",
    "FileDiff",
    "RepositoryRef",
    "parse_repository_url",
    # Exceptions
    "GhCompareError",
    "ErrorCode",
    "RateLimitedError",
    "AuthFailedError",
    "AccessDeniedError",
    "NotFoundError",
    "InvalidRequestError",
    "FileNotInComparisonError",
    "UnknownAPIError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
]
