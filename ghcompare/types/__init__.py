"""ghcompare type definitions.

This module exports all data model types used by the library.
"""

from ghcompare.types.compare import (
    STATUS_ADDED,
    STATUS_MODIFIED,
    STATUS_REMOVED,
    STATUS_RENAMED,
    Commit,
    CompareState,
    ComparisonResult,
    ComparisonStats,
    FileChange,
)
from ghcompare.types.diff import LINE_ADDED, LINE_CONTEXT, LINE_REMOVED, DiffLine, FileDiff
from ghcompare.types.payloads import (
    CommitPayload,
    ComparePayload,
    FileChangePayload,
    Tag,
    UserPayload,
)
from ghcompare.types.repos import RepositoryRef, parse_repository_url

__all__ = [
    # Raw payloads
    "Tag",
    "CommitPayload",
    "FileChangePayload",
    "ComparePayload",
    "UserPayload",
    # Comparison results
    "Commit",
    "FileChange",
    "ComparisonStats",
    "ComparisonResult",
    "CompareState",
    "STATUS_ADDED",
    "STATUS_MODIFIED",
    "STATUS_REMOVED",
    "STATUS_RENAMED",
    # Diff lines
    "DiffLine",
    "FileDiff",
    "LINE_ADDED",
    "LINE_REMOVED",
    "LINE_CONTEXT",
    # Repositories
    "RepositoryRef",
    "parse_repository_url",
]
