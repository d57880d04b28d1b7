"""
Comparison normalization.

Reshapes a raw compare payload into a ``ComparisonResult``: short hashes,
resolved authors, and stats summed from the per-file counts.
"""

from ghcompare.logging import get_logger
from ghcompare.types.compare import (
    Commit,
    CompareState,
    ComparisonResult,
    ComparisonStats,
    FileChange,
)
from ghcompare.types.payloads import CommitPayload, ComparePayload, FileChangePayload

SHORT_HASH_LENGTH = 7
UNKNOWN_AUTHOR = "Unknown"

logger = get_logger("normalize")


def short_hash(sha: str) -> str:
    return sha[:SHORT_HASH_LENGTH]


def resolve_author(commit: CommitPayload) -> str:
    """Prefer the GitHub login, fall back to the git author name."""
    return commit.author_login or commit.author_name or UNKNOWN_AUTHOR


def normalize_commit(commit: CommitPayload) -> Commit:
    return Commit(
        hash=short_hash(commit.sha),
        message=commit.message,
        date=commit.author_date or "",
        author=resolve_author(commit),
    )


def normalize_file(change: FileChangePayload, recompute_changes: bool = False) -> FileChange:
    """
    Convert a file payload, checking ``changes`` against the line counts.

    A mismatch is logged as a data-quality warning. The upstream value is
    kept unless ``recompute_changes`` is set.
    """
    local_changes = change.additions + change.deletions
    if change.changes != local_changes:
        logger.warning(
            "changes mismatch for %s: upstream=%d additions+deletions=%d",
            change.filename,
            change.changes,
            local_changes,
        )

    return FileChange(
        file=change.filename,
        changes=local_changes if recompute_changes else change.changes,
        insertions=change.additions,
        deletions=change.deletions,
        status=change.status,
        patch=change.patch,
    )


def normalize_comparison(
    payload: ComparePayload,
    owner: str,
    repo: str,
    from_version: str,
    to_version: str,
    swapped: bool = False,
    state: CompareState = CompareState.DONE,
    recompute_changes: bool = False,
) -> ComparisonResult:
    """
    Build a ``ComparisonResult`` from a compare payload.

    ``from_version``/``to_version`` must already reflect the direction of the
    request that produced ``payload``.
    """
    commits = [normalize_commit(c) for c in payload.commits]
    files = [normalize_file(f, recompute_changes) for f in payload.files]

    stats = ComparisonStats(
        commits=len(commits),
        files_changed=len(files),
        insertions=sum(f.insertions for f in files),
        deletions=sum(f.deletions for f in files),
    )

    return ComparisonResult(
        from_version=from_version,
        to_version=to_version,
        owner=owner,
        repo=repo,
        commits=commits,
        files=files,
        stats=stats,
        swapped=swapped,
        state=state,
    )
