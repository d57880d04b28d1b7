"""Record shapes for raw GitHub REST payloads.

Payloads are parsed once at the API boundary; a response missing a required
field raises ``UnknownAPIError`` instead of failing later at a use site.
"""

from dataclasses import dataclass, field
from typing import Any

from ghcompare.exceptions import UnknownAPIError


@dataclass
class Tag:
    """A repository tag."""

    name: str
    sha: str | None = None


@dataclass
class CommitPayload:
    """A commit entry from the compare endpoint."""

    sha: str
    message: str
    author_name: str | None
    author_date: str | None
    author_login: str | None  # None when the author has no linked account


@dataclass
class FileChangePayload:
    """A changed file entry from the compare endpoint."""

    filename: str
    status: str
    additions: int
    deletions: int
    changes: int
    patch: str | None = None
    previous_filename: str | None = None


@dataclass
class ComparePayload:
    """Response body of ``GET /repos/{owner}/{repo}/compare/{base}...{head}``."""

    commits: list[CommitPayload] = field(default_factory=list)
    files: list[FileChangePayload] = field(default_factory=list)
    status: str | None = None  # "ahead", "behind", "identical", "diverged"
    base_commit_sha: str | None = None
    merge_base_commit_sha: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the comparison has neither commits nor changed files."""
        return not self.commits and not self.files


@dataclass
class UserPayload:
    """The authenticated user returned by ``GET /user``."""

    login: str
    name: str | None = None


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    if not isinstance(data, dict) or key not in data or data[key] is None:
        raise UnknownAPIError(f"Malformed {context} payload: missing '{key}'")
    return data[key]


def _count(data: dict[str, Any], key: str, context: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UnknownAPIError(
            f"Malformed {context} payload: '{key}' is not a number"
        ) from None


def _nested_sha(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if isinstance(value, dict):
        return value.get("sha")
    return None


def parse_tag(data: dict[str, Any]) -> Tag:
    return Tag(name=_require(data, "name", "tag"), sha=_nested_sha(data, "commit"))


def parse_tags(data: Any) -> list[Tag]:
    if not isinstance(data, list):
        raise UnknownAPIError("Malformed tag list payload: expected a JSON array")
    return [parse_tag(item) for item in data]


def parse_commit(data: dict[str, Any]) -> CommitPayload:
    """Parse a commit entry, tolerating a null ``author`` account."""
    sha = _require(data, "sha", "commit")
    commit = _require(data, "commit", "commit")
    author = commit.get("author") or {}
    account = data.get("author") or {}
    return CommitPayload(
        sha=sha,
        message=commit.get("message") or "",
        author_name=author.get("name"),
        author_date=author.get("date"),
        author_login=account.get("login"),
    )


def parse_file_change(data: dict[str, Any]) -> FileChangePayload:
    return FileChangePayload(
        filename=_require(data, "filename", "file"),
        status=data.get("status") or "modified",
        additions=_count(data, "additions", "file"),
        deletions=_count(data, "deletions", "file"),
        changes=_count(data, "changes", "file"),
        patch=data.get("patch"),
        previous_filename=data.get("previous_filename"),
    )


def parse_compare_payload(data: Any) -> ComparePayload:
    """Parse a compare response into a ``ComparePayload``.

    ``files`` is absent from GitHub's response when the comparison is too
    large; that is treated as an empty list. ``commits`` is always present,
    so a body without it (an error or redirect message) is rejected rather
    than read as an empty comparison.
    """
    if not isinstance(data, dict):
        raise UnknownAPIError("Malformed comparison payload: expected a JSON object")
    return ComparePayload(
        commits=[parse_commit(c) for c in _require(data, "commits", "comparison")],
        files=[parse_file_change(f) for f in data.get("files") or []],
        status=data.get("status"),
        base_commit_sha=_nested_sha(data, "base_commit"),
        merge_base_commit_sha=_nested_sha(data, "merge_base_commit"),
    )


def parse_user(data: Any) -> UserPayload:
    return UserPayload(login=_require(data, "login", "user"), name=data.get("name"))
