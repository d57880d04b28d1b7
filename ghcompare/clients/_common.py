"""Helpers shared by the sync and async resource clients."""

from urllib.parse import quote

from ghcompare.exceptions import FileNotInComparisonError, InvalidRequestError
from ghcompare.types.payloads import ComparePayload

TAGS_PER_PAGE = 100


def require(value: str, label: str) -> str:
    """Reject empty identifiers before any request is made."""
    if not value or not value.strip():
        raise InvalidRequestError(f"{label} must not be empty")
    return value.strip()


def repo_path(owner: str, repo: str) -> str:
    owner = require(owner, "Repository owner")
    repo = require(repo, "Repository name")
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def compare_path(owner: str, repo: str, base: str, head: str) -> str:
    # Branch names may contain "/", which GitHub accepts unescaped here
    base = quote(require(base, "Base ref"), safe="/")
    head = quote(require(head, "Head ref"), safe="/")
    return f"{repo_path(owner, repo)}/compare/{base}...{head}"


def select_patch(payload: ComparePayload, filename: str) -> str:
    """
    Return the patch of the file whose path equals ``filename``.

    Raises:
        FileNotInComparisonError: If no file matches exactly
    """
    for change in payload.files:
        if change.filename == filename:
            return change.patch or ""
    raise FileNotInComparisonError(filename)
