"""
Pytest fixtures for ghcompare testing.

Provides raw GitHub payload builders, sample results, and mock clients.
"""

from typing import Any, Generator

import pytest

from ghcompare.normalize import normalize_comparison
from ghcompare.testing.fake_api import FakeGitHubAPI
from ghcompare.testing.mock import MockComparatorClient
from ghcompare.types.compare import ComparisonResult
from ghcompare.types.payloads import parse_compare_payload

SAMPLE_PATCH = (
    "@@ -1,4 +1,5 @@\n"
    " import os\n"
    "-import sys\n"
    "+import json\n"
    "+import logging\n"
    " \n"
    " def main():"
)


# ============================================================================
# Raw payload builders
# ============================================================================


def make_commit_json(
    sha: str = "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678",
    message: str = "Fix parser edge case",
    login: str | None = "octocat",
    name: str = "The Octocat",
    date: str = "2024-01-15T10:30:00Z",
) -> dict[str, Any]:
    """Build a commit entry as returned by the compare endpoint."""
    return {
        "sha": sha,
        "commit": {
            "message": message,
            "author": {"name": name, "email": "octocat@example.com", "date": date},
        },
        "author": {"login": login} if login is not None else None,
    }


def make_file_json(
    filename: str = "src/app.py",
    status: str = "modified",
    additions: int = 2,
    deletions: int = 1,
    changes: int | None = None,
    patch: str | None = SAMPLE_PATCH,
) -> dict[str, Any]:
    """Build a changed-file entry as returned by the compare endpoint."""
    data: dict[str, Any] = {
        "filename": filename,
        "status": status,
        "additions": additions,
        "deletions": deletions,
        "changes": additions + deletions if changes is None else changes,
    }
    if patch is not None:
        data["patch"] = patch
    return data


def make_compare_json(
    commits: list[dict[str, Any]] | None = None,
    files: list[dict[str, Any]] | None = None,
    status: str = "ahead",
) -> dict[str, Any]:
    """Build a compare endpoint response."""
    return {
        "status": status,
        "base_commit": {"sha": "0" * 40},
        "merge_base_commit": {"sha": "0" * 40},
        "commits": commits if commits is not None else [],
        "files": files if files is not None else [],
    }


EMPTY_COMPARE_JSON = make_compare_json(status="identical")


def create_mock_comparison(
    owner: str = "octo",
    repo: str = "repo",
    from_version: str = "v1.0.0",
    to_version: str = "v1.1.0",
    **kwargs: Any,
) -> ComparisonResult:
    """
    Create a ComparisonResult from sample payload data.

    Args:
        owner: Repository owner
        repo: Repository name
        from_version: Reported base ref
        to_version: Reported head ref
        **kwargs: Passed to make_compare_json (commits, files, status)

    Returns:
        ComparisonResult object
    """
    kwargs.setdefault("commits", [make_commit_json()])
    kwargs.setdefault("files", [make_file_json()])
    payload = parse_compare_payload(make_compare_json(**kwargs))
    return normalize_comparison(payload, owner, repo, from_version, to_version)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockComparatorClient, None, None]:
    """Provide a MockComparatorClient for testing."""
    client = MockComparatorClient()
    yield client
    client.reset()


@pytest.fixture
def fake_api() -> FakeGitHubAPI:
    """Provide an empty FakeGitHubAPI route table."""
    return FakeGitHubAPI()


@pytest.fixture
def sample_patch() -> str:
    return SAMPLE_PATCH


@pytest.fixture
def sample_compare_json() -> dict[str, Any]:
    """Provide a compare response with two commits and two files."""
    return make_compare_json(
        commits=[
            make_commit_json(),
            make_commit_json(
                sha="f" * 40, message="Add docs", login=None, name="Jane Doe"
            ),
        ],
        files=[
            make_file_json(),
            make_file_json(filename="README.md", additions=3, deletions=0, patch="+a\n+b\n+c"),
        ],
    )


@pytest.fixture
def sample_comparison() -> ComparisonResult:
    return create_mock_comparison()
