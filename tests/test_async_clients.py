"""
Tests for the async client, including concurrent directional compares.
"""

import asyncio

import pytest

from ghcompare.async_client import AsyncComparatorClient
from ghcompare.exceptions import FileNotInComparisonError, NotFoundError, UnknownAPIError
from ghcompare.testing import EMPTY_COMPARE_JSON, FakeGitHubAPI
from ghcompare.types.compare import CompareState


def make_client(api: FakeGitHubAPI, token: str | None = None) -> AsyncComparatorClient:
    return AsyncComparatorClient(token=token, http_client=api.async_client())


def test_list_versions(fake_api: FakeGitHubAPI) -> None:
    fake_api.add_tags("octo", "repo", ["v1.1.0", "v1.0.0"])

    async def run() -> list[str]:
        async with make_client(fake_api) as client:
            return await client.list_versions("octo", "repo")

    assert asyncio.run(run()) == ["v1.1.0", "v1.0.0"]


def test_sequential_compare_swaps(fake_api: FakeGitHubAPI, sample_compare_json: dict) -> None:
    fake_api.add_compare("octo", "repo", "v2", "v1", EMPTY_COMPARE_JSON)
    fake_api.add_compare("octo", "repo", "v1", "v2", sample_compare_json)

    result = asyncio.run(make_client(fake_api).compare_versions("octo", "repo", "v2", "v1"))

    assert (result.from_version, result.to_version) == ("v1", "v2")
    assert result.swapped is True
    assert len(fake_api.requests) == 2


@pytest.mark.parametrize(
    "forward_empty,reverse_empty",
    [(False, False), (False, True), (True, False), (True, True)],
)
def test_concurrent_compare_matches_sequential(
    sample_compare_json: dict, forward_empty: bool, reverse_empty: bool
) -> None:
    """Both directions at once yield the same result as the sequential path."""

    def build_api() -> FakeGitHubAPI:
        api = FakeGitHubAPI()
        api.add_compare(
            "octo", "repo", "v1", "v2", EMPTY_COMPARE_JSON if forward_empty else sample_compare_json
        )
        api.add_compare(
            "octo", "repo", "v2", "v1", EMPTY_COMPARE_JSON if reverse_empty else sample_compare_json
        )
        return api

    concurrent_api = build_api()
    sequential = asyncio.run(
        make_client(build_api()).compare_versions("octo", "repo", "v1", "v2")
    )
    concurrent = asyncio.run(
        make_client(concurrent_api).compare_versions("octo", "repo", "v1", "v2", concurrent=True)
    )

    assert concurrent == sequential
    assert len(concurrent_api.requests) == 2


def test_concurrent_compare_ignores_reverse_error_when_forward_wins(
    fake_api: FakeGitHubAPI, sample_compare_json: dict
) -> None:
    fake_api.add_compare("octo", "repo", "v1", "v2", sample_compare_json)

    result = asyncio.run(
        make_client(fake_api).compare_versions("octo", "repo", "v1", "v2", concurrent=True)
    )

    assert result.state is CompareState.DONE
    assert result.swapped is False


def test_concurrent_compare_raises_forward_error(fake_api: FakeGitHubAPI) -> None:
    fake_api.add_compare("octo", "repo", "v2", "v1", EMPTY_COMPARE_JSON)

    with pytest.raises(NotFoundError):
        asyncio.run(
            make_client(fake_api).compare_versions("octo", "repo", "v1", "v2", concurrent=True)
        )


def test_fetch_file_diff_missing_file(fake_api: FakeGitHubAPI, sample_compare_json: dict) -> None:
    fake_api.add_compare("octo", "repo", "v1", "v2", sample_compare_json)

    with pytest.raises(FileNotInComparisonError):
        asyncio.run(make_client(fake_api).fetch_file_diff("octo", "repo", "v1", "v2", "nope.txt"))


def test_fetch_parsed_diff(fake_api: FakeGitHubAPI, sample_compare_json: dict) -> None:
    fake_api.add_compare("octo", "repo", "v1", "v2", sample_compare_json)

    diff = asyncio.run(
        make_client(fake_api).fetch_parsed_diff("octo", "repo", "v1", "v2", "src/app.py")
    )

    assert diff.additions == 2
    assert diff.deletions == 1


def test_validate_token_without_token(fake_api: FakeGitHubAPI) -> None:
    assert asyncio.run(make_client(fake_api).validate_token()) is False
    assert fake_api.requests == []


def test_validate_token_rejected(fake_api: FakeGitHubAPI) -> None:
    fake_api.add_error("/user", 401, "Bad credentials")

    assert asyncio.run(make_client(fake_api, token="bad").validate_token()) is False


def test_redirect_without_location_is_an_error(fake_api: FakeGitHubAPI) -> None:
    fake_api.add_error("/repos/old/name/compare/v1...v2", 301, "Moved Permanently")

    with pytest.raises(UnknownAPIError, match="301"):
        asyncio.run(make_client(fake_api).compare_versions("old", "name", "v1", "v2"))

    assert len(fake_api.requests) == 1


def test_redirect_is_followed(fake_api: FakeGitHubAPI) -> None:
    fake_api.add(
        "/repos/old/name/tags",
        {"message": "Moved Permanently"},
        status_code=301,
        headers={"Location": "https://api.github.com/repos/new/name/tags"},
    )
    fake_api.add_tags("new", "name", ["v1.0.0"])

    assert asyncio.run(make_client(fake_api).list_versions("old", "name")) == ["v1.0.0"]
