"""
Tests for repository reference parsing.
"""

import pytest

from ghcompare.types.repos import RepositoryRef, parse_repository_url


@pytest.mark.parametrize(
    "value",
    [
        "https://github.com/psf/requests",
        "https://github.com/psf/requests/",
        "https://github.com/psf/requests.git",
        "git@github.com:psf/requests.git",
        "git@github.com:psf/requests",
        "github.com/psf/requests",
        "psf/requests",
        "  psf/requests  ",
    ],
)
def test_known_forms(value: str) -> None:
    assert parse_repository_url(value) == RepositoryRef(owner="psf", name="requests")


def test_git_suffix_is_stripped_only_at_the_end() -> None:
    ref = parse_repository_url("octo/my.github.io")

    assert ref == RepositoryRef(owner="octo", name="my.github.io")


@pytest.mark.parametrize(
    "value",
    [
        "",
        "   ",
        "requests",
        "https://gitlab.com/psf/requests",
        "https://github.com/psf",
        "psf/requests/extra",
    ],
)
def test_unrecognized_input(value: str) -> None:
    assert parse_repository_url(value) is None


def test_ref_properties() -> None:
    ref = RepositoryRef(owner="psf", name="requests")

    assert ref.full_name == "psf/requests"
    assert ref.url == "https://github.com/psf/requests"
