"""ghcompare testing utilities.

Provides a mock client, an in-process fake of the GitHub API, and payload
builders for testing code that uses ghcompare.
"""

from ghcompare.testing.fake_api import FakeGitHubAPI, RecordedRequest
from ghcompare.testing.fixtures import (
    EMPTY_COMPARE_JSON,
    SAMPLE_PATCH,
    create_mock_comparison,
    make_commit_json,
    make_compare_json,
    make_file_json,
)
from ghcompare.testing.mock import MockCall, MockComparatorClient, MockResponse

__all__ = [
    # Mock client
    "MockComparatorClient",
    "MockCall",
    "MockResponse",
    # Fake API
    "FakeGitHubAPI",
    "RecordedRequest",
    # Payload builders
    "make_commit_json",
    "make_file_json",
    "make_compare_json",
    "create_mock_comparison",
    "EMPTY_COMPARE_JSON",
    "SAMPLE_PATCH",
]
