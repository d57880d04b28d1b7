"""Shared fixtures for the ghcompare test suite."""

from ghcompare.testing.conftest import (  # noqa: F401
    fake_api,
    mock_client,
    sample_compare_json,
    sample_comparison,
    sample_patch,
)
