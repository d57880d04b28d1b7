"""
Pytest plugin for ghcompare testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghcompare.testing.conftest"]
"""

from ghcompare.testing.fixtures import (
    fake_api,
    mock_client,
    sample_compare_json,
    sample_comparison,
    sample_patch,
)

__all__ = [
    "fake_api",
    "mock_client",
    "sample_compare_json",
    "sample_comparison",
    "sample_patch",
]
