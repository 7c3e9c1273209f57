"""
Integration Test Configuration

Live tests need:
- GITHUB_TOKEN: token with "Projects" read permission
- GITHUB_TEST_ORG: organization owning at least one project
"""

import os

import pytest

TEST_ORG = os.environ.get("GITHUB_TEST_ORG")
TEST_PROJECT_NUMBER = int(os.environ.get("GITHUB_TEST_PROJECT_NUMBER", "1"))


skip_without_credentials = pytest.mark.skipif(
    not (os.environ.get("GITHUB_TOKEN") and TEST_ORG),
    reason="GitHub credentials not configured (need GITHUB_TOKEN + GITHUB_TEST_ORG)",
)
