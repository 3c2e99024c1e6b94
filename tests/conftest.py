"""Shared test configuration and fixtures for issue-handler tests."""

import pytest

from issue_handler import IssueList, reset_color_map
from tests.helper import OFFSET, AcornSyntaxError


@pytest.fixture
def issues():
    return IssueList()


@pytest.fixture
def parse_error():
    return AcornSyntaxError("Identifier directly after number (2:4)", OFFSET, 2, 4)


@pytest.fixture(autouse=True)
def clean_color_map():
    """Keep the process-wide color policy from leaking between tests."""
    reset_color_map()
    yield
    reset_color_map()
