"""Test configuration and shared fixtures."""

import copy

import matplotlib
matplotlib.use('Agg')
import pytest

from tests.helpers import ACTIVITY_DATA, SUMMARY_DATA, make_backend


@pytest.fixture
def summary_data():
    """Raw ``data`` member of the summary response."""
    return copy.deepcopy(SUMMARY_DATA)


@pytest.fixture
def activity_data():
    """Raw ``data`` member of the recent activity response (7 entries)."""
    return copy.deepcopy(ACTIVITY_DATA)


@pytest.fixture
def backend():
    """MockTransport serving the default summary and 7 activity entries."""
    return make_backend()
