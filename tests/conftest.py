"""
Pytest configuration and fixtures for ff-loggy tests.
"""

import pytest
from ff_loggy.config import reset_config


def _drop_time(groups, key, value):
    """Remove the timestamp so rendered lines are stable."""
    if not groups and key == "time":
        return None
    return key, value


@pytest.fixture
def no_time():
    """A replace_attr hook dropping the top-level time attribute."""
    return _drop_time


@pytest.fixture(autouse=True)
def clean_config():
    """Start and finish every test with the default global configuration."""
    reset_config()
    yield
    reset_config()
