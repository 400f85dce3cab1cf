"""Pytest configuration and fixtures for all tests.

Keeps server settings from the surrounding environment out of the tests.
"""

import os

import pytest

SERVER_ENV_VARS = [
    "SERVER_HOST",
    "SERVER_PORT",
    "LOG_LEVEL",
    "APP_ENVIRONMENT",
]


@pytest.fixture(autouse=True)
def isolate_from_env():
    """Clear server env vars before each test and restore them afterwards."""
    original_values = {}
    for var in SERVER_ENV_VARS:
        if var in os.environ:
            original_values[var] = os.environ.pop(var)

    yield

    for var in SERVER_ENV_VARS:
        os.environ.pop(var, None)
    os.environ.update(original_values)
